"""Booking calculation models: stay duration, pricing and display summary.

Amounts are plain numbers in the property's currency (LKR by default),
not minor units. Use utils.formatting.to_minor_units when handing an
amount to a payment provider.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import RateType


class Duration(BaseModel):
    """Length of a stay, decomposed for display.

    months/weeks/days are display helpers: days is total_days % 7, so it
    does not reconstruct total_days together with weeks.
    """

    model_config = ConfigDict(strict=True)

    total_days: int = Field(..., ge=0, description="Nights between check-in and check-out")
    months: int = Field(default=0, ge=0, description="Whole 30-day months")
    weeks: int = Field(default=0, ge=0, description="Whole weeks in the days past full months")
    days: int = Field(default=0, ge=0, description="total_days % 7")


class PricingBreakdown(BaseModel):
    """How the rent subtotal was built up."""

    model_config = ConfigDict(strict=True)

    full_months: int = Field(default=0, ge=0, description="Months charged at full monthly rent")
    partial_month_charge: float = Field(
        default=0.0, ge=0, description="Charge for the part of the stay outside full months"
    )
    total_charge: float = Field(default=0.0, ge=0, description="Rent subtotal")
    description: str = Field(..., description="Human-readable billing description")
    rate_type: RateType | None = Field(
        default=None,
        description="Tier applied; None only for an invalid date range",
    )


class PricingResult(BaseModel):
    """Full price of a booking request.

    total = subtotal + service_fee and
    remaining_amount = total - advance_amount always hold.
    """

    model_config = ConfigDict(strict=True)

    duration: Duration
    monthly_rent: float = Field(..., ge=0, description="Monthly rent used for the calculation")
    service_fee: float = Field(..., ge=0, description="Platform service fee")
    subtotal: float = Field(..., ge=0, description="Rent charge before the service fee")
    total: float = Field(..., description="subtotal + service_fee")
    advance_amount: float = Field(..., description="Upfront payment, taken from rent only")
    remaining_amount: float = Field(..., description="total - advance_amount")
    advance_percentage: float = Field(..., description="Percent of subtotal due upfront")
    breakdown: PricingBreakdown


class DateValidation(BaseModel):
    """Outcome of checking a check-in/check-out pair before booking."""

    model_config = ConfigDict(strict=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class PricingTier(BaseModel):
    """One row of the rate card shown on a property page."""

    model_config = ConfigDict(strict=True)

    rate: float = Field(..., ge=0)
    description: str
    percentage: str = Field(..., examples=["25%"])


class BookingSummary(BaseModel):
    """Display-ready projection of a PricingResult."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "stay_duration": "10 days",
                    "billing_description": "10 days (Half rate)",
                    "rent_amount": "LKR 15,000",
                    "service_fee": "LKR 300",
                    "total_amount": "LKR 15,300",
                    "advance_amount": "LKR 4,500",
                    "remaining_amount": "LKR 10,800",
                    "rate_type": "half",
                    "is_discounted": True,
                }
            ]
        },
    )

    stay_duration: str
    billing_description: str
    rent_amount: str
    service_fee: str
    total_amount: str
    advance_amount: str
    remaining_amount: str
    rate_type: RateType | None = None
    is_discounted: bool = False
