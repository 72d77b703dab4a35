"""Tiered rental pricing.

Short stays are charged a fraction of the monthly rent:

- 1-7 days: quarter of the monthly rent
- 8-15 days: half
- 16-30 days: full month
- Over 30 days: full months, plus the leftover days at a weekly rate of
  rent / 4 and a daily rate of weekly rate / 7

The service fee is added on top of the rent subtotal. The advance payment
is a percentage of the rent subtotal only.
"""

from decimal import Decimal

from staywise.config import get_settings
from staywise.models import (
    BookingError,
    ErrorCode,
    PricingBreakdown,
    PricingResult,
    PricingTier,
    RateType,
)
from staywise.services.duration import DAYS_PER_MONTH, DAYS_PER_WEEK, compute_duration
from staywise.utils.dates import DateLike
from staywise.utils.formatting import pluralize
from staywise.utils.logging import get_logger, log_calculation

logger = get_logger(__name__)

INVALID_RANGE_DESCRIPTION = "Invalid date range"

# (max days inclusive, share of monthly rent, rate type, label)
RATE_TIERS: tuple[tuple[int, float, RateType, str], ...] = (
    (7, 0.25, RateType.QUARTER, "Quarter rate"),
    (15, 0.5, RateType.HALF, "Half rate"),
    (30, 1.0, RateType.FULL, "Full month rate"),
)

WEEKS_PER_MONTH = 4


def require_amount(name: str, value: int | float | Decimal | None) -> float:
    """Coerce a non-negative amount to float or raise INVALID_AMOUNT."""
    if value is None or isinstance(value, bool):
        raise BookingError(ErrorCode.INVALID_AMOUNT, details={name: repr(value)})
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise BookingError(ErrorCode.INVALID_AMOUNT, details={name: repr(value)}) from None
    if amount != amount or amount < 0:  # NaN or negative
        raise BookingError(ErrorCode.INVALID_AMOUNT, details={name: repr(value)})
    return amount


def _mixed_breakdown(total_days: int, monthly_rent: float) -> PricingBreakdown:
    """Price a stay longer than one month."""
    full_months = total_days // DAYS_PER_MONTH
    remaining_days = total_days % DAYS_PER_MONTH
    total_charge = full_months * monthly_rent

    if remaining_days == 0:
        return PricingBreakdown(
            full_months=full_months,
            partial_month_charge=0.0,
            total_charge=total_charge,
            description=f"{pluralize(full_months, 'month')} (exact)",
            rate_type=RateType.MIXED,
        )

    remaining_weeks = remaining_days // DAYS_PER_WEEK
    extra_days = remaining_days % DAYS_PER_WEEK

    weekly_rate = monthly_rent / WEEKS_PER_MONTH
    partial_month_charge = remaining_weeks * weekly_rate
    if extra_days > 0:
        daily_rate = weekly_rate / DAYS_PER_WEEK
        partial_month_charge += extra_days * daily_rate

    parts = [pluralize(full_months, "month")]
    if remaining_weeks > 0:
        parts.append(pluralize(remaining_weeks, "week"))
    if extra_days > 0:
        parts.append(pluralize(extra_days, "day"))

    return PricingBreakdown(
        full_months=full_months,
        partial_month_charge=partial_month_charge,
        total_charge=total_charge + partial_month_charge,
        description=" + ".join(parts),
        rate_type=RateType.MIXED,
    )


def _tier_breakdown(total_days: int, monthly_rent: float) -> PricingBreakdown:
    for max_days, share, rate_type, label in RATE_TIERS:
        if total_days <= max_days:
            charge = monthly_rent * share
            return PricingBreakdown(
                full_months=0,
                partial_month_charge=charge,
                total_charge=charge,
                description=f"{total_days} days ({label})",
                rate_type=rate_type,
            )
    return _mixed_breakdown(total_days, monthly_rent)


def compute_pricing(
    monthly_rent: int | float | Decimal,
    check_in_date: DateLike,
    check_out_date: DateLike,
    service_fee: int | float | Decimal | None = None,
    advance_percentage: int | float | Decimal | None = None,
) -> PricingResult:
    """Calculate the price of a booking.

    An empty or inverted date range is not an error: it returns a zero
    rent result whose total is just the service fee and whose breakdown
    says "Invalid date range". Check result.duration.total_days (or call
    validate_dates first) to tell that apart from a free stay.

    Args:
        monthly_rent: Property's monthly rent
        check_in_date: Check-in date
        check_out_date: Check-out date
        service_fee: Platform fee added to the rent (default from settings, 300)
        advance_percentage: Percent of the rent due upfront (default from
            settings, 30); not clamped

    Returns:
        PricingResult with duration, totals and breakdown

    Raises:
        BookingError: INVALID_AMOUNT for negative or non-numeric amounts,
            DATES_REQUIRED / INVALID_DATE_FORMAT for unusable dates
    """
    settings = get_settings()
    rent = require_amount("monthly_rent", monthly_rent)
    fee = require_amount(
        "service_fee", settings.service_fee if service_fee is None else service_fee
    )
    if advance_percentage is None:
        advance_pct = settings.advance_percentage
    else:
        try:
            advance_pct = float(advance_percentage)
        except (TypeError, ValueError):
            raise BookingError(
                ErrorCode.INVALID_AMOUNT,
                details={"advance_percentage": repr(advance_percentage)},
            ) from None

    duration = compute_duration(check_in_date, check_out_date)

    if duration.total_days <= 0:
        log_calculation(logger, "compute_pricing", total_days=0, result="invalid_range")
        return PricingResult(
            duration=duration,
            monthly_rent=0.0,
            service_fee=fee,
            subtotal=0.0,
            total=fee,
            advance_amount=0.0,
            remaining_amount=fee,
            advance_percentage=advance_pct,
            breakdown=PricingBreakdown(
                full_months=0,
                partial_month_charge=0.0,
                total_charge=0.0,
                description=INVALID_RANGE_DESCRIPTION,
            ),
        )

    breakdown = _tier_breakdown(duration.total_days, rent)

    subtotal = breakdown.total_charge
    total = subtotal + fee
    advance_amount = (subtotal * advance_pct) / 100
    remaining_amount = total - advance_amount

    log_calculation(
        logger,
        "compute_pricing",
        total_days=duration.total_days,
        rate_type=breakdown.rate_type.value,
        subtotal=subtotal,
        total=total,
        advance_amount=advance_amount,
    )

    return PricingResult(
        duration=duration,
        monthly_rent=rent,
        service_fee=fee,
        subtotal=subtotal,
        total=total,
        advance_amount=advance_amount,
        remaining_amount=remaining_amount,
        advance_percentage=advance_pct,
        breakdown=breakdown,
    )


def get_pricing_tiers(monthly_rent: int | float | Decimal) -> dict[str, PricingTier]:
    """Rate card for a property page.

    Args:
        monthly_rent: Property's monthly rent

    Returns:
        Tiers keyed "quarter", "half", "full" and "weekly"
    """
    rent = require_amount("monthly_rent", monthly_rent)
    return {
        "quarter": PricingTier(
            rate=rent * 0.25,
            description="1-7 days (Quarter rate)",
            percentage="25%",
        ),
        "half": PricingTier(
            rate=rent * 0.5,
            description="8-15 days (Half rate)",
            percentage="50%",
        ),
        "full": PricingTier(
            rate=rent,
            description="16-30 days (Full month rate)",
            percentage="100%",
        ),
        "weekly": PricingTier(
            rate=rent / WEEKS_PER_MONTH,
            description="Weekly rate (for stays over 30 days)",
            percentage="25% (per week)",
        ),
    }
