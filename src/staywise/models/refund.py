"""Refund model for booking cancellations."""

from pydantic import BaseModel, ConfigDict, Field


class RefundResult(BaseModel):
    """Result of applying a cancellation policy to a paid booking."""

    model_config = ConfigDict(strict=True)

    refund_percentage: int = Field(..., ge=0, le=100, description="Share of the payment refunded")
    refund_amount: float = Field(
        ..., ge=0, description="Amount returned to the tenant after the service fee rule"
    )
    service_fee_refund: float = Field(
        ..., ge=0, description="Service fee returned (only on a full refund)"
    )
    refund_reason: str
    days_until_check_in: int = Field(..., description="Negative once check-in has passed")
    cancellation_policy: str = Field(..., description="Policy name as requested by the caller")
