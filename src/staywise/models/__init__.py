"""Pydantic models for StayWise booking calculations."""

from .booking import (
    BookingSummary,
    DateValidation,
    Duration,
    PricingBreakdown,
    PricingResult,
    PricingTier,
)
from .enums import CancellationPolicy, RateType
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    BookingError,
    ErrorCode,
    ErrorDetail,
)
from .refund import RefundResult

__all__ = [
    # Enums
    "CancellationPolicy",
    "RateType",
    # Booking
    "BookingSummary",
    "DateValidation",
    "Duration",
    "PricingBreakdown",
    "PricingResult",
    "PricingTier",
    # Refund
    "RefundResult",
    # Errors
    "BookingError",
    "ErrorCode",
    "ErrorDetail",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
]
