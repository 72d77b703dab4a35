"""StayWise booking calculator.

Duration, tiered pricing, date validation and cancellation refunds for
StayWise rental bookings. Every public function is pure; "now" is an
explicit optional argument wherever the result depends on the clock.
"""

from .models import (
    BookingError,
    BookingSummary,
    CancellationPolicy,
    DateValidation,
    Duration,
    ErrorCode,
    ErrorDetail,
    PricingBreakdown,
    PricingResult,
    PricingTier,
    RateType,
    RefundResult,
)
from .services import (
    CANCELLATION_POLICIES,
    compute_duration,
    compute_pricing,
    compute_refund,
    generate_booking_summary,
    get_policy_description,
    get_pricing_tiers,
    validate_dates,
)
from .utils.formatting import (
    format_currency,
    format_date,
    format_date_time,
    format_money,
    to_minor_units,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Calculator
    "compute_duration",
    "compute_pricing",
    "validate_dates",
    "compute_refund",
    "get_policy_description",
    "get_pricing_tiers",
    "generate_booking_summary",
    "CANCELLATION_POLICIES",
    # Formatting
    "format_currency",
    "format_money",
    "format_date",
    "format_date_time",
    "to_minor_units",
    # Models
    "BookingSummary",
    "CancellationPolicy",
    "DateValidation",
    "Duration",
    "PricingBreakdown",
    "PricingResult",
    "PricingTier",
    "RateType",
    "RefundResult",
    # Errors
    "BookingError",
    "ErrorCode",
    "ErrorDetail",
]
