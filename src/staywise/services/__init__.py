"""Booking calculator operations."""

from .duration import compute_duration
from .pricing import compute_pricing, get_pricing_tiers
from .refund_policy import CANCELLATION_POLICIES, compute_refund, get_policy_description
from .summary import generate_booking_summary
from .validation import validate_dates

__all__ = [
    "compute_duration",
    "compute_pricing",
    "get_pricing_tiers",
    "validate_dates",
    "compute_refund",
    "get_policy_description",
    "CANCELLATION_POLICIES",
    "generate_booking_summary",
]
