"""Booking summary shown on the request and invoice screens."""

from staywise.models import BookingSummary, PricingResult, RateType
from staywise.utils.formatting import format_currency

DISCOUNTED_RATE_TYPES = frozenset({RateType.QUARTER, RateType.HALF})


def generate_booking_summary(pricing: PricingResult) -> BookingSummary:
    """Project a PricingResult into display strings.

    Amounts use the whole-unit summary formatter. Quarter and half rate
    stays are flagged as discounted.

    Args:
        pricing: Result of compute_pricing

    Returns:
        BookingSummary ready for rendering
    """
    total_days = pricing.duration.total_days
    rate_type = pricing.breakdown.rate_type

    return BookingSummary(
        stay_duration=f"{total_days} day{'' if total_days == 1 else 's'}",
        billing_description=pricing.breakdown.description,
        rent_amount=format_currency(pricing.breakdown.total_charge),
        service_fee=format_currency(pricing.service_fee),
        total_amount=format_currency(pricing.total),
        advance_amount=format_currency(pricing.advance_amount),
        remaining_amount=format_currency(pricing.remaining_amount),
        rate_type=rate_type,
        is_discounted=rate_type in DISCOUNTED_RATE_TYPES,
    )
