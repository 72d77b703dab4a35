"""Unit tests for the booking summary projection."""

import datetime as dt

from staywise.models import RateType
from staywise.services.pricing import compute_pricing
from staywise.services.summary import generate_booking_summary

CHECK_IN = dt.date(2026, 8, 1)


class TestGenerateBookingSummary:
    """Tests for generate_booking_summary."""

    def test_half_rate_summary(self) -> None:
        """A 10-day stay is shown as a discounted half-rate booking."""
        pricing = compute_pricing(30000, CHECK_IN, CHECK_IN + dt.timedelta(days=10))

        summary = generate_booking_summary(pricing)

        assert summary.stay_duration == "10 days"
        assert summary.billing_description == "10 days (Half rate)"
        assert summary.rent_amount == "LKR 15,000"
        assert summary.service_fee == "LKR 300"
        assert summary.total_amount == "LKR 15,300"
        assert summary.advance_amount == "LKR 4,500"
        assert summary.remaining_amount == "LKR 10,800"
        assert summary.rate_type == RateType.HALF
        assert summary.is_discounted is True

    def test_single_day(self) -> None:
        """One day is singular and a discounted quarter rate."""
        pricing = compute_pricing(30000, CHECK_IN, CHECK_IN + dt.timedelta(days=1))

        summary = generate_booking_summary(pricing)

        assert summary.stay_duration == "1 day"
        assert summary.rate_type == RateType.QUARTER
        assert summary.is_discounted is True

    def test_full_month_not_discounted(self) -> None:
        """Full month and mixed rates are not discounted."""
        full = compute_pricing(30000, CHECK_IN, CHECK_IN + dt.timedelta(days=20))
        mixed = compute_pricing(30000, CHECK_IN, CHECK_IN + dt.timedelta(days=45))

        assert generate_booking_summary(full).is_discounted is False
        assert generate_booking_summary(mixed).is_discounted is False

    def test_mixed_amounts_are_whole_units(self) -> None:
        """Fractional charges are rounded for display."""
        pricing = compute_pricing(30000, CHECK_IN, CHECK_IN + dt.timedelta(days=33))

        summary = generate_booking_summary(pricing)

        # 30000 + 3 * 30000 / 28 = 33214.28...
        assert summary.rent_amount == "LKR 33,214"
        assert summary.billing_description == "1 month + 3 days"

    def test_invalid_range_summary(self) -> None:
        """The fallback result still renders."""
        pricing = compute_pricing(30000, CHECK_IN, CHECK_IN)

        summary = generate_booking_summary(pricing)

        assert summary.stay_duration == "0 days"
        assert summary.billing_description == "Invalid date range"
        assert summary.total_amount == "LKR 300"
        assert summary.rate_type is None
        assert summary.is_discounted is False
