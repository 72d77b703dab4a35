"""Cancellation refund policies.

Each policy is a table of (hours before check-in, refund percent) pairs
sorted by threshold, highest first. The first threshold the cancellation
meets decides the refund:

- flexible: 24h+ full refund, otherwise none
- moderate: 168h+ (7 days) full refund, 24h+ half, otherwise none
- strict: 336h+ (14 days) half, otherwise none

The service fee is returned only with a full refund. On any partial or
zero refund it is deducted from the refunded rent, never going below zero.
"""

import math
from decimal import Decimal

from staywise.config import get_settings
from staywise.models import CancellationPolicy, RefundResult
from staywise.services.pricing import require_amount
from staywise.utils.dates import (
    SECONDS_PER_DAY,
    DateLike,
    align_timezones,
    current_datetime,
    parse_datetime,
)
from staywise.utils.logging import get_logger, log_calculation

logger = get_logger(__name__)

HOURS_PER_DAY = 24

CANCELLATION_POLICIES: dict[str, tuple[tuple[int, int], ...]] = {
    CancellationPolicy.FLEXIBLE.value: ((24, 100), (0, 0)),
    CancellationPolicy.MODERATE.value: ((168, 100), (24, 50), (0, 0)),
    CancellationPolicy.STRICT.value: ((336, 50), (0, 0)),
}

DEFAULT_POLICY = CancellationPolicy.MODERATE.value

REFUND_REASONS: dict[int, str] = {
    100: "Full refund - cancelled with sufficient notice",
    50: "Partial refund - cancelled within moderate notice period",
    0: "No refund - cancelled too close to check-in date",
}


def _policy_table(policy: str) -> tuple[tuple[int, int], ...]:
    """Look up a policy table; unknown names fall back to moderate."""
    table = CANCELLATION_POLICIES.get(policy)
    if table is None:
        logger.debug("Unknown cancellation policy %r, using %s", policy, DEFAULT_POLICY)
        table = CANCELLATION_POLICIES[DEFAULT_POLICY]
    return tuple(sorted(table, key=lambda row: row[0], reverse=True))


def refund_percentage_for(policy: str, hours_until_check_in: float) -> int:
    """Refund percent for a cancellation made this many hours before check-in.

    Returns 0 when no threshold is met (check-in has already passed).
    """
    for threshold, percentage in _policy_table(policy):
        if hours_until_check_in >= threshold:
            return percentage
    return 0


def refund_reason(percentage: int) -> str:
    return REFUND_REASONS.get(percentage, f"{percentage}% refund based on cancellation policy")


def compute_refund(
    total_paid: int | float | Decimal,
    check_in_date: DateLike,
    cancellation_policy: str | None = None,
    now: DateLike | None = None,
    service_fee: int | float | Decimal | None = None,
) -> RefundResult:
    """Calculate the refund for cancelling a paid booking.

    days_until_check_in is rounded up to whole days and the policy threshold
    is compared against days_until_check_in * 24, so a check-in one hour
    away counts as a full day.

    Args:
        total_paid: Amount the tenant has paid
        check_in_date: Booking check-in date (a plain date means midnight)
        cancellation_policy: Policy name (default from settings, "moderate");
            unknown names are treated as moderate
        now: Time of cancellation, defaults to the system clock
        service_fee: Fee kept unless the refund is full (default from settings, 300)

    Returns:
        RefundResult with percentage, amount and reason

    Raises:
        BookingError: INVALID_AMOUNT for a negative or non-numeric payment or fee,
            DATES_REQUIRED / INVALID_DATE_FORMAT for an unusable date
    """
    settings = get_settings()
    policy = cancellation_policy or settings.cancellation_policy
    paid = require_amount("total_paid", total_paid)
    fee = require_amount(
        "service_fee", settings.service_fee if service_fee is None else service_fee
    )

    check_in = parse_datetime(check_in_date)
    current = current_datetime(check_in) if now is None else parse_datetime(now)
    check_in, current = align_timezones(check_in, current)

    seconds_until_check_in = (check_in - current).total_seconds()
    days_until_check_in = math.ceil(seconds_until_check_in / SECONDS_PER_DAY)
    hours_until_check_in = days_until_check_in * HOURS_PER_DAY

    percentage = refund_percentage_for(policy, hours_until_check_in)

    gross_refund = (paid * percentage) / 100
    full_refund = percentage == 100
    refund_amount = max(0.0, gross_refund - (0.0 if full_refund else fee))

    log_calculation(
        logger,
        "compute_refund",
        policy=policy,
        days_until_check_in=days_until_check_in,
        refund_percentage=percentage,
        refund_amount=refund_amount,
    )

    return RefundResult(
        refund_percentage=percentage,
        refund_amount=refund_amount,
        service_fee_refund=fee if full_refund else 0.0,
        refund_reason=refund_reason(percentage),
        days_until_check_in=days_until_check_in,
        cancellation_policy=policy,
    )


def _describe_hours(hours: int) -> str:
    if hours % 24 == 0 and hours >= 24:
        days = hours // 24
        return f"{days} day{'s' if days != 1 else ''}"
    return f"{hours} hours"


def get_policy_description(cancellation_policy: str | None = None) -> str:
    """Human-readable description of a cancellation policy.

    Args:
        cancellation_policy: Policy name, defaults to the configured policy

    Returns:
        Multi-line policy text for booking and cancellation screens
    """
    policy = cancellation_policy or get_settings().cancellation_policy
    name = policy if policy in CANCELLATION_POLICIES else DEFAULT_POLICY

    lines = [f"Cancellation Policy ({name.capitalize()}):"]
    previous: int | None = None
    for threshold, percentage in _policy_table(name):
        outcome = f"{percentage}% refund" if percentage else "No refund"
        if threshold == 0 and previous:
            window = f"Less than {_describe_hours(previous)} before check-in"
        elif threshold == 0:
            window = "Any time before check-in"
        else:
            window = f"{_describe_hours(threshold)}+ before check-in"
        lines.append(f"• {window}: {outcome}")
        previous = threshold
    lines.append("• Service fee is refunded only with a full refund")
    return "\n".join(lines)
