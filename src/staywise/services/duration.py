"""Stay duration calculation."""

import math

from staywise.models import Duration
from staywise.utils.dates import SECONDS_PER_DAY, DateLike, to_midnight

DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7


def compute_duration(check_in_date: DateLike, check_out_date: DateLike) -> Duration:
    """Calculate the length of a stay.

    Both dates are taken at midnight, so the time of day never changes the
    result. A check-out on or before check-in gives an all-zero Duration.

    The decomposition follows the booking screens: months are whole 30-day
    blocks, weeks are whole weeks in what is left, and days is
    total_days % 7 (not what is left after weeks).

    Args:
        check_in_date: Check-in date
        check_out_date: Check-out date

    Returns:
        Duration with total_days and its months/weeks/days breakdown

    Raises:
        BookingError: If either date is missing or malformed
    """
    check_in = to_midnight(check_in_date)
    check_out = to_midnight(check_out_date)

    seconds = (check_out - check_in).total_seconds()
    total_days = math.ceil(seconds / SECONDS_PER_DAY)

    if total_days <= 0:
        return Duration(total_days=0, months=0, weeks=0, days=0)

    return Duration(
        total_days=total_days,
        months=total_days // DAYS_PER_MONTH,
        weeks=(total_days % DAYS_PER_MONTH) // DAYS_PER_WEEK,
        days=total_days % DAYS_PER_WEEK,
    )
