"""Check-in/check-out validation for booking requests."""

import datetime as dt

from staywise.config import get_settings
from staywise.models import ERROR_MESSAGES, BookingError, DateValidation, ErrorCode
from staywise.services.duration import compute_duration
from staywise.utils.dates import DateLike, align_timezones, is_missing, parse_datetime

DATES_REQUIRED = ERROR_MESSAGES[ErrorCode.DATES_REQUIRED]
INVALID_FORMAT = ERROR_MESSAGES[ErrorCode.INVALID_DATE_FORMAT]
CHECK_IN_IN_PAST = "Check-in date cannot be in the past"
CHECK_OUT_NOT_AFTER_CHECK_IN = "Check-out date must be after check-in date"
MINIMUM_STAY = "Minimum stay is 1 day"
LONG_STAY_WARNING = "Long-term stays over 1 year may require special arrangements"


def validate_dates(
    check_in_date: DateLike | None,
    check_out_date: DateLike | None,
    now: DateLike | None = None,
) -> DateValidation:
    """Validate a requested stay before it is priced or submitted.

    Missing or unparseable dates stop validation with a single error. All
    other checks run and accumulate, so an inverted range reports both the
    ordering error and the minimum stay error.

    Args:
        check_in_date: Requested check-in date
        check_out_date: Requested check-out date
        now: Current date/time, defaults to the system clock

    Returns:
        DateValidation with errors (blocking) and warnings (informational)
    """
    if is_missing(check_in_date) or is_missing(check_out_date):
        return DateValidation(is_valid=False, errors=[DATES_REQUIRED])

    try:
        check_in_at = parse_datetime(check_in_date)
        check_out_at = parse_datetime(check_out_date)
    except BookingError as e:
        if e.code is not ErrorCode.INVALID_DATE_FORMAT:
            raise
        return DateValidation(is_valid=False, errors=[INVALID_FORMAT])

    today = dt.date.today() if now is None else parse_datetime(now).date()

    errors: list[str] = []
    warnings: list[str] = []

    if check_in_at.date() < today:
        errors.append(CHECK_IN_IN_PAST)

    # Ordering uses the times as given; the stay length counts calendar days
    check_in_at, check_out_at = align_timezones(check_in_at, check_out_at)
    if check_out_at <= check_in_at:
        errors.append(CHECK_OUT_NOT_AFTER_CHECK_IN)

    duration = compute_duration(check_in_at.date(), check_out_at.date())

    if duration.total_days < 1:
        errors.append(MINIMUM_STAY)

    if duration.total_days > get_settings().long_stay_days:
        warnings.append(LONG_STAY_WARNING)

    return DateValidation(is_valid=not errors, errors=errors, warnings=warnings)
