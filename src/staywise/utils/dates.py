"""Date coercion helpers shared by the calculator and the formatters.

Date-like inputs are date objects, datetime objects, or ISO-8601 strings
("2026-07-20", "2026-07-20T14:00:00", "2026-07-20T14:00:00Z").
"""

import datetime as dt

from staywise.models.errors import BookingError, ErrorCode

DateLike = dt.date | dt.datetime | str

SECONDS_PER_DAY = 86_400


def is_missing(value: object) -> bool:
    """True for None and blank strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_datetime(value: DateLike | None) -> dt.datetime:
    """Coerce a date-like value to a datetime.

    Plain dates become midnight of that day. Timezone information on
    datetimes and strings is preserved.

    Raises:
        BookingError: DATES_REQUIRED if value is missing,
            INVALID_DATE_FORMAT if it cannot be parsed
    """
    if is_missing(value):
        raise BookingError(ErrorCode.DATES_REQUIRED)

    # datetime is a subclass of date, so check it first
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time.min)
    if isinstance(value, str):
        try:
            return dt.datetime.fromisoformat(value.strip())
        except ValueError:
            raise BookingError(
                ErrorCode.INVALID_DATE_FORMAT, details={"value": value}
            ) from None

    raise BookingError(
        ErrorCode.INVALID_DATE_FORMAT, details={"type": type(value).__name__}
    )


def to_midnight(value: DateLike | None) -> dt.date:
    """Coerce a date-like value to a calendar date, dropping time of day."""
    return parse_datetime(value).date()


def align_timezones(
    first: dt.datetime, second: dt.datetime
) -> tuple[dt.datetime, dt.datetime]:
    """Make two datetimes comparable.

    A naive datetime is read in the timezone of its aware counterpart.
    """
    if first.tzinfo is None and second.tzinfo is not None:
        first = first.replace(tzinfo=second.tzinfo)
    elif second.tzinfo is None and first.tzinfo is not None:
        second = second.replace(tzinfo=first.tzinfo)
    return first, second


def current_datetime(reference: dt.datetime | None = None) -> dt.datetime:
    """System clock, aware when the reference datetime is aware."""
    if reference is not None and reference.tzinfo is not None:
        return dt.datetime.now(reference.tzinfo)
    return dt.datetime.now()
