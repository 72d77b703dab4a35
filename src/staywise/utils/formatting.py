"""Display formatting for booking amounts and dates.

There are two currency formatters on purpose:

- format_currency: whole units ("LKR 15,000"), used by booking summaries
  and price breakdowns
- format_money: two decimal places ("LKR 15,000.00"), used for invoices,
  admin listings and anything showing exact balances

Keep them separate; call sites choose one.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from staywise.config import get_settings
from staywise.models.errors import BookingError
from staywise.utils.dates import DateLike, is_missing, parse_datetime

Amount = int | float | Decimal

NOT_SPECIFIED = "Not specified"
INVALID_DATE = "Invalid date"

_CENTS = Decimal("100")
_WHOLE = Decimal("1")


def _to_decimal(amount: Amount | None) -> Decimal:
    """Convert an amount to Decimal; None and NaN count as zero."""
    if amount is None:
        return Decimal("0")
    if isinstance(amount, Decimal):
        value = amount
    else:
        try:
            value = Decimal(str(amount))
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {amount!r}") from e
    if value.is_nan():
        return Decimal("0")
    return value


def _format_amount(amount: Amount | None, currency_code: str | None, places: int) -> str:
    code = currency_code or get_settings().currency_code
    quantum = _WHOLE.scaleb(-places)
    rounded = _to_decimal(amount).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{code} {abs(rounded):,.{places}f}"


def format_currency(amount: Amount | None, currency_code: str | None = None) -> str:
    """Format an amount in whole currency units for booking summaries.

    Args:
        amount: Amount to format; None is shown as zero
        currency_code: ISO currency code, defaults to the configured one (LKR)

    Returns:
        e.g. "LKR 15,300"
    """
    return _format_amount(amount, currency_code, 0)


def format_money(amount: Amount | None, currency_code: str | None = None) -> str:
    """Format an amount with two decimal places.

    Args:
        amount: Amount to format; None is shown as zero
        currency_code: ISO currency code, defaults to the configured one (LKR)

    Returns:
        e.g. "LKR 15,300.00"
    """
    return _format_amount(amount, currency_code, 2)


def to_minor_units(amount: Amount | None) -> int:
    """Convert an amount to integer cents for a payment provider.

    Rounds half up, so 4500.005 becomes 450001.
    """
    cents = (_to_decimal(amount) * _CENTS).quantize(_WHOLE, rounding=ROUND_HALF_UP)
    return int(cents)


def format_date(value: DateLike | None) -> str:
    """Long-form date, e.g. "October 19, 2026"."""
    if is_missing(value):
        return NOT_SPECIFIED
    try:
        parsed = parse_datetime(value)
    except BookingError:
        return INVALID_DATE
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_date_time(value: DateLike | None) -> str:
    """Long-form date with 12-hour time, e.g. "October 19, 2026, 02:30 PM"."""
    if is_missing(value):
        return NOT_SPECIFIED
    try:
        parsed = parse_datetime(value)
    except BookingError:
        return INVALID_DATE
    return f"{parsed:%B} {parsed.day}, {parsed.year}, {parsed:%I:%M %p}"


def pluralize(count: int, unit: str) -> str:
    """Count with unit, plural only above one: "1 month", "2 months"."""
    return f"{count} {unit}{'s' if count > 1 else ''}"

