"""Standard error codes for the booking calculator.

Calculation functions raise BookingError for input they cannot work with
(missing or malformed dates, negative amounts). Business-rule problems such
as a check-in date in the past are not exceptions: validate_dates reports
them as messages so the caller can decide whether to block a submission.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Calculator error codes."""

    DATES_REQUIRED = "ERR_CALC_001"
    INVALID_DATE_FORMAT = "ERR_CALC_002"
    INVALID_AMOUNT = "ERR_CALC_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATES_REQUIRED: "Both check-in and check-out dates are required",
    ErrorCode.INVALID_DATE_FORMAT: "Invalid date format",
    ErrorCode.INVALID_AMOUNT: "Amounts must be zero or greater",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_REQUIRED: "Ask the guest to select both check-in and check-out dates",
    ErrorCode.INVALID_DATE_FORMAT: "Pass dates as date objects or ISO-8601 strings (YYYY-MM-DD)",
    ErrorCode.INVALID_AMOUNT: "Check the property's monthly rent and the service fee",
}


class ErrorDetail(BaseModel):
    """Serializable error payload for booking flows.

    Callers that show errors in a form or return them over an API can
    convert a BookingError into this shape.
    """

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorDetail":
        """Create an ErrorDetail from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorDetail with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised by calculator operations on unusable input."""

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_error_detail(self) -> ErrorDetail:
        """Convert this exception to an ErrorDetail."""
        return ErrorDetail.from_code(self.code, self.details)
