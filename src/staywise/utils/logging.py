"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management so calculations can be traced back to
  the booking request that triggered them
- Structured logging formatter for consistent log output
- A helper for logging calculator operations

Usage:
    from staywise.utils.logging import get_logger, set_correlation_id

    # In the booking flow that calls the calculator:
    set_correlation_id(request_id)

    # In calculator code:
    logger = get_logger(__name__)
    log_calculation(logger, "compute_pricing", total_days=10, subtotal=15000.0)
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID, or None if not set."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a [correlation_id] prefix.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def log_calculation(
    logger: logging.Logger,
    operation: str,
    *,
    level: int = logging.DEBUG,
    **context: Any,
) -> None:
    """Log a calculator operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "compute_pricing", "compute_refund")
        level: Log level, DEBUG unless the caller wants the line kept
        **context: Fields describing inputs and results; None values are dropped
    """
    if not logger.isEnabledFor(level):
        return

    fields = {key: value for key, value in context.items() if value is not None}

    msg_parts = [f"Calculation: {operation}"]
    msg_parts.extend(f"{key}={value}" for key, value in fields.items())
    message = " | ".join(msg_parts)

    logger.log(level, message, extra={"operation": operation, **fields})
