"""Unit tests for structured logging with correlation IDs."""

import logging
from typing import Generator

import pytest

from staywise.utils.logging import (
    CorrelationIdFilter,
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_calculation,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_correlation_id() -> Generator[None, None, None]:
    """Start and end each test without a correlation ID."""
    clear_correlation_id()
    yield
    clear_correlation_id()


class TestCorrelationId:
    """Correlation ID context management."""

    def test_set_explicit_id(self) -> None:
        assert set_correlation_id("req-123") == "req-123"
        assert get_correlation_id() == "req-123"

    def test_generates_id_when_missing(self) -> None:
        cid = set_correlation_id()

        assert cid
        assert get_correlation_id() == cid

    def test_clear(self) -> None:
        set_correlation_id("req-123")
        clear_correlation_id()

        assert get_correlation_id() is None


class TestFormatting:
    """Filter and formatter output."""

    def _record(self, message: str) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)

    def test_formatter_prefixes_correlation_id(self) -> None:
        set_correlation_id("req-456")
        formatter = StructuredFormatter("%(levelname)s %(message)s")

        output = formatter.format(self._record("priced booking"))

        assert output == "[req-456] INFO priced booking"

    def test_formatter_without_correlation_id(self) -> None:
        formatter = StructuredFormatter("%(message)s")

        output = formatter.format(self._record("priced booking"))

        assert output == "[no-correlation-id] priced booking"

    def test_get_logger_adds_filter_once(self) -> None:
        logger = get_logger("staywise.tests.filter")
        get_logger("staywise.tests.filter")

        filters = [f for f in logger.filters if isinstance(f, CorrelationIdFilter)]
        assert len(filters) == 1


class TestLogCalculation:
    """log_calculation output."""

    def test_logs_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("staywise.tests.calc")
        set_correlation_id("req-789")

        with caplog.at_level(logging.DEBUG, logger="staywise.tests.calc"):
            log_calculation(logger, "compute_pricing", total_days=10, subtotal=15000.0)

        record = caplog.records[-1]
        assert record.getMessage() == (
            "Calculation: compute_pricing | total_days=10 | subtotal=15000.0"
        )
        assert record.operation == "compute_pricing"
        assert record.total_days == 10
        assert record.correlation_id == "req-789"

    def test_drops_none_values(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("staywise.tests.calc")

        with caplog.at_level(logging.DEBUG, logger="staywise.tests.calc"):
            log_calculation(logger, "compute_refund", policy=None, refund_percentage=50)

        assert caplog.records[-1].getMessage() == (
            "Calculation: compute_refund | refund_percentage=50"
        )

    def test_skipped_when_level_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("staywise.tests.quiet")

        with caplog.at_level(logging.WARNING, logger="staywise.tests.quiet"):
            log_calculation(logger, "compute_pricing", total_days=3)

        assert caplog.records == []

    def test_pricing_emits_calculation_log(self, caplog: pytest.LogCaptureFixture) -> None:
        """compute_pricing logs one line per calculation at debug level."""
        from staywise.services.pricing import compute_pricing

        with caplog.at_level(logging.DEBUG, logger="staywise.services.pricing"):
            compute_pricing(30000, "2026-08-01", "2026-08-11")

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Calculation: compute_pricing") for m in messages)
        assert any("rate_type=half" in m for m in messages)
