"""Unit tests for environment-driven calculator settings."""

import pytest

from staywise.config import CalculatorSettings, get_settings, reset_settings


class TestCalculatorSettings:
    """Tests for get_settings and CalculatorSettings.from_env."""

    def test_defaults(self) -> None:
        """Without variables the defaults apply."""
        settings = get_settings()

        assert settings.service_fee == 300
        assert settings.advance_percentage == 30
        assert settings.currency_code == "LKR"
        assert settings.cancellation_policy == "moderate"
        assert settings.long_stay_days == 365

    def test_cached(self) -> None:
        """Repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """reset_settings picks up new variables."""
        get_settings()
        monkeypatch.setenv("STAYWISE_CANCELLATION_POLICY", " Strict ")
        reset_settings()

        assert get_settings().cancellation_policy == "strict"

    def test_reads_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Numeric variables are parsed."""
        monkeypatch.setenv("STAYWISE_SERVICE_FEE", "250.5")
        monkeypatch.setenv("STAYWISE_LONG_STAY_DAYS", "180")

        settings = CalculatorSettings.from_env()

        assert settings.service_fee == 250.5
        assert settings.long_stay_days == 180

    def test_blank_variable_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Empty values are ignored."""
        monkeypatch.setenv("STAYWISE_SERVICE_FEE", "  ")

        assert CalculatorSettings.from_env().service_fee == 300

    def test_invalid_number_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A non-numeric value names the variable."""
        monkeypatch.setenv("STAYWISE_ADVANCE_PERCENTAGE", "thirty")

        with pytest.raises(ValueError, match="STAYWISE_ADVANCE_PERCENTAGE"):
            CalculatorSettings.from_env()

    def test_policy_default_used_by_refunds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured policy applies when none is passed."""
        import datetime as dt

        from staywise.services.refund_policy import compute_refund

        monkeypatch.setenv("STAYWISE_CANCELLATION_POLICY", "flexible")
        reset_settings()
        now = dt.datetime(2026, 7, 1, 12, 0)

        result = compute_refund(10000, now + dt.timedelta(days=2), now=now)

        assert result.cancellation_policy == "flexible"
        assert result.refund_percentage == 100
