"""Calculator defaults read from the environment.

Settings are loaded once and cached. Tests (or long-running callers that
change the environment) can drop the cached copy with ``reset_settings``.

Variables:
    STAYWISE_SERVICE_FEE: Platform service fee added to every booking (300)
    STAYWISE_ADVANCE_PERCENTAGE: Share of rent collected upfront (30)
    STAYWISE_CURRENCY: Currency code used by the formatters (LKR)
    STAYWISE_CANCELLATION_POLICY: Refund policy when none is given (moderate)
    STAYWISE_LONG_STAY_DAYS: Stays longer than this get a warning (365)
"""

import os

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "STAYWISE_"

# Singleton, created on first get_settings() call
_settings_instance: "CalculatorSettings | None" = None


class CalculatorSettings(BaseModel):
    """Defaults applied when a caller omits an optional argument."""

    model_config = ConfigDict(strict=True, frozen=True)

    service_fee: float = Field(default=300.0, ge=0)
    advance_percentage: float = Field(default=30.0)
    currency_code: str = Field(default="LKR", min_length=3, max_length=3)
    cancellation_policy: str = Field(default="moderate")
    long_stay_days: int = Field(default=365, ge=1)

    @classmethod
    def from_env(cls) -> "CalculatorSettings":
        """Build settings from STAYWISE_* environment variables.

        Returns:
            CalculatorSettings with defaults for unset variables

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        values: dict[str, float | int | str] = {}

        service_fee = _read_number("SERVICE_FEE", float)
        if service_fee is not None:
            values["service_fee"] = service_fee

        advance = _read_number("ADVANCE_PERCENTAGE", float)
        if advance is not None:
            values["advance_percentage"] = advance

        long_stay = _read_number("LONG_STAY_DAYS", int)
        if long_stay is not None:
            values["long_stay_days"] = long_stay

        currency = os.getenv(f"{ENV_PREFIX}CURRENCY")
        if currency:
            values["currency_code"] = currency.strip().upper()

        policy = os.getenv(f"{ENV_PREFIX}CANCELLATION_POLICY")
        if policy:
            values["cancellation_policy"] = policy.strip().lower()

        return cls(**values)


def _read_number(name: str, cast: type) -> float | int | None:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from e


def get_settings() -> CalculatorSettings:
    """Get or create the cached calculator settings.

    Returns:
        CalculatorSettings loaded from the environment on first use
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = CalculatorSettings.from_env()
    return _settings_instance


def reset_settings() -> None:
    """Reset the cached settings (for testing only).

    The next call to get_settings re-reads the environment.
    """
    global _settings_instance
    _settings_instance = None
