"""Pytest configuration and fixtures for the StayWise booking calculator.

This module provides reusable fixtures for testing:
- A fixed "now" so date-dependent calculations are deterministic
- Isolation of STAYWISE_* environment settings between tests
"""

import datetime as dt
import os
from typing import Generator

import pytest

from staywise.config import ENV_PREFIX, reset_settings

# === Clock Fixtures ===

FIXED_NOW = dt.datetime(2026, 7, 1, 10, 30)
FIXED_TODAY = FIXED_NOW.date()


@pytest.fixture
def now() -> dt.datetime:
    """Fixed current time: 2026-07-01 10:30."""
    return FIXED_NOW


@pytest.fixture
def today() -> dt.date:
    """Fixed current date: 2026-07-01."""
    return FIXED_TODAY


# === Settings Fixtures ===


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove STAYWISE_* variables and reset cached settings around each test.

    Tests that need custom settings set variables with monkeypatch and
    then call reset_settings() themselves.
    """
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)

    reset_settings()
    yield
    reset_settings()


# === Sample Data ===


@pytest.fixture
def monthly_rent() -> float:
    """Monthly rent used across pricing tests (LKR)."""
    return 30000.0
