"""Enumeration types for StayWise booking calculations."""

from enum import Enum


class RateType(str, Enum):
    """Which pricing tier a stay was charged under."""

    QUARTER = "quarter"  # 1-7 days
    HALF = "half"  # 8-15 days
    FULL = "full"  # 16-30 days
    MIXED = "mixed"  # full months plus weeks/days


class CancellationPolicy(str, Enum):
    """Named refund schedules an owner can attach to a property."""

    FLEXIBLE = "flexible"
    MODERATE = "moderate"
    STRICT = "strict"
