"""Data models for runstreak."""

from .activity import Activity
from .enums import RUN_SPORT_TYPES, SKI_SPORT_TYPES, SportType
from .pace import DEFAULT_DISTANCES, PaceDistance
from .streak import (
    LongestStreakSummary,
    SportTotals,
    StreakCard,
    StreakRun,
    StreakSummary,
)
from .units import (
    UnitSystem,
    format_distance,
    km_to_meters,
    km_to_miles,
    miles_to_km,
)

__all__ = [
    # Main models
    "Activity",
    # Streaks
    "StreakSummary",
    "LongestStreakSummary",
    "StreakRun",
    "StreakCard",
    "SportTotals",
    # Pace calculator
    "PaceDistance",
    "DEFAULT_DISTANCES",
    # Enums
    "SportType",
    "RUN_SPORT_TYPES",
    "SKI_SPORT_TYPES",
    # Units
    "UnitSystem",
    "km_to_miles",
    "miles_to_km",
    "km_to_meters",
    "format_distance",
]
