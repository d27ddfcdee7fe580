"""Running streak calculation."""

from .calculator import (
    calculate_streak,
    calculate_streaks,
    find_streaks,
    normalize_date,
    top_streaks,
)

__all__ = [
    "calculate_streak",
    "calculate_streaks",
    "find_streaks",
    "normalize_date",
    "top_streaks",
]
