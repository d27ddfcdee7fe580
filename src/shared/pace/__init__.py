"""Pace conversion between duration strings and milliseconds per distance."""

from .codec import (
    DEFAULT_REFERENCE_DISTANCE,
    duration_to_ms,
    format_pace,
    format_pace_for_distance,
    pace_to_speed,
    parse_pace,
    parse_pace_for_distance,
    speed_to_pace,
)
from .cursor import step_pace, time_to_add_from_cursor
from .table import pace_table, sort_distances
from .validation import (
    VALID_SPEED_PATTERN,
    VALID_TIME_PATTERN,
    is_valid_speed,
    is_valid_time,
)

__all__ = [
    "DEFAULT_REFERENCE_DISTANCE",
    "duration_to_ms",
    "parse_pace",
    "format_pace",
    "parse_pace_for_distance",
    "format_pace_for_distance",
    "speed_to_pace",
    "pace_to_speed",
    "time_to_add_from_cursor",
    "step_pace",
    "pace_table",
    "sort_distances",
    "VALID_TIME_PATTERN",
    "VALID_SPEED_PATTERN",
    "is_valid_time",
    "is_valid_speed",
]
