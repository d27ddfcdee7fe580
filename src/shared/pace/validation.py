"""Input grammars for live-edited pace fields."""

import re

# Up to H:MM:SS.mmm, each segment with a flexible number of digits
VALID_TIME_PATTERN = r"^(?:\d{1,3}:)?(?:\d{1,2}:)?\d{1,2}(?:\.\d{1,3})?$"
# km/h as SSS.FF
VALID_SPEED_PATTERN = r"^(?:\d{1,3}\.)?\d{1,2}$"

_valid_time_re = re.compile(VALID_TIME_PATTERN)
_valid_speed_re = re.compile(VALID_SPEED_PATTERN)


def is_valid_time(value: str) -> bool:
    """Whether the value is a time a pace field accepts."""
    return _valid_time_re.fullmatch(value) is not None


def is_valid_speed(value: str) -> bool:
    """Whether the value is a speed a speed field accepts."""
    return _valid_speed_re.fullmatch(value) is not None
