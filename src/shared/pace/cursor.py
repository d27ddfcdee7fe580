"""Stepping a displayed duration with the arrow keys or scroll wheel."""

from typing import Literal

from .codec import DEFAULT_REFERENCE_DISTANCE, parse_pace

StepDirection = Literal["up", "down"]

HOUR_STEP = "1:00:00"
MINUTE_STEP = "1:00"
TENTH_STEP = "0.1"
SECOND_STEP = "1"


def _in_hours(value: str, cursor: int) -> bool:
    if value.count(":") != 2:
        return False
    return cursor <= value.index(":")


def _in_minutes(value: str, cursor: int) -> bool:
    colons = value.count(":")
    if colons == 1:
        return cursor <= value.index(":")
    if colons == 2:
        return cursor <= value.rindex(":")
    return False


def _in_fraction(value: str, cursor: int) -> bool:
    return "." in value and cursor > value.rindex(".")


def time_to_add_from_cursor(value: str, cursor: int | None) -> str:
    """
    Pick the increment for the unit the text cursor sits in.

    Hours are checked first, then minutes, then the fraction; anything else
    steps by one second.

    Args:
        value: The duration text as displayed, e.g. "1:04:30"
        cursor: Cursor offset into the text (None means the start)

    Returns:
        "1:00:00", "1:00", "0.1" or "1"
    """
    position = cursor or 0
    if _in_hours(value, position):
        return HOUR_STEP
    if _in_minutes(value, position):
        return MINUTE_STEP
    if _in_fraction(value, position):
        return TENTH_STEP
    return SECOND_STEP


def step_pace(
    ms_per_unit: float,
    value: str,
    cursor: int | None,
    reference_distance: float = DEFAULT_REFERENCE_DISTANCE,
    direction: StepDirection = "up",
) -> float:
    """
    Add or remove one step of the unit under the cursor from a pace.

    The step is a time for the field's own distance, so stepping the
    minutes of a 10k field moves the pace by one minute per 10k.

    Returns:
        New pace in milliseconds per unit distance, never below zero
    """
    if direction not in ("up", "down"):
        raise ValueError(f"Direction must be 'up' or 'down', got {direction!r}")

    step = parse_pace(time_to_add_from_cursor(value, cursor), reference_distance)
    factor = 1 if direction == "up" else -1
    return max(ms_per_unit + step * factor, 0.0)
