"""
Pace parsing and formatting.

A pace is stored as milliseconds per unit of a reference distance. With
distances in meters and the default reference of 1000, a pace of 270 means
270 ms per meter, i.e. 4:30 per kilometer. The same value formatted at a
different distance gives the time for that distance at that pace.

Duration strings follow ``[[H:]MM:]SS[.mmm]``: the integer part is split on
colons and read right to left as seconds, minutes and hours; up to three
fraction digits are milliseconds ("4:30.5" is 4 minutes 30.5 seconds).
"""

import logging
import math
import re
from collections.abc import Callable
from functools import partial

from ..errors import MalformedDurationError

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_DISTANCE = 1000

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

_DURATION_RE = re.compile(
    r"(?:(?:(?P<hours>\d+):)?(?P<minutes>\d+):)?(?P<seconds>\d+)(?:\.(?P<fraction>\d{1,3}))?"
)


def _check_distance(reference_distance: float) -> None:
    if not reference_distance > 0:
        raise ValueError(f"Reference distance must be positive, got {reference_distance}")


def duration_to_ms(duration: str) -> int:
    """
    Convert a duration string to whole milliseconds.

    Raises:
        MalformedDurationError: If the string is not [[H:]MM:]SS[.mmm]
    """
    match = _DURATION_RE.fullmatch(duration.strip())
    if match is None:
        raise MalformedDurationError(duration)

    hours = int(match["hours"] or 0)
    minutes = int(match["minutes"] or 0)
    seconds = int(match["seconds"])
    ms = int((match["fraction"] or "").ljust(3, "0"))

    return ms + seconds * MS_PER_SECOND + minutes * MS_PER_MINUTE + hours * MS_PER_HOUR


def parse_pace(duration: str, reference_distance: float = DEFAULT_REFERENCE_DISTANCE) -> float:
    """
    Parse the time for a distance into milliseconds per distance unit.

    Args:
        duration: Time for the reference distance, e.g. "4:30" or "1:04:30.5"
        reference_distance: Distance the time was run over

    Returns:
        Pace in milliseconds per unit distance

    Raises:
        MalformedDurationError: If the duration does not match the grammar
        ValueError: If the reference distance is not positive
    """
    _check_distance(reference_distance)
    pace = duration_to_ms(duration) / reference_distance
    logger.debug(f"Parsed {duration!r} over {reference_distance} as {pace} ms/unit")
    return pace


def format_pace(
    ms_per_unit: float,
    reference_distance: float = DEFAULT_REFERENCE_DISTANCE,
    show_ms: bool = False,
) -> str:
    """
    Format a pace as the time for the reference distance.

    Produces the shortest natural reading: no leading zero on the first
    segment, two-digit minutes and seconds once a larger unit precedes them,
    and "0" for a zero time. Milliseconds are truncated, and appended as
    three digits only when show_ms is set.

    Examples:
        format_pace(270) == "4:30"
        format_pace(387.05, 10000, True) == "1:04:30.500"
        format_pace(97.5, 100, True) == "9.750"

    Args:
        ms_per_unit: Pace in milliseconds per unit distance. Negative values
            are shown as zero.
        reference_distance: Distance to give the time for
        show_ms: Append milliseconds

    Raises:
        ValueError: If the pace is not a finite number or the distance is not
            positive
    """
    _check_distance(reference_distance)
    if not math.isfinite(ms_per_unit):
        raise ValueError(f"Pace must be a finite number, got {ms_per_unit}")

    # Rounding first keeps float noise such as 270499.99999999997 from
    # truncating a whole millisecond away
    total_ms = math.floor(round(max(ms_per_unit * reference_distance, 0.0), 6))

    hours, remainder = divmod(total_ms, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds, ms = divmod(remainder, MS_PER_SECOND)

    # Minutes are always shown under an hour so "1:00:05" cannot read as "1:05"
    show_minutes = minutes > 0 or hours > 0

    hours_text = f"{hours}:" if hours > 0 else ""
    if show_minutes:
        minutes_text = f"{minutes:02d}:" if hours > 0 else f"{minutes}:"
    else:
        minutes_text = ""

    if seconds > 0:
        seconds_text = f"{seconds:02d}" if show_minutes else str(seconds)
    elif show_minutes:
        seconds_text = "00"
    else:
        seconds_text = "0"

    ms_text = f".{ms:03d}" if show_ms else ""

    return f"{hours_text}{minutes_text}{seconds_text}{ms_text}"


def parse_pace_for_distance(distance: float) -> Callable[[str], float]:
    """Return a parser bound to one distance."""
    _check_distance(distance)
    return partial(parse_pace, reference_distance=distance)


def format_pace_for_distance(distance: float, show_ms: bool = False) -> Callable[[float], str]:
    """Return a formatter bound to one distance."""
    _check_distance(distance)
    return partial(format_pace, reference_distance=distance, show_ms=show_ms)


def speed_to_pace(kmh: float) -> float:
    """
    Convert a speed in km/h to a pace in milliseconds per meter.

    Raises:
        ValueError: If the speed is not positive
    """
    if not kmh > 0:
        raise ValueError(f"Speed must be positive, got {kmh}")
    return MS_PER_HOUR / (kmh * 1000)


def pace_to_speed(ms_per_meter: float) -> float:
    """Convert a pace in milliseconds per meter to km/h (0 for no pace)."""
    if ms_per_meter > 0:
        return MS_PER_HOUR / (ms_per_meter * 1000)
    return 0.0
