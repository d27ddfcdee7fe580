"""Pace calculator table: one pace shown across several distances."""

from collections.abc import Iterable

from ..models.pace import DEFAULT_DISTANCES, PaceDistance
from .codec import format_pace_for_distance


def pace_table(
    ms_per_meter: float,
    distances: Iterable[PaceDistance] = DEFAULT_DISTANCES,
) -> list[tuple[PaceDistance, str]]:
    """
    Format a pace as the time for each distance.

    Args:
        ms_per_meter: Pace in milliseconds per meter
        distances: Rows to show, in display order

    Returns:
        (distance, formatted time) pairs in the order given
    """
    rows = []
    for distance in distances:
        formatter = format_pace_for_distance(distance.distance_in_meters, distance.show_ms)
        rows.append((distance, formatter(ms_per_meter)))
    return rows


def sort_distances(distances: Iterable[PaceDistance]) -> list[PaceDistance]:
    """Order distances from shortest to longest."""
    return sorted(distances, key=lambda d: d.distance_in_meters)
