"""Pace calculator commands for stk CLI."""

import json

import typer

from cli import display
from shared.config import get_settings
from shared.errors import RunStreakError
from shared.pace import (
    format_pace,
    is_valid_speed,
    is_valid_time,
    pace_table,
    pace_to_speed,
    sort_distances,
    parse_pace,
    speed_to_pace,
    step_pace,
)


def _parse(value: str, distance: float) -> float:
    """Parse a time typed on the command line, exiting on bad input."""
    if not is_valid_time(value):
        display.display_error(f"Invalid time: {value} (expected [[H:]MM:]SS[.mmm])")
        raise typer.Exit(code=1)
    try:
        return parse_pace(value, distance)
    except (RunStreakError, ValueError) as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e


def pace(
    value: str | None = typer.Argument(None, help="Time for the distance, e.g. 4:30"),
    distance: float = typer.Option(1000, "--distance", "-d", help="Distance of the time in meters"),
    speed: str | None = typer.Option(None, "--speed", "-s", help="Speed in km/h instead of a time"),
    sort: bool = typer.Option(False, "--sort", help="Show distances shortest first"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show a pace as the time for each distance."""
    if speed is not None:
        if not is_valid_speed(speed) or float(speed) <= 0:
            display.display_error(f"Invalid speed: {speed} (expected SSS.FF km/h)")
            raise typer.Exit(code=1)
        ms_per_meter = speed_to_pace(float(speed))
    else:
        ms_per_meter = _parse(value or get_settings().default_pace, distance)

    distances = get_settings().pace_distances
    if sort:
        distances = sort_distances(distances)
    rows = pace_table(ms_per_meter, distances)
    speed_kmh = pace_to_speed(ms_per_meter)

    if json_output:
        data = {
            "pace_ms_per_meter": ms_per_meter,
            "speed_kmh": round(speed_kmh, 2),
            "distances": [
                {
                    "id": row.id,
                    "label": row.label,
                    "distance_in_meters": row.distance_in_meters,
                    "time": formatted,
                }
                for row, formatted in rows
            ],
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_pace_table(rows, speed_kmh)


def step(
    value: str = typer.Argument(..., help="Time as displayed, e.g. 1:04:30"),
    cursor: int = typer.Option(0, "--cursor", "-c", help="Cursor position in the time"),
    down: bool = typer.Option(False, "--down", help="Step down instead of up"),
    distance: float = typer.Option(1000, "--distance", "-d", help="Distance of the time in meters"),
) -> None:
    """Step the unit under the cursor by one, like the arrow keys in a pace field."""
    ms_per_meter = _parse(value, distance)
    stepped = step_pace(ms_per_meter, value, cursor, distance, "down" if down else "up")
    print(format_pace(stepped, distance, show_ms="." in value))
