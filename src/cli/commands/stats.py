"""Streak, stats and activity list commands for stk CLI."""

import json
from datetime import date, datetime

import typer

from cli import display
from shared.config import get_settings
from shared.dashboard import build_streak_card, is_run, is_ski, sport_totals, total_stats
from shared.errors import RunStreakError
from shared.models import Activity
from shared.storage import load_activities


def _load(file: str | None) -> list[Activity]:
    """Load the activities export, exiting with an error message on failure."""
    settings = get_settings()
    try:
        return load_activities(file or settings.activities_file)
    except RunStreakError as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e


def _today(value: str | None) -> date:
    if value:
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            display.display_error(f"Invalid date: {value} (expected YYYY-MM-DD)")
            raise typer.Exit(code=1) from e
    return datetime.now(get_settings().zone).date()


def streak(
    file: str | None = typer.Option(None, "--file", "-f", help="Activities JSON export"),
    today: str | None = typer.Option(None, "--today", "-t", help="Measure up to date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show your current running streak."""
    settings = get_settings()
    activities = _load(file)
    reference = _today(today)

    card = build_streak_card(
        activities,
        reference,
        zone=settings.zone,
        min_distance_km=settings.min_run_distance_km,
    )

    if json_output:
        print(json.dumps(card.model_dump(mode="json", by_alias=True), indent=2))
    else:
        display.display_streak(card, reference)


def overall(
    file: str | None = typer.Option(None, "--file", "-f", help="Activities JSON export"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show totals per sport."""
    activities = _load(file)
    totals = sport_totals(activities)
    runs = total_stats(activities, is_run)
    skis = total_stats(activities, is_ski)
    everything = total_stats(activities)

    if json_output:
        data = {
            "sports": {sport.value: row.model_dump() for sport, row in totals.items()},
            "runs": runs.model_dump(),
            "skis": skis.model_dump(),
            "total": everything.model_dump(),
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_sport_totals(totals, runs, skis, everything)


def list_runs(
    file: str | None = typer.Option(None, "--file", "-f", help="Activities JSON export"),
    offset: int = typer.Option(0, "--offset", "-o", help="Pagination offset", min=0),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of activities", min=1),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """List activities, newest first."""
    activities = _load(file)
    page = activities[offset : offset + limit]

    if json_output:
        data = {
            "total": len(activities),
            "offset": offset,
            "activities": [a.model_dump(mode="json", by_alias=True) for a in page],
        }
        print(json.dumps(data, indent=2))
    else:
        if page:
            display.display_info(
                f"Showing {offset + 1}-{offset + len(page)} of {len(activities)}"
            )
        display.display_activities(page)
