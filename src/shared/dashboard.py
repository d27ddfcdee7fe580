"""Dashboard views built from the activity history."""

import logging
from collections.abc import Callable, Iterable
from datetime import date
from zoneinfo import ZoneInfo

from .models import Activity, SportTotals, SportType, StreakCard
from .models.units import MILES_TO_KM
from .streaks import calculate_streaks, find_streaks, top_streaks

logger = logging.getLogger(__name__)

UTC_ZONE = ZoneInfo("UTC")


def qualifying_runs(
    activities: Iterable[Activity], min_distance_km: float = MILES_TO_KM
) -> list[Activity]:
    """
    Runs that count toward the streak: run sport types longer than the minimum.

    Returns:
        Matching activities, newest first
    """
    runs = [a for a in activities if a.sport_type.is_run and a.distance > min_distance_km]
    runs.sort(key=lambda a: a.start_utc, reverse=True)
    return runs


def build_streak_card(
    activities: Iterable[Activity],
    today: date,
    zone: ZoneInfo = UTC_ZONE,
    min_distance_km: float = MILES_TO_KM,
    top_limit: int = 5,
) -> StreakCard:
    """
    Build the streak card for the dashboard.

    Args:
        activities: Full activity history
        today: Current day in the user's timezone
        zone: User's timezone, used to decide whether the last run was today
        min_distance_km: Shortest run that counts
        top_limit: Number of top streaks to include

    Returns:
        StreakCard with the current and longest streak
    """
    runs = qualifying_runs(activities, min_distance_km)
    run_dates = [run.start_date_time_local for run in runs]

    streaks = calculate_streaks(run_dates, today)
    last_run = runs[0] if runs else None
    ran_today = last_run is not None and last_run.start_utc.astimezone(zone).date() == today

    logger.info(
        f"{len(runs)} qualifying runs, streak {streaks.current_streak} days "
        f"(longest {streaks.longest_streak})"
    )
    return StreakCard(
        streak_count=streaks.current_streak,
        streak_start=streaks.current_streak_start,
        ran_today=ran_today,
        longest_streak=streaks.longest_streak,
        top_streaks=top_streaks(find_streaks(run_dates, today), top_limit),
        last_run=last_run,
    )


def sport_totals(activities: Iterable[Activity]) -> dict[SportType, SportTotals]:
    """Count, distance, moving time and climbing per sport type."""
    totals: dict[SportType, SportTotals] = {}
    for activity in activities:
        totals.setdefault(activity.sport_type, SportTotals()).add(activity)
    return totals


def total_stats(
    activities: Iterable[Activity],
    predicate: Callable[[Activity], bool] | None = None,
) -> SportTotals:
    """Totals over all activities, or those matching the predicate."""
    totals = SportTotals()
    for activity in activities:
        if predicate is None or predicate(activity):
            totals.add(activity)
    return totals


def is_run(activity: Activity) -> bool:
    """Predicate for running activities."""
    return activity.sport_type.is_run


def is_ski(activity: Activity) -> bool:
    """Predicate for cross-country skiing activities."""
    return activity.sport_type.is_ski
