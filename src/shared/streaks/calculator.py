"""
Running streak calculation.

A streak is a run of calendar days, each with at least one qualifying
activity, where no two consecutive days in the run are more than one day
apart. Time of day is ignored: every input is truncated to its UTC day
before any comparison, so several activities on one day count once.

All functions are pure. Input values are never modified; normalized copies
are made instead.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import UTC, date, datetime

from ..errors import InvalidInputError
from ..models.streak import LongestStreakSummary, StreakRun, StreakSummary

logger = logging.getLogger(__name__)

DateLike = date | datetime | str


def normalize_date(value: DateLike) -> date:
    """
    Truncate a date-like value to its calendar day in UTC.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    to already be in UTC. ISO-8601 strings are parsed.

    Args:
        value: date, datetime or ISO-8601 string

    Returns:
        The calendar day

    Raises:
        InvalidInputError: If the value cannot be read as a date
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidInputError(value) from e

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    if isinstance(value, date):
        return date(value.year, value.month, value.day)

    raise InvalidInputError(value)


def _distinct_days(dates: Iterable[DateLike]) -> list[date]:
    """Normalize, de-duplicate and sort days newest first."""
    return sorted({normalize_date(d) for d in dates}, reverse=True)


def _walk_current(days: list[date], reference: date) -> StreakSummary:
    anchor = reference
    count = 0
    for day in days:
        if (anchor - day).days > 1:
            break
        count += 1
        anchor = day
    return StreakSummary(streak_count=count, streak_start=anchor)


def _iter_runs(days: list[date]) -> Iterator[tuple[date, date, int]]:
    """Yield (start, end, length) for each maximal run, newest run first."""
    if not days:
        return
    end = start = days[0]
    length = 1
    for day in days[1:]:
        if (start - day).days > 1:
            yield start, end, length
            end = day
            length = 0
        start = day
        length += 1
    yield start, end, length


def calculate_streak(dates: Iterable[DateLike], reference_date: DateLike) -> StreakSummary:
    """
    Count the consecutive days ending within one day of the reference date.

    The walk starts at the reference day and moves backward one accepted
    day at a time: a day is accepted while it is no more than one day
    before the previously accepted day. The reference day itself does not
    need an activity, so a streak stays alive until the end of the day
    after the last run.

    Input order does not matter; days are sorted newest first internally.

    Args:
        dates: Activity dates (date, datetime or ISO-8601 string)
        reference_date: Day the streak is measured back from, normally today

    Returns:
        StreakSummary with the count and the first day of the streak.
        A broken streak has count 0 and starts on the reference day.

    Raises:
        InvalidInputError: If any element is not a date
    """
    reference = normalize_date(reference_date)
    summary = _walk_current(_distinct_days(dates), reference)
    logger.debug(f"Streak of {summary.streak_count} days as of {reference}")
    return summary


def calculate_streaks(
    dates: Iterable[DateLike], reference_date: DateLike
) -> LongestStreakSummary:
    """
    Compute the current streak and the longest streak in the whole history.

    The current streak follows the same rule as calculate_streak. The
    longest streak is independent of the reference date. When two runs have
    the same length the older one is reported.

    Raises:
        InvalidInputError: If any element is not a date
    """
    reference = normalize_date(reference_date)
    days = _distinct_days(dates)
    current = _walk_current(days, reference)

    longest = 0
    longest_start = longest_end = reference
    for start, end, length in _iter_runs(days):
        # Runs arrive newest first, so >= lets the older run win a tie
        if length >= longest:
            longest = length
            longest_start = start
            longest_end = end

    logger.debug(
        f"Current streak {current.streak_count}, longest {longest} "
        f"({longest_start} to {longest_end})"
    )
    return LongestStreakSummary(
        current_streak=current.streak_count,
        current_streak_start=current.streak_start,
        longest_streak=longest,
        longest_streak_start=longest_start,
        longest_streak_end=longest_end,
    )


def find_streaks(dates: Iterable[DateLike], reference_date: DateLike) -> list[StreakRun]:
    """
    List every maximal run of consecutive days, newest first.

    The run that makes up the current streak, if any, is flagged with
    is_current.
    """
    reference = normalize_date(reference_date)
    days = _distinct_days(dates)
    current = _walk_current(days, reference)

    runs = []
    for index, (start, end, length) in enumerate(_iter_runs(days)):
        runs.append(
            StreakRun(
                start_date=start,
                end_date=end,
                length_days=length,
                is_current=index == 0 and current.streak_count > 0,
            )
        )
    return runs


def top_streaks(runs: list[StreakRun], limit: int = 5) -> list[StreakRun]:
    """Longest runs first; among equal lengths the older run comes first."""
    return sorted(reversed(runs), key=lambda run: run.length_days, reverse=True)[:limit]
