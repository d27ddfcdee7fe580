"""Display formatting for times, distances and dates."""

import calendar
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

_EPOCH = datetime(1970, 1, 1)


def pluralize(num: float, word: str, plural: str | None = None) -> str:
    """Return word for 1 or -1, otherwise its plural (word + "s" by default)."""
    if num in (1, -1):
        return word
    return plural if plural is not None else f"{word}s"


def format_time(time_in_seconds: float) -> str:
    """Format seconds as zero-padded HH:MM:SS."""
    total = int(time_in_seconds)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_distance_meters(distance_in_meters: float) -> str:
    """
    Format a distance in meters the way the activity list shows it.

    Under a kilometer the meters are shown ("950m"); otherwise kilometers
    rounded to two decimals with a "k" suffix ("5k", "21.10k").
    """
    if distance_in_meters < 1000:
        return f"{distance_in_meters:g}m"

    km = round(distance_in_meters / 1000, 2)
    if km % 1 == 0:
        return f"{int(km)}k"
    return f"{km:.2f}k"


def format_activity_date(value: datetime) -> str:
    """Format an activity start as e.g. "Tuesday 2023-08-15 07:30"."""
    return value.strftime("%A %Y-%m-%d %H:%M")


def format_since(value: date) -> str:
    """Format a streak start as e.g. "August 11, 2023"."""
    return f"{calendar.month_name[value.month]} {value.day}, {value.year}"


def calendar_difference(start: date, end: date) -> tuple[int, int, int]:
    """
    Split the span between two dates into whole years, months and days.

    Months are counted on the calendar, clamping to the last day of shorter
    months, so Jan 31 to Mar 2 is 1 month and 2 days.
    """
    delta = relativedelta(end, start)
    return delta.years, delta.months, delta.days


def _join_parts(parts: list[str]) -> str:
    if len(parts) == 1:
        return parts[0]
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


def format_streak_duration(streak_start: str | date | None, today: date) -> str | None:
    """
    Describe how long a streak has been running.

    A start after today (a late run west of UTC lands on the next UTC day)
    counts as a streak started today.

    Args:
        streak_start: First day of the streak (ISO date string or date)
        today: Day to measure up to

    Returns:
        Text like "11 years, 3 months and 5 days", or None without a start
    """
    if streak_start is None:
        return None
    if isinstance(streak_start, str):
        streak_start = date.fromisoformat(streak_start)

    years, months, days = calendar_difference(streak_start, max(today, streak_start))
    parts = [
        f"{value} {pluralize(value, unit)}"
        for value, unit in ((years, "year"), (months, "month"), (days, "day"))
        if value
    ]
    if not parts:
        return "0 days"
    return _join_parts(parts)


def format_moving_time(seconds: float) -> str:
    """
    Describe a moving time in words, e.g. "3 days 4 hours 12 minutes".

    Years and months are counted on the calendar from the Unix epoch;
    seconds are dropped. Zero units are left out.
    """
    delta = relativedelta(_EPOCH + timedelta(seconds=int(seconds)), _EPOCH)

    parts = [
        f"{value} {pluralize(value, unit)}"
        for value, unit in (
            (delta.years, "year"),
            (delta.months, "month"),
            (delta.days, "day"),
            (delta.hours, "hour"),
            (delta.minutes, "minute"),
        )
        if value
    ]
    return " ".join(parts) if parts else "0 minutes"
