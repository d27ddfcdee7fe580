"""Shared fixtures for runstreak tests."""

import json
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from shared.config import reset_settings
from shared.models import Activity, SportType


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings built from a clean environment."""
    for name in (
        "ACTIVITIES_FILE",
        "TIMEZONE",
        "MIN_RUN_DISTANCE_KM",
        "DEFAULT_PACE",
        "PACE_DISTANCES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def august_dates():
    """Five-day streak ending Aug 15 followed by two isolated days."""
    return [
        date(2023, 8, 15),
        date(2023, 8, 14),
        date(2023, 8, 13),
        date(2023, 8, 12),
        date(2023, 8, 11),
        date(2023, 8, 8),
        date(2023, 8, 6),
    ]


@pytest.fixture
def history_dates():
    """August runs of at most three days plus a seven-day run in July."""
    return [
        date(2023, 8, 15),
        date(2023, 8, 13),
        date(2023, 8, 12),
        date(2023, 8, 11),
        date(2023, 8, 8),
        date(2023, 8, 6),
        date(2023, 8, 5),
        date(2023, 8, 4),
        date(2023, 8, 2),
        date(2023, 8, 1),
        date(2023, 7, 20),
        date(2023, 7, 19),
        date(2023, 7, 18),
        date(2023, 7, 17),
        date(2023, 7, 16),
        date(2023, 7, 15),
        date(2023, 7, 14),
        date(2023, 7, 10),
        date(2023, 7, 9),
    ]


def make_activity(
    activity_id: str,
    start: datetime,
    distance: float = 5.0,
    duration: int = 1800,
    sport_type: SportType = SportType.RUN,
    elevation: float | None = None,
) -> Activity:
    """Build an activity with sensible defaults."""
    return Activity(
        activity_id=activity_id,
        start_date_time_local=start,
        distance=distance,
        duration=duration,
        sport_type=sport_type,
        total_elevation_gain=elevation,
    )


@pytest.fixture
def activity_factory():
    """Factory for activities with sensible defaults."""
    return make_activity


@pytest.fixture
def activities():
    """Five consecutive days of running, a ride, a short jog and two older runs."""
    utc = timezone.utc
    return [
        make_activity("run-15", datetime(2023, 8, 15, 7, 30, tzinfo=utc), elevation=40),
        make_activity(
            "run-14", datetime(2023, 8, 14, 18, 0, tzinfo=utc), distance=10.0, duration=3000
        ),
        make_activity("run-13", datetime(2023, 8, 13, 6, 45, tzinfo=utc)),
        make_activity(
            "run-12", datetime(2023, 8, 12, 7, 0, tzinfo=utc), distance=21.1, duration=6600
        ),
        make_activity(
            "run-11",
            datetime(2023, 8, 11, 7, 0, tzinfo=utc),
            sport_type=SportType.TRAIL_RUN,
            elevation=300,
        ),
        make_activity(
            "ride-16",
            datetime(2023, 8, 16, 9, 0, tzinfo=utc),
            distance=40.0,
            duration=5400,
            sport_type=SportType.RIDE,
            elevation=450,
        ),
        # Too short to count toward the streak
        make_activity(
            "jog-16", datetime(2023, 8, 16, 19, 0, tzinfo=utc), distance=1.2, duration=480
        ),
        make_activity("run-08", datetime(2023, 8, 8, 7, 0, tzinfo=utc)),
        make_activity(
            "run-06", datetime(2023, 8, 6, 7, 0, tzinfo=utc), sport_type=SportType.VIRTUAL_RUN
        ),
    ]


@pytest.fixture
def activities_file(tmp_path: Path, activities) -> Path:
    """Write the activities fixture as a JSON export and return its path."""
    path = tmp_path / "activities.json"
    payload = [a.model_dump(mode="json", by_alias=True) for a in activities]
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
