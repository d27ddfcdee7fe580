"""Streak summary models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .activity import Activity


class StreakSummary(BaseModel):
    """Current streak measured back from a reference date."""

    model_config = ConfigDict(frozen=True)

    streak_count: int = Field(ge=0, description="Consecutive days in the current streak")
    streak_start: date = Field(
        description="First day of the streak, or the reference date when it is 0"
    )


class LongestStreakSummary(BaseModel):
    """Current streak plus the longest run found anywhere in the history."""

    model_config = ConfigDict(frozen=True)

    current_streak: int = Field(ge=0)
    current_streak_start: date
    longest_streak: int = Field(ge=0)
    longest_streak_start: date
    longest_streak_end: date


class StreakRun(BaseModel):
    """One maximal run of consecutive days."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    length_days: int = Field(ge=1)
    is_current: bool = False


class StreakCard(BaseModel):
    """Everything the streak card on the dashboard shows."""

    streak_count: int = Field(ge=0)
    streak_start: date
    ran_today: bool = False
    longest_streak: int = Field(default=0, ge=0)
    top_streaks: list[StreakRun] = Field(default_factory=list)
    last_run: Activity | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def year_progress_percent(self) -> float:
        """Share of a full year the current streak covers, as a percentage."""
        return self.streak_count / 365 * 100


class SportTotals(BaseModel):
    """Aggregated totals for one sport (or for everything)."""

    count: int = 0
    distance: float = Field(default=0.0, description="Total distance in kilometers")
    duration: int = Field(default=0, description="Total moving time in seconds")
    total_elevation_gain: float = Field(default=0.0, description="Meters climbed")

    def add(self, activity: Activity) -> None:
        """Accumulate one activity into the totals."""
        self.count += 1
        self.distance += activity.distance
        self.duration += activity.duration
        self.total_elevation_gain += activity.total_elevation_gain or 0.0
