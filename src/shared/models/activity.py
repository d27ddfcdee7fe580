"""Activity data models."""

from datetime import UTC, date, datetime

from pydantic import BaseModel, Field

from .enums import SportType
from .units import km_to_meters, km_to_miles


class Activity(BaseModel):
    """
    One activity from the fitness-tracking export.

    All distance values are in kilometers, all durations in seconds.
    """

    # Required Fields
    activity_id: str = Field(
        description="Unique identifier for the activity",
        alias="activityId",
    )
    start_date_time_local: datetime = Field(
        description="Start time, with offset when the export provides one",
        alias="startDateTimeLocal",
    )
    distance: float = Field(
        description="Total distance in kilometers",
        ge=0,
    )
    duration: int = Field(
        description="Moving time in seconds, excluding pauses",
        ge=0,
    )

    # Metadata
    sport_type: SportType = Field(
        default=SportType.RUN,
        description="Type of activity",
        alias="sportType",
    )
    name: str | None = Field(
        default=None,
        description="Title given to the activity",
        max_length=255,
    )
    total_elevation_gain: float | None = Field(
        default=None,
        description="Elevation gain in meters",
        alias="totalElevationGain",
        ge=0,
    )

    model_config = {"populate_by_name": True}

    @property
    def start_utc(self) -> datetime:
        """Start time in UTC; a start without offset is taken as UTC."""
        start = self.start_date_time_local
        if start.tzinfo is None:
            return start.replace(tzinfo=UTC)
        return start.astimezone(UTC)

    @property
    def start_date(self) -> date:
        """Calendar day of the activity in UTC."""
        return self.start_utc.date()

    @property
    def distance_meters(self) -> float:
        """Get distance in meters."""
        return km_to_meters(self.distance)

    @property
    def distance_miles(self) -> float:
        """Get distance in miles."""
        return km_to_miles(self.distance)

    @property
    def average_pace_ms_per_meter(self) -> float:
        """Average pace in milliseconds per meter, the pace calculator's unit."""
        if self.distance > 0:
            return (self.duration * 1000) / self.distance_meters
        return 0.0

    @property
    def average_speed_kph(self) -> float:
        """Calculate average speed in kilometers per hour."""
        if self.duration > 0:
            return (self.distance / self.duration) * 3600
        return 0.0
