"""Pace calculator distance models."""

from pydantic import BaseModel, Field


class PaceDistance(BaseModel):
    """A named distance shown as one row of the pace calculator."""

    id: str = Field(min_length=1)
    label: str = Field(
        min_length=1,
        max_length=20,
        description="Text shown next to the formatted time",
    )
    distance_in_meters: float = Field(
        ge=1,
        le=100_000_000,
        alias="distanceInMeters",
    )
    show_ms: bool = Field(
        default=False,
        description="Show milliseconds in the formatted time",
        alias="showMs",
    )

    model_config = {"populate_by_name": True}


DEFAULT_DISTANCES: tuple[PaceDistance, ...] = (
    PaceDistance(id="100m", label="100m", distance_in_meters=100, show_ms=True),
    PaceDistance(id="1km", label="min/km", distance_in_meters=1000),
    PaceDistance(id="1500m", label="1500m", distance_in_meters=1500),
    PaceDistance(id="mile", label="min/mile", distance_in_meters=1609.34),
    PaceDistance(id="3000m", label="3000m", distance_in_meters=3000),
    PaceDistance(id="5km", label="5k", distance_in_meters=5000),
    PaceDistance(id="10km", label="10k", distance_in_meters=10_000),
    PaceDistance(id="15km", label="15k", distance_in_meters=15_000),
)
