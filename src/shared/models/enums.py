"""Enumeration types for activity data models."""

from enum import Enum


class SportType(str, Enum):
    """Sport type as reported by the fitness-tracking service."""

    RUN = "Run"
    TRAIL_RUN = "TrailRun"
    VIRTUAL_RUN = "VirtualRun"
    WALK = "Walk"
    HIKE = "Hike"
    RIDE = "Ride"
    VIRTUAL_RIDE = "VirtualRide"
    SWIM = "Swim"
    NORDIC_SKI = "NordicSki"
    BACKCOUNTRY_SKI = "BackcountrySki"
    ALPINE_SKI = "AlpineSki"
    WORKOUT = "Workout"

    @property
    def is_run(self) -> bool:
        """Whether this sport counts as running."""
        return self in RUN_SPORT_TYPES

    @property
    def is_ski(self) -> bool:
        """Whether this sport counts as cross-country skiing."""
        return self in SKI_SPORT_TYPES


RUN_SPORT_TYPES = frozenset({SportType.RUN, SportType.TRAIL_RUN, SportType.VIRTUAL_RUN})
SKI_SPORT_TYPES = frozenset({SportType.NORDIC_SKI, SportType.BACKCOUNTRY_SKI})
