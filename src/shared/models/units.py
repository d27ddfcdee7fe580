"""Unit conversion utilities for distance."""

from enum import Enum


class UnitSystem(str, Enum):
    """Unit system for distance measurements."""

    METRIC = "metric"  # kilometers
    IMPERIAL = "imperial"  # miles


# Conversion constants
KM_TO_MILES = 0.621371
MILES_TO_KM = 1.609344
METERS_PER_KM = 1000


def km_to_miles(km: float) -> float:
    """
    Convert kilometers to miles.

    Args:
        km: Distance in kilometers

    Returns:
        Distance in miles
    """
    return km * KM_TO_MILES


def miles_to_km(miles: float) -> float:
    """
    Convert miles to kilometers.

    Args:
        miles: Distance in miles

    Returns:
        Distance in kilometers
    """
    return miles * MILES_TO_KM


def km_to_meters(km: float) -> float:
    """Convert kilometers to meters."""
    return km * METERS_PER_KM


def format_distance(distance: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format distance with appropriate unit label.

    Args:
        distance: Distance in kilometers or miles
        unit: Unit system for label

    Returns:
        Formatted distance string (e.g., "5.24 mi" or "8.43 km")
    """
    unit_label = "mi" if unit == UnitSystem.IMPERIAL else "km"
    return f"{distance:.2f} {unit_label}"
