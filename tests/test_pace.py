"""Tests for pace parsing and formatting."""

import math

import pytest

from shared.errors import MalformedDurationError
from shared.pace import (
    duration_to_ms,
    format_pace,
    format_pace_for_distance,
    pace_to_speed,
    parse_pace,
    parse_pace_for_distance,
    speed_to_pace,
)

# (distance, duration, ms per unit): parse and format with milliseconds agree
PACE_PAIRS = [
    (1000, "4:30.000", 270),
    (1000, "4:30.500", 270.5),
    (1000, "30.500", 30.5),
    (1000, "15:15.250", 915.25),
    (1000, "15:15.000", 915),
]


@pytest.mark.parametrize("distance,duration,ms", PACE_PAIRS)
def test_parse_pace_pairs(distance, duration, ms):
    """Canonical strings parse to their pace."""
    assert parse_pace(duration, distance) == ms


@pytest.mark.parametrize("distance,duration,ms", PACE_PAIRS)
def test_format_pace_pairs(distance, duration, ms):
    """Paces format back to the canonical string."""
    assert format_pace(ms, distance, True) == duration


@pytest.mark.parametrize(
    "distance,duration,expected",
    [
        (1000, "4:30", 270),
        (1000, "04:30", 270),
        (1000, "4:30.0", 270),
        (1000, "4:30.00", 270),
        (1000, "4:30.000", 270),
        (1000, "4:30.500", 270.5),
        (1000, "4:30.50", 270.5),
        (1000, "4:30.5", 270.5),
        (1000, "00:04:30.05", 270.05),
        (10_000, "00:04:30.5", 27.05),
        (10_000, "01:04:30.5", 387.05),
        (100, "9.75", 97.5),
        (100, "0.5", 5),
    ],
)
def test_parse_pace_formats(distance, duration, expected):
    """Flexible digit counts and omitted segments all parse."""
    assert parse_pace(duration, distance) == expected


@pytest.mark.parametrize(
    "distance,ms,show_ms,expected",
    [
        (1000, 270, False, "4:30"),
        (1000, 270, True, "4:30.000"),
        (1000, 270.5, True, "4:30.500"),
        (1000, 270.5, False, "4:30"),
        (10_000, 27.05, True, "4:30.500"),
        (10_000, 387.05, True, "1:04:30.500"),
        (10_000, 387.05, False, "1:04:30"),
        (100, 97.5, True, "9.750"),
        (100, 5, True, "0.500"),
    ],
)
def test_format_pace(distance, ms, show_ms, expected):
    """Formatting produces the shortest natural reading."""
    assert format_pace(ms, distance, show_ms) == expected


def test_format_pace_defaults_to_kilometer():
    """Without arguments the time per 1000 units is shown without milliseconds."""
    assert format_pace(300) == "5:00"


def test_format_pace_zero():
    """Zero renders as a single 0."""
    assert format_pace(0) == "0"
    assert format_pace(0, 1000, True) == "0.000"


def test_format_pace_whole_minutes():
    """Whole minutes keep a two-digit seconds segment."""
    assert format_pace(60) == "1:00"
    assert format_pace(600) == "10:00"


def test_format_pace_seconds_not_padded_without_minutes():
    """Seconds alone are not zero-padded."""
    assert format_pace(5) == "5"
    assert format_pace(59.999, 1000, True) == "59.999"


def test_format_pace_hour_with_zero_minutes():
    """Minutes are kept under an hour so the value cannot be misread."""
    assert format_pace(3605) == "1:00:05"
    assert format_pace(3600) == "1:00:00"
    assert parse_pace(format_pace(3605)) == 3605


def test_format_pace_truncates_milliseconds():
    """Milliseconds are truncated, not rounded."""
    assert format_pace(270.9999, 1000, True) == "4:30.999"


def test_format_pace_negative_shown_as_zero():
    """A pace stepped below zero shows as zero."""
    assert format_pace(-5) == "0"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_pace_rejects_non_finite(value):
    """Only finite numbers can be formatted."""
    with pytest.raises(ValueError, match="finite"):
        format_pace(value)


@pytest.mark.parametrize("distance", [0, -100])
def test_reference_distance_must_be_positive(distance):
    """Both directions reject a non-positive distance."""
    with pytest.raises(ValueError, match="positive"):
        parse_pace("4:30", distance)
    with pytest.raises(ValueError, match="positive"):
        format_pace(270, distance)


@pytest.mark.parametrize(
    "duration", ["", "abc", "4:30:", ":30", "1:2:3:4", "4:30.1234", "4,30", "4:30.", "-4:30"]
)
def test_parse_pace_malformed(duration):
    """Strings outside the grammar raise instead of producing NaN."""
    with pytest.raises(MalformedDurationError) as exc_info:
        parse_pace(duration)

    assert exc_info.value.duration == duration
    assert isinstance(exc_info.value, ValueError)


def test_parse_pace_strips_whitespace():
    """Surrounding whitespace is ignored."""
    assert parse_pace(" 4:30 ") == 270


def test_parse_pace_allows_large_minutes():
    """Minutes above 59 are read as given."""
    assert parse_pace("90:00") == 5400


def test_duration_to_ms():
    """Durations convert to whole milliseconds."""
    assert duration_to_ms("1:04:30.5") == 3_870_500
    assert duration_to_ms("0.1") == 100
    assert duration_to_ms("1:00") == 60_000


@pytest.mark.parametrize("distance", [100, 1000, 1609.34, 10_000, 42_195])
@pytest.mark.parametrize(
    "ms_per_unit", [0, 0.001, 1, 5, 97.5, 270.05, 333.333, 1234.567, 3599.999, 86_400]
)
def test_format_then_parse_round_trip(ms_per_unit, distance):
    """Formatting with milliseconds and parsing back loses less than a millisecond."""
    formatted = format_pace(ms_per_unit, distance, True)

    assert parse_pace(formatted, distance) == pytest.approx(ms_per_unit, abs=1 / distance)


@pytest.mark.parametrize(
    "duration,canonical",
    [
        ("04:30", "4:30.000"),
        ("4:30.5", "4:30.500"),
        ("00:04:30.05", "4:30.050"),
        ("1:4:3", "1:04:03.000"),
        ("30.5", "30.500"),
    ],
)
def test_parse_then_format_is_canonical(duration, canonical):
    """Parsing and formatting at the same distance gives the canonical spelling."""
    assert format_pace(parse_pace(duration, 1000), 1000, True) == canonical


def test_bound_converters():
    """Converters bound to a distance behave like the two-argument calls."""
    parse_100m = parse_pace_for_distance(100)
    format_100m = format_pace_for_distance(100, show_ms=True)

    assert parse_100m("9.75") == 97.5
    assert format_100m(97.5) == "9.750"
    assert format_pace_for_distance(1000)(270.5) == "4:30"


def test_speed_conversion():
    """12 km/h is 5:00 per kilometer."""
    pace = speed_to_pace(12)

    assert pace == pytest.approx(300)
    assert format_pace(pace) == "5:00"
    assert pace_to_speed(pace) == pytest.approx(12)


def test_speed_conversion_edges():
    """Zero pace has no speed; zero speed has no pace."""
    assert pace_to_speed(0) == 0.0
    with pytest.raises(ValueError):
        speed_to_pace(0)
