"""Tests for domain models and errors."""

from __future__ import annotations

import pytest

from roadtrip.domain.errors import InputFormatError, NoSuchVertexError, RoadTripError
from roadtrip.domain.models import RoadSegment, Trip, TripMetric, TripResult


def test_road_segment_validation():
    assert RoadSegment(0.0, 10.0).hours == 0.0
    with pytest.raises(ValueError):
        RoadSegment(-1.0, 10.0)
    with pytest.raises(ValueError):
        RoadSegment(1.0, 0.0)


@pytest.mark.parametrize(
    "miles, mph",
    [
        (float("nan"), 60.0),
        (10.0, float("nan")),
        (float("inf"), 60.0),
        (10.0, float("inf")),
    ],
)
def test_road_segment_rejects_non_finite(miles, mph):
    with pytest.raises(ValueError, match="finite"):
        RoadSegment(miles, mph)


def test_metric_weights():
    segment = RoadSegment(miles=30.0, miles_per_hour=60.0)

    assert TripMetric.DISTANCE.weight(segment) == 30.0
    assert TripMetric.TIME.weight(segment) == 0.5


@pytest.mark.parametrize(
    "code, metric",
    [("D", TripMetric.DISTANCE), ("t", TripMetric.TIME), (" T ", TripMetric.TIME)],
)
def test_metric_codes(code, metric):
    assert TripMetric.from_code(code) is metric


def test_unknown_metric_code():
    with pytest.raises(ValueError, match="Unknown trip metric"):
        TripMetric.from_code("X")


def test_trip_defaults_to_distance():
    assert Trip(0, 1).metric is TripMetric.DISTANCE


def test_empty_trip_result():
    result = TripResult(trip=Trip(3, 3), origin="Irvine")

    assert result.is_empty
    assert result.destination == "Irvine"
    assert result.path == (3,)
    assert result.total_miles == 0


def test_error_messages():
    cause = ValueError("bad float")
    error = InputFormatError("Invalid road segment", line_number=3, cause=cause)

    assert str(error) == "Invalid road segment: bad float"
    assert isinstance(error, RoadTripError)
    assert str(NoSuchVertexError("Vertex not in graph: 4", vertex=4)) == (
        "Vertex not in graph: 4"
    )
