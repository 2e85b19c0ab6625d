"""Tests for the trip planner service and the Dijkstra trip solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import pytest

from roadtrip.adapters.cache import InMemoryCache, NullCache
from roadtrip.adapters.graph import DijkstraTripSolver
from roadtrip.adapters.rendering import TextTripWriter
from roadtrip.domain.errors import (
    DisconnectedMapError,
    NoRouteFoundError,
    NoSuchVertexError,
)
from roadtrip.domain.models import Location, Trip, TripMetric
from roadtrip.services import TripPlannerService


@dataclass
class CountingSolver(DijkstraTripSolver):
    """Dijkstra solver that records every shortest-path computation."""

    calls: List[Tuple[int, TripMetric]] = field(default_factory=list)

    def shortest_paths(self, road_map, start, metric) -> Dict[int, int]:
        self.calls.append((start, metric))
        return super().shortest_paths(road_map, start, metric)


def make_planner(**kwargs) -> TripPlannerService:
    kwargs.setdefault("solver", DijkstraTripSolver())
    return TripPlannerService(writer=TextTripWriter(), **kwargs)


def test_solver_distance_route(road_map):
    result = DijkstraTripSolver().solve(road_map, Trip(0, 2, TripMetric.DISTANCE))

    assert result.path == (0, 2)
    assert result.origin == "Anaheim"
    assert result.destination == "Tustin"
    assert result.total_miles == 12.0


def test_solver_time_route(road_map):
    result = DijkstraTripSolver().solve(road_map, Trip(0, 2, TripMetric.TIME))

    assert result.path == (0, 1, 2)
    assert [leg.location for leg in result.legs] == ["Irvine", "Tustin"]
    assert result.total_miles == 13.0
    assert result.total_hours == pytest.approx(10 / 60 + 3 / 30)


def test_solver_trip_to_start(road_map):
    result = DijkstraTripSolver().solve(road_map, Trip(1, 1, TripMetric.TIME))

    assert result.is_empty
    assert result.destination == "Irvine"
    assert result.total_hours == 0


def test_solver_unreachable(road_map):
    road_map.add_vertex(3, Location("Nowhere"))

    with pytest.raises(NoRouteFoundError) as excinfo:
        DijkstraTripSolver().solve(road_map, Trip(0, 3))

    assert (excinfo.value.start, excinfo.value.end) == (0, 3)


@pytest.mark.parametrize("trip", [Trip(9, 0), Trip(0, 9)])
def test_solver_unknown_location(road_map, trip):
    with pytest.raises(NoSuchVertexError):
        DijkstraTripSolver().solve(road_map, trip)


def test_plan_preserves_request_order(road_map):
    trips = [Trip(0, 2, TripMetric.TIME), Trip(2, 0), Trip(1, 0, TripMetric.TIME)]

    results = make_planner().plan(road_map, trips)

    assert [result.trip for result in results] == trips
    assert results[0].path == (0, 1, 2)
    assert results[1].path == (2, 0)


def test_plan_reuses_predecessors_per_start_and_metric(road_map):
    solver = CountingSolver()
    planner = make_planner(solver=solver, cache=InMemoryCache(name="test"))
    trips = [
        Trip(0, 1),
        Trip(0, 2),
        Trip(0, 2, TripMetric.TIME),
        Trip(1, 2),
        Trip(0, 1, TripMetric.TIME),
    ]

    planner.plan(road_map, trips)

    assert solver.calls == [
        (0, TripMetric.DISTANCE),
        (0, TripMetric.TIME),
        (1, TripMetric.DISTANCE),
    ]


def test_plan_without_cache_recomputes(road_map):
    solver = CountingSolver()
    planner = make_planner(solver=solver, cache=NullCache())

    planner.plan(road_map, [Trip(0, 1), Trip(0, 2)])

    assert len(solver.calls) == 2


def test_cache_does_not_leak_between_road_maps(road_map):
    planner = make_planner()
    assert planner.plan(road_map, [Trip(0, 2)])[0].path == (0, 2)

    other = road_map.copy()
    other.remove_edge(0, 2)
    assert planner.plan(other, [Trip(0, 2)])[0].path == (0, 1, 2)


def test_plan_rejects_disconnected_map(road_map):
    road_map.remove_edge(1, 0)
    road_map.remove_edge(2, 0)

    with pytest.raises(DisconnectedMapError) as excinfo:
        make_planner().plan(road_map, [Trip(0, 1)])

    assert excinfo.value.vertex_count == 3
    assert str(excinfo.value) == "Disconnected Map"


def test_plan_allows_disconnected_map_when_configured(road_map):
    road_map.remove_edge(1, 0)
    road_map.remove_edge(2, 0)
    planner = make_planner(require_strongly_connected=False)

    results = planner.plan(road_map, [Trip(0, 2, TripMetric.TIME)])
    assert results[0].path == (0, 1, 2)

    with pytest.raises(NoRouteFoundError):
        planner.plan(road_map, [Trip(2, 0)])


def test_plan_and_format(road_map):
    text = make_planner().plan_and_format(road_map, [Trip(0, 2), Trip(2, 0)])

    blocks = text.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("Shortest distance from Anaheim to Tustin")
    assert blocks[1].endswith("Total distance: 12.0 miles")
