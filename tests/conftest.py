from __future__ import annotations

from pathlib import Path

import pytest

from roadtrip.config import reset_config
from roadtrip.container import reset_container
from roadtrip.domain.models import Location, RoadSegment
from roadtrip.graph.digraph import Digraph
from roadtrip.ports.graph import RoadMap

DATA_DIR = Path(__file__).resolve().parent / "data"

A, B, C, D, E = range(5)


@pytest.fixture(autouse=True)
def fresh_state():
    """Every test starts with freshly loaded configuration and container."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def weighted_graph() -> Digraph[str, float]:
    """A->B (1), B->C (2), A->C (5), C->D (1)."""
    graph: Digraph[str, float] = Digraph()
    for vertex, name in zip((A, B, C, D), "ABCD"):
        graph.add_vertex(vertex, name)
    graph.add_edge(A, B, 1.0)
    graph.add_edge(B, C, 2.0)
    graph.add_edge(A, C, 5.0)
    graph.add_edge(C, D, 1.0)
    return graph


@pytest.fixture
def road_map() -> RoadMap:
    """Two-way triangle Anaheim - Irvine - Tustin."""
    road_map: RoadMap = RoadMap()
    road_map.add_vertex(0, Location("Anaheim"))
    road_map.add_vertex(1, Location("Irvine"))
    road_map.add_vertex(2, Location("Tustin"))
    for from_vertex, to_vertex, miles, mph in [
        (0, 1, 10.0, 60.0),
        (1, 0, 10.0, 60.0),
        (1, 2, 3.0, 30.0),
        (2, 1, 3.0, 30.0),
        (0, 2, 12.0, 30.0),
        (2, 0, 12.0, 30.0),
    ]:
        road_map.add_edge(from_vertex, to_vertex, RoadSegment(miles, mph))
    return road_map
