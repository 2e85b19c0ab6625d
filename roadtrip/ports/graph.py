"""Graph ports - Abstractions for road map loading and routing.

These protocols define the contracts for graph operations, including
loading road maps and trips and computing the best route for a trip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Protocol, Sequence, TextIO, Tuple

from ..domain.models import Location, RoadSegment
from ..graph.digraph import Digraph

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.models import RoadTripInput, Trip, TripMetric, TripResult

# Road map type alias - vertices are locations, edges are road segments
RoadMap = Digraph[Location, RoadSegment]


class RoadMapReaderPort(Protocol):
    """Port for reading a road map and its trips from text.

    Implementation: adapters/graph/text_reader.py
    """

    def read(self, stream: TextIO) -> RoadTripInput:
        """Parse a road map followed by trip requests.

        Args:
            stream: Text stream in the road map input format.

        Returns:
            The road map and the requested trips.
        """
        ...

    def read_path(self, path: Path) -> RoadTripInput:
        """Parse a road map input file."""
        ...


class RoadMapRepositoryPort(Protocol):
    """Port for loading road map data from persistent storage.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> RoadMap:
        """Load the road map.

        Returns:
            The road map digraph.
        """
        ...

    def load_trips(self) -> Tuple[Trip, ...]:
        """Load the trips stored alongside the road map."""
        ...

    def get_location(self, vertex: int) -> Optional[Location]:
        """Get a location by vertex key.

        Args:
            vertex: The vertex key to look up.

        Returns:
            The location, or None if not found.
        """
        ...

    def list_locations(self) -> Sequence[Location]:
        """List all locations on the road map."""
        ...


class TripSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes optimal routes through the road map.
    """

    def shortest_paths(
        self, road_map: RoadMap, start: int, metric: TripMetric
    ) -> Dict[int, int]:
        """Predecessor map of shortest paths from start under metric."""
        ...

    def solve(
        self,
        road_map: RoadMap,
        trip: Trip,
        predecessors: Optional[Dict[int, int]] = None,
    ) -> TripResult:
        """Find the best route for a trip.

        Args:
            road_map: The road network.
            trip: Start, destination and metric.
            predecessors: Precomputed predecessor map for the trip's
                start and metric, if available.

        Returns:
            TripResult with the legs of the route.
        """
        ...
