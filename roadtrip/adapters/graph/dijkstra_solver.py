"""Dijkstra trip solver adapter.

This adapter wraps the shortest-path engine in graph/dijkstra.py and adds:
- Domain model output (TripResult)
- Metric selection (distance or driving time)
- Error handling
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ...domain.errors import NoRouteFoundError, NoSuchVertexError
from ...domain.models import Trip, TripLeg, TripMetric, TripResult
from ...graph.dijkstra import find_shortest_paths, reconstruct_path
from ...ports.graph import RoadMap


@dataclass
class DijkstraTripSolver:
    """Trip solver using Dijkstra's shortest path algorithm.

    This adapter implements TripSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_paths(
        self, road_map: RoadMap, start: int, metric: TripMetric
    ) -> Dict[int, int]:
        """Predecessor map of shortest paths from start under metric.

        Raises:
            NoSuchVertexError: If start is not on the road map.
        """
        self._logger.debug(
            "Computing shortest paths",
            extra={"start": start, "metric": metric.name},
        )
        return find_shortest_paths(road_map, start, metric.weight)

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
                start and metric; computed when omitted.

        Returns:
            TripResult with one leg per road segment driven.

        Raises:
            NoSuchVertexError: If the start or destination is not on the map.
            NoRouteFoundError: If the destination cannot be reached.
        """
        start, end = trip.start_vertex, trip.end_vertex
        if end not in road_map:
            raise NoSuchVertexError(f"Destination not on road map: {end}", vertex=end)
        if predecessors is None:
            predecessors = self.shortest_paths(road_map, start, trip.metric)

        path = reconstruct_path(predecessors, start, end)
        if not path:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            raise NoRouteFoundError(
                f"No route from {start} to {end}", start=start, end=end
            )

        legs = []
        for from_vertex, to_vertex in zip(path, path[1:]):
            segment = road_map.edge_info(from_vertex, to_vertex)
            legs.append(
                TripLeg(
                    from_vertex=from_vertex,
                    to_vertex=to_vertex,
                    location=road_map.vertex_info(to_vertex).name,
                    miles=segment.miles,
                    miles_per_hour=segment.miles_per_hour,
                )
            )

        result = TripResult(
            trip=trip,
            origin=road_map.vertex_info(start).name,
            legs=tuple(legs),
        )
        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "metric": trip.metric.name,
                "legs": len(legs),
                "miles": result.total_miles,
            },
        )
        return result
