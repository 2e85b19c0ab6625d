"""Trip planner service - Main orchestrator.

Checks that the road map is usable, computes the best route for each
requested trip and hands the results to the writer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..adapters.cache import InMemoryCache
from ..domain.errors import DisconnectedMapError
from ..domain.models import Trip, TripResult
from ..ports.cache import CachePort
from ..ports.graph import RoadMap, TripSolverPort
from ..ports.rendering import TripWriterPort


@dataclass
class TripPlannerService:
    """Main service for planning trips on a road map.

    This service orchestrates:
    1. Strong connectivity check of the road map
    2. Shortest-path computation, once per start location and metric
    3. Route reconstruction for every trip
    4. Rendering of the results

    Attributes:
        solver: Computes shortest paths and routes
        writer: Renders trip results
        cache: Holds predecessor maps while a batch is planned
        require_strongly_connected: Reject maps where some location
            cannot reach another
    """

    solver: TripSolverPort
    writer: TripWriterPort
    cache: CachePort[Dict[int, int]] = field(
        default_factory=lambda: InMemoryCache(name="predecessors")
    )
    require_strongly_connected: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, road_map: RoadMap, trips: Sequence[Trip]) -> List[TripResult]:
        """Plan every trip on the road map, in request order.

        Args:
            road_map: The road network.
            trips: Trips to plan.

        Returns:
            One TripResult per trip.

        Raises:
            DisconnectedMapError: If connectivity is required and the map
                is not strongly connected.
            NoSuchVertexError: If a trip references an unknown location.
            NoRouteFoundError: If a trip's destination is unreachable.
        """
        self._logger.info(
            "Planning trips",
            extra={"trips": len(trips), "locations": road_map.vertex_count()},
        )

        if self.require_strongly_connected and not road_map.is_strongly_connected():
            self._logger.warning(
                "Road map is not strongly connected",
                extra={"locations": road_map.vertex_count()},
            )
            raise DisconnectedMapError(
                "Disconnected Map", vertex_count=road_map.vertex_count()
            )

        # Cached predecessor maps belong to the previous road map
        self.cache.clear()

        results: List[TripResult] = []
        for trip in trips:
            key = f"{trip.start_vertex}:{trip.metric.name}"
            predecessors = self.cache.get_or_compute(
                key,
                lambda trip=trip: self.solver.shortest_paths(
                    road_map, trip.start_vertex, trip.metric
                ),
            )
            results.append(self.solver.solve(road_map, trip, predecessors))

        self._logger.info("Trips planned", extra={"trips": len(results)})
        return results

    def plan_and_format(self, road_map: RoadMap, trips: Sequence[Trip]) -> str:
        """Plan every trip and render the results as one text block."""
        results = self.plan(road_map, trips)
        return "\n\n".join(self.writer.format(result) for result in results)
