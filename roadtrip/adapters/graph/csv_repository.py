"""CSV road map repository adapter.

Loads the road map from tabular data:
- locations.csv: ``location_id,name``
- segments.csv: ``from_id,to_id,miles,mph``
- trips.csv (optional): ``start_id,end_id,metric``
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ...config import RoadMapConfig, get_config
from ...domain.errors import DigraphError, InputFormatError
from ...domain.models import Location, RoadSegment, Trip, TripMetric
from ...ports.graph import RoadMap


@dataclass
class CSVRoadMapRepository:
    """Road map repository that loads from CSV files.

    This adapter implements RoadMapRepositoryPort.

    Attributes:
        config: Road map configuration (paths, file names)
    """

    config: RoadMapConfig = field(default_factory=lambda: get_config().road_map)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _road_map: Optional[RoadMap] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RoadMap:
        """Load the road map from CSV files.

        The loaded map is cached; callers receive a copy so mutations
        never leak into the cache.

        Raises:
            InputFormatError: If the road map cannot be loaded.
        """
        if self._road_map is None:
            self._logger.debug(
                "Loading road map",
                extra={
                    "locations_path": str(self.config.locations_path),
                    "segments_path": str(self.config.segments_path),
                },
            )
            self._road_map = self._load_road_map_from_csv()
            self._logger.info(
                "Road map loaded",
                extra={
                    "locations": self._road_map.vertex_count(),
                    "segments": self._road_map.edge_count(),
                },
            )
        return self._road_map.copy()

    def _load_road_map_from_csv(self) -> RoadMap:
        road_map: RoadMap = RoadMap()

        path = self.config.locations_path
        for row in self._rows(path):
            try:
                road_map.add_vertex(int(row["location_id"]), Location(row["name"].strip()))
            except (KeyError, ValueError, DigraphError) as e:
                raise InputFormatError(
                    f"Invalid location row {row}", file_path=str(path), cause=e
                )

        path = self.config.segments_path
        for row in self._rows(path):
            try:
                segment = RoadSegment(
                    miles=float(row["miles"]), miles_per_hour=float(row["mph"])
                )
                road_map.add_edge(int(row["from_id"]), int(row["to_id"]), segment)
            except (KeyError, ValueError, DigraphError) as e:
                raise InputFormatError(
                    f"Invalid segment row {row}", file_path=str(path), cause=e
                )

        return road_map

    def load_trips(self) -> Tuple[Trip, ...]:
        """Load trips from the trips file, if there is one.

        Raises:
            InputFormatError: If a row is malformed.
        """
        path = self.config.trips_path
        if not path.exists():
            self._logger.debug("No trips file", extra={"trips_path": str(path)})
            return ()

        trips: List[Trip] = []
        for row in self._rows(path):
            try:
                trips.append(
                    Trip(
                        start_vertex=int(row["start_id"]),
                        end_vertex=int(row["end_id"]),
                        metric=TripMetric.from_code(row["metric"]),
                    )
                )
            except (KeyError, ValueError) as e:
                raise InputFormatError(
                    f"Invalid trip row {row}", file_path=str(path), cause=e
                )
        return tuple(trips)

    def get_location(self, vertex: int) -> Optional[Location]:
        """Get a location by vertex key, or None if not found."""
        road_map = self._cached()
        if vertex not in road_map:
            return None
        return road_map.vertex_info(vertex)

    def list_locations(self) -> Sequence[Location]:
        """List all locations ordered by vertex key."""
        road_map = self._cached()
        return [road_map.vertex_info(vertex) for vertex in sorted(road_map.vertices())]

    def clear_cache(self) -> None:
        """Clear the cached road map."""
        self._road_map = None
        self._logger.debug("Road map cache cleared")

    def _cached(self) -> RoadMap:
        if self._road_map is None:
            self._road_map = self._load_road_map_from_csv()
        return self._road_map

    def _rows(self, path: Path) -> List[Dict[str, str]]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                return [
                    {key.strip(): (value or "").strip() for key, value in row.items() if key}
                    for row in csv.DictReader(f)
                ]
        except OSError as e:
            raise InputFormatError(
                f"Failed to read {path.name}", file_path=str(path), cause=e
            )
