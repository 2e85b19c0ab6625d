"""Text road map reader adapter.

Reads a road map followed by trip requests from a line-oriented text
format. Blank lines are ignored, and so are lines starting with ``#``
except where a location name is expected, so names may start with ``#``::

    # locations
    3
    Irvine
    Tustin
    Anaheim
    # road segments: from to miles mph
    2
    0 1 4.5 65
    1 2 9.0 55
    # trips: start end D|T
    1
    0 2 D

Locations are numbered from zero in the order they are listed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, TextIO, Tuple

from ...domain.errors import DigraphError, InputFormatError
from ...domain.models import Location, RoadSegment, RoadTripInput, Trip, TripMetric
from ...ports.graph import RoadMap


class _Lines:
    """Iterator over meaningful input lines that remembers line numbers."""

    def __init__(self, stream: TextIO) -> None:
        self._lines: Iterator[Tuple[int, str]] = (
            (number, line.strip()) for number, line in enumerate(stream, start=1)
        )
        self.line_number = 0

    def next(self, what: str, skip_comments: bool = True) -> str:
        for number, line in self._lines:
            self.line_number = number
            if line and not (skip_comments and line.startswith("#")):
                return line
        raise InputFormatError(
            f"Unexpected end of input, expected {what}",
            line_number=self.line_number + 1,
        )


@dataclass
class TextRoadMapReader:
    """Road map reader for the line-oriented text format.

    This adapter implements RoadMapReaderPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read_path(self, path: Path) -> RoadTripInput:
        """Read a road map input file.

        Raises:
            InputFormatError: If the file cannot be read or parsed.
        """
        try:
            with Path(path).open(encoding="utf-8") as f:
                return self.read(f)
        except InputFormatError as e:
            e.file_path = str(path)
            raise
        except OSError as e:
            raise InputFormatError(
                f"Failed to read road map: {path}", file_path=str(path), cause=e
            )

    def read(self, stream: TextIO) -> RoadTripInput:
        """Parse a road map followed by trip requests.

        Raises:
            InputFormatError: If the input is malformed, with the line
                number of the offending line.
        """
        lines = _Lines(stream)
        road_map: RoadMap = RoadMap()

        location_count = self._read_count(lines, "location count")
        for vertex in range(location_count):
            name = lines.next("location name", skip_comments=False)
            road_map.add_vertex(vertex, Location(name))

        segment_count = self._read_count(lines, "road segment count")
        for _ in range(segment_count):
            self._read_segment(lines, road_map)

        trip_count = self._read_count(lines, "trip count")
        trips: List[Trip] = [
            self._read_trip(lines, road_map) for _ in range(trip_count)
        ]

        self._logger.info(
            "Road map read",
            extra={
                "locations": road_map.vertex_count(),
                "segments": road_map.edge_count(),
                "trips": len(trips),
            },
        )
        return RoadTripInput(road_map=road_map, trips=tuple(trips))

    def _read_count(self, lines: _Lines, what: str) -> int:
        line = lines.next(what)
        try:
            count = int(line)
        except ValueError as e:
            raise InputFormatError(
                f"Expected {what}, got {line!r}",
                line_number=lines.line_number,
                cause=e,
            )
        if count < 0:
            raise InputFormatError(
                f"{what.capitalize()} must be non-negative, got {count}",
                line_number=lines.line_number,
            )
        return count

    def _read_segment(self, lines: _Lines, road_map: RoadMap) -> None:
        line = lines.next("road segment")
        fields = line.split()
        if len(fields) != 4:
            raise InputFormatError(
                f"Road segment needs 'from to miles mph', got {line!r}",
                line_number=lines.line_number,
            )
        try:
            from_vertex, to_vertex = int(fields[0]), int(fields[1])
            segment = RoadSegment(miles=float(fields[2]), miles_per_hour=float(fields[3]))
            road_map.add_edge(from_vertex, to_vertex, segment)
        except (ValueError, DigraphError) as e:
            raise InputFormatError(
                f"Invalid road segment {line!r}",
                line_number=lines.line_number,
                cause=e,
            )

    def _read_trip(self, lines: _Lines, road_map: RoadMap) -> Trip:
        line = lines.next("trip")
        fields = line.split()
        if len(fields) != 3:
            raise InputFormatError(
                f"Trip needs 'start end D|T', got {line!r}",
                line_number=lines.line_number,
            )
        try:
            trip = Trip(
                start_vertex=int(fields[0]),
                end_vertex=int(fields[1]),
                metric=TripMetric.from_code(fields[2]),
            )
        except ValueError as e:
            raise InputFormatError(
                f"Invalid trip {line!r}", line_number=lines.line_number, cause=e
            )
        for vertex in (trip.start_vertex, trip.end_vertex):
            if vertex not in road_map:
                raise InputFormatError(
                    f"Trip references unknown location {vertex}",
                    line_number=lines.line_number,
                )
        return trip
