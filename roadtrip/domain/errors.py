"""Typed domain errors for the road trip planner.

Every failure the graph store, the path engine and the I/O adapters can
report is a distinct exception type, so callers decide whether to
abort, skip or report. All errors inherit from RoadTripError and can
optionally wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadTripError(Exception):
    """Base error for the road trip domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DigraphError(RoadTripError):
    """Structural error raised by the directed graph store."""


@dataclass
class DuplicateVertexError(DigraphError):
    """A vertex with the same key is already in the graph.

    Attributes:
        vertex: The offending vertex key
    """

    vertex: Optional[int] = None


@dataclass
class DuplicateEdgeError(DigraphError):
    """An edge between the same ordered pair of vertices already exists."""

    from_vertex: Optional[int] = None
    to_vertex: Optional[int] = None


@dataclass
class NoSuchVertexError(DigraphError):
    """A query or mutation referenced a vertex that is not in the graph.

    Attributes:
        vertex: The missing vertex key
    """

    vertex: Optional[int] = None


@dataclass
class NoSuchEdgeError(DigraphError):
    """A query or mutation referenced an edge that is not in the graph."""

    from_vertex: Optional[int] = None
    to_vertex: Optional[int] = None


@dataclass
class InputFormatError(RoadTripError):
    """Road map or trip input could not be parsed.

    Attributes:
        line_number: 1-based line of the text input, if relevant
        file_path: Path to the offending data file, if relevant
    """

    line_number: Optional[int] = None
    file_path: Optional[str] = None


@dataclass
class DisconnectedMapError(RoadTripError):
    """The road map is not strongly connected.

    Attributes:
        vertex_count: Number of locations in the rejected map
    """

    vertex_count: int = 0


@dataclass
class NoRouteFoundError(RoadTripError):
    """No path exists between the requested locations.

    Attributes:
        start: Start vertex key
        end: Destination vertex key
    """

    start: Optional[int] = None
    end: Optional[int] = None


@dataclass
class ConfigurationError(RoadTripError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
