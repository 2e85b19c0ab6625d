"""Immutable domain models for the road trip planner.

Locations and road segments are the payloads stored on the vertices and
edges of the road map digraph; trips and trip results describe what is
asked of the planner and what it answers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Tuple

if TYPE_CHECKING:
    from ..graph.digraph import Digraph


@dataclass(frozen=True, slots=True)
class Location:
    """A named place on the road map (vertex payload)."""

    name: str


@dataclass(frozen=True, slots=True)
class RoadSegment:
    """A one-way stretch of road between two locations (edge payload).

    Attributes:
        miles: Length of the segment
        miles_per_hour: Speed limit on the segment
    """

    miles: float
    miles_per_hour: float

    def __post_init__(self) -> None:
        """Validate segment measurements."""
        if not (math.isfinite(self.miles) and math.isfinite(self.miles_per_hour)):
            raise ValueError(
                f"Segment measurements must be finite, got "
                f"{self.miles} miles at {self.miles_per_hour} mph"
            )
        if self.miles < 0:
            raise ValueError(f"Miles must be non-negative, got {self.miles}")
        if self.miles_per_hour <= 0:
            raise ValueError(
                f"Speed limit must be positive, got {self.miles_per_hour}"
            )

    @property
    def hours(self) -> float:
        """Driving time at the speed limit."""
        return self.miles / self.miles_per_hour


def distance_weight(segment: RoadSegment) -> float:
    return segment.miles


def time_weight(segment: RoadSegment) -> float:
    return segment.hours


class TripMetric(Enum):
    """What a trip minimizes: total miles or total driving time."""

    DISTANCE = "D"
    TIME = "T"

    @classmethod
    def from_code(cls, code: str) -> TripMetric:
        """Parse the one-letter metric code used in trip requests."""
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown trip metric code: {code!r}") from None

    @property
    def weight(self) -> Callable[[RoadSegment], float]:
        """Edge weight function for this metric."""
        if self is TripMetric.DISTANCE:
            return distance_weight
        return time_weight


@dataclass(frozen=True, slots=True)
class Trip:
    """A request for the best route between two locations.

    Attributes:
        start_vertex: Vertex key of the origin
        end_vertex: Vertex key of the destination
        metric: Whether to minimize distance or driving time
    """

    start_vertex: int
    end_vertex: int
    metric: TripMetric = TripMetric.DISTANCE


@dataclass(frozen=True, slots=True)
class RoadTripInput:
    """A road map together with the trips requested on it."""

    road_map: Digraph[Location, RoadSegment]
    trips: Tuple[Trip, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TripLeg:
    """One road segment driven as part of a trip.

    Attributes:
        from_vertex: Vertex key the leg departs from
        to_vertex: Vertex key the leg arrives at
        location: Name of the location reached by this leg
        miles: Length of the leg
        miles_per_hour: Speed limit on the leg
    """

    from_vertex: int
    to_vertex: int
    location: str
    miles: float
    miles_per_hour: float

    @property
    def hours(self) -> float:
        return self.miles / self.miles_per_hour


@dataclass(frozen=True, slots=True)
class TripResult:
    """Result of planning a single trip.

    Attributes:
        trip: The trip that was planned
        origin: Name of the start location
        legs: Legs of the route in driving order
    """

    trip: Trip
    origin: str
    legs: Tuple[TripLeg, ...] = field(default_factory=tuple)

    @property
    def destination(self) -> str:
        """Name of the last location on the route."""
        if not self.legs:
            return self.origin
        return self.legs[-1].location

    @property
    def total_miles(self) -> float:
        return sum(leg.miles for leg in self.legs)

    @property
    def total_hours(self) -> float:
        return sum(leg.hours for leg in self.legs)

    @property
    def is_empty(self) -> bool:
        """Check if the trip has no legs (start equals destination)."""
        return len(self.legs) == 0

    @property
    def path(self) -> Tuple[int, ...]:
        """Vertex keys visited, origin first."""
        return (self.trip.start_vertex,) + tuple(leg.to_vertex for leg in self.legs)
