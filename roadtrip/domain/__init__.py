"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DigraphError,
    DisconnectedMapError,
    DuplicateEdgeError,
    DuplicateVertexError,
    InputFormatError,
    NoRouteFoundError,
    NoSuchEdgeError,
    NoSuchVertexError,
    RoadTripError,
)
from .models import (
    Location,
    RoadSegment,
    RoadTripInput,
    Trip,
    TripLeg,
    TripMetric,
    TripResult,
    distance_weight,
    time_weight,
)

__all__ = [
    # Models
    "Location",
    "RoadSegment",
    "RoadTripInput",
    "Trip",
    "TripLeg",
    "TripMetric",
    "TripResult",
    "distance_weight",
    "time_weight",
    # Errors
    "RoadTripError",
    "DigraphError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "NoSuchVertexError",
    "NoSuchEdgeError",
    "InputFormatError",
    "DisconnectedMapError",
    "NoRouteFoundError",
    "ConfigurationError",
]
