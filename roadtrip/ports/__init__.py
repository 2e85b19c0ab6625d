"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .graph import RoadMap, RoadMapReaderPort, RoadMapRepositoryPort, TripSolverPort
from .rendering import TripWriterPort

__all__ = [
    # Graph
    "RoadMap",
    "RoadMapReaderPort",
    "RoadMapRepositoryPort",
    "TripSolverPort",
    # Rendering
    "TripWriterPort",
    # Cache
    "CachePort",
]
