"""Graph-related utilities for representing the road network.

This subpackage contains the generic adjacency-list digraph and the
shortest-path algorithm that runs on top of it.
"""

from .digraph import Digraph, DigraphEdge, DigraphVertex
from .dijkstra import EdgeWeight, find_shortest_paths, reconstruct_path, shortest_paths

__all__ = [
    "Digraph",
    "DigraphEdge",
    "DigraphVertex",
    "EdgeWeight",
    "find_shortest_paths",
    "reconstruct_path",
    "shortest_paths",
]
