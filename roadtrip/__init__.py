"""Road trip planner.

A generic adjacency-list digraph with Dijkstra shortest paths, and the
glue that reads a road map, plans trips by distance or driving time and
prints directions.
"""

from .graph import Digraph, find_shortest_paths, reconstruct_path

__all__ = ["Digraph", "find_shortest_paths", "reconstruct_path"]
