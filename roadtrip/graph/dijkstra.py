"""Single-source shortest paths using Dijkstra's algorithm.

The engine reads a Digraph through its public query interface and a
caller-supplied edge weight function; it never mutates the graph. Edge
weights must be non-negative, which is assumed and not checked.

Complexity:
    O((V + E) log V) with a binary heap. Improved distances push a new
    heap entry; stale entries are skipped when popped.
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Set, Tuple, TypeVar

from ..domain.errors import NoSuchVertexError

if TYPE_CHECKING:
    from .digraph import Digraph

E = TypeVar("E")

EdgeWeight = Callable[[E], float]


def shortest_paths(
    graph: Digraph[Any, E], start: int, edge_weight: EdgeWeight[E]
) -> Tuple[Dict[int, float], Dict[int, int]]:
    """Compute distances and predecessors from start to every vertex.

    Parameters
    ----------
    graph:
        The graph to search.
    start:
        Vertex key of the source.
    edge_weight:
        Maps an edge payload to a non-negative weight.

    Returns
    -------
    dict[int, float], dict[int, int]
        Distance of every vertex from start (``math.inf`` when
        unreachable) and the predecessor of every vertex on its
        shortest path. The start vertex and unreachable vertices are
        their own predecessor.

    Raises
    ------
    NoSuchVertexError
        If start is not in the graph.
    """
    if start not in graph:
        raise NoSuchVertexError(f"Start vertex not in graph: {start}", vertex=start)

    vertices = graph.vertices()
    distances: Dict[int, float] = {vertex: math.inf for vertex in vertices}
    predecessors: Dict[int, int] = {vertex: vertex for vertex in vertices}
    distances[start] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start)]
    visited: Set[int] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Skip outdated entries
        if u in visited:
            continue
        visited.add(u)

        for v, einfo in graph.neighbors(u):
            if v in visited:
                continue
            new_distance = current_distance + edge_weight(einfo)
            if new_distance < distances[v]:
                distances[v] = new_distance
                predecessors[v] = u
                heapq.heappush(heap, (new_distance, v))

    return distances, predecessors


def find_shortest_paths(
    graph: Digraph[Any, E], start: int, edge_weight: EdgeWeight[E]
) -> Dict[int, int]:
    """Return only the predecessor map computed by shortest_paths."""
    _, predecessors = shortest_paths(graph, start, edge_weight)
    return predecessors


def reconstruct_path(predecessors: Dict[int, int], start: int, end: int) -> List[int]:
    """Walk the predecessor map back from end to start.

    Returns the vertex keys from start to end inclusive, ``[start]`` when
    end is start, or an empty list when end is unreachable from start.

    Raises:
        NoSuchVertexError: If end is not a key of the predecessor map.
    """
    if end not in predecessors:
        raise NoSuchVertexError(f"Vertex not in graph: {end}", vertex=end)

    path = [end]
    current = end
    while current != start:
        previous = predecessors[current]
        if previous == current:
            return []
        path.append(previous)
        current = previous

    path.reverse()
    return path
