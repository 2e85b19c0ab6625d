"""Generic directed graph backed by adjacency lists.

Each vertex is identified by an integer key (not necessarily contiguous
or zero-based) and carries a caller-defined payload. Each vertex stores
its outgoing edges in insertion order, keyed by destination, so there is
at most one edge per ordered pair of vertices.

The graph never holds an edge whose endpoints are missing: edges are
validated on insertion and removed together with either endpoint.
"""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from ..domain.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    NoSuchEdgeError,
    NoSuchVertexError,
)

if TYPE_CHECKING:
    from .dijkstra import EdgeWeight

VertexInfo = TypeVar("VertexInfo")
EdgeInfo = TypeVar("EdgeInfo")


@dataclass
class DigraphEdge(Generic[EdgeInfo]):
    """An edge from one vertex to another with its payload."""

    from_vertex: int
    to_vertex: int
    einfo: EdgeInfo


@dataclass
class DigraphVertex(Generic[VertexInfo, EdgeInfo]):
    """A vertex payload and its outgoing edges keyed by destination."""

    vinfo: VertexInfo
    edges: Dict[int, DigraphEdge[EdgeInfo]] = field(default_factory=dict)


class Digraph(Generic[VertexInfo, EdgeInfo]):
    """Directed graph with per-vertex and per-edge payloads.

    Every mutation validates its arguments before touching the
    adjacency lists, so a failed call leaves the graph unchanged.

    Example:
        graph: Digraph[str, float] = Digraph()
        graph.add_vertex(1, "Irvine")
        graph.add_vertex(2, "Tustin")
        graph.add_edge(1, 2, 4.5)
    """

    def __init__(self) -> None:
        self._adj: Dict[int, DigraphVertex[VertexInfo, EdgeInfo]] = {}

    # --- Lifecycle -----------------------------------------------------------

    def copy(self) -> Digraph[VertexInfo, EdgeInfo]:
        """Return a deep copy sharing no structure or payload with this graph."""
        other: Digraph[VertexInfo, EdgeInfo] = Digraph()
        other._adj = copy.deepcopy(self._adj)
        return other

    def __copy__(self) -> Digraph[VertexInfo, EdgeInfo]:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Digraph[VertexInfo, EdgeInfo]:
        other: Digraph[VertexInfo, EdgeInfo] = Digraph()
        memo[id(self)] = other
        other._adj = copy.deepcopy(self._adj, memo)
        return other

    def take(self) -> Digraph[VertexInfo, EdgeInfo]:
        """Move all vertices and edges into a new graph, leaving this one empty."""
        other: Digraph[VertexInfo, EdgeInfo] = Digraph()
        other._adj, self._adj = self._adj, {}
        return other

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._adj.clear()

    # --- Structural queries --------------------------------------------------

    def vertices(self) -> List[int]:
        """Return the keys of every vertex."""
        return list(self._adj)

    def edges(self, vertex: Optional[int] = None) -> List[Tuple[int, int]]:
        """Return edges as (from, to) pairs.

        With no argument every edge in the graph is returned; with a
        vertex only its outgoing edges are, possibly none.

        Raises:
            NoSuchVertexError: If the given vertex is not in the graph.
        """
        if vertex is not None:
            return [
                (edge.from_vertex, edge.to_vertex)
                for edge in self._vertex(vertex).edges.values()
            ]
        return [
            (edge.from_vertex, edge.to_vertex)
            for entry in self._adj.values()
            for edge in entry.edges.values()
        ]

    def neighbors(self, vertex: int) -> List[Tuple[int, EdgeInfo]]:
        """Return (to_vertex, edge payload) for each outgoing edge of vertex."""
        return [
            (edge.to_vertex, edge.einfo)
            for edge in self._vertex(vertex).edges.values()
        ]

    def vertex_info(self, vertex: int) -> VertexInfo:
        """Return the payload of a vertex.

        Raises:
            NoSuchVertexError: If the vertex is not in the graph.
        """
        return self._vertex(vertex).vinfo

    def edge_info(self, from_vertex: int, to_vertex: int) -> EdgeInfo:
        """Return the payload of the edge from_vertex -> to_vertex.

        Raises:
            NoSuchVertexError: If from_vertex is not in the graph.
            NoSuchEdgeError: If the edge does not exist.
        """
        return self._edge(from_vertex, to_vertex).einfo

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adj

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        entry = self._adj.get(from_vertex)
        return entry is not None and to_vertex in entry.edges

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """Count every edge, or only the outgoing edges of one vertex.

        Raises:
            NoSuchVertexError: If the given vertex is not in the graph.
        """
        if vertex is not None:
            return len(self._vertex(vertex).edges)
        return sum(len(entry.edges) for entry in self._adj.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    # --- Mutation ------------------------------------------------------------

    def add_vertex(self, vertex: int, vinfo: VertexInfo) -> None:
        """Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: If the key is already used.
        """
        if vertex in self._adj:
            raise DuplicateVertexError(
                f"Vertex already in graph: {vertex}", vertex=vertex
            )
        self._adj[vertex] = DigraphVertex(vinfo)

    def add_edge(self, from_vertex: int, to_vertex: int, einfo: EdgeInfo) -> None:
        """Add the edge from_vertex -> to_vertex.

        Raises:
            NoSuchVertexError: If either endpoint is not in the graph.
            DuplicateEdgeError: If the edge already exists.
        """
        entry = self._vertex(from_vertex)
        if to_vertex not in self._adj:
            raise NoSuchVertexError(
                f"Destination vertex not in graph: {to_vertex}", vertex=to_vertex
            )
        if to_vertex in entry.edges:
            raise DuplicateEdgeError(
                f"Edge already in graph: {from_vertex} -> {to_vertex}",
                from_vertex=from_vertex,
                to_vertex=to_vertex,
            )
        entry.edges[to_vertex] = DigraphEdge(from_vertex, to_vertex, einfo)

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex along with its incoming and outgoing edges.

        Raises:
            NoSuchVertexError: If the vertex is not in the graph.
        """
        self._vertex(vertex)
        del self._adj[vertex]
        for entry in self._adj.values():
            entry.edges.pop(vertex, None)

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        """Remove the edge from_vertex -> to_vertex.

        Raises:
            NoSuchVertexError: If from_vertex is not in the graph.
            NoSuchEdgeError: If the edge does not exist.
        """
        self._edge(from_vertex, to_vertex)
        del self._adj[from_vertex].edges[to_vertex]

    # --- Algorithms ----------------------------------------------------------

    def is_strongly_connected(self) -> bool:
        """Return True if every vertex can reach every other vertex.

        The graph is strongly connected exactly when some vertex reaches
        all vertices both along the edges and along the reversed edges.
        Empty and single-vertex graphs are strongly connected.
        """
        if len(self._adj) <= 1:
            return True

        root = next(iter(self._adj))
        forward = _reachable(root, lambda v: self._adj[v].edges.keys())
        if len(forward) != len(self._adj):
            return False

        incoming: Dict[int, List[int]] = {vertex: [] for vertex in self._adj}
        for from_vertex, entry in self._adj.items():
            for to_vertex in entry.edges:
                incoming[to_vertex].append(from_vertex)
        backward = _reachable(root, incoming.__getitem__)
        return len(backward) == len(self._adj)

    def find_shortest_paths(
        self, start: int, edge_weight: EdgeWeight[EdgeInfo]
    ) -> Dict[int, int]:
        """Shortest-path predecessor map from start (see graph.dijkstra)."""
        from .dijkstra import find_shortest_paths

        return find_shortest_paths(self, start, edge_weight)

    # --- Internals -----------------------------------------------------------

    def _vertex(self, vertex: int) -> DigraphVertex[VertexInfo, EdgeInfo]:
        try:
            return self._adj[vertex]
        except KeyError:
            raise NoSuchVertexError(
                f"Vertex not in graph: {vertex}", vertex=vertex
            ) from None

    def _edge(self, from_vertex: int, to_vertex: int) -> DigraphEdge[EdgeInfo]:
        entry = self._vertex(from_vertex)
        try:
            return entry.edges[to_vertex]
        except KeyError:
            raise NoSuchEdgeError(
                f"Edge not in graph: {from_vertex} -> {to_vertex}",
                from_vertex=from_vertex,
                to_vertex=to_vertex,
            ) from None


def _reachable(root: int, successors: Callable[[int], Iterable[int]]) -> Set[int]:
    """Breadth-first search returning every vertex reachable from root."""
    seen = {root}
    queue = deque([root])
    while queue:
        vertex = queue.popleft()
        for nxt in successors(vertex):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen
