"""
Single-source shortest paths with Dijkstra's algorithm.

Uses a binary heap with lazy deletion: instead of decreasing keys, a new
(distance, vertex) entry is pushed on every relaxation and stale entries are
skipped when popped. Complexity: O((V + E) log V).

Edge weights must be non-negative.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from ..graph import WeightedGraph
from ..types import Vertex
from ..validation import (
    WEIGHT_LIMIT,
    NotBuiltError,
    PreconditionViolatedError,
    validate_vertex,
    validate_weight_total,
)

# Large but additively safe: UNREACHABLE + UNREACHABLE still fits in int64
UNREACHABLE = WEIGHT_LIMIT


class Dijkstra:
    """
    Shortest path solver over a weighted graph.

    The solver keeps its own deep copy of the graph, so later edits to the
    caller's graph do not affect it. Results are read from the solver after
    solve() has run.

    Example:
        graph = WeightedGraph(4)
        graph.add_edge(1, 2, 4)
        graph.add_edge(2, 3, 1)
        solver = Dijkstra(graph).solve(1)
        solver.distance_to(3)          # 5
        solver.reconstruct_path(1, 3)  # [1, 2, 3]
    """

    def __init__(self, graph: WeightedGraph) -> None:
        """
        Initialize solver.

        Args:
            graph: Weighted graph with non-negative weights

        Raises:
            PreconditionViolatedError: If any edge weight is negative, or the
                absolute weights sum to UNREACHABLE or more
        """
        lowest = graph.min_weight()
        if lowest is not None and lowest < 0:
            raise PreconditionViolatedError(
                f"Dijkstra requires non-negative edge weights, found {lowest}"
            )
        validate_weight_total(w for _, _, w in graph.edges())

        self._graph: WeightedGraph = graph.copy()
        self._vertex_count: int = graph.vertex_count
        self._source: Optional[Vertex] = None
        self._dist: list[int] = []
        self._pred: list[Optional[Vertex]] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> WeightedGraph:
        """Get the solver's private copy of the graph."""
        return self._graph

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def source(self) -> Optional[Vertex]:
        """Get the source of the last solve, or None before solving."""
        return self._source

    @property
    def is_solved(self) -> bool:
        return self._source is not None

    @property
    def distances(self) -> list[int]:
        """
        Get the distance array indexed by vertex.

        Index 0 is the sentinel slot. Unreachable vertices hold UNREACHABLE.
        """
        self._require_solved()
        return list(self._dist)

    # -------------------------------------------------------------------------
    # Solving
    # -------------------------------------------------------------------------

    def solve(self, source: Vertex = 1) -> Self:
        """
        Compute shortest distances from source to every vertex.

        Any previous result is discarded, so solving twice from the same
        source yields identical distance and predecessor arrays.

        Args:
            source: Source vertex (default 1)

        Returns:
            self, for chaining

        Raises:
            OutOfRangeError: If source is outside [1, V]
        """
        source = validate_vertex(source, self._vertex_count, "source")
        adj = self._graph._adj

        dist = [UNREACHABLE] * (self._vertex_count + 1)
        pred: list[Optional[Vertex]] = [None] * (self._vertex_count + 1)
        dist[source] = 0

        # (distance, vertex)
        heap: list[tuple[int, int]] = [(0, source)]

        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, weight in adj[u]:
                nd = d + weight
                if nd < dist[v]:
                    dist[v] = nd
                    pred[v] = u
                    heapq.heappush(heap, (nd, v))

        self._dist = dist
        self._pred = pred
        self._source = source
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def distance_to(self, v: Vertex) -> int:
        """
        Get the shortest distance from the source to v.

        Returns UNREACHABLE if v cannot be reached.
        """
        self._require_solved()
        v = validate_vertex(v, self._vertex_count, "v")
        return self._dist[v]

    def predecessor_of(self, v: Vertex) -> Optional[Vertex]:
        """
        Get v's predecessor on a shortest path from the source.

        Returns None for the source itself and for unreachable vertices.
        """
        self._require_solved()
        v = validate_vertex(v, self._vertex_count, "v")
        return self._pred[v]

    def is_reachable(self, v: Vertex) -> bool:
        return self.distance_to(v) != UNREACHABLE

    def reconstruct_path(self, source: Vertex, target: Vertex) -> list[Vertex]:
        """
        Reconstruct a shortest path by following predecessor links.

        Args:
            source: Path start; must be the vertex the solver was solved from
            target: Path end

        Returns:
            Vertices from source to target inclusive

        Raises:
            NotBuiltError: If solve() has not run
            OutOfRangeError: If source or target is outside [1, V]
            PreconditionViolatedError: If source differs from the solved
                source, or target is unreachable
        """
        self._require_solved()
        source = validate_vertex(source, self._vertex_count, "source")
        target = validate_vertex(target, self._vertex_count, "target")

        if source != self._source:
            raise PreconditionViolatedError(
                f"solver was solved from {self._source}, cannot build a path from {source}"
            )
        if self._dist[target] == UNREACHABLE:
            raise PreconditionViolatedError(f"target {target} is unreachable from {source}")

        path: list[Vertex] = []
        u: Optional[Vertex] = target
        while u is not None:
            path.append(u)
            u = self._pred[u]
        path.reverse()
        return path

    def _require_solved(self) -> None:
        if self._source is None:
            raise NotBuiltError("solve() must be called before querying shortest paths")

    def __repr__(self) -> str:
        return f"Dijkstra(vertex_count={self._vertex_count}, source={self._source})"


__all__ = [
    "Dijkstra",
    "UNREACHABLE",
]
