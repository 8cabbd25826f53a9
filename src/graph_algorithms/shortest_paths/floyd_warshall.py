"""
All-pairs shortest paths with the Floyd-Warshall algorithm.

The distance matrix is a numpy int64 array indexed by vertex (row and
column 0 are the sentinel slot). Each intermediate vertex is processed with
one vectorised relaxation over the whole matrix. Complexity: O(V^3) time,
O(V^2) memory. Negative edge weights are allowed; negative cycles are
detected and reported.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from ..graph import WeightedGraph
from ..types import Vertex
from ..validation import validate_vertex, validate_weight_total
from .dijkstra import UNREACHABLE


class NegativeCycleWarning(UserWarning):
    """Warning issued when the graph contains a negative-weight cycle."""

    pass


@dataclass
class AllPairsShortestPaths:
    """
    Result of an all-pairs shortest path computation.

    Attributes:
        matrix: (V + 1) x (V + 1) int64 distances; UNREACHABLE where no path
            exists. Values are meaningless when has_negative_cycle is True.
        has_negative_cycle: Whether some vertex lies on a negative cycle.
    """

    matrix: np.ndarray
    has_negative_cycle: bool = False

    @property
    def vertex_count(self) -> int:
        return int(self.matrix.shape[0]) - 1

    def distance(self, u: Vertex, v: Vertex) -> int:
        """Shortest distance from u to v, UNREACHABLE if v cannot be reached."""
        u = validate_vertex(u, self.vertex_count, "u")
        v = validate_vertex(v, self.vertex_count, "v")
        return int(self.matrix[u, v])

    def is_reachable(self, u: Vertex, v: Vertex) -> bool:
        return self.distance(u, v) != UNREACHABLE


def floyd_warshall(graph: WeightedGraph) -> AllPairsShortestPaths:
    """
    Compute shortest path lengths between all pairs of vertices.

    Args:
        graph: Weighted graph (directed or undirected)

    Returns:
        AllPairsShortestPaths holding the distance matrix and a negative
        cycle flag. A NegativeCycleWarning is issued when the flag is set.

    Raises:
        PreconditionViolatedError: If the absolute edge weights sum to
            UNREACHABLE or more

    Example:
        >>> g = WeightedGraph(3, directed=True)
        >>> g.add_edge(1, 2, 2)
        >>> g.add_edge(2, 3, 3)
        >>> floyd_warshall(g).distance(1, 3)
        5
    """
    validate_weight_total(w for _, _, w in graph.edges())

    n = graph.vertex_count
    d = np.full((n + 1, n + 1), UNREACHABLE, dtype=np.int64)
    idx = np.arange(1, n + 1)
    d[idx, idx] = 0

    # Parallel edges keep the lightest one
    for u, v, w in graph.edges():
        if w < d[u, v]:
            d[u, v] = w
        if not graph.directed and w < d[v, u]:
            d[v, u] = w

    for k in range(1, n + 1):
        via = d[:, k, None] + d[None, k, :]
        # Only relax through k when both halves of the path exist
        usable = (d[:, k] < UNREACHABLE)[:, None] & (d[k, :] < UNREACHABLE)[None, :]
        np.copyto(d, via, where=usable & (via < d))
        # Negative cycles can drive sums down without bound
        np.maximum(d, -UNREACHABLE, out=d)

    has_negative_cycle = bool(n > 0 and (d[idx, idx] < 0).any())
    if has_negative_cycle:
        warnings.warn(
            "Graph has a negative cycle; shortest path lengths are undefined.",
            NegativeCycleWarning,
            stacklevel=2,
        )

    return AllPairsShortestPaths(matrix=d, has_negative_cycle=has_negative_cycle)


__all__ = [
    "AllPairsShortestPaths",
    "NegativeCycleWarning",
    "floyd_warshall",
]
