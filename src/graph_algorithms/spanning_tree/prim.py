"""
Minimum spanning tree with Prim's algorithm.

Grows the tree from a start vertex, always taking the lightest edge that
leaves the tree. Uses a lazy binary heap (stale entries are skipped when
popped). Complexity: O(E log E).
"""

from __future__ import annotations

import heapq
import warnings

from ..graph import WeightedGraph
from ..types import NO_VERTEX, Edge, Vertex
from ..validation import validate_vertex
from ._types import SpanningTree


class DisconnectedGraphWarning(UserWarning):
    """Warning issued when the spanning tree cannot reach every vertex."""

    pass


def prim_mst(graph: WeightedGraph, start: Vertex = 1) -> SpanningTree:
    """
    Compute a minimum spanning tree of start's connected component.

    Intended for undirected graphs; a directed graph is treated as given,
    following only outgoing edges.

    Args:
        graph: Weighted graph
        start: Vertex to grow the tree from (default 1)

    Returns:
        SpanningTree of the component containing start. A
        DisconnectedGraphWarning is issued when it does not span the graph.

    Raises:
        OutOfRangeError: If start is outside [1, V]
    """
    n = graph.vertex_count
    result = SpanningTree(vertex_count=n)
    if n == 0:
        return result
    start = validate_vertex(start, n, "start")

    visited = [False] * (n + 1)
    taken = 0
    # (weight, vertex, tree vertex it attaches to)
    heap: list[tuple[int, int, int]] = [(0, start, NO_VERTEX)]

    while heap:
        weight, u, via = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        taken += 1
        if via != NO_VERTEX:
            result.add(Edge(via, u, weight))
        if taken == n:
            break
        for v, w in graph.adjacency(u):
            if not visited[v]:
                heapq.heappush(heap, (w, v, u))

    if taken < n:
        warnings.warn(
            f"Only {taken} of {n} vertices are reachable from {start}; "
            "result is a spanning tree of that component only.",
            DisconnectedGraphWarning,
            stacklevel=2,
        )

    return result
