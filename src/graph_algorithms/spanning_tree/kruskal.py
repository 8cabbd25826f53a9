"""
Minimum spanning forest with Kruskal's algorithm.

Edges are scanned in order of increasing weight and accepted whenever they
join two different components of a disjoint-set union. Complexity:
O(E log E).
"""

from __future__ import annotations

from typing import Iterable

from ..types import Edge, EdgeLike
from ..validation import (
    ValidationError,
    validate_vertex,
    validate_vertex_count,
    validate_weight,
)
from ._types import SpanningTree
from .disjoint_set import DisjointSetUnion


def _to_edge(item: EdgeLike, vertex_count: int) -> Edge:
    if isinstance(item, Edge):
        u, v, weight = item
    else:
        if len(item) != 3:
            raise ValidationError(f"edge must be a (u, v, weight) triple, got {item!r}")
        u, v, weight = item
    return Edge(
        validate_vertex(u, vertex_count, "u"),
        validate_vertex(v, vertex_count, "v"),
        validate_weight(weight),
    )


def kruskal_mst(edges: Iterable[EdgeLike], vertex_count: int) -> SpanningTree:
    """
    Compute a minimum spanning forest of an undirected edge list.

    Ties between equal weights keep the input order.

    Args:
        edges: Edge objects or (u, v, weight) triples over vertices 1..V
        vertex_count: Number of vertices V

    Returns:
        SpanningTree with the accepted edges and their total weight. For a
        disconnected graph this is a spanning forest (is_spanning is False).

    Example:
        >>> mst = kruskal_mst([(1, 2, 3), (2, 3, 1), (1, 3, 2)], 3)
        >>> mst.total_weight
        3
    """
    vertex_count = validate_vertex_count(vertex_count)
    dsu = DisjointSetUnion(vertex_count)
    ordered = sorted((_to_edge(e, vertex_count) for e in edges), key=lambda e: e.weight)

    result = SpanningTree(vertex_count=vertex_count)
    for edge in ordered:
        if dsu.union(edge.u, edge.v):
            result.add(edge)
            if dsu.component_count == 1:
                break
    return result
