"""
Common types for graph algorithms.

This module provides the small value types shared across algorithms:
- Vertex: 1-based integer vertex identifier (0 is reserved as a sentinel)
- WeightedEdge: Adjacency record of a weighted graph
- Edge: Endpoint triple used by edge-list algorithms (Kruskal)
"""

from __future__ import annotations

from typing import NamedTuple, Sequence, Union

Vertex = int

# Sentinel vertex; never a valid endpoint
NO_VERTEX: Vertex = 0


class WeightedEdge(NamedTuple):
    """
    Adjacency record stored in a weighted graph.

    Attributes:
        target: Neighbor vertex reached by this edge
        weight: Integer edge weight
    """

    target: Vertex
    weight: int


class Edge(NamedTuple):
    """Edge with both endpoints and a weight."""

    u: Vertex
    v: Vertex
    weight: int = 0


# Type alias for anything accepted where an edge list is expected
EdgeLike = Union[Edge, Sequence[int]]

# Neighbor lists indexed by vertex (index 0 unused)
AdjacencyLists = Sequence[Sequence[Vertex]]


__all__ = [
    "Vertex",
    "NO_VERTEX",
    "WeightedEdge",
    "Edge",
    "EdgeLike",
    "AdjacencyLists",
]
