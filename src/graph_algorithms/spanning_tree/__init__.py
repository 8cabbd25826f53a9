"""
Minimum spanning tree algorithms.

This module provides:
- kruskal_mst: Edge-list Kruskal with disjoint-set union
- prim_mst: Heap-based Prim over a WeightedGraph
- DisjointSetUnion: The union-find structure Kruskal relies on
"""

from ._types import SpanningTree
from .disjoint_set import DisjointSetUnion
from .kruskal import kruskal_mst
from .prim import DisconnectedGraphWarning, prim_mst

__all__ = [
    "SpanningTree",
    "DisjointSetUnion",
    "kruskal_mst",
    "prim_mst",
    "DisconnectedGraphWarning",
]
