"""
graph-algorithms: Classic graph algorithms on adjacency-list graphs.

This package provides textbook implementations over in-memory graphs with
1-based integer vertices.

Available algorithms:
- shortest_paths: Dijkstra (single source), Floyd-Warshall (all pairs)
- spanning_tree: Kruskal and Prim minimum spanning trees
- lca: Lowest common ancestor (binary lifting, Euler tour + segment tree)
- ordering: Topological sort (DFS and Kahn's algorithm)
"""

__version__ = "0.1.0"

# Graph containers
from .base import BaseGraph
from .graph import Graph, WeightedGraph

# Lowest common ancestor
from .lca import DEPTH_SENTINEL, BinaryLiftingLCA, SegmentTreeLCA

# Topological ordering
from .ordering import is_topological_order, topological_sort_dfs, topological_sort_kahn

# Shortest paths
from .shortest_paths import (
    UNREACHABLE,
    AllPairsShortestPaths,
    Dijkstra,
    NegativeCycleWarning,
    floyd_warshall,
)

# Minimum spanning trees
from .spanning_tree import (
    DisconnectedGraphWarning,
    DisjointSetUnion,
    SpanningTree,
    kruskal_mst,
    prim_mst,
)
from .types import NO_VERTEX, Edge, Vertex, WeightedEdge

# Validation utilities
from .validation import (
    WEIGHT_LIMIT,
    GraphError,
    NotBuiltError,
    OutOfRangeError,
    PreconditionViolatedError,
    ValidationError,
    validate_vertex,
    validate_vertex_count,
    validate_weight,
    validate_weight_total,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vertex",
    "NO_VERTEX",
    "Edge",
    "WeightedEdge",
    # Graph containers
    "BaseGraph",
    "Graph",
    "WeightedGraph",
    # Shortest paths
    "Dijkstra",
    "UNREACHABLE",
    "floyd_warshall",
    "AllPairsShortestPaths",
    "NegativeCycleWarning",
    # Minimum spanning trees
    "SpanningTree",
    "DisjointSetUnion",
    "kruskal_mst",
    "prim_mst",
    "DisconnectedGraphWarning",
    # Lowest common ancestor
    "BinaryLiftingLCA",
    "SegmentTreeLCA",
    "DEPTH_SENTINEL",
    # Topological ordering
    "topological_sort_dfs",
    "topological_sort_kahn",
    "is_topological_order",
    # Validation
    "GraphError",
    "ValidationError",
    "OutOfRangeError",
    "PreconditionViolatedError",
    "NotBuiltError",
    "validate_vertex",
    "validate_vertex_count",
    "validate_weight",
    "validate_weight_total",
    "WEIGHT_LIMIT",
]
