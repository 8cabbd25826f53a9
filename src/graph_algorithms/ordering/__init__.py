"""
Vertex ordering algorithms.

This module provides topological sorting for directed acyclic graphs.
"""

from .topological import is_topological_order, topological_sort_dfs, topological_sort_kahn

__all__ = [
    "topological_sort_dfs",
    "topological_sort_kahn",
    "is_topological_order",
]
