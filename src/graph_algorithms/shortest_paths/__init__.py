"""
Shortest path algorithms.

This module provides:
- Dijkstra: Single-source shortest paths for non-negative weights
- floyd_warshall: All-pairs shortest paths with negative cycle detection
"""

from .dijkstra import UNREACHABLE, Dijkstra
from .floyd_warshall import AllPairsShortestPaths, NegativeCycleWarning, floyd_warshall

__all__ = [
    "Dijkstra",
    "UNREACHABLE",
    "floyd_warshall",
    "AllPairsShortestPaths",
    "NegativeCycleWarning",
]
