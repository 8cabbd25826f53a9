"""
Adjacency-list graph containers.

- Graph: Unweighted graph, adjacency records are neighbor vertices
- WeightedGraph: Weighted graph, adjacency records are WeightedEdge pairs

Both use 1-based vertices and can be directed or undirected. In an
undirected graph each add_edge call appends one record to each endpoint.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np
from scipy import sparse

from .base import BaseGraph
from .types import Vertex, WeightedEdge
from .validation import validate_vertex, validate_weight


class Graph(BaseGraph[Vertex]):
    """
    Unweighted adjacency-list graph.

    Example:
        graph = Graph(5)
        graph.add_edge(1, 2)
        graph.add_edge(1, 3)
        graph.adjacency(1)  # (2, 3)
    """

    def add_edge(self, u: Vertex, v: Vertex) -> None:  # type: ignore[override]
        """
        Add an edge from u to v. If undirected, also add v to u.

        Raises:
            OutOfRangeError: If u or v is outside [1, V]
        """
        u = validate_vertex(u, self._vertex_count, "u")
        v = validate_vertex(v, self._vertex_count, "v")
        self._insert((u, v), v, u)

    def edges(self) -> Iterator[tuple[Vertex, Vertex]]:  # type: ignore[override]
        return iter([(u, v) for u, v in self._edges])

    def adjacency_lists(self) -> list[list[Vertex]]:
        """
        Export neighbor lists indexed by vertex.

        Index 0 is the empty sentinel slot. The lists are copies; this is the
        precomputed representation accepted by the LCA structures.
        """
        return [list(neighbors) for neighbors in self._adj]

    def in_degrees(self) -> list[int]:
        """In-degree of every vertex (index 0 unused)."""
        degree = [0] * (self._vertex_count + 1)
        for neighbors in self._adj:
            for v in neighbors:
                degree[v] += 1
        return degree


class WeightedGraph(BaseGraph[WeightedEdge]):
    """
    Weighted adjacency-list graph with integer edge weights.

    Example:
        graph = WeightedGraph(3, directed=True)
        graph.add_edge(1, 2, 7)
        graph.adjacency(1)  # (WeightedEdge(target=2, weight=7),)
    """

    def add_edge(self, u: Vertex, v: Vertex, weight: int) -> None:  # type: ignore[override]
        """
        Add an edge from u to v with the given weight. If undirected, also
        add the mirror edge from v to u with the same weight.

        Raises:
            OutOfRangeError: If u or v is outside [1, V]
            ValidationError: If weight is not an integer with |weight| < WEIGHT_LIMIT
        """
        u = validate_vertex(u, self._vertex_count, "u")
        v = validate_vertex(v, self._vertex_count, "v")
        weight = validate_weight(weight)
        self._insert((u, v, weight), WeightedEdge(v, weight), WeightedEdge(u, weight))

    def edges(self) -> Iterator[tuple[Vertex, Vertex, int]]:  # type: ignore[override]
        return iter([(u, v, w) for u, v, w in self._edges])

    def min_weight(self) -> Optional[int]:
        """Smallest edge weight, or None for an edgeless graph."""
        if not self._edges:
            return None
        return min(w for _, _, w in self._edges)

    def to_sparse(self) -> sparse.csr_matrix:
        """
        Export the graph as a scipy CSR matrix of shape (V + 1, V + 1).

        Row/column 0 is the sentinel and stays empty. Parallel edges keep the
        minimum weight. Undirected graphs produce a symmetric matrix. Note
        that scipy's csgraph routines treat stored zeros as missing edges.
        """
        best: dict[tuple[int, int], int] = {}
        for u, records in enumerate(self._adj):
            for target, weight in records:
                key = (u, target)
                if key not in best or weight < best[key]:
                    best[key] = weight

        n = self._vertex_count + 1
        if not best:
            return sparse.csr_matrix((n, n), dtype=np.int64)

        rows = np.fromiter((k[0] for k in best), dtype=np.int64, count=len(best))
        cols = np.fromiter((k[1] for k in best), dtype=np.int64, count=len(best))
        data = np.fromiter(best.values(), dtype=np.int64, count=len(best))
        return sparse.csr_matrix((data, (rows, cols)), shape=(n, n))


__all__ = [
    "Graph",
    "WeightedGraph",
]
