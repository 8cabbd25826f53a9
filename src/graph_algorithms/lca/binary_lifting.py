"""
Lowest common ancestor via binary lifting.

A depth-first pass records entry/exit timestamps and each vertex's parent;
the ancestor table then stores the 2^k-th ancestor of every vertex for
k = 0..L with L = ceil(log2(V)). Ancestor tests are O(1) interval checks and
an LCA query climbs greedily from the highest level down.

Complexity: O(V log V) build, O(log V) per query.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..types import Vertex
from ..validation import ValidationError, validate_vertex
from ._euler import TreeInput, resolve_adjacency, traverse_tree


class BinaryLiftingLCA:
    """
    LCA structure built once over a rooted tree, queryable afterwards.

    Example:
        adj = [[], [2, 3], [1, 4, 5], [1], [2], [2]]
        lca = BinaryLiftingLCA(adj, 5, root=1)
        lca.lca(4, 5)  # 2
        lca.lca(4, 3)  # 1
    """

    def __init__(
        self,
        adjacency: TreeInput,
        vertex_count: Optional[int] = None,
        root: Vertex = 1,
    ) -> None:
        """
        Build the ancestor table.

        Args:
            adjacency: Graph, or neighbor lists indexed 0..V (slot 0 unused)
            vertex_count: Number of vertices V (default: inferred)
            root: Root vertex (default 1)

        Raises:
            OutOfRangeError: If root or a neighbor is outside [1, V]
            PreconditionViolatedError: If the input is not a tree connected
                to root
        """
        adj, n = resolve_adjacency(adjacency, vertex_count)
        traversal = traverse_tree(adj, n, root)

        self._vertex_count: int = n
        self._root: Vertex = traversal.root
        self._tin: list[int] = traversal.tin
        self._tout: list[int] = traversal.tout
        self._depth: list[int] = traversal.depth
        self._levels: int = (n - 1).bit_length()

        up = np.zeros((n + 1, self._levels + 1), dtype=np.int64)
        up[:, 0] = traversal.parent
        for k in range(1, self._levels + 1):
            up[:, k] = up[up[:, k - 1], k - 1]
        self._up: np.ndarray = up

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Vertex:
        return self._root

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def levels(self) -> int:
        """Get L, the highest jump level (jumps of 2^L)."""
        return self._levels

    @property
    def ancestor_table(self) -> np.ndarray:
        """Get a copy of the (V + 1) x (L + 1) ancestor table."""
        return self._up.copy()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def depth(self, v: Vertex) -> int:
        v = validate_vertex(v, self._vertex_count, "v")
        return self._depth[v]

    def parent(self, v: Vertex) -> Optional[Vertex]:
        """Get v's parent, or None for the root."""
        v = validate_vertex(v, self._vertex_count, "v")
        if v == self._root:
            return None
        return int(self._up[v, 0])

    def is_ancestor(self, u: Vertex, v: Vertex) -> bool:
        """
        Check whether u is an ancestor of v (every vertex is its own ancestor).

        Entry/exit intervals of a depth-first traversal nest exactly along
        ancestor chains.
        """
        u = validate_vertex(u, self._vertex_count, "u")
        v = validate_vertex(v, self._vertex_count, "v")
        return self._is_ancestor(u, v)

    def _is_ancestor(self, u: int, v: int) -> bool:
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: Vertex, v: Vertex) -> Vertex:
        """Get the lowest common ancestor of u and v."""
        u = validate_vertex(u, self._vertex_count, "u")
        v = validate_vertex(v, self._vertex_count, "v")

        if self._is_ancestor(u, v):
            return u
        if self._is_ancestor(v, u):
            return v

        up = self._up
        for k in range(self._levels, -1, -1):
            jump = int(up[u, k])
            if not self._is_ancestor(jump, v):
                u = jump
        return int(up[u, 0])

    def kth_ancestor(self, v: Vertex, k: int) -> Optional[Vertex]:
        """
        Get the ancestor k edges above v.

        Returns None when k exceeds v's depth.
        """
        v = validate_vertex(v, self._vertex_count, "v")
        if k < 0:
            raise ValidationError(f"k must be >= 0, got {k}")
        if k > self._depth[v]:
            return None
        level = 0
        while k:
            if k & 1:
                v = int(self._up[v, level])
            k >>= 1
            level += 1
        return v

    def distance(self, u: Vertex, v: Vertex) -> int:
        """Number of tree edges on the path between u and v."""
        w = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[w]

    def __repr__(self) -> str:
        return (
            f"BinaryLiftingLCA(vertex_count={self._vertex_count}, "
            f"root={self._root}, levels={self._levels})"
        )
