"""
Lowest common ancestor via Euler tour + segment tree range-minimum.

The LCA of u and v is the shallowest vertex visited between the first
occurrences of u and v in the Euler tour. A static segment tree over the
tour answers that range-minimum query; every node stores the vertex of
smaller depth among its two children.

Complexity: O(V) build, O(log V) per query.
"""

from __future__ import annotations

import numpy as np

from ..types import NO_VERTEX, Vertex
from ..validation import OutOfRangeError, validate_vertex
from ._euler import TreeInput, resolve_adjacency, traverse_tree

# Depth of the padding vertex; deeper than any real tree
DEPTH_SENTINEL = 0x3F3F3F3F


class SegmentTreeLCA:
    """
    LCA structure over an Euler tour, queryable after construction.

    Example:
        adj = [[], [2, 3], [1, 4, 5], [1], [2], [2]]
        lca = SegmentTreeLCA(adj, root=1)
        lca.lca(4, 5)  # 2
        lca.euler_tour  # [1, 2, 4, 2, 5, 2, 1, 3, 1]
    """

    def __init__(self, adjacency: TreeInput, root: Vertex = 1) -> None:
        """
        Build the Euler tour and segment tree.

        Args:
            adjacency: Graph, or neighbor lists indexed 0..V (slot 0 unused)
            root: Root vertex (default 1)

        Raises:
            OutOfRangeError: If root or a neighbor is outside [1, V]
            PreconditionViolatedError: If the input is not a tree connected
                to root
        """
        adj, n = resolve_adjacency(adjacency)
        traversal = traverse_tree(adj, n, root)

        self._vertex_count: int = n
        self._root: Vertex = traversal.root
        self._euler: list[int] = traversal.euler
        self._first: list[int] = traversal.first_found_at

        depth = list(traversal.depth)
        depth[NO_VERTEX] = DEPTH_SENTINEL
        self._depth: list[int] = depth

        m = len(self._euler)
        size = 1
        while size < m:
            size <<= 1
        self._size: int = size

        depth_arr = np.asarray(depth, dtype=np.int64)
        tree = np.full(2 * size, NO_VERTEX, dtype=np.int64)
        tree[size : size + m] = self._euler
        level = size
        while level > 1:
            left = tree[level : 2 * level : 2]
            right = tree[level + 1 : 2 * level : 2]
            # Ties go to the left child
            tree[level // 2 : level] = np.where(depth_arr[left] > depth_arr[right], right, left)
            level //= 2
        self._tree: list[int] = tree.tolist()

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
    def euler_tour(self) -> list[Vertex]:
        """Get a copy of the Euler tour (length 2V - 1)."""
        return list(self._euler)

    @property
    def segment_tree(self) -> np.ndarray:
        """Get the segment tree as an array; node i has children 2i and 2i + 1."""
        return np.asarray(self._tree, dtype=np.int64)

    def depth(self, v: Vertex) -> int:
        v = validate_vertex(v, self._vertex_count, "v")
        return self._depth[v]

    def first_found_at(self, v: Vertex) -> int:
        """Get the first position of v in the Euler tour."""
        v = validate_vertex(v, self._vertex_count, "v")
        return self._first[v]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def query(self, left: int, right: int) -> Vertex:
        """
        Get the minimum-depth vertex in euler_tour[left:right + 1].

        Raises:
            OutOfRangeError: If left > right or the range leaves the tour
        """
        last = len(self._euler) - 1
        if not 0 <= left <= right <= last:
            raise OutOfRangeError(
                f"tour range [{left}, {right}] invalid, expected 0 <= left <= right <= {last}"
            )
        return self._query(left, right, 0, self._size - 1, 1)

    def _query(self, left: int, right: int, lo: int, hi: int, node: int) -> int:
        if right < lo or left > hi:
            return NO_VERTEX
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = lo + ((hi - lo) >> 1)
        a = self._query(left, right, lo, mid, node << 1)
        b = self._query(left, right, mid + 1, hi, node << 1 | 1)
        return b if self._depth[a] > self._depth[b] else a

    def lca(self, u: Vertex, v: Vertex) -> Vertex:
        """Get the lowest common ancestor of u and v."""
        u = validate_vertex(u, self._vertex_count, "u")
        v = validate_vertex(v, self._vertex_count, "v")
        left, right = self._first[u], self._first[v]
        if left > right:
            left, right = right, left
        return self.query(left, right)

    def __repr__(self) -> str:
        return f"SegmentTreeLCA(vertex_count={self._vertex_count}, root={self._root})"
