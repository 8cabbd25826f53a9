"""
Disjoint-set union (union-find) over the vertices 1..n.

find() uses path compression and union() merges the smaller set into the
larger one, giving near-constant amortized time per operation.
"""

from __future__ import annotations

from ..types import Vertex
from ..validation import validate_vertex, validate_vertex_count


class DisjointSetUnion:
    """
    Union-find with path compression and union by size.

    Example:
        >>> dsu = DisjointSetUnion(4)
        >>> dsu.union(1, 2)
        True
        >>> dsu.union(2, 1)
        False
        >>> dsu.connected(1, 2)
        True
    """

    def __init__(self, n: int) -> None:
        self._n: int = validate_vertex_count(n)
        self._parent: list[int] = list(range(self._n + 1))
        self._size: list[int] = [1] * (self._n + 1)
        self._size[0] = 0
        self._components: int = self._n

    @property
    def component_count(self) -> int:
        """Get the number of disjoint sets."""
        return self._components

    def find(self, v: Vertex) -> Vertex:
        """Find the representative of the set containing v."""
        v = validate_vertex(v, self._n, "v")
        root = v
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: Vertex, b: Vertex) -> bool:
        """
        Merge the sets containing a and b.

        Returns:
            True if a merge happened, False if a and b were already together
        """
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        self._size[b] = 0
        self._components -= 1
        return True

    def connected(self, a: Vertex, b: Vertex) -> bool:
        return self.find(a) == self.find(b)

    def set_size(self, v: Vertex) -> int:
        """Size of the set containing v."""
        return self._size[self.find(v)]
