"""
Base class for adjacency-list graph containers.

This module provides the abstract base that both graph flavours share:

- BaseGraph: Vertex bookkeeping, directed/undirected insertion,
  read-only adjacency views and explicit deep copies

Concrete containers (Graph, WeightedGraph) only decide what an adjacency
record looks like.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional, TypeVar

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Vertex
from .validation import validate_vertex, validate_vertex_count

R = TypeVar("R")


class BaseGraph(ABC, Generic[R]):
    """
    Abstract base class for adjacency-list graphs.

    Vertices are the integers 1..V; slot 0 of the adjacency storage is a
    sentinel that never receives edges. The vertex count is fixed at
    construction and edges can only be added.

    Example:
        graph = Graph(4)
        graph.add_edge(1, 2)
        graph.add_edge(2, 3)
        for neighbor in graph.adjacency(2):
            print(neighbor)
    """

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        """
        Initialize an empty graph.

        Args:
            vertex_count: Number of vertices V (vertices are 1..V)
            directed: If False (default), every edge is mirrored

        Raises:
            ValidationError: If vertex_count is negative or not an integer
        """
        self._vertex_count: int = validate_vertex_count(vertex_count)
        self._directed: bool = bool(directed)
        self._adj: list[list[R]] = [[] for _ in range(self._vertex_count + 1)]
        self._edges: list[tuple[Any, ...]] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Get the number of vertices V."""
        return self._vertex_count

    @property
    def directed(self) -> bool:
        """Get whether edges are one-way."""
        return self._directed

    @property
    def edge_count(self) -> int:
        """Get the number of edges added (mirrors are not counted twice)."""
        return len(self._edges)

    # -------------------------------------------------------------------------
    # Vertex access
    # -------------------------------------------------------------------------

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over the vertices 1..V."""
        return iter(range(1, self._vertex_count + 1))

    def adjacency(self, u: Vertex) -> tuple[R, ...]:
        """
        Get the adjacency records of a vertex.

        Args:
            u: Vertex in [1, V]

        Returns:
            Read-only tuple of records in insertion order

        Raises:
            OutOfRangeError: If u is outside [1, V]
        """
        u = validate_vertex(u, self._vertex_count, "u")
        return tuple(self._adj[u])

    def out_degree(self, u: Vertex) -> int:
        """Number of adjacency records stored for u."""
        u = validate_vertex(u, self._vertex_count, "u")
        return len(self._adj[u])

    # -------------------------------------------------------------------------
    # Edge insertion
    # -------------------------------------------------------------------------

    @abstractmethod
    def add_edge(self, u: Vertex, v: Vertex, *args: Any) -> None:
        """Add an edge from u to v (and from v to u when undirected)."""
        pass

    def _insert(self, edge: tuple[Any, ...], forward: R, mirror: R) -> None:
        """Append forward to the source list and, when undirected, mirror to the target list."""
        u, v = edge[0], edge[1]
        self._adj[u].append(forward)
        if not self._directed:
            self._adj[v].append(mirror)
        self._edges.append(edge)

    @abstractmethod
    def edges(self) -> Iterator[tuple[Any, ...]]:
        """Iterate over inserted edges in insertion order, each undirected edge once."""
        pass

    # -------------------------------------------------------------------------
    # Copying
    # -------------------------------------------------------------------------

    def copy(self) -> Self:
        """
        Create a deep copy of this graph.

        The copy owns its own adjacency storage, so adding edges to either
        graph never affects the other.
        """
        clone = self.__class__.__new__(self.__class__)
        clone._vertex_count = self._vertex_count
        clone._directed = self._directed
        clone._adj = [list(records) for records in self._adj]
        clone._edges = list(self._edges)
        return clone

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict[int, Any]] = None) -> Self:
        return self.copy()

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._vertex_count

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            return False
        return 1 <= vertex <= self._vertex_count

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertex_count={self._vertex_count}, "
            f"directed={self._directed}, edges={len(self._edges)})"
        )
