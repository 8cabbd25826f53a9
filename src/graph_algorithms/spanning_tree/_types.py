"""Result type shared by the minimum spanning tree algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..types import Edge


@dataclass
class SpanningTree:
    """Result of a minimum spanning tree computation.

    Attributes:
        vertex_count: Number of vertices V in the input graph.
        total_weight: Sum of the weights of the chosen edges.
        edges: Chosen edges in the order they were accepted.
    """

    vertex_count: int
    total_weight: int = 0
    edges: list[Edge] = field(default_factory=list)

    @property
    def is_spanning(self) -> bool:
        """True if the edges connect all V vertices (V - 1 edges)."""
        return len(self.edges) == max(self.vertex_count - 1, 0)

    def add(self, edge: Edge) -> None:
        self.edges.append(edge)
        self.total_weight += edge.weight
