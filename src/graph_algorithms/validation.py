"""
Input validation utilities for graph algorithms.

Provides the exception hierarchy shared by every graph container and
algorithm, plus centralized validators for vertex identifiers, vertex
counts and edge weights. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable

# Same value as the UNREACHABLE distance sentinel
WEIGHT_LIMIT = 0x3F3F3F3F3F3F3F3F


class GraphError(ValueError):
    """Base exception for graph algorithm errors."""

    pass


class ValidationError(GraphError):
    """Raised when an argument is malformed (wrong type or negative count)."""

    pass


class OutOfRangeError(GraphError, IndexError):
    """Raised when a vertex identifier falls outside [1, V]."""

    pass


class PreconditionViolatedError(GraphError):
    """
    Raised when an algorithm's input contract is broken.

    Examples: a negative edge weight given to Dijkstra, a cyclic or
    disconnected graph given to an LCA structure, or an unreachable target
    passed to path reconstruction.
    """

    pass


class NotBuiltError(GraphError, RuntimeError):
    """Raised when a query is issued before the structure was solved/built."""

    pass


def validate_vertex_count(vertex_count: Any) -> int:
    """
    Validate a graph's vertex count.

    Args:
        vertex_count: Number of vertices

    Returns:
        Validated vertex count

    Raises:
        ValidationError: If the count is not a non-negative integer
    """
    if isinstance(vertex_count, bool) or not isinstance(vertex_count, numbers.Integral):
        raise ValidationError(
            f"vertex count must be an integer, got {type(vertex_count).__name__}"
        )
    if vertex_count < 0:
        raise ValidationError(f"vertex count must be >= 0, got {vertex_count}")
    return int(vertex_count)


def validate_vertex(vertex: Any, vertex_count: int, name: str = "vertex") -> int:
    """
    Validate that a vertex identifier lies in [1, vertex_count].

    Args:
        vertex: Vertex identifier
        vertex_count: Number of vertices in the graph
        name: Argument name used in the error message

    Returns:
        Validated vertex

    Raises:
        OutOfRangeError: If the vertex is not an integer in range
    """
    if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
        raise OutOfRangeError(f"{name} must be an integer vertex id, got {vertex!r}")
    if vertex < 1 or vertex > vertex_count:
        raise OutOfRangeError(f"{name} {vertex} out of bounds [1, {vertex_count}]")
    return int(vertex)


def validate_weight(weight: Any) -> int:
    """
    Validate an edge weight.

    Weights are integers strictly inside (-WEIGHT_LIMIT, WEIGHT_LIMIT), so no
    single edge can reach the UNREACHABLE distance sentinel.

    Args:
        weight: Edge weight

    Returns:
        Validated weight

    Raises:
        ValidationError: If the weight is not an integer in range
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise ValidationError(f"edge weight must be an integer, got {weight!r}")
    if not -WEIGHT_LIMIT < weight < WEIGHT_LIMIT:
        raise ValidationError(
            f"edge weight {weight} out of range, |weight| must be below {WEIGHT_LIMIT:#x}"
        )
    return int(weight)


def validate_weight_total(weights: Iterable[int]) -> int:
    """
    Validate that path lengths built from these weights stay exact.

    A simple path uses every edge at most once, so when the absolute weights
    sum to less than WEIGHT_LIMIT every shortest distance is representable
    and distinct from the UNREACHABLE sentinel.

    Args:
        weights: Edge weights of a graph

    Returns:
        Sum of absolute weights

    Raises:
        PreconditionViolatedError: If the sum reaches WEIGHT_LIMIT
    """
    total = sum(abs(w) for w in weights)
    if total >= WEIGHT_LIMIT:
        raise PreconditionViolatedError(
            f"total absolute edge weight {total} reaches the distance limit {WEIGHT_LIMIT:#x}"
        )
    return total


__all__ = [
    "WEIGHT_LIMIT",
    "GraphError",
    "ValidationError",
    "OutOfRangeError",
    "PreconditionViolatedError",
    "NotBuiltError",
    "validate_vertex_count",
    "validate_vertex",
    "validate_weight",
    "validate_weight_total",
]
