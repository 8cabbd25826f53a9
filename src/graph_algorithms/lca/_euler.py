"""Iterative Euler-tour traversal shared by the LCA structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from ..graph import Graph
from ..types import AdjacencyLists, Vertex
from ..validation import (
    PreconditionViolatedError,
    ValidationError,
    validate_vertex,
    validate_vertex_count,
)

TreeInput = Union[Graph, AdjacencyLists]


@dataclass
class TreeTraversal:
    """
    Everything a single depth-first pass over a rooted tree records.

    Attributes:
        vertex_count: Number of vertices V
        root: Root vertex
        parent: parent[v] for every vertex; the root is its own parent and
            slot 0 holds the sentinel 0
        depth: Edge distance from the root
        tin: Entry timestamp (timer starts at 1, ticks on entry and exit)
        tout: Exit timestamp
        euler: Vertex on entry, then again after every child returns
        first_found_at: First position of each vertex in euler
    """

    vertex_count: int
    root: Vertex
    parent: list[int] = field(default_factory=list)
    depth: list[int] = field(default_factory=list)
    tin: list[int] = field(default_factory=list)
    tout: list[int] = field(default_factory=list)
    euler: list[int] = field(default_factory=list)
    first_found_at: list[int] = field(default_factory=list)


def resolve_adjacency(
    adjacency: TreeInput, vertex_count: Optional[int] = None
) -> tuple[Sequence[Sequence[Vertex]], int]:
    """
    Normalize LCA input to (neighbor lists, V).

    A Graph supplies its own vertex count. A plain sequence of neighbor lists
    is indexed 0..V with slot 0 unused, so V defaults to len(adjacency) - 1.
    """
    if isinstance(adjacency, Graph):
        if vertex_count is not None and vertex_count != adjacency.vertex_count:
            raise ValidationError(
                f"vertex count {vertex_count} does not match graph with "
                f"{adjacency.vertex_count} vertices"
            )
        return adjacency.adjacency_lists(), adjacency.vertex_count

    if vertex_count is None:
        vertex_count = max(len(adjacency) - 1, 0)
    vertex_count = validate_vertex_count(vertex_count)
    if len(adjacency) < vertex_count + 1:
        raise ValidationError(
            f"adjacency has {len(adjacency)} slots, need {vertex_count + 1} "
            f"for vertices 1..{vertex_count}"
        )
    return adjacency, vertex_count


def traverse_tree(adj: Sequence[Sequence[Vertex]], vertex_count: int, root: Vertex) -> TreeTraversal:
    """
    Walk a tree depth-first from root with an explicit stack.

    Neighbors are visited in adjacency order and the edge back to a vertex's
    parent is skipped, so both undirected trees and child lists work.

    Raises:
        OutOfRangeError: If root or any neighbor is outside [1, V]
        PreconditionViolatedError: If a vertex is reached twice (cycle) or
            some vertex is not reachable from root
    """
    root = validate_vertex(root, vertex_count, "root")
    n = vertex_count + 1
    t = TreeTraversal(
        vertex_count=vertex_count,
        root=root,
        parent=[0] * n,
        depth=[0] * n,
        tin=[0] * n,
        tout=[0] * n,
        first_found_at=[0] * n,
    )
    euler = t.euler
    visited = [False] * n
    timer = 1

    def enter(u: int, parent: int, depth: int) -> None:
        nonlocal timer
        visited[u] = True
        t.parent[u] = parent
        t.depth[u] = depth
        t.tin[u] = timer
        timer += 1
        t.first_found_at[u] = len(euler)
        euler.append(u)

    enter(root, root, 0)
    # (vertex, index of next neighbor to examine)
    stack: list[tuple[int, int]] = [(root, 0)]

    while stack:
        u, i = stack[-1]
        neighbors = adj[u]
        child = 0
        while i < len(neighbors):
            v = neighbors[i]
            i += 1
            if v == t.parent[u]:
                continue
            v = validate_vertex(v, vertex_count, "neighbor")
            if visited[v]:
                raise PreconditionViolatedError(
                    f"vertex {v} reached twice from {root}; input is not a tree"
                )
            child = v
            break

        if child:
            stack[-1] = (u, i)
            enter(child, u, t.depth[u] + 1)
            stack.append((child, 0))
        else:
            stack.pop()
            t.tout[u] = timer
            timer += 1
            if stack:
                euler.append(stack[-1][0])

    missing = [v for v in range(1, n) if not visited[v]]
    if missing:
        raise PreconditionViolatedError(
            f"{len(missing)} vertex(es) not reachable from root {root} "
            f"(first: {missing[0]}); input is not a connected tree"
        )

    return t
