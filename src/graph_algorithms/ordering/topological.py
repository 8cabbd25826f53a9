"""
Topological ordering of directed graphs.

This module provides two classic algorithms plus a checker:
- topological_sort_dfs: Reverse DFS finishing order, verified afterwards
- topological_sort_kahn: Kahn's algorithm (BFS over in-degree zero vertices)
- is_topological_order: Check that every edge points forward in an order

Both sorts return None when the graph has a cycle. An undirected graph
with at least one edge stores that edge in both directions and therefore
has no topological order.
"""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

from ..graph import Graph
from ..types import Vertex


def is_topological_order(graph: Graph, order: Sequence[Vertex]) -> bool:
    """
    Check whether order lists every vertex once with all edges pointing forward.

    Args:
        graph: Graph to check against
        order: Candidate ordering of the vertices 1..V

    Returns:
        True if order is a valid topological ordering of graph.
    """
    n = graph.vertex_count
    if len(order) != n:
        return False

    pos = [-1] * (n + 1)
    for i, u in enumerate(order):
        if u not in graph or pos[u] != -1:
            return False
        pos[u] = i

    for u, neighbors in enumerate(graph.adjacency_lists()):
        for v in neighbors:
            if pos[v] <= pos[u]:
                return False
    return True


def topological_sort_dfs(graph: Graph) -> Optional[list[Vertex]]:
    """
    Compute a topological ordering by reversing DFS finishing order.

    DFS starts from vertices 1..V in increasing order and explores neighbors
    in adjacency order. The result is verified edge by edge, which is how a
    cycle is detected.

    Args:
        graph: Directed graph

    Returns:
        List of vertices in topological order, or None if the graph has a cycle.

    Example:
        >>> g = Graph(3, directed=True)
        >>> g.add_edge(1, 3)
        >>> g.add_edge(3, 2)
        >>> topological_sort_dfs(g)
        [1, 3, 2]
    """
    n = graph.vertex_count
    adj = graph.adjacency_lists()
    visited = [False] * (n + 1)
    finished: list[Vertex] = []

    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        # (vertex, index of next neighbor to examine)
        stack: list[tuple[int, int]] = [(start, 0)]
        while stack:
            u, i = stack[-1]
            neighbors = adj[u]
            while i < len(neighbors) and visited[neighbors[i]]:
                i += 1
            if i < len(neighbors):
                v = neighbors[i]
                stack[-1] = (u, i + 1)
                visited[v] = True
                stack.append((v, 0))
            else:
                stack.pop()
                finished.append(u)

    finished.reverse()
    if not is_topological_order(graph, finished):
        return None
    return finished


def topological_sort_kahn(graph: Graph) -> Optional[list[Vertex]]:
    """
    Compute a topological ordering using Kahn's algorithm.

    Vertices with no incoming edges are queued in increasing order; removing
    a vertex decrements its neighbors' in-degrees.

    Args:
        graph: Directed graph

    Returns:
        List of vertices in topological order, or None if the graph has a cycle.

    Example:
        >>> g = Graph(3, directed=True)
        >>> g.add_edge(1, 2)
        >>> g.add_edge(2, 3)
        >>> topological_sort_kahn(g)
        [1, 2, 3]
    """
    n = graph.vertex_count
    adj = graph.adjacency_lists()
    in_degree = graph.in_degrees()

    # Start with vertices that have no incoming edges
    queue: deque[int] = deque(u for u in range(1, n + 1) if in_degree[u] == 0)
    result: list[Vertex] = []

    while queue:
        u = queue.popleft()
        result.append(u)

        for v in adj[u]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)

    # If not all vertices processed, graph has a cycle
    if len(result) != n:
        return None

    return result
