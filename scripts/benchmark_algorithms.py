#!/usr/bin/env python3
"""
Benchmark graph algorithms on random graphs.

Usage:
    uv run python scripts/benchmark_algorithms.py [--sizes N,...] [--algorithms ALGO,...]

Examples:
    uv run python scripts/benchmark_algorithms.py
    uv run python scripts/benchmark_algorithms.py --sizes 1000,10000
    uv run python scripts/benchmark_algorithms.py --algorithms Dijkstra,Kruskal
    uv run python scripts/benchmark_algorithms.py --output results.json
"""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Any, Callable

from graph_algorithms import (
    BinaryLiftingLCA,
    Dijkstra,
    Graph,
    SegmentTreeLCA,
    WeightedGraph,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
    topological_sort_dfs,
    topological_sort_kahn,
)


def random_weighted_graph(n: int, m: int, seed: int = 42) -> WeightedGraph:
    """Connected undirected graph: a random tree plus m - (n - 1) extra edges."""
    rng = random.Random(seed)
    g = WeightedGraph(n)
    for v in range(2, n + 1):
        g.add_edge(rng.randint(1, v - 1), v, rng.randint(1, 1000))
    for _ in range(max(m - (n - 1), 0)):
        g.add_edge(rng.randint(1, n), rng.randint(1, n), rng.randint(1, 1000))
    return g


def random_tree(n: int, seed: int = 42) -> Graph:
    rng = random.Random(seed)
    g = Graph(n)
    for v in range(2, n + 1):
        g.add_edge(rng.randint(1, v - 1), v)
    return g


def random_dag(n: int, m: int, seed: int = 42) -> Graph:
    rng = random.Random(seed)
    g = Graph(n, directed=True)
    # Edges need two distinct endpoints
    if n < 2:
        return g
    for _ in range(m):
        u, v = sorted(rng.sample(range(1, n + 1), 2))
        g.add_edge(u, v)
    return g


def run_lca_queries(cls: type, tree: Graph, queries: int, seed: int = 42) -> None:
    rng = random.Random(seed)
    lca = cls(tree)
    n = tree.vertex_count
    for _ in range(queries):
        lca.lca(rng.randint(1, n), rng.randint(1, n))


def benchmark(fn: Callable[[], Any]) -> float:
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


def run_benchmarks(sizes: list[int], algorithms: list[str] | None = None) -> list[dict]:
    """Run every selected algorithm once per graph size."""
    results = []

    for n in sizes:
        m = 4 * n
        weighted = random_weighted_graph(n, m)
        tree = random_tree(n)
        dag = random_dag(n, m)
        edge_list = list(weighted.edges())

        # Define available algorithms
        all_algorithms: dict[str, Callable[[], Any]] = {
            "Dijkstra": lambda: Dijkstra(weighted).solve(1),
            "FloydWarshall": lambda: floyd_warshall(weighted),
            "Kruskal": lambda: kruskal_mst(edge_list, n),
            "Prim": lambda: prim_mst(weighted),
            "LiftingLCA": lambda: run_lca_queries(BinaryLiftingLCA, tree, n),
            "SegTreeLCA": lambda: run_lca_queries(SegmentTreeLCA, tree, n),
            "TopoDFS": lambda: topological_sort_dfs(dag),
            "TopoKahn": lambda: topological_sort_kahn(dag),
        }

        # Filter algorithms
        if algorithms:
            selected = {}
            for name in algorithms:
                if name in all_algorithms:
                    selected[name] = all_algorithms[name]
                else:
                    print(f"Warning: Unknown algorithm '{name}', skipping")
            all_algorithms = selected

        print(f"\nV={n}, E={m}")
        print("-" * 40)

        for algo_name, fn in all_algorithms.items():
            # O(V^3) does not scale
            if algo_name == "FloydWarshall" and n > 1000:
                print(f"  {algo_name:14s}: SKIPPED (O(V^3) too slow)")
                continue

            elapsed = benchmark(fn)
            print(f"  {algo_name:14s}: {elapsed:.4f}s")
            results.append({"vertices": n, "edges": m, "algorithm": algo_name, "time_seconds": elapsed})

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark graph algorithms")
    parser.add_argument("--sizes", default="100,1000,10000", help="Comma-separated vertex counts")
    parser.add_argument("--algorithms", help="Comma-separated algorithm names (e.g., 'Dijkstra,Prim')")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",")]
    algorithms = args.algorithms.split(",") if args.algorithms else None

    results = run_benchmarks(sizes, algorithms)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
