"""Tests for Floyd-Warshall all-pairs shortest paths."""

import warnings

import numpy as np
import pytest
from scipy.sparse.csgraph import floyd_warshall as scipy_floyd_warshall

from graph_algorithms import (
    UNREACHABLE,
    NegativeCycleWarning,
    OutOfRangeError,
    PreconditionViolatedError,
    WeightedGraph,
    floyd_warshall,
)


def _line_graph() -> WeightedGraph:
    """1 -> 2 -> 3 with a shortcut 1 -> 3 that is longer."""
    g = WeightedGraph(3, directed=True)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(1, 3, 10)
    return g


class TestDistances:
    """Tests for the distance matrix."""

    def test_simple_directed(self):
        """Distances follow directed edges only."""
        result = floyd_warshall(_line_graph())
        assert result.distance(1, 3) == 5
        assert result.distance(1, 2) == 2
        assert result.distance(3, 1) == UNREACHABLE
        assert result.is_reachable(3, 1) is False
        assert result.has_negative_cycle is False

    def test_diagonal_zero(self):
        """Every vertex is at distance 0 from itself."""
        result = floyd_warshall(_line_graph())
        for v in range(1, 4):
            assert result.distance(v, v) == 0

    def test_matrix_shape_and_dtype(self):
        """The matrix is int64 and indexed 0..V."""
        result = floyd_warshall(_line_graph())
        assert result.matrix.shape == (4, 4)
        assert result.matrix.dtype == np.int64
        assert result.vertex_count == 3

    def test_undirected(self):
        """Undirected edges work in both directions."""
        g = WeightedGraph(3)
        g.add_edge(1, 2, 4)
        g.add_edge(2, 3, 1)
        result = floyd_warshall(g)
        assert result.distance(3, 1) == 5
        assert result.distance(1, 3) == 5

    def test_negative_edge_without_cycle(self):
        """Negative edges are allowed when no cycle is negative."""
        g = WeightedGraph(3, directed=True)
        g.add_edge(1, 2, 4)
        g.add_edge(2, 3, -2)
        g.add_edge(1, 3, 5)
        result = floyd_warshall(g)
        assert result.distance(1, 3) == 2
        assert result.has_negative_cycle is False

    def test_negative_edge_does_not_fake_reachability(self):
        """A negative edge out of an unreachable vertex keeps targets unreachable."""
        g = WeightedGraph(3, directed=True)
        g.add_edge(2, 3, -5)
        result = floyd_warshall(g)
        assert result.distance(1, 3) == UNREACHABLE
        assert result.distance(2, 3) == -5

    def test_empty_graph(self):
        """A graph without vertices produces a 1x1 sentinel matrix."""
        result = floyd_warshall(WeightedGraph(0))
        assert result.matrix.shape == (1, 1)
        assert result.has_negative_cycle is False

    def test_largest_weight_stays_reachable(self):
        """An edge just below the sentinel is a real, exact distance."""
        g = WeightedGraph(2, directed=True)
        g.add_edge(1, 2, UNREACHABLE - 1)
        result = floyd_warshall(g)
        assert result.distance(1, 2) == UNREACHABLE - 1
        assert result.is_reachable(1, 2) is True

    def test_deep_negative_total_raises(self):
        """Sums that could pass -UNREACHABLE are refused instead of clamped."""
        g = WeightedGraph(3, directed=True)
        g.add_edge(1, 2, -(2**61))
        g.add_edge(2, 3, -(2**61))
        with pytest.raises(PreconditionViolatedError, match="distance limit"):
            floyd_warshall(g)

    def test_out_of_range_query(self):
        """Querying an invalid vertex raises OutOfRangeError."""
        result = floyd_warshall(_line_graph())
        with pytest.raises(OutOfRangeError):
            result.distance(0, 1)

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_scipy(self, seed):
        """The matrix agrees with scipy on random positive-weight graphs."""
        rng = np.random.default_rng(seed)
        g = WeightedGraph(12, directed=True)
        for _ in range(30):
            u, v = rng.integers(1, 13, size=2)
            g.add_edge(int(u), int(v), int(rng.integers(1, 50)))

        ours = floyd_warshall(g).matrix[1:, 1:]
        expected = scipy_floyd_warshall(g.to_sparse(), directed=True)[1:, 1:]
        unreachable = np.isinf(expected)
        assert np.all((ours == UNREACHABLE) == unreachable)
        assert np.array_equal(ours[~unreachable], expected[~unreachable].astype(np.int64))


class TestNegativeCycles:
    """Tests for negative cycle detection."""

    def test_negative_cycle_flagged(self):
        """A negative cycle sets the flag and warns."""
        g = WeightedGraph(3, directed=True)
        g.add_edge(1, 2, 1)
        g.add_edge(2, 3, -3)
        g.add_edge(3, 1, 1)
        with pytest.warns(NegativeCycleWarning):
            result = floyd_warshall(g)
        assert result.has_negative_cycle is True

    def test_undirected_negative_edge_is_cycle(self):
        """An undirected negative edge can be walked back and forth."""
        g = WeightedGraph(2)
        g.add_edge(1, 2, -1)
        with pytest.warns(NegativeCycleWarning):
            result = floyd_warshall(g)
        assert result.has_negative_cycle is True

    def test_no_warning_without_cycle(self):
        """No warning is issued for graphs without negative cycles."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", NegativeCycleWarning)
            floyd_warshall(_line_graph())

    def test_long_negative_cycle_does_not_overflow(self):
        """Deeply negative sums are clamped instead of wrapping around."""
        n = 40
        g = WeightedGraph(n, directed=True)
        for u in range(1, n):
            g.add_edge(u, u + 1, -(10**15))
        g.add_edge(n, 1, -(10**15))
        with pytest.warns(NegativeCycleWarning):
            result = floyd_warshall(g)
        assert (result.matrix[1:, 1:] < 0).all()
