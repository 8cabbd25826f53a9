"""Tests for input validation module."""

import numpy as np
import pytest

from graph_algorithms import UNREACHABLE
from graph_algorithms.validation import (
    WEIGHT_LIMIT,
    GraphError,
    NotBuiltError,
    OutOfRangeError,
    PreconditionViolatedError,
    ValidationError,
    validate_vertex,
    validate_vertex_count,
    validate_weight,
    validate_weight_total,
)


class TestExceptionHierarchy:
    """Tests for the exception taxonomy."""

    def test_all_errors_are_graph_errors(self):
        """Every specific error derives from GraphError and ValueError."""
        for exc in (ValidationError, OutOfRangeError, PreconditionViolatedError, NotBuiltError):
            assert issubclass(exc, GraphError)
            assert issubclass(exc, ValueError)

    def test_out_of_range_is_index_error(self):
        """OutOfRangeError can be caught as IndexError."""
        assert issubclass(OutOfRangeError, IndexError)

    def test_not_built_is_runtime_error(self):
        """NotBuiltError can be caught as RuntimeError."""
        assert issubclass(NotBuiltError, RuntimeError)


class TestVertexCountValidation:
    """Tests for vertex count validation."""

    def test_valid_count(self):
        """Non-negative counts are returned unchanged."""
        assert validate_vertex_count(0) == 0
        assert validate_vertex_count(10) == 10

    def test_numpy_integer_accepted(self):
        """numpy integers are converted to int."""
        result = validate_vertex_count(np.int64(4))
        assert result == 4
        assert type(result) is int

    def test_negative_raises(self):
        """Negative count raises ValidationError."""
        with pytest.raises(ValidationError, match="must be >= 0"):
            validate_vertex_count(-1)

    def test_float_raises(self):
        """Float count raises ValidationError."""
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_vertex_count(3.0)

    def test_bool_raises(self):
        """Booleans are not vertex counts."""
        with pytest.raises(ValidationError):
            validate_vertex_count(True)


class TestVertexValidation:
    """Tests for vertex identifier validation."""

    def test_valid_bounds(self):
        """Both ends of [1, V] are valid."""
        assert validate_vertex(1, 5) == 1
        assert validate_vertex(5, 5) == 5

    def test_zero_is_sentinel(self):
        """Vertex 0 is reserved and rejected."""
        with pytest.raises(OutOfRangeError, match=r"out of bounds \[1, 5\]"):
            validate_vertex(0, 5)

    def test_above_count_raises(self):
        """Vertex above V raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            validate_vertex(6, 5)

    def test_name_in_message(self):
        """The argument name appears in the message."""
        with pytest.raises(OutOfRangeError, match="source"):
            validate_vertex(9, 3, "source")

    def test_non_integer_raises(self):
        """Strings are not vertices."""
        with pytest.raises(OutOfRangeError, match="integer vertex id"):
            validate_vertex("1", 3)


class TestWeightValidation:
    """Tests for edge weight validation."""

    def test_valid_weights(self):
        """Positive, zero and negative integers are valid weights."""
        assert validate_weight(5) == 5
        assert validate_weight(0) == 0
        assert validate_weight(-3) == -3

    def test_weight_limit(self):
        """Weights must stay strictly inside (-WEIGHT_LIMIT, WEIGHT_LIMIT)."""
        assert validate_weight(WEIGHT_LIMIT - 1) == WEIGHT_LIMIT - 1
        assert validate_weight(-(WEIGHT_LIMIT - 1)) == -(WEIGHT_LIMIT - 1)
        with pytest.raises(ValidationError, match="out of range"):
            validate_weight(WEIGHT_LIMIT)
        with pytest.raises(ValidationError, match="out of range"):
            validate_weight(-WEIGHT_LIMIT)
        with pytest.raises(ValidationError, match="out of range"):
            validate_weight(2**63)

    def test_weight_limit_matches_sentinel(self):
        """The weight limit is the unreachable distance sentinel."""
        assert WEIGHT_LIMIT == UNREACHABLE

    def test_float_raises(self):
        """Float weights raise ValidationError."""
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_weight(1.5)


class TestWeightTotalValidation:
    """Tests for the path length bound over a graph's weights."""

    def test_returns_absolute_sum(self):
        """Negative weights count by magnitude."""
        assert validate_weight_total([3, -4, 0]) == 7
        assert validate_weight_total([]) == 0

    def test_just_below_limit(self):
        """A total one below the limit is accepted."""
        assert validate_weight_total([WEIGHT_LIMIT - 2, 1]) == WEIGHT_LIMIT - 1

    def test_reaching_limit_raises(self):
        """A total equal to the limit could collide with the sentinel."""
        with pytest.raises(PreconditionViolatedError, match="distance limit"):
            validate_weight_total([WEIGHT_LIMIT - 1, 1])
        with pytest.raises(PreconditionViolatedError, match="distance limit"):
            validate_weight_total([-(2**61), -(2**61)])
