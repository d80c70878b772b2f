"""Tests for edge values."""

import copy

import numpy as np
import pytest

from adjgraph.graphs import EMPTY_EDGE, Edge, EmptyEdge, IntEdge


class TestEmptyEdge:
    """Tests for the absent-edge sentinel."""

    def test_weight_is_zero(self):
        """Test that the empty edge always weighs 0."""
        assert EMPTY_EDGE.get_weight() == 0
        assert EMPTY_EDGE.weight == 0
        assert not EMPTY_EDGE.is_present()

    def test_set_weight_is_noop(self):
        """Test that setting a weight on the empty edge changes nothing."""
        edge = EmptyEdge()
        edge.set_weight(7)
        assert edge.get_weight() == 0

    def test_renders_as_zero(self):
        """Test string form."""
        assert str(EMPTY_EDGE) == "0"

    def test_copies_are_the_sentinel(self):
        """Test that copying keeps the singleton."""
        assert copy.copy(EMPTY_EDGE) is EMPTY_EDGE
        assert copy.deepcopy(EMPTY_EDGE) is EMPTY_EDGE


class TestIntEdge:
    """Tests for weighted edges."""

    def test_default_weight(self):
        """Test that the default weight is 1."""
        assert IntEdge().get_weight() == 1

    def test_set_weight(self):
        """Test mutating the weight."""
        edge = IntEdge(3)
        edge.set_weight(-4)
        assert edge.weight == -4
        assert edge.is_present()
        assert str(edge) == "-4"

    def test_zero_weight_rejected(self):
        """Test that 0 is reserved for the absent edge."""
        with pytest.raises(ValueError):
            IntEdge(0)
        edge = IntEdge(2)
        with pytest.raises(ValueError):
            edge.set_weight(0)
        assert edge.weight == 2

    def test_non_integer_weight_rejected(self):
        """Test that non-integer weights are rejected."""
        with pytest.raises(ValueError):
            IntEdge(1.5)
        with pytest.raises(ValueError):
            IntEdge(True)

    def test_numpy_integer_accepted(self):
        """Test that numpy integers are stored as plain ints."""
        edge = IntEdge(np.int64(5))
        assert edge.weight == 5
        assert type(edge.weight) is int


class TestOrdering:
    """Tests for weight ordering across both variants."""

    def test_int_edges_order_by_weight(self):
        """Test ordering of weighted edges."""
        assert IntEdge(1) < IntEdge(2)
        assert IntEdge(5) > IntEdge(-5)
        assert IntEdge(3) == IntEdge(3)
        assert IntEdge(3) <= IntEdge(3)

    def test_empty_edge_ordering_is_symmetric(self):
        """Test that comparisons agree whichever side the empty edge is on."""
        assert EMPTY_EDGE < IntEdge(1)
        assert IntEdge(1) > EMPTY_EDGE
        assert EMPTY_EDGE > IntEdge(-1)
        assert IntEdge(-1) < EMPTY_EDGE

    def test_sorting(self):
        """Test that a mixed list sorts by weight."""
        edges = [IntEdge(3), EMPTY_EDGE, IntEdge(-2), IntEdge(1)]
        assert [e.weight for e in sorted(edges)] == [-2, 0, 1, 3]

    def test_edges_are_unhashable(self):
        """Test that mutable edges cannot be used as dict keys."""
        with pytest.raises(TypeError):
            hash(IntEdge(1))

    def test_edge_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Edge()
