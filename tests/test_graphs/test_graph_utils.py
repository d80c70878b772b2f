"""Tests for graph utility functions."""

from adjgraph.graphs import AdjacencyMatrix, is_walk, reconstruct_path, total_weight
from conftest import build_graph


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction on simple parent map."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]

    def test_reconstruct_path_root(self):
        """Test path to the root itself."""
        parent = {"A": None, "B": "A"}
        assert reconstruct_path(parent, "A") == ["A"]

    def test_reconstruct_path_unreached(self):
        """Test that an unreached target gives None."""
        parent = {"A": None, "B": "A"}
        assert reconstruct_path(parent, "Z") is None

    def test_reconstruct_path_cycle(self):
        """Test that a looping parent map gives None."""
        parent = {"A": "B", "B": "A"}
        assert reconstruct_path(parent, "A") is None


class TestIsWalk:
    """Tests for is_walk function."""

    def test_directed_walk(self):
        """Test that walks follow edge direction."""
        g = build_graph("ABC", [("A", "B"), ("B", "C")], directed=True)
        assert is_walk(g, ["A", "B", "C"])
        assert not is_walk(g, ["C", "B", "A"])
        assert not is_walk(g, ["A", "C"])

    def test_trivial_walks(self):
        """Test empty and single-vertex trails."""
        g = build_graph("AB", [])
        assert not is_walk(g, [])
        assert is_walk(g, ["A"])
        assert not is_walk(g, ["Z"])


class TestTotalWeight:
    """Tests for total_weight function."""

    def test_undirected_counts_each_edge_once(self):
        """Test undirected totals."""
        g = build_graph("ABC", [("A", "B", 2), ("B", "C", -5)])
        assert total_weight(g) == -3

    def test_directed_counts_both_directions(self):
        """Test directed totals."""
        g = build_graph("AB", [("A", "B", 2), ("B", "A", 7)], directed=True)
        assert total_weight(g) == 9

    def test_empty(self):
        """Test the empty graph."""
        assert total_weight(AdjacencyMatrix()) == 0
