"""Pytest configuration and shared fixtures for adjgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized small-graph checks
- Word graphs used across the algorithm tests
- A dict-backed Graph implementation for representation-independence tests
"""

import os
from typing import Dict, Hashable, List, Optional

import numpy as np
import pytest

from adjgraph.diagnostics import set_debug_enabled
from adjgraph.graphs import AdjacencyMatrix, Graph

WORDS = ["magician", "stuck", "buck", "muck", "struck", "block"]
CHAIN = [
    ("magician", "stuck"),
    ("stuck", "struck"),
    ("struck", "buck"),
    ("buck", "muck"),
    ("muck", "block"),
]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_checks():
    """Run every test with matrix invariant checks switched on."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


def build_graph(vertices, edges, directed=False) -> AdjacencyMatrix:
    """Build an AdjacencyMatrix from vertex and (u, v[, weight]) edge lists."""
    g = AdjacencyMatrix(directed=directed)
    for v in vertices:
        g.add_vertex(v)
    for edge in edges:
        assert g.add_edge(*edge)
    return g


@pytest.fixture
def word_chain() -> AdjacencyMatrix:
    """Directed chain magician -> stuck -> struck -> buck -> muck -> block."""
    return build_graph(WORDS, CHAIN, directed=True)


@pytest.fixture
def word_graph_undirected() -> AdjacencyMatrix:
    """Connected undirected word graph with a shortcut and a cycle."""
    edges = CHAIN + [("buck", "stuck"), ("struck", "magician"), ("block", "buck")]
    return build_graph(WORDS, edges, directed=False)


@pytest.fixture
def word_graph_directed() -> AdjacencyMatrix:
    """Directed word graph with back edges into magician and stuck."""
    edges = CHAIN + [
        ("buck", "stuck"),
        ("struck", "magician"),
        ("block", "buck"),
        ("buck", "magician"),
    ]
    return build_graph(WORDS, edges, directed=True)


def random_graph(rng: np.random.Generator, n: int, p: float, directed: bool) -> AdjacencyMatrix:
    """Random graph on vertices 0..n-1 with each possible edge present with probability p."""
    g = AdjacencyMatrix(directed=directed, capacity=2)
    for v in range(n):
        g.add_vertex(v)
    for u in range(n):
        for v in range(n):
            if u == v or (not directed and v < u):
                continue
            if rng.random() < p:
                g.add_edge(u, v, int(rng.integers(1, 10)))
    return g


def hop_distance(graph: Graph, start: Hashable, goal: Hashable) -> Optional[int]:
    """Shortest hop count by exhaustive enumeration of simple trails."""
    best: Optional[int] = None

    def extend(trail: List[Hashable]) -> None:
        nonlocal best
        u = trail[-1]
        if u == goal:
            hops = len(trail) - 1
            if best is None or hops < best:
                best = hops
            return
        for v in graph.get_edges_to(u):
            if v not in trail:
                extend(trail + [v])

    extend([start])
    return best


class DictGraph(Graph):
    """Minimal adjacency-set Graph used to check the algorithms are representation-independent."""

    def __init__(self, directed: bool = False):
        self._directed = directed
        self._out: Dict[Hashable, List[Hashable]] = {}

    def add_vertex(self, element):
        self._out.setdefault(element, [])
        return list(self._out).index(element)

    def remove_vertex(self, element):
        return self.pop_vertex(element) is not None

    def pop_vertex(self, element):
        if element not in self._out:
            return None
        del self._out[element]
        for targets in self._out.values():
            if element in targets:
                targets.remove(element)
        return element

    def get_vertices(self):
        return list(self._out)

    def add_edge(self, element1, element2):
        if element1 not in self._out or element2 not in self._out:
            return False
        if element2 in self._out[element1]:
            return False
        self._out[element1].append(element2)
        if not self._directed and element1 != element2:
            self._out[element2].append(element1)
        return True

    def remove_edge(self, element1, element2):
        if element2 not in self._out.get(element1, []):
            return False
        self._out[element1].remove(element2)
        if not self._directed and element1 != element2:
            self._out[element2].remove(element1)
        return True

    def get_edges_to(self, element):
        return list(self._out.get(element, []))

    def get_edges_from(self, element):
        if element not in self._out:
            return []
        return [u for u, targets in self._out.items() if element in targets]

    def size(self):
        return len(self._out)

    def is_directed(self):
        return self._directed

    def make_copy(self):
        clone = DictGraph(self._directed)
        clone._out = {u: list(targets) for u, targets in self._out.items()}
        return clone

    def print_vertices(self):
        return "".join(f"|{v}" for v in self._out)

    def print_edges(self):
        return "\n".join(f"{u}: {targets}" for u, targets in self._out.items())
