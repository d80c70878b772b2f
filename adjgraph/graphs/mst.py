"""
Minimum spanning tree: Prim's algorithm.

Uses a binary heap of edges crossing the tree/non-tree boundary.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Prim).
"""

import heapq
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ..logging import get_logger
from .core import WeightedGraph
from .matrix import AdjacencyMatrix

logger = get_logger(__name__)


def prim_min_span_tree(
    graph: WeightedGraph, start: Optional[Hashable] = None
) -> AdjacencyMatrix:
    """
    Prim's algorithm for a minimum spanning tree.

    Grows a tree from start, each step adding the lightest edge that joins
    a tree vertex to a non-tree vertex. Ties are broken by the graph's
    vertex enumeration order.

    A disconnected input has no spanning tree. In that case the search
    restarts from the first vertex not yet reached, the result is a minimum
    spanning forest (one tree per component), and a warning is logged.

    Args:
        graph: Undirected WeightedGraph.
        start: Vertex to grow the first tree from (defaults to the first
            vertex).

    Returns:
        New undirected AdjacencyMatrix holding every vertex of graph and the
        spanning tree (or forest) edges with their weights.

    Raises:
        TypeError: If graph is not a WeightedGraph.
        ValueError: If graph is directed or start is not in graph.

    Complexity: O(E log E) heap operations.

    Example:
        >>> g = AdjacencyMatrix()
        >>> for v in "ABC":
        ...     _ = g.add_vertex(v)
        >>> g.add_edge("A", "B", 1), g.add_edge("B", "C", 2), g.add_edge("A", "C", 3)
        (True, True, True)
        >>> mst = prim_min_span_tree(g)
        >>> mst.edges()
        [('A', 'B', 1), ('B', 'C', 2)]
    """
    if not isinstance(graph, WeightedGraph):
        raise TypeError("prim_min_span_tree requires a WeightedGraph")
    if graph.is_directed():
        raise ValueError("prim_min_span_tree requires an undirected graph")

    vertices = graph.get_vertices()
    tree = AdjacencyMatrix(directed=False, capacity=max(len(vertices), 1))
    for v in vertices:
        tree.add_vertex(v)

    if not vertices:
        return tree

    order: Dict[Hashable, int] = {}
    for i, v in enumerate(vertices):
        order.setdefault(v, i)

    if start is None:
        start = vertices[0]
    elif start not in order:
        raise ValueError(f"Start vertex {start!r} not in graph")

    in_tree: Set[Hashable] = set()
    # Heap entries: (weight, order[u], order[v], u, v) for deterministic ties
    pq: List[Tuple[int, int, int, Hashable, Hashable]] = []

    def push_crossing_edges(u: Hashable) -> None:
        for v in graph.get_edges_to(u):
            if v not in in_tree:
                weight = graph.get_edge(u, v).weight
                heapq.heappush(pq, (weight, order[u], order[v], u, v))

    components = 0
    for root in [start] + vertices:
        if root in in_tree:
            continue

        components += 1
        in_tree.add(root)
        push_crossing_edges(root)

        while pq:
            weight, _, _, u, v = heapq.heappop(pq)
            if v in in_tree:
                continue
            in_tree.add(v)
            tree.add_edge(u, v, weight)
            push_crossing_edges(v)

    if components > 1:
        logger.warning(
            "Graph is disconnected (%d components); returning a minimum spanning forest",
            components,
        )

    return tree


__all__ = ["prim_min_span_tree"]
