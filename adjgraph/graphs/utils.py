"""
Utility functions for graph algorithms.

Provides path reconstruction from predecessor maps, walk validation and
weight totals.
"""

from typing import Dict, Hashable, List, Optional, Sequence

from .core import Graph, WeightedGraph


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the trail from the search root to target using a parent map.

    ``parent[node]`` is the predecessor of node on the search tree, and the
    root maps to None.

    Args:
        parent: Dictionary mapping node -> predecessor (None for the root).
        target: Node to reconstruct the trail to.

    Returns:
        List of nodes from the root to target (inclusive), or None if target
        was never reached.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    current = target
    visited = set()
    while current is not None:
        if current in visited:
            # A predecessor map from a search tree never loops
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def is_walk(graph: Graph, trail: Sequence[Hashable]) -> bool:
    """
    Return True if every consecutive pair of trail is joined by an edge.

    Edges are followed in their own direction (``get_edges_to``). An empty
    trail is not a walk; a single vertex of the graph is.
    """
    if not trail:
        return False
    if trail[0] not in graph.get_vertices():
        return False
    return all(v in graph.get_edges_to(u) for u, v in zip(trail, trail[1:]))


def total_weight(graph: WeightedGraph) -> int:
    """
    Sum the weights of all edges in a weighted graph.

    Each undirected edge is counted once.
    """
    vertices = graph.get_vertices()
    total = 0
    for i, u in enumerate(vertices):
        for j, v in enumerate(vertices):
            if not graph.is_directed() and j < i:
                continue
            lookup = graph.get_edge(u, v)
            if lookup.is_found:
                total += lookup.weight
    return total


__all__ = ["reconstruct_path", "is_walk", "total_weight"]
