"""
Graph traversal algorithms: depth-first and breadth-first path search.

Both searches expand a vertex through ``get_edges_to`` and follow the
graph's own enumeration order, so results are deterministic whenever the
graph's enumeration is (slot order for AdjacencyMatrix).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Set

from .core import Graph
from .utils import reconstruct_path


def dfs(graph: Graph, start: Hashable, goal: Hashable) -> Optional[List[Hashable]]:
    """
    Depth-first search for a trail from start to goal.

    A vertex is marked visited when the search enters it and unmarked again
    when every branch below it fails, so a vertex can be re-entered later
    along a different trail. The first trail that reaches goal is returned;
    it is not necessarily the shortest.

    Args:
        graph: Graph to search.
        start: Element to start from.
        goal: Element to reach.

    Returns:
        List of elements from start to goal (inclusive), ``[start]`` when
        start equals goal, or None if no trail exists or start is not in
        the graph.

    Complexity: exponential in the worst case because of re-entry. The
    search keeps an explicit stack, so trail length is not limited by the
    interpreter's recursion limit.

    Example:
        >>> from adjgraph.graphs import AdjacencyMatrix
        >>> g = AdjacencyMatrix(directed=True)
        >>> for v in "ABC":
        ...     _ = g.add_vertex(v)
        >>> g.add_edge("A", "B"), g.add_edge("B", "C")
        (True, True)
        >>> dfs(g, "A", "C")
        ['A', 'B', 'C']
    """
    if start not in graph.get_vertices():
        return None

    trail: List[Hashable] = [start]
    visited: Set[Hashable] = {start}
    if start == goal:
        return trail

    # One neighbor iterator per vertex on the trail, innermost last
    stack: List[Iterator[Hashable]] = [iter(graph.get_edges_to(start))]

    while stack:
        for v in stack[-1]:
            if v in visited:
                continue
            visited.add(v)
            trail.append(v)
            if v == goal:
                return trail
            stack.append(iter(graph.get_edges_to(v)))
            break
        else:
            stack.pop()
            if stack:
                visited.discard(trail.pop())

    return None


def bfs(graph: Graph, start: Hashable, goal: Hashable) -> Optional[List[Hashable]]:
    """
    Breadth-first search for a shortest (fewest-edges) trail from start to goal.

    Args:
        graph: Graph to search.
        start: Element to start from.
        goal: Element to reach.

    Returns:
        List of elements from start to goal (inclusive), or None if goal is
        unreachable or start is not in the graph.

    Complexity: O(V + E) neighbor visits (each ``get_edges_to`` call on an
    AdjacencyMatrix costs O(capacity)).

    Example:
        >>> from adjgraph.graphs import AdjacencyMatrix
        >>> g = AdjacencyMatrix()
        >>> for v in "ABCD":
        ...     _ = g.add_vertex(v)
        >>> for u, v in [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")]:
        ...     _ = g.add_edge(u, v)
        >>> bfs(g, "A", "D")
        ['A', 'D']
    """
    if start not in graph.get_vertices():
        return None

    parent: Dict[Hashable, Optional[Hashable]] = {start: None}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        if u == goal:
            return reconstruct_path(parent, u)

        for v in graph.get_edges_to(u):
            if v not in parent:
                parent[v] = u
                queue.append(v)

    return None


__all__ = ["dfs", "bfs"]
