"""
Topological sort (Kahn's algorithm).

References:
    - Kahn, A. B. "Topological sorting of large networks" (1962).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4.
"""

from collections import deque
from typing import Hashable, List, Optional

from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


class NotDirectedError(ValueError):
    """Raised when an operation that needs a directed graph gets an undirected one."""


def topo_sort(graph: Graph) -> Optional[List[Hashable]]:
    """
    Topologically sort a directed graph.

    Works on ``graph.make_copy()``, so the caller's graph is never modified.
    Every vertex without incoming edges seeds the queue, which lets
    disconnected components sort independently. Vertices leave the queue in
    FIFO order; removing a vertex's outgoing edges enqueues each target left
    with no incoming edges.

    Args:
        graph: Directed graph to sort.

    Returns:
        All elements in an order where every edge ``u -> v`` has ``u`` before
        ``v``, or None if a cycle prevents such an order.

    Raises:
        NotDirectedError: If the graph is undirected.

    Complexity: O(V * (V + E)) contract calls on an AdjacencyMatrix, since
    each in-edge check rescans a column.

    Example:
        >>> from adjgraph.graphs import AdjacencyMatrix
        >>> g = AdjacencyMatrix(directed=True)
        >>> for v in "ABC":
        ...     _ = g.add_vertex(v)
        >>> g.add_edge("B", "A"), g.add_edge("A", "C")
        (True, True)
        >>> topo_sort(g)
        ['B', 'A', 'C']
    """
    if not graph.is_directed():
        raise NotDirectedError("topo_sort requires a directed graph")

    work = graph.make_copy()
    queue = deque(v for v in work.get_vertices() if not work.get_edges_from(v))
    order: List[Hashable] = []

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in work.get_edges_to(u):
            work.remove_edge(u, v)
            if not work.get_edges_from(v):
                queue.append(v)

    if len(order) != graph.size():
        logger.debug(
            "Cycle detected: only %d of %d vertices could be ordered",
            len(order),
            graph.size(),
        )
        return None

    return order


__all__ = ["NotDirectedError", "topo_sort"]
