"""
Abstract graph contracts.

Graph is the capability set every graph representation provides; the
algorithms in this package are written against it alone. WeightedGraph
adds weight-aware edge operations.

Vertices are addressed by the elements stored in them. Mutators report
failure through their return value (False / None) and do not raise for a
missing vertex or edge.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, List, Optional

from .result import EdgeLookup


class Graph(ABC):
    """
    Graph contract: vertex/edge mutation, neighbor queries, copy and rendering.

    For directed graphs, ``get_edges_to(v)`` lists the targets of edges
    leaving ``v`` and ``get_edges_from(v)`` lists the sources of edges
    entering ``v``. For undirected graphs both return the neighbors of ``v``.
    """

    @abstractmethod
    def add_vertex(self, element: Hashable) -> int:
        """
        Add a vertex holding element.

        Returns:
            Handle (slot) of the new vertex.
        """

    @abstractmethod
    def remove_vertex(self, element: Hashable) -> bool:
        """Remove the vertex holding element and all its edges; True if it existed."""

    @abstractmethod
    def pop_vertex(self, element: Hashable) -> Optional[Hashable]:
        """Remove the vertex holding element and return the element, or None."""

    @abstractmethod
    def get_vertices(self) -> List[Hashable]:
        """Return the elements of all vertices."""

    @abstractmethod
    def add_edge(self, element1: Hashable, element2: Hashable) -> bool:
        """
        Add an edge from element1 to element2 (both ways if undirected).

        Returns:
            True if the edge was added, False if a vertex is missing or the
            edge already exists.
        """

    @abstractmethod
    def remove_edge(self, element1: Hashable, element2: Hashable) -> bool:
        """Remove the edge from element1 to element2; True if it existed."""

    @abstractmethod
    def get_edges_to(self, element: Hashable) -> List[Hashable]:
        """Return the elements that element has an edge to."""

    @abstractmethod
    def get_edges_from(self, element: Hashable) -> List[Hashable]:
        """Return the elements that have an edge to element."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of vertices."""

    @abstractmethod
    def is_directed(self) -> bool:
        """Return True if the graph is directed."""

    @abstractmethod
    def make_copy(self) -> "Graph":
        """
        Return a structurally independent copy.

        Vertex and edge changes on either graph never affect the other;
        the elements themselves are shared.
        """

    @abstractmethod
    def print_vertices(self) -> str:
        """Return a debugging rendering of the vertices."""

    @abstractmethod
    def print_edges(self) -> str:
        """Return a debugging rendering of the edges."""

    @property
    def directed(self) -> bool:
        return self.is_directed()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: object) -> bool:
        return element in self.get_vertices()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.get_vertices())


class WeightedGraph(Graph):
    """Graph whose edges carry nonzero integer weights."""

    @abstractmethod
    def add_edge(self, element1: Hashable, element2: Hashable, weight: int = 1) -> bool:
        """
        Add an edge of the given weight.

        Returns:
            True if added; False if a vertex is missing, the edge already
            exists, or weight is 0.
        """

    @abstractmethod
    def get_edge(self, element1: Hashable, element2: Hashable) -> EdgeLookup:
        """Look up the edge from element1 to element2."""

    @abstractmethod
    def pop_edge(self, element1: Hashable, element2: Hashable) -> EdgeLookup:
        """Remove the edge from element1 to element2, returning its prior state."""


__all__ = ["Graph", "WeightedGraph"]
