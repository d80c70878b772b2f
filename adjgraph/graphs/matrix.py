"""
Adjacency-matrix graph storage.

AdjacencyMatrix keeps a dense square numpy object array of Edge cells and a
parallel list of vertex elements, both indexed by vertex slot. Rows are the
FROM vertices and columns the TO vertices. Slots stay fixed while a vertex
lives; removal vacates the slot without compaction and the next add_vertex
reuses the first vacant slot. When every slot is taken the capacity doubles
and existing slots keep their indices.

Undirected graphs store the identical edge object at ``[i, j]`` and
``[j, i]``, so a weight change through either cell is seen through both.

Complexity (n = capacity):
    - add_vertex: O(n) scan, O(n^2) when the matrix grows
    - remove_vertex / pop_vertex: O(n)
    - add_edge / remove_edge / get_edge: O(1) by slot, O(n) by element
    - get_edges_to / get_edges_from: O(n)
    - make_copy: O(n^2)
"""

import copy
from numbers import Integral
from typing import Dict, Hashable, List, Optional, Tuple

import numpy as np

from ..diagnostics import check_matrix_storage
from ..logging import get_logger
from .core import WeightedGraph
from .edge import EMPTY_EDGE, Edge, IntEdge
from .result import EdgeLookup

logger = get_logger(__name__)

DEFAULT_CAPACITY = 10


def _empty_cells(capacity: int) -> np.ndarray:
    cells = np.empty((capacity, capacity), dtype=object)
    cells.fill(EMPTY_EDGE)
    return cells


def _check_weight_type(weight: int) -> None:
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(f"Edge weight must be an int, got {weight!r}")


class AdjacencyMatrix(WeightedGraph):
    """
    Directed or undirected graph stored as a dense adjacency matrix.

    Elements are not deduplicated: adding an element twice creates two
    vertices, and element-addressed operations resolve to the first slot
    holding an equal element. The other vertex stays reachable through
    the ``*_at`` slot operations. ``None`` marks a vacant slot and cannot be
    stored as an element.

    Args:
        directed: If True, graph is directed; otherwise undirected.
        capacity: Initial number of vertex slots (default 10).

    Raises:
        ValueError: If capacity is not a positive integer.

    Example:
        >>> g = AdjacencyMatrix(directed=True)
        >>> g.add_vertex("a"), g.add_vertex("b")
        (0, 1)
        >>> g.add_edge("a", "b", 5)
        True
        >>> g.get_edge("a", "b").weight
        5
        >>> g.get_edges_to("a")
        ['b']
    """

    def __init__(self, directed: bool = False, capacity: int = DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, Integral) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._directed = bool(directed)
        self._capacity = int(capacity)
        self._elements: List[Optional[Hashable]] = [None] * self._capacity
        self._cells = _empty_cells(self._capacity)
        self._num_vertices = 0

    # -- vertices ---------------------------------------------------------

    def add_vertex(self, element: Hashable) -> int:
        """
        Store element in the first vacant slot, growing the matrix if full.

        Returns:
            Slot of the new vertex.

        Raises:
            ValueError: If element is None.
        """
        if element is None:
            raise ValueError("None cannot be stored as a vertex element")

        if self._num_vertices == self._capacity:
            self._grow()

        slot = next(i for i, stored in enumerate(self._elements) if stored is None)
        self._elements[slot] = element
        self._num_vertices += 1
        self._check_invariants()
        return slot

    def _grow(self) -> None:
        old = self._capacity
        new = old * 2
        cells = _empty_cells(new)
        cells[:old, :old] = self._cells
        self._cells = cells
        self._elements.extend([None] * (new - old))
        self._capacity = new
        logger.debug("Adjacency matrix grown from %d to %d slots", old, new)

    def find_vertex(self, element: Hashable) -> Optional[int]:
        """Return the first slot holding an element equal to element, or None."""
        if element is None:
            return None
        for slot, stored in enumerate(self._elements):
            if stored is not None and stored == element:
                return slot
        return None

    def get_vertex(self, slot: int) -> Optional[Hashable]:
        """Return the element at slot, or None for a vacant or out-of-range slot."""
        if self._is_live(slot):
            return self._elements[slot]
        return None

    def remove_vertex(self, element: Hashable) -> bool:
        slot = self.find_vertex(element)
        if slot is None:
            return False
        return self.remove_vertex_at(slot)

    def remove_vertex_at(self, slot: int) -> bool:
        """Vacate slot and clear its row and column; False if nothing lives there."""
        return self.pop_vertex_at(slot) is not None

    def pop_vertex(self, element: Hashable) -> Optional[Hashable]:
        slot = self.find_vertex(element)
        if slot is None:
            return None
        return self.pop_vertex_at(slot)

    def pop_vertex_at(self, slot: int) -> Optional[Hashable]:
        """
        Vacate slot and return its element.

        The whole row and column of the slot are reset to the empty edge in
        both directions, so the vertex leaves no dangling edges behind.
        """
        if not self._is_live(slot):
            return None

        element = self._elements[slot]
        self._elements[slot] = None
        self._cells[slot, :] = EMPTY_EDGE
        self._cells[:, slot] = EMPTY_EDGE
        self._num_vertices -= 1
        logger.debug("Removed vertex %r from slot %d", element, slot)
        self._check_invariants()
        return element

    def get_vertices(self) -> List[Hashable]:
        """Return the elements of all live vertices in slot order."""
        return [element for element in self._elements if element is not None]

    # -- edges ------------------------------------------------------------

    def add_edge(self, element1: Hashable, element2: Hashable, weight: int = 1) -> bool:
        _check_weight_type(weight)
        slots = self._resolve(element1, element2)
        if slots is None:
            return False
        return self.add_edge_at(slots[0], slots[1], weight)

    def add_edge_at(self, slot1: int, slot2: int, weight: int = 1) -> bool:
        """
        Add a new edge of the given weight from slot1 to slot2.

        Fails if either slot is not live, an edge is already present, or
        weight is 0.

        Raises:
            ValueError: If weight is not an integer, whatever the state of
                the slots and the cell.
        """
        _check_weight_type(weight)
        if not (self._is_live(slot1) and self._is_live(slot2)):
            return False
        if weight == 0 or self._cells[slot1, slot2].is_present():
            return False

        self._store(slot1, slot2, IntEdge(weight))
        return True

    def set_edge(self, element1: Hashable, element2: Hashable, edge: Edge) -> bool:
        slots = self._resolve(element1, element2)
        if slots is None:
            return False
        return self.set_edge_at(slots[0], slots[1], edge)

    def set_edge_at(self, slot1: int, slot2: int, edge: Edge) -> bool:
        """
        Store edge in the cell from slot1 to slot2, replacing whatever is there.

        The edge object is stored as-is (mirrored by identity for undirected
        graphs). Storing EMPTY_EDGE clears the cell.
        """
        if not isinstance(edge, Edge):
            return False
        if not (self._is_live(slot1) and self._is_live(slot2)):
            return False

        self._store(slot1, slot2, edge)
        return True

    def remove_edge(self, element1: Hashable, element2: Hashable) -> bool:
        slots = self._resolve(element1, element2)
        if slots is None:
            return False
        return self.remove_edge_at(slots[0], slots[1])

    def remove_edge_at(self, slot1: int, slot2: int) -> bool:
        """Clear the edge from slot1 to slot2; False unless a present edge was there."""
        return self.pop_edge_at(slot1, slot2).is_found

    def pop_edge(self, element1: Hashable, element2: Hashable) -> EdgeLookup:
        slots = self._resolve(element1, element2)
        if slots is None:
            return EdgeLookup.invalid()
        return self.pop_edge_at(slots[0], slots[1])

    def pop_edge_at(self, slot1: int, slot2: int) -> EdgeLookup:
        """Clear the edge from slot1 to slot2 and report what was there."""
        lookup = self.get_edge_at(slot1, slot2)
        if lookup.is_found:
            self._store(slot1, slot2, EMPTY_EDGE)
        return lookup

    def get_edge(self, element1: Hashable, element2: Hashable) -> EdgeLookup:
        slots = self._resolve(element1, element2)
        if slots is None:
            return EdgeLookup.invalid()
        return self.get_edge_at(slots[0], slots[1])

    def get_edge_at(self, slot1: int, slot2: int) -> EdgeLookup:
        if not (self._is_live(slot1) and self._is_live(slot2)):
            return EdgeLookup.invalid()

        edge = self._cells[slot1, slot2]
        if edge.is_present():
            return EdgeLookup.found(edge.get_weight())
        return EdgeLookup.absent()

    def edge_at(self, slot1: int, slot2: int) -> Optional[Edge]:
        """Return the Edge object stored in a cell, or None for an out-of-range slot."""
        if not (self._in_range(slot1) and self._in_range(slot2)):
            return None
        return self._cells[slot1, slot2]

    def get_edges_to(self, element: Hashable) -> List[Hashable]:
        """Return the targets of edges leaving element, in slot order (row scan)."""
        slot = self.find_vertex(element)
        if slot is None:
            return []
        row = self._cells[slot, :]
        return [self._elements[j] for j in range(self._capacity) if row[j].is_present()]

    def get_edges_from(self, element: Hashable) -> List[Hashable]:
        """Return the sources of edges entering element, in slot order (column scan)."""
        slot = self.find_vertex(element)
        if slot is None:
            return []
        column = self._cells[:, slot]
        return [self._elements[i] for i in range(self._capacity) if column[i].is_present()]

    def edges(self) -> List[Tuple[Hashable, Hashable, int]]:
        """
        Return all present edges as (u, v, weight) tuples in row-major slot order.

        Undirected edges appear once, from the lower slot to the higher.
        """
        result = []
        for i in range(self._capacity):
            start = 0 if self._directed else i
            for j in range(start, self._capacity):
                edge = self._cells[i, j]
                if edge.is_present():
                    result.append((self._elements[i], self._elements[j], edge.get_weight()))
        return result

    def weight_matrix(self) -> np.ndarray:
        """
        Return edge weights as a (capacity, capacity) int64 array.

        Absent edges and vacant slots read as 0.
        """
        weights = np.zeros((self._capacity, self._capacity), dtype=np.int64)
        for (i, j), edge in np.ndenumerate(self._cells):
            weights[i, j] = edge.get_weight()
        return weights

    # -- graph-level ------------------------------------------------------

    def size(self) -> int:
        return self._num_vertices

    @property
    def capacity(self) -> int:
        """Number of vertex slots currently allocated."""
        return self._capacity

    def is_directed(self) -> bool:
        return self._directed

    def make_copy(self) -> "AdjacencyMatrix":
        """
        Return an independent copy with the same capacity and slot layout.

        Every edge is copied once; mirrored undirected cells share their new
        edge object just as the original cells do. Elements are shared.
        """
        clone = AdjacencyMatrix(directed=self._directed, capacity=self._capacity)
        clone._elements = list(self._elements)
        clone._num_vertices = self._num_vertices

        memo: Dict[int, object] = {}
        for (i, j), edge in np.ndenumerate(self._cells):
            clone._cells[i, j] = copy.deepcopy(edge, memo)
        return clone

    def print_vertices(self) -> str:
        """Render every slot as ``|element``, vacant slots as ``|None``."""
        return "".join(f"|{element}" for element in self._elements)

    def print_edges(self) -> str:
        """Render the matrix with slot headers, one row per slot."""
        n = self._capacity
        separator = "-|" * n + "-|\n"
        lines = ["-" + "".join(f"|{i}" for i in range(n)) + "|\n", separator]
        for i in range(n):
            lines.append(f"{i}" + "".join(f"|{self._cells[i, j]}" for j in range(n)) + "|\n")
        lines.append(separator)
        return "".join(lines)

    def __contains__(self, element: object) -> bool:
        return self.find_vertex(element) is not None

    def __repr__(self) -> str:
        return (
            f"AdjacencyMatrix(directed={self._directed}, "
            f"vertices={self._num_vertices}, capacity={self._capacity})"
        )

    # -- internals --------------------------------------------------------

    def _in_range(self, slot: object) -> bool:
        return (
            isinstance(slot, Integral)
            and not isinstance(slot, bool)
            and 0 <= slot < self._capacity
        )

    def _is_live(self, slot: object) -> bool:
        return self._in_range(slot) and self._elements[slot] is not None

    def _resolve(self, element1: Hashable, element2: Hashable) -> Optional[Tuple[int, int]]:
        slot1 = self.find_vertex(element1)
        slot2 = self.find_vertex(element2)
        if slot1 is None or slot2 is None:
            return None
        return slot1, slot2

    def _store(self, slot1: int, slot2: int, edge: Edge) -> None:
        self._cells[slot1, slot2] = edge
        if not self._directed:
            self._cells[slot2, slot1] = edge
        self._check_invariants()

    def _check_invariants(self) -> None:
        check_matrix_storage(self._elements, self._cells, self._num_vertices, self._directed)


def new_graph(directed: bool = False, initial_capacity: int = DEFAULT_CAPACITY) -> AdjacencyMatrix:
    """
    Create an empty adjacency-matrix graph.

    Args:
        directed: If True, graph is directed; otherwise undirected.
        initial_capacity: Initial number of vertex slots.

    Returns:
        Empty AdjacencyMatrix.
    """
    return AdjacencyMatrix(directed=directed, capacity=initial_capacity)


__all__ = ["AdjacencyMatrix", "DEFAULT_CAPACITY", "new_graph"]
