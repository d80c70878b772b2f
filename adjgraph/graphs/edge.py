"""
Edge values stored in adjacency-matrix cells.

Every cell of the matrix holds an Edge. The shared EMPTY_EDGE sentinel
(weight 0) marks the absence of an edge, and IntEdge holds a mutable,
nonzero integer weight. Edges order and compare by weight.
"""

from abc import ABC, abstractmethod
from functools import total_ordering
from numbers import Integral


@total_ordering
class Edge(ABC):
    """
    Abstract edge with an integer weight.

    A weight of 0 means "no edge"; every query that tests for presence
    checks ``weight != 0``.
    """

    @abstractmethod
    def get_weight(self) -> int:
        """Return the edge weight."""

    @abstractmethod
    def set_weight(self, weight: int) -> None:
        """Set the edge weight."""

    @property
    def weight(self) -> int:
        return self.get_weight()

    def is_present(self) -> bool:
        """Return True unless this edge stands for an absent edge."""
        return self.get_weight() != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.get_weight() == other.get_weight()

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.get_weight() < other.get_weight()

    __hash__ = None

    def __str__(self) -> str:
        return str(self.get_weight())


class EmptyEdge(Edge):
    """
    Edge with weight fixed at 0, standing for "no edge".

    ``set_weight`` is a no-op. Copies of an EmptyEdge are the instance
    itself, so EMPTY_EDGE stays a singleton across ``make_copy``.
    """

    def get_weight(self) -> int:
        return 0

    def set_weight(self, weight: int) -> None:
        pass

    def __copy__(self) -> "EmptyEdge":
        return self

    def __deepcopy__(self, memo: dict) -> "EmptyEdge":
        return self

    def __repr__(self) -> str:
        return "EmptyEdge()"


class IntEdge(Edge):
    """
    Edge holding a mutable integer weight.

    Weight 0 is reserved for absence and rejected; negative weights are
    allowed.

    Args:
        weight: Initial weight (default 1).

    Raises:
        ValueError: If weight is 0.
    """

    def __init__(self, weight: int = 1):
        self._weight = _check_weight(weight)

    def get_weight(self) -> int:
        return self._weight

    def set_weight(self, weight: int) -> None:
        """
        Set the weight.

        Raises:
            ValueError: If weight is 0.
        """
        self._weight = _check_weight(weight)

    def __repr__(self) -> str:
        return f"IntEdge({self._weight})"


def _check_weight(weight: int) -> int:
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(f"Edge weight must be an int, got {weight!r}")
    if weight == 0:
        raise ValueError("Edge weight 0 is reserved for the absent edge")
    return int(weight)


EMPTY_EDGE = EmptyEdge()

__all__ = ["Edge", "EmptyEdge", "IntEdge", "EMPTY_EDGE"]
