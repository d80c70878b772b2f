"""
Result type for edge weight queries.

Weight lookups report whether the addressed vertices exist and whether an
edge is present separately from the weight itself, so a legitimate negative
weight is never mistaken for a failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EdgeStatus(Enum):
    """Outcome of an edge lookup."""

    FOUND = "found"
    ABSENT = "absent"
    INVALID = "invalid"


@dataclass(frozen=True)
class EdgeLookup:
    """
    Edge query result.

    Attributes:
        status: FOUND if an edge is present, ABSENT if both vertices exist
            but no edge joins them, INVALID if a vertex/slot did not resolve.
        weight: Edge weight for FOUND, 0 for ABSENT, None for INVALID.
    """

    status: EdgeStatus
    weight: Optional[int] = None

    @classmethod
    def found(cls, weight: int) -> "EdgeLookup":
        return cls(EdgeStatus.FOUND, weight)

    @classmethod
    def absent(cls) -> "EdgeLookup":
        return cls(EdgeStatus.ABSENT, 0)

    @classmethod
    def invalid(cls) -> "EdgeLookup":
        return cls(EdgeStatus.INVALID, None)

    @property
    def is_found(self) -> bool:
        return self.status is EdgeStatus.FOUND

    @property
    def is_valid(self) -> bool:
        return self.status is not EdgeStatus.INVALID

    def __bool__(self) -> bool:
        return self.is_found


__all__ = ["EdgeStatus", "EdgeLookup"]
