"""Structural invariant checks for adjacency-matrix storage."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np


def asymmetric_cells(cells: np.ndarray) -> List[tuple]:
    """
    List the index pairs at which an undirected cell matrix is out of sync.

    A pair ``(i, j)`` with ``i < j`` is reported when ``cells[i, j]`` and
    ``cells[j, i]`` do not hold edges of equal weight.

    Parameters
    ----------
    cells:
        Square object array of edge instances.

    Returns
    -------
    list of tuple
        Offending ``(i, j)`` pairs in row-major order.

    Raises
    ------
    ValueError
        If cells is not a square 2-D array.
    """
    if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
        raise ValueError(f"Expected a square 2-D cell matrix, got shape {cells.shape}.")

    n = cells.shape[0]
    bad = []
    for i in range(n):
        for j in range(i + 1, n):
            if cells[i, j].get_weight() != cells[j, i].get_weight():
                bad.append((i, j))
    return bad


def is_symmetric(cells: np.ndarray) -> bool:
    """Return True if every mirrored pair of cells carries the same weight."""
    return not asymmetric_cells(cells)


def assert_symmetric(cells: np.ndarray) -> None:
    """
    Assert that an undirected cell matrix is symmetric.

    Raises
    ------
    ValueError
        If any mirrored pair of cells disagrees on its weight.
    """
    bad = asymmetric_cells(cells)
    if bad:
        raise ValueError(f"Undirected matrix is not symmetric at cells {bad[:10]}.")


def assert_live_count(elements: Sequence[Optional[Any]], count: int) -> None:
    """
    Assert that the number of occupied slots equals the recorded vertex count.

    Raises
    ------
    ValueError
        If the counts differ.
    """
    occupied = sum(1 for element in elements if element is not None)
    if occupied != count:
        raise ValueError(
            f"Vertex count out of sync: {occupied} occupied slots, recorded {count}."
        )


def assert_vacant_slots_disconnected(
    elements: Sequence[Optional[Any]], cells: np.ndarray
) -> None:
    """
    Assert that no edge touches a vacant slot.

    Raises
    ------
    ValueError
        If a row or column of a vacant slot holds a present edge.
    """
    n = cells.shape[0]
    for slot, element in enumerate(elements):
        if element is not None:
            continue
        for k in range(n):
            if cells[slot, k].get_weight() != 0 or cells[k, slot].get_weight() != 0:
                raise ValueError(f"Vacant slot {slot} still has an edge to/from slot {k}.")
