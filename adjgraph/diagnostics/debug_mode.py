"""Opt-in structural checking of adjacency-matrix storage.

With checking on, every mutating AdjacencyMatrix call finishes by running
``check_matrix_storage`` over its cells, which verifies that

- the live-vertex counter equals the number of occupied slots,
- no edge touches a vacant slot, and
- an undirected matrix holds equal weights at ``[i, j]`` and ``[j, i]``.

Each pass is O(capacity^2), so checking is off unless ADJGRAPH_DEBUG is set
to 1/true/yes/on or it is switched on at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import numpy as np

from .core import assert_live_count, assert_symmetric, assert_vacant_slots_disconnected

_DEBUG_ENV_VAR = "ADJGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether matrix mutations are followed by storage checks."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Switch post-mutation storage checks on or off for every graph.

    Parameters
    ----------
    enabled:
        Whether ``check_matrix_storage`` should run after each mutation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with storage checks switched on or off.

    Useful for corrupting a matrix on purpose in a test, or for building a
    large graph without paying for a full scan per edge. The previous
    setting comes back on exit, also when the block raises.

    Example
    -------
    >>> with debug_context(False):
    ...     for i in range(999):
    ...         _ = g.add_edge(i, i + 1)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def check_matrix_storage(
    elements: Sequence[Optional[Any]],
    cells: np.ndarray,
    count: int,
    directed: bool,
) -> None:
    """
    Verify matrix storage if checking is on; do nothing otherwise.

    Parameters
    ----------
    elements:
        Per-slot elements, ``None`` for vacant slots.
    cells:
        Square object array of edge instances.
    count:
        The graph's live-vertex counter.
    directed:
        Whether the graph is directed; undirected cells must be mirrored.

    Raises
    ------
    ValueError
        Naming the first broken invariant.
    """
    if not _debug_enabled:
        return
    assert_live_count(elements, count)
    assert_vacant_slots_disconnected(elements, cells)
    if not directed:
        assert_symmetric(cells)
