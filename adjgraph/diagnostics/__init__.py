"""Diagnostics and debugging utilities for adjgraph."""

from .core import (
    assert_live_count,
    assert_symmetric,
    assert_vacant_slots_disconnected,
    asymmetric_cells,
    is_symmetric,
)
from .debug_mode import (
    check_matrix_storage,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "asymmetric_cells",
    "is_symmetric",
    "assert_symmetric",
    "assert_live_count",
    "assert_vacant_slots_disconnected",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_matrix_storage",
]
