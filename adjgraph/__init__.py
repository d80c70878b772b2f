"""adjgraph - a dense adjacency-matrix graph with classical graph algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    DEFAULT_CAPACITY,
    EMPTY_EDGE,
    AdjacencyMatrix,
    Edge,
    EdgeLookup,
    EdgeStatus,
    EmptyEdge,
    Graph,
    IntEdge,
    NotDirectedError,
    WeightedGraph,
    bfs,
    dfs,
    is_walk,
    new_graph,
    prim_min_span_tree,
    reconstruct_path,
    topo_sort,
    total_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "WeightedGraph",
    "Edge",
    "EmptyEdge",
    "IntEdge",
    "EMPTY_EDGE",
    "EdgeLookup",
    "EdgeStatus",
    "AdjacencyMatrix",
    "DEFAULT_CAPACITY",
    "new_graph",
    "dfs",
    "bfs",
    "topo_sort",
    "NotDirectedError",
    "prim_min_span_tree",
    "reconstruct_path",
    "is_walk",
    "total_weight",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
