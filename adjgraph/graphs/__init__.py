"""
Graph package for adjgraph.

This package provides:
- Edge values (Edge, EmptyEdge, IntEdge, EMPTY_EDGE)
- Graph contracts (Graph, WeightedGraph) and the EdgeLookup result type
- The dense adjacency-matrix implementation (AdjacencyMatrix, new_graph)
- Path search (dfs, bfs), topological sort and Prim's minimum spanning tree

The algorithms only use the Graph contract, so any conforming
representation can be passed to them.
"""

from .core import Graph, WeightedGraph
from .edge import EMPTY_EDGE, Edge, EmptyEdge, IntEdge
from .matrix import DEFAULT_CAPACITY, AdjacencyMatrix, new_graph
from .mst import prim_min_span_tree
from .result import EdgeLookup, EdgeStatus
from .topological import NotDirectedError, topo_sort
from .traversal import bfs, dfs
from .utils import is_walk, reconstruct_path, total_weight

__all__ = [
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
]

# Example usage:
# from adjgraph.graphs import new_graph, bfs, topo_sort
#
# g = new_graph(directed=True)
# for v in ("a", "b", "c"):
#     g.add_vertex(v)
# g.add_edge("a", "b")
# g.add_edge("b", "c")
# bfs(g, "a", "c")   # ['a', 'b', 'c']
# topo_sort(g)       # ['a', 'b', 'c']
