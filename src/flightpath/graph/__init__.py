"""
Graph subsystem for flightpath.

A small generic directed-graph engine:
- vertex/edge storage behind a Store contract
- adjacency and predecessor views
- cycle prevention on edge insertion
- depth-first traversal
"""

from flightpath.graph.graph_schema import Edge, Hash, string_hash, int_hash
from flightpath.graph.graph_store import Store, MemoryStore
from flightpath.graph.directed_graph import DirectedGraph, new_graph
from flightpath.graph.graph_paths import creates_cycle, path_between
from flightpath.graph.graph_traversal import dfs

__all__ = [
    "Edge",
    "Hash",
    "string_hash",
    "int_hash",
    "Store",
    "MemoryStore",
    "DirectedGraph",
    "new_graph",
    "creates_cycle",
    "path_between",
    "dfs",
]
