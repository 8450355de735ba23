from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Set

from flightpath.errors import VertexNotFound
from flightpath.graph.graph_schema import K, T

if TYPE_CHECKING:
    from flightpath.graph.directed_graph import DirectedGraph

# Return a truthy value to stop the traversal.
Visitor = Callable[[T], Any]


def dfs(graph: "DirectedGraph", start: K, visit: Visitor) -> None:
    """
    Depth-first walk over outgoing edges, starting at start.

    visit is called once per reachable vertex with the vertex value, in
    visitation order. Neighbours are pushed in adjacency-bucket order,
    so the most recently added edge of a vertex is followed first.
    """
    adjacency = graph.adjacency_map()

    if start not in adjacency:
        raise VertexNotFound(f"could not find start vertex with hash {start}")

    stack: List[K] = [start]
    visited: Set[K] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)

        if visit(graph.vertex(current)):
            return

        stack.extend(adjacency[current])
