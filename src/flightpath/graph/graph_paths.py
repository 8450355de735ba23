from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Set

from flightpath.errors import TargetNotReachable, VertexNotFound
from flightpath.graph.graph_schema import K

if TYPE_CHECKING:
    from flightpath.graph.directed_graph import DirectedGraph


def _require_vertex(graph: "DirectedGraph", hash: K) -> None:
    try:
        graph.vertex(hash)
    except VertexNotFound as exc:
        raise VertexNotFound(f"could not get vertex with hash {hash}") from exc


def creates_cycle(graph: "DirectedGraph", source: K, target: K) -> bool:
    """
    Would adding source -> target introduce a cycle?

    It would if target is already an ancestor of source. Walks the
    predecessors of source depth-first looking for target. Nothing is
    added to the graph.
    """
    _require_vertex(graph, source)
    _require_vertex(graph, target)

    if source == target:
        return True

    predecessors = graph.predecessor_map()

    stack: List[K] = [source]
    visited: Set[K] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        # target feeds into source; the new edge would close the loop
        if current == target:
            return True

        visited.add(current)
        stack.extend(predecessors.get(current, {}))

    return False


def path_between(graph: "DirectedGraph", source: K, target: K) -> List[K]:
    """
    Hashes of a path from source to target along outgoing edges.

    Raises TargetNotReachable when no such path exists. The path is the
    first one found depth-first, not necessarily the shortest.
    """
    _require_vertex(graph, source)
    _require_vertex(graph, target)

    adjacency = graph.adjacency_map()

    parents: Dict[K, K] = {}
    stack: List[K] = [source]
    visited: Set[K] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        if current == target:
            path = [current]
            while path[-1] != source:
                path.append(parents[path[-1]])
            path.reverse()
            return path

        for nxt in adjacency.get(current, {}):
            if nxt not in visited:
                parents[nxt] = current
                stack.append(nxt)

    raise TargetNotReachable(f"{source} -> {target}")
