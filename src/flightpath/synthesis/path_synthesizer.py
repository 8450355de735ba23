from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from flightpath.config.settings import Traits
from flightpath.errors import InputError, SynthesisTimeout
from flightpath.graph.directed_graph import DirectedGraph, new_graph
from flightpath.graph.graph_schema import string_hash
from flightpath.graph.graph_traversal import dfs
from flightpath.utils.time import deadline_expired

Segment = Tuple[str, str]

logger = logging.getLogger("flightpath.synthesis")


@dataclass(frozen=True)
class PathResult:
    """
    Longest path found for a set of segments.

    - full_path: every airport of the chain, start first
    - short_path: just [start, end]
    """

    full_path: List[str]
    short_path: List[str]

    @staticmethod
    def from_path(path: Sequence[str]) -> "PathResult":
        if not path:
            raise InputError("can't find route")
        return PathResult(
            full_path=list(path),
            short_path=[path[0], path[-1]],
        )


# ---------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------


def normalize_segments(segments: Sequence[Sequence[str]]) -> List[Segment]:
    """
    Validate raw [source, target] pairs and return them sorted by
    (source, target). The input is left untouched.
    """
    if not segments:
        raise InputError("wrong segments in payload")

    normalized: List[Segment] = []
    for segment in segments:
        if (
            not isinstance(segment, (list, tuple))
            or len(segment) != 2
            or not all(isinstance(v, str) for v in segment)
        ):
            raise InputError("wrong segments in payload")
        normalized.append((segment[0], segment[1]))

    return sorted(normalized)


def build_graph(segments: Sequence[Segment]) -> DirectedGraph[str, str]:
    """
    Directed graph of the segments that refuses any edge closing a cycle.

    Repeated airports and repeated segments are inserted once.
    """
    graph: DirectedGraph[str, str] = new_graph(
        string_hash,
        Traits.directed_acyclic(prevent_cycles=True),
    )

    for source, target in segments:
        if not graph.has_vertex(source):
            graph.add_vertex(source)
        if not graph.has_vertex(target):
            graph.add_vertex(target)
        if not graph.has_edge(source, target):
            graph.add_edge(source, target)

    return graph


# ---------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------


def calculate_path(
    segments: Sequence[Sequence[str]],
    *,
    deadline: Optional[float] = None,
) -> List[str]:
    """
    Turn unordered segments into the longest chain reachable from any
    segment source.

    Segments are sorted first, so the same input always yields the same
    path. Among equally long candidates the first source in sorted order
    wins. Disconnected groups are never merged: only the longest group is
    represented in the result.

    deadline is an absolute time.perf_counter() value; once it passes,
    SynthesisTimeout is raised instead of returning a partial path.
    """
    ordered = normalize_segments(segments)

    if deadline_expired(deadline):
        raise SynthesisTimeout()

    graph = build_graph(ordered)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "graph built order=%s size=%s from %s segments",
            graph.order(),
            graph.size(),
            len(ordered),
        )

    longest: List[str] = []
    for source, _ in ordered:
        if deadline_expired(deadline):
            raise SynthesisTimeout()

        visited: List[str] = []
        dfs(graph, source, lambda value: visited.append(value))

        if len(visited) > len(longest):
            longest = visited

    return longest


def synthesize(
    segments: Sequence[Sequence[str]],
    *,
    deadline: Optional[float] = None,
) -> PathResult:
    """
    calculate_path wrapped as a PathResult; an empty path is an error.
    """
    return PathResult.from_path(calculate_path(segments, deadline=deadline))
