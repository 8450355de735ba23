from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    Directed edge joining two vertices.

    The graph stores Edge[K] (vertex hashes) and hands out Edge[T]
    (vertex values) from DirectedGraph.edge().
    """

    source: V
    target: V


# Maps a vertex value to the key that identifies it in the graph.
Hash = Callable[[T], K]


def string_hash(value: str) -> str:
    """
    Uses the string itself as its hash. Yields a graph of str -> str.
    """
    return value


def int_hash(value: int) -> int:
    return value
