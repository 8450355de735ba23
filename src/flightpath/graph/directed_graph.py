from __future__ import annotations

from typing import Dict, Generic, List, Optional

from flightpath.config.settings import Traits
from flightpath.errors import EdgeAlreadyExists, EdgeCreatesCycle, EdgeNotFound, VertexNotFound
from flightpath.graph.graph_paths import creates_cycle
from flightpath.graph.graph_schema import Edge, Hash, K, T
from flightpath.graph.graph_store import MemoryStore, Store

AdjacencyMap = Dict[K, Dict[K, Edge[K]]]


class DirectedGraph(Generic[K, T]):
    """
    Directed graph of values of type T identified by hashes of type K.

    Layers graph rules on top of a Store:
    - edges may only join existing vertices
    - an edge (source, target) exists at most once
    - with Traits.prevent_cycles, no edge may close a cycle

    One instance is owned by a single caller and is not safe for
    concurrent mutation.
    """

    def __init__(
        self,
        hash: Hash[T, K],
        traits: Traits,
        store: Store[K, T],
    ) -> None:
        if not traits.directed:
            raise ValueError("undirected graphs are not supported")

        self.hash = hash
        self._traits = traits
        self.store = store

    @property
    def traits(self) -> Traits:
        return self._traits

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, value: T) -> None:
        self.store.add_vertex(self.hash(value), value)

    def vertex(self, hash: K) -> T:
        return self.store.vertex(hash)

    def has_vertex(self, hash: K) -> bool:
        try:
            self.store.vertex(hash)
        except VertexNotFound:
            return False
        return True

    def remove_vertex(self, hash: K) -> None:
        self.store.remove_vertex(hash)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: K, target: K) -> None:
        """
        Join source to target.

        Raises VertexNotFound if either end is missing, EdgeAlreadyExists
        for a duplicate pair and, when cycles are prevented,
        EdgeCreatesCycle. The store is left untouched on failure.
        """
        try:
            self.store.vertex(source)
        except VertexNotFound as exc:
            raise VertexNotFound(f"source vertex {source}") from exc

        try:
            self.store.vertex(target)
        except VertexNotFound as exc:
            raise VertexNotFound(f"target vertex {target}") from exc

        if self.has_edge(source, target):
            raise EdgeAlreadyExists(f"edge {source} -> {target}")

        if self._traits.prevent_cycles and self._creates_cycle(source, target):
            raise EdgeCreatesCycle()

        self.store.add_edge(source, target, Edge(source=source, target=target))

    def edge(self, source: K, target: K) -> Edge[T]:
        self.store.edge(source, target)

        return Edge(
            source=self.store.vertex(source),
            target=self.store.vertex(target),
        )

    def has_edge(self, source: K, target: K) -> bool:
        try:
            self.store.edge(source, target)
        except EdgeNotFound:
            return False
        return True

    def edges(self) -> List[Edge[K]]:
        return self.store.list_edges()

    def remove_edge(self, source: K, target: K) -> None:
        self.store.edge(source, target)
        self.store.remove_edge(source, target)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def adjacency_map(self) -> AdjacencyMap:
        """
        Outgoing edges of every vertex, keyed by target hash.

        For edges A->B and A->C:

            {"A": {"B": Edge("A", "B"), "C": Edge("A", "C")}, "B": {}, "C": {}}

        Buckets follow edge insertion order.
        """
        m: AdjacencyMap = {v: {} for v in self.store.list_vertices()}

        for edge in self.store.list_edges():
            m[edge.source][edge.target] = edge

        return m

    def predecessor_map(self) -> AdjacencyMap:
        """
        Incoming edges of every vertex, keyed by source hash.
        """
        m: AdjacencyMap = {v: {} for v in self.store.list_vertices()}

        for edge in self.store.list_edges():
            m.setdefault(edge.target, {})[edge.source] = edge

        return m

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def order(self) -> int:
        return self.store.vertex_count()

    def size(self) -> int:
        return sum(len(out) for out in self.adjacency_map().values())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _creates_cycle(self, source: K, target: K) -> bool:
        fast_path = getattr(self.store, "creates_cycle", None)
        if callable(fast_path):
            return fast_path(source, target)

        return creates_cycle(self, source, target)


def new_graph(
    hash: Hash[T, K],
    traits: Optional[Traits] = None,
    store: Optional[Store[K, T]] = None,
) -> DirectedGraph[K, T]:
    """
    Create a graph using the given store, or a fresh MemoryStore.
    """
    return DirectedGraph(
        hash,
        traits if traits is not None else Traits.directed_only(),
        store if store is not None else MemoryStore(),
    )
