from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List

import networkx as nx

from flightpath.errors import (
    EdgeAlreadyExists,
    EdgeNotFound,
    VertexAlreadyExists,
    VertexHasEdges,
    VertexNotFound,
)
from flightpath.graph.graph_schema import Edge, K, T


class Store(ABC, Generic[K, T]):
    """
    Persistence contract for vertices and edges.

    A store does pure bookkeeping: it never validates graph-level rules
    such as cycle prevention. Those belong to DirectedGraph.

    A store may additionally expose

        creates_cycle(source: K, target: K) -> bool

    as a fast path for cycle detection. DirectedGraph uses it when
    present and must get the same answer as graph_paths.creates_cycle.
    """

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    @abstractmethod
    def add_vertex(self, hash: K, value: T) -> None:
        raise NotImplementedError

    @abstractmethod
    def vertex(self, hash: K) -> T:
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, hash: K) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_vertices(self) -> List[K]:
        raise NotImplementedError

    @abstractmethod
    def vertex_count(self) -> int:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @abstractmethod
    def add_edge(self, source: K, target: K, edge: Edge[K]) -> None:
        raise NotImplementedError

    @abstractmethod
    def edge(self, source: K, target: K) -> Edge[K]:
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, source: K, target: K) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_edges(self) -> List[Edge[K]]:
        raise NotImplementedError


class MemoryStore(Store[K, T]):
    """
    In-memory store backed by a networkx DiGraph.

    Vertex values and edges are kept as node/edge attributes.
    Listings follow insertion order.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()

    # -------------------- Vertices --------------------

    def add_vertex(self, hash: K, value: T) -> None:
        if hash in self._graph:
            raise VertexAlreadyExists(f"vertex {hash}")
        self._graph.add_node(hash, data=value)

    def vertex(self, hash: K) -> T:
        if hash not in self._graph:
            raise VertexNotFound(f"vertex {hash}")
        return self._graph.nodes[hash]["data"]

    def remove_vertex(self, hash: K) -> None:
        if hash not in self._graph:
            raise VertexNotFound(f"vertex {hash}")
        if self._graph.degree(hash) > 0:
            raise VertexHasEdges(f"vertex {hash}")
        self._graph.remove_node(hash)

    def list_vertices(self) -> List[K]:
        return list(self._graph.nodes)

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    # -------------------- Edges --------------------

    def add_edge(self, source: K, target: K, edge: Edge[K]) -> None:
        if source not in self._graph:
            raise VertexNotFound(f"source vertex {source}")
        if target not in self._graph:
            raise VertexNotFound(f"target vertex {target}")
        if self._graph.has_edge(source, target):
            raise EdgeAlreadyExists(f"edge {source} -> {target}")
        self._graph.add_edge(source, target, data=edge)

    def edge(self, source: K, target: K) -> Edge[K]:
        if not self._graph.has_edge(source, target):
            raise EdgeNotFound(f"edge {source} -> {target}")
        return self._graph.edges[source, target]["data"]

    def remove_edge(self, source: K, target: K) -> None:
        if not self._graph.has_edge(source, target):
            raise EdgeNotFound(f"edge {source} -> {target}")
        self._graph.remove_edge(source, target)

    def list_edges(self) -> List[Edge[K]]:
        return [data["data"] for _, _, data in self._graph.edges(data=True)]

    # -------------------- Cycle fast path --------------------

    def creates_cycle(self, source: K, target: K) -> bool:
        for hash in (source, target):
            if hash not in self._graph:
                raise VertexNotFound(f"could not get vertex with hash {hash}")

        if source == target:
            return True

        # source -> target closes a loop iff target already reaches source.
        return nx.has_path(self._graph, target, source)
