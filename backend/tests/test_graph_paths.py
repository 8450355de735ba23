import itertools

import pytest

from flightpath.config.settings import Traits
from flightpath.errors import EdgeCreatesCycle, EdgeNotFound, TargetNotReachable, VertexNotFound
from flightpath.graph.directed_graph import new_graph
from flightpath.graph.graph_paths import creates_cycle, path_between
from flightpath.graph.graph_schema import Edge, string_hash
from flightpath.graph.graph_store import MemoryStore, Store


class DictStore(Store):
    """Plain-dict store without the cycle fast path."""

    def __init__(self) -> None:
        self.vertices = {}
        self.edges = {}

    def add_vertex(self, hash, value):
        self.vertices[hash] = value

    def vertex(self, hash):
        try:
            return self.vertices[hash]
        except KeyError:
            raise VertexNotFound(f"vertex {hash}") from None

    def remove_vertex(self, hash):
        del self.vertices[hash]

    def list_vertices(self):
        return list(self.vertices)

    def vertex_count(self):
        return len(self.vertices)

    def add_edge(self, source, target, edge):
        self.edges[(source, target)] = edge

    def edge(self, source, target):
        try:
            return self.edges[(source, target)]
        except KeyError:
            raise EdgeNotFound() from None

    def remove_edge(self, source, target):
        del self.edges[(source, target)]

    def list_edges(self):
        return list(self.edges.values())


def _make_graph(edges, store=None):
    graph = new_graph(
        string_hash,
        Traits.directed_acyclic(prevent_cycles=True),
        store=store,
    )
    for source, target in edges:
        for v in (source, target):
            if not graph.has_vertex(v):
                graph.add_vertex(v)
        graph.add_edge(source, target)
    return graph


def test_creates_cycle_generic_algorithm():
    graph = _make_graph([("A", "B"), ("B", "C"), ("X", "C")], store=DictStore())

    assert creates_cycle(graph, "C", "A") is True
    assert creates_cycle(graph, "B", "A") is True
    assert creates_cycle(graph, "A", "A") is True
    assert creates_cycle(graph, "A", "C") is False
    assert creates_cycle(graph, "C", "X") is True
    assert creates_cycle(graph, "A", "X") is False


def test_creates_cycle_requires_both_vertices():
    graph = _make_graph([("A", "B")])

    with pytest.raises(VertexNotFound) as exc:
        creates_cycle(graph, "A", "Z")
    assert "could not get vertex with hash Z" in str(exc.value)


def test_creates_cycle_does_not_mutate():
    graph = _make_graph([("A", "B"), ("B", "C")])

    creates_cycle(graph, "C", "A")

    assert graph.size() == 2
    assert graph.order() == 3


def test_store_without_fast_path_still_prevents_cycles():
    graph = _make_graph([("A", "B"), ("B", "C")], store=DictStore())

    with pytest.raises(EdgeCreatesCycle):
        graph.add_edge("C", "A")
    assert graph.store.list_edges() == [Edge("A", "B"), Edge("B", "C")]


def test_fast_path_agrees_with_generic_algorithm():
    edges = [("A", "B"), ("B", "C"), ("C", "D"), ("A", "E"), ("F", "D")]
    graph = _make_graph(edges, store=MemoryStore())
    vertices = graph.store.list_vertices()

    for source, target in itertools.product(vertices, repeat=2):
        assert graph.store.creates_cycle(source, target) == creates_cycle(
            graph, source, target
        ), (source, target)


def test_path_between_follows_outgoing_edges():
    graph = _make_graph([("SFO", "ATL"), ("ATL", "GSO"), ("GSO", "IND"), ("ATL", "EWR")])

    assert path_between(graph, "SFO", "IND") == ["SFO", "ATL", "GSO", "IND"]
    assert path_between(graph, "ATL", "EWR") == ["ATL", "EWR"]
    assert path_between(graph, "GSO", "GSO") == ["GSO"]


def test_path_between_unreachable_target():
    graph = _make_graph([("SFO", "ATL"), ("EWR", "ATL")])

    with pytest.raises(TargetNotReachable) as exc:
        path_between(graph, "SFO", "EWR")
    assert "target vertex not reachable from source" in str(exc.value)
