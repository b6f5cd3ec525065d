"""
Unit tests for the in-memory Graph, Vertex and Edge.
"""

import pytest

from graphml_core.exceptions import ValidationError
from graphml_core.graph.memory_graph import Graph


@pytest.fixture
def graph():
    return Graph()


class TestGraph:
    def test_vertices_keep_insertion_order(self, graph):
        for vertex_id in ("c", "a", "b"):
            graph.create_vertex(vertex_id)

        assert list(graph.vertices()) == ["c", "a", "b"]
        assert len(graph) == 3

    def test_create_vertex_with_attributes(self, graph):
        vertex = graph.create_vertex("a", color="red", size=3)

        assert vertex.id == "a"
        assert vertex.attributes == {"color": "red", "size": 3}
        assert graph.vertex("a") is vertex
        assert graph.has_vertex("a")

    def test_duplicate_vertex_rejected(self, graph):
        graph.create_vertex("a")

        with pytest.raises(ValidationError) as exc_info:
            graph.create_vertex("a")

        assert exc_info.value.error_code == "VAL_002"

    def test_missing_vertex_lookup(self, graph):
        with pytest.raises(KeyError):
            graph.vertex("missing")

    def test_vertices_returns_copy(self, graph):
        graph.create_vertex("a")

        graph.vertices().clear()

        assert list(graph.vertices()) == ["a"]


class TestEdges:
    def test_directed_edge(self, graph):
        a = graph.create_vertex("a")
        b = graph.create_vertex("b")

        edge = a.create_edge_to(b, weight=2)

        assert edge.endpoints == (a, b)
        assert edge.is_directed is True
        assert edge.attributes == {"weight": 2}
        assert graph.edges() == [edge]

    def test_undirected_edge(self, graph):
        a = graph.create_vertex("a")
        b = graph.create_vertex("b")

        edge = b.create_edge(a)

        assert edge.endpoints == (b, a)
        assert edge.is_directed is False

    def test_edges_keep_creation_order(self, graph):
        a = graph.create_vertex("a")
        b = graph.create_vertex("b")

        first = a.create_edge_to(b)
        second = b.create_edge(a)

        assert graph.edges() == [first, second]

    def test_foreign_vertex_rejected(self, graph):
        a = graph.create_vertex("a")
        other = Graph().create_vertex("x")

        with pytest.raises(ValidationError) as exc_info:
            a.create_edge_to(other)

        assert exc_info.value.error_code == "VAL_003"
        assert graph.edges() == []

    def test_set_and_get_attribute(self, graph):
        a = graph.create_vertex("a")
        edge = a.create_edge(graph.create_vertex("b"))

        a.set_attribute("label", "start")
        edge.set_attribute("cost", None)

        assert a.get_attribute("label") == "start"
        assert a.get_attribute("missing", 0) == 0
        assert edge.attributes == {"cost": None}
        assert repr(edge) == "Edge('a' -- 'b')"
