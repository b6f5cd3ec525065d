"""
In-memory graph that satisfies the exporter's read interface.

Vertices keep insertion order, which is also the export order.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple

from graphml_core.exceptions import ValidationError


class Vertex:
    """
    A vertex with a stable id and an attribute bag.

    Attributes:
        id: External identifier (exported as GraphML ``id`` and ``label``)
        graph: Owning graph
        attributes: Attribute id -> scalar value
    """

    def __init__(
        self, graph: Graph, vertex_id: Hashable, attributes: Optional[Dict[str, Any]] = None
    ):
        self._graph = graph
        self._id = vertex_id
        self._attributes: Dict[str, Any] = dict(attributes or {})

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._attributes

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def create_edge_to(self, target: Vertex, **attributes: Any) -> Edge:
        """Create a directed edge from this vertex to ``target``."""
        return self._graph._add_edge(self, target, directed=True, attributes=attributes)

    def create_edge(self, other: Vertex, **attributes: Any) -> Edge:
        """Create an undirected edge between this vertex and ``other``."""
        return self._graph._add_edge(self, other, directed=False, attributes=attributes)

    def __repr__(self) -> str:
        return f"Vertex(id={self._id!r})"


class Edge:
    """
    An edge between two vertices.

    For directed edges the endpoints are (source, target); for undirected
    edges their order is only the order they were given in.
    """

    def __init__(
        self,
        first: Vertex,
        last: Vertex,
        directed: bool,
        attributes: Optional[Dict[str, Any]] = None,
    ):
        self._first = first
        self._last = last
        self._directed = directed
        self._attributes: Dict[str, Any] = dict(attributes or {})

    @property
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self._first, self._last

    @property
    def is_directed(self) -> bool:
        return self._directed

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._attributes

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def __repr__(self) -> str:
        arrow = "->" if self._directed else "--"
        return f"Edge({self._first.id!r} {arrow} {self._last.id!r})"


class Graph:
    """
    Mutable graph of vertices and directed/undirected edges.

    Example:
        >>> graph = Graph()
        >>> a = graph.create_vertex("a", color="red")
        >>> b = graph.create_vertex("b")
        >>> edge = a.create_edge_to(b, weight=2.5)
        >>> list(graph.vertices())
        ['a', 'b']
    """

    def __init__(self) -> None:
        self._vertices: Dict[Hashable, Vertex] = {}
        self._edges: List[Edge] = []

    def create_vertex(self, vertex_id: Hashable, **attributes: Any) -> Vertex:
        """
        Add a new vertex.

        Raises:
            ValidationError: If a vertex with ``vertex_id`` already exists
        """
        if vertex_id in self._vertices:
            raise ValidationError(
                message=f"Vertex already exists: {vertex_id!r}",
                error_code="VAL_002",
                details={"vertex_id": str(vertex_id)},
            )

        vertex = Vertex(self, vertex_id, attributes)
        self._vertices[vertex_id] = vertex
        return vertex

    def vertex(self, vertex_id: Hashable) -> Vertex:
        """Return the vertex with ``vertex_id`` (KeyError if missing)."""
        return self._vertices[vertex_id]

    def has_vertex(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._vertices

    def vertices(self) -> Dict[Hashable, Vertex]:
        return dict(self._vertices)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def _add_edge(
        self, first: Vertex, last: Vertex, directed: bool, attributes: Dict[str, Any]
    ) -> Edge:
        for endpoint in (first, last):
            if endpoint.graph is not self:
                raise ValidationError(
                    message=f"Vertex {endpoint.id!r} belongs to another graph",
                    error_code="VAL_003",
                    details={"vertex_id": str(endpoint.id)},
                )

        edge = Edge(first, last, directed=directed, attributes=attributes)
        self._edges.append(edge)
        return edge

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
