"""
Graph export module.

Provides:
- GraphMLExporter: Export graphs to GraphML (XML)
- Graph, Vertex, Edge: In-memory graph accepted by the exporter
- GraphMLType, AttributeScope: GraphML key types and scopes
- AttributeDefinition: One <key> declaration
"""

from graphml_core.graph.attribute_serializer import (
    AttributeDefinition,
    build_key_element,
    serialize_attributes,
)
from graphml_core.graph.attribute_types import (
    AttributeScope,
    GraphMLType,
    format_attribute_value,
    resolve_graphml_type,
)
from graphml_core.graph.graph_exporter import ExportResult, GraphMLExporter
from graphml_core.graph.memory_graph import Edge, Graph, Vertex
from graphml_core.graph.protocols import EdgeLike, GraphSource, TextSerializable, VertexLike

__all__ = [
    "GraphMLExporter",
    "ExportResult",
    "Graph",
    "Vertex",
    "Edge",
    "GraphSource",
    "VertexLike",
    "EdgeLike",
    "TextSerializable",
    "GraphMLType",
    "AttributeScope",
    "AttributeDefinition",
    "resolve_graphml_type",
    "format_attribute_value",
    "serialize_attributes",
    "build_key_element",
]
