"""
GraphMLExporter - Export graphs to GraphML (XML).

Produces documents readable by Gephi, yEd, Cytoscape and NetworkX:
- one ``<node>`` per vertex and one ``<edge>`` per edge, in graph order
- typed ``<key>`` declarations inferred from the attribute values

Nested graphs, hyperedges and ports are not supported.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog

from graphml_core.config import settings
from graphml_core.exceptions import ExportError, ValidationError
from graphml_core.graph.attribute_serializer import (
    AttributeDefinitions,
    build_key_element,
    serialize_attributes,
)
from graphml_core.graph.attribute_types import AttributeScope, ensure_xml_text
from graphml_core.graph.protocols import GraphSource

logger = structlog.get_logger(__name__)

GRAPHML_NAMESPACE = "http://graphml.graphdrawing.org/xmlns"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
GRAPHML_SCHEMA_LOCATION = (
    "http://graphml.graphdrawing.org/xmlns "
    "http://graphml.graphdrawing.org/xmlns/1.0/graphml.xsd"
)


# ============================================================================
# Data Models
# ============================================================================


@dataclass
class ExportResult:
    """
    Result of a file export.

    Attributes:
        format: Export format used (always "graphml")
        output_path: Absolute path to exported file
        nodes_count: Number of nodes exported
        edges_count: Number of edges exported
        keys_count: Number of <key> declarations emitted
        file_size_bytes: File size in bytes
        export_time_ms: Export duration in milliseconds
    """

    format: str
    output_path: str
    nodes_count: int
    edges_count: int
    keys_count: int
    file_size_bytes: int
    export_time_ms: float


@dataclass
class _Document:
    root: ET.Element
    nodes_count: int
    edges_count: int
    keys_count: int


# ============================================================================
# GraphMLExporter Class
# ============================================================================


class GraphMLExporter:
    """
    Export a graph to a GraphML document.

    The export is a single linear pass: vertices, then edges, then the
    ``<key>`` declarations collected on the way. Each attribute id is
    declared once, with the scope and type of its first non-null value.

    Example:
        >>> from graphml_core.graph import Graph, GraphMLExporter
        >>>
        >>> graph = Graph()
        >>> a = graph.create_vertex("a")
        >>> b = graph.create_vertex("b")
        >>> a.create_edge_to(b)
        >>>
        >>> exporter = GraphMLExporter()
        >>> data = exporter.export(graph)
        >>> result = exporter.export_to_file(graph, "/tmp/example.graphml")
    """

    def __init__(self, pretty_print: Optional[bool] = None, indent: Optional[int] = None) -> None:
        """
        Initialize GraphMLExporter.

        Args:
            pretty_print: Indent the output (default: settings.pretty_print)
            indent: Spaces per nesting level (default: settings.indent)

        Raises:
            ValueError: If indent is negative
        """
        self.pretty_print = settings.pretty_print if pretty_print is None else pretty_print
        self.indent = settings.indent if indent is None else indent

        if self.indent < 0:
            raise ValueError(f"indent cannot be negative, got {self.indent}")

        self.logger = logger.bind(component="graphml_exporter")

    def export(self, graph: GraphSource) -> str:
        """
        Export ``graph`` to a GraphML string.

        Args:
            graph: Graph exposing vertices() and edges()

        Returns:
            UTF-8 GraphML document, including the XML declaration

        Raises:
            UnsupportedAttributeTypeError: If an attribute value has no GraphML type
            ValidationError: If an id or value holds characters XML 1.0 forbids
        """
        document = self._assemble(graph)
        return self._serialize(document.root)

    def build_document(self, graph: GraphSource) -> ET.Element:
        """Return the assembled ``<graphml>`` element without serializing it."""
        return self._assemble(graph).root

    def export_to_file(self, graph: GraphSource, output_path: str) -> ExportResult:
        """
        Export ``graph`` and write the document to ``output_path``.

        Nothing is written if the export itself fails.

        Args:
            graph: Graph exposing vertices() and edges()
            output_path: Path to output file (.graphml extension)

        Returns:
            ExportResult with export statistics

        Raises:
            ValidationError: If output_path invalid or wrong extension
            UnsupportedAttributeTypeError: If an attribute value has no GraphML type
            ValidationError: If an id or value holds characters XML 1.0 forbids
            ExportError: If file write fails
        """
        start_time = datetime.now(timezone.utc)

        path_obj = self._validate_output_path(output_path, ".graphml")

        document = self._assemble(graph)
        content = self._serialize(document.root).encode("utf-8")

        try:
            path_obj.write_bytes(content)
        except OSError as e:
            raise ExportError(
                message=f"GraphML export failed: {str(e)}",
                details={"path": str(path_obj)},
                original_exception=e,
            ) from e

        file_size = path_obj.stat().st_size
        elapsed = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

        self.logger.info(
            "graphml_file_written",
            path=str(path_obj),
            file_size_kb=round(file_size / 1024, 2),
        )

        return ExportResult(
            format="graphml",
            output_path=str(path_obj),
            nodes_count=document.nodes_count,
            edges_count=document.edges_count,
            keys_count=document.keys_count,
            file_size_bytes=file_size,
            export_time_ms=round(elapsed, 2),
        )

    # ========================================================================
    # Private Helper Methods
    # ========================================================================

    def _assemble(self, graph: GraphSource) -> _Document:
        """
        Build the full document tree.

        Element order is part of the output format: nodes, then edges,
        then one <key> per attribute id after the <graph> element.
        """
        self.logger.debug("graphml_export_started")

        root = ET.Element("graphml")
        root.set("xmlns", GRAPHML_NAMESPACE)
        root.set("xmlns:xsi", XSI_NAMESPACE)
        root.set("xsi:schemaLocation", GRAPHML_SCHEMA_LOCATION)

        graph_elem = ET.SubElement(root, "graph")
        graph_elem.set("edgeDefault", "undirected")

        definitions: AttributeDefinitions = {}

        nodes_count = 0
        for vertex_id, vertex in graph.vertices().items():
            node_id = ensure_xml_text(str(vertex_id), "node id")
            node_elem = ET.SubElement(graph_elem, "node")
            node_elem.set("id", node_id)
            node_elem.set("label", node_id)

            serialize_attributes(node_elem, vertex.attributes, AttributeScope.NODE, definitions)
            nodes_count += 1

        edges_count = 0
        for edge in graph.edges():
            first, last = edge.endpoints
            edge_elem = ET.SubElement(graph_elem, "edge")
            edge_elem.set("source", ensure_xml_text(str(first.id), "edge source"))
            edge_elem.set("target", ensure_xml_text(str(last.id), "edge target"))

            if edge.is_directed:
                edge_elem.set("directed", "true")

            serialize_attributes(edge_elem, edge.attributes, AttributeScope.EDGE, definitions)
            edges_count += 1

        for definition in definitions.values():
            build_key_element(root, definition)

        self.logger.info(
            "graphml_export_complete",
            nodes=nodes_count,
            edges=edges_count,
            keys=len(definitions),
        )

        return _Document(
            root=root,
            nodes_count=nodes_count,
            edges_count=edges_count,
            keys_count=len(definitions),
        )

    def _serialize(self, root: ET.Element) -> str:
        if self.pretty_print:
            ET.indent(root, space=" " * self.indent)

        return ET.tostring(root, encoding="utf-8", xml_declaration=True).decode("utf-8")

    def _validate_output_path(self, path: str, expected_ext: str) -> Path:
        """
        Validate output path and extension.

        Args:
            path: Output path string
            expected_ext: Expected file extension (e.g., ".graphml")

        Returns:
            Validated Path object

        Raises:
            ValidationError: If path is invalid, wrong extension, or parent missing
        """
        if not path:
            raise ValidationError(message="output_path cannot be empty", error_code="VAL_001")

        path_obj = Path(path).expanduser().resolve()

        if path_obj.suffix.lower() != expected_ext:
            raise ValidationError(
                message=f"output_path must have {expected_ext} extension, got {path_obj.suffix}",
                error_code="VAL_001",
                details={"path": path, "expected_ext": expected_ext},
            )

        if not path_obj.parent.exists():
            raise ValidationError(
                message=f"Parent directory does not exist: {path_obj.parent}",
                error_code="VAL_001",
                details={"path": path},
            )

        if not path_obj.parent.is_dir():
            raise ValidationError(
                message=f"Parent path is not a directory: {path_obj.parent}",
                error_code="VAL_001",
            )

        return path_obj
