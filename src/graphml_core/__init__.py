"""
GraphML exporter core.

Contains:
- GraphML export pipeline (type inference, document assembly)
- Exception hierarchy
- Configuration management
- Logging service

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from .config import GraphMLSettings, get_config_summary, settings
from .exceptions import (
    ExportError,
    GraphMLError,
    UnsupportedAttributeTypeError,
    ValidationError,
)
from .graph import Edge, ExportResult, Graph, GraphMLExporter, GraphSource, Vertex
from .logging_service import LoggingConfig, LoggingService


def export_graphml(graph: GraphSource) -> str:
    """Export ``graph`` with default settings; see GraphMLExporter.export."""
    return GraphMLExporter().export(graph)


__all__ = [
    # Export
    "GraphMLExporter",
    "ExportResult",
    "GraphSource",
    "export_graphml",
    "Graph",
    "Vertex",
    "Edge",
    # Exceptions
    "GraphMLError",
    "ValidationError",
    "UnsupportedAttributeTypeError",
    "ExportError",
    # Configuration
    "GraphMLSettings",
    "settings",
    "get_config_summary",
    # Logging
    "LoggingService",
    "LoggingConfig",
]
