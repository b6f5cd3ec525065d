"""
GraphML attribute type resolution.

Maps a Python attribute value to one of the GraphML scalar type names
and renders its textual form for a ``<data>`` element.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Optional

from graphml_core.exceptions import UnsupportedAttributeTypeError, ValidationError

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class GraphMLType(str, Enum):
    """Values allowed in the ``attr.type`` attribute of a ``<key>``."""

    BOOLEAN = "boolean"
    INT = "int"
    # No Python value kind resolves to LONG or DOUBLE; they are kept so
    # the enum matches the GraphML schema.
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"


class AttributeScope(str, Enum):
    """Values allowed in the ``for`` attribute of a ``<key>``."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"
    ALL = "all"


def resolve_graphml_type(value: Any) -> GraphMLType:
    """
    Resolve the GraphML type of an attribute value.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.

    Args:
        value: Attribute value (already converted from any text-serializable form)

    Returns:
        Matching GraphMLType

    Raises:
        UnsupportedAttributeTypeError: If the value kind has no GraphML mapping
    """
    if isinstance(value, bool):
        return GraphMLType.BOOLEAN
    if isinstance(value, int):
        return GraphMLType.INT
    if isinstance(value, float):
        return GraphMLType.FLOAT
    if isinstance(value, str):
        return GraphMLType.STRING
    raise UnsupportedAttributeTypeError(kind=type(value).__name__, value=value)


def format_attribute_value(value: Any, graphml_type: GraphMLType) -> str:
    """
    Render ``value`` as the text content of a ``<data>`` element.

    Booleans and non-finite floats use the XML Schema lexical forms
    (``true``/``false``, ``INF``/``-INF``/``NaN``).
    """
    if graphml_type is GraphMLType.BOOLEAN:
        return "true" if value else "false"
    if graphml_type in (GraphMLType.INT, GraphMLType.LONG):
        return str(int(value))
    if graphml_type in (GraphMLType.FLOAT, GraphMLType.DOUBLE):
        number = float(value)
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "INF" if number > 0 else "-INF"
        return repr(number)
    # str() of a (str, Enum) member is its qualified name, not its value
    return str.__str__(value)


def ensure_xml_text(text: str, field: str, attribute_id: Optional[str] = None) -> str:
    """
    Return ``text`` unchanged if it only holds characters XML 1.0 allows.

    Args:
        text: Text about to be written as element content or attribute value
        field: What the text is (e.g. "data", "node id"), for the error details
        attribute_id: Attribute id the text belongs to, if any

    Raises:
        ValidationError: If ``text`` contains a character XML 1.0 forbids
    """
    match = _XML_ILLEGAL_CHARS.search(text)
    if match is None:
        return text

    details = {"field": field, "value": repr(text), "position": match.start()}
    if attribute_id is not None:
        details["attribute_id"] = attribute_id
    raise ValidationError(
        message=f"{field} contains character {match.group()!r} not allowed in XML 1.0",
        error_code="VAL_004",
        details=details,
    )
