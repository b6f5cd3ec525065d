"""
Attribute serialization for GraphML node and edge elements.

Turns one element's attribute bag into ``<data>`` children and records
the first-seen scope and type of every attribute id in a shared
definition registry.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Dict, Mapping

import structlog
from pydantic import BaseModel

from graphml_core.exceptions import UnsupportedAttributeTypeError
from graphml_core.graph.attribute_types import (
    AttributeScope,
    GraphMLType,
    ensure_xml_text,
    format_attribute_value,
    resolve_graphml_type,
)
from graphml_core.graph.protocols import TextSerializable

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AttributeDefinition:
    """
    Schema-level declaration of one attribute id (a ``<key>`` element).

    Attributes:
        id: Attribute id, also used as ``attr.name``
        scope: Element kind the key applies to
        type: GraphML type of the first value seen for this id
    """

    id: str
    scope: AttributeScope
    type: GraphMLType


# attribute id -> definition, in first-seen order
AttributeDefinitions = Dict[str, AttributeDefinition]


def to_exportable_value(value: Any) -> Any:
    """Replace a text-serializable value by its string form, exported as ``string``."""
    if isinstance(value, TextSerializable):
        return str(value.to_text())
    if isinstance(value, BaseModel):
        return str(value.model_dump_json())
    return value


def serialize_attributes(
    element: ET.Element,
    attributes: Mapping[Any, Any],
    scope: AttributeScope,
    definitions: AttributeDefinitions,
) -> None:
    """
    Append ``<data>`` children for every non-null attribute of an element.

    An id seen for the first time is registered in ``definitions`` with
    ``scope`` and the value's type; later occurrences never change it.

    Args:
        element: ``<node>`` or ``<edge>`` element to extend
        attributes: Attribute bag of the vertex or edge
        scope: Scope recorded for newly registered ids
        definitions: Registry shared across the whole export pass

    Raises:
        UnsupportedAttributeTypeError: If a value has no GraphML type
        ValidationError: If an id or value holds characters XML 1.0 forbids
    """
    for attribute_id, value in attributes.items():
        if value is None:
            continue

        key = ensure_xml_text(str(attribute_id), "attribute id")
        value = to_exportable_value(value)

        try:
            graphml_type = resolve_graphml_type(value)
        except UnsupportedAttributeTypeError as e:
            logger.error(
                "unsupported_attribute_type",
                attribute_id=key,
                scope=scope.value,
                kind=e.kind,
                value=repr(value),
            )
            raise UnsupportedAttributeTypeError(
                kind=e.kind,
                value=value,
                attribute_id=key,
                correlation_id=e.correlation_id,
            ) from e

        text = ensure_xml_text(
            format_attribute_value(value, graphml_type), "data", attribute_id=key
        )

        data = ET.SubElement(element, "data")
        data.set("key", key)
        data.text = text

        definitions.setdefault(key, AttributeDefinition(id=key, scope=scope, type=graphml_type))


def build_key_element(parent: ET.Element, definition: AttributeDefinition) -> ET.Element:
    """Append the ``<key>`` declaration for ``definition`` to ``parent``."""
    key = ET.SubElement(parent, "key")
    key.set("id", definition.id)
    key.set("attr.name", definition.id)  # intentionally the same as id
    key.set("attr.type", definition.type.value)
    key.set("for", definition.scope.value)
    return key
