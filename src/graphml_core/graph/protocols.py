"""
Read-only graph interface consumed by the exporter.

Any graph implementation can be exported as long as it exposes these
members; ``graphml_core.graph.memory_graph`` provides a ready-made one.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Protocol, Tuple, runtime_checkable


@runtime_checkable
class TextSerializable(Protocol):
    """Value that knows its own textual form; exported as a ``string`` attribute."""

    def to_text(self) -> str: ...


class VertexLike(Protocol):
    @property
    def id(self) -> Hashable: ...

    @property
    def attributes(self) -> Mapping[Any, Any]: ...


class EdgeLike(Protocol):
    @property
    def endpoints(self) -> Tuple[VertexLike, VertexLike]:
        """(first, last) vertex; source and target when directed."""
        ...

    @property
    def is_directed(self) -> bool: ...

    @property
    def attributes(self) -> Mapping[Any, Any]: ...


class GraphSource(Protocol):
    def vertices(self) -> Mapping[Hashable, VertexLike]:
        """Vertices keyed by id, in export order."""
        ...

    def edges(self) -> Iterable[EdgeLike]: ...
