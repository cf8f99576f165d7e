"""Ordered attribute maps and default-attribute statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from dotcraft.formatters import to_attribute_text
from dotcraft.text import AttributeText


class Attributes:
    """Attribute name to attribute text, kept in first-insertion order.

    Setting a key that is already present replaces its value but keeps its
    position.
    """

    def __init__(
        self, items: Attributes | Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None
    ) -> None:
        self._items: dict[str, AttributeText] = {}
        if items is not None:
            self.update(items)

    def set(self, key: str, value: Any) -> Attributes:
        """Upsert ``key``; ``value`` may be attribute text or any typed value."""
        self._items[key] = to_attribute_text(value)
        return self

    def update(
        self, items: Attributes | Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> Attributes:
        pairs: Iterable[tuple[str, Any]]
        if isinstance(items, (Attributes, Mapping)):
            pairs = items.items()
        else:
            pairs = items
        for key, value in pairs:
            self.set(key, value)
        return self

    def get(self, key: str) -> AttributeText | None:
        return self._items.get(key)

    def __getitem__(self, key: str) -> AttributeText:
        return self._items[key]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    def __repr__(self) -> str:
        return f"Attributes({list(self._items.items())!r})"

    def items(self) -> list[tuple[str, AttributeText]]:
        return list(self._items.items())

    def copy(self) -> Attributes:
        return Attributes(self._items)

    def dot_string(self) -> str:
        """Render as a `` [k=v, ...]`` suffix, or nothing when empty."""
        if not self._items:
            return ""
        body = ", ".join(f"{k}={v.dot_string()}" for k, v in self._items.items())
        return f" [{body}]"


class StatementKind(Enum):
    """Element kind a default-attribute statement applies to."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"


@dataclass
class AttributeStatement:
    """A ``graph [...]``, ``node [...]`` or ``edge [...]`` statement."""

    kind: StatementKind
    attributes: Attributes = field(default_factory=Attributes)

    def set(self, key: str, value: Any) -> AttributeStatement:
        self.attributes.set(key, value)
        return self

    def is_empty(self) -> bool:
        return len(self.attributes) == 0

    def dot_string(self) -> str:
        if self.is_empty():
            return ""
        return f"{self.kind.value}{self.attributes.dot_string()};"


def graph_statement(items: Mapping[str, Any] | None = None) -> AttributeStatement:
    return AttributeStatement(StatementKind.GRAPH, Attributes(items))


def node_statement(items: Mapping[str, Any] | None = None) -> AttributeStatement:
    return AttributeStatement(StatementKind.NODE, Attributes(items))


def edge_statement(items: Mapping[str, Any] | None = None) -> AttributeStatement:
    return AttributeStatement(StatementKind.EDGE, Attributes(items))
