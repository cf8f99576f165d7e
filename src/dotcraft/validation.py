"""Pre-render validation of graphs and attribute values.

Nothing in the rendering path calls into this module. Callers who want
checked output run ``validate_graph`` (or ``ensure_valid``) first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable

from dotcraft.attributes import AttributeStatement, Attributes
from dotcraft.models import Graph, SubGraph
from dotcraft.text import TextKind
from dotcraft.values import HSV, RGB, RGBA, ColorList, SplineType, WeightedColor

# Lower bounds graphviz documents for numeric attributes.
MINIMUMS: dict[str, str] = {
    "arrowsize": "0",
    "fontsize": "1.0",
    "height": "0.02",
    "penwidth": "0",
    "width": "0.01",
}


@dataclass(frozen=True)
class ValidationError:
    """A single problem with one attribute (or edge endpoint)."""

    field: str
    message: str
    element: str = ""

    def __str__(self) -> str:
        where = f"{self.element}: " if self.element else ""
        return f"{where}{self.field}: {self.message}"


class GraphValidationError(ValueError):
    """Raised by ``ensure_valid`` when a graph has validation errors."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        summary = "; ".join(str(e) for e in errors)
        super().__init__(f"{len(errors)} validation error(s): {summary}")


def validate_attributes(attributes: Attributes, element: str = "") -> list[ValidationError]:
    """Check numeric attributes against their documented minimums."""
    errors: list[ValidationError] = []
    for key, minimum in MINIMUMS.items():
        value = attributes.get(key)
        if value is None or value.kind is TextKind.HTML:
            continue
        try:
            number = float(value.text)
        except ValueError:
            errors.append(ValidationError(key, "Must be a number", element))
            continue
        if math.isnan(number) or number < float(minimum):
            errors.append(
                ValidationError(key, f"Must be greater than or equal to {minimum}", element)
            )
    return errors


def validate_value(value: Any, field: str = "value") -> list[ValidationError]:
    """Check the declared invariants of a structured value.

    Formatting accepts all of these values; this is where they are caught
    when a caller wants them caught.
    """
    errors: list[ValidationError] = []
    if isinstance(value, (RGB, RGBA)):
        channels = [value.red, value.green, value.blue]
        if isinstance(value, RGBA):
            channels.append(value.alpha)
        if any(not 0 <= c <= 255 for c in channels):
            errors.append(ValidationError(field, "Color channels must be between 0 and 255"))
    elif isinstance(value, HSV):
        if any(not 0.0 <= c <= 1.0 for c in (value.hue, value.saturation, value.value)):
            errors.append(ValidationError(field, "HSV channels must be between 0 and 1"))
    elif isinstance(value, WeightedColor):
        errors.extend(validate_value(value.color, field))
        if value.weight is not None and not 0.0 <= value.weight <= 1.0:
            errors.append(ValidationError(field, "Weight must be between 0 and 1"))
    elif isinstance(value, ColorList):
        for weighted in value.colors:
            errors.extend(validate_value(weighted, field))
        total = math.fsum(c.weight for c in value.colors if c.weight is not None)
        if total > 1.0 and not math.isclose(total, 1.0):
            errors.append(ValidationError(field, "Weights must sum to at most 1"))
    elif isinstance(value, SplineType):
        if not value.points:
            errors.append(ValidationError(field, "empty spline path"))
        elif len(value.points) % 3 != 1:
            errors.append(
                ValidationError(field, "Number of spline points must be equivalent to 1 mod 3")
            )
    return errors


def validate_graph(graph: Graph, require_declared_nodes: bool = False) -> list[ValidationError]:
    """Collect validation errors for every statement in ``graph``.

    With ``require_declared_nodes`` set, edges whose endpoints have no node
    statement anywhere in the graph are reported too. DOT itself allows
    such edges.
    """
    errors: list[ValidationError] = []
    declared: set[str] = set()
    endpoints: list[tuple[str, str]] = []
    _validate_body(graph, "", errors, declared, endpoints)

    if require_declared_nodes:
        for element, node_id in endpoints:
            if node_id not in declared:
                errors.append(
                    ValidationError("node", f"Referenced node does not exist: {node_id}", element)
                )
    return errors


def ensure_valid(graph: Graph, require_declared_nodes: bool = False) -> Graph:
    """Return ``graph`` unchanged, or raise GraphValidationError."""
    errors = validate_graph(graph, require_declared_nodes=require_declared_nodes)
    if errors:
        raise GraphValidationError(errors)
    return graph


def _validate_body(
    body: Graph | SubGraph,
    scope: str,
    errors: list[ValidationError],
    declared: set[str],
    endpoints: list[tuple[str, str]],
) -> None:
    for statement in _statements(body):
        element = f"{statement.kind.value} defaults"
        if scope:
            element = f"{scope} {element}"
        errors.extend(validate_attributes(statement.attributes, element))

    for subgraph in body.subgraphs:
        name = subgraph.id if subgraph.id is not None else "<anonymous>"
        _validate_body(subgraph, f"subgraph {name}", errors, declared, endpoints)

    for node in body.nodes:
        declared.add(node.id)
        errors.extend(validate_attributes(node.attributes, f"node {node.id}"))

    for edge in body.edges:
        element = f"edge {edge.source} -> {edge.target}"
        endpoints.append((element, edge.source))
        endpoints.append((element, edge.target))
        errors.extend(validate_attributes(edge.attributes, element))


def _statements(body: Graph | SubGraph) -> Iterable[AttributeStatement]:
    for statement in (body.graph_attributes, body.node_attributes, body.edge_attributes):
        if statement is not None:
            yield statement
