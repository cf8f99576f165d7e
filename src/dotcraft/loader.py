"""Build graphs from YAML or JSON descriptions.

A description is a mapping::

    id: G
    directed: true
    strict: false
    comment: optional comment line
    graph: {rankdir: LR}        # default statements
    node: {style: filled}
    edge: {color: red}
    nodes:
      - id: a
        attributes: {label: A}
    edges:
      - {source: a, target: b, source_port: "p0:sw"}
    subgraphs:
      - {id: cluster_0, graph: {label: x}, nodes: [...], edges: [...]}

Attribute values follow ``to_attribute_text`` (strings are quoted, numbers
and booleans raw). ``{raw: LR}``, ``{escaped: "a\\l"}``, ``{html: "<b>x</b>"}``
or ``{quoted: ...}`` pick the variant explicitly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from dotcraft.attributes import Attributes, StatementKind
from dotcraft.builder import BodyBuilder, GraphBuilder, SubGraphBuilder
from dotcraft.enums import CompassPoint
from dotcraft.formatters import to_attribute_text
from dotcraft.models import Edge, Graph
from dotcraft.text import AttributeText, TextKind
from dotcraft.values import PortPosition

LOGGER = logging.getLogger(__name__)

_STATEMENT_KEYS = {
    "graph": StatementKind.GRAPH,
    "node": StatementKind.NODE,
    "edge": StatementKind.EDGE,
}
_TEXT_KINDS = {kind.value: kind for kind in TextKind}
_COMPASS = {point.value: point for point in CompassPoint}


class LoaderError(ValueError):
    """Raised when a graph description is malformed."""


def load_graph(path: Path, default_directed: bool = True) -> Graph:
    """Load a graph description file (``.json``, otherwise YAML).

    ``default_directed`` applies when the description has no ``directed`` key.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoaderError(f"Cannot read {path}: {exc}") from exc
    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoaderError(f"Invalid description in {path}: {exc}") from exc
    graph = graph_from_dict(data, default_directed)
    LOGGER.info("Loaded graph %r from %s", graph.id, path)
    return graph


def load_graph_string(text: str, default_directed: bool = True) -> Graph:
    """Load a YAML (or JSON) description from a string."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LoaderError(f"Invalid description: {exc}") from exc
    return graph_from_dict(data, default_directed)


def graph_from_dict(data: Any, default_directed: bool = True) -> Graph:
    """Build a Graph from an already-parsed description mapping."""
    if not isinstance(data, dict):
        raise LoaderError("Graph description must be a mapping")
    graph_id = _optional_str(data, "id", "graph")
    builder = GraphBuilder(graph_id, directed=_flag(data, "directed", default_directed, "graph"))
    if _flag(data, "strict", False, "graph"):
        builder.strict()
    comment = _optional_str(data, "comment", "graph")
    if comment is not None:
        builder.comment(comment)
    _fill_body(builder, data, "graph")
    graph = builder.build()
    LOGGER.debug(
        "Built graph %r with %d nodes and %d edges", graph.id, len(graph.nodes), len(graph.edges)
    )
    return graph


def attribute_value(value: Any, where: str = "attribute") -> AttributeText:
    """Resolve a description value into attribute text."""
    if isinstance(value, dict):
        if len(value) != 1:
            raise LoaderError(f"{where}: explicit text must have exactly one key")
        (kind_name, text), = value.items()
        kind = _TEXT_KINDS.get(kind_name)
        if kind is None:
            raise LoaderError(
                f"{where}: unknown text kind '{kind_name}' "
                f"(expected one of {', '.join(_TEXT_KINDS)})"
            )
        if not isinstance(text, str):
            raise LoaderError(f"{where}: {kind_name} text must be a string")
        return AttributeText(kind, text)
    try:
        return to_attribute_text(value)
    except TypeError as exc:
        raise LoaderError(f"{where}: unsupported value {value!r}") from exc


def parse_port(text: str, where: str = "port") -> PortPosition:
    """Parse ``name``, ``name:compass`` or a bare compass point."""
    name, sep, compass = text.partition(":")
    if not sep:
        if text in _COMPASS:
            return PortPosition.compass(_COMPASS[text])
        return PortPosition.port(text)
    if compass not in _COMPASS:
        raise LoaderError(f"{where}: unknown compass point '{compass}'")
    return PortPosition.port(name, _COMPASS[compass])


def _fill_body(builder: BodyBuilder, data: dict[str, Any], where: str) -> None:
    for key, kind in _STATEMENT_KEYS.items():
        if key in data:
            builder.add_attributes(kind, _attribute_items(data[key], f"{where}.{key}"))

    for index, sub in enumerate(_list(data, "subgraphs", where)):
        sub_where = f"{where}.subgraphs[{index}]"
        if not isinstance(sub, dict):
            raise LoaderError(f"{sub_where} must be a mapping")
        sub_builder = SubGraphBuilder(_optional_str(sub, "id", sub_where))
        _fill_body(sub_builder, sub, sub_where)
        builder.add_subgraph(sub_builder.build())

    for index, node in enumerate(_list(data, "nodes", where)):
        node_where = f"{where}.nodes[{index}]"
        if isinstance(node, str):
            builder.add_node(node)
            continue
        if not isinstance(node, dict) or "id" not in node:
            raise LoaderError(f"{node_where} must be a node id or a mapping with an 'id'")
        builder.add_node(
            str(node["id"]), _attribute_items(node.get("attributes", {}), node_where)
        )

    for index, edge in enumerate(_list(data, "edges", where)):
        builder.add_edge(_edge(edge, f"{where}.edges[{index}]"))


def _edge(data: Any, where: str) -> Edge:
    if not isinstance(data, dict) or "source" not in data or "target" not in data:
        raise LoaderError(f"{where} must be a mapping with 'source' and 'target'")
    source_port = data.get("source_port")
    target_port = data.get("target_port")
    return Edge(
        source=str(data["source"]),
        target=str(data["target"]),
        source_port=parse_port(str(source_port), where) if source_port is not None else None,
        target_port=parse_port(str(target_port), where) if target_port is not None else None,
        attributes=Attributes(_attribute_items(data.get("attributes", {}), where)),
    )


def _attribute_items(raw: Any, where: str) -> dict[str, AttributeText]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise LoaderError(f"{where}: attributes must be a mapping")
    return {str(k): attribute_value(v, f"{where}.{k}") for k, v in raw.items()}


def _list(data: dict[str, Any], key: str, where: str) -> list[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise LoaderError(f"{where}.{key} must be a list")
    return value


def _flag(data: dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise LoaderError(f"{where}.{key} must be true or false, got {value!r}")
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise LoaderError(f"{where}.{key} must be a scalar")
    return str(value)
