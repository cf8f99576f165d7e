"""JSON export of the graph model.

The output is a description ``dotcraft.loader.graph_from_dict`` reads back;
every attribute is written in its explicit ``{kind: text}`` form so that
no escaping contract is lost.
"""

from __future__ import annotations

import json
from typing import Any

from dotcraft.attributes import AttributeStatement, Attributes
from dotcraft.models import Edge, Graph, SubGraph


def graph_to_json(graph: Graph) -> dict[str, Any]:
    """Export a Graph as a JSON-serializable dictionary."""
    data: dict[str, Any] = {"directed": graph.directed, "strict": graph.strict}
    if graph.id is not None:
        data["id"] = graph.id
    if graph.comment is not None:
        data["comment"] = graph.comment
    data.update(_body_to_json(graph))
    return data


def export_json(graph: Graph, indent: int = 2) -> str:
    """Export a Graph as a JSON string."""
    return json.dumps(graph_to_json(graph), indent=indent)


def _body_to_json(body: Graph | SubGraph) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for key, statement in (
        ("graph", body.graph_attributes),
        ("node", body.node_attributes),
        ("edge", body.edge_attributes),
    ):
        if statement is not None and not statement.is_empty():
            data[key] = _statement_to_json(statement)
    if body.subgraphs:
        data["subgraphs"] = [_subgraph_to_json(s) for s in body.subgraphs]
    data["nodes"] = [
        {"id": node.id, "attributes": _attributes_to_json(node.attributes)}
        for node in body.nodes
    ]
    data["edges"] = [_edge_to_json(edge) for edge in body.edges]
    return data


def _subgraph_to_json(subgraph: SubGraph) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if subgraph.id is not None:
        data["id"] = subgraph.id
    data.update(_body_to_json(subgraph))
    return data


def _edge_to_json(edge: Edge) -> dict[str, Any]:
    data: dict[str, Any] = {"source": edge.source, "target": edge.target}
    if edge.source_port is not None:
        data["source_port"] = edge.source_port.dot_string()
    if edge.target_port is not None:
        data["target_port"] = edge.target_port.dot_string()
    data["attributes"] = _attributes_to_json(edge.attributes)
    return data


def _statement_to_json(statement: AttributeStatement) -> dict[str, Any]:
    return _attributes_to_json(statement.attributes)


def _attributes_to_json(attributes: Attributes) -> dict[str, Any]:
    return {key: {value.kind.value: value.text} for key, value in attributes.items()}
