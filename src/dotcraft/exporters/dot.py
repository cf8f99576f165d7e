"""Graphviz DOT export for dotcraft graphs."""

from __future__ import annotations

import io
import logging
from typing import TextIO

from dotcraft.models import Edge, Graph, Node, SubGraph

LOGGER = logging.getLogger(__name__)

INDENT = "    "


def render_dot(graph: Graph, out: TextIO) -> None:
    """Write ``graph`` to ``out`` in DOT syntax.

    Errors raised by ``out`` propagate unchanged; whatever was written
    before the failure stays written.
    """
    LOGGER.debug(
        "Rendering %s %r: %d nodes, %d edges, %d subgraphs",
        graph.graph_keyword,
        graph.id,
        len(graph.nodes),
        len(graph.edges),
        len(graph.subgraphs),
    )
    if graph.comment is not None:
        out.write(f"// {graph.comment}\n")

    header = f"strict {graph.graph_keyword}" if graph.strict else graph.graph_keyword
    if graph.id is not None:
        header += f" {graph.id}"
    out.write(f"{header} {{\n")

    _write_body(out, graph, graph.edge_op, 1)
    out.write("}\n")


def export_dot(graph: Graph) -> str:
    """Export a Graph as a Graphviz DOT string."""
    buffer = io.StringIO()
    render_dot(graph, buffer)
    return buffer.getvalue()


class Dot:
    """A renderable wrapper; ``str(Dot(graph))`` gives the DOT text."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def render(self, out: TextIO) -> None:
        render_dot(self.graph, out)

    def __str__(self) -> str:
        return export_dot(self.graph)


def _write_body(out: TextIO, body: Graph | SubGraph, edge_op: str, level: int) -> None:
    indent = INDENT * level
    # Later default statements may shadow earlier ones; order is fixed.
    for statement in (body.graph_attributes, body.node_attributes, body.edge_attributes):
        if statement is not None and not statement.is_empty():
            out.write(f"{indent}{statement.dot_string()}\n")

    for subgraph in body.subgraphs:
        _write_subgraph(out, subgraph, edge_op, level)

    for node in body.nodes:
        out.write(f"{indent}{node_string(node)}\n")

    for edge in body.edges:
        out.write(f"{indent}{edge_string(edge, edge_op)}\n")


def _write_subgraph(out: TextIO, subgraph: SubGraph, edge_op: str, level: int) -> None:
    indent = INDENT * level
    header = "subgraph" if subgraph.id is None else f"subgraph {subgraph.id}"
    out.write(f"{indent}{header} {{\n")
    _write_body(out, subgraph, edge_op, level + 1)
    out.write(f"{indent}}}\n\n")


def node_string(node: Node) -> str:
    """Render a node statement without indentation."""
    return f"{node.id}{node.attributes.dot_string()};"


def edge_string(edge: Edge, edge_op: str) -> str:
    """Render an edge statement without indentation.

    Ids are written as given; dangling references are not detected here.
    """
    source = edge.source
    if edge.source_port is not None:
        source += f":{edge.source_port.dot_string()}"
    target = edge.target
    if edge.target_port is not None:
        target += f":{edge.target_port.dot_string()}"
    return f"{source} {edge_op} {target}{edge.attributes.dot_string()};"
