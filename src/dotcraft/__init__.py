"""dotcraft: a typed attribute model and DOT serializer for Graphviz graphs."""

from __future__ import annotations

__version__ = "0.1.0"

from dotcraft.attributes import AttributeStatement, Attributes, StatementKind
from dotcraft.builder import GraphBuilder, SubGraphBuilder
from dotcraft.exporters.dot import Dot, export_dot, render_dot
from dotcraft.formatters import to_attribute_text
from dotcraft.models import Edge, Graph, Node, SubGraph
from dotcraft.text import AttributeText, TextKind

__all__ = [
    "AttributeStatement",
    "AttributeText",
    "Attributes",
    "Dot",
    "Edge",
    "Graph",
    "GraphBuilder",
    "Node",
    "StatementKind",
    "SubGraph",
    "SubGraphBuilder",
    "TextKind",
    "__version__",
    "export_dot",
    "render_dot",
    "to_attribute_text",
]
