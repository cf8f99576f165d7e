"""Unit tests for dotcraft.exporters.dot."""

import io

import pytest

from dotcraft.attributes import AttributeStatement, Attributes, StatementKind
from dotcraft.builder import GraphBuilder, SubGraphBuilder
from dotcraft.enums import CompassPoint, NodeStyle
from dotcraft.exporters.dot import Dot, edge_string, export_dot, node_string, render_dot
from dotcraft.models import Edge, Graph, Node
from dotcraft.values import PortPosition


class _FailingSink(io.StringIO):
    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.writes = 0
        self.fail_after = fail_after

    def write(self, s: str) -> int:
        if self.writes >= self.fail_after:
            raise OSError("sink closed")
        self.writes += 1
        return super().write(s)


class TestNodeString:
    def test_plain(self) -> None:
        assert node_string(Node("N0")) == "N0;"

    def test_with_attributes(self) -> None:
        node = Node("N0", Attributes({"style": NodeStyle.DASHED}))
        assert node_string(node) == "N0 [style=dashed];"


class TestEdgeString:
    def test_directed(self) -> None:
        assert edge_string(Edge("a", "b"), "->") == "a -> b;"

    def test_undirected(self) -> None:
        assert edge_string(Edge("a", "b"), "--") == "a -- b;"

    def test_ports(self) -> None:
        edge = Edge(
            "N0",
            "N1",
            source_port=PortPosition.port("port0", CompassPoint.SW),
            target_port=PortPosition.compass(CompassPoint.NE),
        )
        assert edge_string(edge, "->") == "N0:port0:sw -> N1:ne;"

    def test_ids_not_validated(self) -> None:
        assert edge_string(Edge("a b", "missing"), "->") == "a b -> missing;"


class TestRenderDot:
    def test_writes_to_sink(self, single_edge_graph: Graph) -> None:
        out = io.StringIO()
        render_dot(single_edge_graph, out)
        assert out.getvalue() == export_dot(single_edge_graph)

    def test_strict_header(self) -> None:
        assert export_dot(GraphBuilder("G").strict().build()) == "strict digraph G {\n}\n"

    def test_strict_undirected_without_id(self) -> None:
        graph = GraphBuilder.undirected().strict().build()
        assert export_dot(graph) == "strict graph {\n}\n"

    def test_empty_statement_skipped(self) -> None:
        graph = Graph("G", node_attributes=AttributeStatement(StatementKind.NODE))
        assert export_dot(graph) == "digraph G {\n}\n"

    def test_default_statement_order_fixed(self) -> None:
        graph = (
            GraphBuilder("G")
            .add_attribute(StatementKind.EDGE, "color", "red")
            .add_attribute(StatementKind.NODE, "shape", "box")
            .add_attribute(StatementKind.GRAPH, "label", "g")
            .build()
        )
        assert export_dot(graph).splitlines()[1:4] == [
            '    graph [label="g"];',
            '    node [shape="box"];',
            '    edge [color="red"];',
        ]

    def test_undirected_edges(self) -> None:
        graph = GraphBuilder.undirected("U").add_edge("a", "b").build()
        assert export_dot(graph) == "graph U {\n    a -- b;\n}\n"

    def test_nested_subgraph_indentation(self) -> None:
        inner = SubGraphBuilder("cluster_inner").add_node("x").build()
        outer = SubGraphBuilder().add_subgraph(inner).add_edge("x", "y").build()
        graph = GraphBuilder("G").add_subgraph(outer).build()
        assert export_dot(graph) == (
            "digraph G {\n"
            "    subgraph {\n"
            "        subgraph cluster_inner {\n"
            "            x;\n"
            "        }\n"
            "\n"
            "        x -> y;\n"
            "    }\n"
            "\n"
            "}\n"
        )

    def test_sink_error_propagates(self, single_edge_graph: Graph) -> None:
        sink = _FailingSink(fail_after=2)
        with pytest.raises(OSError, match="sink closed"):
            render_dot(single_edge_graph, sink)
        assert sink.getvalue() == "digraph single_edge {\n    N0;\n"


class TestDot:
    def test_str(self) -> None:
        assert str(Dot(GraphBuilder.directed().build())) == "digraph {\n}\n"

    def test_render(self, single_edge_graph: Graph) -> None:
        out = io.StringIO()
        Dot(single_edge_graph).render(out)
        assert out.getvalue().startswith("digraph single_edge {\n")
