"""Unit tests for dotcraft.validation."""

import pytest

from dotcraft.attributes import Attributes, StatementKind
from dotcraft.builder import GraphBuilder, SubGraphBuilder
from dotcraft.models import Graph
from dotcraft.text import AttributeText
from dotcraft.validation import (
    GraphValidationError,
    ValidationError,
    ensure_valid,
    validate_attributes,
    validate_graph,
    validate_value,
)
from dotcraft.values import (
    HSV,
    RGB,
    RGBA,
    ColorList,
    NamedColor,
    Point,
    SplineType,
    WeightedColor,
)


class TestValidateAttributes:
    def test_arrowsize_below_minimum(self) -> None:
        errors = validate_attributes(Attributes({"arrowsize": -1.0}))
        assert len(errors) == 1
        assert errors[0].field == "arrowsize"
        assert errors[0].message == "Must be greater than or equal to 0"

    def test_height_below_minimum(self) -> None:
        errors = validate_attributes(Attributes({"height": 0.0}))
        assert [e.message for e in errors] == ["Must be greater than or equal to 0.02"]

    def test_fontsize_below_minimum(self) -> None:
        errors = validate_attributes(Attributes({"fontsize": 0.0}))
        assert errors[0].field == "fontsize"
        assert errors[0].message == "Must be greater than or equal to 1.0"

    def test_values_at_minimum_pass(self) -> None:
        attrs = Attributes({"arrowsize": 0, "height": 0.02, "width": 0.01, "fontsize": 1})
        assert validate_attributes(attrs) == []

    def test_not_a_number(self) -> None:
        errors = validate_attributes(Attributes({"penwidth": "thick"}))
        assert errors == [ValidationError("penwidth", "Must be a number")]

    def test_html_value_skipped(self) -> None:
        attrs = Attributes({"fontsize": AttributeText.html("<b>0</b>")})
        assert validate_attributes(attrs) == []

    def test_unknown_attributes_ignored(self) -> None:
        assert validate_attributes(Attributes({"label": "", "color": "red"})) == []

    def test_element_in_str(self) -> None:
        error = validate_attributes(Attributes({"arrowsize": -1}), "edge a -> b")[0]
        assert str(error) == "edge a -> b: arrowsize: Must be greater than or equal to 0"


class TestValidateValue:
    def test_rgb_out_of_range(self) -> None:
        assert validate_value(RGB(300, 0, 0), "color")[0].field == "color"
        assert validate_value(RGBA(0, 0, 0, -1)) != []
        assert validate_value(RGB(255, 255, 255)) == []

    def test_hsv_out_of_range(self) -> None:
        assert validate_value(HSV(1.5, 0.5, 0.5)) != []
        assert validate_value(HSV(0.0, 1.0, 0.5)) == []

    def test_weight_out_of_range(self) -> None:
        errors = validate_value(WeightedColor(NamedColor("red"), 1.2))
        assert [e.message for e in errors] == ["Weight must be between 0 and 1"]

    def test_color_list_weight_sum(self) -> None:
        colors = ColorList.from_pairs([(NamedColor("red"), 0.8), (NamedColor("blue"), 0.8)])
        errors = validate_value(colors, "fillcolor")
        assert [e.message for e in errors] == ["Weights must sum to at most 1"]

    def test_color_list_valid(self) -> None:
        colors = ColorList.from_pairs([(NamedColor("yellow"), 0.3), (NamedColor("blue"), None)])
        assert validate_value(colors) == []

    def test_color_list_weights_summing_to_one(self) -> None:
        colors = ColorList.from_pairs(
            [(NamedColor("red"), 0.33), (NamedColor("green"), 0.56), (NamedColor("blue"), 0.11)]
        )
        assert validate_value(colors) == []

    def test_color_list_just_above_one(self) -> None:
        colors = ColorList.from_pairs([(NamedColor("red"), 0.5), (NamedColor("blue"), 0.51)])
        assert [e.message for e in validate_value(colors)] == ["Weights must sum to at most 1"]

    def test_spline_point_count(self) -> None:
        errors = validate_value(SplineType((Point(0, 0), Point(1, 1))))
        assert errors[0].message == "Number of spline points must be equivalent to 1 mod 3"
        four = SplineType((Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)))
        assert validate_value(four) == []

    def test_empty_spline(self) -> None:
        assert validate_value(SplineType(()))[0].message == "empty spline path"

    def test_plain_values_have_no_invariants(self) -> None:
        assert validate_value("anything") == []


class TestValidateGraph:
    def test_valid_graph(self, single_edge_graph: Graph) -> None:
        assert validate_graph(single_edge_graph) == []

    def test_collects_from_every_statement(self) -> None:
        subgraph = SubGraphBuilder("cluster_0").add_node("s", {"height": 0.0}).build()
        graph = (
            GraphBuilder("G")
            .add_attribute(StatementKind.GRAPH, "fontsize", 0.5)
            .add_node("n", {"width": 0})
            .add_edge("n", "s", {"arrowsize": -2})
            .add_subgraph(subgraph)
            .build()
        )
        errors = validate_graph(graph)
        assert [(e.element, e.field) for e in errors] == [
            ("graph defaults", "fontsize"),
            ("node s", "height"),
            ("node n", "width"),
            ("edge n -> s", "arrowsize"),
        ]

    def test_undeclared_nodes_allowed_by_default(self) -> None:
        graph = GraphBuilder().add_edge("a", "b").build()
        assert validate_graph(graph) == []

    def test_undeclared_nodes_reported_when_required(self) -> None:
        graph = GraphBuilder().add_node("a").add_edge("a", "b").build()
        errors = validate_graph(graph, require_declared_nodes=True)
        assert [e.message for e in errors] == ["Referenced node does not exist: b"]

    def test_nodes_declared_in_subgraphs_count(self) -> None:
        subgraph = SubGraphBuilder("cluster_0").add_node("b").build()
        graph = GraphBuilder().add_node("a").add_subgraph(subgraph).add_edge("a", "b").build()
        assert validate_graph(graph, require_declared_nodes=True) == []


class TestEnsureValid:
    def test_returns_graph(self, single_edge_graph: Graph) -> None:
        assert ensure_valid(single_edge_graph) is single_edge_graph

    def test_raises_with_errors(self) -> None:
        graph = GraphBuilder().add_node("n", {"height": 0.0}).build()
        with pytest.raises(GraphValidationError, match="1 validation error") as exc_info:
            ensure_valid(graph)
        assert exc_info.value.errors[0].field == "height"
