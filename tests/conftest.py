"""Shared test fixtures for dotcraft."""

import json
from pathlib import Path

import pytest

from dotcraft.attributes import StatementKind
from dotcraft.builder import GraphBuilder, SubGraphBuilder
from dotcraft.enums import GraphStyle, NodeStyle, Shape
from dotcraft.models import Graph
from dotcraft.values import NamedColor


@pytest.fixture
def initialized_project(tmp_path: Path) -> Path:
    """Create a temporary project with a dotcraft config."""
    dotcraft_dir = tmp_path / ".dotcraft"
    dotcraft_dir.mkdir()
    config = {
        "version": "0.1.0",
        "validate": True,
        "log_level": "WARNING",
        "default_directed": True,
    }
    (dotcraft_dir / "config.json").write_text(json.dumps(config, indent=2))
    return tmp_path


@pytest.fixture
def single_edge_graph() -> Graph:
    """N0 -> N1 in a digraph named single_edge."""
    return (
        GraphBuilder.directed("single_edge")
        .add_node("N0")
        .add_node("N1")
        .add_edge("N0", "N1")
        .build()
    )


@pytest.fixture
def clusters_graph() -> Graph:
    """The two-cluster process example from the graphviz gallery."""
    cluster_0 = (
        SubGraphBuilder("cluster_0")
        .add_attributes(
            StatementKind.GRAPH,
            {
                "label": "process #1",
                "style": GraphStyle.FILLED,
                "color": NamedColor("lightgrey"),
            },
        )
        .add_attributes(
            StatementKind.NODE, {"style": NodeStyle.FILLED, "color": NamedColor("white")}
        )
        .add_edge("a0", "a1")
        .add_edge("a1", "a2")
        .add_edge("a2", "a3")
        .build()
    )
    cluster_1 = (
        SubGraphBuilder("cluster_1")
        .add_attributes(
            StatementKind.GRAPH,
            {
                "label": "process #2",
                "style": GraphStyle.FILLED,
                "color": NamedColor("blue"),
            },
        )
        .add_attribute(StatementKind.NODE, "style", NodeStyle.FILLED)
        .add_edge("b0", "b1")
        .add_edge("b1", "b2")
        .add_edge("b2", "b3")
        .build()
    )
    builder = (
        GraphBuilder.directed("G")
        .add_node("start", {"shape": Shape.M_DIAMOND})
        .add_node("end", {"shape": Shape.M_SQUARE})
        .add_subgraph(cluster_0)
        .add_subgraph(cluster_1)
    )
    for source, target in [
        ("start", "a0"),
        ("start", "b0"),
        ("a1", "b3"),
        ("b2", "a3"),
        ("a3", "a0"),
        ("a3", "end"),
        ("b3", "end"),
    ]:
        builder.add_edge(source, target)
    return builder.build()


@pytest.fixture
def sample_description() -> str:
    """Return a YAML graph description."""
    return """\
id: G
comment: Build pipeline
graph:
  rankdir: {raw: LR}
node:
  shape: {raw: box}
  style: {raw: filled}
edge:
  color: gray
nodes:
  - id: fetch
    attributes: {label: "Fetch sources"}
  - id: build
    attributes: {label: "Build", fontsize: 14}
  - test
edges:
  - {source: fetch, target: build}
  - source: build
    target: test
    attributes: {label: {escaped: "ok\\\\l"}, penwidth: 2.5}
subgraphs:
  - id: cluster_deploy
    graph: {label: Deploy}
    nodes: [stage, prod]
    edges:
      - {source: stage, target: prod, source_port: s, target_port: "in:n"}
"""


@pytest.fixture
def sample_description_file(tmp_path: Path, sample_description: str) -> Path:
    """Write the sample description to a YAML file and return the path."""
    path = tmp_path / "pipeline.yaml"
    path.write_text(sample_description)
    return path
