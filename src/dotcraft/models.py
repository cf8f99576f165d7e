"""Core data models for dotcraft graphs.

The models are frozen but not hashable: they hold ``Attributes`` maps, which
stay mutable. Compare them with ``==`` and use their ids as dict keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dotcraft.attributes import AttributeStatement, Attributes
from dotcraft.values import PortPosition


@dataclass(frozen=True)
class Node:
    """A node statement: an id plus its inline attributes."""

    id: str
    attributes: Attributes = field(default_factory=Attributes)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Edge:
    """An edge statement between two node ids.

    Port positions are appended to the endpoint ids (``a:p0:sw -> b``).
    """

    source: str
    target: str
    source_port: PortPosition | None = None
    target_port: PortPosition | None = None
    attributes: Attributes = field(default_factory=Attributes)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SubGraph:
    """A nested subgraph; ids starting with ``cluster`` are drawn boxed."""

    id: str | None = None
    graph_attributes: AttributeStatement | None = None
    node_attributes: AttributeStatement | None = None
    edge_attributes: AttributeStatement | None = None
    subgraphs: tuple[SubGraph, ...] = ()
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Graph:
    """The complete graph handed to the renderer."""

    id: str | None = None
    directed: bool = True
    strict: bool = False
    comment: str | None = None
    graph_attributes: AttributeStatement | None = None
    node_attributes: AttributeStatement | None = None
    edge_attributes: AttributeStatement | None = None
    subgraphs: tuple[SubGraph, ...] = ()
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def graph_keyword(self) -> str:
        return "digraph" if self.directed else "graph"

    @property
    def edge_op(self) -> str:
        return "->" if self.directed else "--"
