"""Builders that accumulate statements and freeze them into a Graph."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from dotcraft.attributes import AttributeStatement, Attributes, StatementKind
from dotcraft.models import Edge, Graph, Node, SubGraph
from dotcraft.values import PortPosition

_B = TypeVar("_B", bound="BodyBuilder")


class BodyBuilder:
    """Statements shared by graphs and subgraphs."""

    def __init__(self, graph_id: str | None = None) -> None:
        self.id = graph_id
        self._statements: dict[StatementKind, AttributeStatement] = {}
        self._subgraphs: list[SubGraph] = []
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

    def add_attribute(self: _B, kind: StatementKind, key: str, value: Any) -> _B:
        """Set a default attribute, creating the statement on first use."""
        statement = self._statements.setdefault(kind, AttributeStatement(kind))
        statement.set(key, value)
        return self

    def add_attributes(
        self: _B, kind: StatementKind, items: Attributes | Mapping[str, Any]
    ) -> _B:
        for key, value in items.items():
            self.add_attribute(kind, key, value)
        return self

    def set_statement(self: _B, statement: AttributeStatement) -> _B:
        """Replace the whole default statement of ``statement.kind``."""
        self._statements[statement.kind] = statement
        return self

    def add_subgraph(self: _B, subgraph: SubGraph) -> _B:
        self._subgraphs.append(subgraph)
        return self

    def add_node(
        self: _B, node: Node | str, attributes: Attributes | Mapping[str, Any] | None = None
    ) -> _B:
        if isinstance(node, str):
            node = Node(node, Attributes(attributes))
        elif attributes:
            raise ValueError("Pass attributes either on the Node or to add_node, not both")
        self._nodes.append(node)
        return self

    def add_edge(
        self: _B,
        edge: Edge | str,
        target: str | None = None,
        attributes: Attributes | Mapping[str, Any] | None = None,
        source_port: PortPosition | None = None,
        target_port: PortPosition | None = None,
    ) -> _B:
        if isinstance(edge, str):
            if target is None:
                raise ValueError("An edge needs a target")
            edge = Edge(
                source=edge,
                target=target,
                source_port=source_port,
                target_port=target_port,
                attributes=Attributes(attributes),
            )
        self._edges.append(edge)
        return self

    def _frozen_statement(self, kind: StatementKind) -> AttributeStatement | None:
        statement = self._statements.get(kind)
        if statement is None:
            return None
        return AttributeStatement(kind, statement.attributes.copy())

    def _body(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "graph_attributes": self._frozen_statement(StatementKind.GRAPH),
            "node_attributes": self._frozen_statement(StatementKind.NODE),
            "edge_attributes": self._frozen_statement(StatementKind.EDGE),
            "subgraphs": tuple(self._subgraphs),
            "nodes": tuple(self._nodes),
            "edges": tuple(self._edges),
        }


class SubGraphBuilder(BodyBuilder):
    """Accumulates a subgraph (or cluster) body."""

    def build(self) -> SubGraph:
        return SubGraph(**self._body())


class GraphBuilder(BodyBuilder):
    """Accumulates a top-level graph.

    Building takes a snapshot: later calls on the builder do not change
    graphs it already produced.
    """

    def __init__(self, graph_id: str | None = None, directed: bool = True) -> None:
        super().__init__(graph_id)
        self.is_directed = directed
        self.is_strict = False
        self._comment: str | None = None

    @classmethod
    def directed(cls, graph_id: str | None = None) -> GraphBuilder:
        return cls(graph_id, directed=True)

    @classmethod
    def undirected(cls, graph_id: str | None = None) -> GraphBuilder:
        return cls(graph_id, directed=False)

    def strict(self) -> GraphBuilder:
        self.is_strict = True
        return self

    def comment(self, comment: str) -> GraphBuilder:
        self._comment = comment
        return self

    def build(self) -> Graph:
        return Graph(
            directed=self.is_directed,
            strict=self.is_strict,
            comment=self._comment,
            **self._body(),
        )
