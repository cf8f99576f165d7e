"""Interop between dotcraft graphs and networkx."""

from __future__ import annotations

from typing import Iterator

import networkx as nx

from dotcraft.builder import GraphBuilder
from dotcraft.models import Edge, Graph, Node, SubGraph


def from_networkx(nxg: nx.Graph, graph_id: str | None = None) -> Graph:
    """Build a Graph from a networkx graph.

    Node and edge data become attributes through ``to_attribute_text``, so
    every data value must have a DOT form. Node ids are stringified.
    """
    builder = GraphBuilder(graph_id, directed=nxg.is_directed())
    for node_id, data in nxg.nodes(data=True):
        builder.add_node(str(node_id), data)
    for source, target, data in nxg.edges(data=True):
        builder.add_edge(str(source), str(target), data)
    return builder.build()


def to_networkx(graph: Graph) -> nx.Graph:
    """Convert a Graph into a networkx DiGraph (or Graph when undirected).

    Nodes and edges of every subgraph are included. Attribute values are
    kept as ``AttributeText``.
    """
    g: nx.Graph = nx.DiGraph() if graph.directed else nx.Graph()
    for node in _all_nodes(graph):
        g.add_node(node.id, **dict(node.attributes.items()))
    for edge in _all_edges(graph):
        g.add_edge(edge.source, edge.target, **dict(edge.attributes.items()))
    return g


def _walk(body: Graph | SubGraph) -> Iterator[Graph | SubGraph]:
    yield body
    for subgraph in body.subgraphs:
        yield from _walk(subgraph)


def _all_nodes(graph: Graph) -> Iterator[Node]:
    for body in _walk(graph):
        yield from body.nodes


def _all_edges(graph: Graph) -> Iterator[Edge]:
    for body in _walk(graph):
        yield from body.edges
