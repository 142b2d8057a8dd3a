"""Graph IR — adjacency structures and a networkx view of an agent graph.

``build_adjacency`` produces the slug-keyed maps the positioners walk;
``GraphIR`` wraps the same topology in a networkx DiGraph for structural
queries (DAG checks, topological order, degrees).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import networkx as nx

from agent_layout.ir.model import Graph, Node

logger = logging.getLogger(__name__)


@dataclass
class Adjacency:
    """Slug-keyed adjacency built from a node list.

    ``in_degree`` and ``outgoing`` have an entry for every known slug; edges
    pointing at unknown slugs are left out of both and listed in ``dangling``.
    """

    node_by_slug: dict[str, Node] = field(default_factory=dict)
    in_degree: dict[str, int] = field(default_factory=dict)
    outgoing: dict[str, list[str]] = field(default_factory=dict)
    dangling: list[tuple[str, str]] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)

    def slugs(self) -> list[str]:
        """Known slugs in first-seen order."""
        return list(self.in_degree)


def build_adjacency(nodes: Sequence[Node]) -> Adjacency:
    """Build in-degree counts and outgoing lists keyed by slug.

    Repeated edges are counted each time they appear. Duplicate slugs are a
    caller error: the last node wins in ``node_by_slug``.
    """
    adj = Adjacency()

    for node in nodes:
        if node.slug in adj.node_by_slug:
            logger.warning("duplicate node slug %r; last definition wins", node.slug)
            adj.duplicates.append(node.slug)
        adj.node_by_slug[node.slug] = node
        adj.in_degree.setdefault(node.slug, 0)
        adj.outgoing.setdefault(node.slug, [])

    for node in nodes:
        for nxt in node.next_nodes:
            if nxt.slug not in adj.in_degree:
                logger.warning("edge %s -> %s points at an unknown node; ignored", node.slug, nxt.slug)
                adj.dangling.append((node.slug, nxt.slug))
                continue
            adj.in_degree[nxt.slug] += 1
            adj.outgoing[node.slug].append(nxt.slug)

    return adj


class GraphIR:
    """Wraps a networkx DiGraph built from an agent graph.

    Node attribute ``data`` holds the winning ``Node`` for each slug; edge
    attribute ``ports`` lists the ``(output_name, input_name)`` pairs of every
    ``next_nodes`` entry between the two slugs.
    """

    def __init__(self, digraph: nx.DiGraph, adjacency: Adjacency) -> None:
        self.digraph = digraph
        self.adjacency = adjacency

    @classmethod
    def from_graph(cls, graph: Graph) -> GraphIR:
        adj = build_adjacency(graph.nodes)
        digraph: nx.DiGraph = nx.DiGraph()
        for slug, node in adj.node_by_slug.items():
            digraph.add_node(slug, data=node)

        for node in graph.nodes:
            if adj.node_by_slug.get(node.slug) is not node:
                continue
            for nxt in node.next_nodes:
                if nxt.slug not in digraph:
                    continue
                if digraph.has_edge(node.slug, nxt.slug):
                    digraph.edges[node.slug, nxt.slug]["ports"].append((nxt.output_name, nxt.input_name))
                else:
                    digraph.add_edge(node.slug, nxt.slug, ports=[(nxt.output_name, nxt.input_name)])

        return cls(digraph=digraph, adjacency=adj)

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def topological_order(self) -> list[str] | None:
        try:
            return list(nx.topological_sort(self.digraph))
        except nx.NetworkXUnfeasible:
            return None

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def in_degree(self, slug: str) -> int:
        if slug not in self.digraph:
            return 0
        return self.digraph.in_degree(slug)

    def out_degree(self, slug: str) -> int:
        if slug not in self.digraph:
            return 0
        return self.digraph.out_degree(slug)

    def successors(self, slug: str) -> list[str]:
        if slug not in self.digraph:
            return []
        return list(self.digraph.successors(slug))
