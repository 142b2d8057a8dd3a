"""Layout dispatcher: choose a positioner and apply its output."""

from __future__ import annotations

import logging
from dataclasses import replace

from agent_layout.config import DEFAULT_CONFIG, LayoutConfig
from agent_layout.errors import GraphShapeError, GroupLayoutError
from agent_layout.ir.model import Graph, Node, Position
from agent_layout.layout.grouped import GroupedLayout
from agent_layout.layout.layered import LayeredLayout
from agent_layout.layout.types import LayoutResult
from agent_layout.types import LayoutMode

logger = logging.getLogger(__name__)


def _check_shape(graph: Graph) -> None:
    nodes = getattr(graph, "nodes", None)
    if not isinstance(nodes, (list, tuple)):
        raise GraphShapeError(f"graph has no node list (got {type(nodes).__name__})")
    for index, node in enumerate(nodes):
        if not isinstance(node, Node):
            raise GraphShapeError(f"node #{index} is a {type(node).__name__}, not a Node")


def apply_positions(graph: Graph, result: LayoutResult) -> Graph:
    """Return a copy of ``graph`` with positions taken from ``result``.

    Only ``position`` changes; every other field is carried over as is.
    """
    positions: dict[int, Position] = {p.index: Position(x=p.x, y=p.y) for p in result.nodes}
    nodes = [
        replace(node, position=positions[index], next_nodes=list(node.next_nodes))
        for index, node in enumerate(graph.nodes)
    ]
    return Graph(agent=replace(graph.agent), nodes=nodes)


def run_layout(graph: Graph, use_grouping: bool = False, config: LayoutConfig | None = None) -> LayoutResult:
    """Run the selected positioner and return its raw result."""
    _check_shape(graph)
    config = config or DEFAULT_CONFIG

    if use_grouping and graph.has_groups():
        try:
            return GroupedLayout().layout(graph, config)
        except GroupLayoutError as e:
            agent_slug = getattr(graph.agent, "slug", "?")
            logger.warning("grouped layout failed for agent %r, using layered layout: %s", agent_slug, e)

    return LayeredLayout().layout(graph, config)


def layout_with_mode(
    graph: Graph, use_grouping: bool = False, config: LayoutConfig | None = None
) -> tuple[Graph, LayoutMode]:
    """Lay out ``graph`` and report which positioner produced the positions."""
    result = run_layout(graph, use_grouping, config)
    return apply_positions(graph, result), result.mode


def layout_graph(graph: Graph, use_grouping: bool = False, config: LayoutConfig | None = None) -> Graph:
    """Return a copy of ``graph`` with every node's ``position`` populated.

    Uses the grouped layout when ``use_grouping`` is set and at least one node
    carries a non-empty group; otherwise, or when the grouped layout cannot
    handle the node data, the layered layout.

    Raises:
        GraphShapeError: If ``graph.nodes`` is missing or holds non-nodes.
    """
    laid_out, _ = layout_with_mode(graph, use_grouping, config)
    return laid_out
