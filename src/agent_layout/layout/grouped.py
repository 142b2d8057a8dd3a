"""Grouped positioner: one centred row per contiguous group run.

Edges are ignored. Runs are detected by adjacency in node order, so two
separated runs of the same group name become two rows.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from agent_layout.config import DEFAULT_CONFIG, LayoutConfig
from agent_layout.errors import GroupLayoutError
from agent_layout.ir.model import Graph, Node
from agent_layout.layout.types import LayoutResult, PlacedNode
from agent_layout.types import LayoutMode


@dataclass
class GroupRun:
    label: str
    indices: list[int] = field(default_factory=list)


def _run_label(index: int, node: Node, config: LayoutConfig) -> str:
    if not isinstance(node.slug, str):
        raise GroupLayoutError(f"node #{index} has a non-string slug: {node.slug!r}")
    if node.group is not None and not isinstance(node.group, str):
        raise GroupLayoutError(f"node {node.slug!r} has a non-string group: {node.group!r}")
    return node.group_key() or config.ungrouped_label


def group_runs(nodes: Sequence[Node], config: LayoutConfig | None = None) -> list[GroupRun]:
    """Split nodes into maximal contiguous runs sharing a group label."""
    config = config or DEFAULT_CONFIG
    runs: list[GroupRun] = []
    for index, node in enumerate(nodes):
        label = _run_label(index, node, config)
        if runs and runs[-1].label == label:
            runs[-1].indices.append(index)
        else:
            runs.append(GroupRun(label=label, indices=[index]))
    return runs


def _half(value: int) -> int | float:
    return value // 2 if value % 2 == 0 else value / 2


def grouped_positions(graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
    """Place run ``i`` at ``y = i * group_spacing``, centred on ``x = 0``."""
    config = config or DEFAULT_CONFIG
    placed: list[PlacedNode] = []

    for run_idx, run in enumerate(group_runs(graph.nodes, config)):
        y = run_idx * config.group_spacing
        total_width = (len(run.indices) - 1) * config.h_spacing
        start_x = -_half(total_width)
        for slot, index in enumerate(run.indices):
            placed.append(
                PlacedNode(
                    index=index,
                    slug=graph.nodes[index].slug,
                    layer=run_idx,
                    x=start_x + slot * config.h_spacing,
                    y=y,
                )
            )

    return LayoutResult(nodes=placed, mode=LayoutMode.Grouped)


class GroupedLayout:
    """Group-run layout engine."""

    def layout(self, graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
        return grouped_positions(graph, config)
