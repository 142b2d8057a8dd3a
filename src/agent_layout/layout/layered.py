"""Layered positioner: Kahn layering on a fixed grid.

Phases:
  1. Layer assignment (Kahn waves, unresolved nodes in a final layer)
  2. Grid placement
  3. Collision resolution
  4. Row renormalization
"""

from __future__ import annotations

import logging
from collections import deque

from agent_layout.config import DEFAULT_CONFIG, LayoutConfig
from agent_layout.ir.graph import Adjacency, GraphIR
from agent_layout.ir.model import Graph
from agent_layout.layout.types import LayoutResult, PlacedNode
from agent_layout.types import LayoutMode

logger = logging.getLogger(__name__)


# ─── Layer Assignment ────────────────────────────────────────────────────────


class LayerAssignment:
    def __init__(self, layers: list[list[str]], unresolved: list[str]) -> None:
        self.layers = layers
        self.unresolved = unresolved

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def layer_of(self) -> dict[str, int]:
        return {slug: idx for idx, layer in enumerate(self.layers) for slug in layer}

    @classmethod
    def assign(cls, gir: GraphIR) -> LayerAssignment:
        return kahn_layers(gir.adjacency)


def kahn_layers(adj: Adjacency) -> LayerAssignment:
    """Assign layers in Kahn waves.

    Each wave dequeues everything queued so far; neighbours whose in-degree
    drops to zero are queued for the next wave in the order they got there.
    Slugs that never reach in-degree zero (cycle members and everything
    downstream of them) form one extra final layer in original order.
    """
    in_degree = dict(adj.in_degree)
    queue: deque[str] = deque(slug for slug in adj.slugs() if in_degree[slug] == 0)
    visited: set[str] = set()
    layers: list[list[str]] = []

    while queue:
        next_wave: list[str] = []
        current: list[str] = []
        while queue:
            slug = queue.popleft()
            if slug in visited:
                continue
            visited.add(slug)
            current.append(slug)
            for neighbor in adj.outgoing[slug]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    next_wave.append(neighbor)
        layers.append(current)
        queue.extend(next_wave)

    unresolved = [slug for slug in adj.slugs() if slug not in visited]
    if unresolved:
        logger.warning("%d node(s) sit on or behind a cycle; placed in final layer: %s", len(unresolved), unresolved)
        layers.append(unresolved)

    logger.debug("kahn layering produced %d layer(s)", len(layers))
    return LayerAssignment(layers=layers, unresolved=unresolved)


# ─── Grid Placement ──────────────────────────────────────────────────────────


def assign_grid(graph: Graph, la: LayerAssignment, config: LayoutConfig) -> list[PlacedNode]:
    """Place every node at ``(slot * h_spacing, layer * v_spacing)``.

    Nodes sharing a slug share the cell of that slug; collision resolution
    separates them afterwards.
    """
    cells: dict[str, tuple[int, int]] = {}
    for layer_idx, layer in enumerate(la.layers):
        for slot, slug in enumerate(layer):
            cells[slug] = (layer_idx, slot)

    placed: list[PlacedNode] = []
    for index, node in enumerate(graph.nodes):
        layer_idx, slot = cells[node.slug]
        placed.append(
            PlacedNode(
                index=index,
                slug=node.slug,
                layer=layer_idx,
                x=slot * config.h_spacing,
                y=layer_idx * config.v_spacing,
            )
        )
    return placed


# ─── Collision Resolution ────────────────────────────────────────────────────


def _rows(placed: list[PlacedNode]) -> dict[int | float, list[PlacedNode]]:
    rows: dict[int | float, list[PlacedNode]] = {}
    for p in placed:
        rows.setdefault(p.y, []).append(p)
    return rows


def resolve_collisions(placed: list[PlacedNode], config: LayoutConfig) -> None:
    """Move nodes off shared ``(x, y)`` cells, in place.

    Within a cell the lexicographically smallest slug stays; every other node
    takes the next free slot to the right in its row.
    """
    step = config.h_spacing
    for row in _rows(placed).values():
        by_x: dict[int | float, list[PlacedNode]] = {}
        for p in row:
            by_x.setdefault(p.x, []).append(p)

        occupied = set(by_x)
        for x, stacked in by_x.items():
            if len(stacked) <= 1:
                continue
            _, *rest = sorted(stacked, key=lambda p: p.slug)
            for p in rest:
                candidate = x + step
                while candidate in occupied:
                    candidate += step
                p.x = candidate
                occupied.add(candidate)


def renormalize_rows(placed: list[PlacedNode], config: LayoutConfig) -> None:
    """Rewrite each row's ``x`` values as ``0, h_spacing, 2 * h_spacing, ...``."""
    for row in _rows(placed).values():
        ordered = sorted(row, key=lambda p: (p.x, p.slug))
        for idx, p in enumerate(ordered):
            p.x = idx * config.h_spacing


# ─── LayeredLayout Engine ────────────────────────────────────────────────────


def layered_positions(graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
    """Run layering, grid placement, collision resolution and renormalization."""
    config = config or DEFAULT_CONFIG
    gir = GraphIR.from_graph(graph)
    la = LayerAssignment.assign(gir)
    placed = assign_grid(graph, la, config)
    resolve_collisions(placed, config)
    renormalize_rows(placed, config)
    return LayoutResult(
        nodes=placed,
        mode=LayoutMode.Layered,
        unresolved=list(la.unresolved),
        dangling=list(gir.adjacency.dangling),
    )


class LayeredLayout:
    """Topological layered layout engine."""

    def layout(self, graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
        return layered_positions(graph, config)
