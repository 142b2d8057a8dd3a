"""Layout engines and public API."""

from __future__ import annotations

from agent_layout.layout.engine import apply_positions, layout_graph, layout_with_mode, run_layout
from agent_layout.layout.grouped import GroupedLayout, GroupRun, group_runs, grouped_positions
from agent_layout.layout.layered import (
    LayerAssignment,
    LayeredLayout,
    assign_grid,
    kahn_layers,
    layered_positions,
    renormalize_rows,
    resolve_collisions,
)
from agent_layout.layout.types import LayoutResult, PlacedNode

__all__ = [
    "GroupRun",
    "GroupedLayout",
    "LayerAssignment",
    "LayeredLayout",
    "LayoutResult",
    "PlacedNode",
    "apply_positions",
    "assign_grid",
    "group_runs",
    "grouped_positions",
    "kahn_layers",
    "layered_positions",
    "layout_graph",
    "layout_with_mode",
    "renormalize_rows",
    "resolve_collisions",
    "run_layout",
]
