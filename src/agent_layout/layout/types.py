"""Layout types shared across positioners and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field

from agent_layout.types import LayoutMode


@dataclass
class PlacedNode:
    """A positioned node; ``index`` is its offset in ``Graph.nodes``."""

    index: int
    slug: str
    layer: int
    x: int | float
    y: int | float


@dataclass
class LayoutResult:
    """Positioner output, before it is applied to a graph."""

    nodes: list[PlacedNode]
    mode: LayoutMode
    unresolved: list[str] = field(default_factory=list)
    dangling: list[tuple[str, str]] = field(default_factory=list)

    def rows(self) -> dict[int | float, list[PlacedNode]]:
        """Group placed nodes by ``y``, preserving node order within a row."""
        rows: dict[int | float, list[PlacedNode]] = {}
        for placed in self.nodes:
            rows.setdefault(placed.y, []).append(placed)
        return rows
