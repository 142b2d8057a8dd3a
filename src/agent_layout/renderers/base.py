"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from agent_layout.ir.model import Graph


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, graph: Graph) -> str:
        """Render a laid-out graph to an output string."""
        ...
