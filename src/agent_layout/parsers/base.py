"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from agent_layout.ir.model import Graph


class Parser(Protocol):
    """Protocol that all configuration parsers must implement."""

    def parse(self, src: str) -> Graph:
        """Parse source text into an agent Graph."""
        ...
