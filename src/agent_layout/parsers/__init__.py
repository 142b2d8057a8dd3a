"""Parser registry — dispatch source text to the right configuration parser."""

from __future__ import annotations

from agent_layout.ir.model import Graph
from agent_layout.parsers.agent_config import AgentConfigParser, drop_auxiliary_nodes, load_document
from agent_layout.parsers.base import Parser

_PARSERS: dict[str, type[AgentConfigParser]] = {
    "agent-config": AgentConfigParser,
}

__all__ = ["AgentConfigParser", "Parser", "drop_auxiliary_nodes", "load_document", "parse"]


def parse(src: str, fmt: str = "agent-config", strip_auxiliary: bool = False) -> Graph:
    """Parse configuration text of the given format into a Graph."""
    parser_cls = _PARSERS.get(fmt)
    if parser_cls is None:
        raise ValueError(f"Unsupported configuration format: {fmt}")
    parser: Parser = parser_cls(strip_auxiliary=strip_auxiliary)
    return parser.parse(src)
