"""agent-layout: deterministic auto-layout for agent execution graphs."""

from agent_layout.config import LayoutConfig
from agent_layout.errors import GraphShapeError, GroupLayoutError, LayoutError
from agent_layout.ir.model import AgentInfo, Graph, NextNode, Node, Position
from agent_layout.layout import layout_graph, layout_with_mode
from agent_layout.parsers import parse
from agent_layout.renderers import JsonRenderer

__all__ = [
    "AgentInfo",
    "Graph",
    "GraphShapeError",
    "GroupLayoutError",
    "LayoutConfig",
    "LayoutError",
    "NextNode",
    "Node",
    "Position",
    "layout_document",
    "layout_graph",
    "layout_with_mode",
    "parse",
]


def layout_document(
    src: str,
    use_grouping: bool = False,
    strip_auxiliary: bool = False,
    indent: int | None = 2,
    config: LayoutConfig | None = None,
) -> str:
    """Parse an agent configuration document, lay it out, and render it back.

    Args:
        src: Agent configuration JSON text.
        use_grouping: Position by group runs when nodes carry groups.
        strip_auxiliary: Drop provider sub-nodes before validation.
        indent: JSON indentation; None for compact output.
        config: Spacing overrides; None keeps the defaults.

    Returns:
        The positioned graph as JSON text.

    Raises:
        GraphShapeError: If the input is not a valid agent configuration.
    """
    graph = parse(src, strip_auxiliary=strip_auxiliary)
    laid_out = layout_graph(graph, use_grouping=use_grouping, config=config)
    return JsonRenderer(indent=indent).render(laid_out)
