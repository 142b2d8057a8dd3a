"""Agent graph data structures.

These types represent a parsed agent configuration: the agent metadata, its
nodes (model and tool steps) and each node's outgoing ``next_nodes`` edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from agent_layout.types import NodeType


@dataclass(frozen=True)
class Position:
    x: int | float
    y: int | float


@dataclass(frozen=True)
class NextNode:
    """An outgoing edge. Port names are opaque to the layout."""

    slug: str
    input_name: str = ""
    output_name: str = ""


@dataclass
class ModelSpec:
    provider: str
    problem_type: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class Node:
    name: str
    slug: str
    description: str = ""
    type: NodeType = NodeType.Tool
    group: str | None = None
    position: Position | None = None
    next_nodes: list[NextNode] = field(default_factory=list)
    model: ModelSpec | None = None
    tool_type: str | None = None

    def group_key(self) -> str | None:
        """Return the stripped group tag, or None when empty or missing."""
        if self.group is None:
            return None
        key = self.group.strip()
        return key or None

    @classmethod
    def bare(cls, slug: str, *targets: str, group: str | None = None) -> Node:
        """Create a minimal tool node named after its slug."""
        return cls(
            name=slug,
            slug=slug,
            group=group,
            next_nodes=[NextNode(slug=t, input_name="input", output_name="output") for t in targets],
        )


@dataclass
class AgentInfo:
    name: str
    slug: str
    description: str = ""


@dataclass
class Graph:
    agent: AgentInfo
    nodes: list[Node] = field(default_factory=list)

    def has_groups(self) -> bool:
        return any(isinstance(node.group, str) and node.group.strip() != "" for node in self.nodes)

    def edge_list(self) -> list[tuple[str, str]]:
        return [(node.slug, nxt.slug) for node in self.nodes for nxt in node.next_nodes]
