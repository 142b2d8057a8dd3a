"""JSON document renderer — the inverse of the agent configuration parser."""

from __future__ import annotations

import json
from typing import Any

from agent_layout.ir.model import Graph, Node


def _node_document(node: Node) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "name": node.name,
        "slug": node.slug,
        "description": node.description,
        "type": node.type.value,
    }
    if node.group is not None:
        doc["group"] = node.group
    if node.position is not None:
        doc["position"] = {"x": node.position.x, "y": node.position.y}
    doc["next_nodes"] = [
        {"slug": n.slug, "input_name": n.input_name, "output_name": n.output_name} for n in node.next_nodes
    ]
    if node.model is not None:
        doc["model"] = {
            "provider": node.model.provider,
            "problem_type": node.model.problem_type,
            "parameters": dict(node.model.parameters),
        }
    if node.tool_type is not None:
        doc["tool_type"] = node.tool_type
    return doc


def graph_to_document(graph: Graph) -> dict[str, Any]:
    """Convert a Graph to a JSON-ready dict; absent optional fields are omitted."""
    return {
        "agent": {
            "name": graph.agent.name,
            "slug": graph.agent.slug,
            "description": graph.agent.description,
        },
        "nodes": [_node_document(node) for node in graph.nodes],
    }


class JsonRenderer:
    """Renders a graph as an agent configuration JSON document."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def render(self, graph: Graph) -> str:
        return json.dumps(graph_to_document(graph), indent=self.indent) + "\n"
