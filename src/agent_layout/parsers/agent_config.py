"""Agent configuration parser — JSON documents to the agent graph model.

Documents look like::

    {
      "agent": {"name": ..., "slug": ..., "description": ...},
      "nodes": [
        {
          "name": ..., "slug": ..., "description": ...,
          "type": "model" | "tool",
          "group": ...,                       # optional
          "position": {"x": ..., "y": ...},   # optional, overwritten by layout
          "next_nodes": [{"slug": ..., "input_name": ..., "output_name": ...}],
          "model": {"provider": ..., "problem_type": ..., "parameters": {...}},
          "tool_type": ...
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from agent_layout.errors import GraphShapeError
from agent_layout.ir.model import AgentInfo, Graph, ModelSpec, NextNode, Node, Position
from agent_layout.types import NodeType

logger = logging.getLogger(__name__)

# Provider sub-nodes of workflow exports; they are attachments, not steps.
AUXILIARY_NODE_TYPES: tuple[str, ...] = ("lmChatOpenAi", "vectorStorePinecone", "embeddingsOpenAi")


# ─── Document Schema ─────────────────────────────────────────────────────────


class NextNodeDoc(BaseModel):
    slug: str
    input_name: str
    output_name: str


class PositionDoc(BaseModel):
    x: int | float
    y: int | float


class ModelDoc(BaseModel):
    provider: str
    problem_type: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class NodeDoc(BaseModel):
    name: str
    slug: str
    description: str = ""
    type: Literal["model", "tool"]
    group: str | None = None
    position: PositionDoc | None = None
    next_nodes: list[NextNodeDoc] = Field(default_factory=list)
    model: ModelDoc | None = None
    tool_type: str | None = None


class AgentDoc(BaseModel):
    name: str
    slug: str
    description: str = ""


class AgentConfigDoc(BaseModel):
    agent: AgentDoc
    nodes: list[NodeDoc]


# ─── Conversion ──────────────────────────────────────────────────────────────


def drop_auxiliary_nodes(raw: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a raw document without provider sub-nodes."""
    nodes = raw.get("nodes")
    if not isinstance(nodes, list):
        return dict(raw)
    kept = [
        node
        for node in nodes
        if not (isinstance(node, dict) and any(t in str(node.get("type", "")) for t in AUXILIARY_NODE_TYPES))
    ]
    if len(kept) != len(nodes):
        logger.info("dropped %d auxiliary node(s)", len(nodes) - len(kept))
    return {**raw, "nodes": kept}


def _to_node(doc: NodeDoc) -> Node:
    model = None
    if doc.model is not None:
        model = ModelSpec(
            provider=doc.model.provider,
            problem_type=doc.model.problem_type,
            parameters=dict(doc.model.parameters),
        )
    return Node(
        name=doc.name,
        slug=doc.slug,
        description=doc.description,
        type=NodeType(doc.type),
        group=doc.group,
        position=Position(x=doc.position.x, y=doc.position.y) if doc.position is not None else None,
        next_nodes=[NextNode(slug=n.slug, input_name=n.input_name, output_name=n.output_name) for n in doc.next_nodes],
        model=model,
        tool_type=doc.tool_type,
    )


def load_document(raw: Any, strip_auxiliary: bool = False) -> Graph:
    """Validate a decoded JSON document and build a Graph.

    Raises:
        GraphShapeError: If the document does not match the schema.
    """
    if not isinstance(raw, dict):
        raise GraphShapeError(f"agent configuration must be a JSON object, got {type(raw).__name__}")
    if strip_auxiliary:
        raw = drop_auxiliary_nodes(raw)
    try:
        doc = AgentConfigDoc.model_validate(raw)
    except ValidationError as e:
        raise GraphShapeError(f"invalid agent configuration:\n{e}") from e

    return Graph(
        agent=AgentInfo(name=doc.agent.name, slug=doc.agent.slug, description=doc.agent.description),
        nodes=[_to_node(n) for n in doc.nodes],
    )


class AgentConfigParser:
    """Parses agent configuration JSON text."""

    def __init__(self, strip_auxiliary: bool = False) -> None:
        self.strip_auxiliary = strip_auxiliary

    def parse(self, src: str) -> Graph:
        try:
            raw = json.loads(src)
        except json.JSONDecodeError as e:
            raise GraphShapeError(f"invalid JSON: {e}") from e
        return load_document(raw, strip_auxiliary=self.strip_auxiliary)
