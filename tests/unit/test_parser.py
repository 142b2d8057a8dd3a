"""Tests for agent_layout.parsers — document validation, conversion, and auxiliary-node filtering."""

import json

import pytest

from agent_layout.errors import GraphShapeError
from agent_layout.ir.model import ModelSpec, NextNode, Position
from agent_layout.parsers import AgentConfigParser, drop_auxiliary_nodes, load_document, parse
from agent_layout.types import NodeType


def _doc(*nodes: dict) -> dict:
    return {"agent": {"name": "Agent", "slug": "agent", "description": "test agent"}, "nodes": list(nodes)}


def _node(slug: str, type: str = "tool", **extra) -> dict:
    node = {"name": slug.title(), "slug": slug, "description": f"{slug} step", "type": type, "next_nodes": []}
    node.update(extra)
    return node


def test_parse_minimal():
    graph = parse(json.dumps(_doc(_node("a"))))
    assert graph.agent.slug == "agent"
    assert graph.agent.description == "test agent"
    assert len(graph.nodes) == 1
    assert graph.nodes[0].slug == "a"
    assert graph.nodes[0].type == NodeType.Tool
    assert graph.nodes[0].position is None


def test_parse_edges_keep_ports():
    edge = {"slug": "b", "input_name": "query", "output_name": "plan"}
    graph = parse(json.dumps(_doc(_node("a", next_nodes=[edge]), _node("b"))))
    assert graph.nodes[0].next_nodes == [NextNode(slug="b", input_name="query", output_name="plan")]


def test_parse_optional_fields():
    model = {"provider": "openai", "problem_type": "chat", "parameters": {"type": "completion"}}
    graph = parse(
        json.dumps(
            _doc(
                _node("m", type="model", group="brain", model=model, position={"x": 10, "y": 20.5}),
                _node("t", tool_type="http"),
            )
        )
    )
    m, t = graph.nodes
    assert m.type == NodeType.Model
    assert m.group == "brain"
    assert m.model == ModelSpec(provider="openai", problem_type="chat", parameters={"type": "completion"})
    assert m.position == Position(x=10, y=20.5)
    assert t.tool_type == "http"
    assert t.group is None


def test_description_defaults_to_empty():
    node = _node("a")
    del node["description"]
    graph = load_document(_doc(node))
    assert graph.nodes[0].description == ""


def test_empty_node_list_is_valid():
    assert parse(json.dumps(_doc())).nodes == []


def test_missing_nodes_rejected():
    with pytest.raises(GraphShapeError, match="nodes"):
        load_document({"agent": {"name": "A", "slug": "a"}})


def test_bad_node_type_rejected():
    with pytest.raises(GraphShapeError):
        load_document(_doc(_node("a", type="human")))


def test_edge_without_ports_rejected():
    with pytest.raises(GraphShapeError):
        load_document(_doc(_node("a", next_nodes=[{"slug": "b"}])))


def test_non_object_rejected():
    with pytest.raises(GraphShapeError, match="JSON object"):
        load_document([1, 2, 3])


def test_invalid_json_rejected():
    with pytest.raises(GraphShapeError, match="invalid JSON"):
        parse("{not json")


def test_unknown_format_rejected():
    with pytest.raises(ValueError, match="Unsupported"):
        parse("{}", fmt="yaml")


class TestAuxiliaryNodes:
    def test_drop_provider_nodes(self):
        raw = _doc(
            _node("agent", type="@n8n/n8n-nodes-langchain.agent"),
            _node("llm", type="@n8n/n8n-nodes-langchain.lmChatOpenAi"),
            _node("store", type="@n8n/n8n-nodes-langchain.vectorStorePinecone"),
            _node("embed", type="@n8n/n8n-nodes-langchain.embeddingsOpenAi"),
        )
        kept = drop_auxiliary_nodes(raw)
        assert [n["slug"] for n in kept["nodes"]] == ["agent"]
        assert len(raw["nodes"]) == 4

    def test_drop_without_nodes(self):
        assert drop_auxiliary_nodes({"agent": {}}) == {"agent": {}}

    def test_strip_before_validation(self):
        raw = _doc(_node("a"), _node("llm", type="lmChatOpenAi"))
        graph = AgentConfigParser(strip_auxiliary=True).parse(json.dumps(raw))
        assert [n.slug for n in graph.nodes] == ["a"]

    def test_without_strip_auxiliary_types_fail_validation(self):
        raw = _doc(_node("a"), _node("llm", type="lmChatOpenAi"))
        with pytest.raises(GraphShapeError):
            parse(json.dumps(raw))
