"""Intermediate representation: agent graph model and GraphIR."""

from agent_layout.ir.graph import Adjacency, GraphIR, build_adjacency
from agent_layout.ir.model import AgentInfo, Graph, ModelSpec, NextNode, Node, Position

__all__ = [
    "Adjacency",
    "AgentInfo",
    "Graph",
    "GraphIR",
    "ModelSpec",
    "NextNode",
    "Node",
    "Position",
    "build_adjacency",
]
