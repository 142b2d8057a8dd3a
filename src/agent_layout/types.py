"""Shared type definitions for agent-layout.

Enums used across parsers, IR, layout, and renderers.
"""

from __future__ import annotations

from enum import Enum


class NodeType(Enum):
    Model = "model"  # an AI model step
    Tool = "tool"  # a tool invocation step


class LayoutMode(Enum):
    Layered = "layered"  # Kahn layering + grid
    Grouped = "grouped"  # contiguous group runs
