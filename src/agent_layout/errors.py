"""Exception hierarchy for agent-layout."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for every error raised by agent-layout."""


class GraphShapeError(LayoutError):
    """The input is not shaped like an agent graph (e.g. no ``nodes`` list)."""


class GroupLayoutError(LayoutError):
    """The grouped positioner could not handle the node data.

    Always caught by the dispatcher, which falls back to the layered layout.
    """
