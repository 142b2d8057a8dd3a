"""Output renderers for laid-out graphs."""

from agent_layout.renderers.base import Renderer
from agent_layout.renderers.document import JsonRenderer, graph_to_document

__all__ = ["JsonRenderer", "Renderer", "graph_to_document"]
