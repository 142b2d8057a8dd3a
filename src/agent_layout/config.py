"""Centralized configuration for agent-layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing and naming used by the positioners."""

    h_spacing: int = 300
    v_spacing: int = 300
    group_spacing: int = 400
    ungrouped_label: str = "ungrouped"


DEFAULT_CONFIG = LayoutConfig()
