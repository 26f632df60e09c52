"""Hierarchical layout and edge routing for workflow graphs."""

from flowlayout.layout.config import LayoutConfig, Orientation, RoutingStyle
from flowlayout.layout.engine import LayoutResult, compute_layout

__all__ = [
    "LayoutConfig",
    "LayoutResult",
    "Orientation",
    "RoutingStyle",
    "compute_layout",
]
