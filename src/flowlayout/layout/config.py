"""Layout configuration: canvas extents, node boxes, spacing and style."""

from __future__ import annotations

__all__ = ["LayoutConfig", "Orientation", "RoutingStyle"]

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from flowlayout.layout.constants import (
    BACKWARD_CLEARANCE,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    MAX_LEVEL_SPACING,
    MIN_NODE_SPACING,
    NODE_HEIGHT,
    NODE_WIDTH,
    PADDING,
    STATE_SIZE,
)
from flowlayout.parser.model import NodeKind


class Orientation(Enum):
    """Direction in which levels advance."""

    HORIZONTAL = "horizontal"  # levels left to right
    VERTICAL = "vertical"  # levels top to bottom


class RoutingStyle(Enum):
    """Shape of routed edge paths."""

    STRAIGHT = "straight"
    ORTHOGONAL = "orthogonal"
    CURVED = "curved"


_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters for a layout run. Every field has a usable default."""

    canvas_width: float = CANVAS_WIDTH
    canvas_height: float = CANVAS_HEIGHT
    node_width: float = NODE_WIDTH
    node_height: float = NODE_HEIGHT
    state_size: float = STATE_SIZE
    padding: float = PADDING
    spacing: float = MAX_LEVEL_SPACING
    min_node_spacing: float = MIN_NODE_SPACING
    orientation: Orientation = Orientation.HORIZONTAL
    routing_style: RoutingStyle = RoutingStyle.CURVED
    backward_clearance: float = BACKWARD_CLEARANCE

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def node_box(self, kind: NodeKind | None) -> tuple[float, float]:
        """Return (width, height) of a node's bounding box."""
        if kind is NodeKind.STATE:
            return (self.state_size, self.state_size)
        return (self.node_width, self.node_height)

    def primary_extent(self) -> float:
        """Canvas extent along the level axis."""
        return self.canvas_width if self.is_horizontal else self.canvas_height

    def secondary_extent(self) -> float:
        """Canvas extent across the level axis."""
        return self.canvas_height if self.is_horizontal else self.canvas_width

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> LayoutConfig:
        """Build a config from a loose mapping.

        Keys may be snake_case or camelCase (``canvasWidth``). The legacy
        ``isHorizontal`` flag maps to ``orientation``. Unknown keys are
        ignored and absent or null values keep their defaults.
        """
        config = cls()
        if not mapping:
            return config

        known = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}
        for key, value in mapping.items():
            if value is None:
                continue
            name = _CAMEL.sub("_", key).lower()
            if name == "is_horizontal":
                updates["orientation"] = (
                    Orientation.HORIZONTAL if value else Orientation.VERTICAL
                )
            elif name == "orientation":
                updates[name] = Orientation(value)
            elif name == "routing_style":
                updates[name] = RoutingStyle(value)
            elif name in known:
                updates[name] = float(value)
        return replace(config, **updates)
