"""Coordinate mapping: (level, index within level) -> node center."""

from __future__ import annotations

__all__ = ["compute_positions", "group_by_level"]

from collections import defaultdict

from flowlayout.layout.config import LayoutConfig
from flowlayout.parser.model import Graph


def group_by_level(graph: Graph, levels: dict[str, int]) -> dict[int, list[str]]:
    """Bucket node ids by level, keeping input order inside each bucket.

    Nodes without a level are left out.
    """
    buckets: dict[int, list[str]] = defaultdict(list)
    for node in graph.nodes:
        level = levels.get(node.id)
        if level is not None and node.id not in buckets[level]:
            buckets[level].append(node.id)
    return dict(sorted(buckets.items()))


def compute_positions(
    graph: Graph,
    levels: dict[str, int],
    config: LayoutConfig | None = None,
) -> dict[str, tuple[float, float]]:
    """Place every node of ``graph`` on the canvas.

    Levels advance along the primary axis (x when horizontal, y when
    vertical) at ``padding + level * level_spacing``; the spacing fills
    the canvas but never exceeds ``config.spacing``. Nodes sharing a
    level are spread along the secondary axis and centered on the
    canvas midline.

    Returns a dict mapping node_id -> (x, y).
    """
    config = config or LayoutConfig()
    buckets = group_by_level(graph, levels)

    padding = config.padding
    max_level = max(buckets, default=0)
    available_primary = max(0.0, config.primary_extent() - 2 * padding)
    level_spacing = max(0.0, min(available_primary / max(1, max_level), config.spacing))

    available_secondary = max(0.0, config.secondary_extent() - 2 * padding)
    midline = config.secondary_extent() / 2

    positions: dict[str, tuple[float, float]] = {}
    for level, node_ids in buckets.items():
        primary = padding + level * level_spacing
        count = len(node_ids)
        if count == 1:
            step = 0.0
        else:
            step = max(config.min_node_spacing, available_secondary / max(1, count - 1))
        start = midline - (count - 1) * step / 2

        for index, node_id in enumerate(node_ids):
            secondary = start + index * step
            if config.is_horizontal:
                positions[node_id] = (primary, secondary)
            else:
                positions[node_id] = (secondary, primary)

    # Nodes without a level still need somewhere to be drawn.
    for node in graph.nodes:
        positions.setdefault(node.id, (padding, padding))

    return positions
