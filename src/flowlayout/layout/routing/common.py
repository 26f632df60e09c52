"""Shared types and geometry helpers for edge routing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

Point = tuple[float, float]


class Anchor(Enum):
    """Where on a node's box an edge attaches."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class EdgeRoute:
    """A routed path for an edge, consisting of (x, y) waypoints.

    ``curved`` tells the renderer to smooth the path through the interior
    points instead of drawing a polyline.
    """

    edge_id: str
    source: str
    target: str
    points: list[Point]
    is_backward: bool = False
    group_index: int = 0
    group_size: int = 1
    curved: bool = False
    source_anchor: Anchor = Anchor.CENTER
    target_anchor: Anchor = Anchor.CENTER

    def midpoint(self) -> Point:
        """Point halfway along the path's waypoint sequence."""
        n = len(self.points)
        if n % 2:
            return self.points[n // 2]
        (x1, y1), (x2, y2) = self.points[n // 2 - 1], self.points[n // 2]
        return ((x1 + x2) / 2, (y1 + y2) / 2)


def anchor_point(
    center: Point,
    box: tuple[float, float],
    anchor: Anchor,
    slide: float = 0.0,
) -> Point:
    """Return the attachment point of ``anchor`` on a box around ``center``.

    ``slide`` moves the point along the side (y for LEFT/RIGHT, x for
    TOP/BOTTOM); it is ignored for CENTER.
    """
    cx, cy = center
    w, h = box
    if anchor is Anchor.LEFT:
        return (cx - w / 2, cy + slide)
    if anchor is Anchor.RIGHT:
        return (cx + w / 2, cy + slide)
    if anchor is Anchor.TOP:
        return (cx + slide, cy - h / 2)
    if anchor is Anchor.BOTTOM:
        return (cx + slide, cy + h / 2)
    return (cx, cy)


def unit_normal(start: Point, end: Point) -> Point:
    """Unit vector perpendicular to start -> end (left-hand side).

    Coincident points fall back to the downward normal.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 1.0)
    return (-dy / length, dx / length)


def dedupe_points(points: list[Point], tolerance: float) -> list[Point]:
    """Drop consecutive waypoints closer than ``tolerance``.

    The endpoints always survive, so the result has at least two points.
    """
    if len(points) <= 2:
        return list(points)
    out = [points[0]]
    for p in points[1:-1]:
        if abs(p[0] - out[-1][0]) > tolerance or abs(p[1] - out[-1][1]) > tolerance:
            out.append(p)
    last = points[-1]
    if len(out) > 1 and abs(last[0] - out[-1][0]) <= tolerance and abs(last[1] - out[-1][1]) <= tolerance:
        out.pop()
    out.append(last)
    return out
