"""Core edge routing: the main route_edges() dispatcher.

Forward edges run along the flow direction (directly, or as an elbow in
orthogonal mode). Backward edges leave through the side facing away from
the flow and return through a channel beyond both nodes, so they never
share space with the forward edges. Members of a parallel-edge group are
pushed apart laterally by a per-member offset.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowlayout.layout.config import LayoutConfig, RoutingStyle
from flowlayout.layout.constants import COORD_TOLERANCE, SELF_LOOP_SIZE
from flowlayout.layout.routing.classify import ClassifiedEdge
from flowlayout.layout.routing.common import (
    Anchor,
    EdgeRoute,
    Point,
    anchor_point,
    dedupe_points,
    unit_normal,
)
from flowlayout.layout.routing.offsets import lateral_offset, spacing_unit
from flowlayout.parser.model import Graph

# ---------------------------------------------------------------------------
# Routing context: pre-computed state shared by all handlers
# ---------------------------------------------------------------------------


@dataclass
class _RoutingCtx:
    """Pre-computed state shared by edge routing handlers."""

    positions: dict[str, Point]
    boxes: dict[str, tuple[float, float]]
    config: LayoutConfig
    curved: bool
    tolerance: float = COORD_TOLERANCE


@dataclass
class _Slot:
    """Per-edge routing inputs: endpoints plus the group offset."""

    item: ClassifiedEdge
    src: Point
    tgt: Point
    src_box: tuple[float, float]
    tgt_box: tuple[float, float]
    offset: float
    unit: float


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def route_edges(
    graph: Graph,
    positions: dict[str, Point],
    classified: list[ClassifiedEdge],
    config: LayoutConfig | None = None,
) -> list[EdgeRoute]:
    """Route every classified edge whose endpoints have a position.

    Edges with an endpoint missing from ``positions`` are left out of
    the result. Routes come back in input edge order.
    """
    ctx = _build_routing_context(graph, positions, config or LayoutConfig())
    routes: list[EdgeRoute] = []

    for item in classified:
        edge = item.edge
        src = ctx.positions.get(edge.source)
        tgt = ctx.positions.get(edge.target)
        if src is None or tgt is None:
            continue

        slot = _Slot(
            item=item,
            src=src,
            tgt=tgt,
            src_box=ctx.boxes.get(edge.source, ctx.config.node_box(None)),
            tgt_box=ctx.boxes.get(edge.target, ctx.config.node_box(None)),
            offset=lateral_offset(item.group_index, item.group_size),
            unit=spacing_unit(item.group_size),
        )

        # Try each routing handler in priority order.
        # The first handler that returns an EdgeRoute wins.
        result = _route_self_loop(slot, ctx)
        if result is None:
            result = _route_backward(slot, ctx)
        if result is None:
            result = _route_orthogonal(slot, ctx)
        if result is None:
            result = _route_direct(slot, ctx)

        routes.append(result)

    return routes


# ---------------------------------------------------------------------------
# Context builder
# ---------------------------------------------------------------------------


def _build_routing_context(
    graph: Graph,
    positions: dict[str, Point],
    config: LayoutConfig,
) -> _RoutingCtx:
    """Pre-compute box sizes for every positioned node."""
    boxes = {node.id: config.node_box(node.kind) for node in graph.nodes}
    return _RoutingCtx(
        positions=positions,
        boxes=boxes,
        config=config,
        curved=config.routing_style is RoutingStyle.CURVED,
    )


def _sign(value: float, tolerance: float = 0.0) -> int:
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def _make_route(
    slot: _Slot,
    ctx: _RoutingCtx,
    points: list[Point],
    source_anchor: Anchor,
    target_anchor: Anchor,
) -> EdgeRoute:
    edge = slot.item.edge
    return EdgeRoute(
        edge_id=edge.id,
        source=edge.source,
        target=edge.target,
        points=dedupe_points(points, ctx.tolerance),
        is_backward=slot.item.is_backward,
        group_index=slot.item.group_index,
        group_size=slot.item.group_size,
        curved=ctx.curved,
        source_anchor=source_anchor,
        target_anchor=target_anchor,
    )


# ---------------------------------------------------------------------------
# Handler 1: self-loops
# ---------------------------------------------------------------------------


def _route_self_loop(slot: _Slot, ctx: _RoutingCtx) -> EdgeRoute | None:
    """Loop out of the right side and back into the bottom of the node.

    Later group members get wider loops so they nest.
    """
    if not slot.item.edge.is_self_loop:
        return None

    cx, cy = slot.src
    w, h = slot.src_box
    size = SELF_LOOP_SIZE + slot.item.group_index * slot.unit
    right = cx + w / 2
    bottom = cy + h / 2
    points = [
        (right, cy),
        (right + size, cy),
        (right + size, bottom + size),
        (cx, bottom + size),
        (cx, bottom),
    ]
    return _make_route(slot, ctx, points, Anchor.RIGHT, Anchor.BOTTOM)


# ---------------------------------------------------------------------------
# Handler 2: backward edges (return channel)
# ---------------------------------------------------------------------------


def _route_backward(slot: _Slot, ctx: _RoutingCtx) -> EdgeRoute | None:
    """Route a backward edge through a channel beyond both nodes.

    The channel runs below the nodes for horizontal flow and to their
    right for vertical flow. Nodes on the same level (no separation
    along the flow axis) use the channel on the flow side instead, so
    the edge does not cut through the nodes stacked between them.
    """
    if not slot.item.is_backward:
        return None

    sx, sy = slot.src
    tx, ty = slot.tgt
    horizontal = ctx.config.is_horizontal
    flow_gap = (sx - tx) if horizontal else (sy - ty)
    same_level = abs(flow_gap) <= ctx.tolerance

    if horizontal:
        side = Anchor.RIGHT if same_level else Anchor.BOTTOM
    else:
        side = Anchor.BOTTOM if same_level else Anchor.RIGHT

    clearance = ctx.config.backward_clearance + slot.item.group_index * slot.unit

    if side is Anchor.BOTTOM:
        direction = _sign(sx - tx, ctx.tolerance) or 1
        start = anchor_point(slot.src, slot.src_box, side, slot.offset * direction)
        end = anchor_point(slot.tgt, slot.tgt_box, side, -slot.offset * direction)
        channel = max(sy + slot.src_box[1] / 2, ty + slot.tgt_box[1] / 2) + clearance
        points = [start, (start[0], channel), (end[0], channel), end]
    else:
        direction = _sign(sy - ty, ctx.tolerance) or 1
        start = anchor_point(slot.src, slot.src_box, side, slot.offset * direction)
        end = anchor_point(slot.tgt, slot.tgt_box, side, -slot.offset * direction)
        channel = max(sx + slot.src_box[0] / 2, tx + slot.tgt_box[0] / 2) + clearance
        points = [start, (channel, start[1]), (channel, end[1]), end]

    return _make_route(slot, ctx, points, side, side)


# ---------------------------------------------------------------------------
# Handler 3: orthogonal forward edges
# ---------------------------------------------------------------------------


def _route_orthogonal(slot: _Slot, ctx: _RoutingCtx) -> EdgeRoute | None:
    """Elbow route between facing sides of the two boxes.

    Horizontal flow exits right and enters left; vertical flow exits
    bottom and enters top. When the boxes overlap along the flow axis
    (e.g. two roots on level 0) the cross axis is used instead. Group
    members slide along their sides and shift their elbow so the lanes
    nest.
    """
    if ctx.config.routing_style is not RoutingStyle.ORTHOGONAL:
        return None

    sx, sy = slot.src
    tx, ty = slot.tgt
    horizontal = ctx.config.is_horizontal
    if horizontal:
        use_x = (tx - sx) > (slot.src_box[0] + slot.tgt_box[0]) / 2
    else:
        use_x = not ((ty - sy) > (slot.src_box[1] + slot.tgt_box[1]) / 2)
    o = slot.offset

    if use_x:
        forward = tx >= sx
        src_side = Anchor.RIGHT if forward else Anchor.LEFT
        tgt_side = Anchor.LEFT if forward else Anchor.RIGHT
        start = anchor_point(slot.src, slot.src_box, src_side, o)
        end = anchor_point(slot.tgt, slot.tgt_box, tgt_side, o)
        if abs(start[1] - end[1]) <= ctx.tolerance:
            points = [start, end]
        else:
            mid = (start[0] + end[0]) / 2 - o * _sign(end[1] - start[1])
            points = [start, (mid, start[1]), (mid, end[1]), end]
    else:
        down = ty >= sy
        src_side = Anchor.BOTTOM if down else Anchor.TOP
        tgt_side = Anchor.TOP if down else Anchor.BOTTOM
        start = anchor_point(slot.src, slot.src_box, src_side, o)
        end = anchor_point(slot.tgt, slot.tgt_box, tgt_side, o)
        if abs(start[0] - end[0]) <= ctx.tolerance:
            points = [start, end]
        else:
            mid = (start[1] + end[1]) / 2 - o * _sign(end[0] - start[0])
            points = [start, (start[0], mid), (end[0], mid), end]

    return _make_route(slot, ctx, points, src_side, tgt_side)


# ---------------------------------------------------------------------------
# Handler 4: straight / curved forward edges
# ---------------------------------------------------------------------------


def _route_direct(slot: _Slot, ctx: _RoutingCtx) -> EdgeRoute:
    """Center-to-center route with a displaced control point for groups.

    A lone edge is a single segment. Group members get one control point
    at the segment midpoint, pushed along the segment normal by their
    lateral offset; curved rendering turns it into a smooth arc.
    """
    start = slot.src
    end = slot.tgt
    if slot.offset == 0:
        points = [start, end]
    else:
        nx_, ny_ = unit_normal(start, end)
        mid = (
            (start[0] + end[0]) / 2 + nx_ * slot.offset,
            (start[1] + end[1]) / 2 + ny_ * slot.offset,
        )
        points = [start, mid, end]
    return _make_route(slot, ctx, points, Anchor.CENTER, Anchor.CENTER)
