"""SVG preview generation for laid-out workflows using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from flowlayout.layout.engine import LayoutResult
from flowlayout.layout.focus import FocusSet
from flowlayout.layout.routing import EdgeRoute
from flowlayout.parser.model import Graph, NodeKind
from flowlayout.render.style import Theme

Point = tuple[float, float]


def smooth_path_commands(points: list[Point]) -> list[tuple[str, tuple[float, ...]]]:
    """Path commands for a smooth curve through a control-point sequence.

    Each interior point becomes the control point of a quadratic segment
    ending halfway to the next point; the path then finishes with a
    straight run into the last point.
    """
    if not points:
        return []
    commands: list[tuple[str, tuple[float, ...]]] = [("M", tuple(points[0]))]
    if len(points) == 1:
        return commands
    for i in range(1, len(points) - 1):
        cx, cy = points[i]
        nx_, ny_ = points[i + 1]
        commands.append(("Q", (cx, cy, (cx + nx_) / 2, (cy + ny_) / 2)))
    commands.append(("L", tuple(points[-1])))
    return commands


def render_svg(
    graph: Graph,
    layout: LayoutResult,
    theme: Theme,
    title: str = "",
    width: int | None = None,
    height: int | None = None,
    focus: FocusSet | None = None,
) -> str:
    """Render a laid-out workflow graph to an SVG string."""
    config = layout.config
    if not layout.positions:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    # Grow the canvas if routes or boxes run past the configured extent
    max_x = config.canvas_width
    max_y = config.canvas_height
    for node in graph.nodes:
        pos = layout.positions.get(node.id)
        if pos is None:
            continue
        w, h = config.node_box(node.kind)
        max_x = max(max_x, pos[0] + w / 2 + config.padding / 2)
        max_y = max(max_y, pos[1] + h / 2 + config.padding / 2)
    for route in layout.routes:
        for x, y in route.points:
            max_x = max(max_x, x + config.padding / 2)
            max_y = max(max_y, y + config.padding / 2)

    svg_width = width or int(max_x)
    svg_height = height or int(max_y)

    d = draw.Drawing(svg_width, svg_height)

    # Background
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    # Title
    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            config.padding / 2, 30,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Draw edges behind nodes
    _render_edges(d, graph, layout.routes, theme, focus)
    _render_nodes(d, graph, layout, theme, focus)

    return d.as_svg()


def _arrow(color: str, scale: float) -> draw.Marker:
    arrow = draw.Marker(-0.1, -0.51, 0.9, 0.5, scale=scale, orient="auto")
    arrow.append(draw.Lines(-0.1, 0.5, -0.1, -0.5, 0.9, 0, fill=color, close=True))
    return arrow


def _opacity(element_id: str, dimmed: set[str], theme: Theme) -> float:
    if element_id not in dimmed:
        return 1.0
    return theme.dimmed_opacity


def _render_edges(
    d: draw.Drawing,
    graph: Graph,
    routes: list[EdgeRoute],
    theme: Theme,
    focus: FocusSet | None,
) -> None:
    """Render routed edges: smooth curves, or polylines with rounded corners.

    Backward edges are dashed in their own color.
    """
    forward_arrow = _arrow(theme.edge_color, theme.arrow_scale)
    backward_arrow = _arrow(theme.backward_edge_color, theme.arrow_scale)
    labels = {edge.id: edge.label for edge in graph.edges}
    dimmed = focus.dimmed_edges if focus else set()

    for route in routes:
        color = theme.backward_edge_color if route.is_backward else theme.edge_color
        opacity = _opacity(route.edge_id, dimmed, theme)
        stroke_args = dict(
            stroke=color,
            stroke_width=theme.edge_width,
            stroke_opacity=opacity,
            fill="none",
            stroke_linecap="round",
            stroke_linejoin="round",
            marker_end=backward_arrow if route.is_backward else forward_arrow,
        )
        if route.is_backward:
            stroke_args["stroke_dasharray"] = theme.backward_dasharray

        pts = route.points
        path = draw.Path(**stroke_args)
        if len(pts) == 2:
            path.M(*pts[0]).L(*pts[1])
        elif route.curved:
            for cmd, args in smooth_path_commands(pts):
                getattr(path, cmd)(*args)
        else:
            _rounded_polyline(path, pts, theme.curve_radius)
        d.append(path)

        label = labels.get(route.edge_id)
        if label:
            mx, my = route.midpoint()
            d.append(draw.Text(
                label,
                theme.edge_label_font_size,
                mx, my - 4,
                fill=theme.edge_label_color or theme.label_color,
                fill_opacity=opacity,
                font_family=theme.label_font_family,
                text_anchor="middle",
            ))


def _rounded_polyline(path: draw.Path, pts: list[Point], curve_radius: float) -> None:
    """Polyline with quadratic fillets at each interior corner."""
    path.M(*pts[0])
    for i in range(1, len(pts) - 1):
        prev = pts[i - 1]
        curr = pts[i]
        nxt = pts[i + 1]

        dx1 = curr[0] - prev[0]
        dy1 = curr[1] - prev[1]
        len1 = (dx1**2 + dy1**2) ** 0.5

        dx2 = nxt[0] - curr[0]
        dy2 = nxt[1] - curr[1]
        len2 = (dx2**2 + dy2**2) ** 0.5

        r = min(curve_radius, len1 / 2, len2 / 2)

        if len1 > 0 and len2 > 0:
            path.L(curr[0] - (dx1 / len1) * r, curr[1] - (dy1 / len1) * r)
            path.Q(curr[0], curr[1], curr[0] + (dx2 / len2) * r, curr[1] + (dy2 / len2) * r)
        else:
            path.L(*curr)
    path.L(*pts[-1])


def _render_nodes(
    d: draw.Drawing,
    graph: Graph,
    layout: LayoutResult,
    theme: Theme,
    focus: FocusSet | None,
) -> None:
    """Render states as circles and every other kind as a rounded box."""
    config = layout.config
    dimmed = focus.dimmed_nodes if focus else set()
    for node in graph.nodes:
        pos = layout.positions.get(node.id)
        if pos is None:
            continue
        cx, cy = pos
        w, h = config.node_box(node.kind)
        opacity = _opacity(node.id, dimmed, theme)

        if node.kind is NodeKind.STATE:
            d.append(draw.Circle(
                cx, cy, w / 2,
                fill=theme.state_fill,
                stroke=theme.state_stroke,
                stroke_width=theme.node_stroke_width,
                opacity=opacity,
            ))
            text_color = theme.label_color
        else:
            d.append(draw.Rectangle(
                cx - w / 2, cy - h / 2, w, h,
                rx=theme.node_corner_radius, ry=theme.node_corner_radius,
                fill=theme.event_fill,
                stroke=theme.event_stroke,
                stroke_width=theme.node_stroke_width,
                opacity=opacity,
            ))
            text_color = theme.event_label_color

        d.append(draw.Text(
            node.label or node.id,
            theme.label_font_size,
            cx, cy,
            fill=text_color,
            fill_opacity=opacity,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))
