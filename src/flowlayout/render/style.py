"""Theme and style constants for workflow preview rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a workflow diagram."""

    name: str
    background_color: str
    state_fill: str
    state_stroke: str
    event_fill: str
    event_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    edge_color: str
    backward_edge_color: str
    edge_width: float
    label_color: str
    event_label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    backward_dasharray: str = "6,6"
    edge_label_color: str = ""  # empty = inherit label_color
    edge_label_font_size: float = 11.0
    arrow_scale: float = 6.0
    dimmed_opacity: float = 0.2
    curve_radius: float = 10.0
