"""Dark grey theme."""

from flowlayout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    state_fill="#3a3a3a",
    state_stroke="#9ca3af",
    event_fill="#1d4ed8",
    event_stroke="#60a5fa",
    node_stroke_width=1.5,
    node_corner_radius=4.0,
    edge_color="#e0e0e0",
    backward_edge_color="#ef4444",
    edge_width=2.0,
    label_color="#e0e0e0",
    event_label_color="#ffffff",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=22.0,
    backward_dasharray="8,4",
    dimmed_opacity=0.15,
)
