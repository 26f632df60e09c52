"""Light theme (subtle greys on white)."""

from flowlayout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    state_fill="#ffffff",
    state_stroke="#d1d5db",
    event_fill="#3b82f6",
    event_stroke="#2563eb",
    node_stroke_width=2.0,
    node_corner_radius=4.0,
    edge_color="#475569",
    backward_edge_color="#94a3b8",
    edge_width=2.0,
    label_color="#374151",
    event_label_color="#ffffff",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#111111",
    title_font_size=22.0,
)
