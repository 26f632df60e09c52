"""SVG preview rendering."""

from flowlayout.render.svg import render_svg, smooth_path_commands

__all__ = ["render_svg", "smooth_path_commands"]
