"""Theme definitions for workflow previews."""

from flowlayout.themes.dark import DARK_THEME
from flowlayout.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
