"""Layout constants used across layout modules.

Defaults for :class:`~flowlayout.layout.config.LayoutConfig` and the
routing heuristics live here so every module reads the same numbers.
"""

# ---------------------------------------------------------------------------
# Canvas / node box defaults
# ---------------------------------------------------------------------------
CANVAS_WIDTH: float = 1200.0
"""Default canvas width."""

CANVAS_HEIGHT: float = 800.0
"""Default canvas height."""

NODE_WIDTH: float = 120.0
"""Box width of event/stage/workflow nodes."""

NODE_HEIGHT: float = 80.0
"""Box height of event/stage/workflow nodes."""

STATE_SIZE: float = 60.0
"""Diameter of (circular) state nodes."""

# ---------------------------------------------------------------------------
# Spacing defaults
# ---------------------------------------------------------------------------
PADDING: float = 100.0
"""Padding from the canvas edge to the first level / outermost node."""

MAX_LEVEL_SPACING: float = 200.0
"""Cap on the distance between adjacent levels along the primary axis."""

MIN_NODE_SPACING: float = 100.0
"""Minimum distance between nodes sharing a level."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
PARALLEL_SPACING_MAX: float = 25.0
"""Largest lateral step between members of an edge group."""

PARALLEL_SPACING_MIN: float = 12.0
"""Smallest lateral step between members of an edge group."""

PARALLEL_SPREAD: float = 100.0
"""Total spread shared by a group before the step hits its minimum."""

BACKWARD_CLEARANCE: float = 40.0
"""Gap between the deepest node edge and a backward edge's return channel."""

SELF_LOOP_SIZE: float = 30.0
"""Extent of a self-loop beyond its node's box."""

COORD_TOLERANCE: float = 0.01
"""Tolerance for treating two coordinates as equal."""
