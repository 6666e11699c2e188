"""
Shared constants for the editing surface.

These are defaults only; EditorConfig can override every tolerance
and drawing size at startup.
"""

# Radius in pixels around a node centre that captures the pointer
ATTRACTION_RADIUS = 10

# Allowed slack in pixels for the point-on-edge test
EDGE_TOLERANCE = 3

# Pointer travel in pixels before a press turns into a drag
DRAG_THRESHOLD = 3

# Drawing style (independent of the hit tolerances above)
NODE_RADIUS = 10
EDGE_END_GAP = 3
DOT_RADIUS = 3
STROKE_WIDTH = 2

BACKGROUND_COLOR = "#f0fafa"
NORMAL_COLOR = "#0064c8"
HOVER_COLOR = "#c80000"

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
