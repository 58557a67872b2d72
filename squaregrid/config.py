"""
Default values for a SquareGrid. Tinker freely; nothing else needs to change.
"""

# Grid dimensions -------------------------------------------------------
DEFAULT_ROWS = 50
DEFAULT_COLUMNS = 50
DEFAULT_CELL_SIZE = 20
MIN_CELL_SIZE = 5

# Colors ----------------------------------------------------------------
DEFAULT_COLOR = "white"
DEFAULT_GRID_COLOR = "black"   # None means no cell borders at all
PAINT_COLOR = "black"          # used by the demo / web host click handler

# Rendering policy ------------------------------------------------------
DEFAULT_ALWAYS_DRAW_GRID = False
DEFAULT_AUTO_REDRAW = True

# Surface geometry (nominal units) --------------------------------------
BORDER_MARGIN = 1
GRID_LINE_WIDTH = 1
SURFACE_CLASS = "squareGrid"
