DEFAULT_COLUMNS = 9
DEFAULT_ROWS = 8
# Columns-equivalent per second; scaled by surface size in the motion helpers.
DEFAULT_SPEED = 50

BACKGROUND_COLOR = "#EEE"

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Robot Arm"

# Arm geometry (pixels)
ARM_HEIGHT = 25
HOOK_HEIGHT = 10
# Gap kept between the lowered arm and the top block.
ARM_CLEARANCE = 3

# Floor geometry (pixels); separator height 0 removes the separators.
COLUMN_SEPARATOR_HEIGHT = 10
COLUMN_SEPARATOR_PADDING = 5

# Target column marker (triangle drawn above colored columns)
COLUMN_MARKER_TOP = 20
COLUMN_MARKER_HEIGHT = 15

# Elapsed time used for the first tick and for zero-length ticks; makes every motion step zero.
FIRST_TICK_ELAPSED_MS = float("inf")
