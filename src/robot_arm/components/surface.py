from dataclasses import dataclass

from robot_arm.constants import (
    ARM_CLEARANCE,
    ARM_HEIGHT,
    COLUMN_SEPARATOR_HEIGHT,
    COLUMN_SEPARATOR_PADDING,
    HOOK_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)


@dataclass(slots=True)
class Surface:
    """Pixel geometry of the drawing surface the arm moves over."""
    width: float = WINDOW_WIDTH
    height: float = WINDOW_HEIGHT
    arm_height: float = ARM_HEIGHT
    hook_height: float = HOOK_HEIGHT
    clearance: float = ARM_CLEARANCE
    separator_height: float = COLUMN_SEPARATOR_HEIGHT
    separator_padding: float = COLUMN_SEPARATOR_PADDING
