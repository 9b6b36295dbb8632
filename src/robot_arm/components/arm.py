from dataclasses import dataclass
from typing import Optional

from robot_arm.components.block_stack import Block


@dataclass(slots=True)
class LogicalArm:
    column: int = 0
    held: Optional[Block] = None


@dataclass(slots=True)
class VisualArm:
    column: int = 0
    held: Optional[Block] = None
    horizontal_offset: float = 0.0  # pixels, negative while moving left
    vertical_offset: float = 0.0    # pixels below the resting height
