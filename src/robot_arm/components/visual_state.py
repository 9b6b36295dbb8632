from dataclasses import dataclass, field

from robot_arm.components.arm import VisualArm
from robot_arm.components.block_stack import BlockBoard


@dataclass(slots=True)
class VisualState:
    """Rendered board and arm; only animation tasks mutate it."""
    board: BlockBoard = field(default_factory=BlockBoard)
    arm: VisualArm = field(default_factory=VisualArm)
