from dataclasses import dataclass, field
from typing import Set

from robot_arm.components.arm import LogicalArm
from robot_arm.components.block_stack import BlockBoard


@dataclass(slots=True)
class LogicalState:
    """Authoritative board and arm; commands mutate it synchronously."""
    board: BlockBoard = field(default_factory=BlockBoard)
    arm: LogicalArm = field(default_factory=LogicalArm)
    # Columns whose color was already revealed in consume-on-first-scan levels.
    scanned_columns: Set[int] = field(default_factory=set)
