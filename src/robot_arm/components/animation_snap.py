from dataclasses import dataclass
from typing import Optional

from robot_arm.utils.arm_motion import MotionContext


@dataclass(slots=True)
class SnapAnimation:
    """Removes every snap-colored block from the visual board in a single frame."""
    color: Optional[str]
    phase: str = 'pending'  # 'pending', 'done'

    @property
    def kind(self) -> str:
        return 'snap'

    def advance(self, dt_ms: float, ctx: MotionContext) -> bool:
        if self.phase != 'done':
            if self.color:
                ctx.visual.board.remove_all(self.color)
            self.phase = 'done'
        return True
