from dataclasses import dataclass

from robot_arm.utils.arm_motion import MotionContext, ascend, descend


@dataclass(slots=True)
class DropAnimation:
    """Lowers the arm, releases the visually held block onto the column, raises the arm."""
    phase: str = 'descending'  # 'descending', 'ascending', 'done'

    @property
    def kind(self) -> str:
        return 'drop'

    def advance(self, dt_ms: float, ctx: MotionContext) -> bool:
        if self.phase == 'descending':
            if descend(ctx, dt_ms):
                arm = ctx.visual.arm
                if arm.held is not None:
                    ctx.visual.board.push(arm.column, arm.held)
                    arm.held = None
                self.phase = 'ascending'
            return False
        if self.phase == 'ascending':
            if not ascend(ctx, dt_ms):
                return False
            self.phase = 'done'
        return True
