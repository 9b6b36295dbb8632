from dataclasses import dataclass

from robot_arm.utils.arm_motion import MotionContext, ascend, descend


@dataclass(slots=True)
class GrabAnimation:
    """Lowers the arm, takes the top block of the visual column, raises the arm."""
    phase: str = 'descending'  # 'descending', 'ascending', 'done'

    @property
    def kind(self) -> str:
        return 'grab'

    def advance(self, dt_ms: float, ctx: MotionContext) -> bool:
        if self.phase == 'descending':
            if descend(ctx, dt_ms):
                visual = ctx.visual
                column = visual.arm.column
                if visual.board.height(column) > 0:
                    visual.arm.held = visual.board.pop(column)
                self.phase = 'ascending'
            return False
        if self.phase == 'ascending':
            if not ascend(ctx, dt_ms):
                return False
            self.phase = 'done'
        return True
