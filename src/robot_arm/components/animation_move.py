from dataclasses import dataclass

from robot_arm.utils.arm_motion import MotionContext, column_width, horizontal_step


@dataclass(slots=True)
class MoveAnimation:
    """Slides the visual arm one column left (-1) or right (+1)."""
    direction: int
    phase: str = 'moving'  # 'moving', 'done'

    @property
    def kind(self) -> str:
        return 'move_right' if self.direction > 0 else 'move_left'

    def advance(self, dt_ms: float, ctx: MotionContext) -> bool:
        if self.phase == 'done':
            return True
        arm = ctx.visual.arm
        arm.horizontal_offset += self.direction * horizontal_step(ctx, dt_ms)
        if abs(arm.horizontal_offset) < column_width(ctx.settings, ctx.surface):
            return False
        arm.horizontal_offset = 0.0
        arm.column += self.direction
        self.phase = 'done'
        return True
