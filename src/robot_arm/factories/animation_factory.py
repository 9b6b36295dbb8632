from typing import Optional, Union

from robot_arm.components.animation_drop import DropAnimation
from robot_arm.components.animation_grab import GrabAnimation
from robot_arm.components.animation_move import MoveAnimation
from robot_arm.components.animation_snap import SnapAnimation

AnimationTask = Union[MoveAnimation, GrabAnimation, DropAnimation, SnapAnimation]

ANIMATION_KINDS = ('move_left', 'move_right', 'grab', 'drop', 'snap')


class AnimationFactory:
    """Builds a fresh task instance per request; tasks never share phase state."""

    def create(self, kind: str, *, color: Optional[str] = None) -> AnimationTask:
        if kind == 'move_left':
            return MoveAnimation(direction=-1)
        if kind == 'move_right':
            return MoveAnimation(direction=1)
        if kind == 'grab':
            return GrabAnimation()
        if kind == 'drop':
            return DropAnimation()
        if kind == 'snap':
            return SnapAnimation(color=color)
        raise ValueError(f"Unknown animation kind '{kind}'")
