from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from robot_arm.components.block_stack import Block
from robot_arm.world import get_settings, get_visual_state


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Read-only view of everything the renderer draws for one frame.

    Built from copies only; holding on to a snapshot never exposes live state.
    """

    column_count: int
    row_count: int
    visual_board: Tuple[Tuple[Block, ...], ...]
    arm_visual_position: int
    arm_offsets: Tuple[float, float]  # (horizontal, vertical)
    visual_held_block: Optional[Block]
    color_assignment: Tuple[Tuple[int, str], ...]
    snap_color: Optional[str]
    background_color: str

    def color_for(self, column: int) -> Optional[str]:
        for idx, color in self.color_assignment:
            if idx == column:
                return color
        return None


def build_snapshot(world: World) -> RenderSnapshot:
    settings = get_settings(world)
    visual = get_visual_state(world)
    arm = visual.arm
    return RenderSnapshot(
        column_count=settings.columns,
        row_count=settings.rows,
        visual_board=visual.board.as_tuples(),
        arm_visual_position=arm.column,
        arm_offsets=(arm.horizontal_offset, arm.vertical_offset),
        visual_held_block=arm.held,
        color_assignment=tuple(sorted((col, color) for col, color in settings.color_assignment.items() if color)),
        snap_color=settings.snap_color,
        background_color=settings.background_color,
    )
