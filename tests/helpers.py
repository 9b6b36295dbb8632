from __future__ import annotations

from typing import Mapping, Optional, Sequence

from robot_arm.components.block_stack import Block
from robot_arm.events.bus import EventBus
from robot_arm.factories.levels import LevelSpec
from robot_arm.session import RobotArm

FRAME = 0.016


def make_arm(
    board: Sequence[Sequence[Block]],
    *,
    columns: Optional[int] = None,
    arm_column: int = 0,
    color_assignment: Optional[Mapping[int, str]] = None,
    snap_color: Optional[str] = None,
    consume_column_scan: bool = False,
) -> RobotArm:
    """Build a headless arm with a hand-made level installed."""
    count = columns if columns is not None else max(len(board), 1)
    padded = [tuple(col) for col in board] + [() for _ in range(count - len(board))]
    spec = LevelSpec(
        name="test",
        columns=count,
        initial_arm_column=arm_column,
        board=tuple(padded),
        color_assignment=dict(color_assignment or {}),
        snap_color=snap_color,
        consume_column_scan=consume_column_scan,
    )
    arm = RobotArm()
    arm.level_system.apply_level(spec)
    return arm


def collect_events(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
