from __future__ import annotations

import logging
import random

from esper import World

from robot_arm.components.arm import LogicalArm, VisualArm
from robot_arm.components.block_stack import BlockBoard
from robot_arm.events.bus import EVENT_LEVEL_LOADED, EventBus
from robot_arm.factories.levels import LevelName, LevelSpec, get_level_spec
from robot_arm.world import get_logical_state, get_settings, get_visual_state

LOG = logging.getLogger(__name__)


class LevelSystem:
    """Loads levels from the level table and installs them into the world."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.current: LevelSpec | None = None

    def load_level(self, name: LevelName) -> LevelSpec:
        # Resolve first so an unknown name leaves the running level untouched.
        spec = get_level_spec(name, self._rng)
        self.apply_level(spec)
        return spec

    def apply_level(self, spec: LevelSpec) -> None:
        settings = get_settings(self.world)
        logical = get_logical_state(self.world)
        # Levels without a column count or arm column keep the running ones.
        columns = spec.columns if spec.columns is not None else settings.columns
        if spec.initial_arm_column is not None:
            arm_column = spec.initial_arm_column
        else:
            arm_column = min(logical.arm.column, columns - 1)
        if not 0 <= arm_column < columns:
            raise ValueError(f"Arm column {arm_column} outside 0..{columns - 1}")
        board = BlockBoard.from_columns(spec.board, columns)

        settings.columns = columns
        if spec.rows is not None:
            settings.rows = spec.rows
        if spec.speed is not None:
            settings.speed = spec.speed
        settings.color_assignment = dict(spec.color_assignment)
        settings.snap_color = spec.snap_color
        settings.consume_column_scan = spec.consume_column_scan

        logical.board = board
        logical.arm = LogicalArm(column=arm_column)
        logical.scanned_columns = set()

        visual = get_visual_state(self.world)
        visual.board = board.clone()
        visual.arm = VisualArm(column=arm_column)

        self.current = spec
        LOG.info("Loaded level %s (%d columns, %d blocks)", spec.name, columns, board.total_blocks())
        self.event_bus.emit(EVENT_LEVEL_LOADED, level=spec.name, columns=columns)
