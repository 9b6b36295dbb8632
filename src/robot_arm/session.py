from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

from robot_arm.components.arm_settings import ArmSettings
from robot_arm.components.block_stack import Block
from robot_arm.components.surface import Surface
from robot_arm.events.bus import EVENT_TICK, EventBus
from robot_arm.factories.levels import LevelName, LevelSpec
from robot_arm.rendering.snapshot import RenderSnapshot, build_snapshot
from robot_arm.systems.animation import AnimationSystem
from robot_arm.systems.command_system import CommandSystem
from robot_arm.systems.level_system import LevelSystem
from robot_arm.world import create_world, get_animation_queue, get_logical_state, get_visual_state


class RobotArm:
    """Headless robot arm: one world, one bus and the systems that drive it.

    The host calls the commands whenever it likes and ``tick`` once per frame.
    """

    def __init__(
        self,
        *,
        settings: ArmSettings | None = None,
        surface: Surface | None = None,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(settings=settings, surface=surface, rng=rng)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.command_system = CommandSystem(self.world, self.event_bus)
        self.level_system = LevelSystem(self.world, self.event_bus, rng=rng)

    # Commands
    def move_left(self) -> None:
        self.command_system.move_left()

    def move_right(self) -> None:
        self.command_system.move_right()

    def grab(self) -> None:
        self.command_system.grab()

    def drop(self) -> bool:
        return self.command_system.drop()

    def scan(self) -> Optional[Block]:
        return self.command_system.scan()

    scan_block = scan

    def scan_column(self) -> Optional[str]:
        return self.command_system.scan_column()

    def snap(self) -> None:
        self.command_system.snap()

    def set_board(self, columns: Iterable[Sequence[Block]]) -> None:
        self.command_system.set_board(columns)

    def load_level(self, name: LevelName) -> LevelSpec:
        return self.level_system.load_level(name)

    # Frame driving
    def tick(self, dt: float) -> None:
        """Advance the animation queue by ``dt`` seconds."""
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def run_until_idle(self, dt: float = 1 / 60, max_ticks: int = 100_000) -> int:
        """Tick until every queued animation finished; returns the number of ticks."""
        ticks = 0
        while not self.idle and ticks < max_ticks:
            self.tick(dt)
            ticks += 1
        return ticks

    @property
    def idle(self) -> bool:
        return get_animation_queue(self.world).idle

    def snapshot(self) -> RenderSnapshot:
        return build_snapshot(self.world)

    # Read-only views for hosts and tests
    @property
    def logical(self):
        return get_logical_state(self.world)

    @property
    def visual(self):
        return get_visual_state(self.world)
