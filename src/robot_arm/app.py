"""Arcade host window for the robot arm.

Keys: Left/Right move, Down grabs, Up drops, S snaps, 1-8 load exam levels.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from arcade import Window, run, key

from robot_arm.components.arm_settings import ArmSettings
from robot_arm.components.surface import Surface
from robot_arm.constants import DEFAULT_COLUMNS, DEFAULT_ROWS, DEFAULT_SPEED, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from robot_arm.factories.levels import UnknownLevelError
from robot_arm.session import RobotArm
from robot_arm.systems.render import RenderSystem
from robot_arm.utils.logging import configure_logging, resolve_level

LOG = logging.getLogger(__name__)

_LEVEL_KEYS = {getattr(key, f"KEY_{n}"): n for n in range(1, 9)}


class RobotArmWindow(Window):
    def __init__(self, arm: RobotArm, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT):
        super().__init__(width, height, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.arm = arm
        self.render_system = RenderSystem(arm.world, arm.event_bus, self)
        self.render_system.notify_resize(width, height)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.arm.tick(delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.LEFT:
            self.arm.move_left()
        elif symbol == key.RIGHT:
            self.arm.move_right()
        elif symbol == key.DOWN:
            self.arm.grab()
        elif symbol == key.UP:
            self.arm.drop()
        elif symbol == key.S:
            self.arm.snap()
        elif symbol in _LEVEL_KEYS:
            self.arm.load_level(_LEVEL_KEYS[symbol])


def _positive(kind):
    def convert(text: str):
        value = kind(text)
        if value <= 0:
            raise argparse.ArgumentTypeError(f"must be greater than zero, got {text}")
        return value
    convert.__name__ = kind.__name__
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="robot-arm", description="Animated robot arm simulator")
    parser.add_argument("--level", default=None, help="exam level to load (1-8 or 'thanos')")
    parser.add_argument("--columns", type=_positive(int), default=DEFAULT_COLUMNS)
    parser.add_argument("--rows", type=_positive(int), default=DEFAULT_ROWS)
    parser.add_argument("--speed", type=_positive(float), default=DEFAULT_SPEED)
    parser.add_argument("--width", type=_positive(int), default=WINDOW_WIDTH)
    parser.add_argument("--height", type=_positive(int), default=WINDOW_HEIGHT)
    parser.add_argument("--log-level", type=resolve_level, default="INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    settings = ArmSettings(columns=args.columns, rows=args.rows, speed=args.speed)
    arm = RobotArm(settings=settings, surface=Surface(width=args.width, height=args.height))
    if args.level is not None:
        try:
            arm.load_level(args.level)
        except UnknownLevelError as exc:
            LOG.error("%s", exc)
            return 2
    RobotArmWindow(arm, args.width, args.height)
    run()
    return 0
