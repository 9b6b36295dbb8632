"""Exam level table.

Every generator is a pure function of the random source it is given, so a
seeded ``random.Random`` always yields the same level.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from robot_arm.components.block_stack import Block

LevelName = Union[int, str]

BASIC_COLORS: Tuple[str, ...] = ("red", "blue", "yellow", "green")
ALL_COLORS: Tuple[str, ...] = ("red", "blue", "yellow", "green", "orange", "purple", "gray", "black")
SIDE_COLUMNS: Tuple[int, ...] = (0, 1, 7, 8)


class UnknownLevelError(ValueError):
    """Raised when a level identifier is not in the level table."""

    def __init__(self, name: LevelName):
        super().__init__(f"There is no level with the name: {name}")
        self.name = name


@dataclass(frozen=True)
class LevelSpec:
    name: LevelName
    columns: Optional[int]  # None keeps the configured count
    initial_arm_column: Optional[int]  # None keeps the arm where it is
    board: Tuple[Tuple[Block, ...], ...]
    color_assignment: Mapping[int, str] = field(default_factory=dict)
    snap_color: Optional[str] = None
    consume_column_scan: bool = False
    rows: Optional[int] = None  # None keeps the configured value
    speed: Optional[float] = None


def _freeze(columns: Sequence[Sequence[Block]], count: int) -> Tuple[Tuple[Block, ...], ...]:
    padded = [tuple(col) for col in columns]
    padded.extend(() for _ in range(count - len(padded)))
    return tuple(padded)


def _pick_colors(rng: random.Random, count: int = 4) -> Tuple[List[str], List[str]]:
    """Shuffle the full palette and take ``count`` of it; returns (palette, picked)."""
    palette = list(ALL_COLORS)
    rng.shuffle(palette)
    return palette, palette[:count]


def _level_1(rng: random.Random) -> LevelSpec:
    numbers = [6, 5, 4, 3, 2, 1]
    # The largest number must not start at the bottom.
    while numbers[0] == 6:
        rng.shuffle(numbers)
    return LevelSpec(name=1, columns=7, initial_arm_column=0, board=_freeze([numbers], 7))


def _level_2(rng: random.Random) -> LevelSpec:
    colors = list(BASIC_COLORS)
    assignment = dict(zip(SIDE_COLUMNS, colors))
    stack = [rng.choice(colors) for _ in range(6)]
    board = [[], [], [], [], stack]
    return LevelSpec(name=2, columns=9, initial_arm_column=4, board=_freeze(board, 9),
                     color_assignment=assignment)


def _level_3(rng: random.Random) -> LevelSpec:
    palette, colors = _pick_colors(rng)
    rng.shuffle(palette)
    rng.shuffle(colors)
    assignment = {i + 1: color for i, color in enumerate(palette)}
    stack: List[str] = []
    for _ in range(2):
        rng.shuffle(colors)
        stack.extend(colors)
    return LevelSpec(name=3, columns=10, initial_arm_column=9, board=_freeze([stack], 10),
                     color_assignment=assignment, consume_column_scan=True)


def _level_4(rng: random.Random) -> LevelSpec:
    _, colors = _pick_colors(rng)
    rng.shuffle(colors)
    assignment = {i + 5: color for i, color in enumerate(colors)}
    board: List[List[str]] = [[], [], [], []]
    for i in range(3, -1, -1):
        rng.shuffle(colors)
        board[i] = colors[:i + 1]
    return LevelSpec(name=4, columns=9, initial_arm_column=4, board=_freeze(board, 9),
                     color_assignment=assignment)


def _level_5(rng: random.Random) -> LevelSpec:
    return LevelSpec(name=5, columns=3, initial_arm_column=0, board=_freeze([[3, 1, 2, 4, 5]], 3))


def _level_6(rng: random.Random) -> LevelSpec:
    c = list(BASIC_COLORS)
    rng.shuffle(c)
    board = [[], [], [], [c[0], c[1], c[2]], [c[3], c[0], c[3]], [c[2], c[1], c[0]]]
    return LevelSpec(name=6, columns=9, initial_arm_column=4, board=_freeze(board, 9),
                     color_assignment=dict(zip(SIDE_COLUMNS, c)))


def _level_7(rng: random.Random) -> LevelSpec:
    _, colors = _pick_colors(rng)
    amount = rng.randrange(6) + 2
    stack: List[str] = []
    targets: List[str] = []
    for _ in range(amount + 1):
        color = rng.choice(colors)
        if color not in targets:
            targets.append(color)
        stack.append(color)
    assignment = {i + 1: color for i, color in enumerate(targets)}
    return LevelSpec(name=7, columns=None, initial_arm_column=None,
                     board=_freeze([stack], 1), color_assignment=assignment)


def _level_8(rng: random.Random) -> LevelSpec:
    purple, gray = "#a760ad", "#7e787f"
    board = [[purple, purple, gray], [purple, gray, gray], [purple, purple, gray]]
    return LevelSpec(name=8, columns=10, initial_arm_column=0, board=_freeze(board, 10),
                     color_assignment={9: purple}, snap_color=gray)


_LEVELS: Dict[LevelName, Callable[[random.Random], LevelSpec]] = {
    1: _level_1,
    2: _level_2,
    3: _level_3,
    4: _level_4,
    5: _level_5,
    6: _level_6,
    7: _level_7,
    8: _level_8,
    "thanos": _level_8,
}


def all_level_names() -> Tuple[LevelName, ...]:
    return tuple(_LEVELS.keys())


def _normalize(name: LevelName) -> LevelName:
    if isinstance(name, str):
        stripped = name.strip().lower()
        return int(stripped) if stripped.isdigit() else stripped
    return name


def get_level_spec(name: LevelName, rng: random.Random | None = None) -> LevelSpec:
    """Generate the level ``name``; raises UnknownLevelError for unknown names."""
    generator = _LEVELS.get(_normalize(name))
    if generator is None:
        raise UnknownLevelError(name)
    return generator(rng or random.Random())
