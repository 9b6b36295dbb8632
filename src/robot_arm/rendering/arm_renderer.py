from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from robot_arm.components.block_stack import Block
from robot_arm.constants import COLUMN_MARKER_HEIGHT, COLUMN_MARKER_TOP

if TYPE_CHECKING:
    from robot_arm.components.surface import Surface
    from robot_arm.rendering.snapshot import RenderSnapshot

Point = Tuple[float, float]
Line = Tuple[float, float, float, float]


@dataclass(slots=True)
class BlockRect:
    left: float
    bottom: float
    width: float
    height: float
    block: Block


@dataclass(slots=True)
class FloorSegment:
    line: Line
    color: Optional[str]  # designated column color, None for plain floor
    thickness: float


@dataclass(slots=True)
class ArmLayout:
    """Frame geometry in arcade coordinates (origin bottom-left)."""
    floor: List[FloorSegment] = field(default_factory=list)
    separators: List[Line] = field(default_factory=list)
    markers: List[Tuple[Tuple[Point, Point, Point], str]] = field(default_factory=list)
    arm_lines: List[Line] = field(default_factory=list)
    blocks: List[BlockRect] = field(default_factory=list)
    held: Optional[BlockRect] = None


def compute_layout(snapshot: RenderSnapshot, surface: Surface) -> ArmLayout:
    """Translate a snapshot into drawable geometry; no arcade calls."""
    width, height = surface.width, surface.height
    cols = max(snapshot.column_count, 1)
    column_width = width / cols
    block_height = (height - surface.arm_height - surface.hook_height) / max(snapshot.row_count, 1)
    pad = surface.separator_padding
    block_width = column_width - pad * 2
    layout = ArmLayout()

    for i in range(cols):
        x = i * column_width
        color = snapshot.color_for(i)
        if color:
            layout.markers.append((
                (
                    (x + column_width * 2 / 3, height - COLUMN_MARKER_TOP),
                    (x + column_width / 2, height - COLUMN_MARKER_TOP - COLUMN_MARKER_HEIGHT),
                    (x + column_width / 3, height - COLUMN_MARKER_TOP),
                ),
                color,
            ))
            layout.floor.append(FloorSegment((x, 0, x + column_width, 0), color, surface.separator_height))
        else:
            layout.floor.append(FloorSegment((x, 0, x + column_width, 0), None, 2))
    if surface.separator_height > 0:
        for i in range(cols + 1):
            x = i * column_width
            layout.separators.append((x, 0, x, surface.separator_height))

    for column, stack in enumerate(snapshot.visual_board):
        for row, block in enumerate(stack):
            layout.blocks.append(BlockRect(
                left=column * column_width + pad,
                bottom=block_height * row + 1,
                width=block_width,
                height=block_height,
                block=block,
            ))

    h_off, v_off = snapshot.arm_offsets
    arm_x = snapshot.arm_visual_position * column_width + h_off
    bar_y = height - (surface.arm_height + v_off)
    hook_y = bar_y - surface.hook_height
    layout.arm_lines = [
        (arm_x + column_width / 2, height, arm_x + column_width / 2, bar_y),
        (arm_x + pad, bar_y, arm_x + column_width - pad, bar_y),
        (arm_x + pad, bar_y, arm_x + pad, hook_y),
        (arm_x + column_width - pad, bar_y, arm_x + column_width - pad, hook_y),
    ]
    if snapshot.visual_held_block is not None:
        layout.held = BlockRect(
            left=arm_x + pad + 1,
            bottom=bar_y - 1 - block_height,
            width=block_width - 2,
            height=block_height,
            block=snapshot.visual_held_block,
        )
    return layout


def is_numeric_block(block: Block) -> bool:
    if isinstance(block, bool):
        return False
    if isinstance(block, (int, float)):
        return True
    try:
        float(block)
    except (TypeError, ValueError):
        return False
    return True


def resolve_color(arcade, tag: Optional[str], fallback=None):
    """Map a color tag ('#a760ad', '#EEE', 'red') to an arcade color."""
    fallback = fallback if fallback is not None else arcade.color.GRAY
    if not tag:
        return fallback
    tag = str(tag).strip()
    if tag.startswith("#"):
        from arcade.types import Color
        try:
            return Color.from_hex_string(tag)
        except ValueError:
            return fallback
    return getattr(arcade.color, tag.upper(), fallback)


class ArmRenderer:
    def __init__(self, surface: Surface):
        self.surface = surface
        self.last_layout: ArmLayout | None = None

    def render(self, arcade, snapshot: RenderSnapshot, headless: bool) -> ArmLayout:
        layout = compute_layout(snapshot, self.surface)
        self.last_layout = layout
        if headless:
            return layout
        black = arcade.color.BLACK
        arcade.draw_lrbt_rectangle_filled(
            0, self.surface.width, 0, self.surface.height,
            resolve_color(arcade, snapshot.background_color, arcade.color.WHITE_SMOKE),
        )
        for points, color in layout.markers:
            arcade.draw_polygon_filled(list(points), resolve_color(arcade, color))
            arcade.draw_polygon_outline(list(points), black, 1)
        for segment in layout.floor:
            seg_color = resolve_color(arcade, segment.color) if segment.color else black
            arcade.draw_line(*segment.line, seg_color, segment.thickness)
        for line in layout.separators:
            arcade.draw_line(*line, black, 1)
        for rect in layout.blocks:
            self._draw_block(arcade, rect)
        for line in layout.arm_lines:
            arcade.draw_line(*line, black, 1)
        if layout.held is not None:
            self._draw_block(arcade, layout.held)
        return layout

    def _draw_block(self, arcade, rect: BlockRect) -> None:
        left, right = rect.left, rect.left + rect.width
        bottom, top = rect.bottom, rect.bottom + rect.height
        if is_numeric_block(rect.block):
            arcade.draw_text(
                str(rect.block),
                left + rect.width / 2,
                bottom + rect.height / 2,
                arcade.color.BLACK,
                font_size=rect.height / 3,
                anchor_x="center",
                anchor_y="center",
            )
        else:
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, resolve_color(arcade, rect.block))
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, arcade.color.BLACK, 1)
