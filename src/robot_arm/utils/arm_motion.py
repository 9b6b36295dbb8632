"""Motion math shared by the animation tasks.

Rates follow the arm's historical feel: the per-frame step is
``speed * extent / 1000 / dt_ms``, so an infinite ``dt_ms`` yields a step of
exactly zero.
"""
from __future__ import annotations

from dataclasses import dataclass

from robot_arm.components.arm_settings import ArmSettings
from robot_arm.components.surface import Surface
from robot_arm.components.visual_state import VisualState


@dataclass(slots=True)
class MotionContext:
    """Everything a task may touch while advancing."""
    visual: VisualState
    settings: ArmSettings
    surface: Surface


def column_width(settings: ArmSettings, surface: Surface) -> float:
    return surface.width / settings.columns


def block_height(settings: ArmSettings, surface: Surface) -> float:
    available = surface.height - surface.arm_height - surface.hook_height
    return available / settings.rows


def horizontal_step(ctx: MotionContext, dt_ms: float) -> float:
    return ctx.settings.speed * ctx.surface.width / 1000 / dt_ms


def vertical_step(ctx: MotionContext, dt_ms: float) -> float:
    return ctx.settings.speed * 2 * ctx.surface.height / 1000 / dt_ms


def descend_distance(ctx: MotionContext) -> float:
    """Vertical offset at which the lowered arm touches the stack under it."""
    visual = ctx.visual
    rows_here = visual.board.height(visual.arm.column)
    if visual.arm.held is not None:
        rows_here += 1
    stack_height = rows_here * block_height(ctx.settings, ctx.surface)
    return ctx.surface.height - stack_height - ctx.surface.arm_height - ctx.surface.clearance


def descend(ctx: MotionContext, dt_ms: float) -> bool:
    arm = ctx.visual.arm
    arm.vertical_offset += vertical_step(ctx, dt_ms)
    return arm.vertical_offset >= descend_distance(ctx)


def ascend(ctx: MotionContext, dt_ms: float) -> bool:
    arm = ctx.visual.arm
    arm.vertical_offset -= vertical_step(ctx, dt_ms)
    if arm.vertical_offset > 0:
        return False
    arm.vertical_offset = 0.0
    return True
