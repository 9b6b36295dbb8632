from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from esper import World

from robot_arm.components.block_stack import Block, BlockBoard
from robot_arm.events.bus import (
    EVENT_ANIMATION_START,
    EVENT_BOARD_SET,
    EVENT_BOARD_SNAPPED,
    EVENT_COMMAND_ISSUED,
    EVENT_DROP_REJECTED,
    EventBus,
)
from robot_arm.world import get_logical_state, get_settings, get_visual_state

LOG = logging.getLogger(__name__)


class CommandSystem:
    """Public arm commands.

    Each command validates against the logical state, mutates it right away and
    queues the matching animation. Queries never queue anything, so they always
    reflect the logical truth even while the arm is still visibly moving.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

    # Motion -----------------------------------------------------------------

    def move_right(self) -> None:
        """Move the arm one column to the right if there is one."""
        arm = get_logical_state(self.world).arm
        if arm.column + 1 > get_settings(self.world).columns - 1:
            LOG.debug("Ignoring move_right at last column %d", arm.column)
            return
        arm.column += 1
        self._queue('move_right')

    def move_left(self) -> None:
        """Move the arm one column to the left if there is one."""
        arm = get_logical_state(self.world).arm
        if arm.column - 1 < 0:
            LOG.debug("Ignoring move_left at first column")
            return
        arm.column -= 1
        self._queue('move_left')

    def grab(self) -> None:
        """Take the top block of the current column unless a block is already held."""
        state = get_logical_state(self.world)
        arm = state.arm
        if arm.held is not None:
            LOG.debug("Ignoring grab while holding %r", arm.held)
            return
        if state.board.height(arm.column) > 0:
            arm.held = state.board.pop(arm.column)
        self._queue('grab')

    def drop(self) -> bool:
        """Release the held block onto the current column.

        Returns False when colored columns are configured and the block does not
        match the column's color; the block is then grabbed back immediately.
        """
        if not get_settings(self.world).has_colored_columns:
            self._drop_block()
            return True
        color = self.scan()
        self._drop_block()
        expected = self.scan_column()
        if color is not None and color != expected:
            column = get_logical_state(self.world).arm.column
            LOG.info("Drop of %r rejected at column %d (expects %r)", color, column, expected)
            self.event_bus.emit(EVENT_DROP_REJECTED, column=column, block=color, expected=expected)
            self.grab()
            return False
        return True

    def snap(self) -> None:
        """Remove every snap-colored block from the board; only with an empty hook."""
        if self.scan() is not None:
            return
        color = get_settings(self.world).snap_color
        if not color:
            return
        removed = get_logical_state(self.world).board.remove_all(color)
        self._queue('snap', color=color)
        self.event_bus.emit(EVENT_BOARD_SNAPPED, color=color, removed=removed)

    # Queries ----------------------------------------------------------------

    def scan(self) -> Optional[Block]:
        """Return the held block, if any."""
        return get_logical_state(self.world).arm.held

    scan_block = scan

    def scan_column(self) -> Optional[str]:
        """Return the color designated for the current column, if any.

        Levels with ``consume_column_scan`` reveal each column's color only on
        the first query made at that column.
        """
        state = get_logical_state(self.world)
        settings = get_settings(self.world)
        column = state.arm.column
        if settings.consume_column_scan:
            if column in state.scanned_columns:
                return None
            state.scanned_columns.add(column)
        return settings.color_for(column)

    # Board ------------------------------------------------------------------

    def set_board(self, columns: Iterable[Sequence[Block]]) -> None:
        """Install a new board; logical and visual boards get independent copies."""
        settings = get_settings(self.world)
        board = BlockBoard.from_columns(columns, settings.columns)
        get_logical_state(self.world).board = board
        get_visual_state(self.world).board = board.clone()
        self.event_bus.emit(EVENT_BOARD_SET, columns=board.column_count)

    def _drop_block(self) -> None:
        state = get_logical_state(self.world)
        arm = state.arm
        self._queue('drop')
        if arm.held is not None:
            state.board.push(arm.column, arm.held)
            arm.held = None

    def _queue(self, kind: str, **meta) -> None:
        column = get_logical_state(self.world).arm.column
        self.event_bus.emit(EVENT_ANIMATION_START, kind=kind, **meta)
        self.event_bus.emit(EVENT_COMMAND_ISSUED, command=kind, column=column)
