import dataclasses

import pytest

from tests.helpers import FRAME, make_arm


def test_snapshot_fields():
    arm = make_arm([["red", 3], []], color_assignment={1: "red"}, snap_color="gray")
    snap = arm.snapshot()
    assert snap.column_count == 2
    assert snap.row_count == 8
    assert snap.visual_board == (("red", 3), ())
    assert snap.arm_visual_position == 0
    assert snap.arm_offsets == (0.0, 0.0)
    assert snap.visual_held_block is None
    assert snap.color_assignment == ((1, "red"),)
    assert snap.color_for(1) == "red"
    assert snap.color_for(0) is None
    assert snap.snap_color == "gray"
    assert snap.background_color == "#EEE"


def test_snapshot_is_frozen():
    snap = make_arm([["A"]]).snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.arm_visual_position = 3


def test_snapshot_does_not_follow_live_state():
    arm = make_arm([["A", "B"]])
    before = arm.snapshot()
    arm.grab()
    arm.run_until_idle(FRAME)
    after = arm.snapshot()
    assert before.visual_board == (("A", "B"),)
    assert before.visual_held_block is None
    assert after.visual_board == (("A",),)
    assert after.visual_held_block == "B"


def test_snapshot_reflects_visual_not_logical_state():
    arm = make_arm([["A", "B"]])
    arm.grab()
    snap = arm.snapshot()
    assert snap.visual_board == (("A", "B"),)
    assert snap.visual_held_block is None
    assert arm.scan() == "B"
