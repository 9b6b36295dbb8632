import random

from robot_arm.events.bus import EVENT_ANIMATION_START, EVENT_DROP_REJECTED
from robot_arm.world import get_animation_queue
from tests.helpers import collect_events, make_arm


def _kinds(arm):
    return [task.kind for task in get_animation_queue(arm.world).tasks]


def test_grab_then_drop_without_colored_columns():
    arm = make_arm([["A", "B"]])
    arm.grab()
    assert arm.scan() == "B"
    assert arm.logical.board.as_tuples() == (("A",),)
    assert arm.drop() is True
    assert arm.logical.board.as_tuples() == (("A", "B"),)
    assert arm.scan() is None
    assert _kinds(arm) == ["grab", "drop"]


def test_mismatched_drop_is_undone():
    arm = make_arm([["blue"], []], color_assignment={1: "red"})
    rejected = collect_events(arm.event_bus, EVENT_DROP_REJECTED)
    arm.grab()
    arm.move_right()
    assert arm.drop() is False
    assert arm.logical.board.as_tuples() == ((), ())
    assert arm.scan() == "blue"
    assert rejected == [{"column": 1, "block": "blue", "expected": "red"}]
    # The undo is a real re-grab, so the visual arm dips twice at column 1.
    assert _kinds(arm) == ["grab", "move_right", "drop", "grab"]


def test_matching_drop_is_accepted():
    arm = make_arm([["red"], []], color_assignment={1: "red"})
    arm.grab()
    arm.move_right()
    assert arm.drop() is True
    assert arm.logical.board.as_tuples() == ((), ("red",))
    assert arm.scan() is None


def test_drop_into_uncolored_column_is_rejected_when_colors_exist():
    arm = make_arm([["red"], [], []], color_assignment={2: "red"})
    arm.grab()
    arm.move_right()
    assert arm.drop() is False
    assert arm.scan() == "red"


def test_drop_with_nothing_held_still_dips():
    arm = make_arm([[], []], color_assignment={1: "red"})
    assert arm.drop() is True
    assert arm.logical.board.as_tuples() == ((), ())
    assert _kinds(arm) == ["drop"]


def test_snap_removes_snap_color_everywhere():
    gray = "gray"
    arm = make_arm(
        [["red", gray, "blue"], [gray, gray], ["green", gray]],
        snap_color=gray,
    )
    arm.snap()
    assert arm.logical.board.as_tuples() == (("red", "blue"), (), ("green",))
    assert _kinds(arm) == ["snap"]


def test_snap_ignored_while_holding():
    arm = make_arm([["gray", "red"], ["gray"]], snap_color="gray")
    arm.grab()
    arm.snap()
    assert arm.logical.board.as_tuples() == (("gray",), ("gray",))
    assert _kinds(arm) == ["grab"]


def test_snap_without_snap_color_does_nothing():
    arm = make_arm([["gray"]])
    arm.snap()
    assert arm.logical.board.as_tuples() == (("gray",),)
    assert _kinds(arm) == []


def test_back_to_back_moves_update_logical_index_immediately():
    arm = make_arm([[], [], [], []])
    arm.move_right()
    arm.move_right()
    assert arm.logical.arm.column == 2
    assert arm.visual.arm.column == 0
    assert _kinds(arm) == ["move_right", "move_right"]


def test_move_right_at_last_column_is_a_no_op():
    arm = make_arm([["A"], ["B"]], arm_column=1)
    before = arm.logical.board.as_tuples()
    arm.move_right()
    assert arm.logical.arm.column == 1
    assert arm.logical.board.as_tuples() == before
    assert _kinds(arm) == []


def test_move_left_at_first_column_is_a_no_op():
    arm = make_arm([[], []])
    arm.move_left()
    assert arm.logical.arm.column == 0
    assert _kinds(arm) == []


def test_grab_on_empty_column_queues_animation_but_holds_nothing():
    arm = make_arm([[]])
    arm.grab()
    assert arm.scan() is None
    assert _kinds(arm) == ["grab"]


def test_second_grab_is_rejected_by_logical_hold():
    arm = make_arm([["A", "B"]])
    starts = collect_events(arm.event_bus, EVENT_ANIMATION_START)
    arm.grab()
    arm.grab()
    assert arm.scan() == "B"
    assert arm.logical.board.as_tuples() == (("A",),)
    assert [s["kind"] for s in starts] == ["grab"]


def test_queries_do_not_queue_animations():
    arm = make_arm([["A"]], color_assignment={0: "red"})
    arm.scan()
    arm.scan_block()
    arm.scan_column()
    assert _kinds(arm) == []


def test_scan_column_returns_assigned_color():
    arm = make_arm([[], []], color_assignment={1: "red"})
    assert arm.scan_column() is None
    arm.move_right()
    assert arm.scan_column() == "red"
    assert arm.scan_column() == "red"


def test_consume_on_first_scan():
    arm = make_arm([[], [], []], color_assignment={1: "red", 2: "blue"}, consume_column_scan=True)
    arm.move_right()
    assert arm.scan_column() == "red"
    assert arm.scan_column() is None
    arm.move_right()
    assert arm.scan_column() == "blue"
    arm.move_left()
    assert arm.scan_column() is None


def test_block_count_conserved_under_grab_and_drop():
    arm = make_arm([["a", "b", "c"], ["d"], [], ["e", "f"]], color_assignment={2: "a"})
    rng = random.Random(1234)
    commands = [arm.move_left, arm.move_right, arm.grab, arm.drop]

    def total():
        held = 1 if arm.scan() is not None else 0
        return arm.logical.board.total_blocks() + held

    start = total()
    for _ in range(300):
        rng.choice(commands)()
        assert total() == start
        assert 0 <= arm.logical.arm.column <= 3


def test_set_board_gives_independent_copies():
    arm = make_arm([[], []])
    source = [["A"], ["B", "C"]]
    arm.set_board(source)
    source[1].append("D")
    assert arm.logical.board.as_tuples() == (("A",), ("B", "C"))
    assert arm.visual.board.as_tuples() == (("A",), ("B", "C"))
    assert arm.logical.board.columns[0] is not arm.visual.board.columns[0]
    arm.grab()
    assert arm.visual.board.as_tuples() == (("A",), ("B", "C"))
