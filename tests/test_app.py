import pytest

from robot_arm.app import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.level is None
    assert args.columns == 9
    assert args.rows == 8
    assert args.speed == 50


def test_parser_reads_options():
    args = build_parser().parse_args(["--level", "thanos", "--speed", "25", "--rows", "6"])
    assert args.level == "thanos"
    assert args.speed == 25.0
    assert args.rows == 6


@pytest.mark.parametrize("argv", [
    ["--rows", "0"],
    ["--columns", "0"],
    ["--columns", "-3"],
    ["--speed", "0"],
    ["--width", "0"],
    ["--rows", "many"],
])
def test_parser_rejects_non_positive_sizes(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(argv)
    assert exc.value.code == 2
    assert argv[0] in capsys.readouterr().err


def test_unknown_level_exits_before_opening_a_window():
    assert main(["--level", "exam 3", "--log-level", "WARNING"]) == 2
