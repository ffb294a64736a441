import pytest

from models.angle_mode import AngleMode
from models.errors import UsageError, ParseError
from parsing.arguments import parse_arguments, separate_options, split_at_terminator


def test_six_numbers_in_gradient_mode():
    line1, line2, settings = parse_arguments(["0", "0", "1", "1", "0", "2"])

    assert settings.mode is AngleMode.GRADIENT
    assert not settings.subtract_right_angle
    assert (line1.offset_x, line1.offset_y, line1.slope) == (0.0, 0.0, 1.0)
    assert (line2.offset_x, line2.offset_y, line2.slope) == (1.0, 0.0, 2.0)


@pytest.mark.parametrize(
    "token, expected",
    [("-1", -1.0), ("-0.5", -0.5), ("-.5", -0.5), ("-1e5", -1e5), ("-0x1", -1.0)],
)
def test_negative_numbers_without_terminator(token, expected):
    _, line2, _ = parse_arguments(["0", "0", "1", "0", "0", token])
    assert line2.slope_input == expected


def test_negative_exponent_among_flags():
    line1, _, settings = parse_arguments(["0", "-2.5E2", "-d", "-1e1", "0", "0", "0"])
    assert settings.mode is AngleMode.DEGREES
    assert line1.offset_y == -250.0
    assert line1.slope_input == -10.0


def test_separate_options_keeps_order():
    assert separate_options(["-d", "1", "-1e5", "-s", "-", "--", "-h"]) == (
        ["-d", "-s"],
        ["1", "-1e5", "-", "-h"],
    )


def test_terminator_in_the_middle():
    _, line2, _ = parse_arguments(["0", "0", "1", "--", "0", "0", "-1"])
    assert line2.slope == -1.0


def test_terminator_allows_option_like_numbers():
    line1, _, _ = parse_arguments(["--", "0", "0", "-1e5", "0", "0", "1"])
    assert line1.slope_input == -1e5


def test_split_at_terminator():
    assert split_at_terminator(["-d", "1", "--", "-2", "--"]) == (["-d", "1"], ["-2", "--"])
    assert split_at_terminator(["1", "2"]) == (["1", "2"], [])


@pytest.mark.parametrize(
    "argv",
    [
        ["-d", "0", "0", "45", "0", "0", "-45"],
        ["0", "0", "45", "0", "0", "-45", "-d"],
        ["0", "0", "--degrees", "45", "0", "0", "-45"],
    ],
)
def test_degrees_flag_anywhere(argv):
    line1, line2, settings = parse_arguments(argv)
    assert settings.mode is AngleMode.DEGREES
    assert line1.slope_input == 45.0
    assert line1.slope == 1.0
    assert line2.slope == -1.0


def test_radians_with_subtraction():
    _, _, settings = parse_arguments(["-r", "-s", "0", "0", "1", "0", "0", "2"])
    assert settings.mode is AngleMode.RADIANS
    assert settings.subtract_right_angle


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "1", "0", "0", "2", "3"],
        ["-d", "-r", "0", "0", "1", "0", "0", "2"],
        ["-d", "-d", "0", "0", "1", "0", "0", "2"],
        ["--radians", "--degrees", "0", "0", "1", "0", "0", "2"],
        ["-x", "0", "0", "1", "0", "0", "2"],
        ["--bogus", "0", "0", "1", "0", "0", "2"],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(argv)
    assert str(excinfo.value) == "Invalid usage, try --help"
    assert excinfo.value.exit_code == 1


def test_subtract_without_angle_mode_rejected_before_numbers():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(["-s", "0", "0", "abc", "0", "0", "1"])
    assert str(excinfo.value) == "--subtract90 requires --radians or --degrees"


def test_wrong_count_rejected_before_numbers():
    with pytest.raises(UsageError):
        parse_arguments(["abc", "0", "1"])


@pytest.mark.parametrize(
    "position, name",
    [(0, "x1"), (1, "y1"), (2, "m1"), (3, "x2"), (4, "y2"), (5, "m2")],
)
def test_parse_error_names_argument(position, name):
    argv = ["0", "0", "1", "0", "0", "2"]
    argv[position] = "1.5x"

    with pytest.raises(ParseError) as excinfo:
        parse_arguments(argv)

    assert excinfo.value.name == name
    assert str(excinfo.value) == f"{name}: 1.5x: not a valid floating point number"
    assert excinfo.value.exit_code == 2


def test_first_bad_token_is_reported():
    with pytest.raises(ParseError) as excinfo:
        parse_arguments(["0", "nan", "1", "inf", "0", "2"])
    assert excinfo.value.name == "y1"


@pytest.mark.parametrize(
    "argv",
    [
        ["-h"],
        ["--help", "0", "0"],
        ["-d", "-r", "-h"],
        ["-s", "--help"],
    ],
)
def test_help_exits_successfully(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(argv)

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: intersect [OPTION]... x1 y1 m1 x2 y2 m2")
    assert "-s --subtract90" in out
