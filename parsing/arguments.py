"""
Command-line interpretation: argv -> two Line objects + AngleSettings.

This module provides:
    • build_parser()
    • split_at_terminator(argv) / separate_options(argv)
    • parse_arguments(argv)

Validation order:
    1. option errors, mode conflicts, positional count  -> UsageError
    2. --subtract90 without an angle mode               -> UsageError
    3. the six numeric tokens, in order x1 .. m2        -> ParseError
"""

import argparse
import sys
from typing import List, Sequence, Tuple

from config import PROGRAM_NAME, ARGUMENT_NAMES, EXIT_OK, get_help_text
from models.angle_mode import AngleMode, AngleSettings
from models.errors import UsageError
from models.line import Line
from utils.floats import is_float_literal, parse_float_token


INVALID_USAGE_MESSAGE = "Invalid usage, try --help"
OPTIONS_TERMINATOR = "--"


# ---------------------------------------------------------------------
#  ARGPARSE PLUMBING
# ---------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on errors; this tool reports usage as 1."""

    def error(self, message):
        raise UsageError(INVALID_USAGE_MESSAGE)


class _HelpAction(argparse.Action):
    """Prints the help text and exits before anything else is validated."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print(get_help_text(parser.prog))
        parser.exit(EXIT_OK)


class _SetAngleMode(argparse.Action):
    """
    Set-once guard for the angle mode: a second mode flag (even the same
    one again) flags the namespace as conflicting instead of overriding.
    """

    def __init__(self, option_strings, dest, const=None, **kwargs):
        super().__init__(option_strings, dest, nargs=0, const=const, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not AngleMode.GRADIENT:
            namespace.conflicting_modes = True
        else:
            setattr(namespace, self.dest, self.const)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [OPTION]... x1 y1 m1 x2 y2 m2",
        add_help=False,
    )

    parser.add_argument("-h", "--help", action=_HelpAction, help="Shows help text")
    parser.add_argument(
        "-s",
        "--subtract90",
        dest="subtract_right_angle",
        action="store_true",
        help="Subtract 90° from the gradient",
    )
    parser.add_argument(
        "-d",
        "--degrees",
        dest="angle_mode",
        action=_SetAngleMode,
        const=AngleMode.DEGREES,
        help="Use degrees for the gradient",
    )
    parser.add_argument(
        "-r",
        "--radians",
        dest="angle_mode",
        action=_SetAngleMode,
        const=AngleMode.RADIANS,
        help="Use radians for the gradient",
    )
    parser.set_defaults(angle_mode=AngleMode.GRADIENT, conflicting_modes=False)
    return parser


# ---------------------------------------------------------------------
#  INTERPRETATION
# ---------------------------------------------------------------------

def split_at_terminator(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Splits argv at the first '--'. Everything after it is positional,
    even tokens that look like options ('-1e5', '-h').
    """
    argv = list(argv)
    if OPTIONS_TERMINATOR in argv:
        index = argv.index(OPTIONS_TERMINATOR)
        return argv[:index], argv[index + 1:]
    return argv, []


def is_option(token: str) -> bool:
    """
    Flags start with '-'. Tokens spelled as numbers ('-1', '-1e5',
    '-0x1') and a lone '-' are positionals.
    """
    return token.startswith("-") and token != "-" and not is_float_literal(token)


def separate_options(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Splits argv into (options, positionals), keeping the order of each,
    so flags may appear anywhere among the numbers.
    """
    option_args, trailing = split_at_terminator(argv)
    options = [token for token in option_args if is_option(token)]
    positionals = [token for token in option_args if not is_option(token)]
    return options, positionals + trailing


def parse_arguments(argv=None) -> Tuple[Line, Line, AngleSettings]:
    """
    Interprets argv (without the program name; defaults to sys.argv[1:]).

    Options may appear anywhere among the positionals. Negative numbers
    need no '--'; after '--' every token is positional.

    Returns:
        (line1, line2, settings) with both slopes already resolved

    Raises:
        UsageError, ParseError
    """
    if argv is None:
        argv = sys.argv[1:]
    options, coordinates = separate_options(argv)

    parser = build_parser()
    args = parser.parse_args(options)

    if args.conflicting_modes or len(coordinates) != len(ARGUMENT_NAMES):
        raise UsageError(INVALID_USAGE_MESSAGE)

    # rejects --subtract90 in gradient mode before any number is read
    settings = AngleSettings(args.angle_mode, args.subtract_right_angle)

    x1, y1, m1, x2, y2, m2 = [
        parse_float_token(name, token)
        for name, token in zip(ARGUMENT_NAMES, coordinates)
    ]

    line1 = Line.from_input(x1, y1, m1, settings)
    line2 = Line.from_input(x2, y2, m2, settings)
    return line1, line2, settings
