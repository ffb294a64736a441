"""
Configuration file for the intersection tool.

Contains the program name, exit codes, display symbols and help text.
Per-run settings (angle mode, right-angle subtraction) are not stored here;
they travel through the pipeline as an AngleSettings value.
"""

# ---------------------------------------------------------------
# PROGRAM IDENTITY
# ---------------------------------------------------------------

PROGRAM_NAME = "intersect"


# ---------------------------------------------------------------
# EXIT CODES
# ---------------------------------------------------------------

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_NUMBER = 2
EXIT_GEOMETRY = 3


# ---------------------------------------------------------------
# POSITIONAL ARGUMENTS
# ---------------------------------------------------------------

# Order in which the six numeric tokens are read
ARGUMENT_NAMES = ("x1", "y1", "m1", "x2", "y2", "m2")


# ---------------------------------------------------------------
# ANGLES & DISPLAY SYMBOLS
# ---------------------------------------------------------------

RIGHT_ANGLE_DEGREES = 90.0
HALF_TURN_DEGREES = 180.0

DEGREE_SIGN = "°"
PI_SIGN = "π"

SUBTRACT_DEGREES_LABEL = f"-90{DEGREE_SIGN}"
SUBTRACT_RADIANS_LABEL = f"-{PI_SIGN}/2"


# ---------------------------------------------------------------
# HELP TEXT
# ---------------------------------------------------------------

HELP_LINES = [
    "Usage: {prog} [OPTION]... x1 y1 m1 x2 y2 m2",
    "put -- before the arguments if using negative numbers",
    "y = m1*(x-x1) + y1, where x1 and y1 are the offsets",
    "if you want to use regular y = m*x + c, set x1 to 0 and y1 as c",
    "m1 is the gradient",
    "same goes for x2/y2/m2",
    "-h --help: Shows help text",
    f"-s --subtract90: Subtract 90{DEGREE_SIGN} from the gradient (useful for Minecraft stronghold)",
    "-d --degrees: Use degrees for the gradient",
    "-r --radians: Use radians for the gradient",
]


def get_help_text(prog=PROGRAM_NAME):
    """
    Returns the full help text with the program name filled in.
    """
    return "\n".join(line.format(prog=prog) for line in HELP_LINES)
