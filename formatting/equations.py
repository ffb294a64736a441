"""
Text rendering of lines and intersection results.

This module provides:
    • format_slope_coefficient(line, settings)
    • format_line(line, settings)
    • format_intersection(result)
    • render_report(line1, line2, result, settings)

Lines are printed in the form that was actually solved, e.g.

    y=x
    y=0.5*(x-3)+2
    y=tan(30°-90°)*(x+1)
    y=-4
"""

from typing import List

from config import DEGREE_SIGN, SUBTRACT_DEGREES_LABEL, SUBTRACT_RADIANS_LABEL
from models.angle_mode import AngleMode, AngleSettings
from models.intersection import IntersectionResult
from models.line import Line
from utils.floats import format_float, format_signed


# ---------------------------------------------------------------------
#  LINE EQUATIONS
# ---------------------------------------------------------------------

def format_slope_coefficient(line: Line, settings: AngleSettings) -> str:
    """
    The slope factor as the user typed it, wrapped in tan(...) for angle
    input so the printed equation stays exact.
    """
    text = format_float(line.slope_input)
    if not settings.is_angle:
        return text

    if settings.mode is AngleMode.DEGREES:
        text += DEGREE_SIGN
    if settings.subtract_right_angle:
        if settings.mode is AngleMode.DEGREES:
            text += SUBTRACT_DEGREES_LABEL
        else:
            text += SUBTRACT_RADIANS_LABEL

    return f"tan({text})"


def format_line(line: Line, settings: AngleSettings) -> str:
    """
    Renders y = m*(x - x0) + y0, dropping every term that is neutral:

        slope 0      -> y=<y0>
        slope 1      -> no coefficient
        x0 == 0      -> bare x
        y0 == 0      -> no constant
    """
    if line.is_flat:
        return "y=" + format_float(line.offset_y)

    parts = ["y="]
    if line.slope != 1:
        parts.append(format_slope_coefficient(line, settings))
        parts.append("*")

    if line.offset_x != 0:
        parts.append(f"(x{format_signed(-line.offset_x)})")
    else:
        parts.append("x")

    if line.offset_y != 0:
        parts.append(format_signed(line.offset_y))

    return "".join(parts)


# ---------------------------------------------------------------------
#  RESULT
# ---------------------------------------------------------------------

def format_intersection(result: IntersectionResult) -> List[str]:
    x, y = (format_float(value) for value in result.as_tuple())
    return [
        f"x = {x}",
        f"y = {y}",
        f"({x}, {y})",
    ]


def render_report(
    line1: Line,
    line2: Line,
    result: IntersectionResult,
    settings: AngleSettings,
) -> str:
    """
    Full output block: both equations, then the coordinates.
    """
    lines = [
        format_line(line1, settings),
        format_line(line2, settings),
    ]
    lines.extend(format_intersection(result))
    return "\n".join(lines)
