"""
Intersection of two lines given in point-slope form.

Setting both equations equal and solving for x:

    m1*(x-x1) + y1 = m2*(x-x2) + y2
    x*(m1-m2) - m1*x1 + m2*x2 = y2 - y1
    x = (y2 - y1 - m2*x2 + m1*x1) / (m1-m2)

which needs m1 != m2: parallel lines never intersect.
"""

from models.errors import ParallelLinesError, InvalidIntersectionError
from models.intersection import IntersectionResult
from models.line import Line
from utils.floats import FloatClass, classify_float


def gradient_difference(line1: Line, line2: Line) -> float:
    """
    Returns m1 - m2, raising if it cannot be divided by.

    Raises:
        ParallelLinesError: the difference is exactly zero (either sign).
        InvalidIntersectionError: the difference is infinite, NaN or
            subnormal, e.g. because one gradient came from a 90° angle.
    """
    diff = line1.slope - line2.slope

    match classify_float(diff):
        case FloatClass.NORMAL:
            return diff
        case FloatClass.ZERO:
            raise ParallelLinesError()
        case _:
            raise InvalidIntersectionError()


def solve_intersection(line1: Line, line2: Line) -> IntersectionResult:
    """
    Closed-form intersection of line1 and line2.

    Returns:
        IntersectionResult with the crossing point
    """
    diff = gradient_difference(line1, line2)

    m1, x1, y1 = line1.slope, line1.offset_x, line1.offset_y
    m2, x2, y2 = line2.slope, line2.offset_x, line2.offset_y

    x = (y2 - y1 - m2 * x2 + m1 * x1) / diff
    # substitute back into the first equation
    y = line1.y_at(x)

    return IntersectionResult(x=x, y=y)
