"""
Angle-to-gradient conversion.

This module provides:
    • tan_degrees(angle)
    • resolve_slope(slope_input, settings)
"""

import math

import numpy as np

from config import RIGHT_ANGLE_DEGREES, HALF_TURN_DEGREES
from models.angle_mode import AngleMode, AngleSettings


# ----------------------------------------------------------------------
#  TANGENT OF AN ANGLE IN DEGREES
# ----------------------------------------------------------------------

def tan_degrees(angle: float) -> float:
    """
    Tangent of an angle given in degrees.

    Multiples of 45° are answered exactly: 0, ±1, or ±inf for odd multiples
    of 90°. Going through radians first would turn 90° into a huge but
    finite gradient and 45° into 0.9999999999999999.
    """
    # fmod is exact, so the special angles are recognised without rounding
    reduced = math.fmod(angle, HALF_TURN_DEGREES)
    magnitude = abs(reduced)

    if magnitude == 0:
        return 0.0
    if magnitude == RIGHT_ANGLE_DEGREES:
        return math.copysign(math.inf, reduced)
    if magnitude == RIGHT_ANGLE_DEGREES / 2:
        return math.copysign(1.0, reduced)
    if magnitude == RIGHT_ANGLE_DEGREES * 1.5:
        return -math.copysign(1.0, reduced)

    return float(np.tan(np.deg2rad(reduced)))


# ----------------------------------------------------------------------
#  SLOPE RESOLUTION
# ----------------------------------------------------------------------

def resolve_slope(slope_input: float, settings: AngleSettings) -> float:
    """
    Converts a raw slope token into the gradient dy/dx used by the solver.

        GRADIENT: unchanged
        DEGREES:  tan(slope_input [- 90°])
        RADIANS:  tan(slope_input [- π/2])

    The result can be infinite (e.g. 90°); the solver classifies that.
    """
    match settings.mode:
        case AngleMode.DEGREES:
            tangent = tan_degrees(slope_input)
            if not settings.subtract_right_angle:
                return tangent
            # tan(a - 90°) = -1/tan(a); subtracting 90 first would round
            # tiny angles onto -90° exactly
            if tangent == 0:
                return -math.inf
            return -1.0 / tangent

        case AngleMode.RADIANS:
            angle = slope_input
            if settings.subtract_right_angle:
                angle -= np.pi / 2
            return float(np.tan(angle))

        case _:
            return slope_input
