"""
Floating point helpers shared by the interpreter, solver and formatter.

This module provides:
    • FloatClass / classify_float(value)
    • is_float_literal(token)
    • parse_float_token(name, token)
    • format_float(value)
    • format_signed(value)

Classification follows the IEEE-754 categories (zero, subnormal, normal,
infinite, NaN) instead of epsilon comparisons, so an exact zero and a tiny
nonzero difference are never confused.
"""

import math
import re
from enum import Enum

import numpy as np

from models.errors import ParseError


# Smallest positive normal double
SMALLEST_NORMAL = float(np.finfo(np.float64).tiny)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_LITERAL = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)


# -------------------------------------------------------------------------
#  CLASSIFICATION
# -------------------------------------------------------------------------

class FloatClass(Enum):
    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"
    INFINITE = "infinite"
    NAN = "nan"


def classify_float(value: float) -> FloatClass:
    """
    Returns the IEEE-754 category of value. Both signed zeros are ZERO.
    """
    if math.isnan(value):
        return FloatClass.NAN
    if math.isinf(value):
        return FloatClass.INFINITE
    if value == 0:
        return FloatClass.ZERO
    if abs(value) < SMALLEST_NORMAL:
        return FloatClass.SUBNORMAL
    return FloatClass.NORMAL


# -------------------------------------------------------------------------
#  PARSING
# -------------------------------------------------------------------------

def _literal_value(token: str):
    """Value of a decimal or hexadecimal literal, or None if token is neither."""
    if _DECIMAL_LITERAL.fullmatch(token):
        return float(token)
    if _HEX_LITERAL.fullmatch(token):
        try:
            return float.fromhex(token)
        except OverflowError:
            return math.inf
    return None


def is_float_literal(token: str) -> bool:
    """True if token is spelled as a decimal or hexadecimal number."""
    return _literal_value(token) is not None


def parse_float_token(name: str, token: str) -> float:
    """
    Parses one positional token into a float.

    Only normal numbers and zero are accepted: text that is not a complete
    literal, infinities, NaN, overflowing literals and subnormal values all
    raise ParseError naming the argument (x1, y1, ...) and the token.
    """
    value = _literal_value(token)
    if value is None:
        raise ParseError(name, token)

    if classify_float(value) not in (FloatClass.NORMAL, FloatClass.ZERO):
        raise ParseError(name, token)

    return value


# -------------------------------------------------------------------------
#  FORMATTING
# -------------------------------------------------------------------------

def format_float(value: float) -> str:
    """
    Shortest text that parses back to exactly the same double.

    Integral values drop the trailing '.0' so they read like printf's %g:
        1.0 -> '1', -0.0 -> '-0', 0.1 -> '0.1', 1e16 -> '1e+16'
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_signed(value: float) -> str:
    """Like format_float, with an explicit '+' for non-negative values."""
    text = format_float(value)
    if not text.startswith("-"):
        text = "+" + text
    return text
