"""
Utility Functions

Provides float classification, parsing and formatting, and the
angle-to-gradient conversion used across the pipeline.
"""

from .floats import (
    FloatClass,
    classify_float,
    is_float_literal,
    parse_float_token,
    format_float,
    format_signed,
)
from .angles import tan_degrees, resolve_slope

__all__ = [
    "FloatClass",
    "classify_float",
    "is_float_literal",
    "parse_float_token",
    "format_float",
    "format_signed",
    "tan_degrees",
    "resolve_slope",
]
