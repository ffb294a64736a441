"""
Data Models

Defines the core data structures:
- AngleMode / AngleSettings
- Line
- IntersectionResult
- Error types
"""

from .angle_mode import AngleMode, AngleSettings
from .line import Line
from .intersection import IntersectionResult
from .errors import (
    IntersectError,
    UsageError,
    ParseError,
    GeometryError,
    ParallelLinesError,
    InvalidIntersectionError,
)

__all__ = [
    "AngleMode",
    "AngleSettings",
    "Line",
    "IntersectionResult",
    "IntersectError",
    "UsageError",
    "ParseError",
    "GeometryError",
    "ParallelLinesError",
    "InvalidIntersectionError",
]
