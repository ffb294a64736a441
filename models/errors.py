"""
Error types raised by the pipeline.

Each error carries the process exit status that main.py reports for it.
"""

from config import EXIT_USAGE, EXIT_BAD_NUMBER, EXIT_GEOMETRY


class IntersectError(Exception):
    """Base class for every terminal error of the tool."""

    exit_code = EXIT_USAGE


class UsageError(IntersectError):
    """Wrong argument count, unknown option or conflicting flags."""

    exit_code = EXIT_USAGE


class ParseError(IntersectError):
    """A positional token is not a finite floating point number."""

    exit_code = EXIT_BAD_NUMBER

    def __init__(self, name: str, token: str):
        self.name = name
        self.token = token
        super().__init__(f"{name}: {token}: not a valid floating point number")


class GeometryError(IntersectError):
    exit_code = EXIT_GEOMETRY


class ParallelLinesError(GeometryError):
    def __init__(self, message: str = "Lines cannot be parallel"):
        super().__init__(message)


class InvalidIntersectionError(GeometryError):
    def __init__(self, message: str = "Error calculating intersection"):
        super().__init__(message)
