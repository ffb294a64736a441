"""
Formatting Tools

Renders line equations and intersection coordinates as text.
"""

from .equations import (
    format_slope_coefficient,
    format_line,
    format_intersection,
    render_report,
)

__all__ = [
    "format_slope_coefficient",
    "format_line",
    "format_intersection",
    "render_report",
]
