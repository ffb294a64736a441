"""
Line Intersection Tool

Finds where two straight lines given in point-slope form cross, including:

- Command-line interpretation (gradient, degree or radian slopes)
- Angle-to-gradient conversion
- Closed-form intersection with parallel / invalid detection
- Equation and coordinate formatting
"""
__all__ = [
    "config",
    "main",
    "formatting",
    "models",
    "parsing",
    "solvers",
    "utils",
]
