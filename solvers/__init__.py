"""
Solvers Package

Contains the intersection solver for two point-slope lines.
"""

from .intersection_solver import gradient_difference, solve_intersection

__all__ = [
    "gradient_difference",
    "solve_intersection",
]
