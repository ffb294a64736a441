"""
Parsing Package

Turns the command line into Line objects and angle settings.
"""

from .arguments import build_parser, parse_arguments

__all__ = [
    "build_parser",
    "parse_arguments",
]
