"""Solver for the push_swap stack-sorting puzzle."""

__version__ = "1.0.0"