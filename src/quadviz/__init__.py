"""Quadrant visualization of player performance metrics."""

__version__ = "0.1.0"
