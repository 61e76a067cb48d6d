"""Solvers for short contest puzzles over arrays, numbers, grids and strings, with a command line."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "cli", "games", "sequences", "text"]