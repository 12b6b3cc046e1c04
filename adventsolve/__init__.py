"""Solvers for nine days of daily programming puzzles, with a command line in adventsolve.cli."""

__version__ = "0.1.0"