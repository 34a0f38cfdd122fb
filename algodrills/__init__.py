"""Counting, sequence and binary-search puzzles as plain Python functions, with a small CLI."""

__version__ = "0.1.0"
__all__ = ["__version__"]