"""Solvers for a collection of small daily programming puzzles."""

__version__ = "1.0.0"

__all__ = [
    "adapters",
    "calories",
    "handheld",
    "navigation",
    "rps",
    "seating",
    "xmas",
]