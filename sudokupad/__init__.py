"""A pygame Sudoku game with a unique-solution puzzle generator."""

__version__ = "1.0.0"
__all__ = ["__version__"]