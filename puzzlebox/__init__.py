"""Classic and variant sudoku solvers, a bundled puzzle collection and Wordle word-list tools."""

__version__ = "0.1.0"