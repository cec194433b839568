"""Board helpers and the constraint interface shared by every rule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)
SEPARATOR = "-" * 21

Board = Sequence[Sequence[int]]


def empty_board() -> list[list[int]]:
    """Return a fresh 9x9 board with every cell empty (zero)."""
    return [[0] * SIZE for _ in range(SIZE)]


def format_board(board: Board) -> str:
    """Render a board as text with box separators, one line per row."""
    lines = []
    for i, row in enumerate(board):
        if i and i % BOX == 0:
            lines.append(SEPARATOR)
        parts = []
        for j, value in enumerate(row):
            if j and j % BOX == 0:
                parts.append("| ")
            parts.append(f"{value} ")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


class Constraint(ABC):
    """A rule that decides whether a digit may go into a cell."""

    @abstractmethod
    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        """Return True if ``num`` may be placed at ``(row, col)``."""

    def candidates(self, board: Board, row: int, col: int) -> list[int]:
        """Return the digits 1-9 this rule allows at ``(row, col)``, ascending."""
        return [num for num in DIGITS if self.allows(board, row, col, num)]


class Classic(Constraint):
    """Standard rule: no repeated digit in a row, column or 3x3 box."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        if num in board[row]:
            return False
        if any(board[r][col] == num for r in range(SIZE)):
            return False
        top, left = row - row % BOX, col - col % BOX
        return not any(
            board[top + r][left + c] == num for r in range(BOX) for c in range(BOX)
        )