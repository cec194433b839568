"""Region rules: killer cages, palindromes and quadruples."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .grid import Board, Constraint

Cell = tuple[int, int]


def _cells(cells: Iterable[Iterable[int]]) -> tuple[Cell, ...]:
    return tuple((int(r), int(c)) for r, c in cells)


class Cages(Constraint):
    """Killer cages: no repeated digit, and a full cage adds up to its total.

    The check looks at the digits already on the board; the candidate digit
    itself is not taken into account.
    """

    def __init__(self, cages: Iterable[tuple[Iterable[Iterable[int]], int]]):
        self.cages = tuple((_cells(cells), int(total)) for cells, total in cages)

    def __repr__(self) -> str:
        return f"Cages({list(self.cages)!r})"

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        for cells, total in self.cages:
            filled = [board[r][c] for r, c in cells if board[r][c]]
            if len(set(filled)) != len(filled):
                return False
            if len(filled) == len(cells) and sum(filled) != total:
                return False
        return True


class Palindromes(Constraint):
    """Lines that read the same from either end."""

    def __init__(self, lines: Iterable[Iterable[Iterable[int]]]):
        self.lines = tuple(_cells(line) for line in lines)

    def __repr__(self) -> str:
        return f"Palindromes({list(self.lines)!r})"

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        here = (row, col)
        for line in self.lines:
            half = len(line) // 2
            for first, mirror in zip(line[:half], reversed(line)):
                if here not in (first, mirror):
                    continue
                for r, c in (mirror, first):
                    value = board[r][c]
                    if value and value != num:
                        return False
        return True


class Quadruples(Constraint):
    """Digits listed on a group of cells must all appear in those cells."""

    def __init__(self, quads: Iterable[tuple[Iterable[Iterable[int]], Iterable[int]]]):
        self.quads = tuple(
            (_cells(cells), tuple(int(v) for v in values)) for cells, values in quads
        )

    def __repr__(self) -> str:
        return f"Quadruples({list(self.quads)!r})"

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        here = (row, col)
        for cells, values in self.quads:
            if here not in cells:
                continue
            seen = [num if cell == here else board[cell[0]][cell[1]] for cell in cells]
            wildcards = seen.count(0)
            missing = Counter(values) - Counter(seen)
            if sum(missing.values()) > wildcards:
                return False
        return True