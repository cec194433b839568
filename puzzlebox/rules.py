"""Cell-relation rules: anti-king, anti-knight, disjoint groups, kropki and XV."""

from __future__ import annotations

from collections.abc import Iterable

from .grid import BOX, SIZE, Board, Constraint

_KING_MOVES = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

_KNIGHT_MOVES = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)


def _reachable_holds(board: Board, row: int, col: int, num: int, moves) -> bool:
    for dr, dc in moves:
        r, c = row + dr, col + dc
        if 0 <= r < SIZE and 0 <= c < SIZE and board[r][c] == num:
            return True
    return False


class AntiKing(Constraint):
    """No digit may repeat a king's move away."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        return not _reachable_holds(board, row, col, num, _KING_MOVES)


class AntiKnight(Constraint):
    """No digit may repeat a knight's move away."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        return not _reachable_holds(board, row, col, num, _KNIGHT_MOVES)


class Disjoint(Constraint):
    """Cells in the same position of every 3x3 box hold different digits."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        return not any(
            board[row % BOX + BOX * r][col % BOX + BOX * c] == num
            for r in range(BOX)
            for c in range(BOX)
        )


class _PairRule(Constraint):
    """Rules given by marks between two cells: (row1, col1, row2, col2, kind).

    The first mark touching the cell whose partner is filled decides the result.
    """

    def __init__(self, marks: Iterable[tuple[int, int, int, int, str]]):
        self.marks = tuple(
            (int(r1), int(c1), int(r2), int(c2), str(kind))
            for r1, c1, r2, c2, kind in marks
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.marks)!r})"

    def _deciding_mark(
        self, board: Board, row: int, col: int
    ) -> tuple[str, int] | None:
        """Return the kind and partner digit of the first mark that decides."""
        for r1, c1, r2, c2, kind in self.marks:
            if (row, col) == (r1, c1):
                other = board[r2][c2]
            elif (row, col) == (r2, c2):
                other = board[r1][c1]
            else:
                continue
            if other:
                return kind, other
        return None


class Kropki(_PairRule):
    """White dots join consecutive digits; black dots join a digit and its double."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        found = self._deciding_mark(board, row, col)
        if found is None:
            return True
        kind, other = found
        if kind == "W":
            return abs(num - other) == 1
        if kind == "B":
            return num * 2 == other or other * 2 == num
        return False


class XVSum(_PairRule):
    """An X joins digits summing to 10; a V joins digits summing to 5."""

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        found = self._deciding_mark(board, row, col)
        if found is None:
            return True
        kind, other = found
        if kind == "X":
            return num + other == 10
        if kind == "V":
            return num + other == 5
        return False