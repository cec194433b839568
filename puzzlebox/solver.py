"""Backtracking search over a board with any combination of rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .grid import DIGITS, SIZE, Board, Constraint

Grid = list[list[int]]

_FORWARD = tuple((r, c) for r in range(SIZE) for c in range(SIZE))
_BACKWARD = _FORWARD[::-1]


def _grid(board: Board) -> Grid:
    """Copy a board into a fresh list of lists, checking its shape and digits."""
    rows = [list(row) for row in board]
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    for row in rows:
        for value in row:
            if not isinstance(value, int) or not 0 <= value <= SIZE:
                raise ValueError(f"cell values must be integers 0-{SIZE}, got {value!r}")
    return rows


def _first_empty(grid: Grid, order: Sequence[tuple[int, int]]) -> tuple[int, int] | None:
    return next(((r, c) for r, c in order if grid[r][c] == 0), None)


def _fits(grid: Grid, rules: Sequence[Constraint], row: int, col: int, num: int) -> bool:
    return all(rule.allows(grid, row, col, num) for rule in rules)


def _search(grid: Grid, rules: Sequence[Constraint], order) -> bool:
    cell = _first_empty(grid, order)
    if cell is None:
        return True
    row, col = cell
    for num in DIGITS:
        if _fits(grid, rules, row, col, num):
            grid[row][col] = num
            if _search(grid, rules, order):
                return True
            grid[row][col] = 0
    return False


def solve(
    board: Board, constraints: Iterable[Constraint], reverse: bool = False
) -> Grid | None:
    """Return the first solution found, or None if the board cannot be completed.

    Empty cells are filled in reading order, or from the bottom-right corner
    backwards when ``reverse`` is set. The given board is left unchanged.
    """
    grid = _grid(board)
    order = _BACKWARD if reverse else _FORWARD
    return grid if _search(grid, tuple(constraints), order) else None


def _every(grid: Grid, rules: Sequence[Constraint]) -> Iterator[Grid]:
    cell = _first_empty(grid, _FORWARD)
    if cell is None:
        yield [row[:] for row in grid]
        return
    row, col = cell
    for num in DIGITS:
        if _fits(grid, rules, row, col, num):
            grid[row][col] = num
            yield from _every(grid, rules)
            grid[row][col] = 0


def iter_solutions(board: Board, constraints: Iterable[Constraint]) -> Iterator[Grid]:
    """Yield every solution of the board, each as a new grid, in search order."""
    grid = _grid(board)
    yield from _every(grid, tuple(constraints))


def _traced(grid: Grid, rules: Sequence[Constraint], lines: list[str]) -> bool:
    cell = _first_empty(grid, _FORWARD)
    if cell is None:
        return True
    row, col = cell
    for num in DIGITS:
        if _fits(grid, rules, row, col, num):
            grid[row][col] = num
            lines.append(f"trying to place {num} at {row},{col}")
            if _traced(grid, rules, lines):
                lines.append(f"placed {num} at {row},{col}")
                return True
            lines.append(f"backtracking from {num} at {row},{col}")
            grid[row][col] = 0
    return False


def trace_solve(
    board: Board, constraints: Iterable[Constraint]
) -> tuple[Grid | None, list[str]]:
    """Solve like :func:`solve` and also return the log of every placement tried.

    Each attempt is logged as ``trying to place N at R,C``; it is later
    followed by ``backtracking from N at R,C`` if it failed, or by
    ``placed N at R,C`` (innermost first) once the board is complete.
    """
    grid = _grid(board)
    lines: list[str] = []
    solved = _traced(grid, tuple(constraints), lines)
    return (grid if solved else None), lines


@dataclass
class Puzzle:
    """A named board together with the rules that apply to it.

    ``reverse`` asks for the search to start from the bottom-right corner;
    ``find_all`` marks a puzzle meant to be searched for every solution.
    """

    name: str
    board: Board
    constraints: Sequence[Constraint]
    title: str = ""
    reverse: bool = False
    find_all: bool = False

    def __post_init__(self) -> None:
        self.board = tuple(tuple(row) for row in _grid(self.board))
        self.constraints = tuple(self.constraints)

    def solve(self) -> Grid | None:
        """Return the first solution of this puzzle, or None."""
        return solve(self.board, self.constraints, self.reverse)