"""Deduction-only solving: fill cells that have exactly one candidate."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .grid import SIZE, Board, Constraint

Grid = list[list[int]]

_CELLS = tuple((r, c) for r in range(SIZE) for c in range(SIZE))


@dataclass(frozen=True)
class Step:
    """One deduction: ``value`` was written into ``(row, col)``."""

    row: int
    col: int
    value: int


def _copy(board: Board) -> Grid:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    for row in grid:
        for value in row:
            if not isinstance(value, int) or not 0 <= value <= SIZE:
                raise ValueError(f"cell values must be integers 0-{SIZE}, got {value!r}")
    return grid


def _candidates(
    grid: Grid, rules: Sequence[Constraint], row: int, col: int
) -> tuple[int, ...]:
    """Digits allowed at the cell by every rule; none when there are no rules."""
    counts = Counter(num for rule in rules for num in rule.candidates(grid, row, col))
    return tuple(num for num in sorted(counts) if counts[num] == len(rules))


def solve_logically(
    board: Board, constraints: Iterable[Constraint]
) -> tuple[Grid, list[Step]]:
    """Fill the board by deduction alone, without guessing.

    Cells are scanned in reading order, pass after pass. A cell whose
    candidates (the digits every rule allows) come down to one is filled at
    once, so later cells in the same pass already see it. The scan stops when
    the board is full, when a pass learns nothing new, or as soon as an empty
    cell has no candidate at all.

    Returns the resulting grid and the steps taken, in order. The given
    board is left unchanged.
    """
    grid = _copy(board)
    rules = tuple(constraints)
    empty: tuple[int, ...] = ()
    logical = [[empty] * SIZE for _ in range(SIZE)]
    previous = [row[:] for row in logical]
    steps: list[Step] = []
    filled = 0
    while filled < SIZE * SIZE:
        filled = 0
        for row, col in _CELLS:
            if grid[row][col]:
                filled += 1
                continue
            options = _candidates(grid, rules, row, col)
            logical[row][col] = options
            if not options:
                return grid, steps
            if len(options) == 1:
                grid[row][col] = options[0]
                steps.append(Step(row, col, options[0]))
        if logical == previous:
            return grid, steps
        previous = [row[:] for row in logical]
    return grid, steps