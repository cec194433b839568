"""Thermometer rule: digits rise from the bulb towards the tip."""

from __future__ import annotations

from collections.abc import Iterable

from .grid import Board, Constraint

Cell = tuple[int, int]


class Thermometers(Constraint):
    """Digits along each thermometer increase from the bulb (first cell).

    With ``strict`` (the default) every filled cell must be greater than the
    filled cells before it. Otherwise equal neighbours are allowed
    (non-decreasing, "slow" thermometers). Empty cells are skipped, so a
    digit is compared with the nearest filled cells on either side.
    """

    def __init__(self, thermometers: Iterable[Iterable[Iterable[int]]], strict: bool = True):
        self.thermometers: tuple[tuple[Cell, ...], ...] = tuple(
            tuple((int(r), int(c)) for r, c in thermo) for thermo in thermometers
        )
        self.strict = bool(strict)

    def __repr__(self) -> str:
        return f"Thermometers({list(self.thermometers)!r}, strict={self.strict})"

    def _ordered(self, low: int, high: int) -> bool:
        return low < high if self.strict else low <= high

    def allows(self, board: Board, row: int, col: int, num: int) -> bool:
        here = (row, col)
        for thermo in self.thermometers:
            if here not in thermo:
                continue
            last = None
            for i, (r, c) in enumerate(thermo):
                if (r, c) == here:
                    value = num
                elif board[r][c]:
                    value = board[r][c]
                else:
                    continue
                following = next(
                    (board[nr][nc] for nr, nc in thermo[i + 1:] if board[nr][nc]),
                    None,
                )
                if last is not None and not self._ordered(last, value):
                    return False
                if following is not None and not self._ordered(value, following):
                    return False
                last = value
        return True