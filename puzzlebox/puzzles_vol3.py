"""Variant sudoku puzzles: anti-king thermos, anti-knight thermos, cages and kropki."""

from __future__ import annotations

from .grid import Classic
from .regions import Cages
from .rules import AntiKing, AntiKnight, Kropki
from .solver import Puzzle
from .thermometers import Thermometers


def _kings_disease() -> Puzzle:
    board = (
        (5, 0, 0, 0, 6, 0, 0, 0, 9),
        (0, 6, 0, 0, 0, 0, 0, 8, 0),
        (0, 0, 3, 4, 0, 2, 1, 0, 0),
        (0, 0, 0, 0, 1, 0, 0, 0, 0),
        (4, 0, 0, 0, 0, 0, 0, 0, 5),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 2, 7, 0, 1, 5, 0, 0),
        (0, 5, 0, 0, 0, 0, 0, 7, 0),
        (7, 0, 0, 0, 0, 0, 0, 0, 8),
    )
    thermometers = (
        ((2, 2), (2, 1), (2, 0)),
        ((0, 4), (1, 4)),
        ((2, 3), (3, 3), (4, 3), (5, 3)),
        ((3, 4), (4, 4), (5, 4)),
        ((2, 5), (3, 5), (4, 5), (5, 5)),
        ((2, 6), (2, 7), (2, 8)),
        ((6, 3), (7, 2), (8, 1)),
        ((6, 5), (7, 6), (8, 7)),
    )
    return Puzzle(
        name="kingsdisease",
        title="King's Disease",
        board=board,
        constraints=(Classic(), AntiKing(), Thermometers(thermometers, strict=True)),
    )


def _knight_in_the_hot_seat() -> Puzzle:
    board = (
        (1, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 5, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 9, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 4),
        (0, 6, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 7, 0, 0),
    )
    thermometers = (
        ((1, 4), (1, 3), (2, 3), (2, 4), (2, 5), (1, 5)),
        ((2, 6), (3, 5)),
        ((4, 7), (5, 7), (5, 6), (4, 6), (3, 6), (3, 7)),
        ((7, 4), (7, 5), (6, 5), (6, 4), (6, 3), (7, 3)),
        ((4, 1), (3, 1), (3, 2), (4, 2), (5, 2), (5, 1)),
        ((2, 2), (3, 3)),
    )
    return Puzzle(
        name="knightinthehotseat",
        title="Knight in the Hot Seat",
        board=board,
        constraints=(Classic(), Thermometers(thermometers, strict=True), AntiKnight()),
    )


def _no_marks() -> Puzzle:
    board = (
        (8, 0, 0, 0, 0, 0, 0, 0, 3),
        (0, 0, 7, 0, 1, 0, 6, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1, 0, 8, 3, 0, 4, 5, 0, 2),
        (0, 5, 0, 0, 9, 0, 0, 3, 0),
        (4, 0, 3, 5, 0, 6, 8, 0, 9),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 1, 0, 4, 0, 2, 0, 0),
        (9, 0, 0, 0, 0, 0, 0, 0, 6),
    )
    cages = (
        (((0, 2), (0, 3)), 16),
        (((0, 5), (0, 6)), 3),
        (((1, 1), (1, 2)), 10),
        (((1, 6), (1, 7)), 8),
        (((2, 0), (2, 1)), 3),
        (((2, 3), (3, 3)), 7),
        (((2, 5), (3, 5)), 9),
        (((2, 7), (2, 8)), 17),
        (((5, 3), (6, 3)), 11),
        (((5, 5), (6, 5)), 13),
        (((6, 0), (6, 1)), 5),
        (((6, 7), (6, 8)), 5),
        (((7, 1), (7, 2)), 7),
        (((7, 6), (7, 7)), 10),
        (((8, 2), (8, 3)), 6),
        (((8, 5), (8, 6)), 4),
    )
    return Puzzle(
        name="nomarks",
        title="No Marks",
        board=board,
        constraints=(Classic(), Cages(cages)),
    )


def _oddball() -> Puzzle:
    board = (
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 9, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 3, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 2, 0, 0, 0, 5, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 7, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
    )
    kropki = (
        (0, 0, 0, 1, "B"),
        (0, 0, 1, 0, "B"),
        (1, 0, 2, 0, "B"),
        (0, 4, 0, 5, "B"),
        (1, 8, 2, 8, "B"),
        (4, 0, 4, 1, "B"),
        (4, 2, 5, 2, "B"),
        (3, 5, 4, 5, "B"),
        (5, 7, 6, 7, "B"),
        (6, 1, 7, 1, "B"),
        (8, 7, 8, 8, "B"),
    )
    return Puzzle(
        name="oddball",
        title="Oddball",
        board=board,
        constraints=(Classic(), AntiKnight(), Kropki(kropki), AntiKing()),
    )


def puzzles() -> list[Puzzle]:
    """Return freshly built puzzles of this volume, in alphabetical order of name."""
    return [
        _kings_disease(),
        _knight_in_the_hot_seat(),
        _no_marks(),
        _oddball(),
    ]