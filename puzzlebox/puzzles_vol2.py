"""Variant sudoku puzzles: anti-knight cages, thermometers, kropki and killer thermos."""

from __future__ import annotations

from .grid import Classic, empty_board
from .regions import Cages
from .rules import AntiKnight, Kropki
from .solver import Puzzle
from .thermometers import Thermometers

_BOXED_OUT_BOARD = (
    (0, 0, 0, 0, 0, 0, 7, 1, 2),
    (0, 0, 0, 0, 7, 0, 0, 0, 0),
    (0, 7, 0, 0, 8, 9, 0, 0, 0),
    (0, 2, 0, 0, 0, 0, 0, 5, 9),
    (0, 0, 0, 0, 0, 0, 0, 3, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 8, 2, 0, 0, 0, 0),
    (6, 1, 0, 0, 9, 0, 0, 8, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
)

_BOXED_OUT_THERMOMETERS = (
    ((2, 0), (1, 0), (1, 1), (1, 2), (2, 2)),
    ((3, 0), (4, 0), (4, 1), (4, 2), (3, 2)),
    ((1, 3), (0, 3), (0, 4), (0, 5), (1, 5)),
    ((2, 3), (3, 3), (3, 4), (3, 5), (2, 5)),
    ((3, 6), (2, 6), (2, 7), (2, 8), (3, 8)),
    ((4, 6), (5, 6), (5, 7), (5, 8), (4, 8)),
    ((5, 5), (5, 4), (5, 3), (6, 3)),
    ((6, 5), (7, 5), (8, 5), (8, 4), (8, 3), (7, 3)),
)


def _blast_off() -> Puzzle:
    board = (
        (3, 0, 0, 0, 0, 0, 0, 0, 7),
        (0, 0, 0, 0, 5, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (6, 0, 0, 0, 0, 0, 0, 0, 4),
        (0, 0, 0, 0, 8, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
    )
    cages = (
        (((0, 1), (0, 2), (0, 3), (1, 1)), 13),
        (((0, 5), (0, 6), (0, 7), (1, 7)), 28),
        (((2, 2), (1, 2), (2, 3)), 14),
        (((2, 5), (2, 6), (1, 6)), 19),
        (((3, 2), (3, 3), (4, 3)), 22),
        (((3, 5), (3, 6), (4, 5)), 10),
        (((5, 2), (5, 3), (6, 2)), 21),
        (((5, 5), (5, 6), (6, 6)), 8),
        (((7, 1), (7, 2), (7, 3), (6, 3)), 24),
        (((7, 5), (7, 6), (7, 7), (6, 5)), 14),
        (((7, 0), (8, 0)), 7),
        (((8, 8), (7, 8)), 8),
    )
    return Puzzle(
        name="blastoff",
        title="Blast Off",
        board=board,
        constraints=(Classic(), Cages(cages), AntiKnight()),
    )


def _boxed_out() -> Puzzle:
    return Puzzle(
        name="boxedout",
        title="Boxed Out",
        board=_BOXED_OUT_BOARD,
        constraints=(Classic(), Thermometers(_BOXED_OUT_THERMOMETERS, strict=True)),
    )


def _boxed_out_logical() -> Puzzle:
    # The same puzzle, meant for the deduction-only solver.
    return Puzzle(
        name="boxedout-logicaltest",
        title="Boxed Out (logical)",
        board=_BOXED_OUT_BOARD,
        constraints=(Classic(), Thermometers(_BOXED_OUT_THERMOMETERS, strict=True)),
    )


def _cage_practice() -> Puzzle:
    # Searched for every solution: the search also turns up one the
    # puzzle's author does not accept.
    cages = (
        (((0, 0), (0, 1), (0, 2)), 6),
        (((0, 3), (1, 3), (2, 3)), 7),
        (((0, 5), (0, 6), (1, 5)), 21),
        (((1, 1), (2, 1), (3, 1)), 20),
        (((1, 7), (2, 7)), 12),
        (((2, 5), (2, 6)), 5),
        (((3, 2), (4, 2)), 13),
        (((3, 6), (3, 7)), 16),
        (((4, 0), (4, 1)), 17),
        (((4, 3), (4, 4), (4, 5)), 15),
        (((4, 6), (5, 6)), 7),
        (((4, 7), (4, 8)), 3),
        (((5, 1), (5, 2)), 4),
        (((5, 7), (6, 7), (7, 7)), 10),
        (((6, 1), (7, 1)), 8),
        (((6, 2), (6, 3)), 15),
        (((6, 5), (7, 5), (8, 5)), 23),
        (((7, 3), (8, 3), (8, 2)), 9),
        (((8, 6), (8, 7), (8, 8)), 24),
    )
    return Puzzle(
        name="cagepractice",
        title="Cage Practice",
        board=empty_board(),
        constraints=(Classic(), Cages(cages)),
        find_all=True,
    )


def _fever_bends() -> Puzzle:
    kropki = (
        (1, 1, 2, 1, "B"),
        (2, 3, 3, 3, "B"),
        (1, 6, 1, 7, "B"),
        (3, 5, 3, 6, "B"),
        (4, 2, 4, 3, "W"),
        (5, 2, 5, 3, "B"),
        (5, 5, 6, 5, "B"),
        (6, 6, 6, 7, "B"),
        (6, 2, 7, 2, "B"),
        (7, 0, 8, 0, "B"),
    )
    thermometers = (
        ((2, 0), (1, 0), (1, 1), (0, 1), (0, 2)),
        ((1, 3), (1, 2), (2, 2), (2, 1), (3, 1)),
        ((0, 6), (0, 7), (1, 7), (1, 8), (2, 8)),
        ((3, 7), (2, 7), (2, 6), (1, 6), (1, 5)),
        ((5, 1), (6, 1), (6, 2), (7, 2), (7, 3)),
        ((8, 2), (8, 1), (7, 1), (7, 0), (6, 0)),
        ((7, 5), (7, 6), (6, 6), (6, 7), (5, 7)),
        ((6, 8), (7, 8), (7, 7), (8, 7), (8, 6)),
    )
    return Puzzle(
        name="feverbends",
        title="Fever Bends",
        board=empty_board(),
        constraints=(Classic(), Kropki(kropki), Thermometers(thermometers, strict=True)),
    )


def _first_thermo() -> Puzzle:
    board = (
        (0, 8, 0, 0, 0, 0, 0, 0, 0),
        (5, 0, 0, 0, 0, 4, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 1, 0, 0),
        (0, 4, 0, 0, 0, 0, 0, 0, 5),
        (0, 0, 0, 9, 0, 0, 0, 0, 0),
        (0, 0, 7, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 2, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 3, 0),
        (6, 0, 0, 0, 0, 0, 0, 0, 0),
    )
    thermometers = (
        ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2)),
        ((1, 7), (1, 6), (1, 5), (2, 5), (3, 5), (3, 4)),
        ((5, 8), (4, 8), (4, 7), (4, 6), (3, 6)),
        ((7, 1), (6, 1), (6, 2), (5, 2), (5, 3)),
        ((8, 8), (7, 8), (7, 7), (6, 7), (6, 6), (6, 5)),
    )
    return Puzzle(
        name="firstthermo",
        title="First Thermo",
        board=board,
        constraints=(Classic(), Thermometers(thermometers, strict=True)),
    )


def _killer_pinwheel() -> Puzzle:
    board = (
        (0, 0, 9, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 5, 0, 0, 9),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 3, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (7, 0, 0, 0, 0, 0, 0, 5, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 8, 0, 0, 0, 0, 0),
    )
    cages = (
        (((1, 4), (1, 5), (2, 4)), 16),
        (((1, 6), (1, 7), (2, 6)), 12),
        (((4, 3), (4, 4), (4, 5)), 19),
        (((3, 6), (3, 7), (4, 6)), 19),
        (((5, 4), (6, 3), (6, 4)), 18),
        (((6, 1), (6, 2), (7, 1)), 12),
        (((6, 6), (7, 6), (7, 7)), 12),
    )
    thermometers = (
        ((0, 0), (1, 1), (2, 0), (3, 1), (4, 0), (5, 1)),
        ((0, 8), (1, 7), (0, 6), (1, 5), (0, 4), (1, 3)),
        ((8, 8), (7, 7), (6, 8), (5, 7), (4, 8), (3, 7)),
        ((8, 0), (7, 1), (8, 2), (7, 3), (8, 4), (7, 5)),
        ((3, 5), (3, 4), (3, 3), (4, 3)),
        ((5, 3), (5, 4), (5, 5), (4, 5)),
    )
    return Puzzle(
        name="killerpinwheel",
        title="Killer Pinwheel",
        board=board,
        constraints=(Classic(), Cages(cages), Thermometers(thermometers, strict=True)),
    )


def puzzles() -> list[Puzzle]:
    """Return freshly built puzzles of this volume, in alphabetical order of name."""
    return [
        _blast_off(),
        _boxed_out(),
        _boxed_out_logical(),
        _cage_practice(),
        _fever_bends(),
        _first_thermo(),
        _killer_pinwheel(),
    ]