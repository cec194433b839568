"""Variant sudoku puzzles: cages, kropki, XV, anti-chess, thermometers, quadruples."""

from __future__ import annotations

from .grid import Classic, empty_board
from .regions import Cages, Quadruples
from .rules import AntiKing, AntiKnight, Kropki, XVSum
from .solver import Puzzle
from .thermometers import Thermometers


def _fifteen_with_fourteen_differences() -> Puzzle:
    board = (
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 1, 0, 0, 2, 0, 0, 3, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 4, 0, 0, 5, 0, 0, 6, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 7, 0, 0, 8, 0, 0, 9, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
    )
    kropki = (
        (0, 1, 1, 1, "W"),
        (0, 4, 1, 4, "W"),
        (0, 6, 1, 6, "W"),
        (1, 6, 1, 7, "W"),
        (1, 2, 1, 3, "W"),
        (2, 8, 3, 8, "W"),
        (3, 2, 3, 3, "W"),
        (5, 0, 6, 0, "W"),
        (5, 5, 5, 6, "W"),
        (7, 1, 7, 2, "W"),
        (7, 2, 8, 2, "W"),
        (7, 4, 8, 4, "W"),
        (7, 5, 7, 6, "W"),
        (7, 7, 8, 7, "W"),
    )
    cages = (
        (((0, 0), (0, 1), (1, 0)), 15),
        (((0, 7), (0, 8), (1, 8)), 15),
        (((2, 1), (2, 2), (2, 3)), 15),
        (((2, 4), (2, 5), (3, 5)), 15),
        (((1, 3), (1, 4), (1, 5)), 15),
        (((3, 1), (4, 1), (5, 1)), 15),
        (((3, 3), (3, 2), (4, 2)), 15),
        (((5, 2), (6, 2), (7, 2)), 15),
        (((7, 0), (8, 0), (8, 1)), 15),
        (((5, 3), (6, 3), (6, 4)), 15),
        (((7, 3), (7, 4), (7, 5)), 15),
        (((4, 6), (5, 6), (5, 5)), 15),
        (((1, 6), (2, 6), (3, 6)), 15),
        (((3, 7), (4, 7), (5, 7)), 15),
        (((6, 5), (6, 6), (6, 7)), 15),
        (((7, 8), (8, 8), (8, 7)), 15),
    )
    return Puzzle(
        name="15with14differences",
        title="15 with 14 Differences",
        board=board,
        constraints=(Classic(), Kropki(kropki), Cages(cages)),
    )


def _xs_and_vs() -> Puzzle:
    board = (
        (0, 0, 0, 4, 0, 8, 5, 0, 0),
        (9, 0, 0, 0, 0, 0, 0, 0, 7),
        (4, 1, 0, 0, 0, 9, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 6, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 8, 0),
        (0, 0, 0, 0, 7, 0, 0, 0, 0),
        (5, 0, 0, 0, 0, 0, 0, 0, 8),
        (0, 0, 0, 0, 6, 0, 0, 0, 0),
        (0, 6, 0, 0, 0, 1, 0, 7, 0),
    )
    marks = (
        (1, 2, 1, 3, "V"),
        (1, 5, 1, 6, "X"),
        (2, 1, 3, 1, "X"),
        (3, 2, 3, 3, "V"),
        (2, 7, 3, 7, "V"),
        (4, 5, 4, 6, "X"),
        (5, 7, 6, 7, "X"),
        (5, 1, 6, 1, "V"),
        (6, 2, 6, 3, "X"),
        (6, 5, 6, 6, "V"),
        (7, 2, 8, 2, "X"),
        (7, 6, 8, 6, "V"),
    )
    return Puzzle(
        name="XsandVs",
        title="Xs and Vs",
        board=board,
        constraints=(Classic(), AntiKing(), XVSum(marks)),
    )


def _absolute_gas() -> Puzzle:
    # A head start along the first thermometer, whose digits are forced.
    board = (
        (1, 0, 0, 0, 0, 0, 0, 0, 0),
        (2, 0, 0, 0, 0, 0, 0, 0, 0),
        (3, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 4, 0, 0, 0, 0, 0, 0, 0),
        (0, 5, 0, 0, 0, 0, 0, 0, 0),
        (0, 6, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 7, 0, 0, 0, 0, 0, 0),
        (0, 0, 8, 0, 0, 0, 0, 0, 0),
        (0, 0, 9, 0, 0, 0, 0, 0, 0),
    )
    thermometers = (
        ((0, 0), (1, 0), (2, 0), (3, 1), (4, 1), (5, 1), (6, 2), (7, 2), (8, 2)),
        ((0, 3), (1, 3), (2, 3), (3, 4), (4, 4), (5, 4), (6, 5), (7, 5)),
        ((0, 6), (1, 6), (2, 6), (3, 7), (4, 7), (5, 7), (6, 8)),
    )
    return Puzzle(
        name="absolutegas",
        title="Absolute Gas",
        board=board,
        constraints=(Classic(), Thermometers(thermometers, strict=True)),
    )


def _a_little_cagey() -> Puzzle:
    board = (
        (0, 0, 0, 0, 3, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (5, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 6, 0, 0, 0, 0),
    )
    cages = (
        (((0, 1), (1, 0), (1, 1)), 15),
        (((1, 2), (2, 1), (2, 2)), 12),
        (((2, 3), (3, 2), (3, 3)), 6),
        (((0, 8), (0, 7), (1, 8)), 15),
        (((1, 7), (1, 6), (2, 7)), 10),
        (((2, 6), (2, 5), (3, 6)), 7),
        (((3, 5), (3, 4), (4, 5)), 24),
        (((8, 0), (8, 1), (7, 0)), 16),
        (((7, 1), (7, 2), (6, 1)), 12),
        (((6, 2), (6, 3), (5, 2)), 7),
        (((5, 3), (5, 4), (4, 3)), 15),
        (((8, 7), (7, 8), (7, 7)), 13),
        (((7, 6), (6, 7), (6, 6)), 14),
        (((6, 5), (5, 6), (5, 5)), 6),
    )
    return Puzzle(
        name="alittlecagey",
        title="A Little Cagey",
        board=board,
        constraints=(Classic(), Cages(cages)),
    )


def _all_around_my_hat() -> Puzzle:
    cages = (
        (((0, 0), (1, 0)), 12),
        (((0, 2), (1, 2)), 3),
        (((0, 3), (0, 4)), 11),
        (((0, 5), (1, 5)), 7),
        (((0, 6), (0, 7)), 12),
        (((0, 8), (1, 8)), 11),
        (((2, 0), (2, 1)), 7),
        (((2, 3), (2, 4)), 11),
        (((2, 6), (2, 7)), 3),
        (((3, 0), (4, 0)), 9),
        (((3, 2), (4, 2)), 9),
        (((3, 3), (3, 4)), 8),
        (((3, 5), (4, 5)), 13),
        (((3, 6), (4, 6)), 8),
        (((3, 8), (4, 8)), 17),
        (((5, 0), (5, 1)), 13),
        (((5, 3), (5, 4)), 17),
        (((5, 6), (5, 7)), 9),
        (((6, 2), (7, 2)), 15),
        (((6, 4), (7, 4)), 7),
        (((6, 5), (7, 5)), 10),
        (((6, 7), (7, 7)), 14),
        (((6, 8), (7, 8)), 5),
        (((8, 0), (8, 1)), 5),
        (((8, 3), (8, 4)), 15),
        (((8, 6), (8, 7)), 10),
    )
    return Puzzle(
        name="allaroundmyhat",
        title="All Around My Hat",
        board=empty_board(),
        constraints=(Classic(), Cages(cages)),
    )


def _an_easy_days_knight() -> Puzzle:
    board = (
        (1, 6, 0, 0, 2, 0, 0, 0, 3),
        (0, 0, 0, 0, 0, 0, 0, 0, 8),
        (0, 0, 9, 0, 6, 0, 7, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (4, 0, 2, 0, 5, 0, 8, 0, 6),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 3, 0, 4, 0, 1, 0, 0),
        (2, 0, 0, 0, 0, 0, 0, 0, 0),
        (7, 0, 0, 0, 8, 0, 0, 4, 9),
    )
    return Puzzle(
        name="aneasydaysknight",
        title="An Easy Day's Knight",
        board=board,
        constraints=(Classic(), AntiKnight()),
    )


def _a_slow_walk_around_the_quad() -> Puzzle:
    quads = (
        (((0, 2), (0, 3), (1, 2), (1, 3)), (7, 7)),
        (((2, 0), (2, 1), (3, 0), (3, 1)), (9, 9)),
        (((2, 2), (2, 3), (3, 2), (3, 3)), (1, 1)),
        (((2, 4), (2, 5), (3, 4), (3, 5)), (4, 4)),
        (((2, 5), (2, 6), (3, 5), (3, 6)), (6, 6)),
        (((2, 7), (2, 8), (3, 7), (3, 8)), (7, 7)),
        (((5, 0), (5, 1), (6, 0), (6, 1)), (1, 2, 2, 7)),
        (((5, 2), (5, 3), (6, 2), (6, 3)), (6, 6)),
        (((5, 3), (5, 4), (6, 3), (6, 4)), (3, 3)),
        (((5, 6), (5, 7), (6, 6), (6, 7)), (4, 4)),
        (((7, 5), (7, 6), (8, 5), (8, 6)), (8, 8)),
    )
    thermometers = (
        ((0, 0), (1, 0), (1, 1), (1, 2), (1, 3), (0, 3)),
        ((2, 2), (3, 3), (4, 2), (5, 3), (6, 2)),
        ((0, 6), (1, 5), (2, 5), (3, 4)),
        ((6, 6), (5, 5), (4, 6), (3, 5), (2, 6)),
        ((8, 2), (7, 3), (6, 3), (5, 4)),
        ((8, 8), (7, 8), (7, 7), (7, 6), (7, 5), (8, 5)),
    )
    return Puzzle(
        name="aslowwalkaroundthequad",
        title="A Slow Walk Around the Quad",
        board=empty_board(),
        constraints=(
            Classic(),
            Quadruples(quads),
            Thermometers(thermometers, strict=False),
        ),
    )


def _beaker_on_a_slow_burner() -> Puzzle:
    thermometers = (
        ((0, 0), (1, 0), (2, 0), (3, 1), (4, 0), (5, 1), (6, 0)),
        ((8, 1), (8, 2)),
        ((6, 4), (5, 4), (4, 4), (3, 4), (2, 4)),
        ((8, 7), (8, 6)),
        ((0, 8), (1, 8), (2, 8), (3, 7), (4, 8), (5, 7), (6, 8)),
        (
            (1, 6), (2, 5), (3, 6), (4, 5), (5, 6), (6, 5), (7, 6), (8, 5), (8, 4),
            (8, 3), (7, 2), (6, 3), (5, 2), (4, 3), (3, 2), (2, 3), (1, 2),
        ),
    )
    return Puzzle(
        name="beakeronaslowburner",
        title="Beaker on a Slow Burner",
        board=empty_board(),
        constraints=(Classic(), Thermometers(thermometers, strict=False)),
    )


def puzzles() -> list[Puzzle]:
    """Return freshly built puzzles of this volume, in alphabetical order of name."""
    return [
        _fifteen_with_fourteen_differences(),
        _xs_and_vs(),
        _absolute_gas(),
        _a_little_cagey(),
        _all_around_my_hat(),
        _an_easy_days_knight(),
        _a_slow_walk_around_the_quad(),
        _beaker_on_a_slow_burner(),
    ]