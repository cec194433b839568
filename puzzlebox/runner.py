"""Command-line runner for the built-in variant puzzles."""

from __future__ import annotations

import argparse
import sys
import time

from . import puzzles_vol1, puzzles_vol2, puzzles_vol3
from .grid import Classic, format_board
from .logical import solve_logically
from .solver import Puzzle, iter_solutions

GENERIC_BOARD = (
    (5, 0, 0, 0, 8, 6, 0, 0, 1),
    (0, 0, 2, 7, 0, 1, 6, 0, 0),
    (0, 7, 1, 0, 0, 0, 2, 5, 0),
    (9, 1, 0, 0, 2, 0, 0, 7, 0),
    (3, 0, 0, 1, 4, 5, 0, 0, 6),
    (0, 6, 0, 0, 9, 0, 0, 2, 4),
    (0, 5, 3, 0, 0, 0, 4, 6, 0),
    (0, 0, 8, 9, 0, 3, 5, 0, 0),
    (2, 0, 0, 5, 1, 0, 0, 0, 7),
)

_LOGICAL_SUFFIX = "-logicaltest"


def _generic() -> list[Puzzle]:
    return [
        Puzzle(
            name="generic-sudoku",
            title="Generic sudoku",
            board=GENERIC_BOARD,
            constraints=(Classic(),),
        ),
        Puzzle(
            name="generic-sudoku" + _LOGICAL_SUFFIX,
            title="Generic sudoku (logical)",
            board=GENERIC_BOARD,
            constraints=(Classic(),),
        ),
    ]


def all_puzzles() -> list[Puzzle]:
    """Return every built-in puzzle, freshly built."""
    return [
        *puzzles_vol1.puzzles(),
        *puzzles_vol2.puzzles(),
        *puzzles_vol3.puzzles(),
        *_generic(),
    ]


def find_puzzle(name: str) -> Puzzle:
    """Return the puzzle with the given name, compared case-insensitively.

    Raises KeyError if there is none.
    """
    key = name.casefold()
    for puzzle in all_puzzles():
        if puzzle.name.casefold() == key:
            return puzzle
    raise KeyError(f"no puzzle named {name!r}")


def _run_single(puzzle: Puzzle) -> None:
    solution = puzzle.solve()
    if solution is None:
        print("No solution exists!")
    else:
        print("Solution:")
        print(format_board(solution), end="")


def _run_all(puzzle: Puzzle) -> None:
    for solution in iter_solutions(puzzle.board, puzzle.constraints):
        print("Solution:")
        print(format_board(solution), end="")
    print("Out of solutions")


def _run_logical(puzzle: Puzzle) -> None:
    grid, steps = solve_logically(puzzle.board, puzzle.constraints)
    if steps:
        print("Solution:")
        print(format_board(grid), end="")
    else:
        print("No solution found")
    for step in steps:
        print(f"({step.row}, {step.col}) -> {step.value}")


def main(argv: list[str] | None = None) -> int:
    """List the built-in puzzles, or solve one by name."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Solve built-in variant sudoku puzzles."
    )
    parser.add_argument("name", nargs="?", help="name of the puzzle to solve")
    parser.add_argument("--list", action="store_true", help="list the puzzles")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--logical", action="store_true", help="solve by deduction only, printing each step"
    )
    mode.add_argument(
        "--all", dest="find_all", action="store_true", help="print every solution"
    )
    args = parser.parse_args(argv)

    if args.list or args.name is None:
        for puzzle in all_puzzles():
            print(f"{puzzle.name}\t{puzzle.title}")
        return 0

    try:
        puzzle = find_puzzle(args.name)
    except KeyError:
        print(f"unknown puzzle: {args.name}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    if args.logical or puzzle.name.endswith(_LOGICAL_SUFFIX):
        _run_logical(puzzle)
    elif args.find_all or puzzle.find_all:
        _run_all(puzzle)
    else:
        _run_single(puzzle)
    elapsed = int((time.perf_counter() - start) * 1000)
    print(f"Time taken: {elapsed} milliseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())