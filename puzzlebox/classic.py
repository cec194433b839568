"""Classic sudoku runner: solve a set of boards, optionally showing every solution."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from typing import TextIO

from .grid import Board, Classic, format_board
from .solver import Grid, iter_solutions, solve, trace_solve

ANSI_RESET = "\x1b[0m"
ANSI_RED = "\x1b[31m"
ANSI_GREEN = "\x1b[32m"
ANSI_YELLOW = "\x1b[33m"
ANSI_BLUE = "\x1b[34m"

BOARDS: tuple[Board, ...] = (
    # A newspaper sudoku.
    (
        (4, 0, 0, 0, 3, 1, 0, 0, 9),
        (3, 2, 0, 0, 0, 5, 6, 0, 8),
        (0, 5, 1, 8, 0, 6, 2, 0, 0),
        (8, 0, 0, 5, 0, 0, 1, 9, 0),
        (5, 0, 2, 0, 8, 0, 0, 0, 0),
        (1, 6, 0, 3, 2, 9, 5, 0, 7),
        (0, 4, 9, 6, 0, 0, 0, 2, 0),
        (2, 1, 8, 0, 5, 0, 0, 0, 4),
        (6, 0, 5, 4, 0, 2, 8, 0, 1),
    ),
    # A board with several solutions.
    (
        (1, 2, 3, 0, 0, 7, 0, 0, 8),
        (4, 5, 6, 1, 0, 0, 0, 0, 0),
        (7, 8, 9, 0, 0, 0, 2, 0, 0),
        (0, 0, 0, 2, 3, 4, 5, 0, 0),
        (6, 0, 0, 9, 1, 5, 0, 0, 0),
        (0, 0, 0, 8, 7, 6, 0, 0, 0),
        (9, 0, 0, 0, 0, 0, 3, 2, 1),
        (0, 0, 0, 0, 0, 0, 6, 5, 4),
        (0, 4, 0, 3, 0, 0, 9, 8, 7),
    ),
    # "AI worm hole".
    (
        (0, 8, 0, 0, 0, 0, 0, 0, 1),
        (0, 0, 7, 0, 0, 4, 0, 2, 0),
        (6, 0, 0, 3, 0, 0, 7, 0, 0),
        (0, 0, 2, 0, 0, 9, 0, 0, 0),
        (1, 0, 0, 0, 6, 0, 0, 0, 8),
        (0, 3, 0, 4, 0, 0, 0, 0, 0),
        (0, 0, 1, 7, 0, 0, 6, 0, 0),
        (0, 9, 0, 0, 0, 8, 0, 0, 5),
        (0, 0, 0, 0, 0, 0, 0, 4, 0),
    ),
    # "AI broken brick".
    (
        (4, 0, 0, 0, 6, 0, 0, 7, 0),
        (0, 0, 0, 0, 0, 0, 6, 0, 0),
        (0, 3, 0, 0, 0, 2, 0, 0, 1),
        (7, 0, 0, 0, 0, 8, 5, 0, 0),
        (0, 1, 0, 4, 0, 0, 0, 0, 0),
        (0, 2, 0, 9, 5, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 7, 0, 5),
        (0, 0, 9, 1, 0, 0, 0, 3, 0),
        (0, 0, 3, 0, 4, 0, 0, 8, 0),
    ),
    # "AI Escargot".
    (
        (1, 0, 0, 0, 0, 7, 0, 9, 0),
        (0, 3, 0, 0, 2, 0, 0, 0, 8),
        (0, 0, 9, 6, 0, 0, 5, 0, 0),
        (0, 0, 5, 3, 0, 0, 9, 0, 0),
        (0, 1, 0, 0, 8, 0, 0, 0, 2),
        (6, 0, 0, 0, 0, 4, 0, 0, 0),
        (3, 0, 0, 0, 0, 0, 0, 1, 0),
        (0, 4, 0, 0, 0, 0, 0, 0, 7),
        (0, 0, 7, 0, 0, 0, 3, 0, 0),
    ),
    # A well-known "hardest" board; it has the most branches to explore.
    (
        (8, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 3, 6, 0, 0, 0, 0, 0),
        (0, 7, 0, 0, 9, 0, 2, 0, 0),
        (0, 5, 0, 0, 0, 7, 0, 0, 0),
        (0, 0, 0, 0, 4, 5, 7, 0, 0),
        (0, 0, 0, 1, 0, 0, 0, 3, 0),
        (0, 0, 1, 0, 0, 0, 0, 6, 8),
        (0, 0, 8, 5, 0, 0, 0, 1, 0),
        (0, 9, 0, 0, 0, 0, 4, 0, 0),
    ),
)

TRACE_BOARD: Board = (
    (4, 0, 0, 0, 3, 1, 0, 0, 9),
    (3, 2, 0, 0, 0, 5, 6, 1, 8),
    (9, 5, 1, 8, 0, 6, 2, 0, 0),
    (8, 0, 0, 5, 0, 0, 1, 9, 0),
    (5, 0, 2, 0, 8, 0, 0, 0, 0),
    (1, 6, 0, 3, 2, 9, 5, 0, 7),
    (0, 4, 9, 6, 0, 0, 0, 2, 0),
    (2, 1, 8, 0, 5, 0, 0, 0, 4),
    (6, 0, 5, 4, 0, 2, 8, 0, 1),
)

_PROMPT = (
    "Verbose output will show all solutions found, not just the first one.\n"
    "Verbose output will take long to run as it has to check all valid cases.\n"
    "Would you like to see verbose output? (y/n, default n): "
)


def run_boards(
    boards: Iterable[Board], verbose: bool = False, out: TextIO | None = None
) -> list[list[Grid]]:
    """Solve each board under the classic rules and report on ``out``.

    Without ``verbose`` the first solution of each board is shown. With it,
    every solution is shown as it is found, followed by "Out of solutions!";
    a board with no empty cell then shows nothing. Each report ends with the
    time it took. Returns, per board, the solutions that were shown.
    """
    out = sys.stdout if out is None else out
    rules = (Classic(),)
    results: list[list[Grid]] = []
    for board in boards:
        start = time.perf_counter()
        out.write(f"{ANSI_BLUE}\nOriginal board:\n{ANSI_RESET}")
        out.write(format_board(board))
        shown: list[Grid] = []
        if verbose:
            if any(0 in row for row in board):
                for solution in iter_solutions(board, rules):
                    out.write(f"{ANSI_GREEN}Solution:\n{ANSI_RESET}")
                    out.write(format_board(solution))
                    shown.append(solution)
                out.write(f"{ANSI_RED}Out of solutions!\n{ANSI_RESET}")
        else:
            solution = solve(board, rules)
            if solution is None:
                out.write(f"{ANSI_RED}Out of solutions!\n{ANSI_RESET}")
            else:
                out.write(f"{ANSI_GREEN}Solution:\n{ANSI_RESET}")
                out.write(format_board(solution))
                shown.append(solution)
        elapsed = int((time.perf_counter() - start) * 1000)
        out.write(f"{ANSI_YELLOW}Time taken: {elapsed} milliseconds\n\n{ANSI_RESET}")
        results.append(shown)
    return results


def _ask_verbose() -> bool:
    try:
        response = input(_PROMPT)
    except EOFError:
        response = ""
    return response.strip()[:1] in ("y", "Y")


def main(argv: list[str] | None = None) -> int:
    """Solve the built-in boards; ask about verbose output unless told."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox-classic", description="Solve classic sudoku boards."
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-v", "--verbose", action="store_true", help="show every solution")
    mode.add_argument("-q", "--quiet", action="store_true", help="show only the first solution")
    mode.add_argument(
        "--trace", action="store_true", help="solve one board, logging every placement"
    )
    args = parser.parse_args(argv)

    if args.trace:
        grid, lines = trace_solve(TRACE_BOARD, (Classic(),))
        for line in lines:
            print(line)
        if grid is None:
            print("No solution exists!")
        else:
            print("Solution:")
            print(format_board(grid), end="")
        return 0

    if args.verbose:
        verbose = True
    elif args.quiet:
        verbose = False
    else:
        verbose = _ask_verbose()
    run_boards(BOARDS, verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())