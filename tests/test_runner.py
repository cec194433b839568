import pytest

from puzzlebox.grid import format_board
from puzzlebox.logical import solve_logically
from puzzlebox.runner import GENERIC_BOARD, all_puzzles, find_puzzle, main
from puzzlebox.solver import solve


def test_names_are_unique():
    names = [p.name for p in all_puzzles()]
    assert len(names) == len(set(names))
    assert "generic-sudoku" in names
    assert "nomarks" in names
    assert "boxedout-logicaltest" in names


def test_find_puzzle_is_case_insensitive():
    assert find_puzzle("NoMarks").name == "nomarks"
    assert find_puzzle("generic-sudoku").board == GENERIC_BOARD


def test_find_puzzle_unknown():
    with pytest.raises(KeyError):
        find_puzzle("no-such-puzzle")


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    listed = [line.split("\t")[0] for line in out.splitlines()]
    assert listed == [p.name for p in all_puzzles()]


def test_unknown_name_fails(capsys):
    assert main(["no-such-puzzle"]) == 1
    assert "no-such-puzzle" in capsys.readouterr().err


def test_solve_generic(capsys):
    puzzle = find_puzzle("generic-sudoku")
    expected = solve(puzzle.board, puzzle.constraints)
    assert expected is not None
    assert main(["generic-sudoku"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Solution:\n" + format_board(expected))
    assert "Time taken: " in out
    assert all(sorted(row) == list(range(1, 10)) for row in expected)


def test_all_solutions_of_generic(capsys):
    assert main(["generic-sudoku", "--all"]) == 0
    out = capsys.readouterr().out
    assert out.count("Solution:") == 1
    assert "Out of solutions" in out


def test_logical_generic(capsys):
    puzzle = find_puzzle("generic-sudoku-logicaltest")
    grid, steps = solve_logically(puzzle.board, puzzle.constraints)
    assert steps
    assert main(["generic-sudoku-logicaltest"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Solution:\n" + format_board(grid))
    step_lines = [line for line in out.splitlines() if "->" in line]
    assert step_lines == [f"({s.row}, {s.col}) -> {s.value}" for s in steps]


def test_logical_flag_matches_logical_puzzle(capsys):
    main(["generic-sudoku", "--logical"])
    first = [l for l in capsys.readouterr().out.splitlines() if not l.startswith("Time")]
    main(["generic-sudoku-logicaltest"])
    second = [l for l in capsys.readouterr().out.splitlines() if not l.startswith("Time")]
    assert first == second