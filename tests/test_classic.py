import io

import pytest

from puzzlebox import classic
from puzzlebox.grid import Classic, empty_board, format_board
from puzzlebox.solver import iter_solutions, solve, trace_solve


@pytest.fixture
def newspaper():
    return classic.BOARDS[0]


@pytest.fixture
def newspaper_solution(newspaper):
    return solve(newspaper, [Classic()])


def test_quiet_run_shows_first_solution(newspaper, newspaper_solution):
    out = io.StringIO()
    results = classic.run_boards([newspaper], False, out)
    text = out.getvalue()
    assert results == [[newspaper_solution]]
    assert "Original board:" in text
    assert format_board(newspaper) in text
    assert "Solution:" in text
    assert format_board(newspaper_solution) in text
    assert "Time taken:" in text
    assert classic.ANSI_GREEN in text


def test_quiet_run_reports_unsolvable():
    board = empty_board()
    board[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    board[1][8] = 9
    out = io.StringIO()
    results = classic.run_boards([board], False, out)
    assert results == [[]]
    assert "Out of solutions!" in out.getvalue()
    assert "Solution:" not in out.getvalue()


def test_verbose_run_lists_every_solution(newspaper_solution):
    board = [row[:] for row in newspaper_solution]
    for col in range(4):
        board[0][col] = 0
    board[1][1] = 0
    out = io.StringIO()
    results = classic.run_boards([board], True, out)
    expected = list(iter_solutions(board, [Classic()]))
    text = out.getvalue()
    assert results == [expected]
    assert text.count("Solution:") == len(expected)
    assert "Out of solutions!" in text


def test_verbose_full_board_shows_nothing(newspaper_solution):
    out = io.StringIO()
    results = classic.run_boards([newspaper_solution], True, out)
    text = out.getvalue()
    assert results == [[]]
    assert "Solution:" not in text
    assert "Out of solutions!" not in text


def test_several_boards_reported_in_order(newspaper, newspaper_solution):
    out = io.StringIO()
    results = classic.run_boards([newspaper, newspaper_solution], False, out)
    assert results == [[newspaper_solution], [newspaper_solution]]
    assert out.getvalue().count("Original board:") == 2


def test_invalid_board_rejected():
    with pytest.raises(ValueError):
        classic.run_boards([[[0] * 9] * 8], False, io.StringIO())


def test_builtin_boards_givens_are_consistent():
    assert len(classic.BOARDS) == 6
    rule = Classic()
    for board in classic.BOARDS:
        grid = [list(row) for row in board]
        assert len(grid) == 9
        for r in range(9):
            for c in range(9):
                value = grid[r][c]
                if not value:
                    continue
                grid[r][c] = 0
                assert rule.allows(grid, r, c, value) is True
                grid[r][c] = value


def test_main_trace(capsys):
    assert classic.main(["--trace"]) == 0
    grid, lines = trace_solve(classic.TRACE_BOARD, [Classic()])
    out = capsys.readouterr().out.splitlines()
    assert out[: len(lines)] == lines
    assert lines[0].startswith("trying to place")


def test_main_rejects_conflicting_flags():
    with pytest.raises(SystemExit):
        classic.main(["--verbose", "--quiet"])