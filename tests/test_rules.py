import pytest

from puzzlebox.grid import empty_board
from puzzlebox.rules import AntiKing, AntiKnight, Disjoint, Kropki, XVSum


def _board_with(cells):
    board = empty_board()
    for (r, c), v in cells.items():
        board[r][c] = v
    return board


@pytest.mark.parametrize("cell", [(3, 3), (3, 4), (3, 5), (4, 3), (4, 5), (5, 3), (5, 4), (5, 5)])
def test_antiking_blocks_neighbours(cell):
    board = _board_with({(4, 4): 6})
    assert not AntiKing().allows(board, *cell, 6)
    assert AntiKing().allows(board, *cell, 7)


def test_antiking_allows_distant_cell_and_edges():
    board = _board_with({(4, 4): 6, (1, 1): 2})
    assert AntiKing().allows(board, 2, 4, 6)
    assert not AntiKing().allows(board, 0, 0, 2)
    assert AntiKing().allows(board, 8, 8, 2)


@pytest.mark.parametrize("cell", [(2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5)])
def test_antiknight_blocks_knight_moves(cell):
    board = _board_with({(4, 4): 9})
    assert not AntiKnight().allows(board, *cell, 9)


def test_antiknight_ignores_king_moves_and_edges():
    board = _board_with({(4, 4): 9, (1, 2): 3})
    assert AntiKnight().allows(board, 3, 3, 9)
    assert not AntiKnight().allows(board, 0, 0, 3)
    assert AntiKnight().candidates(board, 8, 8) == list(range(1, 10))


def test_kropki_white_dot():
    board = _board_with({(0, 1): 5})
    rule = Kropki([(0, 0, 0, 1, "W")])
    assert rule.allows(board, 0, 0, 4)
    assert rule.allows(board, 0, 0, 6)
    assert not rule.allows(board, 0, 0, 7)
    assert not rule.allows(board, 0, 0, 5)


def test_kropki_black_dot_either_side():
    board = _board_with({(0, 0): 4})
    rule = Kropki([(0, 0, 1, 0, "B")])
    assert rule.allows(board, 1, 0, 2)
    assert rule.allows(board, 1, 0, 8)
    assert not rule.allows(board, 1, 0, 3)


def test_kropki_empty_partner_or_unmarked_cell():
    board = empty_board()
    rule = Kropki([(0, 0, 0, 1, "W")])
    assert rule.candidates(board, 0, 0) == list(range(1, 10))
    board[0][1] = 5
    assert rule.candidates(board, 4, 4) == list(range(1, 10))


def test_kropki_first_decisive_mark_wins():
    board = _board_with({(0, 1): 5, (1, 0): 9})
    rule = Kropki([(0, 0, 0, 1, "W"), (0, 0, 1, 0, "W")])
    assert rule.allows(board, 0, 0, 4)
    swapped = Kropki([(0, 0, 1, 0, "W"), (0, 0, 0, 1, "W")])
    assert not swapped.allows(board, 0, 0, 4)


def test_kropki_unknown_kind_rejects():
    board = _board_with({(0, 1): 5})
    assert Kropki([(0, 0, 0, 1, "Q")]).candidates(board, 0, 0) == []


def test_xv_sums():
    board = _board_with({(1, 3): 3, (2, 1): 2})
    rule = XVSum([(1, 2, 1, 3, "X"), (2, 0, 2, 1, "V")])
    assert rule.allows(board, 1, 2, 7)
    assert not rule.allows(board, 1, 2, 6)
    assert rule.allows(board, 2, 0, 3)
    assert not rule.allows(board, 2, 0, 4)


def test_xv_candidates_sum_to_target():
    board = _board_with({(5, 5): 4})
    x = XVSum([(5, 5, 5, 6, "X")]).candidates(board, 5, 6)
    v = XVSum([(5, 5, 5, 6, "V")]).candidates(board, 5, 6)
    assert all(n + 4 == 10 for n in x) and len(x) == 1
    assert all(n + 4 == 5 for n in v) and len(v) == 1