from puzzlebox.grid import empty_board
from puzzlebox.regions import Cages, Palindromes, Quadruples


def _board_with(cells):
    board = empty_board()
    for (r, c), v in cells.items():
        board[r][c] = v
    return board


CAGE = [([(0, 0), (1, 0)], 12)]


def test_cage_full_with_right_sum():
    board = _board_with({(0, 0): 5, (1, 0): 7})
    assert Cages(CAGE).allows(board, 4, 4, 1)


def test_cage_full_with_wrong_sum():
    board = _board_with({(0, 0): 5, (1, 0): 6})
    assert not Cages(CAGE).allows(board, 4, 4, 1)
    assert Cages(CAGE).candidates(board, 4, 4) == []


def test_cage_duplicate_in_partial_cage():
    cages = [([(0, 0), (0, 1), (1, 0)], 15)]
    board = _board_with({(0, 0): 3, (0, 1): 3})
    assert not Cages(cages).allows(board, 1, 0, 9)


def test_cage_partial_is_fine_whatever_the_digit():
    cages = [([(0, 0), (0, 1), (1, 0)], 15)]
    board = _board_with({(0, 0): 3, (0, 1): 4})
    assert Cages(cages).candidates(board, 1, 0) == list(range(1, 10))


PALINDROME = [[(0, 0), (0, 1), (0, 2)]]


def test_palindrome_end_must_match_mirror():
    board = _board_with({(0, 2): 7})
    rule = Palindromes(PALINDROME)
    assert rule.allows(board, 0, 0, 7)
    assert not rule.allows(board, 0, 0, 3)
    assert rule.candidates(board, 0, 0) == [7]


def test_palindrome_other_end_and_middle():
    board = _board_with({(0, 0): 4})
    rule = Palindromes(PALINDROME)
    assert rule.candidates(board, 0, 2) == [4]
    assert rule.candidates(board, 0, 1) == list(range(1, 10))


def test_palindrome_even_length_inner_pair():
    line = [[(2, 0), (2, 1), (2, 2), (2, 3)]]
    board = _board_with({(2, 1): 6})
    rule = Palindromes(line)
    assert rule.candidates(board, 2, 2) == [6]
    assert rule.candidates(board, 2, 3) == list(range(1, 10))


QUAD_CELLS = [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_quadruple_no_room_left():
    board = _board_with({(0, 1): 5, (1, 0): 6, (1, 1): 7})
    rule = Quadruples([(QUAD_CELLS, [1, 2])])
    assert not rule.allows(board, 0, 0, 1)
    board[1][1] = 2
    assert rule.allows(board, 0, 0, 1)
    assert not rule.allows(board, 0, 0, 3)


def test_quadruple_repeated_value_needs_two_cells():
    board = _board_with({(0, 1): 7, (1, 0): 6, (1, 1): 5})
    rule = Quadruples([(QUAD_CELLS, [7, 7])])
    assert rule.candidates(board, 0, 0) == [7]


def test_quadruple_ignores_cells_outside():
    board = _board_with({(0, 1): 5, (1, 0): 6, (1, 1): 7})
    rule = Quadruples([(QUAD_CELLS, [1, 2])])
    assert rule.candidates(board, 5, 5) == list(range(1, 10))