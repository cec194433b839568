# puzzlebox

A small toolbox of puzzle solvers:

- a backtracking sudoku solver that combines any number of rules: the
  classic row/column/box rule, anti-king, anti-knight, disjoint groups,
  kropki dots, XV sums, killer cages, palindromes, quadruples and
  thermometers (strictly increasing or non-decreasing);
- a logical solver that fills only cells whose candidates come down to a
  single digit, and records each placement as a step;
- a collection of ready-made variant puzzles;
- Wordle helpers that keep five-letter words, count letter frequencies,
  look up unusual "inen" words in a pronouncing dictionary and search for
  the best pairs of starting words.

It needs nothing beyond the Python standard library (Python 3.10 or newer).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### `puzzlebox` – the bundled variant puzzles

```
puzzlebox --list            # name and title of every puzzle
puzzlebox oddball           # solve one puzzle (name is case-insensitive)
puzzlebox boxedout --logical
puzzlebox cagepractice --all
```

- `--logical` solves by deduction only and prints each step as
  `(row, col) -> value`. Puzzles whose name ends in `-logicaltest` are
  always run this way.
- `--all` prints every solution, then `Out of solutions`. Puzzles marked
  to be searched exhaustively (such as `cagepractice`) are always run
  this way.

Each run ends with the time taken in milliseconds. An unknown name prints
an error and exits with status 1.

### `puzzlebox-classic` – classic sudoku boards

Solves a built-in set of classic boards and prints each original board,
its solution(s) and the time taken, in colour.

```
puzzlebox-classic           # asks whether to show every solution
puzzlebox-classic -v        # show every solution of each board
puzzlebox-classic -q        # show only the first solution
puzzlebox-classic --trace   # solve one board, logging every placement tried
```

### `puzzlebox-wordle` – word-list tools

```
puzzlebox-wordle fives      --input words_alpha.txt --output words_five.txt
puzzlebox-wordle frequency  --input words_five.txt  --output five_frequency.txt
puzzlebox-wordle inen       --input cmudict.txt     --output nen.txt
puzzlebox-wordle starters   --input words_five.txt  --output best_starters.txt --limit 10
```

The values shown are the defaults. Word lists are whitespace-separated
words; the dictionary for `inen` has one entry per line: a word, a space,
then its pronunciation. `starters` prints each new top pair as it is found
and writes the final list to the output file.

## Library use

Boards are 9×9 grids of integers, with `0` for an empty cell. A digit may
be placed only where every constraint allows it.

```python
from puzzlebox.grid import Classic, format_board
from puzzlebox.rules import AntiKnight
from puzzlebox.solver import solve

board = [
    [1, 6, 0, 0, 2, 0, 0, 0, 3],
    [0, 0, 0, 0, 0, 0, 0, 0, 8],
    [0, 0, 9, 0, 6, 0, 7, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [4, 0, 2, 0, 5, 0, 8, 0, 6],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 0, 4, 0, 1, 0, 0],
    [2, 0, 0, 0, 0, 0, 0, 0, 0],
    [7, 0, 0, 0, 8, 0, 0, 4, 9],
]
solution = solve(board, [Classic(), AntiKnight()])
if solution is not None:
    print(format_board(solution), end="")
```

### Constraints

Every constraint subclasses `puzzlebox.grid.Constraint` and offers
`allows(board, row, col, num)` and `candidates(board, row, col)`. New
rules are written by implementing `allows`.

- `puzzlebox.grid`: `Classic`, plus `empty_board()` and `format_board(board)`.
- `puzzlebox.rules`: `AntiKing()`, `AntiKnight()`, `Disjoint()`,
  `Kropki(marks)` and `XVSum(marks)`. Marks are
  `(row1, col1, row2, col2, kind)` with kind `"W"`/`"B"` for kropki and
  `"X"`/`"V"` for XV sums.
- `puzzlebox.regions`: `Cages([(cells, total), ...])`,
  `Palindromes([cells, ...])` and `Quadruples([(cells, digits), ...])`.
  The cage check looks only at digits already on the board.
- `puzzlebox.thermometers`: `Thermometers([cells, ...], strict=True)`;
  with `strict=False` equal neighbours are allowed.

### Solvers

- `puzzlebox.solver.solve(board, constraints, reverse=False)` returns the
  first solution as a new grid, or `None`. With `reverse=True` empty cells
  are filled from the bottom-right corner backwards.
- `puzzlebox.solver.iter_solutions(board, constraints)` yields every
  solution in search order.
- `puzzlebox.solver.trace_solve(board, constraints)` returns the solution
  (or `None`) and a list of log lines for each placement tried, placed or
  backtracked.
- `puzzlebox.solver.Puzzle` bundles a name, title, board and constraints;
  `Puzzle.solve()` returns its first solution.
- `puzzlebox.logical.solve_logically(board, constraints)` returns the
  resulting grid and the list of `Step(row, col, value)` deductions made.

The given board is never modified. Boards of the wrong shape or with
values outside 0–9 raise `ValueError`.

### Puzzle collection

`puzzlebox.runner.all_puzzles()` returns every bundled puzzle, and
`puzzlebox.runner.find_puzzle(name)` returns one by name (raising
`KeyError` if there is none).

### Wordle helpers

`puzzlebox.wordle` provides `five_letter_words`, `letter_frequency`,
`format_frequency`, `find_inen_words`, `is_valid_pair`, `pair_score` and
`top_pairs(words, limit=10)`.

## Limitations

- The `puzzlebox` command runs only the bundled puzzles; there is no
  file format for loading puzzles of your own. Build a board and a list
  of constraints in Python instead.
- There is no interactive board or animated display of the search.
- Plain backtracking on hard variant puzzles with few given digits can
  take many minutes.