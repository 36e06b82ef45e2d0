# sudokupad

sudokupad is a small desktop Sudoku game built on pygame. To make a new puzzle, it fills a grid at random and then takes cells away one at a time. A cell stays removed only if the puzzle still has exactly one solution without it.

## Installing

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Playing

```
sudokupad
```

The command takes no options apart from `--help`. It opens an 800×800 window with a 9×9 board on the left and these controls on the right:

- **Difficulty drop-down**: click its arrow to open the list. Click an entry to choose it, and use the mouse wheel to scroll. The choices are Easy, Medium and Hard, which empty up to 30, 45 or 55 cells.
- **New Game**: generates a fresh puzzle at the chosen difficulty.
- **Reset Game**: puts back the puzzle as it was generated. If no game has been generated yet, this leaves an empty board.
- **Clear**: empties and unlocks every cell.

To fill in a cell, click it and type a digit from 1 to 9. Backspace or `0` empties the selected cell.

- **Given digits**: the cells filled by the puzzle are shaded light blue and cannot be changed.
- **Clashes**: when a digit clashes with another one in its row, column or 3×3 block, both are drawn in red.
- **Winning**: when the board is full and has no clashes, a congratulation banner appears and every cell is locked. New Game, Reset Game and Clear remove the banner again.

The window tries to load `LiberationSans-Regular.ttf` from the current directory at size 20. If that file is not there, it uses pygame's default font.

## Using the pieces from code

The board logic and the generator need no window:

```python
import random

from sudokupad.board import Board
from sudokupad.generator import Difficulty, count_solutions, generate

puzzle = generate(Difficulty.HARD, random.Random(7))
assert count_solutions(puzzle) == 1

for row in puzzle.rows():
    print(row)

puzzle[0, 0] = 5
print(puzzle.conflicts())
```

### `sudokupad.board.Board`

A 9×9 grid of ints, with 0 for an empty cell.

- `Board()` builds an empty grid.
- `Board(cells)` builds a grid from 9 rows of 9 values, or raises `ValueError`.
- `board[row, col]` reads and writes a cell.
- `is_valid_move(row, col, num)` checks one placement against the row, the column and the block.
- `conflicts()` lists the coordinates of clashing cells as pairs. Each clash adds the cell and then the cell it clashes with, so coordinates can repeat.
- `is_full()` reports whether no cell is empty.
- `copy()` returns an independent copy.
- `rows()` returns the cells as a fresh list of lists.

### `sudokupad.generator`

- `Difficulty` has three members: `EASY`, `MEDIUM` and `HARD`.
- `holes_for_difficulty(difficulty)` gives the number of cells to empty for a level: 30, 45 or 55.
- `solve(board, rng=None)` fills the empty cells in place, trying digits in random order. It returns whether it succeeded.
- `count_solutions(board)` returns 0, 1 or 2, where 2 means "more than one". It does not change the board.
- `generate(difficulty, rng=None)` returns a puzzle with exactly one solution.

### Widgets

The window is made of widgets, each registered with an `App` (`sudokupad.app`):

- `sudokupad.widget.Widget` is the base class.
- `PushButton` (`sudokupad.button`) is a button.
- `StaticText` (`sudokupad.statictext`) is a fixed text label.
- `Dropdown` (`sudokupad.dropdown`) is the drop-down list.
- `NumberTile` (`sudokupad.tile`) is one board cell.

`App.process_event(event)` handles a single `sudokupad.graphics.Event`:

1. A left click moves the focus.
2. Every widget is redrawn.
3. The focused widget handles the event.

`App.event_loop()` runs this until the window is closed. `SudokuApp` (`sudokupad.sudokuapp`) puts the game together, and `main()` starts it.

## What it does not do

- It does not save or load games.
- It has no undo.
- It does not give hints or show the solution.
- It does not keep time or scores.