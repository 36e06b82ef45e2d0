"""Random generation of uniquely solvable Sudoku puzzles."""

from __future__ import annotations

import enum
import random

from .board import SIZE, Board


class Difficulty(enum.Enum):
    """How many cells a generated puzzle leaves empty."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


_HOLES = {
    Difficulty.EASY: 30,
    Difficulty.MEDIUM: 45,
    Difficulty.HARD: 55,
}


def holes_for_difficulty(difficulty: Difficulty) -> int:
    """Number of cells to empty for the given difficulty (Medium otherwise)."""
    return _HOLES.get(difficulty, _HOLES[Difficulty.MEDIUM])


def solve(board: Board, rng: random.Random | None = None) -> bool:
    """Fill the empty cells of board in place with randomly ordered digits.

    Returns True when every cell could be filled, False otherwise (the
    board is then left as it was).
    """
    rng = rng if rng is not None else random.Random()
    empties = [
        (row, col)
        for row in range(SIZE)
        for col in range(SIZE)
        if board[row, col] == 0
    ]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        digits = list(range(1, SIZE + 1))
        rng.shuffle(digits)
        for num in digits:
            if board.is_valid_move(row, col, num):
                board[row, col] = num
                if fill(position + 1):
                    return True
                board[row, col] = 0
        return False

    return fill(0)


def _candidates(cells: list[list[int]], row: int, col: int) -> list[int]:
    used = set(cells[row])
    used.update(line[col] for line in cells)
    start_row, start_col = row - row % 3, col - col % 3
    used.update(
        cells[r][c]
        for r in range(start_row, start_row + 3)
        for c in range(start_col, start_col + 3)
    )
    return [num for num in range(1, SIZE + 1) if num not in used]


def count_solutions(board: Board) -> int:
    """Count completions of board, stopping once a second one is found.

    The result is 0, 1 or 2, where 2 means "more than one". The board
    itself is not changed.
    """
    cells = board.rows()
    solutions = 0

    def search() -> None:
        nonlocal solutions
        best: tuple[int, int, list[int]] | None = None
        for row in range(SIZE):
            for col in range(SIZE):
                if cells[row][col] != 0:
                    continue
                options = _candidates(cells, row, col)
                if best is None or len(options) < len(best[2]):
                    best = (row, col, options)
                    if not options:
                        return
        if best is None:
            solutions += 1
            return
        row, col, options = best
        for num in options:
            cells[row][col] = num
            search()
            cells[row][col] = 0
            if solutions > 1:
                return

    search()
    return solutions


def generate(
    difficulty: Difficulty, rng: random.Random | None = None
) -> Board:
    """Generate a puzzle with exactly one solution for the difficulty."""
    rng = rng if rng is not None else random.Random()
    filled = Board()
    solve(filled, rng)

    holes = holes_for_difficulty(difficulty)
    removed = 0
    positions = [(row, col) for row in range(SIZE) for col in range(SIZE)]
    rng.shuffle(positions)

    for row, col in positions:
        backup = filled[row, col]
        filled[row, col] = 0
        if count_solutions(filled) != 1:
            filled[row, col] = backup
        else:
            removed += 1
        if removed >= holes:
            break

    return filled