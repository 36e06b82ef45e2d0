"""The 9x9 Sudoku grid and its rule checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SIZE = 9
BOX = 3


class Board:
    """A 9x9 Sudoku grid where 0 marks an empty cell."""

    def __init__(self, cells: Iterable[Sequence[int]] | None = None) -> None:
        if cells is None:
            self._cells = [[0] * SIZE for _ in range(SIZE)]
            return
        grid = [list(row) for row in cells]
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("a board needs 9 rows of 9 cells")
        self._cells = grid

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, col = key
        return self._cells[row][col]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, col = key
        self._cells[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    @staticmethod
    def _box_cells(row: int, col: int) -> Iterable[tuple[int, int]]:
        start_row = row - row % BOX
        start_col = col - col % BOX
        return (
            (r, c)
            for r in range(start_row, start_row + BOX)
            for c in range(start_col, start_col + BOX)
        )

    def is_valid_move(self, row: int, col: int, num: int) -> bool:
        """Whether num appears nowhere in the cell's row, column or box."""
        if num in self._cells[row]:
            return False
        if any(line[col] == num for line in self._cells):
            return False
        return all(self._cells[r][c] != num for r, c in self._box_cells(row, col))

    def conflicts(self) -> list[tuple[int, int]]:
        """Coordinates of clashing cells, one pair per clash found.

        Every filled cell is compared with its row, column and box; each
        clash contributes the cell itself followed by the cell it clashes
        with, so coordinates can repeat.
        """
        found: list[tuple[int, int]] = []
        for row, line in enumerate(self._cells):
            for col, val in enumerate(line):
                if val == 0:
                    continue
                for c, other in enumerate(line):
                    if c != col and other == val:
                        found += [(row, col), (row, c)]
                for r, other_line in enumerate(self._cells):
                    if r != row and other_line[col] == val:
                        found += [(row, col), (r, col)]
                for r, c in self._box_cells(row, col):
                    if (r, c) != (row, col) and self._cells[r][c] == val:
                        found += [(row, col), (r, c)]
        return found

    def is_full(self) -> bool:
        """Whether no cell is empty."""
        return all(val != 0 for line in self._cells for val in line)

    def copy(self) -> Board:
        """An independent copy of the board."""
        return Board(self._cells)

    def rows(self) -> list[list[int]]:
        """The cells as a fresh list of row lists."""
        return [list(line) for line in self._cells]