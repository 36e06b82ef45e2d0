"""The Sudoku window: a 9x9 grid of tiles plus game controls."""

from __future__ import annotations

import argparse
import logging
import random

from .app import App
from .board import SIZE, Board
from .button import PushButton
from .dropdown import Dropdown
from .generator import Difficulty, generate
from .graphics import Canvas, Color
from .statictext import StaticText
from .tile import NumberTile

logger = logging.getLogger(__name__)

TILE_SIZE = 50
GRID_ORIGIN = 75
VICTORY_MESSAGE = "Gratulálunk! Megoldottad a feladatot!"
VICTORY_BACKGROUND = Color(200, 255, 200)
VICTORY_TEXT = Color(0, 80, 0)
DIFFICULTIES = [difficulty.value for difficulty in Difficulty]


def _tile_offset(index: int) -> int:
    # Each tile is one pixel apart, with three more between 3x3 boxes.
    return GRID_ORIGIN + index + TILE_SIZE * index + index // 3 * 3


class SudokuApp(App):
    """A playable Sudoku board with new game, reset and clear buttons."""

    def __init__(
        self,
        width: int,
        height: int,
        canvas: Canvas | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(width, height, canvas)
        self.rng = rng if rng is not None else random.Random()
        self.sudoku_game = Board()
        self.generated = Board()
        self.all_valid = True
        self.victory_text: StaticText | None = None

        self.tiles = [
            [
                NumberTile(
                    self,
                    _tile_offset(col),
                    _tile_offset(row),
                    TILE_SIZE,
                    TILE_SIZE,
                    row,
                    col,
                    0,
                    self.update,
                )
                for col in range(SIZE)
            ]
            for row in range(SIZE)
        ]

        self.difficulty_menu = Dropdown(self, 550, 75, 3, DIFFICULTIES)
        self.new_game_button = PushButton(
            self, 550, 150, 120, 50, "New Game", self._new_game
        )
        self.reset_button = PushButton(
            self, 550, 210, 120, 50, "Reset Game", self._reset_game
        )
        self.clear_button = PushButton(
            self, 550, 270, 120, 50, "Clear", self._clear_game
        )

        for widget in self.widgets:
            widget.draw()
        self.canvas.refresh()

    def _all_tiles(self):
        return (tile for line in self.tiles for tile in line)

    def _new_game(self) -> None:
        self.remove_victory_text()
        self.generate_board(self.difficulty())

    def _reset_game(self) -> None:
        self.remove_victory_text()
        self.sudoku_game = self.generated.copy()
        self.set_board(self.sudoku_game)

    def _clear_game(self) -> None:
        self.remove_victory_text()
        self.reset_tiles()

    def difficulty(self) -> Difficulty:
        """The difficulty chosen in the menu, Medium if it is unrecognised."""
        try:
            return Difficulty(self.difficulty_menu.value_string())
        except ValueError:
            return Difficulty.MEDIUM

    def reset_tiles(self) -> None:
        """Empty, unlock and validate every tile."""
        for tile in self._all_tiles():
            tile.set_value(0)
            tile.locked = False
            tile.valid = True

    def set_board(self, board: Board) -> None:
        """Show board on the tiles, locking the given digits."""
        self.reset_tiles()
        for tile in self._all_tiles():
            num = board[tile.row, tile.col]
            if num > 0:
                tile.set_value(num)
                tile.locked = True

    def generate_board(self, difficulty: Difficulty) -> None:
        """Start a new uniquely solvable puzzle of the given difficulty."""
        self.sudoku_game = generate(difficulty, self.rng)
        self.generated = self.sudoku_game.copy()
        self.set_board(self.sudoku_game)

    def set_all_valid(self) -> None:
        for tile in self._all_tiles():
            tile.valid = True

    def set_conflicts(self) -> None:
        """Mark the tiles whose digits clash with another."""
        conflicts = self.sudoku_game.conflicts()
        self.set_all_valid()
        for row, col in conflicts:
            self.tiles[row][col].valid = False
        self.all_valid = not conflicts

    def lock_all(self) -> None:
        for tile in self._all_tiles():
            tile.locked = True

    def show_victory_screen(self) -> None:
        """Show the congratulation banner and freeze the board."""
        text_width = self.canvas.text_width(VICTORY_MESSAGE)
        center_x = int((self.width - text_width) / 2)
        self.victory_text = StaticText(
            self,
            center_x,
            20,
            text_width + 20,
            40,
            VICTORY_MESSAGE,
            VICTORY_BACKGROUND,
            VICTORY_TEXT,
        )
        self.lock_all()

    def remove_victory_text(self) -> None:
        """Erase and drop the congratulation banner, if shown."""
        if self.victory_text is not None:
            self.victory_text.clear()
            self.remove_widget(self.victory_text)
            self.victory_text = None

    def update(self, row: int, col: int) -> None:
        """Copy a tile's value into the game and check for clashes or a win."""
        self.sudoku_game[row, col] = self.tiles[row][col].value
        self.set_conflicts()
        if self.all_valid and self.sudoku_game.is_full():
            logger.info("puzzle solved")
            self.show_victory_screen()


def main(argv: list[str] | None = None) -> int:
    """Open the Sudoku window and run it until it is closed."""
    parser = argparse.ArgumentParser(description="Play Sudoku.")
    parser.parse_args(argv)
    app = SudokuApp(800, 800)
    app.event_loop()
    return 0