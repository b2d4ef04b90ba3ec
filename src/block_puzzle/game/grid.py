from __future__ import annotations

import numpy as np

from .pieces import COLS, ROWS, Piece


class GameGrid:
    """Fixed 10x20 board of cell values.

    The grid uses 0 for empty cells and 1..7 for cells filled by a locked
    piece, the value identifying the tetromino that left it. Row 0 is the top.
    """

    def __init__(self) -> None:
        self.width = COLS
        self.height = ROWS
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, piece: Piece) -> bool:
        # Cells above the top edge only collide with the side walls.
        for x, y, _ in piece.cells():
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, piece: Piece) -> None:
        """Write the piece into the board, dropping cells outside it."""
        for x, y, value in piece.cells():
            if self.is_inside(x, y):
                self.grid[y, x] = value

    def clear_full_rows(self) -> int:
        """Remove full rows bottom-up and return how many were removed."""
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if np.all(self.grid[y] != 0):
                # Shift everything above down by one and blank the top row.
                self.grid[1 : y + 1] = self.grid[0:y].copy()
                self.grid[0] = 0
                cleared += 1
                # Same index now holds the row that was above; re-check it.
            else:
                y -= 1
        return cleared

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
