from __future__ import annotations

import numpy as np

from .pieces import Piece


class GameGrid:
    """Fixed-size board of locked cells.

    The grid uses 0 for empty cells and the tetromino type value (1..7) for
    filled cells. Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, piece: Piece) -> bool:
        # Cells above the top edge are legal; pieces spawn and fall through it.
        for x, y in piece.cells():
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, piece: Piece) -> None:
        value = int(piece.kind)
        for x, y in piece.cells():
            if self.is_inside(x, y):
                self.grid[y, x] = value

    def clear_full_rows(self) -> int:
        """Remove full rows, shift the rest down and return how many were cleared."""
        full = np.all(self.grid != 0, axis=1)
        num = int(full.sum())
        if num == 0:
            return 0
        kept = self.grid[~full]
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
