from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray
Color = Tuple[int, int, int]


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
}

EMPTY_COLOR: Color = (0, 0, 0)

PIECE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.Z: (255, 0, 0),
}


def color_for_value(v: int) -> Color:
    """Display color of a board cell value (negative values mark the falling piece)."""
    if v == 0:
        return EMPTY_COLOR
    return PIECE_COLORS.get(abs(int(v)), EMPTY_COLOR)


def rotate_clockwise(matrix: Shape) -> Shape:
    """Rotate a piece matrix 90 degrees clockwise.

    Row i of the result is column i of the input read bottom-to-top. Rows left
    without any occupied cell are dropped so the bounding box stays tight.
    """
    rotated = np.ascontiguousarray(matrix[::-1].T, dtype=np.int8)
    occupied = np.any(rotated != 0, axis=1)
    return rotated[occupied]


@dataclass
class Piece:
    kind: TetrominoType
    matrix: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, board_width: int) -> "Piece":
        matrix = BASE_SHAPES[kind].copy()
        x = (board_width - matrix.shape[1]) // 2
        return cls(kind=kind, matrix=matrix, x=x, y=0)

    @property
    def width(self) -> int:
        return int(self.matrix.shape[1])

    @property
    def height(self) -> int:
        return int(self.matrix.shape[0])

    def cells(self) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for dy in range(self.height):
            for dx in range(self.width):
                if self.matrix[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.kind, self.matrix, self.x + dx, self.y + dy)
