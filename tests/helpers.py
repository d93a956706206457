from __future__ import annotations

import numpy as np

from falling_blocks.game import BASE_SHAPES, Piece, TetrominoType


def vertical_i(x: int, y: int) -> Piece:
    return Piece(TetrominoType.I, np.ones((4, 1), dtype=np.int8), x, y)


def base_piece(kind: TetrominoType, x: int, y: int) -> Piece:
    return Piece(kind, BASE_SHAPES[kind].copy(), x, y)
