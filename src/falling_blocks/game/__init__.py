"""Game module for Falling Blocks.

Exports the simulation engine and supporting classes:
- GameGrid: Board representation, collision, merging and row clearing
- Piece: Active tetromino with its orientation matrix and position
- TetrominoType: Enum of the 7 piece types
- ScoringRules / DifficultyRules: Line-clear scoring and the time-driven level ramp
- FallingBlocksGame: Engine state machine driven by actions and elapsed time
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, PIECE_COLORS, Piece, TetrominoType, color_for_value, rotate_clockwise
from .rules import DifficultyRules, ScoringRules
from .core import BOARD_COLS, BOARD_ROWS, CELL_SIZE, Action, FallingBlocksGame, GameConfig, GameState

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "BASE_SHAPES",
    "PIECE_COLORS",
    "color_for_value",
    "rotate_clockwise",
    "ScoringRules",
    "DifficultyRules",
    "FallingBlocksGame",
    "GameConfig",
    "GameState",
    "Action",
    "BOARD_COLS",
    "BOARD_ROWS",
    "CELL_SIZE",
]
