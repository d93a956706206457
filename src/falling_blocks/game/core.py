from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

import numpy as np

from .grid import GameGrid
from .pieces import Piece, TetrominoType, rotate_clockwise
from .rules import DifficultyRules, ScoringRules

BOARD_COLS = 10
BOARD_ROWS = 20
CELL_SIZE = 30


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    RESTART = 5


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


class FallingBlocksGame:
    """Owns the board, the active piece and the session counters.

    Time only enters through ``tick(elapsed_ms)``; the engine knows nothing
    about frames or clocks.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        difficulty: Optional[DifficultyRules] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.difficulty = difficulty or DifficultyRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(BOARD_COLS, BOARD_ROWS)
        self.state = GameState.PLAYING
        self.current_piece: Optional[Piece] = None
        self.next_kind: Optional[TetrominoType] = None
        self.score = 0
        self.lines = 0
        self.pieces_placed = 0
        self.level = 1
        self.total_time_ms = 0.0
        self.drop_counter_ms = 0.0
        self.drop_interval_ms = self.difficulty.drop_interval(1)
        self.reset()

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines = 0
        self.pieces_placed = 0
        self.level = 1
        self.total_time_ms = 0.0
        self.drop_counter_ms = 0.0
        self.drop_interval_ms = self.difficulty.drop_interval(1)
        self.state = GameState.PLAYING
        self.next_kind = self._random_kind()
        self.spawn()

    def _random_kind(self) -> TetrominoType:
        # Independent uniform draws; repeats are allowed.
        return self.rng.choice(list(TetrominoType))

    def spawn(self) -> None:
        kind = self.next_kind if self.next_kind is not None else self._random_kind()
        self.current_piece = Piece.spawn(kind, self.grid.width)
        self.next_kind = self._random_kind()
        if self.grid.collides(self.current_piece):
            self.state = GameState.GAME_OVER

    def move(self, direction: int) -> None:
        if self.game_over or self.current_piece is None or direction not in (-1, 1):
            return
        shifted = self.current_piece.moved(dx=direction)
        if not self.grid.collides(shifted):
            self.current_piece = shifted

    def rotate(self) -> None:
        if self.game_over or self.current_piece is None:
            return
        piece = self.current_piece
        rotated = rotate_clockwise(piece.matrix)
        # Unshifted first, then kick left, then kick right.
        for dx in (0, -1, 1):
            candidate = Piece(piece.kind, rotated, piece.x + dx, piece.y)
            if not self.grid.collides(candidate):
                self.current_piece = candidate
                return

    def soft_drop(self) -> None:
        if self.game_over or self.current_piece is None:
            return
        lowered = self.current_piece.moved(dy=1)
        if self.grid.collides(lowered):
            self._lock_piece()
            self.spawn()
        else:
            self.current_piece = lowered
        self.drop_counter_ms = 0.0

    def hard_drop(self) -> None:
        if self.game_over or self.current_piece is None:
            return
        piece = self.current_piece
        dy = 0
        while not self.grid.collides(piece.moved(dy=dy + 1)):
            dy += 1
        self.current_piece = piece.moved(dy=dy)
        self._lock_piece()
        self.spawn()
        self.drop_counter_ms = 0.0

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        self.grid.merge(self.current_piece)
        self.pieces_placed += 1
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            self.lines += cleared
            self.score += self.rules.score_for_lines(cleared)
        return cleared

    def tick(self, elapsed_ms: float) -> None:
        # Clocks only run forward; level never drops within a session.
        if self.game_over or elapsed_ms <= 0:
            return
        self.drop_counter_ms += elapsed_ms
        self.total_time_ms += elapsed_ms
        self.level = self.difficulty.level_for_time(self.total_time_ms)
        self.drop_interval_ms = self.difficulty.drop_interval(self.level)
        if self.drop_counter_ms > self.drop_interval_ms:
            self.soft_drop()

    def apply_action(self, action: Optional[Action]) -> None:
        if action is None:
            return
        if action == Action.RESTART:
            if self.game_over:
                self.reset()
            return
        if self.game_over:
            return

        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.current_piece.kind)
        return state

    def get_info(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "lines": self.lines,
            "level": self.level,
            "pieces_placed": self.pieces_placed,
            "next_piece": int(self.next_kind) if self.next_kind is not None else 0,
            "drop_interval_ms": self.drop_interval_ms,
            "game_over": self.game_over,
        }
