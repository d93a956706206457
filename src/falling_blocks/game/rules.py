from __future__ import annotations

from dataclasses import dataclass

LINE_CLEAR_BASE = 100

BASE_DROP_INTERVAL_MS = 800
MIN_DROP_INTERVAL_MS = 180
LEVEL_TIME_MS = 20000  # one level every 20 seconds of play
LEVEL_STEP_MS = 80


@dataclass
class ScoringRules:
    line_clear_base: int = LINE_CLEAR_BASE

    def score_for_lines(self, lines: int) -> int:
        # Simultaneous clears pay quadratically: 100, 400, 900, 1600.
        if lines <= 0:
            return 0
        return lines * lines * self.line_clear_base


@dataclass
class DifficultyRules:
    base_interval_ms: float = BASE_DROP_INTERVAL_MS
    min_interval_ms: float = MIN_DROP_INTERVAL_MS
    level_time_ms: float = LEVEL_TIME_MS
    level_step_ms: float = LEVEL_STEP_MS

    def level_for_time(self, total_time_ms: float) -> int:
        return 1 + int(max(0.0, total_time_ms) // self.level_time_ms)

    def drop_interval(self, level: int) -> float:
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.level_step_ms)
