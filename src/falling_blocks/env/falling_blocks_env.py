from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, TetrominoType, color_for_value

# Discrete action index -> engine action; the last index does nothing
ENV_ACTIONS: Tuple[Optional[Action], ...] = (
    Action.LEFT,
    Action.RIGHT,
    Action.ROTATE,
    Action.SOFT_DROP,
    Action.HARD_DROP,
    None,
)
NOOP = len(ENV_ACTIONS) - 1


class FallingBlocksEnv(gym.Env):
    """Agent-facing wrapper around :class:`FallingBlocksGame`.

    Every step applies one action and then advances the engine clock by
    ``frame_ms``, so gravity and the level ramp run exactly as they do for a
    human player at the same frame rate.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_ms: float = 1000.0 / 60.0,
        max_episode_steps: int = 20000,
        lines_weight: float = 0.0,
        step_penalty: float = 0.0,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.game = FallingBlocksGame(config)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        # Reward shaping parameters
        self.lines_weight = float(lines_weight)
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        n_types = len(TetrominoType)
        self.observation_space = spaces.Dict(
            {
                # Locked cells are 1..7, the falling piece is -1..-7
                "board": spaces.Box(low=-n_types, high=n_types, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(n_types + 1),
                "level": spaces.Box(low=1.0, high=np.inf, shape=(1,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(len(ENV_ACTIONS))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        next_kind = self.game.next_kind
        return {
            "board": self.game.get_state(),
            "next_piece": int(next_kind) if next_kind is not None else 0,
            "level": np.array([self.game.level], dtype=np.float32),
        }

    def _get_info(self) -> Dict[str, Any]:
        info = self.game.get_info()
        info["steps"] = self._steps
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.seed(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        index = int(action)
        if not 0 <= index < len(ENV_ACTIONS):
            index = NOOP

        score_before = self.game.score
        lines_before = self.game.lines

        self.game.apply_action(ENV_ACTIONS[index])
        self.game.tick(self.frame_ms)
        self._steps += 1

        reward_components: Dict[str, float] = {
            "score": float(self.game.score - score_before),
            "lines": self.lines_weight * float(self.game.lines - lines_before),
            "step": self.step_penalty,
        }
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))
        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            board = self.game.get_state()
            cell = 12
            h, w = board.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(board[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
