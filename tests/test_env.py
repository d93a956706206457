from __future__ import annotations

import gymnasium as gym
import numpy as np

import falling_blocks.env  # noqa: F401
from falling_blocks.env.falling_blocks_env import NOOP, FallingBlocksEnv


def test_registered_env_runs():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, info = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    for _ in range(50):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        if terminated or truncated:
            break
    assert env.observation_space.contains(obs)
    env.close()


def test_reset_observation():
    env = FallingBlocksEnv()
    obs, info = env.reset(seed=3)
    assert obs["board"].shape == (20, 10)
    assert obs["board"].dtype == np.int8
    # Only the falling piece is on the board
    assert (obs["board"] < 0).sum() == 4
    assert (obs["board"] > 0).sum() == 0
    assert 1 <= obs["next_piece"] <= 7
    assert obs["level"].tolist() == [1.0]
    assert info["score"] == 0
    assert info["steps"] == 0


def test_seed_reproducible():
    a, b = FallingBlocksEnv(), FallingBlocksEnv()
    obs_a, _ = a.reset(seed=11)
    obs_b, _ = b.reset(seed=11)
    assert np.array_equal(obs_a["board"], obs_b["board"])
    assert obs_a["next_piece"] == obs_b["next_piece"]


def test_gravity_runs_with_noops():
    env = FallingBlocksEnv(frame_ms=100.0)
    env.reset(seed=0)
    y = env.game.current_piece.y
    for _ in range(9):
        env.step(NOOP)
    assert env.game.current_piece.y == y + 1


def test_hard_drop_locks_piece():
    env = FallingBlocksEnv()
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(4)
    assert info["pieces_placed"] == 1
    assert (obs["board"] > 0).sum() == 4
    assert reward == 0.0
    assert not terminated


def test_line_clear_reward():
    env = FallingBlocksEnv(lines_weight=2.0)
    env.reset(seed=0)
    game = env.game
    game.grid.grid[19, 1:] = 1
    game.current_piece.matrix = np.ones((1, 1), dtype=np.int8)
    game.current_piece.x = 0
    obs, reward, terminated, truncated, info = env.step(4)
    assert info["lines"] == 1
    assert reward == 100.0 + 2.0
    assert info["reward_components"]["score"] == 100.0


def test_out_of_range_action_is_noop():
    env = FallingBlocksEnv()
    env.reset(seed=0)
    piece = env.game.current_piece
    env.step(42)
    assert env.game.current_piece.x == piece.x
    assert env.game.pieces_placed == 0


def test_terminates_on_game_over():
    env = FallingBlocksEnv(terminal_penalty=-5.0)
    env.reset(seed=0)
    terminated = False
    reward = 0.0
    for _ in range(500):
        _, reward, terminated, truncated, info = env.step(4)
        if terminated:
            break
    assert terminated
    assert info["game_over"] is True
    assert reward == -5.0


def test_truncates_after_max_steps():
    env = FallingBlocksEnv(max_episode_steps=3)
    env.reset(seed=0)
    results = [env.step(NOOP) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_render_rgb_array():
    env = FallingBlocksEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8
    assert img.any()
    assert FallingBlocksEnv().render() is None
