from __future__ import annotations

import os

# Headless pygame for renderer/controls tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from falling_blocks.game import FallingBlocksGame, GameConfig


@pytest.fixture
def game() -> FallingBlocksGame:
    return FallingBlocksGame(GameConfig(random_seed=1234))
