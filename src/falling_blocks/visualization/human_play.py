from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from falling_blocks.game import FallingBlocksGame, GameConfig
from .controls import translate_event
from .layout import compute_layout
from .renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(GameConfig(random_seed=args.seed))
        layout = compute_layout()
        screen = pygame.display.set_mode((layout.total_w, layout.total_h))
        pygame.display.set_caption("Falling Blocks")
        renderer = Renderer(layout)

        running = True
        while running:
            dt = clock.tick(args.fps)

            # Each input is applied immediately, in arrival order
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.apply_action(translate_event(event, layout, game.game_over))

            game.tick(dt)
            renderer.draw(screen, game)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
