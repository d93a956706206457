from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import falling_blocks.env  # ensure registration
from falling_blocks.visualization.layout import compute_layout
from falling_blocks.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=5000)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    from stable_baselines3 import PPO

    env = gym.make("FallingBlocks-10x20-v0")
    model = PPO.load(args.model, device="auto")

    pygame.init()
    try:
        layout = compute_layout()
        screen = pygame.display.set_mode((layout.total_w, layout.total_h))
        pygame.display.set_caption("Falling Blocks - Agent Eval")
        renderer = Renderer(layout)
        clock = pygame.time.Clock()

        obs, info = env.reset(seed=args.seed)
        total_reward = 0.0
        episodes = 0
        steps = 0
        while steps < args.steps:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return

            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            steps += 1

            renderer.draw(screen, env.unwrapped.game)
            if terminated or truncated:
                episodes += 1
                print(f"Episode {episodes}: score={info['score']} lines={info['lines']} level={info['level']}")
                obs, info = env.reset()
            clock.tick(args.fps)
        print(f"{steps} steps, {episodes} episodes, total reward {total_reward:.1f}")
    finally:
        pygame.quit()
        env.close()


if __name__ == "__main__":  # pragma: no cover
    main()
