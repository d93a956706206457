from __future__ import annotations

import argparse
import os

import gymnasium as gym

# Ensure envs are registered
import falling_blocks.env  # noqa: F401

ENV_ID = "FallingBlocks-10x20-v0"


def make_env(seed: int | None = None, lines_weight: float = 1.0, terminal_penalty: float = -10.0) -> gym.Env:
    env = gym.make(ENV_ID, lines_weight=lines_weight, terminal_penalty=terminal_penalty)
    if seed is not None:
        env.reset(seed=seed)
    return env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--timesteps", type=int, default=500_000)
    p.add_argument("--logdir", type=str, default="./logs/ppo")
    p.add_argument("--save_path", type=str, default="./models/ppo_falling_blocks.zip")
    p.add_argument("--n_envs", type=int, default=4)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--lines_weight", type=float, default=1.0)
    p.add_argument("--terminal_penalty", type=float, default=-10.0)
    return p


def main() -> None:
    args = build_parser().parse_args()

    from stable_baselines3 import PPO
    from stable_baselines3.common.vec_env import SubprocVecEnv, VecMonitor

    def make_env_idx(i: int):
        def thunk():
            return make_env(args.seed + i, args.lines_weight, args.terminal_penalty)
        return thunk

    vec_env = SubprocVecEnv([make_env_idx(i) for i in range(args.n_envs)])
    vec_env = VecMonitor(vec_env)
    model = PPO(
        policy="MultiInputPolicy",
        env=vec_env,
        verbose=1,
        tensorboard_log=args.logdir,
        seed=args.seed,
    )

    os.makedirs(os.path.dirname(args.save_path) or ".", exist_ok=True)
    model.learn(total_timesteps=args.timesteps)
    model.save(args.save_path)
    print(f"Saved model to {args.save_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
