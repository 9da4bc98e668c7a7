# src/autoplay/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
from dataclasses import replace
from typing import List, Tuple

from src.autoplay.env import SnakeEnv
from src.autoplay.policies import POLICIES, get_policy
from src.neon_snake.config import CFG

FIELDS = ["ep", "steps", "score", "outcome"]


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, max_steps: int, seed: int | None = None) -> Tuple[int, int, str]:
    """
    Play one game with a built-in policy.

    Returns:
        steps: number of ticks taken
        score: final score
        outcome: final session state ("over", "won"), or "timeout"
                 if max_steps ran out first
    """
    choose = get_policy(policy)
    obs = env.reset(seed)
    env.render()
    steps = 0
    info = {"score": 0, "session": "running"}

    while steps < max_steps:
        obs, done, info = env.step(choose(obs, env))
        env.render()
        steps += 1
        if done:
            return steps, info["score"], info["session"]

    return steps, info["score"], "timeout"


def run_many(env: SnakeEnv, policy: str, episodes: int, max_steps: int,
             seed: int | None = None) -> List[dict]:
    rows = []
    for ep in range(1, episodes + 1):
        ep_seed = None if seed is None else seed + ep
        steps, score, outcome = run_episode(env, policy, max_steps, ep_seed)
        rows.append({"ep": ep, "steps": steps, "score": score, "outcome": outcome})
        print(f"{ep},{steps},{score},{outcome}")
    return rows


def write_csv(rows: List[dict], out_csv: str) -> None:
    out_dir = os.path.dirname(out_csv)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(out_csv, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        writer.writerows(rows)


# --------------------------
# CLI
# --------------------------
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play neon snake headless with a built-in policy")
    parser.add_argument("--policy", choices=sorted(POLICIES), default="greedy")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--grid", type=int, default=CFG.grid_count, help="cells per side")
    parser.add_argument("--max-steps", type=int, default=10_000)
    parser.add_argument("--out", default=None, help="CSV file for per-episode results")
    parser.add_argument("--render", action="store_true", help="watch the games in a window")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None) -> List[dict]:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = replace(CFG, seed=args.seed, grid_count=args.grid).validate()
    env = SnakeEnv(config=config, seed_value=args.seed, render_enabled=args.render)

    print(f"Autoplay: policy={args.policy}, episodes={args.episodes}, grid={args.grid}")
    print(",".join(FIELDS))
    try:
        rows = run_many(env, args.policy, args.episodes, args.max_steps, args.seed)
    finally:
        env.close()

    if rows:
        best = max(r["score"] for r in rows)
        mean = sum(r["score"] for r in rows) / len(rows)
        print(f"\nbest={best}, mean={mean:.1f}")

    if args.out:
        write_csv(rows, args.out)
        print(f"Saved results → {args.out}")
    return rows


if __name__ == "__main__":
    main()
