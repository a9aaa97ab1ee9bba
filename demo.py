#!/usr/bin/env python3
"""Watch random moves play out on a Minesweeper board."""
import argparse
import os
import time

import numpy as np

from main import pick_random_action
from src.minesweeper import GameLevel, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show(env: MinesweeperEnv, header: str, status: str) -> None:
    """Redraw the board with a two-line status header."""
    engine = env.engine
    changed = len(engine.drain_changed_locations())
    clear_screen()
    print(header)
    print(
        f"Mines left: {engine.remaining_mines():>3} | "
        f"Time: {engine.elapsed_seconds():>3}s | "
        f"Cells redrawn: {changed}"
    )
    print(status + "\n")
    print(env.render())


def demo(delay: float, games: int, level: GameLevel, seed=None) -> None:
    env = MinesweeperEnv(config=level.config, render_mode="ansi")
    rng = np.random.default_rng(seed)
    wins = 0

    print(f"Level: {level} ({level.width}x{level.height}, {level.num_mines} mines)")
    time.sleep(delay * 3)

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)
        header = f"=== {level} | Game {game + 1}/{games} | Wins: {wins} ==="
        show(env, header, "New board")
        time.sleep(delay)

        info = {"game_state": "PLAYING"}
        while info["game_state"] == "PLAYING":
            action = pick_random_action(env, rng)
            x, y = action % level.width, action // level.width
            _, reward, _, _, info = env.step(action)
            show(env, header, f"Revealed ({x}, {y}), reward {reward:+.1f}")
            time.sleep(delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(delay * 3)

    print(f"\n=== Final: {wins}/{games} wins ({100 * wins / games:.0f}%) ===")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--delay", type=float, default=0.3, help="Seconds between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--level", default="easy", help="Difficulty level name")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(args.delay, args.games, GameLevel.from_name(args.level), seed=args.seed)
