#!/usr/bin/env python3
"""
Minesweeper - command line entry point.

Usage:
    python main.py levels
    python main.py play-random [--level LEVEL] [--seed N]
    python main.py evaluate [--level LEVEL] [--games N] [--seed N]
"""
import argparse
import logging
from typing import Dict, Optional

import numpy as np

from src.minesweeper import Engine, GameLevel, MinesweeperEnv

logger = logging.getLogger(__name__)


def pick_random_action(env: MinesweeperEnv, rng: np.random.Generator) -> int:
    """Choose uniformly among the cells that can still be revealed."""
    valid_indices = np.flatnonzero(env.get_action_mask())
    return int(rng.choice(valid_indices))


def play_episode(
    env: MinesweeperEnv, rng: np.random.Generator, seed: Optional[int] = None
) -> Dict[str, object]:
    """Play one game with random reveals and return the final info dict."""
    env.reset(seed=seed)
    done = False
    info = {}
    while not done:
        action = pick_random_action(env, rng)
        _, _, terminated, truncated, info = env.step(action)
        done = terminated or truncated
    return info


def list_levels(args: argparse.Namespace) -> None:
    """Print the difficulty presets."""
    print(f"{'#':<3} {'Level':<12} {'Size':<8} {'Mines':>5}")
    print("-" * 31)
    for level in GameLevel:
        size = f"{level.width}x{level.height}"
        print(f"{level.number:<3} {level.description:<12} {size:<8} {level.num_mines:>5}")


def play_random(args: argparse.Namespace) -> None:
    """Play a single random game and show the final board."""
    level = GameLevel.from_name(args.level)
    env = MinesweeperEnv(config=level.config)
    rng = np.random.default_rng(args.seed)

    info = play_episode(env, rng, seed=args.seed)
    engine: Engine = env.engine

    print(engine.render())
    print()
    print(f"Result: {info['game_state']} after {info['steps']} moves")
    print(f"Revealed: {info['revealed']} of {engine.width * engine.height} cells")


def evaluate(args: argparse.Namespace) -> None:
    """Report how a random player fares on a level."""
    level = GameLevel.from_name(args.level)
    env = MinesweeperEnv(config=level.config)
    rng = np.random.default_rng(args.seed)

    print(f"Evaluating random play on {level} over {args.games} games...")
    wins = 0
    revealed = []
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        info = play_episode(env, rng, seed=seed)
        wins += info["game_state"] == "WON"
        revealed.append(info["revealed"])
        logger.debug("Game %d: %s", game + 1, info["game_state"])

    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {np.mean(revealed):.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper game engine")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("levels", help="List difficulty levels")

    level_names = [level.name.lower().replace("_", "-") for level in GameLevel]

    play_parser = subparsers.add_parser(
        "play-random", help="Play one game with random moves"
    )
    play_parser.add_argument(
        "--level", choices=level_names, default="easy", help="Difficulty level"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Measure random play over many games"
    )
    eval_parser.add_argument(
        "--level", choices=level_names, default="easy", help="Difficulty level"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "levels":
        list_levels(args)
    elif args.command == "play-random":
        play_random(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
