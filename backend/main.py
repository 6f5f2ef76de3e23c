"""
Headless driver for the arcade engines.

Plays one game of Snake or 2048 with a random player, acting as the
periodic timer and input source the engines expect from their caller.

Usage:
    python main.py snake --seed 42
    python main.py 2048 --seed 7 --output result.json
"""

import argparse
import json
import logging
import random
import time
from typing import Any, Dict, Optional

import config
from engines import Game2048, SnakeGame
from players import Random2048Player, RandomSnakePlayer

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000


def _player_seed(seed: Optional[int]) -> Optional[int]:
    return None if seed is None else seed + 1


def run_snake_simulation(
    seed: Optional[int] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
    delay: float = 0.0,
    width: int = config.SNAKE_GRID_WIDTH,
    height: int = config.SNAKE_GRID_HEIGHT,
    food_reward: int = config.SNAKE_FOOD_REWARD
) -> Dict[str, Any]:
    """
    Runs a single snake game driven by a RandomSnakePlayer.

    Args:
        seed: seeds both the engine and the player; None for fresh randomness
        max_steps: upper bound on ticks before the run is stopped
        delay: seconds to sleep between ticks (the driver period)

    Returns:
        A dictionary summarizing the game (final state, steps, reason).
    """
    game = SnakeGame(
        width=width,
        height=height,
        rng=random.Random(seed),
        food_reward=food_reward
    )
    player = RandomSnakePlayer(rng=random.Random(_player_seed(seed)))
    game.start()

    steps = 0
    while not game.game_over and steps < max_steps:
        game.set_direction(player.get_move(game.get_current_state()))
        game.tick()
        steps += 1
        if delay > 0:
            time.sleep(delay)

    state = game.get_current_state()
    if not game.game_over:
        logger.info(f"Stopped after {steps} ticks without a game over")

    return {
        "game": "snake",
        "seed": seed,
        "steps": steps,
        "finished": game.game_over,
        "length": game.length,
        "board": state.print_board(),
        "state": state.to_dict(),
    }


def run_2048_simulation(
    seed: Optional[int] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
    delay: float = 0.0
) -> Dict[str, Any]:
    """
    Runs a single 2048 game driven by a Random2048Player.

    Returns:
        A dictionary summarizing the game (final state, steps, max tile).
    """
    game = Game2048(rng=random.Random(seed))
    player = Random2048Player(rng=random.Random(_player_seed(seed)))
    game.init()

    steps = 0
    while not game.game_over and steps < max_steps:
        game.move(player.get_move(game.get_current_state()))
        steps += 1
        if delay > 0:
            time.sleep(delay)

    state = game.get_current_state()
    if not game.game_over:
        logger.info(f"Stopped after {steps} moves without a game over")

    return {
        "game": "2048",
        "seed": seed,
        "steps": steps,
        "finished": game.game_over,
        "max_tile": game.max_tile,
        "board": state.print_board(),
        "state": state.to_dict(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play one headless game of Snake or 2048 with a random player."
    )
    parser.add_argument("game", choices=["snake", "2048"],
                        help="Which engine to run")
    parser.add_argument("--seed", type=int, default=config.GAME_SEED,
                        help="Seed for tile/food spawning and the player (default: $GAME_SEED)")
    parser.add_argument("--max-steps", type=int, default=DEFAULT_MAX_STEPS,
                        help="Stop after this many ticks/moves")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds between steps (default: $SNAKE_TICK_MS for snake, 0 for 2048)")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the JSON summary to this file")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log warnings and errors")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.max_steps <= 0:
        parser.error("--max-steps must be positive")

    try:
        if args.game == "snake":
            delay = args.delay if args.delay is not None else config.SNAKE_TICK_MS / 1000.0
            result = run_snake_simulation(seed=args.seed, max_steps=args.max_steps, delay=delay)
        else:
            delay = args.delay if args.delay is not None else 0.0
            result = run_2048_simulation(seed=args.seed, max_steps=args.max_steps, delay=delay)
    except ValueError as e:
        parser.error(str(e))

    print("\n" + result["board"] + "\n")
    summary = {key: value for key, value in result.items() if key != "board"}
    print(json.dumps(summary, indent=2))

    if args.output:
        with open(args.output, "w") as f:
            json.dump(summary, f, indent=2)
        logger.info(f"Wrote summary to {args.output}")

    return result


if __name__ == "__main__":
    main()
