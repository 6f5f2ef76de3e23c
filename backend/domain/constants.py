"""
Game constants for the arcade engines.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is top-left and y grows downward
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_MOVES: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# 2048 settings
GRID_SIZE_2048 = 4
STARTING_TILES = 2
TILE_TWO_PROBABILITY = 0.9

# Snake settings
SNAKE_GRID_SIZE = 20
SNAKE_START = (10, 10)
SNAKE_INITIAL_DIRECTION = RIGHT
FOOD_REWARD = 10
TICK_INTERVAL_MS = 150


def normalize_direction(direction: str) -> str:
    """
    Return the canonical form of a direction string.

    Raises:
        ValueError: if the value is not one of UP, DOWN, LEFT, RIGHT
    """
    if not isinstance(direction, str):
        raise ValueError(f"Direction must be a string, got {direction!r}")
    move = direction.strip().upper()
    if move not in VALID_MOVES:
        raise ValueError(f"Unknown direction: {direction!r}")
    return move
