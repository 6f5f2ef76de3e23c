"""
Domain entities for the arcade game engines.

This module contains the board primitives, entities and snapshots that the
engines are built from. Nothing here keeps state across calls.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DIRECTION_VECTORS, OPPOSITE_MOVES,
    normalize_direction,
)
from .snake import Snake
from .game_state import SnakeState, Game2048State

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DIRECTION_VECTORS', 'OPPOSITE_MOVES',
    'normalize_direction',
    'Snake',
    'SnakeState',
    'Game2048State',
]
