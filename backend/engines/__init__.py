"""
Stateful game engines.

Each engine is owned by a single caller and only changes through its
public operations.
"""

from .game_2048 import Game2048
from .snake_game import SnakeGame

__all__ = [
    'Game2048',
    'SnakeGame',
]
