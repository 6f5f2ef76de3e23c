"""
Player implementations for the arcade engines.

Players stand in for the input side: they read a state snapshot and return
a canonical direction command.
"""

from .base import Player
from .random_player import RandomSnakePlayer, Random2048Player

__all__ = [
    'Player',
    'RandomSnakePlayer',
    'Random2048Player',
]
