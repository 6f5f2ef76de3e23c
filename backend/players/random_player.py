"""
Random player implementations - pick random moves that keep the game going.
"""

import random
from typing import List, Optional

from domain import grid
from domain.constants import DIRECTION_VECTORS, OPPOSITE_MOVES, VALID_MOVES
from domain.game_state import Game2048State, SnakeState
from .base import Player


class RandomSnakePlayer(Player):
    """
    A random AI that picks a direction that avoids walls, its own body and
    reversing onto itself.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: SnakeState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITE_MOVES[game_state.direction]:
                continue
            dx, dy = DIRECTION_VECTORS[move]
            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                    new_y < 0 or new_y >= game_state.height):
                continue

            # The engine checks the head against every current segment, tail included
            if (new_x, new_y) in snake_positions:
                continue

            valid_moves.append(move)

        # No safe move left: keep going straight
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)


class Random2048Player(Player):
    """
    Picks uniformly among the directions that would change the board.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: Game2048State) -> str:
        board = game_state.board
        effective = [
            move for move in sorted(VALID_MOVES)
            if grid.apply_move(board, move)[0] != board
        ]
        if not effective:
            return self.rng.choice(sorted(VALID_MOVES))
        return self.rng.choice(effective)
