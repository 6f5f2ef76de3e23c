"""
Snake movement/collision engine.

The engine is timer-agnostic: an external driver calls tick() once per
logical step and set_direction() whenever a direction command arrives.
"""

import logging
import random
from typing import List, Optional, Tuple

from domain.constants import (
    DIRECTION_VECTORS,
    FOOD_REWARD,
    OPPOSITE_MOVES,
    SNAKE_GRID_SIZE,
    SNAKE_INITIAL_DIRECTION,
    normalize_direction,
)
from domain.game_state import SnakeState
from domain.snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its heading
      - A single food cell
      - Score and session high score

    Lifecycle: Idle (neither playing nor game over) -> Playing via start()
    or reset() -> GameOver via a failing tick(), terminal until restarted.
    """

    def __init__(
        self,
        width: int = SNAKE_GRID_SIZE,
        height: int = SNAKE_GRID_SIZE,
        rng: Optional[random.Random] = None,
        food_reward: int = FOOD_REWARD,
        start: Optional[Tuple[int, int]] = None,
        initial_direction: str = SNAKE_INITIAL_DIRECTION
    ):
        if width * height < 2:
            raise ValueError(f"Board {width}x{height} has no room for food.")
        if food_reward <= 0:
            raise ValueError(f"Food reward must be positive, got {food_reward}.")
        if start is None:
            start = (width // 2, height // 2)
        if not self._in_bounds(start, width, height):
            raise ValueError(f"Start position {start} is outside the {width}x{height} board.")

        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.food_reward = food_reward
        self.start_position = start
        self.initial_direction = normalize_direction(initial_direction)

        self.snake_entity: Optional[Snake] = None
        self.food: Optional[Tuple[int, int]] = None
        self.direction = self.initial_direction
        self.score = 0
        self.high_score = 0
        self.playing = False
        self.game_over = False
        self.tick_count = 0

    @staticmethod
    def _in_bounds(cell: Tuple[int, int], width: int, height: int) -> bool:
        x, y = cell
        return 0 <= x < width and 0 <= y < height

    @property
    def snake(self) -> List[Tuple[int, int]]:
        """Segments head first (empty while Idle)."""
        if self.snake_entity is None:
            return []
        return list(self.snake_entity.positions)

    @property
    def head(self) -> Optional[Tuple[int, int]]:
        return self.snake_entity.head if self.snake_entity is not None else None

    @property
    def length(self) -> int:
        return len(self.snake_entity) if self.snake_entity is not None else 0

    def start(self):
        """Begin a new game: one segment at the start cell, fresh food, score 0."""
        self.snake_entity = Snake([self.start_position])
        self.direction = self.initial_direction
        self.score = 0
        self.tick_count = 0
        self.game_over = False
        self.playing = True
        self.food = self._random_free_cell()
        logger.info(f"Snake game started at {self.start_position} heading {self.direction}, food at {self.food}")

    def reset(self):
        """Reinitialise in place; high_score survives."""
        self.start()

    def set_direction(self, direction: str) -> bool:
        """
        Queue a heading change for the next tick.

        Returns False (and changes nothing) when the game is not running or
        the new heading is the exact reverse of the current one.
        """
        move = normalize_direction(direction)
        if not self.playing or self.game_over:
            return False
        if move == OPPOSITE_MOVES[self.direction]:
            logger.debug(f"Ignoring reversal {self.direction} -> {move}")
            return False
        self.direction = move
        return True

    def tick(self) -> bool:
        """
        Advance the snake one cell.

        Returns True if the snake moved. Hitting a wall or any current
        segment ends the game and leaves the snake where it was.
        """
        if not self.playing or self.game_over:
            return False

        dx, dy = DIRECTION_VECTORS[self.direction]
        hx, hy = self.snake_entity.head
        new_head = (hx + dx, hy + dy)

        if not self._in_bounds(new_head, self.width, self.height):
            self._end_game("wall")
            return False
        if new_head in self.snake_entity:
            self._end_game("self")
            return False

        eats_food = new_head == self.food
        self.snake_entity.advance(new_head, grow=eats_food)
        self.tick_count += 1

        if eats_food:
            self.score += self.food_reward
            self.food = self._random_free_cell()
            logger.debug(f"Food eaten at {new_head}; score {self.score}, length {self.length}")
            if self.food is None:
                self._end_game("board_full")
        return True

    def _end_game(self, reason: str):
        self.snake_entity.kill(reason, self.tick_count)
        self.game_over = True
        self.playing = False
        self.high_score = max(self.high_score, self.score)
        logger.info(
            f"Snake game over ({reason}) after {self.tick_count} ticks. "
            f"Score: {self.score}, high score: {self.high_score}"
        )

    def _random_free_cell(self) -> Optional[Tuple[int, int]]:
        """
        Return a uniformly random cell (x, y) not occupied by the snake,
        or None if the snake covers the whole board.
        """
        occupied = set(self.snake_entity.positions)
        free = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in occupied
        ]
        if not free:
            return None
        return self.rng.choice(free)

    def get_current_state(self) -> SnakeState:
        """
        Return a snapshot of the current board as a SnakeState.
        """
        return SnakeState(
            tick_number=self.tick_count,
            snake_positions=self.snake,
            food=self.food,
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            width=self.width,
            height=self.height,
            playing=self.playing,
            game_over=self.game_over,
            death_reason=self.snake_entity.death_reason if self.snake_entity else None
        )
