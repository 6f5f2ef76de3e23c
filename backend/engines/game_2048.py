"""
2048 tile-merge engine.

Owns the board, executes directional moves with merge semantics, spawns
tiles and detects the terminal state. Rendering and input handling live
outside this module.
"""

import logging
import random
from typing import List, Optional, Tuple

from domain import grid
from domain.constants import GRID_SIZE_2048, STARTING_TILES, TILE_TWO_PROBABILITY, normalize_direction
from domain.game_state import Game2048State

logger = logging.getLogger(__name__)


class Game2048:
    """
    Manages:
      - Board (size x size, None for empty cells)
      - Score for the current game and best score for the session
      - Game-over detection

    The engine starts Idle; call init() before moving. Randomness comes only
    from ``rng`` (anything with choice() and random()), so tests can script it.
    """

    def __init__(self, size: int = GRID_SIZE_2048, rng: Optional[random.Random] = None):
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        self.size = size
        self.rng = rng or random.Random()
        self._board: Optional[grid.Board] = None
        self.score = 0
        self.best_score = 0
        self.game_over = False
        self.move_count = 0

    @property
    def is_ready(self) -> bool:
        return self._board is not None

    @property
    def board(self) -> grid.Board:
        """A copy of the current board (empty board while Idle)."""
        if self._board is None:
            return grid.empty_board(self.size)
        return grid.copy_board(self._board)

    @property
    def max_tile(self) -> int:
        return grid.max_tile(self._board) if self._board is not None else 0

    def init(self):
        """Start a new game: fresh board with two tiles, score back to 0."""
        self._board = grid.empty_board(self.size)
        for _ in range(STARTING_TILES):
            self._spawn_tile()
        self.score = 0
        self.move_count = 0
        self.game_over = grid.is_game_over(self._board)
        logger.debug(f"2048 board initialised:\n{self.get_current_state().print_board()}")

    def reset(self):
        """Reinitialise in place; best_score survives."""
        logger.info(f"Resetting 2048 game (score {self.score}, best {self.best_score})")
        self.init()

    def move(self, direction: str) -> bool:
        """
        Slide the board in ``direction``.

        Returns True if the board changed. A move that changes nothing, a
        move after game over and a move before init() are all no-ops.
        """
        move = normalize_direction(direction)
        if self._board is None or self.game_over:
            return False

        moved, gained = grid.apply_move(self._board, move)
        if moved == self._board:
            logger.debug(f"Move {move} had no effect")
            return False

        self._board = moved
        self._spawn_tile()
        self.score += gained
        self.best_score = max(self.best_score, self.score)
        self.move_count += 1
        self.game_over = grid.is_game_over(self._board)

        logger.debug(f"Move {move}: +{gained}, score {self.score}")
        if self.game_over:
            logger.info(
                f"2048 game over after {self.move_count} moves. "
                f"Score: {self.score}, max tile: {self.max_tile}"
            )
        return True

    def _spawn_tile(self) -> Optional[Tuple[int, int]]:
        """Place a 2 (p=0.9) or a 4 in a uniformly chosen empty cell."""
        cells: List[Tuple[int, int]] = grid.empty_cells(self._board)
        if not cells:
            return None
        row, col = self.rng.choice(cells)
        self._board[row][col] = 2 if self.rng.random() < TILE_TWO_PROBABILITY else 4
        return (row, col)

    def get_current_state(self) -> Game2048State:
        """
        Return a snapshot of the current board as a Game2048State.
        """
        return Game2048State(
            board=self.board,
            score=self.score,
            best_score=self.best_score,
            move_count=self.move_count,
            game_over=self.game_over
        )
