"""
Tests for players/ - random players used by the headless driver.
"""

import sys
import os
import random

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from players import Player, RandomSnakePlayer, Random2048Player
from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.game_state import SnakeState, Game2048State

_ = None


def snake_state(positions, direction=RIGHT, width=10, height=10) -> SnakeState:
    return SnakeState(
        tick_number=0,
        snake_positions=positions,
        food=(7, 7),
        direction=direction,
        score=0,
        high_score=0,
        width=width,
        height=height,
        playing=True,
        game_over=False
    )


def board_state(board) -> Game2048State:
    return Game2048State(board=board, score=0, best_score=0, move_count=0, game_over=False)


class TestPlayer:
    """Tests for the base Player."""

    def test_get_move_not_implemented(self):
        """The base class has no strategy of its own."""
        with pytest.raises(NotImplementedError):
            Player().get_move(snake_state([(5, 5)]))


class TestRandomSnakePlayer:
    """Tests for RandomSnakePlayer."""

    def test_returns_valid_move(self):
        """get_move() returns a canonical direction."""
        player = RandomSnakePlayer(rng=random.Random(1))
        assert player.get_move(snake_state([(5, 5)])) in VALID_MOVES

    def test_avoids_walls_when_possible(self):
        """In the top-left corner heading LEFT only DOWN is safe."""
        player = RandomSnakePlayer(rng=random.Random(2))
        state = snake_state([(0, 0)], direction=LEFT)
        for _i in range(20):
            assert player.get_move(state) == DOWN

    def test_never_reverses(self):
        """The reverse heading is never proposed."""
        player = RandomSnakePlayer(rng=random.Random(3))
        state = snake_state([(5, 5)], direction=RIGHT)
        for _i in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_own_body(self):
        """Cells occupied by the body, tail included, are avoided."""
        player = RandomSnakePlayer(rng=random.Random(4))
        # Heading UP with the body looping round on the right
        state = snake_state([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], direction=UP)
        for _i in range(30):
            assert player.get_move(state) in {UP, LEFT}

    def test_trapped_snake_keeps_heading(self):
        """With no safe move the player goes straight."""
        player = RandomSnakePlayer(rng=random.Random(5))
        state = snake_state([(0, 0), (1, 0)], direction=LEFT, width=2, height=1)
        assert player.get_move(state) == LEFT


class TestRandom2048Player:
    """Tests for Random2048Player."""

    def test_picks_only_effective_moves(self):
        """On a top-left packed row only RIGHT and DOWN change the board."""
        player = Random2048Player(rng=random.Random(6))
        state = board_state([[2, 4, _, _], [_] * 4, [_] * 4, [_] * 4])
        for _i in range(30):
            assert player.get_move(state) in {RIGHT, DOWN}

    def test_locked_board_still_returns_a_direction(self):
        """A board with no effective move yields some direction."""
        player = Random2048Player(rng=random.Random(7))
        state = board_state([
            [2, 4, 2, 4],
            [4, 2, 4, 2],
            [2, 4, 2, 4],
            [4, 2, 4, 2],
        ])
        assert player.get_move(state) in VALID_MOVES
