"""
Base player interface for the game engines.
"""

from typing import Any


class Player:
    """
    Base class/interface for player logic.

    A player turns a state snapshot (SnakeState or Game2048State) into a
    canonical direction command.
    """

    def get_move(self, game_state: Any) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Snapshot returned by the engine's get_current_state()

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
