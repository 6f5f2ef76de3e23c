"""
Snapshots of the engines at a point in time.

Presentation code reads these instead of reaching into engine internals.
"""

from typing import Any, Dict, List, Optional, Tuple


class SnakeState:
    """
    A snapshot of the snake game at a specific tick.

    Attributes:
        tick_number: how many ticks the snake has advanced this game
        snake_positions: list of (x, y), head first
        food: (x, y) of the food, or None once the grid is full
        direction: current heading (UP, DOWN, LEFT, RIGHT)
        score, high_score: current and best score this session
        width, height: board dimensions
        playing, game_over: lifecycle flags
        death_reason: why the game ended, if it has
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        direction: str,
        score: int,
        high_score: int,
        width: int,
        height: int,
        playing: bool,
        game_over: bool,
        death_reason: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.food = food
        self.direction = direction
        self.score = score
        self.high_score = high_score
        self.width = width
        self.height = height
        self.playing = playing
        self.game_over = game_over
        self.death_reason = death_reason

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body/tail
        Row 0 is printed first (top of the screen), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction,
            "score": self.score,
            "high_score": self.high_score,
            "width": self.width,
            "height": self.height,
            "playing": self.playing,
            "game_over": self.game_over,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<SnakeState tick={self.tick_number}, length={len(self.snake_positions)}, "
            f"food={self.food}, score={self.score}, game_over={self.game_over}>"
        )


class Game2048State:
    """
    A snapshot of the 2048 board after a move.

    Attributes:
        board: list of rows, None for empty cells
        score, best_score: current and best score this session
        move_count: effective moves made this game
        game_over: True once no move can change the board
    """

    def __init__(
        self,
        board: List[List[Optional[int]]],
        score: int,
        best_score: int,
        move_count: int,
        game_over: bool
    ):
        self.board = board
        self.score = score
        self.best_score = best_score
        self.move_count = move_count
        self.game_over = game_over

    def print_board(self) -> str:
        """Returns the board as right-aligned columns, '.' for empty cells."""
        width = max(
            [len(str(value)) for row in self.board for value in row if value is not None] or [1]
        )
        lines = []
        for row in self.board:
            cells = ['.' if value is None else str(value) for value in row]
            lines.append(" ".join(cell.rjust(width) for cell in cells))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board": [list(row) for row in self.board],
            "score": self.score,
            "best_score": self.best_score,
            "move_count": self.move_count,
            "game_over": self.game_over,
        }

    def __repr__(self):
        return (
            f"<Game2048State moves={self.move_count}, score={self.score}, "
            f"best={self.best_score}, game_over={self.game_over}>"
        )
