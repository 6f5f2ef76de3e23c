"""
Board primitives for the 2048 engine.

A board is a square list of rows; each cell holds ``None`` (empty) or a
tile value. Every function here is pure: inputs are never mutated.
"""

from typing import List, Optional, Tuple

from .constants import UP, LEFT, RIGHT, normalize_direction

Cell = Optional[int]
Board = List[List[Cell]]
Coordinate = Tuple[int, int]


def empty_board(size: int) -> Board:
    return [[None for _ in range(size)] for _ in range(size)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def empty_cells(board: Board) -> List[Coordinate]:
    """Return (row, col) of every empty cell in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, value in enumerate(row)
        if value is None
    ]


def slide_row(row: List[Cell]) -> Tuple[List[Cell], int]:
    """
    Slide a single row toward index 0, merging equal neighbours.

    Empty cells are dropped first, then one forward pass merges the first
    pair of equal values found and skips past the merged tile, so a tile
    produced by a merge never merges again in the same pass.

    Returns:
        (new_row, gained) where gained is the sum of the merged values
    """
    tiles = [value for value in row if value is not None]
    merged: List[Cell] = []
    gained = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = tiles[i] * 2
            merged.append(value)
            gained += value
            i += 2
        else:
            merged.append(tiles[i])
            i += 1
    merged.extend([None] * (len(row) - len(merged)))
    return merged, gained


def line_coordinates(direction: str, size: int) -> List[List[Coordinate]]:
    """
    Map a direction onto the lines the tiles slide along.

    Each line lists (row, col) coordinates starting at the edge the tiles
    move toward, so sliding every line toward its index 0 performs the move.
    """
    move = normalize_direction(direction)
    indices = range(size)
    if move == LEFT:
        return [[(r, c) for c in indices] for r in indices]
    if move == RIGHT:
        return [[(r, c) for c in reversed(indices)] for r in indices]
    if move == UP:
        return [[(r, c) for r in indices] for c in indices]
    # DOWN
    return [[(r, c) for r in reversed(indices)] for c in indices]


def apply_move(board: Board, direction: str) -> Tuple[Board, int]:
    """
    Return the board after sliding it in ``direction`` and the score gained.

    No tile is spawned here; callers compare the result with the input to
    decide whether the move had any effect.
    """
    result = copy_board(board)
    gained = 0
    for line in line_coordinates(direction, len(board)):
        values, line_gain = slide_row([board[r][c] for r, c in line])
        for (r, c), value in zip(line, values):
            result[r][c] = value
        gained += line_gain
    return result, gained


def rotate_clockwise(board: Board) -> Board:
    """Rotate the board 90 degrees clockwise."""
    return [list(reversed(column)) for column in zip(*board)]


def is_game_over(board: Board) -> bool:
    """True iff no cell is empty and no two orthogonal neighbours are equal."""
    size = len(board)
    for r in range(size):
        for c in range(size):
            value = board[r][c]
            if value is None:
                return False
            if c + 1 < size and value == board[r][c + 1]:
                return False
            if r + 1 < size and value == board[r + 1][c]:
                return False
    return True


def max_tile(board: Board) -> int:
    return max((value for row in board for value in row if value is not None), default=0)
