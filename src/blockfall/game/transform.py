from __future__ import annotations

from .board import Board
from .collision import collides
from .pieces import Piece, rotate_clockwise


def try_move(board: Board, piece: Piece, direction: int) -> bool:
    """Shift ``piece`` one column; revert and return False when blocked."""
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")
    piece.x += direction
    if collides(board, piece):
        piece.x -= direction
        return False
    return True


def try_rotate(board: Board, piece: Piece) -> bool:
    """Rotate ``piece`` clockwise in place.

    When the quarter turn collides, a three-quarter turn (two more quarter
    turns from the rotated matrix) is tried instead. There are no wall
    kicks: if both collide, the original matrix and column are restored.
    """
    original_shape = piece.shape
    original_x = piece.x

    rotated = rotate_clockwise(original_shape)
    piece.shape = rotated
    if not collides(board, piece):
        return True

    piece.shape = rotate_clockwise(rotate_clockwise(rotated))
    if not collides(board, piece):
        return True

    piece.shape = original_shape
    piece.x = original_x
    return False
