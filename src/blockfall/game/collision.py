from __future__ import annotations

from .board import Board
from .pieces import Piece


def collides(board: Board, piece: Piece) -> bool:
    """Return True if any filled cell of ``piece`` is blocked.

    A cell is blocked when it lies left or right of the grid, below the
    bottom row, or on an occupied cell. Cells above the top row are only
    checked against the side walls.
    """
    for x, y, _ in piece.cells():
        if x < 0 or x >= board.columns or y >= board.rows:
            return True
        if y >= 0 and board.grid[y, x] != 0:
            return True
    return False
