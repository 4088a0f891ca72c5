from __future__ import annotations

import logging

import numpy as np

from .exceptions import InvalidPlacementError
from .pieces import Piece


logger = logging.getLogger(__name__)

COLUMNS = 12
ROWS = 20


class Board:
    """Fixed-size grid of settled cells.

    The grid uses 0 for empty cells and the piece class ids 1..7 for settled
    cells. Rows are addressed top to bottom, so ``grid[y, x]``. The array is
    allocated once and only ever written in place.
    """

    def __init__(self, columns: int = COLUMNS, rows: int = ROWS) -> None:
        self.columns = int(columns)
        self.rows = int(rows)
        self.grid = np.zeros((self.rows, self.columns), dtype=np.int8)

    @classmethod
    def create(cls, columns: int = COLUMNS, rows: int = ROWS) -> "Board":
        return cls(columns, rows)

    def clear(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows

    def get_cell(self, x: int, y: int) -> int:
        if not self.is_inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.columns}x{self.rows} board")
        return int(self.grid[y, x])

    def merge(self, piece: Piece) -> None:
        """Write the piece's filled cells into the grid.

        Empty cells of the shape are skipped so they never overwrite settled
        cells. The caller must have verified the position is collision-free.
        """
        cells = list(piece.cells())
        for x, y, _ in cells:
            if not self.is_inside(x, y) or self.grid[y, x] != 0:
                raise InvalidPlacementError(f"cannot merge {piece.kind.name} at ({piece.x}, {piece.y})")
        for x, y, value in cells:
            self.grid[y, x] = value
        logger.debug("merged %s at (%d, %d)", piece.kind.name, piece.x, piece.y)

    def is_row_complete(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != 0))

    def clear_completed_rows(self) -> int:
        """Remove every full row, compacting the rows above it downward.

        Scans from the bottom row up. After a removal the same index is
        examined again because the row above has moved into it.
        """
        cleared = 0
        y = self.rows - 1
        while y >= 0:
            if self.is_row_complete(y):
                self._remove_row(y)
                cleared += 1
            else:
                y -= 1
        if cleared:
            logger.debug("cleared %d row(s)", cleared)
        return cleared

    def _remove_row(self, y: int) -> None:
        for row in range(y, 0, -1):
            self.grid[row] = self.grid[row - 1]
        self.grid[0] = 0

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
