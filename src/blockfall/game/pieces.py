from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Tuple

import numpy as np


class ShapeKind(IntEnum):
    O = 1
    T = 2
    S = 3
    Z = 4
    I = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(values) -> Shape:
    shape = np.array(values, dtype=np.int8)
    shape.flags.writeable = False
    return shape


# Each template carries its class id in the filled cells.
BASE_SHAPES = {
    ShapeKind.O: _frozen([[1, 1], [1, 1]]),
    ShapeKind.T: _frozen([[0, 2, 0], [2, 2, 2]]),
    ShapeKind.S: _frozen([[0, 3, 3], [3, 3, 0]]),
    ShapeKind.Z: _frozen([[4, 4, 0], [0, 4, 4]]),
    ShapeKind.I: _frozen([[5, 5, 5, 5]]),
    ShapeKind.J: _frozen([[6, 0, 0], [6, 6, 6]]),
    ShapeKind.L: _frozen([[7, 7, 7], [7, 0, 0]]),
}


def rotate_clockwise(shape: Shape) -> Shape:
    """Quarter turn clockwise: transpose, then reverse each row."""
    return _frozen(shape.T[:, ::-1])


@dataclass
class Piece:
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind(int(self.shape.max()))

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(board_x, board_y, value)`` for every filled cell."""
        h, w = self.shape.shape
        for dy in range(h):
            for dx in range(w):
                value = int(self.shape[dy, dx])
                if value:
                    yield self.x + dx, self.y + dy, value


def spawn_x(shape: Shape, columns: int) -> int:
    return columns // 2 - shape.shape[1] // 2


class PieceGenerator:
    def __init__(self, columns: int, rng: Optional[random.Random] = None) -> None:
        self.columns = int(columns)
        self.rng = rng or random.Random()

    def spawn(self, kind: Optional[ShapeKind] = None) -> Piece:
        if kind is None:
            kind = self.rng.choice(list(ShapeKind))
        shape = BASE_SHAPES[kind]
        return Piece(shape=shape, x=spawn_x(shape, self.columns), y=0)
