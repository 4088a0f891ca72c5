import random
import unittest

from blockfall.game.board import Board
from blockfall.game.collision import collides
from blockfall.game.pieces import BASE_SHAPES, Piece, ShapeKind, rotate_clockwise


def _all_orientations():
    for kind, shape in BASE_SHAPES.items():
        turned = shape
        for _ in range(4):
            yield kind, turned
            turned = rotate_clockwise(turned)


class TestCollision(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def test_spawned_piece_on_empty_board(self):
        for kind, shape in BASE_SHAPES.items():
            piece = Piece(shape, x=5, y=0)
            self.assertFalse(collides(self.board, piece), kind.name)

    def test_side_walls(self):
        piece = Piece(BASE_SHAPES[ShapeKind.O], x=-1, y=4)
        self.assertTrue(collides(self.board, piece))
        piece.x = 0
        self.assertFalse(collides(self.board, piece))
        piece.x = self.board.columns - 2
        self.assertFalse(collides(self.board, piece))
        piece.x = self.board.columns - 1
        self.assertTrue(collides(self.board, piece))

    def test_floor(self):
        piece = Piece(BASE_SHAPES[ShapeKind.O], x=3, y=self.board.rows - 2)
        self.assertFalse(collides(self.board, piece))
        piece.y += 1
        self.assertTrue(collides(self.board, piece))

    def test_rows_above_the_top_only_check_side_walls(self):
        piece = Piece(BASE_SHAPES[ShapeKind.T], x=4, y=-1)
        self.assertFalse(collides(self.board, piece))
        piece.y = -5
        self.assertFalse(collides(self.board, piece))
        piece.x = -1
        self.assertTrue(collides(self.board, piece))

    def test_part_above_the_top_still_sees_row_zero(self):
        # Only the lower row of T (y + 1 == 0) overlaps the grid.
        self.board.grid[0, 5] = 1
        piece = Piece(BASE_SHAPES[ShapeKind.T], x=4, y=-1)
        self.assertTrue(collides(self.board, piece))

    def test_occupied_cells(self):
        piece = Piece(BASE_SHAPES[ShapeKind.T], x=0, y=0)
        self.board.grid[0, 0] = 1  # under an empty template cell
        self.assertFalse(collides(self.board, piece))
        self.board.grid[1, 2] = 1
        self.assertTrue(collides(self.board, piece))

    def test_matches_cell_by_cell_definition(self):
        rng = random.Random(7)
        for y in range(self.board.rows):
            for x in range(self.board.columns):
                if rng.random() < 0.15:
                    self.board.grid[y, x] = rng.randint(1, 7)

        for kind, shape in _all_orientations():
            for y in range(-2, self.board.rows + 1):
                for x in range(-3, self.board.columns + 1):
                    piece = Piece(shape, x=x, y=y)
                    blocked = False
                    for cx, cy, _ in piece.cells():
                        if not 0 <= cx < self.board.columns or cy >= self.board.rows:
                            blocked = True
                        elif cy >= 0 and self.board.grid[cy, cx]:
                            blocked = True
                    self.assertEqual(collides(self.board, piece), blocked, (kind.name, x, y))


if __name__ == '__main__':
    unittest.main()
