import unittest

import pygame

from blockfall.game import BASE_SHAPES, Command, GameConfig, GameSession, Piece, ShapeKind
from blockfall.visualization.human_play import KEY_TO_COMMANDS, StatusLine, build_parser


class TestStatusLine(unittest.TestCase):

    def setUp(self):
        self.session = GameSession(GameConfig(random_seed=8))
        self.status = StatusLine(self.session)
        self.session.add_listener(self.status)

    def test_tracks_phase_text(self):
        self.assertEqual(self.status.text, "Press Enter to start")
        self.session.start()
        self.assertEqual(self.status.text, "")
        self.session.toggle_pause()
        self.assertEqual(self.status.text, "Paused")
        self.session.toggle_pause()
        self.assertEqual(self.status.text, "")

    def test_tracks_score(self):
        self.session.start()
        self.session.board.grid[19, 4:] = 1
        self.session.piece = Piece(BASE_SHAPES[ShapeKind.I], x=0, y=19)
        self.session.drop()
        self.assertEqual(self.status.score, 40)

    def test_enter_starts_then_restarts(self):
        for command in KEY_TO_COMMANDS[pygame.K_RETURN]:
            self.session.handle(command)
        self.assertTrue(self.session.is_running)
        self.assertEqual(KEY_TO_COMMANDS[pygame.K_UP], (Command.ROTATE,))


class TestParser(unittest.TestCase):

    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.seed)
        self.assertEqual(args.cell_size, 20)
        self.assertEqual(args.log_level, "WARNING")


if __name__ == '__main__':
    unittest.main()
