import unittest

from blockfall.game.state import TRANSITIONS, GamePhase, Trigger, next_phase


class TestPhaseTransitions(unittest.TestCase):

    def test_allowed_transitions(self):
        self.assertIs(next_phase(GamePhase.READY, Trigger.START), GamePhase.RUNNING)
        self.assertIs(next_phase(GamePhase.RUNNING, Trigger.PAUSE), GamePhase.PAUSED)
        self.assertIs(next_phase(GamePhase.PAUSED, Trigger.RESUME), GamePhase.RUNNING)
        self.assertIs(next_phase(GamePhase.RUNNING, Trigger.TOP_OUT), GamePhase.GAME_OVER)
        self.assertIs(next_phase(GamePhase.GAME_OVER, Trigger.RESTART), GamePhase.RUNNING)

    def test_everything_else_is_rejected(self):
        for phase in GamePhase:
            for trigger in Trigger:
                if (phase, trigger) in TRANSITIONS:
                    continue
                self.assertIsNone(next_phase(phase, trigger), (phase, trigger))


if __name__ == '__main__':
    unittest.main()
