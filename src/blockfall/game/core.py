from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Optional

import numpy as np

from .board import COLUMNS, ROWS, Board
from .collision import collides
from .pieces import Piece, PieceGenerator
from .rules import ScoringRules
from .state import GamePhase, Trigger, next_phase
from .transform import try_move, try_rotate


logger = logging.getLogger(__name__)

DROP_INTERVAL_MS = 1000


class Command(IntEnum):
    START = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    TOGGLE_PAUSE = 5
    RESTART = 6


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    auto_start: bool = False


class EventKind(Enum):
    SCORE = "score"
    PHASE = "phase"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    score: int
    phase: GamePhase
    rows_cleared: int = 0


Listener = Callable[[GameEvent], None]


class GameSession:
    """One game: board, active piece, score, phase and drop timer.

    The host drives it with :meth:`tick` (or :meth:`frame`) once per frame
    and forwards player input through :meth:`handle`. Commands that the
    current phase does not allow are ignored.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.board = Board.create(COLUMNS, ROWS)
        self.generator = PieceGenerator(self.board.columns, self.rng)
        self.piece: Piece
        self.score = 0
        self.phase = GamePhase.READY
        self.drop_counter = 0.0
        self.drop_interval = DROP_INTERVAL_MS
        self._last_time: Optional[float] = None
        self._listeners: List[Listener] = []
        self._new_game()
        if self.config.auto_start:
            self.start()

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, kind: EventKind, rows_cleared: int = 0) -> None:
        event = GameEvent(kind=kind, score=self.score, phase=self.phase, rows_cleared=rows_cleared)
        for listener in list(self._listeners):
            listener(event)

    @property
    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def _transition(self, trigger: Trigger) -> bool:
        target = next_phase(self.phase, trigger)
        if target is None:
            return False
        logger.info("phase %s -> %s (%s)", self.phase.value, target.value, trigger.value)
        self.phase = target
        self._emit(EventKind.PHASE)
        return True

    def _new_game(self) -> None:
        self.board.clear()
        self.score = 0
        self.drop_counter = 0.0
        self._last_time = None
        self.piece = self.generator.spawn()
        self._emit(EventKind.SCORE)

    def start(self) -> bool:
        if not self._transition(Trigger.START):
            return False
        self._last_time = None
        return True

    def pause(self) -> bool:
        return self._transition(Trigger.PAUSE)

    def resume(self) -> bool:
        if not self._transition(Trigger.RESUME):
            return False
        # Wall-clock time spent paused must not count toward the next drop.
        self._last_time = None
        return True

    def toggle_pause(self) -> bool:
        if self.phase is GamePhase.PAUSED:
            return self.resume()
        return self.pause()

    def restart(self) -> bool:
        if next_phase(self.phase, Trigger.RESTART) is None:
            return False
        self._new_game()
        return self._transition(Trigger.RESTART)

    def move(self, direction: int) -> bool:
        if not self.is_running:
            return False
        return try_move(self.board, self.piece, direction)

    def rotate(self) -> bool:
        if not self.is_running:
            return False
        return try_rotate(self.board, self.piece)

    def drop(self) -> bool:
        """Move the piece down one row.

        Returns True if it descended. When the row below is blocked the piece
        is merged, completed rows are cleared and the next piece spawns;
        False is returned in that case and whenever the game is not running.
        """
        if not self.is_running:
            return False
        self.drop_counter = 0.0
        self.piece.y += 1
        if not collides(self.board, self.piece):
            return True
        self.piece.y -= 1
        self._settle()
        return False

    def _settle(self) -> None:
        self.board.merge(self.piece)
        rows = self.board.clear_completed_rows()
        self.score += self.rules.score_for_lines(rows)
        self._emit(EventKind.SCORE, rows_cleared=rows)

        self.piece = self.generator.spawn()
        logger.debug("spawned %s at (%d, %d)", self.piece.kind.name, self.piece.x, self.piece.y)
        if collides(self.board, self.piece):
            logger.info("spawn blocked, final score %d", self.score)
            self._transition(Trigger.TOP_OUT)

    def tick(self, delta_ms: float) -> None:
        if not self.is_running:
            return
        self.drop_counter += delta_ms
        if self.drop_counter > self.drop_interval:
            self.drop()

    def frame(self, now_ms: float) -> None:
        """Advance to the host timestamp ``now_ms``.

        The first frame after start, resume or restart only records the
        baseline and contributes no elapsed time.
        """
        if not self.is_running:
            return
        delta = 0.0 if self._last_time is None else now_ms - self._last_time
        self._last_time = now_ms
        self.tick(delta)

    def handle(self, command: Command) -> bool:
        if command == Command.START:
            return self.start()
        if command == Command.TOGGLE_PAUSE:
            return self.toggle_pause()
        if command == Command.RESTART:
            return self.restart()
        if command == Command.MOVE_LEFT:
            return self.move(-1)
        if command == Command.MOVE_RIGHT:
            return self.move(1)
        if command == Command.ROTATE:
            return self.rotate()
        if command == Command.SOFT_DROP:
            return self.drop()
        raise ValueError(f"unknown command {command!r}")

    def snapshot(self, include_piece: bool = True) -> np.ndarray:
        # Overlay current piece on a copy of the grid for rendering
        state = self.board.clone_state()
        if include_piece:
            for x, y, value in self.piece.cells():
                if self.board.is_inside(x, y):
                    state[y, x] = value
        return state


def format_grid(grid: np.ndarray) -> str:
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in grid)
