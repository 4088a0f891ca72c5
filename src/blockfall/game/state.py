from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class GamePhase(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Trigger(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    TOP_OUT = "top_out"
    RESTART = "restart"


TRANSITIONS: Dict[Tuple[GamePhase, Trigger], GamePhase] = {
    (GamePhase.READY, Trigger.START): GamePhase.RUNNING,
    (GamePhase.RUNNING, Trigger.PAUSE): GamePhase.PAUSED,
    (GamePhase.PAUSED, Trigger.RESUME): GamePhase.RUNNING,
    (GamePhase.RUNNING, Trigger.TOP_OUT): GamePhase.GAME_OVER,
    (GamePhase.GAME_OVER, Trigger.RESTART): GamePhase.RUNNING,
}


def next_phase(phase: GamePhase, trigger: Trigger) -> Optional[GamePhase]:
    """Return the phase ``trigger`` leads to, or None if it is not allowed."""
    return TRANSITIONS.get((phase, trigger))
