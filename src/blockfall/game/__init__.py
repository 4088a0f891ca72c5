"""Game module for blockfall.

Exports the core game engine and supporting classes:
- Board: Fixed-size grid of settled cells and row clearing
- Piece, PieceGenerator, ShapeKind: Shape templates and spawning
- collides: The collision check every move is validated against
- try_move, try_rotate: Piece transforms
- ScoringRules: Line-clear score table
- GamePhase: Ready/Running/Paused/GameOver
- GameSession: Gravity, merging and command handling for one game
"""

from .board import Board, COLUMNS, ROWS
from .collision import collides
from .core import (
    DROP_INTERVAL_MS,
    Command,
    EventKind,
    GameConfig,
    GameEvent,
    GameSession,
    format_grid,
)
from .exceptions import BlockfallError, InvalidPlacementError
from .pieces import BASE_SHAPES, Piece, PieceGenerator, ShapeKind, rotate_clockwise
from .rules import ScoringRules
from .state import GamePhase, Trigger, next_phase
from .transform import try_move, try_rotate

__all__ = [
    "Board",
    "COLUMNS",
    "ROWS",
    "collides",
    "DROP_INTERVAL_MS",
    "Command",
    "EventKind",
    "GameConfig",
    "GameEvent",
    "GameSession",
    "format_grid",
    "BlockfallError",
    "InvalidPlacementError",
    "BASE_SHAPES",
    "Piece",
    "PieceGenerator",
    "ShapeKind",
    "rotate_clockwise",
    "ScoringRules",
    "GamePhase",
    "Trigger",
    "next_phase",
    "try_move",
    "try_rotate",
]
