from __future__ import annotations

import argparse
import logging
from typing import Dict, Tuple

import pygame

from blockfall.game import Command, EventKind, GameConfig, GameEvent, GamePhase, GameSession
from .renderer import Renderer


logger = logging.getLogger(__name__)

# Enter both starts a fresh session and restarts after game over; whichever
# the current phase rejects is a no-op.
KEY_TO_COMMANDS: Dict[int, Tuple[Command, ...]] = {
    pygame.K_LEFT: (Command.MOVE_LEFT,),
    pygame.K_RIGHT: (Command.MOVE_RIGHT,),
    pygame.K_UP: (Command.ROTATE,),
    pygame.K_DOWN: (Command.SOFT_DROP,),
    pygame.K_p: (Command.TOGGLE_PAUSE,),
    pygame.K_RETURN: (Command.START, Command.RESTART),
}

STATUS_TEXT = {
    GamePhase.READY: "Press Enter to start",
    GamePhase.RUNNING: "",
    GamePhase.PAUSED: "Paused",
    GamePhase.GAME_OVER: "Game Over! Press Enter to restart",
}


class StatusLine:
    """Score display fed by session events."""

    def __init__(self, session: GameSession) -> None:
        self.score = session.score
        self.text = STATUS_TEXT[session.phase]

    def __call__(self, event: GameEvent) -> None:
        self.score = event.score
        if event.kind is EventKind.PHASE:
            self.text = STATUS_TEXT[event.phase]


def run(seed: int | None = None, cell_size: int = 20) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        session = GameSession(GameConfig(random_seed=seed))
        status = StatusLine(session)
        session.add_listener(status)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(session.board.columns, session.board.rows))
        pygame.display.set_caption("Blockfall")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    for command in KEY_TO_COMMANDS.get(event.key, ()):
                        session.handle(command)

            session.frame(pygame.time.get_ticks())
            renderer.draw(screen, session.snapshot(), status.score, status.text)
            clock.tick(60)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play blockfall")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=20)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("starting blockfall (seed=%s)", args.seed)
    run(seed=args.seed, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
