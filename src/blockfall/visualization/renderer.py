from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from .palette import BACKGROUND, color_for_value


class Renderer:
    def __init__(self, cell_size: int = 20, margin: int = 20, status_height: int = 40) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.status_height = status_height
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, columns: int, rows: int) -> tuple[int, int]:
        width = columns * self.cell_size + self.margin * 2
        height = rows * self.cell_size + self.margin * 2 + self.status_height
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    continue
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
                pygame.draw.rect(surf, color_for_value(v), rect)
        return surf

    def _status_surface(self, score: int, status: str) -> pygame.Surface:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        text = f"Score: {score}" + (f"   {status}" if status else "")
        return self._font.render(text, True, (255, 255, 255))

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: int, status: str = "") -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))
        status_y = self.margin * 2 + state.shape[0] * self.cell_size
        screen.blit(self._status_surface(score, status), (self.margin, status_y))
        pygame.display.flip()
