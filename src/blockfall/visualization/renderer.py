from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from .palette import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 20, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, state: np.ndarray) -> tuple[int, int]:
        h, w = state.shape
        return w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 2

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, caption: Optional[pygame.Surface] = None) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))
        if caption is not None:
            screen.blit(caption, (self.margin, 2))
        pygame.display.flip()
