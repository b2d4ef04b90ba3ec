from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import pygame

from block_puzzle.game import HudSnapshot


BACKGROUND = (2, 8, 23)

PALETTE = {
    0: BACKGROUND,
    1: (0, 224, 255),    # I
    2: (255, 73, 118),   # J
    3: (255, 200, 87),   # L
    4: (127, 255, 0),    # O
    5: (147, 112, 255),  # S
    6: (255, 123, 0),    # T
    7: (255, 0, 184),    # Z
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(int(v), (200, 200, 200))


def hud_lines(hud: HudSnapshot) -> List[str]:
    lines = [
        f"Score: {hud.score}",
        f"Lines: {hud.lines}",
        f"Level: {hud.level}",
    ]
    if hud.message:
        lines.append(hud.message)
    return lines


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 200) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, state: np.ndarray) -> Tuple[int, int]:
        h, w = state.shape
        width = self.margin * 3 + w * self.cell_size + self.panel_width
        height = self.margin * 2 + h * self.cell_size
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
                # Dark outline separates neighbouring cells of the same color
                pygame.draw.rect(surf, BACKGROUND, rect, 1)
        return surf

    def _draw_hud(self, screen: pygame.Surface, hud: HudSnapshot, x0: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        for i, txt in enumerate(hud_lines(hud)):
            color = (255, 100, 100) if hud.game_over and txt == hud.message else (230, 230, 230)
            img = self._font.render(txt, True, color)
            screen.blit(img, (x0, self.margin + i * 30))

    def draw(self, screen: pygame.Surface, state: np.ndarray, hud: HudSnapshot) -> None:
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_hud(screen, hud, self.margin * 2 + grid_surf.get_width())
        pygame.display.flip()
