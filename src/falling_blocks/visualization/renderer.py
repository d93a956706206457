from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from falling_blocks.game import BASE_SHAPES, FallingBlocksGame, TetrominoType, color_for_value
from .layout import PAD_BUTTONS, Layout, compute_layout


BACKGROUND = (10, 10, 14)
PANEL = (21, 25, 53)
PANEL_FRAME = (50, 60, 100)
CELL_OUTLINE = (17, 17, 17)
TEXT = (255, 255, 255)
BUTTON = (40, 44, 70)
BUTTON_FRAME = (90, 100, 150)


class Renderer:
    """Draws a read-only view of the game: board, falling piece, next piece, HUD and pad.

    The board comes from ``game.get_state()``. Once the game is over that leaves
    out the spawned piece that collided, so the frozen stack is shown on its own
    under the game-over band.
    """

    def __init__(self, layout: Optional[Layout] = None) -> None:
        self.layout = layout or compute_layout()
        self.font = pygame.font.SysFont(None, 20)
        self.big_font = pygame.font.SysFont(None, 34)

    def _draw_cell(self, surf: pygame.Surface, px: int, py: int, size: int, value: int) -> None:
        if value == 0:
            return
        rect = pygame.Rect(px, py, size, size)
        pygame.draw.rect(surf, color_for_value(value), rect)
        pygame.draw.rect(surf, CELL_OUTLINE, rect, 1)

    def _board_surface(self, state: np.ndarray) -> pygame.Surface:
        cell = self.layout.cell
        h, w = state.shape
        surf = pygame.Surface((w * cell, h * cell))
        surf.fill(color_for_value(0))
        for y in range(h):
            for x in range(w):
                self._draw_cell(surf, x * cell, y * cell, cell, int(state[y, x]))
        return surf

    def _draw_panel(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        d = self.layout
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(screen, PANEL, panel_rect)
        pygame.draw.rect(screen, PANEL_FRAME, panel_rect, 1)

        info_lines = [
            f"Score: {game.score}",
            f"Lines: {game.lines}",
            f"Level: {game.level}",
            "Next:",
        ]
        x_text = d.panel_x + 12
        y_text = d.panel_y + 12
        for i, txt in enumerate(info_lines):
            img = self.font.render(txt, True, TEXT)
            screen.blit(img, (x_text, y_text + i * 20))

        if game.next_kind is None:
            return
        preview_cell = max(12, d.cell * 3 // 4)
        shape = BASE_SHAPES[TetrominoType(game.next_kind)]
        y0 = y_text + len(info_lines) * 20 + 8
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    self._draw_cell(screen, x_text + px * preview_cell, y0 + py * preview_cell,
                                    preview_cell, int(game.next_kind))

    def _draw_pad(self, screen: pygame.Surface) -> None:
        for action, label in PAD_BUTTONS:
            rect = pygame.Rect(*self.layout.buttons[action])
            pygame.draw.rect(screen, BUTTON, rect)
            pygame.draw.rect(screen, BUTTON_FRAME, rect, 1)
            img = self.font.render(label, True, TEXT)
            screen.blit(img, img.get_rect(center=rect.center))

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        d = self.layout
        mid_y = d.board_y + d.board_h // 2
        band = pygame.Surface((d.board_w, 80), pygame.SRCALPHA)
        band.fill((0, 0, 0, 166))
        screen.blit(band, (d.board_x, mid_y - 40))
        center_x = d.board_x + d.board_w // 2
        over = self.big_font.render("Game Over", True, TEXT)
        screen.blit(over, over.get_rect(center=(center_x, mid_y - 12)))
        hint = self.font.render("Tap the board or press Enter", True, TEXT)
        screen.blit(hint, hint.get_rect(center=(center_x, mid_y + 20)))

    def draw(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        screen.fill(BACKGROUND)
        screen.blit(self._board_surface(game.get_state()), (self.layout.board_x, self.layout.board_y))
        self._draw_panel(screen, game)
        self._draw_pad(screen)
        if game.game_over:
            self._draw_game_over(screen)
        pygame.display.flip()
