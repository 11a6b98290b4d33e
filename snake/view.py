"""
view.py — View layer.

Draws a GameModel snapshot as flat grid cells: black background,
green snake segments, red food. No text, no game rules.

Public API:
    GameView(screen, present)   — bind to a pygame surface
    view.render(model)          — draw the current frame
    view.render_closing()       — blank frame shown after game over
"""

from typing import Callable, Optional

import pygame

from .config import CELL, BLACK, SNAKE_COL, FOOD_COL
from .model import GameModel


def cell_rect(x: int, y: int) -> pygame.Rect:
    """Pixel rectangle covering grid cell (x, y)."""
    return pygame.Rect(x * CELL, y * CELL, CELL, CELL)


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    def __init__(
        self,
        screen: pygame.Surface,
        present: Optional[Callable[[], None]] = None,
    ):
        self.screen = screen
        self._present = present if present is not None else pygame.display.flip

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        self.screen.fill(BLACK)
        for sx, sy in model.snake:
            pygame.draw.rect(self.screen, SNAKE_COL, cell_rect(sx, sy))
        # Food goes last so it stays visible when drawn over the body.
        pygame.draw.rect(self.screen, FOOD_COL, cell_rect(*model.food))
        self._present()

    def render_closing(self) -> None:
        self.screen.fill(BLACK)
        self._present()
