"""
controller.py — Controller layer.

Responsibilities:
  - Own pygame setup and teardown.
  - Pump window events; a QUIT event closes the game.
  - Poll the arrow keys and hand them to the model as a key query.
  - Drive the game loop: steer, step, render, delay.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import random
from typing import Optional

import pygame

from .config import WIDTH, HEIGHT, TITLE, TICK_MS
from .model import Direction, GameModel
from .view import GameView

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    Direction.UP:    pygame.K_UP,
    Direction.DOWN:  pygame.K_DOWN,
    Direction.LEFT:  pygame.K_LEFT,
    Direction.RIGHT: pygame.K_RIGHT,
}


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        model: Optional[GameModel] = None,
        rng: Optional[random.Random] = None,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        self.model = model if model is not None else GameModel(rng=rng)
        self.view = GameView(self.screen)
        self._open = True

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> int:
        """Play one game until it ends or the window closes. Returns the score."""
        logger.info("game started: snake %s heading %s, food %s",
                    self.model.head, self.model.direction.name, self.model.food)
        try:
            while self._window_open() and not self.model.game_over:
                self._tick()
            self.view.render_closing()
        finally:
            pygame.quit()
        return self.model.score

    # ── Loop steps ────────────────────────────────────────────────
    def _tick(self) -> None:
        pressed = pygame.key.get_pressed()
        self.model.steer(lambda d: bool(pressed[KEY_BINDINGS[d]]))
        if not self.model.step():
            return
        self.view.render(self.model)
        pygame.time.delay(TICK_MS)

    def _window_open(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                if self._open:
                    logger.info("window closed, score %d", self.model.score)
                self._open = False
        return self._open
