"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction   — closed set of unit (dx, dy) moves with a reverse table
    GameModel   — snake, direction, food, score and game-over flag
"""

import logging
import random
from collections import deque
from enum import Enum
from typing import Callable, Iterable, Optional

from .config import COLS, ROWS, START_CELL, START_FOOD

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction(Enum):
    """Unit move on the grid; value is (dx, dy)."""
    UP    = (0, -1)
    DOWN  = (0,  1)
    LEFT  = (-1, 0)
    RIGHT = (1,  0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    def is_opposite(self, other: "Direction") -> bool:
        return other is _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP:    Direction.DOWN,
    Direction.DOWN:  Direction.UP,
    Direction.LEFT:  Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Order in which held keys are checked each tick.
KEY_PRIORITY = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def resolve_direction(
    current: Direction,
    is_down: Callable[[Direction], bool],
) -> Direction:
    """
    Pick the direction for the next tick.

    The first held direction in KEY_PRIORITY that does not reverse
    `current` wins; holding the current direction counts as a choice and
    ends the search. With nothing usable held, `current` is kept.
    """
    for d in KEY_PRIORITY:
        if is_down(d) and not d.is_opposite(current):
            return d
    return current


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls steer() then step() once per game tick.
    """

    def __init__(
        self,
        snake: Optional[Iterable[tuple[int, int]]] = None,
        direction: Direction = Direction.RIGHT,
        food: tuple[int, int] = START_FOOD,
        rng: Optional[random.Random] = None,
    ):
        self.snake: deque[tuple[int, int]] = deque(
            tuple(cell) for cell in (snake if snake is not None else [START_CELL])
        )
        if not self.snake:
            raise ValueError("snake needs at least one segment")
        self.direction: Direction = direction
        self.food: tuple[int, int] = tuple(food)
        self.score: int = 0
        self.game_over: bool = False
        self.cause: Optional[str] = None
        self._rng = rng if rng is not None else random.Random()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def __len__(self) -> int:
        return len(self.snake)

    # ── Commands ─────────────────────────────────────────────────
    def steer(self, is_down: Callable[[Direction], bool]) -> None:
        """Apply at most one direction change from the held keys."""
        new_dir = resolve_direction(self.direction, is_down)
        if new_dir is not self.direction:
            logger.debug("direction %s -> %s", self.direction.name, new_dir.name)
            self.direction = new_dir

    def step(self) -> bool:
        """
        Advance one cell.
        Returns True if the snake moved, False if the move ended the game.
        A colliding move leaves snake, food and score untouched.
        """
        if self.game_over:
            return False

        hx, hy = self.head
        nx, ny = hx + self.direction.dx, hy + self.direction.dy

        if not (0 <= nx < COLS and 0 <= ny < ROWS):
            self._end("wall", (nx, ny))
            return False

        if (nx, ny) in self.snake:
            self._end("self", (nx, ny))
            return False

        self.snake.appendleft((nx, ny))
        if (nx, ny) == self.food:
            self.score += 1
            self.food = self._spawn_food()
            logger.debug("food eaten at %s, score %d, next food %s",
                         (nx, ny), self.score, self.food)
        else:
            self.snake.pop()
        return True

    # ── Private helpers ──────────────────────────────────────────
    def _spawn_food(self) -> tuple[int, int]:
        # May land on the body; occupancy is not checked.
        return (self._rng.randint(0, COLS - 1), self._rng.randint(0, ROWS - 1))

    def _end(self, cause: str, cell: tuple[int, int]) -> None:
        self.game_over = True
        self.cause = cause
        logger.info("game over: %s collision at %s, score %d", cause, cell, self.score)
