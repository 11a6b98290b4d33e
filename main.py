"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--log-level LEVEL]

Requires:
    pip install pygame
"""

import argparse
import logging
import random
import sys
from typing import Optional

import pygame

from snake.controller import GameController

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic grid snake.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: random)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        controller = GameController(rng=random.Random(args.seed))
    except pygame.error as exc:
        logger.error("Could not open the game window: %s", exc, exc_info=True)
        return 1
    score = controller.run()
    logger.info("final score %d", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
