# food.py
from __future__ import annotations
import logging
from typing import Optional

import numpy as np  # type: ignore

from .geometry import Position
from .snake import Snake

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 64


class FoodPlacer:
    """
    Picks a uniformly random free cell for the next food.

    Owns its generator so a seed gives a reproducible game. The generator is
    created once per process; restarting a session keeps drawing from it.
    """

    def __init__(self, rng: np.random.Generator, max_attempts: int = MAX_ATTEMPTS):
        self.rng = rng
        self.max_attempts = max_attempts

    @classmethod
    def seeded(cls, seed: Optional[int] = None, **kwargs) -> "FoodPlacer":
        return cls(np.random.default_rng(seed), **kwargs)

    def place(self, width: int, height: int, snake: Snake) -> Optional[Position]:
        """
        Return a free cell, or None when the snake covers the whole grid.

        Rejection sampling handles the common sparse board; once
        max_attempts draws all land on the snake, pick among the free cells
        directly so a nearly full board still terminates.
        """
        for _ in range(self.max_attempts):
            p = Position(int(self.rng.integers(width)), int(self.rng.integers(height)))
            if not snake.contains(p):
                return p

        return self._pick_free_cell(width, height, snake)

    def _pick_free_cell(self, width: int, height: int, snake: Snake) -> Optional[Position]:
        free = np.ones((height, width), dtype=bool)
        for x, y in snake:
            if 0 <= x < width and 0 <= y < height:
                free[y, x] = False

        idx = np.flatnonzero(free)
        logger.debug("Rejection sampling exhausted; %d free cell(s) left", idx.size)
        if idx.size == 0:
            return None

        flat = int(self.rng.choice(idx))
        y, x = divmod(flat, width)
        return Position(x, y)
