# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional, Tuple

from .config import GRID_W, GRID_H
from .food import FoodPlacer
from .geometry import Direction, Position, in_bounds, opposite, step
from .snake import Snake

logger = logging.getLogger(__name__)


class Status(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Outcome(Enum):
    """Why the last game ended."""
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


class Intent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    QUIT = "quit"
    RESTART = "restart"
    NONE = "none"

    @property
    def direction(self) -> Optional[Direction]:
        return _INTENT_DIRECTIONS.get(self)


_INTENT_DIRECTIONS = {
    Intent.MOVE_UP: Direction.UP,
    Intent.MOVE_DOWN: Direction.DOWN,
    Intent.MOVE_LEFT: Direction.LEFT,
    Intent.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one tick."""
    width: int
    height: int
    snake: Tuple[Position, ...]    # head first
    food: Optional[Position]
    score: int
    is_game_over: bool
    outcome: Optional[Outcome] = None


# ---------- State ----------
@dataclass
class Session:
    """
    One play session: snake, food, score and the Playing/GameOver flag.

    Input is buffered in `pending` and only committed by advance(), so two
    key presses inside one tick cannot sneak a 180° turn past the guard.
    """
    width: int = GRID_W
    height: int = GRID_H
    placer: FoodPlacer = field(default_factory=FoodPlacer.seeded, repr=False, compare=False)

    # Game state, filled in by reset()
    snake: Snake = field(init=False)
    direction: Direction = field(init=False)
    pending: Direction = field(init=False)
    food: Optional[Position] = field(init=False)
    score: int = field(init=False)
    status: Status = field(init=False)
    outcome: Optional[Outcome] = field(init=False)
    ticks: int = field(init=False)

    def __post_init__(self):
        self.reset()

    @property
    def is_game_over(self) -> bool:
        return self.status is Status.GAME_OVER

    def reset(self) -> None:
        """Back to the starting position, in place. The food RNG is not reseeded."""
        self.snake = Snake.initial(self.width, self.height)
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.score = 0
        self.status = Status.PLAYING
        self.outcome = None
        self.ticks = 0
        self.food = self.placer.place(self.width, self.height, self.snake)

    # ---------- Input / Update ----------
    def accept_input(self, intent: Intent) -> bool:
        """
        Apply one intent. Returns True if the session changed.

        Directions are stored as-is; the reversal check happens in advance().
        Restart only counts after game over. Quit is not the session's concern.
        """
        direction = intent.direction
        if direction is not None:
            self.pending = direction
            return True

        if intent is Intent.RESTART and self.is_game_over:
            logger.info("Restarting after %s, final score %d", self.outcome.value, self.score)
            self.reset()
            return True

        return False

    def advance(self) -> Status:
        """Advance the game by one tick. No-op once the game is over."""
        if self.is_game_over:
            return self.status

        # Commit direction once per tick, ignoring reversals
        if not opposite(self.pending, self.direction):
            self.direction = self.pending

        new_head = step(self.snake.head, self.direction)

        # Wall collision: leave everything as it was
        if not in_bounds(new_head, self.width, self.height):
            return self._end(Outcome.WALL)

        self.ticks += 1
        self.snake.grow_at_head(new_head)

        ate = new_head == self.food
        if ate:
            self.score += 1
            self.food = self.placer.place(self.width, self.height, self.snake)
        else:
            self.snake.shrink_at_tail()

        # Self collision, against the body after the tail has moved
        if self.snake.body_contains_excluding_head(new_head):
            return self._end(Outcome.SELF)

        if ate and self.food is None:
            return self._end(Outcome.BOARD_FULL)

        return self.status

    def _end(self, outcome: Outcome) -> Status:
        self.status = Status.GAME_OVER
        self.outcome = outcome
        logger.info(
            "Game over (%s): score=%d length=%d ticks=%d",
            outcome.value, self.score, len(self.snake), self.ticks,
        )
        return self.status

    def frame(self) -> Frame:
        return Frame(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            is_game_over=self.is_game_over,
            outcome=self.outcome,
        )
