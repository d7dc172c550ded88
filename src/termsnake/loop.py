# loop.py
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from .game import Intent, Session
from .keys import InputSource, Renderer, map_key

logger = logging.getLogger(__name__)


class LoopDriver:
    """
    Fixed-tick game loop: poll input -> update session -> render -> sleep.

    Everything runs on the calling thread. The only blocking call is the
    end-of-tick sleep, which covers whatever is left of the tick period.
    """

    def __init__(
        self,
        session: Session,
        input_source: InputSource,
        renderer: Renderer,
        tick_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.input_source = input_source
        self.renderer = renderer
        self.tick_seconds = tick_seconds
        self.clock = clock
        self.sleep = sleep
        self.ticks = 0

    def render(self) -> None:
        f = self.session.frame()
        self.renderer.render(f.width, f.height, list(f.snake), f.food, f.score, f.is_game_over)

    def tick(self) -> bool:
        """Run one tick. Returns False when the player asked to quit."""
        intent = map_key(self.input_source.poll_key())
        if intent is Intent.QUIT:
            logger.info("Quit requested at tick %d, score %d", self.ticks, self.session.score)
            self.render()
            return False

        self.session.accept_input(intent)
        self.session.advance()
        self.render()
        self.ticks += 1
        return True

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Loop until quit (or max_ticks). Returns the number of ticks completed."""
        self.render()
        start = self.clock()
        while max_ticks is None or self.ticks < max_ticks:
            if not self.tick():
                break
            # Sleep to the next tick boundary; skip it if this tick overran
            next_boundary = start + self.ticks * self.tick_seconds
            remaining = next_boundary - self.clock()
            if remaining > 0:
                self.sleep(remaining)
            else:
                # Overran: re-anchor so the next boundary is one period from now
                if remaining < -self.tick_seconds:
                    logger.warning("Tick %d overran by %.1f ms", self.ticks, -remaining * 1000)
                start -= remaining
        return self.ticks
