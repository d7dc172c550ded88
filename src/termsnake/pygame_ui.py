# pygame_ui.py
from __future__ import annotations
from collections import deque
import logging
from typing import Deque, Optional, Sequence, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, BG, GREEN, HEAD, RED, TEXT
from .geometry import Position
from .keys import KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ESCAPE, QUIT_WINDOW

logger = logging.getLogger(__name__)

_SPECIAL_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def raw_key(event) -> Optional[str]:
    """Translate a pygame event into the raw key names used by keys.map_key."""
    if event.type == pygame.QUIT:
        return QUIT_WINDOW
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[event.key]
    return event.unicode or None


# ---------- Input ----------
class PygameInput:
    """
    Buffers window events and hands them out one per poll, so a burst of
    key presses is spread over successive ticks like terminal input is.
    """

    def __init__(self):
        self.queue: Deque[str] = deque()

    def poll_key(self) -> Optional[str]:
        for event in pygame.event.get():
            key = raw_key(event)
            if key is not None:
                self.queue.append(key)
        return self.queue.popleft() if self.queue else None


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


class PygameRenderer:
    def __init__(self, width: int, height: int):
        self.width_px = width * CELL_SIZE
        self.height_px = height * CELL_SIZE
        self.screen = None
        self.font = None

    def open(self) -> None:
        pygame.init()
        self.font = pygame.font.SysFont(None, 24)
        self.screen = pygame.display.set_mode((self.width_px, self.height_px))
        pygame.display.set_caption("termsnake")
        logger.debug("pygame window opened (%dx%d px)", self.width_px, self.height_px)

    def close(self) -> None:
        pygame.quit()

    def render(
        self,
        width: int,
        height: int,
        snake: Sequence[Position],
        food: Optional[Position],
        score: int,
        is_game_over: bool,
    ) -> None:
        if self.screen is None:
            return

        self.screen.fill(BG)
        if food is not None:
            draw_cell(self.screen, food[0], food[1], RED)
        for x, y in snake[1:]:
            draw_cell(self.screen, x, y, GREEN)
        if snake:
            draw_cell(self.screen, snake[0][0], snake[0][1], HEAD)

        txt = self.font.render(f"Score: {score}", True, TEXT)
        self.screen.blit(txt, (8, 6))

        if is_game_over:
            self._draw_game_over(score)
        pygame.display.flip()

    def _draw_game_over(self, score: int) -> None:
        # Dim with translucent overlay
        overlay = pygame.Surface((self.width_px, self.height_px), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        self.screen.blit(overlay, (0, 0))

        cx, cy = self.width_px // 2, self.height_px // 2
        lines = (
            ("GAME OVER", (240, 240, 250), -16),
            ("Press R to restart", TEXT, 16),
            (f"Score: {score}", TEXT, 44),
        )
        for text, color, dy in lines:
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, surf.get_rect(center=(cx, cy + dy)))
