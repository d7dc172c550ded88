# keys.py
from __future__ import annotations
from typing import Dict, Optional, Protocol, Sequence

from .game import Intent
from .geometry import Position

# Special keys are reported by name; printable keys as the character itself.
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ESCAPE = "KEY_ESCAPE"
QUIT_WINDOW = "QUIT_WINDOW"

KEYMAP: Dict[str, Intent] = {
    "w": Intent.MOVE_UP,
    "s": Intent.MOVE_DOWN,
    "a": Intent.MOVE_LEFT,
    "d": Intent.MOVE_RIGHT,
    KEY_UP: Intent.MOVE_UP,
    KEY_DOWN: Intent.MOVE_DOWN,
    KEY_LEFT: Intent.MOVE_LEFT,
    KEY_RIGHT: Intent.MOVE_RIGHT,
    "q": Intent.QUIT,
    QUIT_WINDOW: Intent.QUIT,
    "r": Intent.RESTART,
}


def map_key(raw: Optional[str]) -> Intent:
    """Translate a raw key into an intent; unknown keys are Intent.NONE."""
    if not raw:
        return Intent.NONE
    if len(raw) == 1:
        raw = raw.lower()
    return KEYMAP.get(raw, Intent.NONE)


# ---------- Collaborators ----------
class InputSource(Protocol):
    def poll_key(self) -> Optional[str]:
        """Return the next pending key, or None. Must never block."""
        ...


class Renderer(Protocol):
    def render(
        self,
        width: int,
        height: int,
        snake: Sequence[Position],
        food: Optional[Position],
        score: int,
        is_game_over: bool,
    ) -> None: ...
