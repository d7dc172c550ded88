# terminal.py
from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

from .config import (
    HEAD_CHAR, BODY_CHAR, FOOD_CHAR, EMPTY_CHAR,
    CORNER_CHAR, HWALL_CHAR, VWALL_CHAR,
)
from .geometry import Position
from .keys import KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ESCAPE

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform == "win32"

if IS_WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

# ----- ANSI escapes -----
CLEAR = "\x1b[2J\x1b[H"
HOME = "\x1b[H"
ERASE_EOL = "\x1b[K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

ESC = "\x1b"

# ESC [ <final> (or ESC O <final>) sent by arrow keys on POSIX terminals
ANSI_ARROWS = {"A": KEY_UP, "B": KEY_DOWN, "C": KEY_RIGHT, "D": KEY_LEFT}
# Second code after the 0x00 / 0xE0 prefix from the Windows console
WINDOWS_ARROWS = {72: KEY_UP, 80: KEY_DOWN, 75: KEY_LEFT, 77: KEY_RIGHT}


# ---------- Input ----------
class TerminalMode:
    """
    Puts stdin in cbreak mode with echo off for the duration of the block
    (POSIX only, and only when it is a tty). The original attributes are put
    back on exit, even if the game loop raised.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.old = None

    def __enter__(self) -> "TerminalMode":
        if not IS_WINDOWS and self.stream.isatty():
            self.fd = self.stream.fileno()
            self.old = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
            logger.debug("stdin switched to cbreak mode")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.old is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old)
            self.old = None
            logger.debug("terminal attributes restored")


class TerminalInput:
    """
    Non-blocking keyboard reader, one key per poll.

    Escape sequences can reach us split over two polls, so a partial
    ESC / ESC [ prefix is kept in `buffer` until its final byte shows up.
    A prefix that sees no new bytes for a whole poll is reported as a plain
    escape and dropped.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.buffer = ""

    def poll_key(self) -> Optional[str]:
        """Return one key if one is waiting, else None. Never blocks."""
        if IS_WINDOWS:
            return read_key_windows()
        return self._poll_posix()

    def _ready(self) -> bool:
        readable, _, _ = select.select([self.stream.fileno()], [], [], 0)
        return bool(readable)

    def _read_char(self) -> str:
        data = os.read(self.stream.fileno(), 1)
        return data.decode("latin-1") if data else ""

    def _poll_posix(self) -> Optional[str]:
        got_bytes = False
        while True:
            key = self._take_key()
            if key is not None:
                return key
            if not self._ready():
                break
            ch = self._read_char()
            if not ch:
                break
            self.buffer += ch
            got_bytes = True

        if self.buffer and not got_bytes:
            self.buffer = ""
            return KEY_ESCAPE
        return None

    def _take_key(self) -> Optional[str]:
        """Pop one complete key off the buffer, or None if it is empty or partial."""
        buf = self.buffer
        if not buf:
            return None
        if buf[0] != ESC:
            self.buffer = buf[1:]
            return buf[0]
        if len(buf) == 1:
            return None

        # ESC + anything but a CSI/SS3 introducer (Alt+key): the key itself
        # stays queued for the next poll
        if buf[1] not in "[O":
            self.buffer = buf[1:]
            return KEY_ESCAPE

        # Parameters run until a final byte in @..~, e.g. ESC [ 1 ; 5 A
        for i in range(2, len(buf)):
            if "@" <= buf[i] <= "~":
                self.buffer = buf[i + 1:]
                return ANSI_ARROWS.get(buf[i], KEY_ESCAPE)
        return None


def read_key_windows() -> Optional[str]:
    if not msvcrt.kbhit():
        return None
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return WINDOWS_ARROWS.get(ord(msvcrt.getwch()))
    if ch == ESC:
        return KEY_ESCAPE
    return ch


# ---------- Output ----------
def render_to_string(
    width: int,
    height: int,
    snake: Sequence[Position],
    food: Optional[Position],
    score: int,
    is_game_over: bool,
) -> str:
    """Draw one frame: bordered playfield followed by the status line."""
    grid = [[EMPTY_CHAR] * width for _ in range(height)]

    for x, y in snake[1:]:
        if 0 <= x < width and 0 <= y < height:
            grid[y][x] = BODY_CHAR
    if food is not None:
        fx, fy = food
        grid[fy][fx] = FOOD_CHAR
    if snake:
        hx, hy = snake[0]
        if 0 <= hx < width and 0 <= hy < height:
            grid[hy][hx] = HEAD_CHAR

    border = CORNER_CHAR + HWALL_CHAR * width + CORNER_CHAR
    lines: List[str] = [border]
    lines.extend(VWALL_CHAR + "".join(row) + VWALL_CHAR for row in grid)
    lines.append(border)

    status = f"Score: {score}   (WASD / Arrow keys)  Quit: Q"
    if is_game_over:
        status += "   GAME OVER! Press R to restart."
    lines.append(status)
    return "\n".join(lines) + "\n"


class TerminalRenderer:
    """Redraws the whole frame in place with ANSI cursor homing."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def open(self) -> None:
        if IS_WINDOWS:
            # Windows 10+ consoles interpret ANSI once VT processing is on
            os.system("")
        self.stream.write(HIDE_CURSOR + CLEAR)
        self.stream.flush()

    def close(self) -> None:
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()

    def render(
        self,
        width: int,
        height: int,
        snake: Sequence[Position],
        food: Optional[Position],
        score: int,
        is_game_over: bool,
    ) -> None:
        text = render_to_string(width, height, snake, food, score, is_game_over)
        # erase leftovers from a longer previous line (the GAME OVER banner)
        self.stream.write(HOME + text.replace("\n", ERASE_EOL + "\n"))
        self.stream.flush()
