# geometry.py
from __future__ import annotations
from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    """A cell on the grid; (0, 0) is the top-left corner."""
    x: int
    y: int


class Direction(Enum):
    """Heading of the snake, valued by its (dx, dy) step."""
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# ---------- Helpers ----------
def step(position: Position, direction: Direction) -> Position:
    """Move one cell in the given direction. Up decrements y."""
    return Position(position.x + direction.dx, position.y + direction.dy)

def in_bounds(position: Position, width: int, height: int) -> bool:
    return 0 <= position.x < width and 0 <= position.y < height

def opposite_of(direction: Direction) -> Direction:
    return _OPPOSITES[direction]

def opposite(a: Direction, b: Direction) -> bool:
    """True for Up/Down and Left/Right pairs, in either order."""
    return _OPPOSITES[a] is b
