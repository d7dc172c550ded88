# snake.py
from __future__ import annotations
from collections import deque
from itertools import islice
from typing import Deque, Iterable, Iterator, List

from .geometry import Position


class Snake:
    """
    Ordered body of the snake, head at index 0.

    The body is only mutated by the session: one grow_at_head() per tick,
    followed by shrink_at_tail() unless food was eaten. Bounds and
    collisions are the caller's business.
    """

    def __init__(self, cells: Iterable[Position]):
        self.body: Deque[Position] = deque(Position(*c) for c in cells)
        if not self.body:
            raise ValueError("Snake needs at least one cell")

    @classmethod
    def initial(cls, width: int, height: int) -> "Snake":
        """Length-2 snake centred on the grid, facing right."""
        cx, cy = width // 2, height // 2
        return cls([Position(cx, cy), Position(cx - 1, cy)])

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def grow_at_head(self, position: Position) -> None:
        self.body.appendleft(position)

    def shrink_at_tail(self) -> None:
        if len(self.body) <= 1:
            raise IndexError("shrink_at_tail would leave the snake empty")
        self.body.pop()

    def contains(self, position: Position) -> bool:
        """Inclusive scan, head included. Used to keep food off the snake."""
        return position in self.body

    def body_contains_excluding_head(self, position: Position) -> bool:
        """Scan from index 1 on. Used for self collision after the new head is pushed."""
        return any(cell == position for cell in islice(self.body, 1, None))

    def cells(self) -> List[Position]:
        return list(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self.body == other.body

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"
