import pytest

from termsnake.food import FoodPlacer
from termsnake.game import Session


class ScriptedPlacer:
    """Hands out food positions from a list; None once it runs dry."""

    def __init__(self, *cells):
        self.cells = list(cells)
        self.calls = 0

    def place(self, width, height, snake):
        self.calls += 1
        return self.cells.pop(0) if self.cells else None


@pytest.fixture
def session():
    return Session(width=30, height=20, placer=FoodPlacer.seeded(0))
