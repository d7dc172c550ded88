import numpy as np  # type: ignore

from termsnake.food import FoodPlacer
from termsnake.geometry import Position
from termsnake.snake import Snake


def all_cells_but(width, height, free):
    return [Position(x, y) for y in range(height) for x in range(width) if (x, y) != free]


def test_food_is_inside_grid_and_off_snake():
    placer = FoodPlacer.seeded(1)
    snake = Snake([(x, 3) for x in range(8, 0, -1)])
    for _ in range(200):
        p = placer.place(10, 6, snake)
        assert 0 <= p.x < 10 and 0 <= p.y < 6
        assert not snake.contains(p)


def test_same_seed_same_sequence():
    snake = Snake.initial(30, 20)
    a = FoodPlacer.seeded(42)
    b = FoodPlacer.seeded(42)
    assert [a.place(30, 20, snake) for _ in range(10)] == [b.place(30, 20, snake) for _ in range(10)]


def test_nearly_full_grid_finds_last_free_cell():
    placer = FoodPlacer.seeded(3, max_attempts=1)
    free = Position(2, 1)
    snake = Snake(all_cells_but(4, 3, free))
    for _ in range(20):
        assert placer.place(4, 3, snake) == free


def test_fallback_without_rejection_sampling():
    placer = FoodPlacer(np.random.default_rng(0), max_attempts=0)
    snake = Snake([(0, 0), (1, 0)])
    p = placer.place(3, 2, snake)
    assert p is not None
    assert not snake.contains(p)


def test_full_grid_returns_none():
    placer = FoodPlacer.seeded(0)
    snake = Snake([(1, 0), (0, 0), (0, 1), (1, 1)])
    assert placer.place(2, 2, snake) is None
