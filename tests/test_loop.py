import pytest

from termsnake.food import FoodPlacer
from termsnake.game import Session, Status
from termsnake.geometry import Direction, Position
from termsnake.loop import LoopDriver

TICK = 0.12


class FakeInput:
    def __init__(self, *keys):
        self.keys = list(keys)
        self.polls = 0

    def poll_key(self):
        self.polls += 1
        return self.keys.pop(0) if self.keys else None


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, width, height, snake, food, score, is_game_over):
        self.frames.append((width, height, list(snake), food, score, is_game_over))


class FakeClock:
    def __init__(self, work=0.0):
        self.now = 100.0
        self.work = work
        self.slept = []

    def __call__(self):
        # every reading costs `work` seconds of simulated processing
        self.now += self.work
        return self.now

    def sleep(self, seconds):
        self.slept.append(seconds)
        self.now += seconds


def make_driver(*keys, work=0.0, session=None):
    session = session or Session(width=30, height=20, placer=FoodPlacer.seeded(0))
    session.food = Position(0, 0)
    clock = FakeClock(work)
    renderer = RecordingRenderer()
    driver = LoopDriver(session, FakeInput(*keys), renderer, TICK, clock=clock, sleep=clock.sleep)
    return driver, renderer, clock


def test_one_advance_and_render_per_tick():
    driver, renderer, clock = make_driver()
    assert driver.run(max_ticks=3) == 3
    assert driver.input_source.polls == 3
    # initial frame plus one per tick
    assert len(renderer.frames) == 4
    assert renderer.frames[-1][2][0] == Position(18, 10)
    assert clock.slept == pytest.approx([TICK] * 3)


def test_sleep_covers_only_the_rest_of_the_tick():
    driver, _, clock = make_driver(work=0.01)
    driver.run(max_ticks=2)
    assert all(s < TICK for s in clock.slept)
    assert len(clock.slept) == 2


def test_no_sleep_when_tick_overran():
    driver, _, clock = make_driver(work=1.0)
    driver.run(max_ticks=3)
    assert clock.slept == []


class SlowRenderer(RecordingRenderer):
    """Spends `delays[i]` seconds of fake time on the i-th render."""

    def __init__(self, clock, *delays):
        super().__init__()
        self.clock = clock
        self.delays = list(delays)

    def render(self, *args):
        super().render(*args)
        if self.delays:
            self.clock.now += self.delays.pop(0)


def test_short_overrun_restarts_the_period():
    driver, _, clock = make_driver()
    # initial frame is free, the first tick overruns by 30 ms
    driver.renderer = SlowRenderer(clock, 0.0, TICK + 0.03)
    driver.run(max_ticks=3)
    # no catch-up: both following ticks get a full period
    assert clock.slept == pytest.approx([TICK, TICK])


def test_quit_stops_after_render_without_advancing():
    driver, renderer, _ = make_driver(None, "q", "d")
    assert driver.run() == 1
    assert len(renderer.frames) == 3
    assert renderer.frames[-1] == renderer.frames[-2]
    assert driver.input_source.keys == ["d"]


def test_key_is_applied_on_the_same_tick():
    driver, renderer, _ = make_driver("w")
    driver.run(max_ticks=1)
    assert driver.session.direction is Direction.UP
    assert renderer.frames[-1][2][0] == Position(15, 9)


def test_restart_from_game_over_keeps_running():
    driver, renderer, _ = make_driver()
    session = driver.session
    session.snake.body[0] = Position(29, 10)
    session.snake.body[1] = Position(28, 10)
    driver.tick()
    assert session.status is Status.GAME_OVER
    assert renderer.frames[-1][5] is True

    driver.input_source.keys.append("R")
    assert driver.tick()
    assert session.status is Status.PLAYING
    assert session.score == 0
    assert renderer.frames[-1][5] is False
    assert len(renderer.frames[-1][2]) == 2
