import random

import pytest

from rainbow_snake.game import SnakeGame
from rainbow_snake.score_store import ScoreStore


class FakeTicker:
    def __init__(self):
        self.interval_ms = None
        self.running = False
        self.history = []

    def start(self, interval_ms):
        self.interval_ms = interval_ms
        self.running = True
        self.history.append(("start", interval_ms))

    def reschedule(self, interval_ms):
        self.interval_ms = interval_ms
        self.running = True
        self.history.append(("reschedule", interval_ms))

    def cancel(self):
        self.running = False
        self.history.append(("cancel", None))


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def store():
    return ScoreStore({})


@pytest.fixture
def game(ticker, store):
    g = SnakeGame(20, 20, ticker=ticker, score_store=store, rng=random.Random(7))
    g.start()
    return g


def place_food(game, cell):
    game.state.food.cell = cell
