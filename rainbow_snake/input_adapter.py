"""Keyboard and touch bindings onto game actions."""

from typing import Optional

from .constants import KEY_DIRECTIONS, PAUSE_KEYS, BOOST_KEYS
from .game import SnakeGame
from .models import Direction


class InputAdapter:
    def __init__(self, game: SnakeGame):
        self.game = game
        self.touch_start: Optional[tuple[float, float]] = None

    # Logical actions

    def on_direction(self, direction: Direction):
        self.game.set_direction(direction)

    def on_pause_toggle(self):
        self.game.toggle_pause()

    def on_boost_toggle(self):
        self.game.toggle_speed_boost()

    # Native events

    def on_key(self, key: str):
        if key in PAUSE_KEYS:
            self.on_pause_toggle()
            return

        if self.game.state.paused:
            return

        if key in KEY_DIRECTIONS:
            self.on_direction(KEY_DIRECTIONS[key])
        elif key in BOOST_KEYS:
            self.on_boost_toggle()

    def on_touch_start(self, x: float, y: float):
        self.touch_start = (x, y)

    def on_touch_move(self, x: float, y: float):
        """Swipe direction from the larger displacement since the touch started."""
        if self.touch_start is None or self.game.state.paused:
            return
        dx = x - self.touch_start[0]
        dy = y - self.touch_start[1]
        if dx == 0 and dy == 0:
            return
        if abs(dx) > abs(dy):
            self.on_direction((1 if dx > 0 else -1, 0))
        else:
            self.on_direction((0, 1 if dy > 0 else -1))
