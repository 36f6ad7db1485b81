"""Core game state and logic."""

import logging
import random
from typing import Optional

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, CELL_SIZE,
    INITIAL_SNAKE_LENGTH, START_POSITION, LEVEL_UP_LENGTH,
    INITIAL_SPEED, MAX_SPEED, SPEED_INCREMENT, DIRECTIONS,
)
from .food import generate_food
from .models import Direction, GamePhase, GameState, SoundCue
from .score_store import ScoreStore

logger = logging.getLogger(__name__)


def level_interval(level: int) -> int:
    return max(MAX_SPEED, INITIAL_SPEED - (level - 1) * SPEED_INCREMENT)


class SnakeGame:
    """Owns one GameState and advances it once per tick.

    ``ticker`` is anything with ``start``, ``reschedule`` and ``cancel`` taking
    millisecond intervals (see ``PeriodicTicker``). ``score_store`` receives the
    final score on game over.
    """

    def __init__(self, width: int = CANVAS_WIDTH // CELL_SIZE,
                 height: int = CANVAS_HEIGHT // CELL_SIZE,
                 ticker=None,
                 score_store: Optional[ScoreStore] = None,
                 rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.ticker = ticker
        self.score_store = score_store
        self.rng = rng or random.Random()
        self.phase = GamePhase.IDLE
        self.high_score = 0
        self.sound_cues: list[SoundCue] = []
        self.state = GameState()
        self.reset()

    @property
    def tick_interval(self) -> int:
        if self.state.boost_active:
            return MAX_SPEED
        return level_interval(self.state.level)

    def reset(self):
        sx, sy = START_POSITION
        snake = [(sx - i, sy) for i in range(INITIAL_SNAKE_LENGTH)]
        self.state = GameState(
            snake=snake,
            direction=DIRECTIONS["right"],
            next_direction=DIRECTIONS["right"],
        )
        self.state.food = generate_food(snake, self.width, self.height, self.rng)
        self.sound_cues.clear()
        if self.score_store is not None:
            self.high_score = self.score_store.load()

    def start(self):
        """Begin a fresh run; also used to restart after game over."""
        self.reset()
        self.phase = GamePhase.RUNNING
        self.state.running = True
        if self.ticker is not None:
            self.ticker.start(self.tick_interval)
        logger.info("Game started on a %dx%d grid", self.width, self.height)

    def tick(self) -> bool:
        """Advance the snake one cell. Returns False when nothing moved."""
        st = self.state
        if self.phase is not GamePhase.RUNNING or st.paused:
            return False

        st.direction = st.next_direction
        dx, dy = st.direction
        hx, hy = st.head()
        head = ((hx + dx) % self.width, (hy + dy) % self.height)

        st.snake.insert(0, head)
        if st.food is not None and head == st.food.cell:
            self._eat()
        else:
            st.snake.pop()

        # Checked after the pop, so moving into the vacated tail cell is legal
        if head in st.snake[1:]:
            self.game_over()
        return True

    def _eat(self):
        st = self.state
        st.score += st.food.kind.points
        self.sound_cues.append(SoundCue.EAT)
        if len(st.snake) % LEVEL_UP_LENGTH == 0:
            self.level_up()
        st.food = generate_food(st.snake, self.width, self.height, self.rng)

    def set_direction(self, direction: Direction):
        if direction not in DIRECTIONS.values():
            return
        dx, dy = self.state.direction
        if direction == (-dx, -dy):
            return
        self.state.next_direction = direction

    def toggle_pause(self):
        self.state.paused = not self.state.paused

    def toggle_speed_boost(self):
        self.state.boost_active = not self.state.boost_active
        self._reschedule()

    def level_up(self):
        self.state.level += 1
        logger.info("Level up: %d (interval %d ms)", self.state.level, level_interval(self.state.level))
        self._reschedule()

    def _reschedule(self):
        if self.ticker is not None and self.phase is GamePhase.RUNNING:
            self.ticker.reschedule(self.tick_interval)

    def game_over(self):
        self.phase = GamePhase.GAME_OVER
        self.state.running = False
        if self.ticker is not None:
            self.ticker.cancel()
        self.sound_cues.append(SoundCue.GAME_OVER)
        score = self.state.score
        logger.info("Game over with score %d", score)
        if self.score_store is not None:
            if self.score_store.save(score):
                logger.info("New high score: %d", score)
            self.high_score = self.score_store.load()
        else:
            self.high_score = max(self.high_score, score)

    def drain_sound_cues(self) -> list[SoundCue]:
        cues = list(self.sound_cues)
        self.sound_cues.clear()
        return cues
