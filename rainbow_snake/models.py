"""Data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import DIRECTIONS

Cell = tuple[int, int]
Direction = tuple[int, int]


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class SoundCue(Enum):
    EAT = "eat"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FoodKind:
    color: str
    points: int


@dataclass
class Food:
    cell: Cell
    kind: FoodKind


@dataclass
class GameState:
    snake: list[Cell] = field(default_factory=list)  # [(x,y), ...] head first
    direction: Direction = DIRECTIONS["right"]
    next_direction: Direction = DIRECTIONS["right"]
    food: Optional[Food] = None
    score: int = 0
    level: int = 1
    paused: bool = False
    boost_active: bool = False
    running: bool = False

    def head(self):
        return self.snake[0] if self.snake else None
