"""Food kinds and placement."""

import random
from typing import Optional

from .constants import FOOD_TYPES
from .models import Cell, Food, FoodKind

FOOD_KINDS = [FoodKind(color=color, points=points) for color, points in FOOD_TYPES]


def generate_food(snake: list[Cell], width: int, height: int,
                  rng: Optional[random.Random] = None) -> Food:
    """Pick a random food kind and drop it on a cell the snake does not occupy.

    Cells are sampled uniformly over the whole grid and rejected while occupied,
    so placement stays uniform over the free cells.
    """
    rng = rng or random
    occupied = set(snake)
    if len(occupied) >= width * height:
        raise ValueError("no free cell left for food")

    kind = rng.choice(FOOD_KINDS)
    while True:
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            return Food(cell=cell, kind=kind)
