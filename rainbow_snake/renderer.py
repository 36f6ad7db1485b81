"""Raster rendering of a game state with Pillow."""

import io

from PIL import Image, ImageColor, ImageDraw

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, CELL_SIZE,
    BACKGROUND_COLOR, OUTLINE_COLOR, BOOST_BAR_HEIGHT, BOOST_BAR_COLOR,
)
from .models import Cell, GameState


def segment_color(index: int) -> tuple[int, int, int]:
    hue = (index * 10) % 360
    return ImageColor.getrgb(f"hsl({hue}, 100%, 50%)")


class Renderer:
    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 cell_size: int = CELL_SIZE):
        self.width = width
        self.height = height
        self.cell_size = cell_size

    def render(self, state: GameState) -> Image.Image:
        image = Image.new("RGB", (self.width, self.height), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image, "RGBA")

        for index, cell in enumerate(state.snake):
            draw.rectangle(self._cell_rect(cell), fill=segment_color(index), outline=OUTLINE_COLOR)

        if state.food is not None:
            draw.ellipse(self._food_bbox(state.food.cell), fill=state.food.kind.color,
                         outline=OUTLINE_COLOR, width=2)

        if state.boost_active:
            draw.rectangle((0, 0, self.width - 1, BOOST_BAR_HEIGHT - 1), fill=BOOST_BAR_COLOR)

        return image

    def render_png(self, state: GameState) -> bytes:
        buf = io.BytesIO()
        self.render(state).save(buf, format="PNG")
        return buf.getvalue()

    def _cell_rect(self, cell: Cell) -> tuple[int, int, int, int]:
        x1 = cell[0] * self.cell_size
        y1 = cell[1] * self.cell_size
        return (x1, y1, x1 + self.cell_size - 1, y1 + self.cell_size - 1)

    def _food_bbox(self, cell: Cell) -> tuple[float, float, float, float]:
        cx = (cell[0] + 0.5) * self.cell_size
        cy = (cell[1] + 0.5) * self.cell_size
        r = self.cell_size / 2 - 2
        return (cx - r, cy - r, cx + r, cy + r)
