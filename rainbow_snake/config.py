"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, CELL_SIZE,
    DEFAULT_HOST, DEFAULT_PORT, DEFAULT_STORE_PATH,
)


class ConfigError(ValueError):
    pass


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    cell_size: int = CELL_SIZE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    store_path: str = DEFAULT_STORE_PATH
    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("canvas_width", "canvas_height", "cell_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.canvas_width % self.cell_size or self.canvas_height % self.cell_size:
            raise ConfigError(
                f"canvas {self.canvas_width}x{self.canvas_height} is not a whole number "
                f"of {self.cell_size}px cells"
            )

    @property
    def grid_size(self) -> tuple[int, int]:
        return self.canvas_width // self.cell_size, self.canvas_height // self.cell_size

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            canvas_width=_int_env(env, "SNAKE_CANVAS_WIDTH", CANVAS_WIDTH),
            canvas_height=_int_env(env, "SNAKE_CANVAS_HEIGHT", CANVAS_HEIGHT),
            cell_size=_int_env(env, "SNAKE_CELL_SIZE", CELL_SIZE),
            host=env.get("SNAKE_HOST", DEFAULT_HOST),
            port=_int_env(env, "SNAKE_PORT", DEFAULT_PORT),
            store_path=env.get("SNAKE_STORE_PATH", DEFAULT_STORE_PATH),
            log_level=env.get("SNAKE_LOG_LEVEL", "INFO").upper(),
        )
