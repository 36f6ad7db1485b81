import pytest

from rainbow_snake.config import ConfigError, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.grid_size == (20, 20)
    assert settings.port == 8765
    assert settings.store_path == "snake_highscore.json"
    assert settings.log_level == "INFO"


def test_env_overrides():
    settings = Settings.from_env({
        "SNAKE_CANVAS_WIDTH": "600",
        "SNAKE_CANVAS_HEIGHT": "300",
        "SNAKE_CELL_SIZE": "30",
        "SNAKE_PORT": "9000",
        "SNAKE_LOG_LEVEL": "debug",
    })
    assert settings.grid_size == (20, 10)
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_fractional_grid_rejected():
    with pytest.raises(ConfigError):
        Settings(canvas_width=410)


def test_non_positive_cell_rejected():
    with pytest.raises(ConfigError):
        Settings(cell_size=0)


def test_non_integer_env_rejected():
    with pytest.raises(ConfigError, match="SNAKE_PORT"):
        Settings.from_env({"SNAKE_PORT": "eighty"})
