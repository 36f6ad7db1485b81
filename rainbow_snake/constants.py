"""Game constants."""

CANVAS_WIDTH, CANVAS_HEIGHT = 400, 400
CELL_SIZE = 20

INITIAL_SNAKE_LENGTH = 3
START_POSITION = (10, 10)

# Tick intervals in milliseconds (lower is faster)
INITIAL_SPEED = 150
MAX_SPEED = 50
SPEED_INCREMENT = 5
LEVEL_UP_LENGTH = 5

POINTS_PER_FOOD = 10
FOOD_TYPES = [
    ("#ff4500", POINTS_PER_FOOD),
    ("#ffd700", POINTS_PER_FOOD * 2),
    ("#7cfc00", POINTS_PER_FOOD * 3),
]

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

KEY_DIRECTIONS = {
    "ArrowUp": DIRECTIONS["up"],
    "ArrowDown": DIRECTIONS["down"],
    "ArrowLeft": DIRECTIONS["left"],
    "ArrowRight": DIRECTIONS["right"],
}
PAUSE_KEYS = {"p", "P"}
BOOST_KEYS = {" "}

HIGH_SCORE_KEY = "snakeHighScore"

BACKGROUND_COLOR = "#202020"
OUTLINE_COLOR = "black"
BOOST_BAR_HEIGHT = 5
BOOST_BAR_COLOR = (255, 255, 255, 128)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8765
DEFAULT_STORE_PATH = "snake_highscore.json"
