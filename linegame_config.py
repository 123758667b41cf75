"""Game rules and live-tunable settings"""

GRID_SIZE = 6
MIN_NUMBER, MAX_NUMBER = 1, 4
MIN_LINE_LENGTH, MAX_LINE_LENGTH = 2, 6

# Points per matched line length
SCORE_TABLE = {2: 10, 3: 30, 4: 60, 5: 100, 6: 150}

CONFIG = {
    "CELL_SIZE": 64,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
    "STRICT_GAME_OVER": False,
}
