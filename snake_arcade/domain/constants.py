"""
Game constants for Snake Arcade.
"""

from typing import Dict, Tuple

# Movement directions (screen coordinates: y grows downwards)
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Player intents delivered by the host event loop
MOVE_UP = "MOVE_UP"
MOVE_DOWN = "MOVE_DOWN"
MOVE_LEFT = "MOVE_LEFT"
MOVE_RIGHT = "MOVE_RIGHT"
RESTART = "RESTART"
VALID_INTENTS = {MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, RESTART}

INTENT_TO_DIRECTION: Dict[str, str] = {
    MOVE_UP: UP,
    MOVE_DOWN: DOWN,
    MOVE_LEFT: LEFT,
    MOVE_RIGHT: RIGHT,
}

# Power-up lifetimes, in seconds
SCORE_MULTIPLIER_DURATION = 30.0
INVULNERABILITY_DURATION = 20.0

# Power-up spawn table (half-open roll intervals)
INVULNERABILITY_CHANCE = 0.10
SCORE_MULTIPLIER_CHANCE = 0.25
MAX_MULTIPLIER_FACTOR = 5
