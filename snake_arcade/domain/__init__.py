"""
Domain entities for the Snake Arcade simulation.

This module contains the core game entities that are independent of
rendering, windowing and input handling.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE,
    MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, RESTART, VALID_INTENTS,
)
from .position import Position, wrap, random_position
from .snake import Snake
from .power_ups import (
    PowerType,
    PowerKind,
    NO_POWER,
    TickContext,
    ActivePowerUp,
    select_power,
    roll_power,
)
from .food import Food, spawn
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'MOVE_UP', 'MOVE_DOWN', 'MOVE_LEFT', 'MOVE_RIGHT', 'RESTART', 'VALID_INTENTS',
    'Position', 'wrap', 'random_position',
    'Snake',
    'PowerType', 'PowerKind', 'NO_POWER', 'TickContext', 'ActivePowerUp',
    'select_power', 'roll_power',
    'Food', 'spawn',
    'GameState',
]
