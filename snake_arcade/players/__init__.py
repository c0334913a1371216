"""
Player implementations for Snake Arcade.

Players are scripted input sources that turn a GameState into intents,
used by the headless runner in place of a keyboard.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
