"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snake_arcade.domain.constants import (
    DIRECTION_DELTAS,
    INTENT_TO_DIRECTION,
    OPPOSITE,
)
from snake_arcade.domain.game_state import GameState
from snake_arcade.domain.position import wrap
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a heading that neither reverses the snake nor steps
    onto its own body. The board wraps, so there are no walls to avoid.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_intent(self, game_state: GameState) -> Optional[str]:
        if not game_state.alive:
            return None

        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        # The tail moves out of the way this tick
        body = set(map(tuple, snake_positions[1:-1]))

        safe_intents: List[str] = []
        for intent, direction in sorted(INTENT_TO_DIRECTION.items()):
            if direction == OPPOSITE[game_state.direction]:
                continue
            dx, dy = DIRECTION_DELTAS[direction]
            new_pos = (wrap(head_x + dx, game_state.width), wrap(head_y + dy, game_state.height))
            if new_pos in body:
                continue
            safe_intents.append(intent)

        # If no safe moves, just return a random one (we'll die anyway)
        if not safe_intents:
            return self.rng.choice(sorted(INTENT_TO_DIRECTION))

        return self.rng.choice(safe_intents)
