"""
Toroidal grid coordinates.

The board has no walls: every coordinate is wrapped back onto the grid, so a
snake leaving one edge re-enters from the opposite one.
"""

import random
from typing import NamedTuple, Optional

from .constants import DIRECTION_DELTAS


def wrap(coordinate: int, axis_size: int) -> int:
    """Return coordinate modulo axis_size, always in [0, axis_size)."""
    return (coordinate % axis_size + axis_size) % axis_size


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: str, width: int, height: int) -> "Position":
        """Return the neighbouring cell along direction, wrapped onto the grid."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(wrap(self.x + dx, width), wrap(self.y + dy, height))


def random_position(width: int, height: int, rng: Optional[random.Random] = None) -> Position:
    """
    Draw a uniformly random cell of a width x height grid.

    Occupied cells are not excluded; a spawn may land on the snake or on
    another food item.
    """
    rng = rng or random
    return Position(rng.randrange(width), rng.randrange(height))
