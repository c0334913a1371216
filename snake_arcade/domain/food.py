"""
Food entity: a board cell plus the power-up it grants when eaten.
"""

from dataclasses import dataclass

from .position import Position
from .power_ups import NO_POWER, PowerKind


@dataclass
class Food:
    position: Position
    power: PowerKind = NO_POWER

    @property
    def has_power(self) -> bool:
        return not self.power.is_none


def spawn(position: Position, power_kind: PowerKind = NO_POWER) -> Food:
    return Food(position=Position(*position), power=power_kind)
