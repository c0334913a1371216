"""
Power-up kinds and their effects.

A power-up is a plain value (PowerKind). Food carries one, and eating the food
copies it into an ActivePowerUp record held by the game. Effects only see a
TickContext, never the game itself.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    INVULNERABILITY_CHANCE,
    INVULNERABILITY_DURATION,
    MAX_MULTIPLIER_FACTOR,
    SCORE_MULTIPLIER_CHANCE,
    SCORE_MULTIPLIER_DURATION,
)


class PowerType(str, Enum):
    NONE = "none"
    SCORE_MULTIPLIER = "score_multiplier"
    INVULNERABILITY = "invulnerability"


@dataclass(frozen=True)
class PowerKind:
    """A power-up variant. factor is only meaningful for SCORE_MULTIPLIER."""

    type: PowerType = PowerType.NONE
    factor: int = 0

    @classmethod
    def score_multiplier(cls, factor: int) -> "PowerKind":
        return cls(PowerType.SCORE_MULTIPLIER, factor)

    @classmethod
    def invulnerability(cls) -> "PowerKind":
        return cls(PowerType.INVULNERABILITY)

    @property
    def is_none(self) -> bool:
        return self.type is PowerType.NONE

    @property
    def duration(self) -> Optional[float]:
        """Lifetime in seconds, or None if the kind never expires."""
        if self.type is PowerType.SCORE_MULTIPLIER:
            return SCORE_MULTIPLIER_DURATION
        if self.type is PowerType.INVULNERABILITY:
            return INVULNERABILITY_DURATION
        return None


NO_POWER = PowerKind()


@dataclass
class TickContext:
    """The slice of game state a power-up effect is allowed to change."""

    score: int
    scored: bool
    snake_alive: bool


@dataclass
class ActivePowerUp:
    kind: PowerKind
    activated_at: float

    def is_expired(self, now: float) -> bool:
        return should_remove(self.kind, self.activated_at, now)

    @property
    def display_text(self) -> str:
        return display_text(self.kind)


def on_activation(kind: PowerKind, ctx: TickContext):
    """Runs once when the food carrying kind is eaten. No variant uses it yet."""


def apply_effect(kind: PowerKind, ctx: TickContext):
    """Per-tick effect of an active power-up, run every tick it stays active."""
    if kind.type is PowerType.SCORE_MULTIPLIER:
        if ctx.scored:
            # Replace this tick's +1 with +factor.
            ctx.score -= 1
            ctx.score += kind.factor
    elif kind.type is PowerType.INVULNERABILITY:
        ctx.snake_alive = True


def on_deactivation(kind: PowerKind, ctx: TickContext):
    """Runs once when an active power-up expires. No variant needs cleanup."""


def should_remove(kind: PowerKind, activated_at: float, now: float) -> bool:
    duration = kind.duration
    if duration is None:
        return False
    return now - activated_at > duration


def display_text(kind: PowerKind) -> str:
    if kind.type is PowerType.SCORE_MULTIPLIER:
        return f"Score x{kind.factor}"
    if kind.type is PowerType.INVULNERABILITY:
        return "Invulnerable!!!"
    return ""


def select_power(roll: float, rng: Optional[random.Random] = None) -> PowerKind:
    """
    Map a roll in [0, 1) onto the spawn table:
      [0.00, 0.10) -> Invulnerability
      [0.10, 0.25) -> ScoreMultiplier with a factor drawn from [0, 5)
      [0.25, 1.00) -> no power
    """
    rng = rng or random
    if roll < INVULNERABILITY_CHANCE:
        return PowerKind.invulnerability()
    if roll < SCORE_MULTIPLIER_CHANCE:
        return PowerKind.score_multiplier(rng.randrange(MAX_MULTIPLIER_FACTOR))
    return NO_POWER


def roll_power(rng: Optional[random.Random] = None) -> PowerKind:
    rng = rng or random
    return select_power(rng.random(), rng)
