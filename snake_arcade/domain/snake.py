"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, Iterable, Optional, Tuple

from .constants import OPPOSITE, RIGHT, VALID_MOVES
from .position import Position, wrap


class Snake:
    """
    Represents the player's snake on a toroidal board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        direction: current heading
        queued_directions: pending heading changes, at most one applied per tick
        queued_grows: pending growth requests, at most one applied per tick
        alive: whether this snake is still alive
        death_reason: e.g. 'self'
        death_tick: the advance count at which the snake died
    """

    def __init__(
        self,
        positions: Iterable[Tuple[int, int]],
        width: int,
        height: int,
        direction: str = RIGHT,
    ):
        self.width = width
        self.height = height
        self.positions: Deque[Position] = deque(
            Position(wrap(x, width), wrap(y, height)) for x, y in positions
        )
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")

        self.direction = direction
        self.queued_directions: Deque[str] = deque()
        self.queued_grows: Deque[bool] = deque()
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None
        self.ticks = 0

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def set_direction(self, direction: str):
        """Queue a heading change; it takes effect on a later advance()."""
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        self.queued_directions.append(direction)

    def grow(self):
        self.queued_grows.append(True)

    def kill(self, reason: str = "self"):
        self.alive = False
        self.death_reason = reason
        self.death_tick = self.ticks

    def revive(self):
        """Bring a dead snake back, clearing its death bookkeeping."""
        self.alive = True
        self.death_reason = None
        self.death_tick = None

    def check_collision(self, position: Tuple[int, int]) -> bool:
        """True if the head occupies position. Body segments never collide with food."""
        return self.head == position

    def check_self_collision(self) -> bool:
        head = self.head
        return any(segment == head for segment in list(self.positions)[1:])

    def _apply_queued_direction(self):
        if not self.queued_directions:
            return
        requested = self.queued_directions.popleft()
        # Same-heading and reversal requests are both dropped.
        if requested == self.direction or requested == OPPOSITE[self.direction]:
            return
        self.direction = requested

    def advance(self):
        """
        Run one tick of movement:
          1) apply at most one queued heading change
          2) move every segment onto its predecessor and the head one cell on
          3) apply at most one queued growth at the pre-move tail
          4) check for self-collision
        """
        self._apply_queued_direction()

        previous_tail = self.positions[-1]
        new_head = self.head.moved(self.direction, self.width, self.height)
        self.positions.appendleft(new_head)
        self.positions.pop()

        # Can only grow once per advance
        if self.queued_grows:
            self.queued_grows.popleft()
            self.positions.append(previous_tail)

        self.ticks += 1

        if self.check_self_collision():
            self.kill("self")
