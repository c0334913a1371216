"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import List, Tuple

from .power_ups import PowerType

FOOD_MARKERS = {
    PowerType.NONE: 'A',
    PowerType.SCORE_MULTIPLIER: 'M',
    PowerType.INVULNERABILITY: 'I',
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been processed since the last restart
        snake_positions: list of (x, y), head first
        direction: the snake's current heading
        alive: whether the snake is alive
        score: cumulative score
        width, height: board dimensions
        food: list of ((x, y), PowerType) for every food item on the board
        power_ups: display strings of the active power-ups
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        alive: bool,
        score: int,
        width: int,
        height: int,
        food: List[Tuple[Tuple[int, int], PowerType]],
        power_ups: List[str],
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.alive = alive
        self.score = score
        self.width = width
        self.height = height
        self.food = food
        self.power_ups = power_ups

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = plain food, M = score multiplier, I = invulnerability
        S = snake body
        H = snake head (X once dead)
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for (fx, fy), power_type in self.food:
            board[fy][fx] = FOOD_MARKERS[power_type]

        # Draw tail first so the head wins on overlapping cells
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if pos_idx == 0:
                board[y][x] = 'H' if self.alive else 'X'
            else:
                board[y][x] = 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, score={self.score}, "
            f"alive={self.alive}, length={len(self.snake_positions)}, food={len(self.food)}>"
        )
