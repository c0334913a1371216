"""
Runtime configuration for Snake Arcade.

Values come from the environment (optionally via a .env file loaded with
python-dotenv) and are fixed for the lifetime of the process.

Environment variables:
    SNAKE_GRID_WIDTH          board width in cells (default 30)
    SNAKE_GRID_HEIGHT         board height in cells (default 20)
    SNAKE_CELL_SIZE           cell size in pixels, render only (default 32)
    SNAKE_UPDATES_PER_SECOND  simulation ticks per second (default 17)
    SNAKE_FPS                 window frames per second (default 60)
    SNAKE_FONT_PATH           TrueType font for the HUD (default: Pillow's built-in font)
    SNAKE_SEED                RNG seed for reproducible runs (default: unseeded)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_GRID_WIDTH = 30
DEFAULT_GRID_HEIGHT = 20
DEFAULT_CELL_SIZE = 32
DEFAULT_UPDATES_PER_SECOND = 17.0
DEFAULT_FPS = 60


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class GameConfig:
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    updates_per_second: float = DEFAULT_UPDATES_PER_SECOND
    fps: int = DEFAULT_FPS
    font_path: Optional[str] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid size must be positive, got {self.grid_width}x{self.grid_height}"
            )
        if self.cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {self.cell_size}")
        if self.updates_per_second <= 0:
            raise ValueError(
                f"Updates per second must be positive, got {self.updates_per_second}"
            )
        if self.fps <= 0:
            raise ValueError(f"FPS must be positive, got {self.fps}")

    @property
    def tick_interval(self) -> float:
        """Seconds between simulation ticks (~58.8 ms at 17 updates/second)."""
        return 1.0 / self.updates_per_second

    @property
    def screen_size(self):
        return (self.grid_width * self.cell_size, self.grid_height * self.cell_size)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GameConfig":
        load_dotenv(dotenv_path)
        return cls(
            grid_width=_get_int("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH),
            grid_height=_get_int("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
            cell_size=_get_int("SNAKE_CELL_SIZE", DEFAULT_CELL_SIZE),
            updates_per_second=_get_float("SNAKE_UPDATES_PER_SECOND", DEFAULT_UPDATES_PER_SECOND),
            fps=_get_int("SNAKE_FPS", DEFAULT_FPS),
            font_path=os.getenv("SNAKE_FONT_PATH") or None,
            seed=_get_int("SNAKE_SEED", None),
        )
