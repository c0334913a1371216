"""
Frame Renderer for Snake Arcade

Turns GameState snapshots into images using PIL (Pillow). The host window
blits one frame per display refresh; nothing in the simulation depends on
rendering.

Layout:
- Black board, one square per grid cell
- Snake head in white, body in yellow
- Food coloured by the power-up it carries
- Score and active power-ups in the top-left corner
- Game over banner while the snake is dead
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from snake_arcade.domain.game_state import GameState
from snake_arcade.domain.power_ups import PowerType

logger = logging.getLogger(__name__)

HUD_FONT_SIZE = 32
HUD_MARGIN = 10
GAME_OVER_TEXT = "GAME OVER! Press R to restart."


class ColorScheme:
    """Colors for the board, entities and HUD"""

    BACKGROUND = "#000000"
    SNAKE_HEAD = "#FFFFFF"
    SNAKE_BODY = "#FFFF00"

    FOOD = {
        PowerType.NONE: "#FF00FF",
        PowerType.SCORE_MULTIPLIER: "#00FF00",
        PowerType.INVULNERABILITY: "#FF0000",
    }

    SCORE_TEXT = "#FFFFFF"
    POWER_UP_TEXT = "#00FF00"
    GAME_OVER_TEXT = "#FF0000"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def load_font(font_path: Optional[str], size: int = HUD_FONT_SIZE):
    """
    Load the HUD font. A configured font that fails to load raises OSError;
    without one, Pillow's built-in font is used.
    """
    if font_path:
        logger.info(f"Loading font from {font_path}")
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default()


class FrameRenderer:
    """Render GameState snapshots to RGB images"""

    def __init__(self, cell_size: int, font_path: Optional[str] = None):
        self.cell_size = cell_size
        self.font = load_font(font_path)

    def frame_size(self, game_state: GameState) -> Tuple[int, int]:
        return (game_state.width * self.cell_size, game_state.height * self.cell_size)

    def render_frame(self, game_state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(game_state), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_snake(draw, game_state)

        for (food_x, food_y), power_type in game_state.food:
            self._draw_cell(draw, food_x, food_y, hex_to_rgb(ColorScheme.FOOD[power_type]))

        self._draw_hud(draw, game_state)

        if not game_state.alive:
            self._draw_game_over(draw, img.size)

        return img

    def _draw_snake(self, draw: ImageDraw.ImageDraw, game_state: GameState):
        body_color = hex_to_rgb(ColorScheme.SNAKE_BODY)
        for pos_x, pos_y in game_state.snake_positions[1:]:
            self._draw_cell(draw, pos_x, pos_y, body_color)

        # Head last so it stays visible when it overlaps the body
        head_x, head_y = game_state.head
        self._draw_cell(draw, head_x, head_y, hex_to_rgb(ColorScheme.SNAKE_HEAD))

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        grid_x: int,
        grid_y: int,
        color: Tuple[int, int, int],
    ):
        """Fill one grid cell"""
        x = grid_x * self.cell_size
        y = grid_y * self.cell_size
        draw.rectangle(
            [x, y, x + self.cell_size - 1, y + self.cell_size - 1],
            fill=color
        )

    def _draw_hud(self, draw: ImageDraw.ImageDraw, game_state: GameState):
        y = HUD_MARGIN
        score_text = f"Score: {game_state.score}"
        draw.text((HUD_MARGIN, y), score_text, fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font)
        y += self._text_height(draw, score_text) + HUD_MARGIN

        for text in game_state.power_ups:
            draw.text((HUD_MARGIN, y), text, fill=hex_to_rgb(ColorScheme.POWER_UP_TEXT), font=self.font)
            y += self._text_height(draw, text) + HUD_MARGIN

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, size: Tuple[int, int]):
        width, height = size
        bbox = draw.textbbox((0, 0), GAME_OVER_TEXT, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (width // 2 - text_width // 2, height // 2 - text_height // 2),
            GAME_OVER_TEXT,
            fill=hex_to_rgb(ColorScheme.GAME_OVER_TEXT),
            font=self.font
        )

    def _text_height(self, draw: ImageDraw.ImageDraw, text: str) -> int:
        bbox = draw.textbbox((0, 0), text, font=self.font)
        return bbox[3] - bbox[1]
