"""
pygame host loop: owns the window, turns key presses into intents and calls
the game's update and draw steps once per frame.
"""

import logging
from typing import TYPE_CHECKING, Optional

import pygame

from snake_arcade.config import GameConfig
from snake_arcade.domain.constants import MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, MOVE_UP, RESTART
from snake_arcade.services.renderer import FrameRenderer

if TYPE_CHECKING:
    from snake_arcade.main import SnakeGame

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake!"

KEY_TO_INTENT = {
    pygame.K_LEFT: MOVE_LEFT,
    pygame.K_RIGHT: MOVE_RIGHT,
    pygame.K_UP: MOVE_UP,
    pygame.K_DOWN: MOVE_DOWN,
    pygame.K_r: RESTART,
}


def intent_for_key(key: int) -> Optional[str]:
    return KEY_TO_INTENT.get(key)


def draw(screen: "pygame.Surface", game: "SnakeGame", renderer: FrameRenderer):
    frame = renderer.render_frame(game.get_current_state())
    surface = pygame.image.frombuffer(frame.tobytes(), frame.size, "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run_window(game: "SnakeGame", renderer: FrameRenderer, config: GameConfig):
    """Run the interactive game until the window is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(config.screen_size)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        logger.info(
            f"Window opened: {config.grid_width}x{config.grid_height} cells, "
            f"{config.updates_per_second:g} updates/s"
        )

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    intent = intent_for_key(event.key)
                    if intent is not None:
                        game.handle_intent(intent)

            game.update()
            draw(screen, game, renderer)
            clock.tick(config.fps)
    finally:
        pygame.quit()
        logger.info("Window closed")
