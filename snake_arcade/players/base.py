"""
Base player interface for scripted input sources.
"""

from typing import Optional

from snake_arcade.domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state and returns the intent the host
    loop should forward to the game, or None to keep the current heading.
    """

    def get_intent(self, game_state: GameState) -> Optional[str]:
        """
        Return an intent given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "MOVE_UP", "MOVE_DOWN", "MOVE_LEFT", "MOVE_RIGHT", "RESTART", or None
        """
        raise NotImplementedError
