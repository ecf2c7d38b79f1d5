"""
Abstract renderer interface for Grid Snake.

The game loop draws every frame through this interface and never touches
a drawing library directly.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers clear the previous frame and draw the snake, food and score
    from a game state dictionary.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any]) -> None:
        """
        Render the game state, replacing the previous frame.

        Args:
            game_state: Dictionary from GameSession.get_state()
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass

    def close(self) -> None:
        """Release everything the renderer has drawn or opened."""
        pass
