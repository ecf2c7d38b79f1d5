"""
Snake Game Renderer - Pygame-based visualization with flat colored cells.
"""
import pygame
from typing import Dict, Any, Tuple

from ..core.renderer_interface import RendererInterface


# Colors
BACKGROUND_COLOR = (30, 30, 40)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
TEXT_COLOR = (220, 220, 220)
GAME_OVER_COLOR = (255, 100, 100)

HUD_HEIGHT = 30


class PygameRenderer(RendererInterface):
    """
    Renders a game session in its own pygame window.

    Every frame is drawn from scratch: the window is cleared, then food,
    snake and score are painted as flat cells.
    """

    def __init__(
        self,
        grid_width: int = 20,
        grid_height: int = 20,
        cell_size: int = 25,
        title: str = "Snake",
        show_score: bool = True
    ):
        """
        Initialize the renderer and open its window.

        Args:
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            cell_size: Size of each grid cell in pixels
            title: Window title
            show_score: Draw the score line under the grid
        """
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell_size = cell_size
        self.show_score = show_score

        self.window_width, self.window_height = self.get_preferred_size()

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)
        self.font = pygame.font.Font(None, 28)
        self.frames_drawn = 0
        self._open = True

    def get_preferred_size(self) -> Tuple[int, int]:
        hud = HUD_HEIGHT if self.show_score else 0
        return (
            self.grid_width * self.cell_size,
            self.grid_height * self.cell_size + hud,
        )

    def render(self, game_state: Dict[str, Any]) -> None:
        """
        Draw one frame.

        Args:
            game_state: Dictionary from GameSession.get_state()
        """
        if not self._open:
            raise RuntimeError("Renderer has been closed")

        # Clear the previous frame
        self.surface.fill(BACKGROUND_COLOR)

        food = game_state["food"]
        self._draw_cell(food["x"], food["y"], FOOD_COLOR)

        for i, segment in enumerate(game_state["snake"]):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            self._draw_cell(segment["x"], segment["y"], color)

        if self.show_score:
            score_text = self.font.render(
                f"Score: {game_state['score']}", True, TEXT_COLOR
            )
            self.surface.blit(score_text, (6, self.grid_height * self.cell_size + 6))

        if game_state.get("state") == "game_over":
            over_text = self.font.render("GAME OVER", True, GAME_OVER_COLOR)
            self.surface.blit(over_text, (6, 6))

        pygame.display.flip()
        self.frames_drawn += 1

    def _draw_cell(self, x: int, y: int, color: Tuple[int, int, int]) -> None:
        rect = pygame.Rect(
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size,
            self.cell_size
        )
        pygame.draw.rect(self.surface, color, rect)

    def close(self) -> None:
        """Close the window and shut pygame down."""
        if not self._open:
            return
        self._open = False
        pygame.quit()
