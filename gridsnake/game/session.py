"""
Game session - the single owner of all state for one game.
"""
import logging
from collections import deque
from typing import Any, Deque, Dict, Optional

from .board import Board
from .direction import Direction, DirectionController, Point
from .engine import GameOverReason, GameState, advance
from .food import place_food
from .rng import LCGRandom

logger = logging.getLogger(__name__)


class GameSession:
    """
    State of one snake game.

    Owns the snake, food, score, heading, RNG and board occupancy.
    Every rule function takes the session explicitly; nothing lives at
    module level.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        initial_length: int = 3,
        seed: Optional[int] = None,
        allow_tail_chase: bool = True
    ):
        """
        Initialize the session.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            initial_length: Starting snake length
            seed: RNG seed, taken from the wall clock when None
            allow_tail_chase: Let the head enter the cell the tail is leaving
        """
        if initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {initial_length}")
        if initial_length > width // 2 + 1:
            raise ValueError(
                f"initial_length {initial_length} does not fit left of centre "
                f"on a grid {width} wide"
            )

        self.width = width
        self.height = height
        self.initial_length = initial_length
        self.allow_tail_chase = allow_tail_chase
        self.rng = LCGRandom(seed) if seed is not None else LCGRandom.from_time()
        self.initial_seed = self.rng.seed

        self.board = Board(width, height)
        self.controller = DirectionController(Direction.RIGHT)

        # Start in center, heading right
        center_x = width // 2
        center_y = height // 2
        self.snake: Deque[Point] = deque(
            Point(center_x - i, center_y) for i in range(initial_length)
        )
        self.board.occupy_all(self.snake)

        self.score = 0
        self.frame_count = 0
        self.state = GameState.RUNNING
        self.reason: Optional[GameOverReason] = None

        food = place_food(self.board, self.rng)
        if food is None:
            raise ValueError("Initial snake leaves no room for food")
        self.food: Point = food

        logger.debug(
            "Session %dx%d created with seed %d", width, height, self.initial_seed
        )

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def tail(self) -> Point:
        return self.snake[-1]

    @property
    def direction(self) -> Direction:
        return self.controller.direction

    def set_direction(self, direction: Direction) -> bool:
        """Request a new heading. Reversals are dropped."""
        if self.state.is_terminal:
            return False
        return self.controller.set_direction(direction)

    def advance(self) -> GameState:
        """Move the snake one tick."""
        return advance(self)

    def end(self, reason: GameOverReason) -> None:
        """Enter GAME_OVER. Has no effect once the session is terminal."""
        if self.state.is_terminal:
            return
        self.state = GameState.GAME_OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at frame %d with score %d",
            reason.value, self.frame_count, self.score
        )

    def quit(self) -> None:
        """Enter QUIT. Has no effect once the session is terminal."""
        if self.state.is_terminal:
            return
        self.state = GameState.QUIT
        logger.info("Quit at frame %d with score %d", self.frame_count, self.score)

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.food.to_dict(),
            "direction": int(self.direction),
            "score": self.score,
            "state": self.state.value,
            "reason": self.reason.value if self.reason else None,
            "frame": self.frame_count,
            "width": self.width,
            "height": self.height,
        }
