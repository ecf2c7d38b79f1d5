"""
Food placement.
"""
import logging
from typing import Optional

from .board import Board
from .direction import Point
from .rng import LCGRandom

logger = logging.getLogger(__name__)


def place_food(board: Board, rng: LCGRandom) -> Optional[Point]:
    """
    Pick a uniformly random cell that the snake does not occupy.

    Args:
        board: Board tracking the snake's cells
        rng: Session random generator

    Returns:
        The new food position, or None if the board is full
    """
    if board.is_full:
        logger.debug("No free cell left for food")
        return None

    food = board.free_cell_at(rng.below(board.free_count))
    logger.debug("Food placed at (%d, %d)", food.x, food.y)
    return food
