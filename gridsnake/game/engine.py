"""
Movement and collision engine.

Pure rules: given a session, compute the next head, decide whether the
move is blocked, and apply growth or shrink.
"""
import logging
from enum import Enum
from typing import TYPE_CHECKING, Container, Optional

from .direction import Direction, Point
from .food import place_food

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Session state. GAME_OVER and QUIT are terminal."""
    RUNNING = "running"
    GAME_OVER = "game_over"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.RUNNING


class GameOverReason(Enum):
    """Why a session ended in GAME_OVER."""
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


def next_head(head: Point, direction: Direction) -> Point:
    """Cell the head moves into this tick."""
    return head + direction


def in_bounds(point: Point, width: int, height: int) -> bool:
    return 0 <= point.x < width and 0 <= point.y < height


def is_blocked(
    new_head: Point,
    occupied: Container[Point],
    tail: Point,
    width: int,
    height: int,
    growing: bool,
    allow_tail_chase: bool = True
) -> Optional[GameOverReason]:
    """
    Check whether moving the head into a cell ends the game.

    On a move that does not grow, the tail leaves its cell this same tick,
    so with allow_tail_chase the head may enter it.

    Args:
        new_head: Cell the head is about to enter
        occupied: Cells the snake covers now, e.g. the session Board
        tail: Current tail cell
        width: Grid width in cells
        height: Grid height in cells
        growing: Whether the move eats food
        allow_tail_chase: Exclude the vacating tail from the body test

    Returns:
        The collision reason, or None if the move is legal
    """
    if not in_bounds(new_head, width, height):
        return GameOverReason.WALL

    if new_head not in occupied:
        return None

    if new_head == tail and not growing and allow_tail_chase:
        return None

    return GameOverReason.SELF


def advance(session: "GameSession") -> GameState:
    """
    Execute one movement step on a running session.

    Args:
        session: The game session to mutate

    Returns:
        The session state after the move
    """
    if session.state.is_terminal:
        return session.state

    new_head = next_head(session.head, session.direction)
    growing = new_head == session.food

    reason = is_blocked(
        new_head, session.board, session.tail,
        session.width, session.height,
        growing, session.allow_tail_chase
    )
    if reason is not None:
        session.end(reason)
        return session.state

    session.frame_count += 1

    if growing:
        session.snake.appendleft(new_head)
        session.board.occupy(new_head)
        session.score += 1
        logger.debug("Ate food at (%d, %d), score %d", new_head.x, new_head.y, session.score)

        food = place_food(session.board, session.rng)
        if food is None:
            session.end(GameOverReason.BOARD_FULL)
            return session.state
        session.food = food
    else:
        tail = session.snake.pop()
        session.board.vacate(tail)
        session.snake.appendleft(new_head)
        session.board.occupy(new_head)

    return session.state

