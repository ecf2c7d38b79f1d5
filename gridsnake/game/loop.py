"""
Game loop scheduler - fixed-tick driver for a game session.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.input_interface import InputSource
from ..core.renderer_interface import RendererInterface
from .direction import direction_for_key
from .engine import GameOverReason, GameState
from .session import GameSession

logger = logging.getLogger(__name__)

QUIT_KEY = "q"


@dataclass(frozen=True)
class GameResult:
    """How a finished game ended."""
    state: GameState
    score: int
    reason: Optional[GameOverReason]
    ticks: int
    length: int


class GameLoop:
    """
    Drives a session one tick at a time.

    Each tick: advance, render, poll one key, sleep. A game over is
    rendered once more before the loop stops; a quit stops without it.
    """

    def __init__(
        self,
        session: GameSession,
        renderer: RendererInterface,
        input_source: InputSource,
        tick_interval: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
        max_ticks: Optional[int] = None
    ):
        """
        Initialize the loop.

        Args:
            session: Session to drive
            renderer: Draws every frame
            input_source: Polled once per tick
            tick_interval: Pause between ticks in seconds
            sleep: Pause function, replaceable for tests
            max_ticks: Quit after this many ticks (None runs until the game ends)
        """
        if tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {tick_interval}")

        self.session = session
        self.renderer = renderer
        self.input_source = input_source
        self.tick_interval = tick_interval
        self.sleep = sleep
        self.max_ticks = max_ticks
        self.ticks = 0

    def handle_key(self, key: Optional[str]) -> None:
        """
        Dispatch a key press.

        W/A/S/D steer, Q quits, anything else is ignored.
        """
        if not key or self.session.state.is_terminal:
            return

        if key.lower() == QUIT_KEY:
            self.session.quit()
            return

        direction = direction_for_key(key)
        if direction is not None:
            self.session.set_direction(direction)

    def tick(self) -> GameState:
        """
        Run one iteration of the loop.

        Returns:
            The session state after the tick
        """
        if self.session.state.is_terminal:
            return self.session.state

        self.ticks += 1
        state = self.session.advance()
        if state is GameState.GAME_OVER:
            self.renderer.render(self.session.get_state())
            return state

        self.renderer.render(self.session.get_state())
        self.handle_key(self.input_source.poll_key())

        if self.max_ticks is not None and self.ticks >= self.max_ticks:
            self.session.quit()

        if not self.session.state.is_terminal:
            self.sleep(self.tick_interval)

        return self.session.state

    def run(self) -> GameResult:
        """
        Tick until the session reaches a terminal state.

        Returns:
            GameResult describing how the game ended
        """
        logger.info(
            "Starting game loop (%dx%d, tick %.3fs, seed %d)",
            self.session.width, self.session.height,
            self.tick_interval, self.session.initial_seed
        )
        try:
            while self.session.state is GameState.RUNNING:
                self.tick()
        finally:
            self.renderer.close()
            self.input_source.close()

        result = self.result()
        self._report(result)
        return result

    def result(self) -> GameResult:
        """Snapshot the outcome of the current session."""
        return GameResult(
            state=self.session.state,
            score=self.session.score,
            reason=self.session.reason,
            ticks=self.ticks,
            length=len(self.session.snake),
        )

    def _report(self, result: GameResult) -> None:
        if result.state is GameState.GAME_OVER:
            reason = result.reason.value if result.reason else "unknown"
            print(f"[Game] Game Over! Score: {result.score} ({reason})")
        else:
            print("[Game] Quit.")
        logger.info("Game loop exited: %s after %d ticks", result.state.value, result.ticks)
