"""
Pygame keyboard input source.
"""
from collections import deque
from typing import Deque, Optional

import pygame

from ..core.input_interface import InputSource


class PygameKeyboard(InputSource):
    """
    Non-blocking key poller on top of the pygame event queue.

    Key presses are buffered so that one key is handed out per poll.
    Closing the window or pressing Escape counts as "q".
    """

    def __init__(self):
        self._pending: Deque[str] = deque()

    def _push(self, key: str) -> None:
        # Quit jumps ahead of any buffered turns
        if key == "q":
            self._pending.appendleft(key)
        else:
            self._pending.append(key)

    def _drain_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._push("q")
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._push("q")
                elif isinstance(event.unicode, str) and event.unicode:
                    self._push(event.unicode.lower())

    def poll_key(self) -> Optional[str]:
        self._drain_events()
        if not self._pending:
            return None
        return self._pending.popleft()

    def close(self) -> None:
        self._pending.clear()
