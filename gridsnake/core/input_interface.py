"""
Abstract input source interface for Grid Snake.
"""

from abc import ABC, abstractmethod
from typing import Optional


class InputSource(ABC):
    """
    Non-blocking source of key presses.

    The game loop polls once per tick; a poll must return immediately
    whether or not a key is pending.
    """

    @abstractmethod
    def poll_key(self) -> Optional[str]:
        """
        Take the next pending key, if any.

        Returns:
            A single character, or None if nothing is pending
        """
        pass

    def close(self) -> None:
        """Stop capturing input."""
        pass
