"""
Grid points, headings and the direction controller.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def __add__(self, direction: "Direction") -> "Point":
        dx, dy = direction.vector
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class Direction(IntEnum):
    """Snake movement directions. y grows downward."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def vector(self) -> Tuple[int, int]:
        return _VECTORS[self]

    @property
    def dx(self) -> int:
        return _VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _VECTORS[self][1]

    def dot(self, other: "Direction") -> int:
        """Dot product of the two unit vectors."""
        return self.dx * other.dx + self.dy * other.dy


_VECTORS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}

KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


def direction_for_key(key: Optional[str]) -> Optional[Direction]:
    """Map a W/A/S/D character (any case) to a direction."""
    if not key:
        return None
    return KEY_DIRECTIONS.get(key.lower())


class DirectionController:
    """
    Holds the active heading and arbitrates direction requests.

    A request for the exact opposite of the active heading is dropped,
    otherwise the snake would turn straight into its own neck.
    """

    def __init__(self, direction: Direction = Direction.RIGHT):
        self.direction = direction

    def set_direction(self, requested: Direction) -> bool:
        """
        Apply a requested heading.

        Args:
            requested: The direction asked for

        Returns:
            False if the request was a reversal and got dropped
        """
        if self.direction.dot(requested) == -1:
            return False
        self.direction = requested
        return True
