"""
Board occupancy tracking.

Keeps a numpy occupancy bitmap for O(1) membership tests next to an
indexed list of free cells, so a uniformly random free cell can be drawn
in O(1) no matter how full the board is.
"""
from typing import Dict, Iterable, List

import numpy as np

from .direction import Point


class Board:
    """
    Occupancy of a width x height grid.

    The free-cell list is kept dense with swap-remove; `_index` maps each
    free cell to its slot in that list.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty board.

        Args:
            width: Grid width in cells
            height: Grid height in cells
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height
        self.occupied = np.zeros((height, width), dtype=bool)

        self._free: List[Point] = [
            Point(x, y) for y in range(height) for x in range(width)
        ]
        self._index: Dict[Point, int] = {p: i for i, p in enumerate(self._free)}

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def is_full(self) -> bool:
        return not self._free

    def is_occupied(self, point: Point) -> bool:
        return bool(self.occupied[point.y, point.x])

    def __contains__(self, point: Point) -> bool:
        return self.is_occupied(point)

    def occupy(self, point: Point) -> None:
        """Mark a free cell as taken."""
        idx = self._index.pop(point)
        last = self._free.pop()
        if idx < len(self._free):
            # Move the last free cell into the vacated slot
            self._free[idx] = last
            self._index[last] = idx
        self.occupied[point.y, point.x] = True

    def vacate(self, point: Point) -> None:
        """Return a taken cell to the free set."""
        if point in self._index:
            return
        self._index[point] = len(self._free)
        self._free.append(point)
        self.occupied[point.y, point.x] = False

    def occupy_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.occupy(point)

    def free_cell_at(self, index: int) -> Point:
        """Get the free cell stored at a slot of the free list."""
        return self._free[index]
