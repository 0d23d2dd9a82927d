from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MoveDirection(IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


class RotateDirection(IntEnum):
    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class Dimension:
    """Width/height extent of a grid or of a piece bounding box."""

    width: int
    height: int

    def __len__(self) -> int:
        return self.width * self.height

    def is_inside(self, p: Coordinate) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def transposed(self) -> "Dimension":
        return Dimension(self.height, self.width)

    @property
    def shape(self) -> tuple[int, int]:
        # numpy (rows, cols) order
        return self.height, self.width


@dataclass(frozen=True)
class Coordinate:
    """Non-negative (x, y) cell index; x is the column and y the row."""

    x: int
    y: int

    def moved(self, direction: MoveDirection) -> "Coordinate":
        # Left/up stop at the origin instead of going negative.
        if direction == MoveDirection.LEFT:
            return Coordinate(max(self.x - 1, 0), self.y)
        if direction == MoveDirection.RIGHT:
            return Coordinate(self.x + 1, self.y)
        if direction == MoveDirection.UP:
            return Coordinate(self.x, max(self.y - 1, 0))
        return Coordinate(self.x, self.y + 1)

    def rotated(self, size: Dimension, direction: RotateDirection) -> "Coordinate":
        """Map this cell of a `size` box onto the transposed box after a quarter turn."""
        if direction == RotateDirection.LEFT:
            return Coordinate(self.y, size.width - self.x - 1)
        return Coordinate(size.height - self.y - 1, self.x)

    def index(self, size: Dimension) -> int:
        return size.width * self.y + self.x

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other.x, self.y - other.y)
