from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from blockfall.exceptions import OutOfBoundsError, ShapeMismatchError
from .geometry import Coordinate, Dimension


class Weight:
    """Integer occupancy overlay used for collision tests.

    Cells hold 0 (free) or 1 (occupied). Two overlays are combined by adding
    them cell-wise, so any cell that ends up above 1 marks a collision.
    """

    def __init__(self, size: Dimension, cells: Union[np.ndarray, Iterable[int]]) -> None:
        arr = np.asarray(cells, dtype=np.int8)
        if arr.size != len(size):
            raise ShapeMismatchError(
                f"{arr.size} cells do not fit a {size.width}x{size.height} overlay"
            )
        self.size = size
        self.cells = arr.reshape(size.shape)

    @classmethod
    def zeros(cls, size: Dimension) -> "Weight":
        return cls(size, np.zeros(size.shape, dtype=np.int8))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __repr__(self) -> str:
        return f"Weight(size={self.size!r}, cells={self.cells.ravel().tolist()!r})"

    def weight(self, p: Coordinate) -> int:
        return int(self.cells[p.y, p.x])

    def fits(self, p: Coordinate, other: "Weight") -> bool:
        if p.x < 0 or p.y < 0:
            return False
        return p.x + other.size.width <= self.size.width and p.y + other.size.height <= self.size.height

    def overlap(self, p: Coordinate, other: "Weight") -> "Weight":
        """Return a copy of this overlay with `other` added in at offset `p`.

        Raises OutOfBoundsError when `other` does not fit inside this overlay.
        """
        if not self.fits(p, other):
            raise OutOfBoundsError(
                f"{other.size.width}x{other.size.height} overlay at ({p.x}, {p.y}) "
                f"exceeds {self.size.width}x{self.size.height}"
            )
        out = self.cells.copy()
        h, w = other.size.shape
        out[p.y : p.y + h, p.x : p.x + w] += other.cells
        return Weight(self.size, out)

    def valid(self) -> bool:
        return bool(np.all(self.cells <= 1))
