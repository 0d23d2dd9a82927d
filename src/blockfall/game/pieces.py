from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

from blockfall.exceptions import ShapeMismatchError
from .geometry import Coordinate, Dimension, RotateDirection
from .weight import Weight


class Tetromino(IntEnum):
    I = 1
    O = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


EMPTY = 0

Shape = np.ndarray


# Spawn orientation of every shape, rows top to bottom.
BASE_SHAPES = {
    Tetromino.I: np.array([[1], [1], [1], [1]], dtype=np.int8),
    Tetromino.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    Tetromino.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    Tetromino.J: np.array([[0, 1], [0, 1], [1, 1]], dtype=np.int8),
    Tetromino.L: np.array([[1, 0], [1, 0], [1, 1]], dtype=np.int8),
    Tetromino.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    Tetromino.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
}


def kind_of(value: int) -> Optional[Tetromino]:
    return None if value == EMPTY else Tetromino(value)


def cell_text(value: int) -> str:
    return " ." if value == EMPTY else "[]"


@dataclass(frozen=True, eq=False)
class Piece:
    """One tetromino in one orientation.

    `cells` is a (height, width) int8 array holding 0 for empty cells and the
    Tetromino value for filled ones.
    """

    size: Dimension
    cells: Shape = field(repr=False)

    def __post_init__(self) -> None:
        arr = np.asarray(self.cells, dtype=np.int8)
        if arr.size != len(self.size):
            raise ShapeMismatchError(
                f"{arr.size} cells do not fit a {self.size.width}x{self.size.height} piece"
            )
        arr = arr.reshape(self.size.shape).copy()
        arr.setflags(write=False)
        object.__setattr__(self, "cells", arr)

    @classmethod
    def of(cls, kind: Tetromino) -> "Piece":
        base = BASE_SHAPES[kind]
        h, w = base.shape
        return cls(Dimension(w, h), base * int(kind))

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Piece":
        kind = (rng or random).choice(list(Tetromino))
        return cls.of(kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash((self.size, self.cells.tobytes()))

    def __str__(self) -> str:
        return "\n".join("".join(cell_text(int(v)) for v in row) for row in self.cells)

    @property
    def kind(self) -> Tetromino:
        return Tetromino(int(self.cells.max()))

    def state(self, p: Coordinate) -> Optional[Tetromino]:
        if not self.size.is_inside(p):
            return None
        return kind_of(int(self.cells[p.y, p.x]))

    def rotated(self, direction: RotateDirection) -> "Piece":
        size = self.size.transposed()
        out = np.zeros(size.shape, dtype=np.int8)
        for y in range(self.size.height):
            for x in range(self.size.width):
                q = Coordinate(x, y).rotated(self.size, direction)
                out[q.y, q.x] = self.cells[y, x]
        return Piece(size, out)

    def weight(self) -> Weight:
        return Weight(self.size, (self.cells != EMPTY).astype(np.int8))

    def filled(self) -> List[Tuple[Coordinate, Tetromino]]:
        """Local coordinates and kinds of the filled cells, row-major."""
        ys, xs = np.nonzero(self.cells)
        return [(Coordinate(int(x), int(y)), Tetromino(int(self.cells[y, x]))) for y, x in zip(ys, xs)]
