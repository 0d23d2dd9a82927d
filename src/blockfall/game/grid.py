from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from blockfall.exceptions import OutOfBoundsError, ShapeMismatchError
from .geometry import Coordinate, Dimension
from .pieces import EMPTY, Piece, Tetromino, cell_text, kind_of
from .weight import Weight


DEFAULT_SIZE = Dimension(10, 20)


def render_rows(size: Dimension, rows: List[List[Optional[Tetromino]]]) -> str:
    """Bordered text rendering shared by Grid and Match."""
    lines = []
    for row in rows:
        lines.append("<!" + "".join(cell_text(0 if s is None else int(s)) for s in row) + "!>")
    lines.append("<!" + "==" * size.width + "!>")
    lines.append("  " + "\\/" * size.width)
    return "\n".join(lines)


class Grid:
    """Locked cells of the playfield.

    The grid stores 0 for empty cells and the Tetromino value for filled ones.
    Instances are treated as values: every operation that changes cells
    returns a new Grid and leaves the receiver untouched.
    """

    def __init__(self, size: Dimension = DEFAULT_SIZE, cells: Optional[np.ndarray] = None) -> None:
        self.size = size
        if cells is None:
            self.cells = np.zeros(size.shape, dtype=np.int8)
        else:
            arr = np.asarray(cells, dtype=np.int8)
            if arr.size != len(size):
                raise ShapeMismatchError(
                    f"{arr.size} cells do not fit a {size.width}x{size.height} grid"
                )
            self.cells = arr.reshape(size.shape).copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash((self.size, self.cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(size={self.size!r}, filled={int(np.count_nonzero(self.cells))})"

    def __str__(self) -> str:
        return render_rows(self.size, self.table())

    def copy(self) -> "Grid":
        return Grid(self.size, self.cells)

    def state(self, p: Coordinate) -> Optional[Tetromino]:
        if not self.size.is_inside(p):
            return None
        return kind_of(int(self.cells[p.y, p.x]))

    def table(self) -> List[List[Optional[Tetromino]]]:
        return [[kind_of(int(v)) for v in row] for row in self.cells]

    def set_state(self, p: Coordinate, kind: Optional[Tetromino]) -> "Grid":
        grid = self.copy()
        if self.size.is_inside(p):
            grid.cells[p.y, p.x] = EMPTY if kind is None else int(kind)
        return grid

    def weight(self) -> Weight:
        return Weight(self.size, (self.cells != EMPTY).astype(np.int8))

    def can_place(self, p: Coordinate, piece: Piece) -> bool:
        try:
            return self.weight().overlap(p, piece.weight()).valid()
        except OutOfBoundsError:
            return False

    def place(self, p: Coordinate, piece: Piece) -> "Grid":
        """Stamp the filled cells of `piece` at `p`; empty piece cells leave the grid as is."""
        grid = self.copy()
        for local, kind in piece.filled():
            q = Coordinate(p.x + local.x, p.y + local.y)
            if self.size.is_inside(q):
                grid.cells[q.y, q.x] = int(kind)
        return grid

    def full_rows(self) -> List[int]:
        return [int(y) for y in np.flatnonzero(np.all(self.cells != EMPTY, axis=1))]

    def remove_full_rows(self) -> Tuple["Grid", int]:
        """Remove every full row, shifting the rows above it down.

        Rows are collapsed in ascending order. Collapsing row y only rewrites
        rows 0..y, so rows found lower down are still intact when their turn comes.
        """
        rows = self.full_rows()
        grid = self.copy()
        for y in rows:
            grid.cells[1 : y + 1] = grid.cells[0:y].copy()
            grid.cells[0] = EMPTY
        return grid, len(rows)

