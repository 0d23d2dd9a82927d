from __future__ import annotations

from typing import Tuple

from blockfall.game import Tetromino


PALETTE = {
    0: (20, 20, 26),
    Tetromino.I: (0, 240, 240),
    Tetromino.O: (240, 240, 0),
    Tetromino.T: (160, 0, 240),
    Tetromino.J: (0, 0, 240),
    Tetromino.L: (240, 160, 0),
    Tetromino.S: (0, 240, 0),
    Tetromino.Z: (240, 0, 0),
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(v, (200, 200, 200))
