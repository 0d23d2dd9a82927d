"""blockfall: a falling-block puzzle engine with Gymnasium and pygame hosts."""

from .exceptions import BlockfallError, OutOfBoundsError, ShapeMismatchError
from .game import (
    Action,
    BlockfallGame,
    Coordinate,
    Dimension,
    GameConfig,
    Grid,
    Match,
    MoveDirection,
    Piece,
    RotateDirection,
    Tetromino,
)

__version__ = "0.1.0"
