"""Game module for blockfall.

Exports the engine layers, leaf first:
- Dimension, Coordinate: grid geometry and rotation transforms
- Weight: additive occupancy overlay used for collision tests
- Piece, Tetromino: the seven shapes and their rotations
- Grid: locked cells, placement and row clearing
- Match: the falling-piece state machine
- BlockfallGame, Action, GameConfig: command surface for hosts
"""

from .geometry import Coordinate, Dimension, MoveDirection, RotateDirection
from .weight import Weight
from .pieces import Piece, Tetromino
from .grid import Grid
from .core import Action, ActivePiece, BlockfallGame, GameConfig, Match

__all__ = [
    "Coordinate",
    "Dimension",
    "MoveDirection",
    "RotateDirection",
    "Weight",
    "Piece",
    "Tetromino",
    "Grid",
    "Match",
    "ActivePiece",
    "BlockfallGame",
    "Action",
    "GameConfig",
]
