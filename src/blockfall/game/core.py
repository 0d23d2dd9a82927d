from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

from .geometry import Coordinate, Dimension, MoveDirection, RotateDirection
from .grid import DEFAULT_SIZE, Grid, render_rows
from .pieces import Piece, Tetromino

logger = logging.getLogger(__name__)

SPAWN_POSITION = Coordinate(3, 0)

# Player input may only push a piece sideways or down.
INPUT_MOVES = (MoveDirection.LEFT, MoveDirection.RIGHT, MoveDirection.DOWN)


@dataclass(frozen=True)
class ActivePiece:
    """The falling piece and the grid coordinate of its bounding box's top-left cell."""

    position: Coordinate
    piece: Piece

    def state(self, p: Coordinate) -> Optional[Tetromino]:
        if p.x < self.position.x or p.y < self.position.y:
            return None
        return self.piece.state(p - self.position)

    def can_place(self, grid: Grid) -> bool:
        return grid.can_place(self.position, self.piece)

    def moved(self, direction: MoveDirection) -> "ActivePiece":
        return replace(self, position=self.position.moved(direction))

    def rotated(self, direction: RotateDirection) -> "ActivePiece":
        return replace(self, piece=self.piece.rotated(direction))


@dataclass(frozen=True)
class Match:
    """Grid plus the optional falling piece.

    Every command returns a new Match; the receiver is never modified.
    """

    grid: Grid
    active: Optional[ActivePiece] = None
    spawn: Coordinate = SPAWN_POSITION

    @classmethod
    def new(cls, size: Dimension = DEFAULT_SIZE, spawn: Coordinate = SPAWN_POSITION) -> "Match":
        return cls(Grid(size), None, spawn)

    @property
    def size(self) -> Dimension:
        return self.grid.size

    @property
    def overflowed(self) -> bool:
        """True when the active piece overlaps locked cells, which only a spawn can cause."""
        return self.active is not None and not self.active.can_place(self.grid)

    def move(self, direction: MoveDirection, count: int = 1) -> "Match":
        if direction not in INPUT_MOVES:
            raise ValueError(f"cannot move a piece {direction.name}")
        active = self.active
        if active is None:
            return self
        for _ in range(count):
            candidate = active.moved(direction)
            if not candidate.can_place(self.grid):
                break
            active = candidate
        return replace(self, active=active)

    def rotate(self, direction: RotateDirection, count: int = 1) -> "Match":
        active = self.active
        if active is None:
            return self
        for _ in range(count):
            candidate = active.rotated(direction)
            if not candidate.can_place(self.grid):
                break
            active = candidate
        return replace(self, active=active)

    def tick(self, rng: Optional[random.Random] = None) -> Tuple["Match", int]:
        """Advance gravity by one step.

        Spawns a piece when none is falling, otherwise drops the falling piece
        one row or locks it in place. Full rows are removed afterwards and
        their count is returned next to the new Match.
        """
        grid = self.grid
        active = self.active
        if active is None:
            active = ActivePiece(self.spawn, Piece.random(rng))
            logger.debug("spawned %s at (%d, %d)", active.piece.kind.name, self.spawn.x, self.spawn.y)
        else:
            candidate = active.moved(MoveDirection.DOWN)
            if candidate.can_place(grid):
                active = candidate
            else:
                grid = grid.place(active.position, active.piece)
                logger.debug(
                    "locked %s at (%d, %d)", active.piece.kind.name, active.position.x, active.position.y
                )
                active = None

        grid, cleared = grid.remove_full_rows()
        if cleared:
            logger.debug("cleared %d row(s)", cleared)
        return replace(self, grid=grid, active=active), cleared

    def state(self, p: Coordinate) -> Optional[Tetromino]:
        if self.active is not None:
            kind = self.active.state(p)
            if kind is not None:
                return kind
        return self.grid.state(p)

    def table(self) -> List[List[Optional[Tetromino]]]:
        return [
            [self.state(Coordinate(x, y)) for x in range(self.size.width)]
            for y in range(self.size.height)
        ]

    def to_array(self) -> np.ndarray:
        """Grid cells with the falling piece drawn over them."""
        out = self.grid.cells.copy()
        if self.active is not None:
            origin = self.active.position
            for local, kind in self.active.piece.filled():
                x, y = origin.x + local.x, origin.y + local.y
                if self.size.is_inside(Coordinate(x, y)):
                    out[y, x] = int(kind)
        return out

    def render_text(self) -> str:
        return render_rows(self.size, self.table())

    def __str__(self) -> str:
        return self.render_text()


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    DROP = 3
    ROTATE_LEFT = 4
    ROTATE_RIGHT = 5
    NONE = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_x: int = SPAWN_POSITION.x
    spawn_y: int = SPAWN_POSITION.y


class BlockfallGame:
    """Single-owner command surface around a Match.

    Hosts (the Gymnasium env, the pygame front end) drive the game only
    through `step` and `tick` and read it back through the query methods.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.match: Match
        self.lines_cleared_total: int
        self.game_over: bool
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        size = Dimension(self.config.width, self.config.height)
        self.match = Match.new(size, Coordinate(self.config.spawn_x, self.config.spawn_y))
        self.lines_cleared_total = 0
        self.game_over = False

    @property
    def size(self) -> Dimension:
        return self.match.size

    def step(self, action: Action) -> None:
        if self.game_over:
            return
        action = Action(action)
        if action == Action.MOVE_LEFT:
            self.match = self.match.move(MoveDirection.LEFT)
        elif action == Action.MOVE_RIGHT:
            self.match = self.match.move(MoveDirection.RIGHT)
        elif action == Action.MOVE_DOWN:
            self.match = self.match.move(MoveDirection.DOWN)
        elif action == Action.DROP:
            self.match = self.match.move(MoveDirection.DOWN, self.size.height)
        elif action == Action.ROTATE_LEFT:
            self.match = self.match.rotate(RotateDirection.LEFT)
        elif action == Action.ROTATE_RIGHT:
            self.match = self.match.rotate(RotateDirection.RIGHT)
        elif action == Action.NONE:
            pass

    def tick(self) -> int:
        if self.game_over:
            return 0
        self.match, cleared = self.match.tick(self.rng)
        self.lines_cleared_total += cleared
        if self.match.overflowed:
            logger.warning("spawned piece overlaps the stack; game over after %d line(s)", self.lines_cleared_total)
            self.game_over = True
        return cleared

    def state(self, x: int, y: int) -> Optional[Tetromino]:
        return self.match.state(Coordinate(x, y))

    def get_state(self) -> np.ndarray:
        return self.match.to_array()

    def __str__(self) -> str:
        return self.match.render_text()
