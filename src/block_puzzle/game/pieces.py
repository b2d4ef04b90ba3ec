from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from .grid import GameGrid


COLS = 10
ROWS = 20


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _template(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Square bounding boxes so that every shape rotates in place.
SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _template([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.J: _template([[2, 0, 0], [2, 2, 2], [0, 0, 0]]),
    TetrominoType.L: _template([[0, 0, 3], [3, 3, 3], [0, 0, 0]]),
    TetrominoType.O: _template([[4, 4], [4, 4]]),
    TetrominoType.S: _template([[0, 5, 5], [5, 5, 0], [0, 0, 0]]),
    TetrominoType.T: _template([[0, 6, 0], [6, 6, 6], [0, 0, 0]]),
    TetrominoType.Z: _template([[7, 7, 0], [0, 7, 7], [0, 0, 0]]),
}


def shape_for(kind: TetrominoType) -> Shape:
    """Return a writable copy of the template for ``kind``."""
    return SHAPES[kind].copy()


def rotate(shape: Shape, direction: int) -> Shape:
    """Rotate a square shape by 90 degrees.

    ``direction`` is +1 for clockwise and -1 for counter-clockwise. The result
    is always a fresh array, never a view of ``shape``.
    """
    h, w = shape.shape
    if h != w:
        raise ValueError(f"only square shapes can be rotated, got {h}x{w}")
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction}")
    # np.rot90 turns counter-clockwise for positive k
    return np.rot90(shape, k=-direction).copy()


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def cells(self) -> List[Tuple[int, int, int]]:
        """Board coordinates of the occupied cells as ``(x, y, value)``."""
        cells: List[Tuple[int, int, int]] = []
        ys, xs = np.nonzero(self.shape)
        for dy, dx in zip(ys, xs):
            cells.append((self.x + int(dx), self.y + int(dy), int(self.shape[dy, dx])))
        return cells


def random_piece(rng: random.Random) -> Piece:
    kind = rng.choice(list(TetrominoType))
    shape = shape_for(kind)
    x = COLS // 2 - shape.shape[1] // 2
    return Piece(kind=kind, shape=shape, x=x, y=0)


# Kick offsets tried in order, each relative to the previous attempt.
_KICK_STEPS = (0, 1, -2)


def try_rotate(grid: "GameGrid", piece: Piece, direction: int) -> bool:
    """Rotate ``piece`` in place with a simple horizontal kick.

    Tries the rotated shape at the current column, one column right, then one
    column left of the starting one. Restores shape and column if all collide.
    """
    old_shape = piece.shape
    old_x = piece.x
    piece.shape = rotate(piece.shape, direction)
    for step in _KICK_STEPS:
        piece.x += step
        if not grid.collides(piece):
            return True
    piece.shape = old_shape
    piece.x = old_x
    return False
