"""Game module for the falling block puzzle.

Exports the core game engine and supporting classes:
- GameGrid: Board representation, collision, merging and line clearing
- Piece: Active tetromino with rotation and wall kick helpers
- TetrominoType: Enum of available piece types
- ScoringRules: Line-clear scoring, leveling and drop speed
- FallingBlockGame: Game loop entry points and state management
"""

from .grid import GameGrid
from .pieces import COLS, ROWS, SHAPES, Piece, TetrominoType, random_piece, rotate, shape_for, try_rotate
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, GameStatus, HudSnapshot

__all__ = [
    "COLS",
    "ROWS",
    "SHAPES",
    "GameGrid",
    "Piece",
    "TetrominoType",
    "random_piece",
    "rotate",
    "shape_for",
    "try_rotate",
    "ScoringRules",
    "FallingBlockGame",
    "GameConfig",
    "GameStatus",
    "HudSnapshot",
    "Action",
]
