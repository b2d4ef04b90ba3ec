from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .grid import GameGrid
from .pieces import Piece, random_piece, try_rotate
from .rules import ScoringRules


GAME_OVER_MESSAGE = "Game Over - press R to restart"
PAUSED_MESSAGE = "Paused"


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    TOGGLE_PAUSE = 6
    RESTART = 7
    NONE = 8


class GameStatus(Enum):
    FALLING = "falling"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


@dataclass(frozen=True)
class HudSnapshot:
    score: int
    lines: int
    level: int
    drop_interval: int
    paused: bool
    game_over: bool
    message: str


class FallingBlockGame:
    """Single game instance: board, active piece and progression.

    Hosts call :meth:`tick` once per frame with the elapsed milliseconds and
    :meth:`step` (or the named command methods) for player input. All state
    lives on the instance, so several games can run side by side.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid()
        self.current_piece: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = self.rules.base_drop_interval_ms
        self.paused = False
        self.game_over = False
        self.message = ""
        self.drop_counter = 0.0
        self.reset()

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = self.rules.drop_interval_for_level(self.level)
        self.paused = False
        self.game_over = False
        self.message = ""
        self.drop_counter = 0.0
        self.current_piece = random_piece(self.rng)

    restart = reset

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.paused:
            return GameStatus.PAUSED
        return GameStatus.FALLING

    @property
    def accepts_input(self) -> bool:
        return not (self.paused or self.game_over)

    # Piece lifecycle

    def _spawn_piece(self) -> None:
        self.current_piece = random_piece(self.rng)
        # Spawning into occupied cells ends the game
        if self.grid.collides(self.current_piece):
            self.game_over = True
            self.message = GAME_OVER_MESSAGE

    def _clear_lines(self) -> int:
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            self.score += self.rules.score_for_lines(cleared, self.level)
            self.lines += cleared
            self.level = self.rules.level_for_lines(self.lines)
            self.drop_interval = self.rules.drop_interval_for_level(self.level)
        return cleared

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        self.grid.merge(self.current_piece)
        cleared = self._clear_lines()
        self._spawn_piece()
        return cleared

    # Commands

    def tick(self, elapsed_ms: float) -> bool:
        """Advance gravity; returns True when a drop step ran."""
        if not self.accepts_input:
            return False
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            return self.drop()
        return False

    soft_drop_if_due = tick

    def drop(self) -> bool:
        if not self.accepts_input or self.current_piece is None:
            return False
        self.current_piece.y += 1
        if self.grid.collides(self.current_piece):
            self.current_piece.y -= 1
            self._lock_piece()
        self.drop_counter = 0.0
        return True

    def hard_drop(self) -> bool:
        if not self.accepts_input or self.current_piece is None:
            return False
        piece = self.current_piece
        while True:
            piece.y += 1
            if self.grid.collides(piece):
                piece.y -= 1
                break
        self._lock_piece()
        return True

    def move(self, dx: int) -> bool:
        if not self.accepts_input or self.current_piece is None:
            return False
        self.current_piece.x += dx
        if self.grid.collides(self.current_piece):
            self.current_piece.x -= dx
            return False
        return True

    def move_left(self) -> bool:
        return self.move(-1)

    def move_right(self) -> bool:
        return self.move(1)

    def rotate(self, direction: int = 1) -> bool:
        if not self.accepts_input or self.current_piece is None:
            return False
        return try_rotate(self.grid, self.current_piece, direction)

    def rotate_cw(self) -> bool:
        return self.rotate(1)

    def rotate_ccw(self) -> bool:
        return self.rotate(-1)

    def toggle_pause(self) -> bool:
        if self.game_over:
            return False
        self.paused = not self.paused
        self.message = PAUSED_MESSAGE if self.paused else ""
        return True

    def step(self, action: Action) -> bool:
        """Apply one input command; returns False when it was a no-op."""
        if action == Action.MOVE_LEFT:
            return self.move_left()
        elif action == Action.MOVE_RIGHT:
            return self.move_right()
        elif action == Action.ROTATE_CW:
            return self.rotate_cw()
        elif action == Action.ROTATE_CCW:
            return self.rotate_ccw()
        elif action == Action.SOFT_DROP:
            return self.drop()
        elif action == Action.HARD_DROP:
            return self.hard_drop()
        elif action == Action.TOGGLE_PAUSE:
            return self.toggle_pause()
        elif action == Action.RESTART:
            self.restart()
            return True
        elif action == Action.NONE:
            return False
        raise ValueError(f"unknown action: {action!r}")

    # Render / HUD views

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for rendering
        state = self.grid.clone_state()
        if self.current_piece is not None:
            for x, y, value in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = value
        return state

    def snapshot(self) -> HudSnapshot:
        return HudSnapshot(
            score=self.score,
            lines=self.lines,
            level=self.level,
            drop_interval=self.drop_interval,
            paused=self.paused,
            game_over=self.game_over,
            message=self.message,
        )
