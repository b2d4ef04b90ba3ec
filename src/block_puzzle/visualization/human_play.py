from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import pygame

from block_puzzle.game import Action, FallingBlockGame, GameConfig
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_r: Action.RESTART,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling block puzzle.")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece randomizer")
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(seed: Optional[int] = None, cell_size: int = 30, fps: int = 60) -> FallingBlockGame:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(random_seed=seed))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.get_state()))
        pygame.display.set_caption("Falling Block Puzzle")

        running = True
        while running:
            # Input is applied before the gravity tick of the same frame
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)

            game.tick(clock.get_time())
            renderer.draw(screen, game.get_state(), game.snapshot())
            clock.tick(fps)
        return game
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    game = run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)
    print(f"Final score: {game.score}  lines: {game.lines}  level: {game.level}")


if __name__ == "__main__":  # pragma: no cover
    main()
