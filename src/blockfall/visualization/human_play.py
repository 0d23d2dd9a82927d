from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from blockfall.game import Action, BlockfallGame, GameConfig
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_h: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_l: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_j: Action.MOVE_DOWN,
    pygame.K_UP: Action.DROP,
    pygame.K_k: Action.DROP,
    pygame.K_p: Action.ROTATE_LEFT,
    pygame.K_LEFTBRACKET: Action.ROTATE_LEFT,
    pygame.K_n: Action.ROTATE_RIGHT,
    pygame.K_RIGHTBRACKET: Action.ROTATE_RIGHT,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play blockfall in a pygame window.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-ms", type=int, default=1000)
    p.add_argument("--cell-size", type=int, default=20)
    p.add_argument("--log-level", default="WARNING")
    return p


def run(seed: Optional[int] = None, gravity_ms: int = 1000, cell_size: int = 20) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BlockfallGame(GameConfig(random_seed=seed))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.get_state()))
        pygame.display.set_caption("blockfall")
        font = pygame.font.SysFont(None, 20)

        last_fall = pygame.time.get_ticks()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        game.reset()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)

            # Gravity
            now = pygame.time.get_ticks()
            if now - last_fall >= gravity_ms:
                game.tick()
                last_fall = now

            if game.game_over:
                text = f"point: {game.lines_cleared_total}  game over - R to restart, ESC to quit"
            else:
                text = f"point: {game.lines_cleared_total}"
            renderer.draw(screen, game.get_state(), font.render(text, True, (230, 230, 230)))

            clock.tick(30)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper())
    run(seed=args.seed, gravity_ms=args.gravity_ms, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
