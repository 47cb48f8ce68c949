# main.py
import argparse
from dataclasses import replace
from typing import List, Optional

import pygame  # type: ignore

from .config import CFG, Config
from .controls import handle_input
from .game import Game
from .render import draw_game, draw_paused


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="ticks per second")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per grid cell")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for food placement (default: random every run)",
    )
    parser.add_argument("--debug", action="store_true", help="print every tick")
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")

    return replace(CFG, fps=args.fps, cell_size=args.cell_size, seed=args.seed, debug=args.debug)


def main(argv: Optional[List[str]] = None) -> None:
    config = parse_args(argv)
    game = Game(config)

    try:
        pygame.init()
        font = pygame.font.SysFont(None, 48)
        side = config.grid_size * config.cell_size
        screen = pygame.display.set_mode((side, side))
        pygame.display.set_caption("Snake Game")
        clock = pygame.time.Clock()

        print("[GAME] Game started!")
        running = True
        while running and not game.is_finished:
            # 1) input
            running = handle_input(game)
            if not running:
                break

            # 2) update
            game.advance()

            # 3) render
            draw_game(screen, game, config.cell_size)
            if game.is_paused:
                draw_paused(screen, font)
            pygame.display.flip()

            # sleeps whatever is left of the tick
            clock.tick(config.fps)
    finally:
        pygame.quit()

    print(f"[GAME] Game finished! length={game.length}")


if __name__ == "__main__":
    main()
