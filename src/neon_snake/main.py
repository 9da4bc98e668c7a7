# main.py
import argparse
import logging
from dataclasses import replace

import pygame # type: ignore
from .config import CFG, CELL_SIZE, FPS
from .render import draw_game
from .session import GameSession


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Neon snake")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms)
    parser.add_argument("--grid", type=int, default=CFG.grid_count, help="cells per side")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = replace(CFG, seed=args.seed, tick_ms=args.tick_ms, grid_count=args.grid).validate()

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    size = (config.grid_count * CELL_SIZE, config.grid_count * CELL_SIZE)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("Neon Snake")
    clock = pygame.time.Clock()

    session = GameSession(config, surface_size=size)
    running = True

    while running:
        # 1) input
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                session.handle_event(event, now)

        # 2) update (the scheduler gates movement to one step per tick)
        session.update(pygame.time.get_ticks())

        # 3) render
        draw_game(screen, font, session.engine.snapshot(), config.grid_count)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()

if __name__ == "__main__":
    main()
