# game_loop.py

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional

import pygame

from config import STAGE_NAME, STAGE_PRESETS, get_stage_config, settings_data
from game import Game
from logging_utils import log_debug

WINDOW_TITLE = "Dotline : 1D dot eater"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="One-dimensional dot eater")
    parser.add_argument("--stage", choices=sorted(STAGE_PRESETS), default=STAGE_NAME,
                        help="Stage size preset")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random source for a replayable session")
    return parser.parse_args(argv)


def process_events(game):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        game.handle_event(event)
    return True


def render_game(game, screen):
    game.draw(screen)
    pygame.display.flip()


def run_game(args: argparse.Namespace) -> None:
    config = get_stage_config(args.stage)
    rng = random.Random(args.seed) if args.seed is not None else None
    log_debug(f"run_game stage={args.stage} seed={args.seed}")

    pygame.init()
    screen = pygame.display.set_mode((config.screen_width, config.screen_height))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    game = Game(config, rng=rng)
    running = True

    while running:
        # Re-read FPS each frame
        dt = clock.tick(settings_data["FPS"]) / 1000.0

        running = process_events(game)
        game.update(dt)
        render_game(game, screen)

    pygame.quit()


def main(argv: Optional[list[str]] = None) -> None:
    run_game(parse_args(argv))


if __name__ == "__main__":
    main(sys.argv[1:])
