"""Skyhop Arcade - playable pygame host for skyhop-game.

Exercises skyhop, skyhop-fsm, skyhop-physics, skyhop-signal and skyhop-game.

Controls:
  Space   Flap / start / restart
  Click   Same as Space
  P       Pause / resume
  S       Next skin
  R       Reset best score
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from skyhop_game import ConfigError, Game, GameConfig, JsonFileStore, load_config
from skyhop_signal import Died, PhaseChanged

from ui.constants import FPS
from ui.hud import draw_hud
from ui.scene import draw_scene, make_stars

logger = logging.getLogger("skyhop_arcade")

DEFAULT_BEST_FILE = Path.home() / ".skyhop" / "best.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Skyhop.")
    parser.add_argument("--config", type=Path, help="JSON file with GameConfig overrides")
    parser.add_argument("--seed", type=int, help="RNG seed for a reproducible run")
    parser.add_argument(
        "--best-file", type=Path, default=DEFAULT_BEST_FILE,
        help=f"where the best score is kept (default: {DEFAULT_BEST_FILE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except (ConfigError, OSError) as exc:
        logger.error(f"Could not load config: {exc}")
        return 2

    game = Game(config, seed=args.seed, store=JsonFileStore(args.best_file))
    game.subscribe(Died, lambda e: logger.info(f"Died ({e.cause}) with score {e.score}"))
    game.subscribe(PhaseChanged, lambda e: logger.debug(f"Night: {e.is_night}"))

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Skyhop")
    clock = pygame.time.Clock()
    big = pygame.font.SysFont("monospace", 40, bold=True)
    small = pygame.font.SysFont("monospace", 16)
    stars = make_stars(config.width, config.height - config.ground_height)

    running = True
    while running:
        clock.tick(FPS)

        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    game.activate()
                elif event.key == pygame.K_p:
                    game.toggle_pause()
                elif event.key == pygame.K_s:
                    game.cycle_skin()
                elif event.key == pygame.K_r:
                    game.reset_best_score()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                game.activate()

        # --- Tick ---
        view = game.tick(float(pygame.time.get_ticks()))

        # --- Render ---
        draw_scene(screen, view, stars)
        draw_hud(screen, view, big, small)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
