from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config

logger = logging.getLogger("snake_game")


def build_settings(args: argparse.Namespace) -> config.Settings:
    return config.Settings(
        resources_dir=args.resources,
        highscore_path=args.highscores,
        tick_ms=args.tick_ms,
        start_page=args.start_page,
        sprites=not args.no_sprites,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake-game", description="Play Snake.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=config.RESOURCES_DIR,
        help="Directory holding snake.png and apple.png (and the high-score file by default).",
    )
    parser.add_argument(
        "--highscores",
        type=Path,
        default=None,
        help=f"High-score JSON file (default: <resources>/{config.HIGHSCORE_FILENAME}).",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=config.TICK_MS,
        help="Delay before each game step, in milliseconds.",
    )
    parser.add_argument(
        "--start-page",
        choices=("playing", "menu"),
        default="playing",
        help="Page shown when the game opens.",
    )
    parser.add_argument("--no-sprites", action="store_true", help="Draw plain cells instead of sprites.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    args = parser.parse_args(argv)
    if args.tick_ms < 0:
        parser.error("--tick-ms must be >= 0")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Imported here so --help does not load pygame.
    from .assets import AssetError
    from .game import run

    try:
        run(build_settings(args))
    except AssetError as e:
        logger.error("Cannot start without sprites: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
