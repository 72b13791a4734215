from __future__ import annotations

import logging

import pygame

from . import config
from .assets import load_sprites, prepare_sprites
from .controls import commands_from_events
from .logic import game_tick, handle_command
from .render import draw_frame
from .scoreboard import HighScoreError, ScoreBoard
from .state import GameState

logger = logging.getLogger(__name__)


def load_scoreboard(settings: config.Settings) -> tuple[ScoreBoard, str | None]:
    """Load the high-score table, falling back to an empty one.

    Returns the board and, when the file could not be read, a message for the player.
    """
    board = ScoreBoard(settings.highscore_file)
    try:
        board.load()
    except HighScoreError as e:
        logger.warning("Starting with an empty high-score table: %s", e)
        return board, f"Could not load high scores: {e}"
    return board, None


def run(settings: config.Settings) -> None:
    """Open the window and run the frame loop until the player quits.

    Raises AssetError when sprites are enabled but cannot be prepared.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((settings.screen_size, settings.screen_size))
        pygame.display.set_caption(config.TITLE)

        sprites = None
        if settings.sprites:
            prepare_sprites(settings.resources_dir, settings.cell_size)
            sprites = load_sprites(settings.resources_dir)

        font = pygame.font.Font(None, config.FONT_SIZE)
        board, message = load_scoreboard(settings)
        state = GameState(settings, board)
        state.message = message
        logger.info("Starting on %s page", state.page.name)

        running = True
        while running:
            for command in commands_from_events(pygame.event.get()):
                if not handle_command(state, command):
                    running = False
                    break
            if not running:
                break

            # Blocks input and drawing too; this is what paces the snake.
            pygame.time.delay(settings.tick_ms)
            game_tick(state)

            draw_frame(screen, state.view(), font, settings.cell_size, sprites)
            pygame.display.flip()
    finally:
        pygame.quit()
    logger.info("Quit")
