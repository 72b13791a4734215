from __future__ import annotations

import logging

from .scoreboard import HighScoreError
from .state import Command, GameState, Page

logger = logging.getLogger(__name__)


def end_run(state: GameState) -> None:
    """Close the current run after a collision and pick the next page."""
    board = state.scoreboard
    if not board.is_high_score():
        logger.info("Run over with score %d", board.score)
        state.page = Page.MENU
        return

    try:
        board.record_high_score()
    except HighScoreError as e:
        logger.error("Could not save high score %d: %s", board.score, e)
        state.message = f"Could not save high score: {e}"
    state.page = Page.LEADERBOARD


def move_snake(state: GameState) -> None:
    snake = state.snake
    size, cell = state.settings.screen_size, state.settings.cell_size
    new_head = snake.head.step(snake.direction, cell).wrap(size)

    ate = new_head == state.apple.position
    snake.advance(new_head, grow=ate)
    if ate:
        state.apple.respawn()
        state.scoreboard.increase()
        logger.debug("Apple eaten, score %d, length %d", state.scoreboard.score, len(snake))


def game_tick(state: GameState) -> None:
    """Advance the running game by one step."""
    if state.page is not Page.PLAYING or state.snake.direction is None:
        return

    # Checked against the head before it moves, so a bite registers one tick late.
    if state.snake.bites_itself():
        end_run(state)
        return

    move_snake(state)


def start_run(state: GameState) -> None:
    state.new_run()
    state.message = None
    state.page = Page.PLAYING


def handle_command(state: GameState, command: Command) -> bool:
    """Apply one input command. Returns False when the game should quit."""
    if command is Command.QUIT:
        return False

    page = state.page
    direction = command.direction
    if page is Page.PLAYING and direction is not None:
        state.snake.steer(direction)
    elif command is Command.RESTART and page in (Page.MENU, Page.LEADERBOARD):
        start_run(state)
    elif command is Command.LEADERBOARD and page is Page.MENU:
        state.page = Page.LEADERBOARD
    elif command is Command.MENU and page is Page.LEADERBOARD:
        state.page = Page.MENU
    else:
        logger.debug("Ignoring %s on %s page", command.name, page.name)
    return True
