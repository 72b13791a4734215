from __future__ import annotations

import logging

import pygame

from .state import Command

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_r: Command.RESTART,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_l: Command.LEADERBOARD,
    pygame.K_m: Command.MENU,
    pygame.K_BACKSPACE: Command.MENU,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}


def command_for_key(key: int) -> Command | None:
    command = KEY_MAP.get(key)
    if command is None:
        logger.debug("No command for key code %d", key)
    return command


def commands_from_events(events) -> list[Command]:
    commands: list[Command] = []
    for event in events:
        if event.type == pygame.QUIT:
            commands.append(Command.QUIT)
        elif event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command is not None:
                commands.append(command)
    return commands
