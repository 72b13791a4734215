from __future__ import annotations

import pygame

from . import config
from .assets import Sprites
from .state import FrameView, Page

MENU_LINES = (
    "R / Enter  -  new game",
    "L  -  leaderboard",
    "Esc / Q  -  quit",
)
LEADERBOARD_HINT = "R  -  new game     M  -  menu"


def draw_text(screen: pygame.Surface, font: pygame.font.Font, text: str, center: tuple[float, float], color=config.BLACK) -> None:
    surf = font.render(text, True, color)
    rect = surf.get_rect()
    rect.center = (int(center[0]), int(center[1]))
    screen.blit(surf, rect)


def draw_playfield(screen: pygame.Surface, view: FrameView, cell: int, sprites: Sprites | None) -> None:
    ax, ay = view.apple
    pygame.draw.rect(screen, config.RED, pygame.Rect(ax, ay, cell, cell))
    if sprites is not None:
        screen.blit(sprites.apple, (ax, ay))

    for x, y in view.segments[1:]:
        pygame.draw.rect(screen, config.GREEN, pygame.Rect(x, y, cell, cell))

    hx, hy = view.segments[0]
    if sprites is not None:
        screen.blit(sprites.head(view.facing), (hx, hy))
    else:
        pygame.draw.rect(screen, config.BLACK, pygame.Rect(hx, hy, cell, cell))


def draw_frame(screen: pygame.Surface, view: FrameView, font: pygame.font.Font, cell: int, sprites: Sprites | None = None) -> None:
    size = screen.get_width()
    line = size / 16
    screen.fill(config.WHITE)

    if view.page is Page.PLAYING:
        draw_playfield(screen, view, cell, sprites)
        draw_text(screen, font, f"score: {view.score}", (size / 2, line))
    elif view.page is Page.MENU:
        draw_text(screen, font, f"Snake  -  last score: {view.score}", (size / 2, line * 4))
        for i, text in enumerate(MENU_LINES):
            draw_text(screen, font, text, (size / 2, line * (6 + i)))
    else:
        if not view.leaderboard:
            draw_text(screen, font, "no high scores yet", (size / 2, line))
        for i, (label, score) in enumerate(view.leaderboard[:13]):
            draw_text(screen, font, f"{label}: {score}", (size / 2, line * (i + 1)))
        draw_text(screen, font, LEADERBOARD_HINT, (size / 2, line * 15), config.GREY)

    if view.message:
        draw_text(screen, font, view.message, (size / 2, size - line / 2), config.RED)
