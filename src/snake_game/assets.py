from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .entities import Facing

logger = logging.getLogger(__name__)

SNAKE_IMG = "snake.png"
APPLE_IMG = "apple.png"
# Each variant is one further 90 degree clockwise turn of the one before.
ROTATED_IMGS = ("snake_90.png", "snake_180.png", "snake_270.png")

HEAD_FOR_FACING = {
    Facing.UP: SNAKE_IMG,
    Facing.RIGHT: "snake_90.png",
    Facing.DOWN: "snake_180.png",
    Facing.LEFT: "snake_270.png",
    Facing.UNDIRECTED: SNAKE_IMG,
}


class AssetError(Exception):
    """A sprite could not be loaded or written."""


def _load(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        raise AssetError(f"could not load sprite {path}: {e}") from e


def _save(surface: pygame.Surface, path: Path) -> None:
    try:
        pygame.image.save(surface, str(path))
    except (pygame.error, OSError) as e:
        raise AssetError(f"could not write sprite {path}: {e}") from e


def _as_rgba(img: pygame.Surface) -> pygame.Surface:
    # smoothscale only accepts 24 and 32 bit surfaces.
    if img.get_bitsize() in (24, 32):
        return img
    out = pygame.Surface(img.get_size(), pygame.SRCALPHA)
    out.blit(img, (0, 0))
    return out


def resize_img(path: Path, cell: int) -> pygame.Surface:
    img = _load(path)
    if img.get_size() != (cell, cell):
        img = pygame.transform.smoothscale(_as_rgba(img), (cell, cell))
        _save(img, path)
    return img


def prepare_sprites(resources_dir: Path, cell: int) -> None:
    """Scale the source sprites to one cell and write the rotated head variants."""
    resources_dir = Path(resources_dir)
    resize_img(resources_dir / APPLE_IMG, cell)
    img = resize_img(resources_dir / SNAKE_IMG, cell)
    for name in ROTATED_IMGS:
        # pygame rotates counterclockwise for positive angles.
        img = pygame.transform.rotate(img, -90)
        _save(img, resources_dir / name)
    logger.info("Prepared sprites in %s", resources_dir)


class Sprites:
    def __init__(self, heads: dict[Facing, pygame.Surface], apple: pygame.Surface):
        self.heads = heads
        self.apple = apple

    def head(self, facing: Facing) -> pygame.Surface:
        return self.heads[facing]


def load_sprites(resources_dir: Path) -> Sprites:
    resources_dir = Path(resources_dir)
    cache: dict[str, pygame.Surface] = {}
    heads = {}
    for facing, name in HEAD_FOR_FACING.items():
        if name not in cache:
            cache[name] = _load(resources_dir / name)
        heads[facing] = cache[name]
    return Sprites(heads, _load(resources_dir / APPLE_IMG))
