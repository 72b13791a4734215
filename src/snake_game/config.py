from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CELL_SIZE = 40
SCREEN_SIZE = 800
GRID_CELLS = SCREEN_SIZE // CELL_SIZE
TICK_MS = 100

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (5, 155, 4)
GREY = (120, 120, 120)

FONT_SIZE = 25
TITLE = "Snake"

RESOURCES_DIR = Path("resources")
HIGHSCORE_FILENAME = "highscores.json"


@dataclass
class Settings:
    """Runtime settings built by the CLI and shared by the game loop."""
    resources_dir: Path = RESOURCES_DIR
    highscore_path: Path | None = None
    cell_size: int = CELL_SIZE
    screen_size: int = SCREEN_SIZE
    tick_ms: int = TICK_MS
    start_page: str = "playing"
    sprites: bool = True

    @property
    def highscore_file(self) -> Path:
        if self.highscore_path is not None:
            return self.highscore_path
        return self.resources_dir / HIGHSCORE_FILENAME
