from __future__ import annotations

import random
from collections import namedtuple
from enum import Enum

from .config import Settings
from .entities import Apple, Snake
from .grid import Direction, Position
from .scoreboard import ScoreBoard

FrameView = namedtuple(
    "FrameView", ["page", "segments", "facing", "apple", "score", "leaderboard", "message"]
)
# page: Page
# segments: tuple[(x, y)], head is first element.
# facing: Facing of the head
# apple: (x, y)
# score: int
# leaderboard: tuple[(label, score)], best first
# message: str | None


class Page(Enum):
    MENU = "menu"
    PLAYING = "playing"
    LEADERBOARD = "leaderboard"


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"
    LEADERBOARD = "leaderboard"
    MENU = "menu"
    QUIT = "quit"

    @property
    def direction(self) -> Direction | None:
        try:
            return Direction[self.name]
        except KeyError:
            return None


class GameState:
    """Everything one game session owns: the current run plus the score table."""

    def __init__(self, settings: Settings, scoreboard: ScoreBoard, rng: random.Random | None = None):
        self.settings = settings
        self.scoreboard = scoreboard
        self.rng = rng
        self.page = Page(settings.start_page)
        self.message: str | None = None
        self.new_run()

    def new_run(self) -> None:
        size, cell = self.settings.screen_size, self.settings.cell_size
        self.snake = Snake(Position.center(size, cell))
        self.apple = Apple(size, cell, self.rng)
        self.scoreboard.reset()

    def view(self) -> FrameView:
        return FrameView(
            page=self.page,
            segments=tuple(p.to_tuple() for p in self.snake.body),
            facing=self.snake.facing,
            apple=self.apple.position.to_tuple(),
            score=self.scoreboard.score,
            leaderboard=tuple(self.scoreboard.entries()),
            message=self.message,
        )
