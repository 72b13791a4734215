import os

# Headless SDL so pygame surfaces and fonts work without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from snake_game.config import Settings
from snake_game.scoreboard import ScoreBoard
from snake_game.state import GameState


@pytest.fixture
def settings(tmp_path):
    return Settings(resources_dir=tmp_path, sprites=False)


@pytest.fixture
def board(tmp_path):
    return ScoreBoard(tmp_path / "highscores.json")


@pytest.fixture
def game(settings, board):
    return GameState(settings, board, rng=random.Random(1234))
