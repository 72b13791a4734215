from __future__ import annotations

import random
from enum import Enum

from .grid import Direction, Position


class Facing(Enum):
    """Which way the head sprite points. The renderer owns the actual images."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UNDIRECTED = "undirected"

    @classmethod
    def from_direction(cls, direction: Direction | None) -> Facing:
        if direction is None:
            return cls.UNDIRECTED
        return cls[direction.name]


class Snake:
    def __init__(self, start: Position):
        self.body: list[Position] = [start]  # head first
        self.direction: Direction | None = None

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def facing(self) -> Facing:
        return Facing.from_direction(self.direction)

    def __len__(self) -> int:
        return len(self.body)

    def steer(self, direction: Direction) -> None:
        self.direction = direction

    def bites_itself(self) -> bool:
        return len(self.body) > 1 and self.body[0] in self.body[1:]

    def advance(self, new_head: Position, grow: bool) -> None:
        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()


class Apple:
    def __init__(self, size: int, cell: int, rng: random.Random | None = None):
        self.size = size
        self.cell = cell
        self.rng = rng
        self.position = Position.random_cell(size, cell, rng)

    def respawn(self) -> None:
        # Occupied cells are not excluded; the apple can land under the snake.
        self.position = Position.random_cell(self.size, self.cell, self.rng)
