from __future__ import annotations

import random
from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class Position:
    """A pixel coordinate that always sits on a cell corner of the playfield."""

    __slots__ = ("x", "y")

    def __init__(self, x=0, y=0):
        self.x, self.y = x, y

    @classmethod
    def center(cls, size: int, cell: int) -> Position:
        c = (size // cell // 2) * cell
        return cls(c, c)

    @classmethod
    def random_cell(cls, size: int, cell: int, rng: random.Random | None = None) -> Position:
        rng = rng or random
        cells = size // cell
        return cls(
            rng.randrange(cells) * cell,
            rng.randrange(cells) * cell,
        )

    def __add__(self, other):
        return Position(self.x + other.x, self.y + other.y)

    def __mul__(self, other):
        return Position(self.x * other, self.y * other)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return (
            self.x,
            self.y,
        ).__repr__()

    def step(self, direction: Direction, cell: int) -> Position:
        dx, dy = direction.delta
        return self + Position(dx, dy) * cell

    def wrap(self, size: int) -> Position:
        # Modulo of a positive size is never negative, so underflow wraps too.
        return Position(self.x % size, self.y % size)

    def to_tuple(self):
        return (self.x, self.y)
