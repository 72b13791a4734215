"""
Tests for grid.py - cell-aligned positions and wraparound.
"""

import random

import pytest

from snake_game.grid import Direction, Position

SIZE = 800
CELL = 40


class TestPosition:
    """Tests for Position arithmetic and equality."""

    def test_equal_positions_hash_alike(self):
        """Positions compare and hash by value."""
        assert Position(40, 80) == Position(40, 80)
        assert len({Position(40, 80), Position(40, 80)}) == 1

    def test_not_equal_to_tuple(self):
        """A Position never equals a bare tuple."""
        assert Position(40, 80) != (40, 80)

    def test_center_is_cell_aligned(self):
        """The start cell sits on the grid in the middle of the playfield."""
        assert Position.center(SIZE, CELL) == Position(400, 400)
        assert Position.center(400, 20) == Position(200, 200)

    def test_step_moves_one_cell(self):
        """step() moves exactly one cell in the given direction."""
        p = Position(400, 400)
        assert p.step(Direction.UP, CELL) == Position(400, 360)
        assert p.step(Direction.DOWN, CELL) == Position(400, 440)
        assert p.step(Direction.LEFT, CELL) == Position(360, 400)
        assert p.step(Direction.RIGHT, CELL) == Position(440, 400)

    def test_wrap_overflow(self):
        """Stepping past the right or bottom edge comes back at 0."""
        assert Position(760, 760).step(Direction.RIGHT, CELL).wrap(SIZE) == Position(0, 760)
        assert Position(760, 760).step(Direction.DOWN, CELL).wrap(SIZE) == Position(760, 0)

    def test_wrap_underflow(self):
        """Stepping past the left or top edge comes back at the last cell."""
        assert Position(0, 0).step(Direction.LEFT, CELL).wrap(SIZE) == Position(760, 0)
        assert Position(0, 0).step(Direction.UP, CELL).wrap(SIZE) == Position(0, 760)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_step_then_wrap_stays_in_bounds(self, direction):
        """Every cell stays inside [0, size) after a step and wrap."""
        for x in range(0, SIZE, CELL):
            for y in (0, 400, SIZE - CELL):
                p = Position(x, y).step(direction, CELL).wrap(SIZE)
                assert 0 <= p.x < SIZE and 0 <= p.y < SIZE

    def test_random_cell_is_aligned_and_in_bounds(self):
        """Random placement only ever returns whole cells inside the playfield."""
        rng = random.Random(7)
        for _ in range(500):
            p = Position.random_cell(SIZE, CELL, rng)
            assert p.x % CELL == 0 and p.y % CELL == 0
            assert 0 <= p.x <= SIZE - CELL
            assert 0 <= p.y <= SIZE - CELL

    def test_to_tuple(self):
        """to_tuple() keeps the coordinates."""
        assert Position(120, 40).to_tuple() == (120, 40)
