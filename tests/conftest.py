"""
Shared fixtures for the maze tests
"""

import pytest

from maze.maze_core import MazeGrid
from utils.constants import Cell
from utils.helpers import RandomSource

GLYPH_TO_CELL = {'|': Cell.WALL, ' ': Cell.OPEN, 'X': Cell.EXIT}


class ScriptedRandom:
    """
    Deterministic stand-in for RandomSource

    pick_index() replays *indices* (wrapped to the option count, repeating
    the last one when exhausted); random_cell() replays *cells* in order.
    """
    def __init__(self, indices=(0,), cells=()):
        self.indices = list(indices)
        self.cells = list(cells)
        self.calls = 0

    def pick_index(self, n):
        i = self.indices[min(self.calls, len(self.indices) - 1)]
        self.calls += 1
        return i % n

    def choice(self, items):
        return items[self.pick_index(len(items))]

    def random_cell(self, width, height):
        return self.cells.pop(0)


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def make_grid():
    """Build a MazeGrid from rows of '|', ' ' and 'X'"""
    def _make(rows):
        grid = MazeGrid(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid.set_cell(x, y, GLYPH_TO_CELL[ch])
        return grid
    return _make
