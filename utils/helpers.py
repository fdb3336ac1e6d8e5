"""
Helper utility functions for Terminal Maze
"""

import random


class RandomSource:
    """
    Injectable source of randomness.

    Everything random in the game (maze carving, enemy spawns, enemy moves)
    goes through one of these, so a fixed seed reproduces a whole game.
    """
    def __init__(self, seed=None):
        self.seed = seed
        self._random = random.Random(seed)

    def pick_index(self, n):
        """Uniform index in [0, n)"""
        if n <= 0:
            raise ValueError("pick_index() needs at least one option")
        return self._random.randrange(n)

    def choice(self, items):
        """Uniformly choose one item from a non-empty sequence"""
        return items[self.pick_index(len(items))]

    def random_cell(self, width, height):
        """Uniform (x, y) over the whole grid"""
        return self._random.randrange(width), self._random.randrange(height)

    def __repr__(self):
        return f"RandomSource(seed={self.seed})"
