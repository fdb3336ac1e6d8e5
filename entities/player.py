"""
Player entity
"""

from utils.constants import COMMAND_DELTAS, START_POS


class Player:
    """
    Player position on the maze grid
    """
    def __init__(self, x=START_POS[0], y=START_POS[1]):
        self.x = x
        self.y = y

    @property
    def pos(self):
        return (self.x, self.y)

    def move(self, grid, command):
        """
        Step one cell in the command's direction

        Blocked moves and non-movement commands are silent no-ops.
        Returns True if the position changed.
        """
        delta = COMMAND_DELTAS.get(command)
        if delta is None:
            return False

        nx, ny = self.x + delta[0], self.y + delta[1]
        if grid.is_wall(nx, ny):
            return False

        self.x, self.y = nx, ny
        return True

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}))"
