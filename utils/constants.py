"""
Global constants for Terminal Maze
"""

from enum import Enum, IntEnum


class Cell(IntEnum):
    """Kinds of grid cells (stored as int8 in the maze grid)"""
    WALL = 0
    OPEN = 1
    EXIT = 2


class Command(Enum):
    """Commands produced by the input handler"""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    ATTACK = 'attack'
    QUIT = 'quit'
    UNKNOWN = 'unknown'


# Cell glyphs
GLYPH_WALL = '|'
GLYPH_OPEN = ' '
GLYPH_EXIT = 'X'
GLYPH_PLAYER = 'P'
GLYPH_ENEMY = 'E'

CELL_GLYPHS = {
    Cell.WALL: GLYPH_WALL,
    Cell.OPEN: GLYPH_OPEN,
    Cell.EXIT: GLYPH_EXIT,
}

# Direction vectors (dx, dy), scan order: up, down, left, right
DIRS = [
    (0, -1),    # up
    (0, 1),     # down
    (-1, 0),    # left
    (1, 0),     # right
]

# Movement command to direction
COMMAND_DELTAS = {
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
}

# Key bindings
KEY_BINDINGS = {
    'w': Command.UP,
    'a': Command.LEFT,
    's': Command.DOWN,
    'd': Command.RIGHT,
    'f': Command.ATTACK,
    'q': Command.QUIT,
}

# Start room
START_POS = (1, 1)

# Level scaling: width = 15 + 2 * level, height = 7 + level
BASE_WIDTH = 15
WIDTH_PER_LEVEL = 2
BASE_HEIGHT = 7
HEIGHT_PER_LEVEL = 1
ENEMIES_PER_LEVEL = 1

# Smallest grid that still has a room inside the border
MIN_GRID_SIZE = 3

# Session events
EVENT_MOVED = 'moved'
EVENT_ENEMY_DEFEATED = 'enemy_defeated'
EVENT_NO_TARGET = 'no_target'
EVENT_LEVEL_COMPLETE = 'level_complete'
EVENT_GAME_OVER = 'game_over'
EVENT_QUIT = 'quit'

# Messages
MSG_CONTROLS = ("Use WASD to move. Press 'f' to attack. Avoid enemies 'E'! "
                "Reach 'X' to win. Press 'q' to quit.")
MSG_ENEMY_DEFEATED = "Enemy defeated!"
MSG_NO_TARGET = "No enemy in range to attack!"
MSG_LEVEL_COMPLETE = "Level {level} completed! Loading next level..."
MSG_GAME_OVER = "You were caught by an enemy! Game Over."
MSG_GOODBYE = "Thanks for playing!"
