"""
Game configuration for Terminal Maze
"""

import logging

GAME_TITLE = "Terminal Maze"
GAME_VERSION = "1.0.0"

# Pauses (seconds) after a level is cleared and after game over
LEVEL_TRANSITION_DELAY = 2
GAME_OVER_DELAY = 2

# Logging goes to stderr; keep it quiet while the maze is on screen
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
