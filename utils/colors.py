"""
ANSI color palette for Terminal Maze
"""

COLOR_RESET = "\033[0m"
COLOR_BOLD = "\033[1m"

# Cell colors
COLOR_WALL = "\033[37m"           # Maze walls
COLOR_EXIT = "\033[92m"           # Goal/Exit

# Entity colors
COLOR_PLAYER = "\033[94m"         # Player
COLOR_ENEMY = "\033[91m"          # Enemy

# Text colors
COLOR_HEADER = "\033[97m"         # Status header
COLOR_MESSAGE = "\033[93m"        # Status message


def colorize(text, color, bold=False):
    """Wrap text in an ANSI color sequence"""
    prefix = color + (COLOR_BOLD if bold else "")
    return f"{prefix}{text}{COLOR_RESET}"
