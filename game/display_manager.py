"""
Display Manager - draws the maze and entities to the terminal
"""

import sys

from utils.constants import (
    Cell, CELL_GLYPHS, GLYPH_PLAYER, GLYPH_ENEMY, MSG_CONTROLS
)
from utils.colors import (
    COLOR_WALL, COLOR_EXIT, COLOR_PLAYER, COLOR_ENEMY, COLOR_HEADER,
    COLOR_MESSAGE, colorize
)

CLEAR_SCREEN = "\033[2J\033[H"

CELL_COLORS = {
    Cell.WALL: COLOR_WALL,
    Cell.EXIT: COLOR_EXIT,
}


def header_line(level):
    """Status header with level number and controls legend"""
    return f"Level: {level} - {MSG_CONTROLS}"


class TerminalRenderer:
    """
    Renders frames as text

    render_frame() builds the frame as a string; render() clears the
    screen and writes it to the output stream.
    """
    def __init__(self, stream=None, use_color=None):
        """
        Args:
            stream: Output stream (defaults to sys.stdout)
            use_color: ANSI colors on/off; defaults to on for a TTY
        """
        self.stream = stream if stream is not None else sys.stdout
        if use_color is None:
            isatty = getattr(self.stream, "isatty", None)
            use_color = bool(isatty and isatty())
        self.use_color = use_color

    def _paint(self, text, color, bold=False):
        if not self.use_color or not color:
            return text
        return colorize(text, color, bold)

    def _glyph(self, grid, x, y, player_pos, enemy_cells):
        if (x, y) == player_pos:
            return self._paint(GLYPH_PLAYER, COLOR_PLAYER, bold=True)
        if (x, y) in enemy_cells:
            return self._paint(GLYPH_ENEMY, COLOR_ENEMY, bold=True)
        kind = grid.cell(x, y)
        return self._paint(CELL_GLYPHS[kind], CELL_COLORS.get(kind))

    def render_frame(self, grid, player, enemies, level, message=None):
        """
        Build one frame

        Args:
            grid: MazeGrid
            player: Player
            enemies: EnemyManager or iterable of enemies
            level: Current level number
            message: Optional status line shown under the maze

        Returns:
            Frame text, newline terminated
        """
        enemy_cells = {enemy.pos for enemy in enemies}
        lines = [self._paint(header_line(level), COLOR_HEADER)]

        for y in range(grid.height):
            lines.append(''.join(
                self._glyph(grid, x, y, player.pos, enemy_cells)
                for x in range(grid.width)
            ))

        if message:
            lines.append(self._paint(message, COLOR_MESSAGE))

        return '\n'.join(lines) + '\n'

    def clear_screen(self):
        self.stream.write(CLEAR_SCREEN)

    def render(self, grid, player, enemies, level, message=None):
        """Clear the screen and draw the current state"""
        self.clear_screen()
        self.stream.write(self.render_frame(grid, player, enemies, level, message))
        self.stream.flush()

    def show_message(self, message):
        """Write one line below the current frame"""
        self.stream.write(self._paint(message, COLOR_MESSAGE) + '\n')
        self.stream.flush()
