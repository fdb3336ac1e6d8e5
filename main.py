"""
Terminal Maze
Find the exit, dodge or strike the enemies, and go as deep as you can
"""

import logging
import sys
import time

from game.game_state import GameSession
from game.display_manager import TerminalRenderer
from game.input_handler import KeyboardInput, raw_terminal
from utils.constants import (
    EVENT_LEVEL_COMPLETE, EVENT_GAME_OVER, MSG_GOODBYE
)
from utils.helpers import RandomSource
from config import (
    GAME_TITLE, GAME_VERSION, LEVEL_TRANSITION_DELAY, GAME_OVER_DELAY,
    LOG_LEVEL, LOG_FORMAT
)

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Outer driver: renders, reads input, sleeps, and feeds the session
    """
    def __init__(self, session=None, renderer=None, keyboard=None, sleep=time.sleep):
        self.session = session if session is not None else GameSession(RandomSource())
        self.renderer = renderer if renderer is not None else TerminalRenderer()
        self.keyboard = keyboard if keyboard is not None else KeyboardInput()
        self.sleep = sleep

    def draw(self):
        s = self.session
        self.renderer.render(s.grid, s.player, s.enemies, s.level_number, s.message)

    def run(self):
        """Play until the player quits or is caught"""
        self.session.start()

        while self.session.running:
            self.draw()
            result = self.session.handle_command(self.keyboard.next_command())

            if result['event'] == EVENT_LEVEL_COMPLETE:
                self.renderer.show_message(result['message'])
                self.sleep(LEVEL_TRANSITION_DELAY)
                self.session.next_level()
            elif result['event'] == EVENT_GAME_OVER:
                self.draw()
                self.sleep(GAME_OVER_DELAY)

        self.session.finish()
        logger.info("Game ended on level %d after %d moves, %d enemies defeated",
                    self.session.level_number, self.session.total_moves,
                    self.session.enemies_defeated)


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    logger.info("Starting %s %s", GAME_TITLE, GAME_VERSION)

    game = MazeGame()
    try:
        with raw_terminal():
            game.run()
    except KeyboardInterrupt:
        pass

    print(MSG_GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
