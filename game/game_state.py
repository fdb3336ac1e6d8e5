"""
Game State Machine - manages game states, transitions and per-tick rules
"""

import logging
from enum import Enum, auto

from game.level_manager import LevelManager
from utils.constants import (
    Command,
    EVENT_MOVED, EVENT_ENEMY_DEFEATED, EVENT_NO_TARGET,
    EVENT_LEVEL_COMPLETE, EVENT_GAME_OVER, EVENT_QUIT,
    MSG_ENEMY_DEFEATED, MSG_NO_TARGET, MSG_LEVEL_COMPLETE, MSG_GAME_OVER,
)
from utils.helpers import RandomSource

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states"""
    LEVEL_SETUP = auto()
    PLAYING = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    QUIT = auto()
    TERMINATED = auto()


# Allowed transitions; None is the state before the first level
TRANSITIONS = {
    None: {GameState.LEVEL_SETUP},
    GameState.LEVEL_SETUP: {GameState.PLAYING},
    GameState.PLAYING: {GameState.LEVEL_COMPLETE, GameState.GAME_OVER, GameState.QUIT},
    GameState.LEVEL_COMPLETE: {GameState.LEVEL_SETUP},
    GameState.GAME_OVER: {GameState.TERMINATED},
    GameState.QUIT: {GameState.TERMINATED},
    GameState.TERMINATED: set(),
}

FINISHED_STATES = (GameState.GAME_OVER, GameState.QUIT, GameState.TERMINATED)


class InvalidTransition(RuntimeError):
    """Raised when the state machine is driven out of order"""


class GameStateManager:
    """
    Manages game state transitions
    """
    def __init__(self):
        self.current_state = None
        self.previous_state = None

    def transition_to(self, new_state):
        """
        Transition to a new state

        Raises:
            InvalidTransition: if new_state isn't reachable from the current one
        """
        if new_state not in TRANSITIONS[self.current_state]:
            raise InvalidTransition(
                f"Cannot go from {self.get_state_name()} to {new_state.name}")

        logger.debug("State %s -> %s", self.get_state_name(), new_state.name)
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_finished(self):
        """True once the game has ended, by quitting or losing"""
        return self.current_state in FINISHED_STATES

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name if self.current_state else "NEW"

    def __repr__(self):
        return f"GameStateManager(state={self.get_state_name()})"


class GameSession:
    """
    One run of the game, from the first level to quit or game over

    The session owns the level manager (and through it the grid, the player
    and the enemies), the state machine and the random source. It performs
    no I/O: callers render, read commands and sleep around it.
    """
    def __init__(self, rng=None, start_level=1):
        """
        Args:
            rng: RandomSource; a fresh unseeded one if omitted
            start_level: Level number to begin at
        """
        self.rng = rng if rng is not None else RandomSource()
        self.start_level = start_level
        self.level_manager = LevelManager(self.rng)
        self.state_manager = GameStateManager()

        self.message = None
        self.enemies_defeated = 0
        self.total_moves = 0

    # ----- accessors -----

    @property
    def level(self):
        return self.level_manager.get_current_level()

    @property
    def level_number(self):
        return self.level_manager.level_number

    @property
    def grid(self):
        return self.level.grid

    @property
    def player(self):
        return self.level.player

    @property
    def enemies(self):
        return self.level.enemy_manager

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def running(self):
        return not self.state_manager.is_finished()

    # ----- flow -----

    def start(self):
        """Set up the first level and start playing"""
        self._setup_level(self.start_level)
        return self.level

    def _setup_level(self, number):
        self.state_manager.transition_to(GameState.LEVEL_SETUP)
        self.level_manager.create_level(number)
        self.message = None
        self.state_manager.transition_to(GameState.PLAYING)

    def next_level(self):
        """Leave LEVEL_COMPLETE and set up the following level"""
        if not self.state_manager.is_state(GameState.LEVEL_COMPLETE):
            raise InvalidTransition(
                f"next_level() called in state {self.state_manager.get_state_name()}")
        self._setup_level(self.level_number + 1)
        return self.level

    def finish(self):
        """Move a finished game (quit or game over) to TERMINATED"""
        self.state_manager.transition_to(GameState.TERMINATED)

    def handle_command(self, command):
        """
        Apply one player command

        Args:
            command: Command from the input handler

        Returns:
            Dictionary describing what happened:
            {'event': EVENT_*, 'message': str or None}
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            raise InvalidTransition(
                f"Commands are only accepted while playing, "
                f"not in {self.state_manager.get_state_name()}")

        if command == Command.QUIT:
            self.state_manager.transition_to(GameState.QUIT)
            return self._result(EVENT_QUIT)

        if command == Command.ATTACK:
            return self._attack()

        if self.player.move(self.grid, command):
            self.total_moves += 1

        if self.level.player_on_exit():
            self.state_manager.transition_to(GameState.LEVEL_COMPLETE)
            logger.info("Level %d complete", self.level_number)
            return self._result(EVENT_LEVEL_COMPLETE,
                                MSG_LEVEL_COMPLETE.format(level=self.level_number))

        if self.enemies.update(self.grid, self.player, self.rng):
            self.state_manager.transition_to(GameState.GAME_OVER)
            logger.info("Player caught on level %d", self.level_number)
            return self._result(EVENT_GAME_OVER, MSG_GAME_OVER)

        return self._result(EVENT_MOVED)

    def _attack(self):
        enemy = self.enemies.attack_from(self.player.x, self.player.y)
        if enemy is None:
            return self._result(EVENT_NO_TARGET, MSG_NO_TARGET)

        self.enemies_defeated += 1
        logger.debug("Defeated %r", enemy)
        return self._result(EVENT_ENEMY_DEFEATED, MSG_ENEMY_DEFEATED)

    def _result(self, event, message=None):
        self.message = message
        return {'event': event, 'message': message}

    def __repr__(self):
        return (f"GameSession(state={self.state_manager.get_state_name()}, "
                f"level={self.level_number})")
