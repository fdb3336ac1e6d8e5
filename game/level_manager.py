"""
Level Manager - handles maze generation, entity spawning, and level progression
"""

import logging

from maze.generator import generate_maze
from maze.maze_core import bfs_shortest_path
from maze.difficulty import get_level_config, get_enemy_spawn_positions
from entities.player import Player
from entities.enemy import EnemyManager
from utils.constants import Cell, START_POS

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single level/maze
    """
    def __init__(self, number):
        """
        Args:
            number: Level number, starting at 1
        """
        self.number = number
        self.config = get_level_config(number)

        # Maze data
        self.grid = None
        self.width = self.config.width
        self.height = self.config.height

        # Positions
        self.start_pos = START_POS
        self.goal_pos = (self.width - 2, self.height - 2)

        # Entities
        self.player = None
        self.enemy_manager = EnemyManager()

    def generate(self, rng):
        """
        Generate the maze and spawn the player and enemies

        Args:
            rng: RandomSource shared by the whole session
        """
        self.grid = generate_maze(self.width, self.height, rng)
        self._spawn_entities(rng)

        if logger.isEnabledFor(logging.DEBUG):
            path = bfs_shortest_path(self.grid, self.start_pos, self.goal_pos)
            logger.debug("Level %d exit is %d steps from start",
                         self.number, len(path) - 1)

    def _spawn_entities(self, rng):
        """Spawn all entities in the maze"""
        self.player = Player(self.start_pos[0], self.start_pos[1])

        enemy_spawns = get_enemy_spawn_positions(
            self.grid, self.config.enemy_count, self.start_pos, rng
        )
        for x, y in enemy_spawns:
            self.enemy_manager.add_enemy(x, y)

    def player_on_exit(self):
        """Check win condition"""
        return self.grid.cell(self.player.x, self.player.y) == Cell.EXIT

    def __repr__(self):
        return f"Level(number={self.number}, size={self.width}x{self.height})"


class LevelManager:
    """
    Manages level progression

    Owns the current Level; each new level replaces the previous one
    wholesale.
    """
    def __init__(self, rng):
        self.rng = rng
        self.current_level = None
        self.level_number = 0

    def create_level(self, number):
        """
        Create and generate a new level

        Args:
            number: Level number, starting at 1

        Returns:
            Level object
        """
        level = Level(number)
        level.generate(self.rng)

        self.level_number = number
        self.current_level = level
        logger.info("Created level %d (%dx%d, %d enemies)",
                    number, level.width, level.height, len(level.enemy_manager))
        return level

    def get_current_level(self):
        """Get current level"""
        return self.current_level

    def __repr__(self):
        return f"LevelManager(level={self.level_number}, current_level={self.current_level})"
