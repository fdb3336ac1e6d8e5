"""
Enemy entities
Enemies wander the maze at random, one step per tick
"""

from maze.maze_core import neighbors_open
from utils.constants import DIRS


class Enemy:
    """
    A single roaming enemy
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def pos(self):
        return (self.x, self.y)

    def update(self, grid, player, rng):
        """
        Move to a random open neighbour that isn't the player's cell

        Stays put when boxed in.

        Returns:
            True if the enemy ends up on the player's cell
        """
        moves = [n for n in neighbors_open(grid, self.x, self.y)
                 if n != player.pos]
        if moves:
            self.x, self.y = rng.choice(moves)

        return self.pos == player.pos

    def __repr__(self):
        return f"Enemy(pos=({self.x},{self.y}))"


class EnemyManager:
    """
    Manages all enemies in the level
    """
    def __init__(self):
        self.enemies = []

    def add_enemy(self, x, y):
        """Add an enemy to the level"""
        enemy = Enemy(x, y)
        self.enemies.append(enemy)
        return enemy

    def update(self, grid, player, rng):
        """
        Move every enemy once, in list order

        Returns:
            True if any enemy caught the player
        """
        caught = False
        for enemy in self.enemies:
            if enemy.update(grid, player, rng):
                caught = True
        return caught

    def enemy_at(self, x, y):
        """Enemy standing on (x, y), or None"""
        for enemy in self.enemies:
            if enemy.x == x and enemy.y == y:
                return enemy
        return None

    def attack_from(self, x, y):
        """
        Strike the first enemy orthogonally adjacent to (x, y)

        Neighbours are checked up, down, left, right; at most one enemy is
        removed.

        Returns:
            The removed Enemy, or None if nothing was in range
        """
        for dx, dy in DIRS:
            enemy = self.enemy_at(x + dx, y + dy)
            if enemy is not None:
                self.enemies.remove(enemy)
                return enemy
        return None

    def __len__(self):
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    def __repr__(self):
        return f"EnemyManager(enemies={len(self.enemies)})"
