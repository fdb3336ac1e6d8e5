"""
Level configurations for Terminal Maze
Maze size and enemy count grow linearly with the level number
"""

from utils.constants import (
    Cell, BASE_WIDTH, WIDTH_PER_LEVEL, BASE_HEIGHT, HEIGHT_PER_LEVEL,
    ENEMIES_PER_LEVEL
)


class SpawnError(RuntimeError):
    """Raised when a level has no room left to place its enemies"""


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, level, width, height, enemy_count):
        self.level = level
        self.width = width
        self.height = height
        self.enemy_count = enemy_count

    def __repr__(self):
        return (f"LevelConfig(level={self.level}, size={self.width}x{self.height}, "
                f"enemies={self.enemy_count})")


def get_level_config(level):
    """
    Get configuration for a level number

    Args:
        level: Level number, starting at 1

    Returns:
        LevelConfig object
    """
    if level < 1:
        raise ValueError(f"Level numbers start at 1, got {level}")

    return LevelConfig(
        level=level,
        width=BASE_WIDTH + WIDTH_PER_LEVEL * level,
        height=BASE_HEIGHT + HEIGHT_PER_LEVEL * level,
        enemy_count=ENEMIES_PER_LEVEL * level,
    )


def get_enemy_spawn_positions(grid, count, player_pos, rng):
    """
    Pick spawn cells for enemies

    Cells are sampled uniformly over the whole grid and retried until they
    land on an OPEN cell that is neither the player's cell nor already taken.

    Returns:
        List of (x, y) tuples, one per enemy

    Raises:
        SpawnError: if there are fewer free OPEN cells than enemies
    """
    free = len([pos for pos in grid.open_cells() if pos != player_pos])
    if free < count:
        raise SpawnError(
            f"Cannot place {count} enemies in a {grid.width}x{grid.height} "
            f"maze with only {free} free cells")

    spawns = []
    taken = {player_pos}
    while len(spawns) < count:
        x, y = rng.random_cell(grid.width, grid.height)
        if grid.cell(x, y) != Cell.OPEN or (x, y) in taken:
            continue
        taken.add((x, y))
        spawns.append((x, y))

    return spawns
