"""
Maze generation - randomized depth-first backtracker
"""

import logging

from utils.constants import Cell, DIRS, START_POS
from maze.maze_core import create_grid

logger = logging.getLogger(__name__)


def _unvisited_neighbors(grid, visited, x, y):
    """Rooms two cells away (up, down, left, right) not yet visited"""
    neighbors = []
    for dx, dy in DIRS:
        nx, ny = x + dx * 2, y + dy * 2
        if (0 < nx < grid.width - 1 and 0 < ny < grid.height - 1
                and (nx, ny) not in visited):
            neighbors.append((nx, ny))
    return neighbors


def gen_dfs_backtracker(grid, rng):
    """
    Depth-First Search with backtracking - step generator

    Carves corridors into *grid* in place. Every step yields a state dict:
    {"current": (x, y), "carved": (x, y) or None, "done": bool}
    where "carved" is the wall slot opened on that step.
    """
    stack = [START_POS]
    visited = {START_POS}

    yield {"current": START_POS, "carved": None, "done": False}

    while stack:
        cx, cy = stack[-1]
        neighbors = _unvisited_neighbors(grid, visited, cx, cy)

        if neighbors:
            nx, ny = rng.choice(neighbors)
            wall = ((cx + nx) // 2, (cy + ny) // 2)
            grid.set_cell(wall[0], wall[1], Cell.OPEN)
            visited.add((nx, ny))
            stack.append((nx, ny))

            yield {"current": (nx, ny), "carved": wall, "done": False}
        else:
            stack.pop()
            yield {"current": (cx, cy), "carved": None, "done": False}

    yield {"current": START_POS, "carved": None, "done": True}


def carve(grid, rng):
    """
    Turn a freshly created grid into a perfect maze

    Args:
        grid: MazeGrid from create_grid()
        rng: RandomSource used to pick neighbours

    Returns:
        The same grid, carved, with start and exit marked
    """
    corridors = 0
    for state in gen_dfs_backtracker(grid, rng):
        if state["carved"] is not None:
            corridors += 1

    # Set start and exit points
    grid.set_cell(START_POS[0], START_POS[1], Cell.OPEN)
    grid.set_cell(grid.width - 2, grid.height - 2, Cell.EXIT)

    logger.debug("Carved %dx%d maze with %d corridors",
                 grid.width, grid.height, corridors)
    return grid


def generate_maze(width, height, rng):
    """Create and carve a new maze"""
    return carve(create_grid(width, height), rng)
