"""
Core maze functions - grid model and pathfinding
"""

from collections import deque

import numpy as np

from utils.constants import Cell, CELL_GLYPHS, DIRS, MIN_GRID_SIZE


class MazeGrid:
    """
    Maze grid with cell-based representation

    Cells are stored in a (height, width) int8 array indexed [y, x].
    Rooms sit at odd (x, y) inside the border; even coordinates are the
    wall/corridor slots between them.
    """
    def __init__(self, width, height):
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Maze must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, "
                f"got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), Cell.WALL, dtype=np.int8)

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x, y):
        """Cell kind at (x, y)"""
        return Cell(int(self.cells[y, x]))

    def set_cell(self, x, y, kind):
        self.cells[y, x] = kind

    def is_wall(self, x, y):
        """Out-of-bounds counts as wall"""
        if not self.in_bounds(x, y):
            return True
        return bool(self.cells[y, x] == Cell.WALL)

    def is_room(self, x, y):
        """Check if (x, y) is a room of the odd-coordinate lattice"""
        return (x % 2 == 1 and y % 2 == 1 and
                0 < x < self.width - 1 and 0 < y < self.height - 1)

    def rooms(self):
        """All room coordinates, row by row"""
        return [(x, y)
                for y in range(1, self.height - 1, 2)
                for x in range(1, self.width - 1, 2)]

    def cells_of(self, kind):
        """All (x, y) holding the given cell kind, row by row"""
        ys, xs = np.nonzero(self.cells == kind)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def open_cells(self):
        return self.cells_of(Cell.OPEN)

    def border_is_solid(self):
        """True if every border cell is a wall"""
        border = np.concatenate([
            self.cells[0, :], self.cells[-1, :],
            self.cells[:, 0], self.cells[:, -1],
        ])
        return bool(np.all(border == Cell.WALL))

    def rows_as_text(self):
        """Plain glyph rows, no entities"""
        return [''.join(CELL_GLYPHS[Cell(int(c))] for c in row)
                for row in self.cells]

    def __repr__(self):
        return f"MazeGrid({self.width}x{self.height})"


def create_grid(width, height):
    """
    Build a grid with every cell walled, then open every room

    Args:
        width, height: Grid dimensions, each at least 3

    Returns:
        MazeGrid with rooms OPEN and everything else WALL
    """
    grid = MazeGrid(width, height)
    grid.cells[1:height - 1:2, 1:width - 1:2] = Cell.OPEN
    return grid


def neighbors_open(grid, x, y):
    """Get list of non-wall orthogonal neighbours (up, down, left, right)"""
    res = []
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        if not grid.is_wall(nx, ny):
            res.append((nx, ny))
    return res


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path over non-wall cells; [] if unreachable"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in prev:
                prev[n] = (x, y)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []
