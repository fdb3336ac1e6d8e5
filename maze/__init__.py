"""
Maze Module - grid model and perfect-maze generation
"""

from .maze_core import MazeGrid, create_grid, neighbors_open, bfs_shortest_path
from .generator import carve, generate_maze

__all__ = ['MazeGrid', 'create_grid', 'neighbors_open', 'bfs_shortest_path',
           'carve', 'generate_maze']
