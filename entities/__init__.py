"""
Entities Module - player and enemies
"""

from .player import Player
from .enemy import Enemy, EnemyManager

__all__ = ['Player', 'Enemy', 'EnemyManager']
