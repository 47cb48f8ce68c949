"""Snake on a wrap-around grid."""

from .config import CellState, Direction, Config
from .grid import Grid
from .game import Game, Status, new_game

__all__ = ["CellState", "Direction", "Config", "Grid", "Game", "Status", "new_game"]
