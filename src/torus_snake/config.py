from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Grid & window -----
GRID_SIZE = 27
CELL_SIZE = 30
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE
FPS = 4

# ----- Colors -----
BG    = (0, 160, 60)
RED   = (220, 40, 40)
BODY  = (30, 30, 36)
HEAD  = (70, 70, 84)
TEXT  = (240, 240, 250)

# ----- Starting layout -----
INITIAL_SNAKE = [(12, 12), (13, 12), (14, 12)]  # head first
INITIAL_FOOD = (3, 3)


class Direction(Enum):
    """Heading of the snake; the value is the (dx, dy) step on the grid."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class CellState(Enum):
    EMPTY = 0
    FOOD = 1
    SNAKE = 2


INITIAL_DIRECTION = Direction.LEFT


# ----- Tunables -----
@dataclass
class Config:
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    fps: int = FPS
    seed: Optional[int] = None   # None -> non-deterministic food placement
    debug: bool = False          # print every tick transition

CFG = Config()
