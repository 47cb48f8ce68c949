# grid.py
from typing import List, Optional, Sequence, Set, Tuple, Union

import numpy as np  # type: ignore

from .config import GRID_SIZE, INITIAL_SNAKE, INITIAL_FOOD, CellState

Position = Tuple[int, int]


class Grid:
    """
    Fixed-size toroidal occupancy map.

    Each cell holds a CellState value in an (N, N) int8 array indexed as
    [col, row]. The grid does not know about the snake's order; it only
    records which cells are empty, food or snake body.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        snake: Sequence[Position] = INITIAL_SNAKE,
        food: Optional[Position] = INITIAL_FOOD,
        rng: Union[np.random.Generator, int, None] = None,
    ):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        # default_rng(None) pulls fresh OS entropy
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self.cells = np.full((size, size), CellState.EMPTY.value, dtype=np.int8)

        for pos in snake:
            self._check_bounds(pos)
            self.set(pos, CellState.SNAKE)
        if food is not None:
            self._check_bounds(food)
            if self.get(food) is CellState.SNAKE:
                raise ValueError(f"Food {food} overlaps the snake")
            self.set(food, CellState.FOOD)

    def _check_bounds(self, pos: Position) -> None:
        col, row = pos
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise ValueError(f"Position {pos} outside {self.size}x{self.size} grid")

    # ---------- Cell access ----------
    def get(self, pos: Position) -> CellState:
        return CellState(int(self.cells[pos[0], pos[1]]))

    def set(self, pos: Position, state: CellState) -> None:
        self.cells[pos[0], pos[1]] = state.value

    # ---------- Queries ----------
    def cells_in(self, state: CellState) -> Set[Position]:
        return {(int(c), int(r)) for c, r in np.argwhere(self.cells == state.value)}

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state.value))

    def empty_cells(self) -> List[Position]:
        return [(int(c), int(r)) for c, r in np.argwhere(self.cells == CellState.EMPTY.value)]

    # ---------- Food ----------
    def place_random_food(self) -> Optional[Position]:
        """
        Put food on a uniformly chosen empty cell and return its position.
        Returns None when no empty cell is left (board full).
        """
        empty = self.empty_cells()
        if not empty:
            return None
        pos = empty[int(self.rng.integers(len(empty)))]
        self.set(pos, CellState.FOOD)
        return pos
