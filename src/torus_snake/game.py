# game.py
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np  # type: ignore

from .config import (
    INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
    CellState, Direction, Config, CFG,
)
from .grid import Grid, Position


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


# ---------- Helpers ----------
def step_position(pos: Position, direction: Direction, size: int) -> Position:
    """One cell from pos in direction, wrapping around the grid edges."""
    dx, dy = direction.value
    return ((pos[0] + dx) % size, (pos[1] + dy) % size)

def is_orthogonal(a: Direction, b: Direction) -> bool:
    return a.value[0] * b.value[0] + a.value[1] * b.value[1] == 0


# ---------- State ----------
class Game:
    """
    Snake on a toroidal grid.

    The external loop calls change_direction() for each direction request,
    advance() once per tick and stops as soon as is_finished is set.
    """

    def __init__(
        self,
        config: Config = CFG,
        snake: Sequence[Position] = INITIAL_SNAKE,
        food: Optional[Position] = INITIAL_FOOD,
        direction: Direction = INITIAL_DIRECTION,
        rng: Union[np.random.Generator, int, None] = None,
    ):
        if not snake:
            raise ValueError("Snake needs at least one segment")
        if len(set(snake)) != len(snake):
            raise ValueError(f"Snake overlaps itself: {list(snake)}")

        self.config = config
        seed = rng if rng is not None else config.seed
        self.grid = Grid(config.grid_size, snake, food, rng=seed)
        self.snake: List[Position] = list(snake)   # head at index 0
        # food is only ever missing on a full board
        self.food = food if food is not None else self.grid.place_random_food()
        self.direction = direction
        self.is_finished = False
        self.is_paused = False

    # ---------- Read access for the shell ----------
    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def status(self) -> Status:
        if self.is_finished:
            return Status.FINISHED
        if self.is_paused:
            return Status.PAUSED
        return Status.RUNNING

    # ---------- Input ----------
    def change_direction(self, requested: Direction) -> bool:
        """
        Turn only if requested is orthogonal to the current heading.
        Same or opposite headings are ignored. Returns True if the heading changed.
        """
        if not is_orthogonal(requested, self.direction):
            return False
        self.direction = requested
        return True

    def toggle_pause(self) -> None:
        if not self.is_finished:
            self.is_paused = not self.is_paused

    # ---------- Update ----------
    def advance(self) -> None:
        """Move the snake one cell. No-op while paused or after the game finished."""
        if self.is_finished or self.is_paused:
            return
        assert self.snake, "advance() on an empty snake"

        tail = self.snake[-1]
        new_head = step_position(self.snake[0], self.direction, self.grid.size)

        # The tail cell is still marked SNAKE here, so following it is a collision
        tie = self.grid.get(new_head)

        if tie is CellState.SNAKE:
            self.is_finished = True
            if self.config.debug:
                print(f"[GAME] collision at {new_head}, length={len(self.snake)}")
            return

        if tie is CellState.FOOD:
            new_food = self.grid.place_random_food()
            if new_food is None:
                # board full: finish, but still complete the move below
                self.is_finished = True
            self.food = new_food
        else:
            self.snake.pop()

        self.snake.insert(0, new_head)

        if tie is not CellState.FOOD:
            self.grid.set(tail, CellState.EMPTY)
        self.grid.set(new_head, CellState.SNAKE)

        if self.config.debug:
            print(f"[GAME] head={new_head} dir={self.direction.name} "
                  f"length={len(self.snake)} food={self.food}")

    # ---------- Consistency ----------
    def check_invariants(self) -> None:
        """Raise AssertionError if grid and snake/food disagree."""
        assert len(set(self.snake)) == len(self.snake), "snake overlaps itself"
        assert self.grid.cells_in(CellState.SNAKE) == set(self.snake), "grid body != snake"
        food_cells = self.grid.cells_in(CellState.FOOD)
        assert len(food_cells) <= 1, f"more than one food cell: {food_cells}"
        if self.food is None:
            assert not food_cells, "food cell on grid but no food recorded"
            assert self.grid.count(CellState.EMPTY) == 0, "no food while the board has empty cells"
        else:
            assert food_cells == {self.food}, f"food {self.food} not on grid {food_cells}"


def new_game(seed: Optional[int] = None, config: Config = CFG) -> Game:
    """Fresh game in the reference layout."""
    return Game(config=config, rng=seed)
