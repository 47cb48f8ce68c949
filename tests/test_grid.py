import numpy as np
import pytest

from torus_snake.config import CellState
from torus_snake.grid import Grid


def test_initial_layout():
    grid = Grid()
    assert grid.get((3, 3)) is CellState.FOOD
    for pos in [(12, 12), (13, 12), (14, 12)]:
        assert grid.get(pos) is CellState.SNAKE
    assert grid.count(CellState.SNAKE) == 3
    assert grid.count(CellState.FOOD) == 1
    assert grid.count(CellState.EMPTY) == 27 * 27 - 4


def test_set_overwrites_cell():
    grid = Grid()
    grid.set((14, 12), CellState.EMPTY)
    assert grid.get((14, 12)) is CellState.EMPTY
    grid.set((0, 0), CellState.SNAKE)
    assert grid.get((0, 0)) is CellState.SNAKE


def test_place_random_food_picks_empty_cell():
    grid = Grid(size=5, snake=[(0, 0), (1, 0)], food=(2, 0), rng=7)
    empty_before = set(grid.empty_cells())
    pos = grid.place_random_food()
    assert pos in empty_before
    assert grid.get(pos) is CellState.FOOD
    assert grid.count(CellState.EMPTY) == len(empty_before) - 1


def test_place_random_food_last_empty_cell():
    grid = Grid(size=2, snake=[(0, 0), (1, 0), (1, 1)], food=None)
    assert grid.place_random_food() == (0, 1)
    assert grid.get((0, 1)) is CellState.FOOD


def test_place_random_food_board_full():
    grid = Grid(size=2, snake=[(0, 0), (1, 0), (1, 1)], food=(0, 1))
    assert grid.empty_cells() == []
    assert grid.place_random_food() is None
    assert grid.count(CellState.FOOD) == 1


def test_place_random_food_covers_all_empty_cells():
    grid = Grid(size=3, snake=[(1, 1)], food=None, rng=np.random.default_rng(0))
    seen = set()
    for _ in range(400):
        pos = grid.place_random_food()
        seen.add(pos)
        grid.set(pos, CellState.EMPTY)
    assert seen == {(c, r) for c in range(3) for r in range(3)} - {(1, 1)}


def test_seeded_placement_is_reproducible():
    a = Grid(rng=42)
    b = Grid(rng=42)
    assert [a.place_random_food() for _ in range(5)] == [b.place_random_food() for _ in range(5)]


def test_rejects_bad_layouts():
    with pytest.raises(ValueError):
        Grid(size=0)
    with pytest.raises(ValueError):
        Grid(size=5, snake=[(5, 0)], food=None)
    with pytest.raises(ValueError):
        Grid(size=5, snake=[(1, 1)], food=(1, 1))
