import random

from fleetstrike.ai import AI, SHIP_SIZES, cell_probability
from fleetstrike.core import GRID_SIZE, CellState, GameMode, empty_grid, in_grid


def full_grid(state):
    return [[state] * GRID_SIZE for _ in range(GRID_SIZE)]


def test_easy_picks_open_cell():
    ai = AI(GameMode.PVE_EASY, random.Random(1))
    grid = empty_grid()
    for _ in range(20):
        x, y = ai.next_target(grid)
        assert in_grid(x, y)


def test_random_falls_back_to_origin_when_nothing_open():
    ai = AI(GameMode.PVE_EASY, random.Random(1))
    assert ai.next_target(full_grid(CellState.MISS)) == (0, 0)


def test_medium_uses_checkerboard():
    ai = AI(GameMode.PVE_MEDIUM, random.Random(1))
    grid = empty_grid()
    assert ai.next_target(grid) == (0, 0)
    grid[0][0] = CellState.MISS
    x, y = ai.next_target(grid)
    assert (x + y) % 2 == 0
    assert grid[x][y] is CellState.EMPTY


def test_hard_prefers_first_maximum():
    ai = AI(GameMode.PVE_HARD, random.Random(1))
    assert ai.next_target(empty_grid()) == (0, 0)


def test_hard_target_is_best_probability():
    ai = AI(GameMode.PVE_HARD, random.Random(1))
    grid = empty_grid()
    grid[0][0] = CellState.MISS
    grid[3][3] = CellState.HIT
    x, y = ai.next_target(grid)
    best = max(
        cell_probability(i, j, grid)
        for i in range(GRID_SIZE)
        for j in range(GRID_SIZE)
        if grid[i][j].is_open
    )
    assert cell_probability(x, y, grid) == best
    assert grid[x][y].is_open


def test_hunt_targets_after_hit():
    ai = AI(GameMode.PVE_HARD, random.Random(1))
    grid = empty_grid()
    ai.register_hit(5, 5, grid)
    shots = [ai.next_target(grid) for _ in range(4)]
    assert shots == [(4, 5), (6, 5), (5, 4), (5, 6)]


def test_hunt_skips_fired_and_offboard_cells():
    ai = AI(GameMode.PVE_MEDIUM, random.Random(1))
    grid = empty_grid()
    grid[1][0] = CellState.MISS
    ai.register_hit(0, 0, grid)
    assert ai.hunt_targets == [(0, 1)]


def test_easy_ignores_hits():
    ai = AI(GameMode.PVE_EASY, random.Random(1))
    ai.register_hit(5, 5, empty_grid())
    assert ai.hunt_targets == []


def test_probability_bounds():
    grid = empty_grid()
    assert cell_probability(0, 0, grid) == 2 * len(SHIP_SIZES)
    assert cell_probability(GRID_SIZE - 1, GRID_SIZE - 1, grid) == 0
    grid[1][0] = CellState.MISS
    grid[0][1] = CellState.MISS
    assert cell_probability(0, 0, grid) == 0