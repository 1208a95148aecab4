import pytest

from fleetstrike.core import (
    BOARD_OFFSET_Y,
    CELL_SIZE,
    GRID_SIZE,
    CellState,
    GameMode,
    ShipType,
    cell_center,
    empty_grid,
    in_grid,
)


@pytest.mark.parametrize(
    "x,y,expected",
    [
        (0, 0, True),
        (GRID_SIZE - 1, GRID_SIZE - 1, True),
        (-1, 0, False),
        (0, -1, False),
        (GRID_SIZE, 0, False),
        (0, GRID_SIZE, False),
    ],
)
def test_in_grid(x, y, expected):
    assert in_grid(x, y) is expected


def test_cell_center_steps_by_cell_size():
    ax, ay = cell_center(100, 2, 3)
    bx, by = cell_center(100, 3, 4)
    assert bx - ax == CELL_SIZE
    assert by - ay == CELL_SIZE


def test_cell_center_lies_inside_cell():
    cx, cy = cell_center(0, 0, 0)
    assert 0 < cx < CELL_SIZE
    assert BOARD_OFFSET_Y < cy < BOARD_OFFSET_Y + CELL_SIZE


def test_cell_center_follows_offset():
    assert cell_center(500, 1, 1)[0] - cell_center(0, 1, 1)[0] == 500


def test_open_cells():
    grid = empty_grid()
    assert all(cell.is_open for column in grid for cell in column)
    grid[0][0] = CellState.SHIP
    grid[1][0] = CellState.HIT
    grid[2][0] = CellState.MISS
    assert grid[0][0].is_open
    assert not grid[1][0].is_open
    assert not grid[2][0].is_open


def test_empty_grid_shape():
    grid = empty_grid()
    assert len(grid) == GRID_SIZE
    assert all(len(col) == GRID_SIZE for col in grid)
    grid[0][0] = CellState.HIT
    assert grid[1][0] is CellState.EMPTY


def test_enum_ordering_matches_difficulty_index():
    assert GameMode(1) is GameMode.PVE_EASY
    assert ShipType(4) is ShipType.CARRIER
    assert ShipType.CARRIER.label == "Carrier"