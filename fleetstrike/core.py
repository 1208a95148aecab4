"""Shared constants, enumerations and grid helpers for the game."""

from __future__ import annotations

from enum import Enum, IntEnum

SCREEN_WIDTH = 1400
SCREEN_HEIGHT = 900
GRID_SIZE = 10
CELL_SIZE = 45
BOARD_OFFSET_X = 100
BOARD_OFFSET_Y = 150
BOARD_SPACING = 600
MENU_WIDTH = 300

Color = tuple[int, int, int, int]
Point = tuple[float, float]

# Palette (RGBA).
RED: Color = (230, 41, 55, 255)
MAROON: Color = (190, 33, 55, 255)
ORANGE: Color = (255, 161, 0, 255)
YELLOW: Color = (253, 249, 0, 255)
GOLD: Color = (255, 203, 0, 255)
GREEN: Color = (0, 228, 48, 255)
DARKGREEN: Color = (0, 117, 44, 255)
BLUE: Color = (0, 121, 241, 255)
DARKBLUE: Color = (0, 82, 172, 255)
SKYBLUE: Color = (102, 191, 255, 255)
DARKPURPLE: Color = (112, 31, 126, 255)
BROWN: Color = (127, 106, 79, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
DARKGRAY: Color = (80, 80, 80, 255)
WHITE: Color = (255, 255, 255, 255)
RAYWHITE: Color = (245, 245, 245, 255)
BLACK: Color = (0, 0, 0, 255)


class CellState(Enum):
    EMPTY = 0
    SHIP = 1
    HIT = 2
    MISS = 3
    SINKING = 4

    @property
    def is_open(self) -> bool:
        """True for cells that have not been fired at yet."""
        return self in (CellState.EMPTY, CellState.SHIP)


class GameState(Enum):
    MAIN_MENU = 0
    SHIP_PLACEMENT = 1
    PLAYER1_TURN = 2
    PLAYER2_TURN = 3
    AI_TURN = 4
    GAME_OVER = 5
    SETTINGS = 6
    STATISTICS = 7


class ShipType(IntEnum):
    DESTROYER = 0
    SUBMARINE = 1
    CRUISER = 2
    BATTLESHIP = 3
    CARRIER = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class GameMode(IntEnum):
    PVP = 0
    PVE_EASY = 1
    PVE_MEDIUM = 2
    PVE_HARD = 3


class PlacementMode(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


Grid = list[list[CellState]]


def in_grid(x: int, y: int) -> bool:
    """Return whether (x, y) lies on the board."""
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def cell_center(offset_x: int, x: int, y: int) -> Point:
    """Screen position of the centre of cell (x, y) on a board drawn at offset_x."""
    return (
        float(offset_x + x * CELL_SIZE + CELL_SIZE // 2),
        float(BOARD_OFFSET_Y + y * CELL_SIZE + CELL_SIZE // 2),
    )


def empty_grid() -> Grid:
    """A fresh GRID_SIZE x GRID_SIZE grid of empty cells, indexed [x][y]."""
    return [[CellState.EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]