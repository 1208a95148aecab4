"""A player's board: the grid of cells and the ships placed on it."""

from __future__ import annotations

import random

from .core import (
    BOARD_OFFSET_X,
    BOARD_SPACING,
    GRID_SIZE,
    LIGHTGRAY,
    RED,
    YELLOW,
    CellState,
    Grid,
    cell_center,
    empty_grid,
    in_grid,
)
from .particles import ParticleSystem
from .ship import Ship, standard_fleet

_MAX_PLACEMENT_ATTEMPTS = 100


def _ship_cells(x: int, y: int, size: int, vertical: bool):
    for i in range(size):
        yield (x, y + i) if vertical else (x + i, y)


class Board:
    """Grid indexed [x][y] plus the ships placed on it."""

    def __init__(
        self,
        particles: ParticleSystem | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.particles = particles
        self.rng = rng or random.Random()
        self.grid: Grid = empty_grid()
        self.ships: list[Ship] = []

    def can_place_ship(self, x: int, y: int, size: int, vertical: bool) -> bool:
        """Whether a ship fits here without touching another, diagonals included."""
        for cx, cy in _ship_cells(x, y, size, vertical):
            if not in_grid(cx, cy):
                return False
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    nx, ny = cx + dx, cy + dy
                    if in_grid(nx, ny) and self.grid[nx][ny] is CellState.SHIP:
                        return False
        return True

    def place_ship(self, ship: Ship, x: int, y: int, vertical: bool) -> bool:
        if not self.can_place_ship(x, y, ship.size, vertical):
            return False
        coords = list(_ship_cells(x, y, ship.size, vertical))
        for cx, cy in coords:
            self.grid[cx][cy] = CellState.SHIP
        ship.place(coords, vertical)
        self.ships.append(ship)
        return True

    def place_ship_automatically(self, ship: Ship) -> bool:
        """Try random positions for the ship; return whether one was found."""
        size = ship.size
        if size > GRID_SIZE:
            return False
        for _ in range(_MAX_PLACEMENT_ATTEMPTS):
            vertical = self.rng.randint(0, 1) == 1
            x = self.rng.randint(0, GRID_SIZE - 1 if vertical else GRID_SIZE - size)
            y = self.rng.randint(0, GRID_SIZE - size if vertical else GRID_SIZE - 1)
            if self.place_ship(ship, x, y, vertical):
                return True
        return False

    def setup_fleet(self) -> None:
        for ship in standard_fleet():
            self.place_ship_automatically(ship)

    def attack(self, x: int, y: int) -> bool:
        """Fire at (x, y); False if off the board or already fired at."""
        if not in_grid(x, y) or self.grid[x][y] in (CellState.HIT, CellState.MISS):
            return False

        pos = cell_center(BOARD_OFFSET_X + BOARD_SPACING, x, y)

        if self.grid[x][y] is CellState.SHIP:
            self.grid[x][y] = CellState.HIT
            hit_ship = next((s for s in self.ships if s.occupies(x, y)), None)
            if hit_ship is not None:
                hit_ship.register_hit(x, y)
            if self.particles is not None:
                self.particles.add_explosion(pos, RED)
                if hit_ship is not None and hit_ship.is_sunk():
                    self.particles.add_animation(pos, "SUNK!", YELLOW)
                else:
                    self.particles.add_animation(pos, "HIT!", RED)
            return True

        self.grid[x][y] = CellState.MISS
        if self.particles is not None:
            self.particles.add_splash(pos)
            self.particles.add_animation(pos, "MISS", LIGHTGRAY)
        return True

    def all_ships_sunk(self) -> bool:
        return bool(self.ships) and all(ship.is_sunk() for ship in self.ships)

    def cell_state(self, x: int, y: int) -> CellState:
        return self.grid[x][y] if in_grid(x, y) else CellState.EMPTY

    def ship_at(self, x: int, y: int) -> Ship | None:
        return next((s for s in self.ships if s.occupies(x, y)), None)

    def reset(self) -> None:
        self.ships.clear()
        for column in self.grid:
            column[:] = [CellState.EMPTY] * GRID_SIZE