"""Computer opponent that picks cells to fire at."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .core import GRID_SIZE, CellState, GameMode, in_grid

SHIP_SIZES = (2, 3, 3, 4, 5)
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_RANDOM_ATTEMPTS = 100

GridView = Sequence[Sequence[CellState]]


def _is_open(state: CellState) -> bool:
    return state in (CellState.EMPTY, CellState.SHIP)


def _fits(cells) -> bool:
    return all(state not in (CellState.HIT, CellState.MISS) for state in cells)


def cell_probability(x: int, y: int, grid: GridView) -> int:
    """Count ship placements starting at (x, y) that avoid fired-at cells."""
    score = 0
    for size in SHIP_SIZES:
        if x + size <= GRID_SIZE and _fits(grid[x + i][y] for i in range(size)):
            score += 1
        if y + size <= GRID_SIZE and _fits(grid[x][y + i] for i in range(size)):
            score += 1
    return score


class AI:
    """Chooses targets according to its difficulty."""

    def __init__(self, difficulty: GameMode, rng: random.Random | None = None) -> None:
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.hunt_targets: list[tuple[int, int]] = []
        self.shot_history: list[tuple[int, int]] = []

    def next_target(self, grid: GridView) -> tuple[int, int]:
        """Return the next cell to attack on the enemy grid."""
        if self.hunt_targets and self.difficulty != GameMode.PVE_EASY:
            return self.hunt_targets.pop()
        if self.difficulty == GameMode.PVE_MEDIUM:
            return self._medium_target(grid)
        if self.difficulty == GameMode.PVE_HARD:
            return self._hard_target(grid)
        return self._random_target(grid)

    def register_hit(self, x: int, y: int, grid: GridView) -> None:
        """Queue the open neighbours of a hit cell for follow-up shots."""
        if self.difficulty == GameMode.PVE_EASY:
            return
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if in_grid(nx, ny) and _is_open(grid[nx][ny]):
                self.hunt_targets.append((nx, ny))

    def _random_target(self, grid: GridView) -> tuple[int, int]:
        for _ in range(_RANDOM_ATTEMPTS):
            x = self.rng.randint(0, GRID_SIZE - 1)
            y = self.rng.randint(0, GRID_SIZE - 1)
            if _is_open(grid[x][y]):
                return (x, y)
        return (0, 0)

    def _medium_target(self, grid: GridView) -> tuple[int, int]:
        for x in range(GRID_SIZE):
            for y in range(GRID_SIZE):
                if (x + y) % 2 == 0 and _is_open(grid[x][y]):
                    return (x, y)
        return self._random_target(grid)

    def _hard_target(self, grid: GridView) -> tuple[int, int]:
        best, best_score = (0, 0), 0
        for x in range(GRID_SIZE):
            for y in range(GRID_SIZE):
                if not _is_open(grid[x][y]):
                    continue
                score = cell_probability(x, y, grid)
                if score > best_score:
                    best, best_score = (x, y), score
        return best