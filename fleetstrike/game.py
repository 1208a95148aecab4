"""Game flow: menus, ship placement, turns, the computer opponent and statistics."""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from .ai import AI
from .board import Board
from .core import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SPACING,
    CELL_SIZE,
    SCREEN_WIDTH,
    CellState,
    GameMode,
    GameState,
    PlacementMode,
    in_grid,
)
from .particles import ParticleSystem
from .ship import Ship, make_ship, standard_fleet
from .stats import STATS_FILE, GameStats, load_stats, save_stats

log = logging.getLogger(__name__)

AI_DELAY = 1.0
_TURN_STATES = (GameState.PLAYER1_TURN, GameState.PLAYER2_TURN, GameState.AI_TURN)
_LAST_MENU_ITEM = 4
_LAST_DIFFICULTY = 2


class Key(Enum):
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    R = auto()
    SPACE = auto()
    A = auto()
    M = auto()
    BACKSPACE = auto()
    ESCAPE = auto()


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px < self.x + self.width and self.y <= py < self.y + self.height
        )


PLAY_BUTTON = Rect(SCREEN_WIDTH // 2 - 100, 300, 200, 50)
PVP_BUTTON = Rect(SCREEN_WIDTH // 2 - 100, 370, 200, 50)
SETTINGS_BUTTON = Rect(SCREEN_WIDTH // 2 - 100, 440, 200, 50)
QUIT_BUTTON = Rect(SCREEN_WIDTH // 2 - 100, 510, 200, 50)


def _grid_cell(offset_x: int, px: float, py: float) -> tuple[int, int]:
    # int() truncates toward zero, as a C cast does.
    return int((px - offset_x) / CELL_SIZE), int((py - BOARD_OFFSET_Y) / CELL_SIZE)


class Game:
    """The whole game, driven by clicks, key presses and elapsed time."""

    def __init__(
        self,
        stats_path: str | PathLike[str] = STATS_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.stats_path = Path(stats_path)
        self.particles = ParticleSystem(self.rng)
        self.player_board = Board(self.particles, self.rng)
        self.computer_board = Board(self.particles, self.rng)
        self.state = GameState.MAIN_MENU
        self.game_mode = GameMode.PVE_MEDIUM
        self.placement_mode = PlacementMode.HORIZONTAL
        self.winner = 0
        self.current_player = 1
        self.ai: AI | None = None
        self.ships_to_place: list[Ship] = standard_fleet()
        self.current_ship_index = 0
        self.placing_ships = False
        self.selected_menu_item = 0
        self.selected_difficulty = 1
        self.turn_timer = 0.0
        self.game_timer = 0.0
        self.shot_count = 0
        self.player_hits = 0
        self.player_level = 1
        self.stats = GameStats()
        self._load_stats()

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def current_ship(self) -> Ship | None:
        """The ship waiting to be placed, if any."""
        if self.current_ship_index < len(self.ships_to_place):
            return self.ships_to_place[self.current_ship_index]
        return None

    # Lifecycle -----------------------------------------------------------

    def start_new_game(self) -> None:
        self.player_board.reset()
        self.computer_board.reset()
        self.ai = AI(self.game_mode, self.rng)
        self.ships_to_place = standard_fleet()
        self.current_ship_index = 0
        self.placing_ships = True
        self.state = GameState.SHIP_PLACEMENT
        self.computer_board.setup_fleet()
        self.turn_timer = 0.0
        self.game_timer = 0.0
        self.shot_count = 0
        self.player_hits = 0
        self.current_player = 1

    def close(self) -> None:
        """Persist statistics before the game goes away."""
        self.save_stats()

    # Time ----------------------------------------------------------------

    def update(self, dt: float) -> None:
        """Advance the game by dt seconds."""
        self.particles.update(dt)
        self.game_timer += dt

        if self.state is GameState.SHIP_PLACEMENT and self.current_ship is None:
            self.state = GameState.PLAYER1_TURN
            self.placing_ships = False
        elif self.state is GameState.AI_TURN:
            self._ai_turn(dt)

        if self.state in _TURN_STATES:
            self._check_winner()

    def _ai_turn(self, dt: float) -> None:
        self.turn_timer += dt
        if self.turn_timer < AI_DELAY:
            return
        if self.ai is not None:
            x, y = self.ai.next_target(self.player_board.grid)
            if self.player_board.attack(x, y):
                self.shot_count += 1
                if self.player_board.cell_state(x, y) is CellState.HIT:
                    self.ai.register_hit(x, y, self.player_board.grid)
        self.state = GameState.PLAYER1_TURN
        self.turn_timer = 0.0

    def _check_winner(self) -> None:
        if self.player_board.all_ships_sunk():
            self.winner = 2 if self.game_mode is GameMode.PVP else 0
            self.state = GameState.GAME_OVER
            self.stats.games_played += 1
            if self.game_mode is not GameMode.PVP:
                self.stats.ai_wins += 1
            self.update_game_stats()
        elif self.computer_board.all_ships_sunk():
            self.winner = 1
            self.state = GameState.GAME_OVER
            self.stats.games_played += 1
            self.stats.player_wins += 1
            self.update_game_stats()

    # Input ---------------------------------------------------------------

    def handle_click(self, x: float, y: float) -> None:
        """React to a left click at screen position (x, y)."""
        if self.state is GameState.MAIN_MENU:
            self._menu_click(x, y)
        elif self.state is GameState.SHIP_PLACEMENT:
            self._placement_click(x, y)
        elif self.state in (GameState.PLAYER1_TURN, GameState.PLAYER2_TURN):
            self._attack_click(x, y)

    def handle_key(self, key: Key) -> None:
        """React to a key press."""
        if self.state is GameState.MAIN_MENU:
            self._menu_key(key)
        elif self.state is GameState.SHIP_PLACEMENT:
            self._placement_key(key)
        elif self.state is GameState.GAME_OVER:
            if key is Key.R:
                self.start_new_game()
            elif key is Key.M:
                self.state = GameState.MAIN_MENU
        elif self.state is GameState.SETTINGS:
            self._settings_key(key)
        elif self.state is GameState.STATISTICS:
            if key in (Key.ESCAPE, Key.BACKSPACE):
                self.state = GameState.MAIN_MENU
            elif key is Key.R:
                self.reset_stats()

    def _start_vs_ai(self) -> None:
        self.game_mode = GameMode(self.selected_difficulty)
        self.start_new_game()

    def _start_pvp(self) -> None:
        self.game_mode = GameMode.PVP
        self.start_new_game()

    def _menu_click(self, x: float, y: float) -> None:
        if PLAY_BUTTON.contains(x, y):
            self._start_vs_ai()
        elif PVP_BUTTON.contains(x, y):
            self._start_pvp()
        elif SETTINGS_BUTTON.contains(x, y):
            self.state = GameState.SETTINGS

    def _menu_key(self, key: Key) -> None:
        if key is Key.UP:
            self.selected_menu_item = max(0, self.selected_menu_item - 1)
        elif key is Key.DOWN:
            self.selected_menu_item = min(_LAST_MENU_ITEM, self.selected_menu_item + 1)
        elif key is Key.ENTER:
            item = self.selected_menu_item
            if item == 0:
                self._start_vs_ai()
            elif item == 1:
                self._start_pvp()
            elif item == 2:
                self.state = GameState.SETTINGS
            elif item == 3:
                self.state = GameState.STATISTICS

    def _settings_key(self, key: Key) -> None:
        if key is Key.BACKSPACE:
            self.state = GameState.MAIN_MENU
        elif key is Key.UP:
            self.selected_difficulty = max(0, self.selected_difficulty - 1)
        elif key is Key.DOWN:
            self.selected_difficulty = min(_LAST_DIFFICULTY, self.selected_difficulty + 1)

    def _placement_key(self, key: Key) -> None:
        if self.current_ship is None:
            return
        if key in (Key.R, Key.SPACE):
            self.placement_mode = (
                PlacementMode.VERTICAL
                if self.placement_mode is PlacementMode.HORIZONTAL
                else PlacementMode.HORIZONTAL
            )
        elif key is Key.A:
            while (ship := self.current_ship) is not None:
                if not self.player_board.place_ship_automatically(make_ship(ship.type)):
                    break
                self.current_ship_index += 1

    def _placement_click(self, x: float, y: float) -> None:
        ship = self.current_ship
        if ship is None:
            return
        gx, gy = _grid_cell(BOARD_OFFSET_X, x, y)
        if not in_grid(gx, gy):
            return
        vertical = self.placement_mode is PlacementMode.VERTICAL
        if self.player_board.place_ship(make_ship(ship.type), gx, gy, vertical):
            self.current_ship_index += 1

    def _attack_click(self, x: float, y: float) -> None:
        gx, gy = _grid_cell(BOARD_OFFSET_X + BOARD_SPACING, x, y)
        if not in_grid(gx, gy):
            return
        pvp = self.game_mode is GameMode.PVP
        target = (
            self.player_board
            if pvp and self.state is GameState.PLAYER2_TURN
            else self.computer_board
        )
        if not target.attack(gx, gy):
            return

        self.shot_count += 1
        hit = target.cell_state(gx, gy) is CellState.HIT
        if hit:
            self.player_hits += 1
            self.stats.total_hits += 1

        if pvp:
            self.state = (
                GameState.PLAYER2_TURN
                if self.state is GameState.PLAYER1_TURN
                else GameState.PLAYER1_TURN
            )
            self.current_player = 2 if self.current_player == 1 else 1
        else:
            if self.ai is not None and hit:
                self.ai.register_hit(gx, gy, target.grid)
            self.state = GameState.AI_TURN
            self.turn_timer = 0.0

    # Statistics ----------------------------------------------------------

    def _load_stats(self) -> None:
        try:
            self.stats = load_stats(self.stats_path)
        except FileNotFoundError:
            log.info("No stats file at %s; starting fresh", self.stats_path)
            self.stats = GameStats()
            self.player_level = 1
            self.save_stats()
            return
        self.player_level = self.stats.player_level

    def _calculate_player_level(self) -> None:
        self.player_level = self.stats.refresh_level()

    def update_game_stats(self) -> None:
        """Fold the finished game's shots, hits and length into the totals and save."""
        stats = self.stats
        stats.total_shots += self.shot_count
        stats.total_hits += self.player_hits
        if stats.total_shots > 0:
            stats.avg_accuracy = stats.total_hits / stats.total_shots * 100.0

        length = int(self.game_timer)
        if stats.shortest_game == 0 or 0 < length < stats.shortest_game:
            stats.shortest_game = length
        if length > stats.longest_game:
            stats.longest_game = length

        self._calculate_player_level()
        self.save_stats()

    def save_stats(self) -> None:
        self.stats.player_level = self.player_level
        self.stats.experience = self.stats.games_played + self.stats.player_wins * 2
        save_stats(self.stats, self.stats_path)

    def reset_stats(self) -> None:
        self.stats = GameStats()
        self.player_level = 1
        self.save_stats()