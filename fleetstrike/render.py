"""Drawing of menus, boards, effects and panels onto a pygame surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from .board import Board
from .core import (
    BLACK,
    BLUE,
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SPACING,
    CELL_SIZE,
    DARKBLUE,
    DARKGRAY,
    GOLD,
    GREEN,
    GRID_SIZE,
    LIGHTGRAY,
    MAROON,
    ORANGE,
    RAYWHITE,
    RED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    YELLOW,
    CellState,
    Color,
    GameMode,
    GameState,
    PlacementMode,
    ShipType,
    in_grid,
)
from .game import PLAY_BUTTON, PVP_BUTTON, QUIT_BUTTON, SETTINGS_BUTTON, Game
from .particles import ParticleSystem

DIFFICULTY_NAMES = ("EASY", "MEDIUM", "HARD")
_GAMEPLAY_STATES = (GameState.PLAYER1_TURN, GameState.PLAYER2_TURN, GameState.AI_TURN)


def format_clock(seconds: float) -> str:
    """Format a duration as minutes and two-digit seconds."""
    whole = int(seconds)
    return f"{whole // 60}:{whole % 60:02d}"


def _with_alpha(color: Color, alpha: float) -> Color:
    return (color[0], color[1], color[2], int(255 * alpha))


def _lerp(a: Color, b: Color, t: float) -> Color:
    return tuple(int(ca + (cb - ca) * t) for ca, cb in zip(a, b))  # type: ignore[return-value]


def _cell_rect(offset_x: int, x: int, y: int) -> pygame.Rect:
    return pygame.Rect(
        offset_x + x * CELL_SIZE,
        BOARD_OFFSET_Y + y * CELL_SIZE,
        CELL_SIZE - 2,
        CELL_SIZE - 2,
    )


def _mouse_cell(offset_x: int, mouse_pos: Sequence[float]) -> tuple[int, int]:
    mx, my = mouse_pos
    return int((mx - offset_x) / CELL_SIZE), int((my - BOARD_OFFSET_Y) / CELL_SIZE)


def _radius(rect: pygame.Rect, roundness: float) -> int:
    return int(roundness * min(rect.width, rect.height) / 2)


class Renderer:
    """Draws a game onto a surface, one frame per call to draw()."""

    def __init__(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    # Primitives ------------------------------------------------------------

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _measure(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    def _text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        rendered = self._font(max(1, size)).render(text, True, color[:3])
        if color[3] < 255:
            rendered.set_alpha(color[3])
        self.surface.blit(rendered, (int(x), int(y)))

    def _rect(self, rect, color: Color, radius: int = 0, width: int = 0) -> None:
        rect = pygame.Rect(rect)
        if color[3] >= 255:
            pygame.draw.rect(
                self.surface, color[:3], rect, width=width, border_radius=radius
            )
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            layer, color, layer.get_rect(), width=width, border_radius=radius
        )
        self.surface.blit(layer, rect.topleft)

    def _circle(self, center: Sequence[float], radius: float, color: Color) -> None:
        cx, cy = int(center[0]), int(center[1])
        r = max(1, int(radius))
        if color[3] >= 255:
            pygame.draw.circle(self.surface, color[:3], (cx, cy), r)
            return
        layer = pygame.Surface((2 * r + 1, 2 * r + 1), pygame.SRCALPHA)
        pygame.draw.circle(layer, color, (r, r), r)
        self.surface.blit(layer, (cx - r, cy - r))

    def _gradient(self, top: Color, bottom: Color, scale: float = 1.0) -> None:
        for row in range(SCREEN_HEIGHT):
            color = _lerp(top, bottom, row / SCREEN_HEIGHT * scale)
            pygame.draw.line(self.surface, color[:3], (0, row), (SCREEN_WIDTH, row))

    def _button(self, rect, text: str, highlighted: bool) -> None:
        rect = pygame.Rect(rect)
        fill = DARKBLUE if highlighted else _with_alpha(DARKBLUE, 0.7)
        ink = YELLOW if highlighted else WHITE
        radius = _radius(rect, 0.3)
        self._rect(rect, fill, radius)
        self._rect(rect, ink, radius, width=1)
        width = self._measure(text, 20)
        self._text(text, rect.x + rect.width / 2 - width / 2, rect.y + rect.height / 2 - 10, 20, ink)

    # Public drawing ----------------------------------------------------------

    def draw(self, game: Game, mouse_pos: Sequence[float], elapsed: float) -> None:
        """Draw the whole frame for the game's current state."""
        self.surface.fill(BLACK[:3])
        state = game.state
        if state is GameState.MAIN_MENU:
            self._main_menu(game, mouse_pos, elapsed)
        elif state is GameState.SHIP_PLACEMENT:
            self._ship_placement(game, mouse_pos)
        elif state in _GAMEPLAY_STATES:
            self._gameplay(game, mouse_pos, elapsed)
        elif state is GameState.GAME_OVER:
            self._gameplay(game, mouse_pos, elapsed)
            self._game_over(game)
        elif state is GameState.SETTINGS:
            self._settings(game)
        self.draw_particles(game.particles)

    def draw_board(
        self,
        board: Board,
        offset_x: int,
        hide_ships: bool,
        mouse_pos: Sequence[float],
    ) -> None:
        """Draw a board's frame, cells, its ships unless hidden, and the coordinate labels."""
        span = GRID_SIZE * CELL_SIZE
        self._rect((offset_x - 5, BOARD_OFFSET_Y - 5, span + 10, span + 10), DARKBLUE)

        mouse = (int(mouse_pos[0]), int(mouse_pos[1]))
        for x, column in enumerate(board.grid):
            for y, state in enumerate(column):
                cell = _cell_rect(offset_x, x, y)
                self._rect(cell, BLUE)
                if state is CellState.SHIP:
                    if not hide_ships:
                        ship = board.ship_at(x, y)
                        if ship is not None:
                            self._rect(cell, ship.color)
                            self._rect(cell, BLACK, width=2)
                elif state is CellState.HIT:
                    self._rect(cell, RED)
                    self._text("X", cell.x + CELL_SIZE // 3, cell.y + CELL_SIZE // 3, 20, WHITE)
                elif state is CellState.MISS:
                    self._circle(
                        (cell.x + CELL_SIZE // 2, cell.y + CELL_SIZE // 2), 5, WHITE
                    )
                elif state is CellState.SINKING:
                    self._rect(cell, ORANGE)
                    self._text("~", cell.x + CELL_SIZE // 3, cell.y + CELL_SIZE // 3, 20, WHITE)

                if not hide_ships and cell.collidepoint(mouse):
                    self._rect(cell, YELLOW, width=3)

        for x in range(GRID_SIZE):
            self._text(
                chr(ord("A") + x),
                offset_x + x * CELL_SIZE + CELL_SIZE // 3,
                BOARD_OFFSET_Y - 30,
                20,
                WHITE,
            )
        for y in range(GRID_SIZE):
            self._text(
                str(y + 1),
                offset_x - 30,
                BOARD_OFFSET_Y + y * CELL_SIZE + CELL_SIZE // 3,
                20,
                WHITE,
            )

    def draw_particles(self, particles: ParticleSystem) -> None:
        """Draw fading particles and rising, fading text labels."""
        for p in particles.particles:
            self._circle(p.position, p.size, _with_alpha(p.color, p.alpha))
        for anim in particles.animations:
            x, y = anim.position
            self._text(
                anim.text,
                int(x),
                int(y + anim.y_offset),
                20,
                _with_alpha(anim.color, anim.alpha),
            )

    # Screens -----------------------------------------------------------------

    def _main_menu(self, game: Game, mouse_pos: Sequence[float], elapsed: float) -> None:
        self._gradient(DARKBLUE, MAROON)

        scale = 1.0 + 0.1 * math.sin(elapsed * 2)
        self._text("BATTLESHIP", SCREEN_WIDTH / 2 - 200, 100, int(60 * scale), GOLD)
        self._text("ULTIMATE EDITION", SCREEN_WIDTH / 2 - 120, 170, 20, LIGHTGRAY)
        self._text(f"PLAYER LEVEL: {game.player_level}", 50, 50, 20, GOLD)

        mx, my = mouse_pos
        buttons = (
            (PLAY_BUTTON, "PLAY vs AI"),
            (PVP_BUTTON, "PLAYER vs PLAYER"),
            (SETTINGS_BUTTON, "SETTINGS"),
            (QUIT_BUTTON, "QUIT"),
        )
        for index, (button, label) in enumerate(buttons):
            highlighted = game.selected_menu_item == index or button.contains(mx, my)
            self._button(button, label, highlighted)

        self._text("AI DIFFICULTY:", SCREEN_WIDTH / 2 - 80, 650, 20, WHITE)
        for index, name in enumerate(DIFFICULTY_NAMES):
            color = YELLOW if index == game.selected_difficulty else LIGHTGRAY
            self._text(name, SCREEN_WIDTH / 2 - 60 + index * 80, 680, 16, color)

        self._text("Use ARROW KEYS and ENTER to navigate", 50, SCREEN_HEIGHT - 60, 16, RAYWHITE)
        self._text("Press Backspace to return to menu", 50, SCREEN_HEIGHT - 40, 16, RAYWHITE)

    def _ship_placement(self, game: Game, mouse_pos: Sequence[float]) -> None:
        self.surface.fill(DARKBLUE[:3])
        self._text("SHIP PLACEMENT", SCREEN_WIDTH / 2 - 120, 50, 30, WHITE)

        ship = game.current_ship
        if ship is not None:
            self._text(
                f"Place your {ShipType(ship.type).label} (Size: {ship.size})",
                50,
                100,
                20,
                WHITE,
            )

        self.draw_board(game.player_board, BOARD_OFFSET_X, False, mouse_pos)

        if ship is not None:
            gx, gy = _mouse_cell(BOARD_OFFSET_X, mouse_pos)
            if in_grid(gx, gy):
                vertical = game.placement_mode is PlacementMode.VERTICAL
                fits = game.player_board.can_place_ship(gx, gy, ship.size, vertical)
                preview = _with_alpha(GREEN if fits else RED, 0.5)
                for i in range(ship.size):
                    x, y = (gx, gy + i) if vertical else (gx + i, gy)
                    if in_grid(x, y):
                        self._rect(_cell_rect(BOARD_OFFSET_X, x, y), preview)

        self._text("Left Click: Place Ship", 50, SCREEN_HEIGHT - 120, 16, RAYWHITE)
        self._text("R/Space: Rotate Ship", 50, SCREEN_HEIGHT - 100, 16, RAYWHITE)
        self._text("A: Auto-place remaining ships", 50, SCREEN_HEIGHT - 80, 16, RAYWHITE)
        self._text(
            f"Orientation: {game.placement_mode.name}", 50, SCREEN_HEIGHT - 60, 16, YELLOW
        )
        self._text(
            f"Ships placed: {game.current_ship_index}/5", SCREEN_WIDTH - 200, 100, 16, RAYWHITE
        )

    def _gameplay(self, game: Game, mouse_pos: Sequence[float], elapsed: float) -> None:
        self._gradient(BLUE, BLACK, 0.3)
        self._text("BATTLESHIP WARFARE", SCREEN_WIDTH / 2 - 150, 20, 30, GOLD)

        left = BOARD_OFFSET_X
        right = BOARD_OFFSET_X + BOARD_SPACING
        label_y = BOARD_OFFSET_Y - 60
        pvp = game.game_mode is GameMode.PVP

        if pvp:
            if game.state is GameState.PLAYER1_TURN:
                self._text("YOUR FLEET (PLAYER 1)", left, label_y, 20, WHITE)
                self.draw_board(game.player_board, left, False, mouse_pos)
                self._text("PLAYER 2 FLEET", right, label_y, 20, WHITE)
                self.draw_board(game.computer_board, right, True, mouse_pos)
            elif game.state is GameState.PLAYER2_TURN:
                self._text("PLAYER 1 FLEET", left, label_y, 20, WHITE)
                self.draw_board(game.player_board, left, True, mouse_pos)
                self._text("YOUR FLEET (PLAYER 2)", right, label_y, 20, WHITE)
                self.draw_board(game.computer_board, right, False, mouse_pos)
        else:
            self._text("YOUR FLEET", left, label_y, 20, WHITE)
            self.draw_board(game.player_board, left, False, mouse_pos)
            self._text("AI FLEET", right, label_y, 20, WHITE)
            self.draw_board(game.computer_board, right, True, mouse_pos)

        self._game_info(game)

        bottom = SCREEN_HEIGHT - 60
        hint = SCREEN_HEIGHT - 40
        if game.state is GameState.PLAYER1_TURN:
            turn_text = "PLAYER 1 TURN" if pvp else "YOUR TURN"
            self._text(turn_text, SCREEN_WIDTH / 2 - 100, bottom, 20, GREEN)
            self._text("Click to attack!", SCREEN_WIDTH / 2 - 80, hint, 16, LIGHTGRAY)
        elif game.state is GameState.PLAYER2_TURN:
            self._text("PLAYER 2 TURN", SCREEN_WIDTH / 2 - 100, bottom, 20, BLUE)
            self._text("Click to attack!", SCREEN_WIDTH / 2 - 80, hint, 16, LIGHTGRAY)
        elif game.state is GameState.AI_TURN:
            self._text("AI THINKING...", SCREEN_WIDTH / 2 - 80, bottom, 20, RED)
            dots = int(elapsed * 3) % 4
            self._text("Computing" + "." * dots, SCREEN_WIDTH / 2 - 60, hint, 16, LIGHTGRAY)

    def _game_info(self, game: Game) -> None:
        panel = pygame.Rect(SCREEN_WIDTH - 180, 280, 160, 320)
        radius = _radius(panel, 0.1)
        self._rect(panel, _with_alpha(RED, 0.8), radius)
        self._rect(panel, DARKGRAY, radius, width=1)

        x = panel.x + 20
        y = panel.y + 20
        self._text("GAME INFO", x, y, 18, RAYWHITE)
        y += 30
        self._text(f"Level: {game.player_level}", x, y, 14, GOLD)
        y += 20
        self._text(f"Time: {format_clock(game.game_timer)}", x, y, 14, LIGHTGRAY)
        y += 20
        self._text(f"Shots: {game.shot_count}", x, y, 14, LIGHTGRAY)
        y += 20
        self._text(f"Hits: {game.player_hits}", x, y, 14, LIGHTGRAY)
        y += 20
        if game.shot_count > 0:
            accuracy = game.player_hits / game.shot_count * 100
            self._text(f"Accuracy: {accuracy:.1f}%", x, y, 14, LIGHTGRAY)
        y += 30

        self._text("CONTROLS:", x, y, 16, YELLOW)
        y += 25
        self._text("ESC - Menu", x, y, 12, LIGHTGRAY)
        y += 20

        self._text("FLEET STATUS:", x, y, 16, YELLOW)
        y += 25
        for ship_type in ShipType:
            self._text(f"{ship_type.label}: OK", x, y, 10, GREEN)
            y += 15

    def _game_over(self, game: Game) -> None:
        panel = pygame.Rect(SCREEN_WIDTH // 2 - 200, SCREEN_HEIGHT // 2 - 100, 400, 200)
        radius = _radius(panel, 0.2)
        self._rect(panel, _with_alpha(BLACK, 0.9), radius)
        self._rect(panel, GOLD, radius, width=1)

        pvp = game.game_mode is GameMode.PVP
        if game.winner == 1:
            text = "PLAYER 1 WINS!" if pvp else "VICTORY!"
            color = GREEN
        else:
            text = "PLAYER 2 WINS!" if pvp else "DEFEAT!"
            color = RED

        width = self._measure(text, 30)
        cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
        self._text(text, cx - width // 2, cy - 50, 30, color)
        self._text(f"Game Time: {format_clock(game.game_timer)}", cx - 80, cy - 10, 16, WHITE)
        self._text(f"Total Shots: {game.shot_count}", cx - 60, cy + 10, 16, WHITE)
        self._text("R - Play Again", cx - 60, cy + 40, 16, YELLOW)
        self._text("M - Main Menu", cx - 60, cy + 60, 16, YELLOW)

    def _settings(self, game: Game) -> None:
        self.surface.fill(DARKBLUE[:3])
        self._text("SETTINGS", SCREEN_WIDTH / 2 - 80, 100, 30, WHITE)
        self._text("Sound Effects: Enabled", 200, 200, 20, WHITE)
        self._text("AI Difficulty:", 200, 250, 20, WHITE)
        for index, name in enumerate(DIFFICULTY_NAMES):
            color = YELLOW if index == game.selected_difficulty else LIGHTGRAY
            self._text(name, 400 + index * 100, 250, 20, color)
        self._text("Grid Size: 10x10 (Fixed)", 200, 300, 20, WHITE)
        self._text("Ship Count: 5 (Fixed)", 200, 350, 20, WHITE)
        self._text("Controls:", 200, 450, 20, YELLOW)
        self._text("S - Toggle Sound", 220, 480, 16, WHITE)
        self._text("UP/DOWN - Change Difficulty", 220, 500, 16, WHITE)
        self._text("Backspace - Return to Menu", 220, 520, 16, WHITE)