"""Window and event loop that run the game."""

from __future__ import annotations

import argparse
import itertools
import logging
from collections.abc import Iterable, Sequence

import pygame

from .core import SCREEN_HEIGHT, SCREEN_WIDTH
from .game import Game, Key
from .render import Renderer
from .stats import STATS_FILE

TITLE = "Battleship - Ultimate Edition"

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_r: Key.R,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_m: Key.M,
    pygame.K_BACKSPACE: Key.BACKSPACE,
}


def _translate_key(pygame_key: int) -> Key | None:
    return _KEYS.get(pygame_key)


def _frames(limit: int | None) -> Iterable[int]:
    return itertools.count() if limit is None else range(limit)


def _handle_events(game: Game) -> bool:
    """Feed pending events to the game; return False once the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            # Escape closes the window.
            if event.key == pygame.K_ESCAPE:
                return False
            key = _translate_key(event.key)
            if key is not None:
                game.handle_key(key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            game.handle_click(*event.pos)
    return True


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleetstrike", description="Play Battleship against the computer or a friend."
    )
    parser.add_argument("--stats", default=STATS_FILE, help="statistics file to use")
    parser.add_argument("--fps", type=int, default=60, help="target frame rate")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        renderer = Renderer(screen)
        clock = pygame.time.Clock()
        with Game(args.stats) as game:
            for _ in _frames(args.frames):
                if not _handle_events(game):
                    break
                dt = clock.tick(args.fps) / 1000.0
                game.update(dt)
                renderer.draw(game, pygame.mouse.get_pos(), pygame.time.get_ticks() / 1000.0)
                pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())