import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from fleetstrike.app import _translate_key, main
from fleetstrike.game import Key
from fleetstrike.stats import GameStats, load_stats


def test_runs_a_few_frames_and_saves_fresh_stats(tmp_path):
    path = tmp_path / "stats.bin"
    assert main(["--stats", str(path), "--frames", "3"]) == 0
    assert path.exists()
    assert load_stats(path) == GameStats()


def test_existing_stats_are_kept(tmp_path):
    path = tmp_path / "stats.bin"
    stored = GameStats(games_played=4, player_wins=2, ai_wins=2, total_shots=80, total_hits=30)
    stored.refresh_level()
    path.write_bytes(stored.to_bytes())

    assert main(["--stats", str(path), "--frames", "2"]) == 0
    reloaded = load_stats(path)
    assert reloaded.games_played == stored.games_played
    assert reloaded.player_level == stored.player_level
    assert reloaded.total_hits == stored.total_hits


def test_bad_frame_count_is_rejected():
    with pytest.raises(SystemExit):
        main(["--frames", "many"])


@pytest.mark.parametrize(
    ("pygame_key", "expected"),
    [
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_r, Key.R),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_a, Key.A),
        (pygame.K_m, Key.M),
        (pygame.K_BACKSPACE, Key.BACKSPACE),
    ],
)
def test_translate_key(pygame_key, expected):
    assert _translate_key(pygame_key) is expected


def test_unmapped_key_is_ignored():
    assert _translate_key(pygame.K_z) is None