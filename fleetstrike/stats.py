"""Lifetime player statistics and their binary file format."""

from __future__ import annotations

import logging
import struct
from dataclasses import astuple, dataclass
from os import PathLike
from pathlib import Path

log = logging.getLogger(__name__)

STATS_FILE = "battleship_stats.bin"
MAX_LEVEL = 50
EXPERIENCE_PER_LEVEL = 5

# Five ints, one float, four ints: little-endian, no padding.
_RECORD = struct.Struct("<5if4i")


@dataclass
class GameStats:
    games_played: int = 0
    player_wins: int = 0
    ai_wins: int = 0
    total_shots: int = 0
    total_hits: int = 0
    avg_accuracy: float = 0.0
    shortest_game: int = 0
    longest_game: int = 0
    player_level: int = 1
    experience: int = 0

    def to_bytes(self) -> bytes:
        """Pack the record into its fixed-size binary form."""
        return _RECORD.pack(*astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> GameStats:
        """Unpack a record; raise ValueError if the size is wrong."""
        if len(data) != _RECORD.size:
            raise ValueError(
                f"stats record must be {_RECORD.size} bytes, got {len(data)}"
            )
        return cls(*_RECORD.unpack(data))

    def refresh_level(self) -> int:
        """Recompute experience and level from games and wins; return the level."""
        self.experience = self.games_played + self.player_wins * 2
        self.player_level = min(MAX_LEVEL, 1 + self.experience // EXPERIENCE_PER_LEVEL)
        return self.player_level


def load_stats(path: str | PathLike[str] = STATS_FILE) -> GameStats:
    """Read statistics from a file; raises FileNotFoundError if it is missing."""
    stats = GameStats.from_bytes(Path(path).read_bytes())
    if stats.player_level < 1:
        stats.player_level = 1
    if stats.experience < 0:
        stats.experience = 0
    stats.refresh_level()
    log.info("Stats loaded from %s", path)
    return stats


def save_stats(stats: GameStats, path: str | PathLike[str] = STATS_FILE) -> None:
    """Write statistics to a file, replacing what was there."""
    Path(path).write_bytes(stats.to_bytes())
    log.info("Stats saved to %s", path)