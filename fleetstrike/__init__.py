"""A naval battle board game with computer opponents, two-player play and saved statistics."""

__version__ = "0.1.0"