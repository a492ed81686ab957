"""Rules of a tile-map puzzle game, with string, memory, line-reading and formatting helpers."""

__version__ = "1.0.0"