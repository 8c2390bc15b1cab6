"""Rules of a turn-based dungeon crawl: dice, tables, timed effects, pursuit, combat and messages."""

__version__ = "0.1.0"