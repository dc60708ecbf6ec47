"""Game engine for a turn-based dungeon crawler: levels, units, turn rules, configuration and storage."""

__version__ = "0.1.0"