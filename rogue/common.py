"""Shared geometry, tile kinds, player statistics, layout constants and random helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

# Dungeon room layout
MAX_ROOM_COUNT = 9
ROOMS_IN_ROW = 3
ROOMS_IN_COLUMN = 3

WALL_THICKNESS = 1

# Game map dimensions (in characters)
MAP_HEIGHT = 30
MAP_WIDTH = 90

# UI panel dimensions
INFO_HEIGHT = 2
INFO_WIDTH = 90
STATISTIC_HEIGHT = 3
STATISTIC_WIDTH = 90
INVENTORY_HEIGHT = 30
INVENTORY_WIDTH = 90
MAIN_HEIGHT = MAP_HEIGHT + INFO_HEIGHT + STATISTIC_HEIGHT + 1
MAIN_WIDTH = 90

# Room generation constraints
MIN_ROOM_DISTANCE = 3
MIN_ROOM_HEIGHT = 5
MIN_ROOM_WIDTH = 6
MAX_ROOM_HEIGHT = (MAP_HEIGHT - MIN_ROOM_DISTANCE * (ROOMS_IN_COLUMN - 1)) // ROOMS_IN_COLUMN
MAX_ROOM_WIDTH = (MAP_WIDTH - MIN_ROOM_DISTANCE * (ROOMS_IN_ROW - 1)) // ROOMS_IN_ROW


@dataclass(frozen=True)
class Coords:
    """A position on the map."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """Dimensions of a rectangular area."""

    width: int = 0
    height: int = 0


class TileType(IntEnum):
    """Kinds of tiles found on a dungeon level."""

    UNKNOWN = 0
    FLOOR = 1
    WALL = 2
    ITEM = 3
    ENEMY = 4
    FINISH = 5
    DOOR = 6
    PLAYER = 7
    CORRIDOR = 8


@dataclass
class Stats:
    """Statistics collected by the player throughout a game."""

    treasures_received: int = 0
    level_achieved: int = 0
    enemies_defeated: int = 0
    food_eaten: int = 0
    elixirs_drunk: int = 0
    scrolls_read: int = 0
    hits_made: int = 0
    hits_missed: int = 0
    cells_passed: int = 0


def random_bool() -> bool:
    """Return a random boolean."""
    return random.randrange(2) == 0


def random_in_range(low: int, high: int) -> int:
    """Return a random integer between low and high inclusive.

    Raises ValueError when high is below low.
    """
    return random.randrange(high - low + 1) + low