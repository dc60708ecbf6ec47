"""Rooms of a dungeon level and their random generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from rogue.common import (
    MAX_ROOM_HEIGHT,
    MAX_ROOM_WIDTH,
    MIN_ROOM_DISTANCE,
    MIN_ROOM_HEIGHT,
    MIN_ROOM_WIDTH,
    ROOMS_IN_COLUMN,
    ROOMS_IN_ROW,
    Coords,
    Size,
)


class RoomType(IntEnum):
    """Role of a room on the level."""

    PLAIN = 0
    START = 1
    END = 2


class Visibility(IntEnum):
    """How much of a room is covered by the fog of war."""

    FOG_COVERED = 0
    FOG_CLEAN = 1
    VERTICAL_FOG = 2
    HORIZONTAL_FOG = 3


@dataclass
class Room:
    """A rectangle whose upper-left corner and size include the walls."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    doors: list[Coords] = field(default_factory=list)
    type: RoomType = RoomType.PLAIN
    visited: bool = False
    visible: Visibility = Visibility.FOG_COVERED

    @property
    def coords(self) -> Coords:
        return Coords(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def floor_width(self) -> int:
        """Interior width, excluding walls."""
        return self.width - 2

    def floor_height(self) -> int:
        """Interior height, excluding walls."""
        return self.height - 2

    def contains(self, coords: Coords) -> bool:
        """True if the coordinates lie on the room's floor."""
        return (
            self.x < coords.x < self.x + self.width - 1
            and self.y < coords.y < self.y + self.height - 1
        )

    def contains_include_walls(self, coords: Coords) -> bool:
        """True if the coordinates lie on the floor or the walls."""
        return (
            self.x <= coords.x <= self.x + self.width - 1
            and self.y <= coords.y <= self.y + self.height - 1
        )


def generate_room(number: int) -> Room:
    """Create a randomly sized room placed inside grid cell number."""
    col = number % ROOMS_IN_ROW
    row = number // ROOMS_IN_COLUMN

    height = random.randrange(MAX_ROOM_HEIGHT - MIN_ROOM_HEIGHT + 1) + MIN_ROOM_HEIGHT
    width = random.randrange(MAX_ROOM_WIDTH - MIN_ROOM_WIDTH + 1) + MIN_ROOM_WIDTH

    cell_x = col * (MAX_ROOM_WIDTH + MIN_ROOM_DISTANCE)
    cell_y = row * (MAX_ROOM_HEIGHT + MIN_ROOM_DISTANCE)

    x = cell_x + random.randrange(MAX_ROOM_WIDTH - width + 1)
    y = cell_y + random.randrange(MAX_ROOM_HEIGHT - height + 1)
    return Room(x=x, y=y, width=width, height=height)


def generate_exit_point(room: Room) -> Coords:
    """Pick an exit point on the floor, not touching the walls.

    Raises ValueError when the room is too small to hold one.
    """
    min_x, min_y = room.x + 1, room.y + 1
    max_x, max_y = room.x + room.width - 2, room.y + room.height - 2
    x = random.randrange(max_x - min_x - 1) + min_x + 1
    y = random.randrange(max_y - min_y - 1) + min_y + 1
    return Coords(x, y)