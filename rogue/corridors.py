"""Corridors and passages that connect the rooms of a level."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from rogue.common import MIN_ROOM_DISTANCE, ROOMS_IN_COLUMN, ROOMS_IN_ROW, Coords
from rogue.rooms import Room, RoomType, generate_exit_point


@dataclass
class Corridor:
    """A straight segment of a passage."""

    begin: Coords
    end: Coords
    visited: bool = False

    def contains(self, coords: Coords) -> bool:
        """True if the coordinates lie within the segment's bounding box."""
        low_x, high_x = sorted((self.begin.x, self.end.x))
        low_y, high_y = sorted((self.begin.y, self.end.y))
        return low_x <= coords.x <= high_x and low_y <= coords.y <= high_y


@dataclass
class Passage:
    """A path of corridors connecting two rooms."""

    path: list[Corridor] = field(default_factory=list)

    def contains(self, coords: Coords) -> bool:
        """True if any corridor of the passage contains the coordinates."""
        return any(corridor.contains(coords) for corridor in self.path)

    def _add_corridor(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.path.append(Corridor(Coords(x1, y1), Coords(x2, y2)))


def get_neighbors(index: int) -> list[int]:
    """Return the grid indices of the rooms adjacent to the given one."""
    rows, cols = ROOMS_IN_ROW, ROOMS_IN_COLUMN
    row, col = divmod(index, cols)
    neighbors = []
    if row > 0:
        neighbors.append((row - 1) * cols + col)
    if row < rows - 1:
        neighbors.append((row + 1) * cols + col)
    if col > 0:
        neighbors.append(row * cols + col - 1)
    if col < cols - 1:
        neighbors.append(row * cols + col + 1)
    return neighbors


def get_random_turn_coord(src_wall: int, dst_wall: int) -> int:
    """Pick a turn point between two walls, kept away from both of them.

    Raises ValueError when the walls are too close together.
    """
    coord = random.randrange(dst_wall - src_wall - MIN_ROOM_DISTANCE) + src_wall + 1
    if coord == src_wall + 1:
        coord += 1
    if coord == dst_wall - 1:
        coord -= 1
    return coord


def _random_door_offset(start: int, length: int) -> int:
    low, high = start + 1, start + length - 2
    return random.randrange(high - low) + low


def _horizontal_corridor(src: Room, dst: Room, passage: Passage) -> None:
    src_wall, dst_wall = src.x + src.width - 1, dst.x
    src_y = _random_door_offset(src.y, src.height)
    dst_y = _random_door_offset(dst.y, dst.height)

    src.doors.append(Coords(src_wall, src_y))
    dst.doors.append(Coords(dst_wall, dst_y))

    if src_y == dst_y:
        passage._add_corridor(src_wall + 1, src_y, dst_wall - 1, dst_y)
        return
    turn_x = get_random_turn_coord(src_wall, dst_wall)
    passage._add_corridor(src_wall + 1, src_y, turn_x, src_y)
    passage._add_corridor(turn_x, src_y, turn_x, dst_y)
    passage._add_corridor(turn_x, dst_y, dst_wall - 1, dst_y)


def _vertical_corridor(src: Room, dst: Room, passage: Passage) -> None:
    src_wall, dst_wall = src.y + src.height - 1, dst.y
    src_x = _random_door_offset(src.x, src.width)
    dst_x = _random_door_offset(dst.x, dst.width)

    src.doors.append(Coords(src_x, src_wall))
    dst.doors.append(Coords(dst_x, dst_wall))

    if src_x == dst_x:
        passage._add_corridor(src_x, src_wall + 1, dst_x, dst_wall - 1)
        return
    turn_y = get_random_turn_coord(src_wall, dst_wall)
    passage._add_corridor(src_x, src_wall + 1, src_x, turn_y)
    passage._add_corridor(src_x, turn_y, dst_x, turn_y)
    passage._add_corridor(dst_x, turn_y, dst_x, dst_wall - 1)


def generate_passage(rooms: list[Room], src: int, dest: int) -> Passage:
    """Create a passage between two adjacent rooms, adding a door to each."""
    if dest < src:
        src, dest = dest, src
    passage = Passage()
    cols = ROOMS_IN_COLUMN
    row_src, col_src = divmod(src, cols)
    row_dest, col_dest = divmod(dest, cols)
    if row_src == row_dest:
        _horizontal_corridor(rooms[src], rooms[dest], passage)
    if col_src == col_dest:
        _vertical_corridor(rooms[src], rooms[dest], passage)
    return passage


def _connect_rooms_dfs(index: int, rooms: list[Room], visited: list[bool]) -> list[Passage]:
    visited[index] = True
    passages: list[Passage] = []
    neighbors = get_neighbors(index)
    for neighbor in random.sample(neighbors, len(neighbors)):
        if not visited[neighbor]:
            passages.append(generate_passage(rooms, index, neighbor))
            rooms[neighbor].type = RoomType.PLAIN
            passages.extend(_connect_rooms_dfs(neighbor, rooms, visited))
    return passages


def generate_room_connections(rooms: list[Room]) -> tuple[list[Passage], Coords]:
    """Connect all rooms by a random spanning tree of passages.

    Marks a random start room and a distinct end room, and returns the
    passages together with the exit point placed in the end room.
    """
    visited = [False] * len(rooms)
    start = random.randrange(len(rooms))
    end = random.randrange(len(rooms) - 1)
    if end >= start:
        end += 1

    passages = _connect_rooms_dfs(start, rooms, visited)
    rooms[start].type = RoomType.START
    rooms[start].visited = True
    rooms[end].type = RoomType.END
    return passages, generate_exit_point(rooms[end])