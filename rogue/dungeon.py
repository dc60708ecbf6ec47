"""A dungeon level: rooms, passages, exit, player, items and enemies."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from rogue.common import MAX_ROOM_COUNT, Coords, TileType
from rogue.corridors import Corridor, Passage, generate_room_connections
from rogue.items import Item, Weapon
from rogue.rooms import Room, Visibility, generate_room


class TileNotFoundError(LookupError):
    """Raised when no tile exists at the requested coordinates."""

    def __init__(self, coords: Coords) -> None:
        super().__init__(f"no tile found at coordinates ({coords.x}, {coords.y})")
        self.coords = coords


def is_coord_in_room(coords: Coords, room: Room) -> bool:
    """True if the coordinates lie within the room's interior."""
    return (
        room.x < coords.x <= room.x + room.floor_width()
        and room.y < coords.y <= room.y + room.floor_height()
    )


def is_coord_in_wall(coords: Coords, room: Room) -> bool:
    """True if the coordinates lie on the room's perimeter."""
    in_rows = room.y <= coords.y < room.y + room.height
    in_cols = room.x <= coords.x < room.x + room.width
    left = coords.x == room.x and in_rows
    right = coords.x == room.x + room.width - 1 and in_rows
    top = coords.y == room.y and in_cols
    bottom = coords.y == room.y + room.height - 1 and in_cols
    return left or right or top or bottom


def is_coord_in_corridor(coords: Coords, corridor: Corridor) -> bool:
    """True if the coordinates lie on a straight corridor."""
    begin, end = corridor.begin, corridor.end
    if begin.y == end.y:
        low, high = sorted((begin.x, end.x))
        return coords.y == begin.y and low <= coords.x <= high
    if begin.x == end.x:
        low, high = sorted((begin.y, end.y))
        return coords.x == begin.x and low <= coords.y <= high
    return False


def _default_rooms() -> list[Room]:
    return [Room() for _ in range(MAX_ROOM_COUNT)]


@dataclass
class Dungeon:
    """One level of the dungeon."""

    rooms: list[Room] = field(default_factory=_default_rooms)
    passages: list[Passage] = field(default_factory=list)
    exit: Coords = Coords()
    player: Any = None
    level_number: int = 0
    items: list[Item] = field(default_factory=list)
    enemies: list[Any] = field(default_factory=list)
    event_data: list[str] = field(default_factory=list)

    def tile_from_entities(self, coords: Coords) -> Optional[TileType]:
        """Tile given by an item or enemy at the coordinates, if any."""
        tile = self.tile_from_items(coords)
        if tile is not None:
            return tile
        if any(enemy.coords == coords for enemy in self.enemies):
            return TileType.ENEMY
        return None

    def tile_from_items(self, coords: Coords) -> Optional[TileType]:
        """Tile given by an item at the coordinates, if any."""
        if any(item.coords == coords for item in self.items):
            return TileType.ITEM
        return None

    def tile_from_rooms(self, coords: Coords) -> Optional[TileType]:
        """Floor, wall or door tile of a room at the coordinates, if any."""
        for room in self.rooms:
            if is_coord_in_room(coords, room):
                return TileType.FLOOR
            if is_coord_in_wall(coords, room):
                return TileType.DOOR if coords in room.doors else TileType.WALL
        return None

    def tile_from_passages(self, coords: Coords) -> Optional[TileType]:
        """Corridor tile at the coordinates, if any."""
        for passage in self.passages:
            if any(is_coord_in_corridor(coords, c) for c in passage.path):
                return TileType.CORRIDOR
        return None

    def _is_player_at(self, coords: Coords) -> bool:
        return self.player is not None and self.player.coords == coords

    def _resolve(self, coords: Coords, *sources) -> TileType:
        if coords == self.exit:
            return TileType.FINISH
        if self._is_player_at(coords):
            return TileType.PLAYER
        for source in sources:
            tile = source(coords)
            if tile is not None:
                return tile
        raise TileNotFoundError(coords)

    def tile(self, coords: Coords) -> TileType:
        """Return the tile at the coordinates.

        Raises TileNotFoundError when nothing is there.
        """
        return self._resolve(
            coords, self.tile_from_entities, self.tile_from_rooms, self.tile_from_passages
        )

    def tile_or_unknown(self, coords: Coords) -> TileType:
        """Return the tile at the coordinates, or UNKNOWN when nothing is there."""
        try:
            return self.tile(coords)
        except TileNotFoundError:
            return TileType.UNKNOWN

    def tile_under_enemy(self, coords: Coords) -> TileType:
        """Return the tile at the coordinates, ignoring enemies.

        Raises TileNotFoundError when nothing is there.
        """
        return self._resolve(
            coords, self.tile_from_items, self.tile_from_rooms, self.tile_from_passages
        )

    def player_coords(self) -> Coords:
        """Current position of the player."""
        return self.player.coords

    def free_coords(self) -> list[Coords]:
        """All floor coordinates of all rooms."""
        return [
            Coords(room.x + dx, room.y + dy)
            for room in self.rooms
            for dy in range(1, room.height - 1)
            for dx in range(1, room.width - 1)
        ]

    def current_room(self) -> Optional[Room]:
        """The room whose floor the player stands on, if any."""
        pos = self.player_coords()
        return next((room for room in self.rooms if room.contains(pos)), None)

    def current_room_with_walls(self) -> Optional[Room]:
        """The room whose floor or walls the player stands on, if any."""
        pos = self.player_coords()
        return next((room for room in self.rooms if room.contains_include_walls(pos)), None)

    def find_drop_position(self) -> Optional[Coords]:
        """The nearest floor tile within two steps of the player, if any."""
        center = self.player_coords()
        best: Optional[Coords] = None
        best_dist = float("inf")
        for dx in range(-2, 3):
            for dy in range(-2, 3):
                pos = Coords(center.x + dx, center.y + dy)
                if self.tile_or_unknown(pos) == TileType.FLOOR:
                    dist = abs(dx) + abs(dy)
                    if dist < best_dist:
                        best_dist = dist
                        best = pos
        return best

    def add_item_to_nearest_position(self, weapon: Weapon) -> bool:
        """Place a copy of the weapon on the nearest free floor tile."""
        drop = self.find_drop_position()
        if drop is None:
            return False
        self.items.append(dataclasses.replace(weapon, coords=drop))
        return True

    def update_visible_rooms_status(self) -> None:
        """Set each room's fog according to where the player stands."""
        pos = self.player_coords()
        for room in self.rooms:
            room.visible = Visibility.FOG_CLEAN if room.contains(pos) else Visibility.FOG_COVERED
            for door in room.doors:
                if door != pos:
                    continue
                left = self.tile_or_unknown(Coords(pos.x - 1, pos.y))
                right = self.tile_or_unknown(Coords(pos.x + 1, pos.y))
                if left == TileType.WALL and right == TileType.WALL:
                    room.visible = Visibility.VERTICAL_FOG
                else:
                    room.visible = Visibility.HORIZONTAL_FOG

    def is_exit(self) -> bool:
        """True if the player stands on the exit."""
        return self.player_coords() == self.exit

    def current_passage(self) -> Optional[Passage]:
        """The passage the player stands in, if any."""
        pos = self.player_coords()
        return next((p for p in self.passages if p.contains(pos)), None)

    def update_visible_area(self) -> None:
        """Mark the room or corridor under the player as visited."""
        pos = self.player_coords()
        for room in self.rooms:
            if is_coord_in_room(pos, room) or is_coord_in_wall(pos, room):
                room.visited = True
        for passage in self.passages:
            for corridor in passage.path:
                if is_coord_in_corridor(pos, corridor):
                    corridor.visited = True

    def update(self) -> None:
        """Refresh visited areas and fog of war."""
        self.update_visible_area()
        self.update_visible_rooms_status()

    def add_event_data(self, data: str) -> None:
        """Append a message for the event log."""
        self.event_data.append(data)

    def clear_event_data(self) -> None:
        """Remove all messages from the event log."""
        self.event_data = []

    def replace_event_data(self, data: str) -> None:
        """Replace the event log with a single message."""
        self.clear_event_data()
        self.add_event_data(data)


def generate_dungeon() -> Dungeon:
    """Generate a level with rooms, passages and an exit, without a player."""
    rooms = [generate_room(i) for i in range(MAX_ROOM_COUNT)]
    passages, exit_point = generate_room_connections(rooms)
    return Dungeon(rooms=rooms, passages=passages, exit=exit_point)


def new_dungeon(player: Any) -> Dungeon:
    """Generate a level and place the given player in it."""
    dungeon = generate_dungeon()
    dungeon.player = player
    return dungeon