"""Movement strategies used by enemies when they are not fighting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rogue.common import Coords, TileType, random_bool, random_in_range
from rogue.dungeon import is_coord_in_room
from rogue.rooms import Room
from rogue.units import AngleDirection, Direction, find_room_by_coords

GOOD_ENEMY_TILES = frozenset({TileType.FLOOR})

_MAX_ATTEMPTS = 10

_OGR_JUMPS = {
    Direction.DOWN: (0, 2),
    Direction.LEFT: (-2, 0),
    Direction.UP: (0, -2),
    Direction.RIGHT: (2, 0),
}

_DIAGONALS = {
    AngleDirection.DOWN_LEFT: (-1, 1),
    AngleDirection.UP_LEFT: (-1, -1),
    AngleDirection.UP_RIGHT: (1, -1),
    AngleDirection.DOWN_RIGHT: (1, 1),
}


def is_walkable_for_enemy(tile: TileType) -> bool:
    """True if an enemy may stand on the tile."""
    return tile in GOOD_ENEMY_TILES


def is_possible_enemy_move(coords: Coords, room: Room, dungeon) -> bool:
    """True if an enemy may move onto the coordinates inside the room."""
    if not is_coord_in_room(coords, room):
        return False
    return is_walkable_for_enemy(dungeon.tile_or_unknown(coords))


def _try_offset(enemy, offset: tuple[int, int], room: Room, dungeon) -> bool:
    dx, dy = offset
    target = Coords(enemy.coords.x + dx, enemy.coords.y + dy)
    if is_possible_enemy_move(target, room, dungeon):
        enemy.coords = target
        return True
    return False


class EnemyMover(ABC):
    """Strategy deciding where an enemy goes on its turn."""

    @abstractmethod
    def move(self, enemy, dungeon) -> None:
        """Update the enemy's position within the dungeon."""


@dataclass(frozen=True)
class NonMoving(EnemyMover):
    """Stationary enemies."""

    def move(self, enemy, dungeon) -> None:
        """Leave the enemy where it is."""


@dataclass(frozen=True)
class GhostMoving(EnemyMover):
    """Ghosts teleport around their room and flicker in and out of sight."""

    def move(self, enemy, dungeon) -> None:
        """Teleport to a random free floor tile of the current room."""
        room = find_room_by_coords(enemy.coords, dungeon.rooms)
        if room is None:
            return
        enemy.visibility = random_bool()
        for _ in range(_MAX_ATTEMPTS):
            target = Coords(
                random_in_range(room.x, room.x + room.width - 1),
                random_in_range(room.y, room.y + room.height - 1),
            )
            if is_possible_enemy_move(target, room, dungeon):
                enemy.coords = target
                return


@dataclass(frozen=True)
class OgrMoving(EnemyMover):
    """Ogres jump two tiles in a straight line."""

    def move(self, enemy, dungeon) -> None:
        """Try random two-tile jumps until one lands on free floor."""
        room = find_room_by_coords(enemy.coords, dungeon.rooms)
        if room is None:
            return
        for _ in range(_MAX_ATTEMPTS):
            direction = Direction(random_in_range(Direction.DOWN, Direction.RIGHT))
            if _try_offset(enemy, _OGR_JUMPS[direction], room, dungeon):
                return


@dataclass(frozen=True)
class SnakeWizardMoving(EnemyMover):
    """Snake wizards move diagonally."""

    def move(self, enemy, dungeon) -> None:
        """Try random diagonal steps until one lands on free floor."""
        room = find_room_by_coords(enemy.coords, dungeon.rooms)
        if room is None:
            return
        for _ in range(_MAX_ATTEMPTS):
            direction = AngleDirection(
                random_in_range(AngleDirection.DOWN_LEFT, AngleDirection.DOWN_RIGHT)
            )
            if _try_offset(enemy, _DIAGONALS[direction], room, dungeon):
                return


@dataclass(frozen=True)
class PursuingMoving(EnemyMover):
    """Enemies chasing the player along the shortest path."""

    def move(self, enemy, dungeon) -> None:
        """Step towards the player, or fall back to the default strategy.

        Ghosts, recognised by their default strategy, keep flickering
        while they chase.
        """
        path, _ = enemy.find_path_to_player(dungeon)
        if isinstance(enemy.default_mover, GhostMoving):
            enemy.visibility = random_bool()
        if path:
            next_pos = path[0]
            if dungeon.player_coords() != next_pos:
                enemy.coords = next_pos
            return
        if enemy.default_mover is not None:
            enemy.default_mover.move(enemy, dungeon)