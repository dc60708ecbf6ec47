"""Enemies: their kinds, combat behaviour and choice of movement strategy."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from rogue.character import Character
from rogue.common import Coords, TileType, random_in_range
from rogue.dungeon import TileNotFoundError, is_coord_in_room
from rogue.movers import (
    EnemyMover,
    GhostMoving,
    NonMoving,
    OgrMoving,
    PursuingMoving,
    SnakeWizardMoving,
)
from rogue.units import (
    MAX_TAKEN_MAX_HEALTH,
    MIN_TAKEN_MAX_HEALTH,
    Unit,
    apply_damage,
    calculate_damage,
    find_room_by_coords,
    is_hit_successful,
)

# Proportions used when computing the treasure an enemy carries.
TREASURE_FACTOR_ANIMOSITY = 0.2
TREASURE_FACTOR_STRENGTH = 0.2
TREASURE_FACTOR_AGILITY = 0.2
TREASURE_FACTOR_HEALTH = 0.2

SNAKE_WIZARD_SLEEP_CHANCE = 0.3

# Search order of the path finder: up, down, left, right.
_SEARCH_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_PASSABLE_TILES = frozenset({TileType.FLOOR, TileType.DOOR, TileType.CORRIDOR})


class EnemyType(IntEnum):
    """Kinds of enemies."""

    ZOMBIE = 0
    VAMPIRE = 1
    GHOST = 2
    OGR = 3
    SNAKE_WIZARD = 4


ENEMY_NAMES = {
    EnemyType.ZOMBIE: "Zombie",
    EnemyType.VAMPIRE: "Vampire",
    EnemyType.GHOST: "Ghost",
    EnemyType.OGR: "Ogr",
    EnemyType.SNAKE_WIZARD: "Snake-Wizard",
}


def default_mover_for(enemy_type: EnemyType) -> EnemyMover:
    """The movement strategy an enemy of this kind uses when calm."""
    movers = {
        EnemyType.GHOST: GhostMoving,
        EnemyType.SNAKE_WIZARD: SnakeWizardMoving,
        EnemyType.OGR: OgrMoving,
    }
    return movers.get(EnemyType(enemy_type), NonMoving)()


@dataclass
class Enemy(Unit):
    """A monster with its kind, aggression, visibility and movement."""

    enemy_type: EnemyType = EnemyType.ZOMBIE
    animosity: int = 0
    visibility: bool = True
    mover: Optional[EnemyMover] = None
    default_mover: Optional[EnemyMover] = None
    is_pursuing: bool = False
    treasure: int = 0

    def __post_init__(self) -> None:
        self.enemy_type = EnemyType(self.enemy_type)
        if self.default_mover is None:
            self.default_mover = default_mover_for(self.enemy_type)
        if self.mover is None:
            self.mover = self.default_mover

    @property
    def name(self) -> str:
        """Display name of the enemy's kind."""
        return ENEMY_NAMES[self.enemy_type]

    def apply_effect(self, target) -> None:
        """Apply the special effect of this enemy's hit to the target."""
        if not isinstance(target, Character):
            return
        if self.enemy_type == EnemyType.VAMPIRE:
            stolen = random_in_range(MIN_TAKEN_MAX_HEALTH, MAX_TAKEN_MAX_HEALTH)
            target.max_health = max(target.max_health - stolen, 0)
            target.health = min(target.health, target.max_health)
        elif self.enemy_type == EnemyType.SNAKE_WIZARD:
            if random.random() < SNAKE_WIZARD_SLEEP_CHANCE:
                target.skip_next_turn = True

    def current_strength(self) -> int:
        """The enemy's current strength."""
        return self.strength

    def hit_character(self, character: Character) -> bool:
        """Attack the character; ogres always hit. Return whether it hit."""
        hit = is_hit_successful(self, character)
        if not (hit or self.enemy_type == EnemyType.OGR):
            return False
        damage = calculate_damage(self)
        if self.enemy_type != EnemyType.VAMPIRE:
            apply_damage(character, damage)
        self.apply_effect(character)
        character.stats.hits_missed += 1
        return True

    def move(self, dungeon) -> None:
        """Choose the movement strategy for this turn and follow it."""
        if self.mover is None:
            return
        self.set_moving_mode(dungeon)
        self.mover.move(self, dungeon)

    def in_room_with_player(self, dungeon) -> bool:
        """True if the enemy and the player stand on the floor of one room."""
        player = dungeon.player_coords()
        room = find_room_by_coords(player, dungeon.rooms)
        return (
            room is not None
            and is_coord_in_room(self.coords, room)
            and is_coord_in_room(player, room)
        )

    def set_moving_mode(self, dungeon) -> None:
        """Decide between pursuing the player, standing still and roaming."""
        try:
            tile = dungeon.tile_under_enemy(self.coords)
        except TileNotFoundError:
            tile = TileType.UNKNOWN
        _, length = self.find_path_to_player(dungeon)
        should_pursue = length != -1 and length <= self.animosity
        if self.is_pursuing and should_pursue:
            self.mover = PursuingMoving()
            return
        if not self.is_pursuing and self.in_room_with_player(dungeon) and should_pursue:
            self.is_pursuing = True
            self.mover = PursuingMoving()
            return
        self.is_pursuing = False
        if tile in (TileType.CORRIDOR, TileType.DOOR):
            self.mover = NonMoving()
        else:
            self.mover = self.default_mover

    def find_path_to_player(self, dungeon) -> tuple[list[Coords], int]:
        """Shortest path to the player by breadth-first search.

        Returns the path without the starting cell, and the number of cells
        on it including the start; ([], -1) when there is no path.
        """
        start = self.coords
        target = dungeon.player_coords()
        if start == target:
            return [], -1
        queue: deque[list[Coords]] = deque([[start]])
        visited = {start}
        while queue:
            path = queue.popleft()
            current = path[-1]
            for dx, dy in _SEARCH_STEPS:
                nxt = Coords(current.x + dx, current.y + dy)
                if nxt.x < 0 or nxt.y < 0 or nxt in visited:
                    continue
                try:
                    tile = dungeon.tile(nxt)
                except TileNotFoundError:
                    continue
                if nxt == target:
                    full = path + [nxt]
                    return full[1:], len(full)
                if tile in _PASSABLE_TILES:
                    visited.add(nxt)
                    queue.append(path + [nxt])
        return [], -1


def new_enemy(enemy_type: EnemyType, x: int = 0, y: int = 0) -> Enemy:
    """Create an enemy of the given kind at the given position."""
    return Enemy(enemy_type=EnemyType(enemy_type), coords=Coords(x, y))