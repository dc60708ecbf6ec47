"""Shared unit attributes, movement directions and combat arithmetic."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

from rogue.common import Coords
from rogue.rooms import Room

BASE_AGILITY = 0.5
MIN_AGILITY = 0.1
MAX_AGILITY = 0.9
AGILITY_STEP = 0.05

# How much maximum health a vampire may drain with one hit.
MIN_TAKEN_MAX_HEALTH = 1
MAX_TAKEN_MAX_HEALTH = 3


class Direction(IntEnum):
    """Cardinal movement directions."""

    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3


class AngleDirection(IntEnum):
    """Diagonal movement directions."""

    DOWN_LEFT = 0
    UP_LEFT = 1
    UP_RIGHT = 2
    DOWN_RIGHT = 3


@dataclass
class Unit:
    """A living entity with health, agility, strength and a position."""

    health: int = 0
    agility: int = 0
    strength: int = 0
    coords: Coords = Coords()
    in_battle: bool = False
    first_hit_miss: bool = False
    skip_next_turn: bool = False

    def is_dead(self) -> bool:
        """True once health has dropped to zero or below."""
        return self.health <= 0


def chance_to_hit(attacker: Unit, defender: Unit) -> float:
    """Probability of the attacker hitting, clamped to the allowed range."""
    base = BASE_AGILITY + (attacker.agility - defender.agility) * AGILITY_STEP
    return min(max(base, MIN_AGILITY), MAX_AGILITY)


def is_hit_successful(attacker: Unit, defender: Unit) -> bool:
    """Roll for a hit; a pending first-hit miss on the defender is consumed."""
    if defender.first_hit_miss:
        defender.first_hit_miss = False
        return False
    return random.random() < chance_to_hit(attacker, defender)


def calculate_damage(attacker) -> int:
    """Damage dealt by a fighter: its strength plus any weapon in hand."""
    damage = attacker.current_strength()
    weapon = getattr(attacker, "current_weapon", None)
    if weapon is not None:
        damage += weapon.strength
    return damage


def apply_damage(target: Unit, damage: int) -> None:
    """Reduce the target's health, never below zero."""
    target.health = max(target.health - damage, 0)


def find_room_by_coords(coords: Coords, rooms: Iterable[Room]) -> Optional[Room]:
    """The room whose floor holds the coordinates, or None."""
    return next((room for room in rooms if room.contains(coords)), None)