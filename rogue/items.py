"""Collectible items found in the dungeon."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from rogue.common import Coords


class ItemType(IntEnum):
    """Category of an item."""

    EMPTY = 0
    FOOD = 1
    ELIXIR = 2
    SCROLL = 3
    WEAPON = 4


ITEM_NAMES = {
    ItemType.FOOD: "food",
    ItemType.ELIXIR: "elixir",
    ItemType.SCROLL: "scroll",
    ItemType.WEAPON: "weapon",
}


@dataclass
class Item:
    """Base of every collectible object: a name and a map position."""

    kind: ClassVar[ItemType] = ItemType.EMPTY

    name: str = ""
    coords: Coords = Coords()

    def item_type(self) -> ItemType:
        """Return the item's category."""
        return self.kind

    def info(self) -> str:
        """Return the display name of the item."""
        return self.name


@dataclass
class Weapon(Item):
    """An equippable weapon adding to attack power."""

    kind: ClassVar[ItemType] = ItemType.WEAPON

    strength: int = 0


@dataclass
class Food(Item):
    """A consumable that restores health."""

    kind: ClassVar[ItemType] = ItemType.FOOD

    value: int = 0


@dataclass
class Elixir(Item):
    """A potion that temporarily boosts attributes."""

    kind: ClassVar[ItemType] = ItemType.ELIXIR

    agility: int = 0
    strength: int = 0
    max_health: int = 0
    duration: int = 0
    is_active: bool = False


@dataclass
class Scroll(Item):
    """A magic scroll that temporarily enhances attributes."""

    kind: ClassVar[ItemType] = ItemType.SCROLL

    agility: int = 0
    strength: int = 0
    max_health: int = 0
    duration: int = 0
    is_active: bool = False


def same_weapons(first: Weapon, second: Weapon) -> bool:
    """Return True when two weapons share name and strength."""
    return first.name == second.name and first.strength == second.strength