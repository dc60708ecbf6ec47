"""The player's backpack with a limited number of slots per item kind."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from rogue.items import Elixir, Food, Item, ItemType, Scroll, Weapon

MAX_ITEMS = 9


@dataclass
class Inventory:
    """All items and treasure the player carries."""

    weapons: list[Weapon] = field(default_factory=list)
    elixirs: list[Elixir] = field(default_factory=list)
    scrolls: list[Scroll] = field(default_factory=list)
    foods: list[Food] = field(default_factory=list)
    treasure: int = 0

    def _slot_for_type(self, item_type: ItemType) -> list | None:
        return {
            ItemType.WEAPON: self.weapons,
            ItemType.ELIXIR: self.elixirs,
            ItemType.SCROLL: self.scrolls,
            ItemType.FOOD: self.foods,
        }.get(item_type)

    def _slot_for_instance(self, item: Item) -> list | None:
        for cls, slot in (
            (Weapon, self.weapons),
            (Elixir, self.elixirs),
            (Scroll, self.scrolls),
            (Food, self.foods),
        ):
            if isinstance(item, cls):
                return slot
        return None

    def add(self, item: Item) -> bool:
        """Store a copy of the item; return False if its slot is full."""
        slot = self._slot_for_type(item.item_type())
        if slot is None:
            return True
        if len(slot) >= MAX_ITEMS:
            return False
        slot.append(copy.copy(item))
        return True

    def delete(self, item: Item) -> bool:
        """Remove the first stored item equal to the given one."""
        slot = self._slot_for_instance(item)
        if slot is None:
            return False
        for index, stored in enumerate(slot):
            if stored is item or stored == item:
                del slot[index]
                return True
        return False