"""The player character."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from rogue.common import Coords, Stats, TileType
from rogue.inventory import Inventory
from rogue.items import Elixir, Food, Item, Scroll, Weapon
from rogue.units import Direction, Unit, apply_damage, calculate_damage, is_hit_successful

GOOD_PLAYER_TILES = frozenset(
    {TileType.FLOOR, TileType.ITEM, TileType.FINISH, TileType.DOOR, TileType.CORRIDOR}
)

_STEPS = {
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
}


def is_walkable_for_player(tile: TileType) -> bool:
    """True if the player may stand on the tile."""
    return tile in GOOD_PLAYER_TILES


def is_possible_player_move(coords: Coords, dungeon) -> bool:
    """True if the player may move onto the coordinates."""
    return is_walkable_for_player(dungeon.tile_or_unknown(coords))


@dataclass
class Character(Unit):
    """The player: combat stats, equipped weapon, backpack and statistics."""

    max_health: int = 0
    current_weapon: Optional[Weapon] = None
    inventory: Inventory = field(default_factory=Inventory)
    stats: Stats = field(default_factory=Stats)

    def current_strength(self) -> int:
        """The character's current strength."""
        return self.strength

    def _shift(self, dx: int, dy: int) -> None:
        self.coords = Coords(self.coords.x + dx, self.coords.y + dy)
        self.stats.cells_passed += 1

    def step(self, direction: Direction, dungeon) -> None:
        """Move one cell in the direction if the target tile is walkable."""
        dx, dy = _STEPS[direction]
        target = Coords(self.coords.x + dx, self.coords.y + dy)
        if is_possible_player_move(target, dungeon):
            self._shift(dx, dy)

    def move_up(self) -> None:
        """Move one cell up unconditionally."""
        self._shift(0, -1)

    def move_down(self) -> None:
        """Move one cell down unconditionally."""
        self._shift(0, 1)

    def move_left(self) -> None:
        """Move one cell left unconditionally."""
        self._shift(-1, 0)

    def move_right(self) -> None:
        """Move one cell right unconditionally."""
        self._shift(1, 0)

    def take_item(self, item: Item) -> None:
        """Put the item in the backpack if there is room."""
        self.inventory.add(item)

    def eat_food(self, food: Food) -> None:
        """Restore health by the food's value, up to the maximum, and consume it."""
        self.health = min(self.health + food.value, self.max_health)
        self.stats.food_eaten += 1
        self.inventory.delete(food)

    def drink_elixir(self, elixir: Elixir) -> None:
        """Apply the elixir's boosts."""
        self.max_health += elixir.max_health
        self.agility += elixir.agility
        self.strength += elixir.strength
        self.stats.elixirs_drunk += 1

    def use_scroll(self, scroll: Scroll) -> None:
        """Apply the scroll's boosts."""
        self.max_health += scroll.max_health
        self.agility += scroll.agility
        self.strength += scroll.strength
        self.stats.scrolls_read += 1

    def hit_enemy(self, enemy) -> tuple[bool, int]:
        """Attack an enemy; return whether it hit and the gold won by a kill."""
        if not is_hit_successful(self, enemy):
            return False, 0
        apply_damage(enemy, calculate_damage(self))
        gold = 0
        if enemy.is_dead():
            gold = enemy.treasure
            self.inventory.treasure += gold
            self.stats.treasures_received += gold
            self.stats.enemies_defeated += 1
        self.stats.hits_made += 1
        return True, gold

    def choose_weapon(self, weapon: Weapon) -> None:
        """Equip the weapon if the hands are empty."""
        if self.current_weapon is None:
            self.current_weapon = weapon
            self.strength += weapon.strength

    def drop_weapon(self, dungeon) -> bool:
        """Drop the equipped weapon onto a nearby floor tile.

        Returns True if the weapon was placed on the map and removed
        from the backpack.
        """
        weapon = self.current_weapon
        if weapon is None:
            return False
        self.strength -= weapon.strength
        self.current_weapon = None
        if dungeon.add_item_to_nearest_position(weapon):
            self.inventory.delete(weapon)
            return True
        return False