"""Populating generated dungeon levels from the game configuration."""

from __future__ import annotations

import random
from typing import Iterable, Mapping, Optional, Sequence, Type, Union

from rogue.character import Character
from rogue.common import Coords, random_in_range
from rogue.config import (
    CharacterParams,
    FoodEffects,
    GameConfig,
    ItemEffects,
    LevelConfig,
    Pair,
    WeaponEffects,
)
from rogue.dungeon import Dungeon, generate_dungeon
from rogue.enemy import Enemy, EnemyType, new_enemy
from rogue.items import Elixir, Food, Item, Scroll, Weapon
from rogue.rooms import Room, RoomType, Visibility

_MAX_PLACEMENT_ATTEMPTS = 100

ENEMY_TYPE_NAMES = {
    "zombie": EnemyType.ZOMBIE,
    "vampire": EnemyType.VAMPIRE,
    "ghost": EnemyType.GHOST,
    "ogr": EnemyType.OGR,
    "snake_wizard": EnemyType.SNAKE_WIZARD,
}


def pick_level_config(levels: Sequence[LevelConfig], current: int) -> LevelConfig:
    """The settings whose range holds the level, else the last ones.

    Raises ValueError when there are no level settings at all.
    """
    for level in levels:
        low, high = level.level_range
        if low <= current <= high:
            return level
    if not levels:
        raise ValueError("no level settings configured")
    return levels[-1]


def create_player(params: CharacterParams) -> Character:
    """A new player character with the configured starting attributes."""
    player = Character(
        health=params.health,
        agility=params.agility,
        strength=params.strength,
        max_health=params.max_health,
    )
    player.stats.level_achieved = 1
    return player


def create_enemy(config: GameConfig, enemy_type: str, treasure_range: Pair) -> Enemy:
    """An enemy of the named kind with attributes drawn from its segments.

    Raises ValueError for an unknown kind.
    """
    spec = config.enemies.get(enemy_type)
    try:
        kind = ENEMY_TYPE_NAMES[enemy_type]
    except KeyError:
        raise ValueError(f"unknown enemy type: {enemy_type}") from None
    agility = strength = animosity = health = (0, 0)
    if spec is not None:
        agility = config.enemy_agility.get(spec.enemy_agility, (0, 0))
        strength = config.enemy_strength.get(spec.enemy_strength, (0, 0))
        animosity = config.enemy_animosity.get(spec.enemy_animosity, (0, 0))
        health = config.enemy_health.get(spec.enemy_health, (0, 0))

    enemy = new_enemy(kind)
    enemy.agility = random_in_range(*agility)
    enemy.strength = random_in_range(*strength)
    enemy.animosity = random_in_range(*animosity)
    enemy.health = random_in_range(*health)
    enemy.treasure = random_in_range(*treasure_range)
    return enemy


def generate_enemies(
    config: GameConfig,
    chances: Mapping[str, int],
    count_range: Pair,
    treasure_range: Pair,
) -> list[Enemy]:
    """Random enemies, their kinds weighted by the given chances.

    Raises ValueError when enemies are wanted but no kind has a chance.
    """
    count = random_in_range(*count_range)
    weights = [name for name, chance in chances.items() for _ in range(chance)]
    if count > 0 and not weights:
        raise ValueError("no enemy chances configured")
    return [
        create_enemy(config, random.choice(weights), treasure_range) for _ in range(count)
    ]


def _boost_item(cls: Type[Union[Elixir, Scroll]], effects: ItemEffects) -> Union[Elixir, Scroll]:
    item = cls()
    item.duration = random_in_range(effects.duration[0], effects.duration[1])
    item.is_active = False
    item.name = random.choice(effects.name)
    choice = random.randrange(3)
    if choice == 0:
        item.agility = random_in_range(effects.agility[0], effects.agility[1])
    elif choice == 1:
        item.strength = random_in_range(effects.strength[0], effects.strength[1])
    else:
        item.max_health = random_in_range(effects.max_health[0], effects.max_health[1])
    return item


def create_elixir(effects: ItemEffects) -> Elixir:
    """An elixir boosting one randomly chosen attribute."""
    return _boost_item(Elixir, effects)


def create_scroll(effects: ItemEffects) -> Scroll:
    """A scroll boosting one randomly chosen attribute."""
    return _boost_item(Scroll, effects)


def create_food(effects: FoodEffects) -> Food:
    """Food with a random health value and name."""
    value = random_in_range(effects.health[0], effects.health[1])
    return Food(name=random.choice(effects.name), value=value)


def create_weapon(effects: WeaponEffects) -> Weapon:
    """A weapon with a random name and strength."""
    name = random.choice(effects.name)
    return Weapon(name=name, strength=random_in_range(effects.strength[0], effects.strength[1]))


def generate_items(config: GameConfig, count_range: Pair) -> list[Item]:
    """A random number of random items."""
    makers = (
        lambda: create_elixir(config.elixir),
        lambda: create_scroll(config.scroll),
        lambda: create_food(config.food),
        lambda: create_weapon(config.weapon),
    )
    count = random_in_range(*count_range)
    return [makers[random.randrange(4)]() for _ in range(count)]


def get_random_floor_coord(room: Room) -> Coords:
    """A random position on the room's floor."""
    x = random_in_range(room.x + 1, room.x + room.width - 2)
    y = random_in_range(room.y + 1, room.y + room.height - 2)
    return Coords(x, y)


def get_random_non_special_room(
    rooms: Iterable[Room], start_room: Optional[Room], end_room: Optional[Room]
) -> Room:
    """A random room other than the start and end rooms.

    Falls back to any room but the start one; raises ValueError when none is left.
    """
    rooms = list(rooms)

    def not_start(room: Room) -> bool:
        return start_room is None or room.coords != start_room.coords

    candidates = [
        room
        for room in rooms
        if not_start(room) and (end_room is None or room.coords != end_room.coords)
    ]
    if not candidates:
        candidates = [room for room in rooms if not_start(room)]
    if not candidates:
        raise ValueError("no suitable rooms available")
    return random.choice(candidates)


def _pick_coord(dungeon: Dungeon, start_room: Room, end_room: Optional[Room]) -> Coords:
    room = get_random_non_special_room(dungeon.rooms, start_room, end_room)
    return get_random_floor_coord(room)


def generate_dungeon_from_config(
    level: int, config: GameConfig, player: Optional[Character] = None
) -> Dungeon:
    """Generate a level and fill it with the player, items and enemies.

    A new player is created when none is given.
    """
    level_config = pick_level_config(config.levels, level)
    dungeon = generate_dungeon()
    dungeon.level_number = level

    if player is None:
        player = create_player(config.character_start_params)
    player.stats.level_achieved = level
    dungeon.player = player

    dungeon.items = generate_items(config, level_config.items_count)
    dungeon.enemies = generate_enemies(
        config, level_config.enemy_chances, level_config.enemy_count, level_config.treasure
    )

    start_room: Optional[Room] = None
    end_room: Optional[Room] = None
    for room in dungeon.rooms:
        if room.type == RoomType.START:
            start_room = room
        elif room.type == RoomType.END:
            end_room = room
    if start_room is None:
        raise RuntimeError("no start room found")

    player.coords = get_random_floor_coord(start_room)
    start_room.visible = Visibility.FOG_CLEAN

    occupied: set[Coords] = set()
    for item in dungeon.items:
        for _ in range(_MAX_PLACEMENT_ATTEMPTS):
            coord = _pick_coord(dungeon, start_room, end_room)
            if coord not in occupied and (end_room is None or coord != dungeon.exit):
                break
        item.coords = coord
        occupied.add(coord)

    for enemy in dungeon.enemies:
        for _ in range(_MAX_PLACEMENT_ATTEMPTS):
            coord = _pick_coord(dungeon, start_room, end_room)
            if end_room is None or coord != dungeon.exit:
                break
        else:
            coord = _pick_coord(dungeon, start_room, end_room)
        enemy.coords = coord
    return dungeon