"""Conversion of game objects to and from JSON-ready dictionaries."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping, Optional

from rogue.character import Character
from rogue.common import MAX_ROOM_COUNT, Coords, Size, Stats
from rogue.corridors import Corridor, Passage
from rogue.dungeon import Dungeon
from rogue.enemy import Enemy, EnemyType
from rogue.inventory import Inventory
from rogue.items import Elixir, Food, Item, Scroll, Weapon
from rogue.movers import PursuingMoving
from rogue.rooms import Room, RoomType, Visibility

_STATS_KEYS = {
    "treasures_received": "treasures",
    "level_achieved": "level_achieved",
    "enemies_defeated": "enemies_defeated",
    "food_eaten": "food_eaten",
    "elixirs_drunk": "elixirs_drunk",
    "scrolls_read": "scrolls_read",
    "hits_made": "hits_ok",
    "hits_missed": "hits_missed",
    "cells_passed": "cells_passed",
}


def _coords_to_dict(coords: Coords) -> dict[str, int]:
    return {"x": coords.x, "y": coords.y}


def _dict_to_coords(data: Optional[Mapping[str, Any]]) -> Coords:
    data = data or {}
    return Coords(int(data.get("x", 0)), int(data.get("y", 0)))


def stats_to_dict(stats: Stats) -> dict[str, int]:
    """Serialize player statistics."""
    return {key: getattr(stats, attr) for attr, key in _STATS_KEYS.items()}


def dict_to_stats(data: Optional[Mapping[str, Any]]) -> Stats:
    """Rebuild player statistics; missing values are zero."""
    data = data or {}
    return Stats(**{attr: int(data.get(key, 0)) for attr, key in _STATS_KEYS.items()})


def item_to_dict(item: Optional[Item]) -> dict[str, Any]:
    """Serialize an item; values that are zero or false are left out."""
    if item is None:
        return {"type": 0, "coords": {"x": 0, "y": 0}, "name": ""}
    result: dict[str, Any] = {
        "type": int(item.item_type()),
        "coords": _coords_to_dict(item.coords),
        "name": item.info(),
    }
    optional: dict[str, Any] = {}
    if isinstance(item, (Elixir, Scroll)):
        optional = {
            "agility": item.agility,
            "strength": item.strength,
            "max_health": item.max_health,
            "duration": item.duration,
            "is_active": item.is_active,
        }
    elif isinstance(item, Food):
        optional = {"value_food": item.value}
    elif isinstance(item, Weapon):
        optional = {"strength": item.strength}
    result.update({key: value for key, value in optional.items() if value})
    return result


def _food(data: Mapping[str, Any]) -> Food:
    return Food(
        name=str(data.get("name", "")),
        value=int(data.get("value_food", 0)),
        coords=_dict_to_coords(data.get("coords")),
    )


def _boost_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "name": str(data.get("name", "")),
        "agility": int(data.get("agility", 0)),
        "strength": int(data.get("strength", 0)),
        "max_health": int(data.get("max_health", 0)),
        "coords": _dict_to_coords(data.get("coords")),
        "duration": int(data.get("duration", 0)),
        "is_active": bool(data.get("is_active", False)),
    }


def _elixir(data: Mapping[str, Any]) -> Elixir:
    return Elixir(**_boost_kwargs(data))


def _scroll(data: Mapping[str, Any]) -> Scroll:
    return Scroll(**_boost_kwargs(data))


def _weapon(data: Mapping[str, Any]) -> Weapon:
    return Weapon(
        name=str(data.get("name", "")),
        strength=int(data.get("strength", 0)),
        coords=_dict_to_coords(data.get("coords")),
    )


_BUILDERS: tuple[Callable[[Mapping[str, Any]], Item], ...] = (_food, _elixir, _scroll, _weapon)
_BUILDER_BY_TYPE = {int(build({}).item_type()): build for build in _BUILDERS}
_WEAPON_TYPE = int(_weapon({}).item_type())


def dict_to_item(data: Mapping[str, Any]) -> Item:
    """Rebuild an item. Raises ValueError for an unknown item type."""
    build = _BUILDER_BY_TYPE.get(int(data.get("type", 0)))
    if build is None:
        raise ValueError(f"unknown item type: {data.get('type')}")
    return build(data)


_INVENTORY_SLOTS = (
    ("weapons", _weapon),
    ("elixirs", _elixir),
    ("scrolls", _scroll),
    ("foods", _food),
)


def inventory_to_dict(inventory: Inventory) -> dict[str, Any]:
    """Serialize a backpack; empty categories are left out."""
    result: dict[str, Any] = {}
    for slot, _ in _INVENTORY_SLOTS:
        items = getattr(inventory, slot)
        if items:
            result[slot] = [item_to_dict(item) for item in items]
    result["treasure"] = inventory.treasure
    return result


def dict_to_inventory(data: Optional[Mapping[str, Any]]) -> Inventory:
    """Rebuild a backpack."""
    data = data or {}
    inventory = Inventory()
    for slot, build in _INVENTORY_SLOTS:
        setattr(inventory, slot, [build(entry) for entry in data.get(slot) or []])
    inventory.treasure = int(data.get("treasure", 0))
    return inventory


def _unit_to_dict(unit: Any) -> dict[str, Any]:
    return {
        "health": unit.health,
        "agility": unit.agility,
        "strength": unit.strength,
        "coords": _coords_to_dict(unit.coords),
        "in_battle": unit.in_battle,
    }


def _unit_kwargs(data: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    data = data or {}
    return {
        "health": int(data.get("health", 0)),
        "agility": int(data.get("agility", 0)),
        "strength": int(data.get("strength", 0)),
        "coords": _dict_to_coords(data.get("coords")),
        "in_battle": bool(data.get("in_battle", False)),
    }


def character_to_dict(character: Character) -> dict[str, Any]:
    """Serialize the player character."""
    return {
        "base_data": _unit_to_dict(character),
        "max_health": character.max_health,
        "weapon": item_to_dict(character.current_weapon),
        "backpack": inventory_to_dict(character.inventory),
        "stats": stats_to_dict(character.stats),
    }


def dict_to_character(data: Mapping[str, Any]) -> Character:
    """Rebuild the player character; an empty weapon entry means no weapon."""
    weapon_data = data.get("weapon") or {}
    weapon = _weapon(weapon_data) if int(weapon_data.get("type", 0)) == _WEAPON_TYPE else None
    return Character(
        **_unit_kwargs(data.get("base_data")),
        max_health=int(data.get("max_health", 0)),
        current_weapon=weapon,
        inventory=dict_to_inventory(data.get("backpack")),
        stats=dict_to_stats(data.get("stats")),
    )


def enemy_to_dict(enemy: Enemy) -> dict[str, Any]:
    """Serialize an enemy."""
    return {
        "base_data": _unit_to_dict(enemy),
        "enemy_type": int(enemy.enemy_type),
        "animosity": enemy.animosity,
        "visibility": enemy.visibility,
        "is_pursuing": enemy.is_pursuing,
        "treasure": enemy.treasure,
    }


def dict_to_enemy(data: Mapping[str, Any]) -> Enemy:
    """Rebuild an enemy with the movement strategy its state calls for."""
    pursuing = bool(data.get("is_pursuing", False))
    return Enemy(
        **_unit_kwargs(data.get("base_data")),
        enemy_type=EnemyType(int(data.get("enemy_type", 0))),
        animosity=int(data.get("animosity", 0)),
        visibility=bool(data.get("visibility", False)),
        is_pursuing=pursuing,
        treasure=int(data.get("treasure", 0)),
        mover=PursuingMoving() if pursuing else None,
    )


def room_to_dict(room: Room) -> dict[str, Any]:
    """Serialize a room."""
    return {
        "size": {"width": room.width, "height": room.height},
        "room_up_left_corner_coords": {"x": room.x, "y": room.y},
        "doors": [_coords_to_dict(door) for door in room.doors],
        "type": int(room.type),
        "visited": room.visited,
        "visible": int(room.visible),
    }


def _make_room(position: Coords, size: Size, **rest: Any) -> Room:
    names = {f.name for f in dataclasses.fields(Room)}
    if "coords" in names:
        rest["coords"] = position
    else:
        rest.update(x=position.x, y=position.y)
    if "size" in names:
        rest["size"] = size
    else:
        rest.update(width=size.width, height=size.height)
    return Room(**rest)


def dict_to_room(data: Optional[Mapping[str, Any]]) -> Room:
    """Rebuild a room."""
    data = data or {}
    size = data.get("size") or {}
    return _make_room(
        _dict_to_coords(data.get("room_up_left_corner_coords")),
        Size(int(size.get("width", 0)), int(size.get("height", 0))),
        doors=[_dict_to_coords(door) for door in data.get("doors") or []],
        type=RoomType(int(data.get("type", 0))),
        visited=bool(data.get("visited", False)),
        visible=Visibility(int(data.get("visible", 0))),
    )


def passage_to_dict(passage: Passage) -> dict[str, Any]:
    """Serialize a passage and its corridors."""
    return {
        "corridors": [
            {
                "begin": _coords_to_dict(corridor.begin),
                "end": _coords_to_dict(corridor.end),
                "visited": corridor.visited,
            }
            for corridor in passage.path
        ]
    }


def dict_to_passage(data: Optional[Mapping[str, Any]]) -> Passage:
    """Rebuild a passage."""
    data = data or {}
    return Passage(
        path=[
            Corridor(
                _dict_to_coords(entry.get("begin")),
                _dict_to_coords(entry.get("end")),
                bool(entry.get("visited", False)),
            )
            for entry in data.get("corridors") or []
        ]
    )


def dungeon_to_dict(dungeon: Dungeon) -> dict[str, Any]:
    """Serialize a whole level.

    Raises TypeError when the player or an enemy is of the wrong kind.
    """
    if not isinstance(dungeon.player, Character):
        raise TypeError("wrong player type")
    enemies = []
    for enemy in dungeon.enemies:
        if not isinstance(enemy, Enemy):
            raise TypeError("wrong enemy type")
        enemies.append(enemy_to_dict(enemy))
    return {
        "level": dungeon.level_number,
        "rooms": [room_to_dict(room) for room in dungeon.rooms],
        "passages": [passage_to_dict(passage) for passage in dungeon.passages],
        "exit": _coords_to_dict(dungeon.exit),
        "character": character_to_dict(dungeon.player),
        "items": [item_to_dict(item) for item in dungeon.items],
        "enemies": enemies,
    }


def dict_to_dungeon(data: Mapping[str, Any]) -> Dungeon:
    """Rebuild a whole level; the room list always has the full room count."""
    rooms = [dict_to_room(entry) for entry in (data.get("rooms") or [])[:MAX_ROOM_COUNT]]
    rooms.extend(dict_to_room(None) for _ in range(MAX_ROOM_COUNT - len(rooms)))
    return Dungeon(
        rooms=rooms,
        passages=[dict_to_passage(entry) for entry in data.get("passages") or []],
        exit=_dict_to_coords(data.get("exit")),
        player=dict_to_character(data.get("character") or {}),
        level_number=int(data.get("level", 0)),
        items=[dict_to_item(entry) for entry in data.get("items") or []],
        enemies=[dict_to_enemy(entry) for entry in data.get("enemies") or []],
    )