"""Game configuration: character start values, level tables, item effects and enemies."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

Pair = tuple[int, int]


def _pair(value: Any, key: str) -> Pair:
    if value is None:
        return (0, 0)
    values = list(value)
    if len(values) != 2:
        raise ValueError(f"{key}: expected two numbers, got {len(values)}")
    return (int(values[0]), int(values[1]))


def _ints(value: Any) -> list[int]:
    return [int(v) for v in value or []]


def _strs(value: Any) -> list[str]:
    return [str(v) for v in value or []]


def _mapping(value: Any, key: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{key}: expected a mapping")
    return value


@dataclass
class CharacterParams:
    """Attributes a new player character starts with."""

    max_health: int = 0
    health: int = 0
    strength: int = 0
    agility: int = 0


@dataclass
class LevelConfig:
    """Settings for a range of dungeon levels."""

    level_range: Pair = (0, 0)
    enemy_chances: dict[str, int] = field(default_factory=dict)
    enemy_count: Pair = (0, 0)
    items_count: Pair = (0, 0)
    treasure: Pair = (0, 0)


@dataclass
class ItemEffects:
    """Possible effects, names and durations of elixirs or scrolls."""

    max_health: list[int] = field(default_factory=list)
    strength: list[int] = field(default_factory=list)
    agility: list[int] = field(default_factory=list)
    name: list[str] = field(default_factory=list)
    duration: list[int] = field(default_factory=list)


@dataclass
class FoodEffects:
    """Possible health restorations and names of food."""

    health: list[int] = field(default_factory=list)
    name: list[str] = field(default_factory=list)


@dataclass
class WeaponEffects:
    """Possible strength bonuses and names of weapons."""

    strength: list[int] = field(default_factory=list)
    name: list[str] = field(default_factory=list)


@dataclass
class EnemySpec:
    """Names of the attribute segments an enemy kind draws its values from."""

    enemy_agility: str = ""
    enemy_strength: str = ""
    enemy_animosity: str = ""
    enemy_health: str = ""


def _character(data: Any) -> CharacterParams:
    data = _mapping(data, "character_start_params")
    return CharacterParams(
        max_health=int(data.get("max_health", 0)),
        health=int(data.get("health", 0)),
        strength=int(data.get("strength", 0)),
        agility=int(data.get("agility", 0)),
    )


def _level(data: Any) -> LevelConfig:
    data = _mapping(data, "levels")
    chances = _mapping(data.get("enemy_chances"), "enemy_chances")
    return LevelConfig(
        level_range=_pair(data.get("range"), "range"),
        enemy_chances={str(k): int(v) for k, v in chances.items()},
        enemy_count=_pair(data.get("enemy_count"), "enemy_count"),
        items_count=_pair(data.get("items_count"), "items_count"),
        treasure=_pair(data.get("treasure"), "treasure"),
    )


def _item_effects(data: Any, key: str) -> ItemEffects:
    data = _mapping(data, key)
    return ItemEffects(
        max_health=_ints(data.get("max_health")),
        strength=_ints(data.get("strength")),
        agility=_ints(data.get("agility")),
        name=_strs(data.get("name")),
        duration=_ints(data.get("duration")),
    )


def _food_effects(data: Any) -> FoodEffects:
    data = _mapping(data, "food")
    return FoodEffects(health=_ints(data.get("health")), name=_strs(data.get("name")))


def _weapon_effects(data: Any) -> WeaponEffects:
    data = _mapping(data, "weapon")
    return WeaponEffects(strength=_ints(data.get("strength")), name=_strs(data.get("name")))


def _segments(data: Any, key: str) -> dict[str, Pair]:
    return {str(k): _pair(v, f"{key}.{k}") for k, v in _mapping(data, key).items()}


def _enemy_spec(data: Any, key: str) -> EnemySpec:
    data = _mapping(data, key)
    return EnemySpec(
        enemy_agility=str(data.get("enemy_agility", "")),
        enemy_strength=str(data.get("enemy_strength", "")),
        enemy_animosity=str(data.get("enemy_animosity", "")),
        enemy_health=str(data.get("enemy_health", "")),
    )


@dataclass
class GameConfig:
    """All parameters used to generate dungeon levels."""

    character_start_params: CharacterParams = field(default_factory=CharacterParams)
    levels: list[LevelConfig] = field(default_factory=list)
    elixir: ItemEffects = field(default_factory=ItemEffects)
    scroll: ItemEffects = field(default_factory=ItemEffects)
    food: FoodEffects = field(default_factory=FoodEffects)
    weapon: WeaponEffects = field(default_factory=WeaponEffects)
    enemy_agility: dict[str, Pair] = field(default_factory=dict)
    enemy_strength: dict[str, Pair] = field(default_factory=dict)
    enemy_animosity: dict[str, Pair] = field(default_factory=dict)
    enemy_health: dict[str, Pair] = field(default_factory=dict)
    enemies: dict[str, EnemySpec] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GameConfig":
        """Build a configuration from parsed YAML data.

        Raises ValueError when the data does not have the expected shape.
        """
        data = _mapping(data, "config")
        enemies = _mapping(data.get("enemies"), "enemies")
        return cls(
            character_start_params=_character(data.get("character_start_params")),
            levels=[_level(level) for level in data.get("levels") or []],
            elixir=_item_effects(data.get("elixir"), "elixir"),
            scroll=_item_effects(data.get("scroll"), "scroll"),
            food=_food_effects(data.get("food")),
            weapon=_weapon_effects(data.get("weapon")),
            enemy_agility=_segments(data.get("enemy_agility"), "enemy_agility"),
            enemy_strength=_segments(data.get("enemy_strength"), "enemy_strength"),
            enemy_animosity=_segments(data.get("enemy_animosity"), "enemy_animosity"),
            enemy_health=_segments(data.get("enemy_health"), "enemy_health"),
            enemies={str(k): _enemy_spec(v, f"enemies.{k}") for k, v in enemies.items()},
        )


def load_dungeon_config(path: Union[str, Path]) -> GameConfig:
    """Read a YAML configuration file.

    Raises OSError when the file cannot be read, yaml.YAMLError when it is
    not valid YAML and ValueError when its contents have the wrong shape.
    """
    text = Path(path).read_text(encoding="utf-8")
    return GameConfig.from_dict(yaml.safe_load(text))