import pytest
import yaml

from rogue.config import (
    CharacterParams,
    EnemySpec,
    GameConfig,
    LevelConfig,
    load_dungeon_config,
)

SAMPLE = {
    "character_start_params": {"max_health": 50, "health": 40, "strength": 7, "agility": 6},
    "levels": [
        {
            "range": [1, 5],
            "enemy_chances": {"zombie": 3, "ghost": 1},
            "enemy_count": [2, 4],
            "items_count": [1, 3],
            "treasure": [10, 20],
        },
        {
            "range": [6, 21],
            "enemy_chances": {"ogr": 2},
            "enemy_count": [4, 6],
            "items_count": [0, 2],
            "treasure": [20, 40],
        },
    ],
    "elixir": {
        "max_health": [1, 3],
        "strength": [1, 2],
        "agility": [2, 4],
        "name": ["Elixir A", "Elixir B"],
        "duration": [5, 10],
    },
    "scroll": {
        "max_health": [2, 4],
        "strength": [1, 3],
        "agility": [1, 2],
        "name": ["Scroll A"],
        "duration": [3, 6],
    },
    "food": {"health": [5, 10], "name": ["Bread", "Apple"]},
    "weapon": {"strength": [2, 6], "name": ["Sword"]},
    "enemy_agility": {"low": [1, 3]},
    "enemy_strength": {"mid": [4, 6]},
    "enemy_animosity": {"high": [7, 9]},
    "enemy_health": {"big": [20, 30]},
    "enemies": {
        "zombie": {
            "enemy_agility": "low",
            "enemy_strength": "mid",
            "enemy_animosity": "high",
            "enemy_health": "big",
        }
    },
}


def test_from_dict_character_params():
    cfg = GameConfig.from_dict(SAMPLE)
    assert cfg.character_start_params == CharacterParams(
        max_health=50, health=40, strength=7, agility=6
    )


def test_from_dict_levels():
    cfg = GameConfig.from_dict(SAMPLE)
    assert len(cfg.levels) == 2
    first = cfg.levels[0]
    assert first == LevelConfig(
        level_range=(1, 5),
        enemy_chances={"zombie": 3, "ghost": 1},
        enemy_count=(2, 4),
        items_count=(1, 3),
        treasure=(10, 20),
    )


def test_from_dict_effects_and_enemies():
    cfg = GameConfig.from_dict(SAMPLE)
    assert cfg.elixir.name == ["Elixir A", "Elixir B"]
    assert cfg.elixir.duration == [5, 10]
    assert cfg.scroll.max_health == [2, 4]
    assert cfg.food.health == [5, 10]
    assert cfg.weapon.name == ["Sword"]
    assert cfg.enemy_agility == {"low": (1, 3)}
    assert cfg.enemy_health == {"big": (20, 30)}
    assert cfg.enemies["zombie"] == EnemySpec("low", "mid", "high", "big")


def test_from_dict_none_gives_defaults():
    cfg = GameConfig.from_dict(None)
    assert cfg == GameConfig()
    assert cfg.levels == []


def test_from_dict_rejects_bad_pair():
    data = {"enemy_agility": {"low": [1, 2, 3]}}
    with pytest.raises(ValueError):
        GameConfig.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        GameConfig.from_dict([1, 2])


def test_load_dungeon_config_round_trip(tmp_path):
    path = tmp_path / "dungeon_config.yaml"
    path.write_text(yaml.safe_dump(SAMPLE), encoding="utf-8")
    assert load_dungeon_config(path) == GameConfig.from_dict(SAMPLE)


def test_load_dungeon_config_accepts_str_path(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(SAMPLE), encoding="utf-8")
    cfg = load_dungeon_config(str(path))
    assert cfg.levels[1].enemy_chances == {"ogr": 2}


def test_load_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_dungeon_config(path) == GameConfig()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dungeon_config(tmp_path / "absent.yaml")


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("levels: [1, 2\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_dungeon_config(path)