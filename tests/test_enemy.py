from unittest.mock import patch

import pytest

from rogue.character import Character
from rogue.common import Coords
from rogue.dungeon import Dungeon
from rogue.enemy import (
    ENEMY_NAMES,
    Enemy,
    EnemyType,
    default_mover_for,
    new_enemy,
)
from rogue.movers import (
    GhostMoving,
    PursuingMoving,
)
from rogue.rooms import Room


def make_dungeon(player_at=(3, 3), extra_rooms=()):
    room = Room(x=0, y=0, width=10, height=8)
    player = Character(health=10, max_health=10, strength=2, coords=Coords(*player_at))
    return Dungeon(rooms=[room, *extra_rooms], exit=Coords(50, 50), player=player)


def make_open_room_dungeon():
    big = Room(x=30, y=0, width=20, height=20)
    return make_dungeon(extra_rooms=[big]), big


@pytest.mark.parametrize(
    "kind, allowed_steps",
    [
        (EnemyType.ZOMBIE, {(0, 0)}),
        (EnemyType.VAMPIRE, {(0, 0)}),
        (EnemyType.OGR, {(0, 2), (0, -2), (2, 0), (-2, 0)}),
        (EnemyType.SNAKE_WIZARD, {(1, 1), (1, -1), (-1, 1), (-1, -1)}),
    ],
)
def test_default_mover_for_moves_by_pattern(kind, allowed_steps):
    dungeon, _ = make_open_room_dungeon()
    enemy = Enemy(coords=Coords(40, 10))
    default_mover_for(kind).move(enemy, dungeon)
    step = (enemy.coords.x - 40, enemy.coords.y - 10)
    assert step in allowed_steps


def test_default_mover_for_ghost_stays_on_room_floor():
    dungeon, big = make_open_room_dungeon()
    enemy = Enemy(coords=Coords(40, 10))
    mover = default_mover_for(EnemyType.GHOST)
    for _ in range(20):
        mover.move(enemy, dungeon)
        assert big.x < enemy.coords.x < big.x + big.width - 1
        assert big.y < enemy.coords.y < big.y + big.height - 1


def test_new_enemy_fields():
    enemy = new_enemy(EnemyType.GHOST, 2, 3)
    assert enemy.coords == Coords(2, 3)
    assert isinstance(enemy.default_mover, GhostMoving)
    assert enemy.mover == enemy.default_mover
    assert enemy.visibility is True
    assert enemy.is_pursuing is False


def test_names():
    assert ENEMY_NAMES[EnemyType.SNAKE_WIZARD] == "Snake-Wizard"
    assert new_enemy(EnemyType.OGR).name == "Ogr"


def test_current_strength():
    enemy = Enemy(strength=4)
    assert enemy.current_strength() == 4


def test_find_path_straight_line():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.ZOMBIE, 6, 3)
    path, length = enemy.find_path_to_player(dungeon)
    assert path == [Coords(5, 3), Coords(4, 3), Coords(3, 3)]
    assert length == len(path) + 1


def test_find_path_same_position():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.ZOMBIE, 3, 3)
    assert enemy.find_path_to_player(dungeon) == ([], -1)


def test_find_path_unreachable():
    other = Room(x=30, y=0, width=10, height=8)
    dungeon = make_dungeon(extra_rooms=[other])
    enemy = new_enemy(EnemyType.ZOMBIE, 33, 3)
    assert enemy.find_path_to_player(dungeon) == ([], -1)


def test_in_room_with_player():
    other = Room(x=30, y=0, width=10, height=8)
    dungeon = make_dungeon(extra_rooms=[other])
    assert new_enemy(EnemyType.ZOMBIE, 6, 3).in_room_with_player(dungeon)
    assert not new_enemy(EnemyType.ZOMBIE, 33, 3).in_room_with_player(dungeon)


def test_set_moving_mode_pursues_when_close():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.OGR, 6, 3)
    enemy.animosity = 10
    enemy.set_moving_mode(dungeon)
    assert isinstance(enemy.mover, PursuingMoving)
    assert enemy.is_pursuing is True


def test_set_moving_mode_calm_when_far():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.OGR, 6, 3)
    enemy.animosity = 0
    enemy.is_pursuing = True
    enemy.set_moving_mode(dungeon)
    assert enemy.is_pursuing is False
    assert enemy.mover == enemy.default_mover


def test_move_pursuing_steps_towards_player():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.ZOMBIE, 6, 3)
    enemy.animosity = 10
    dungeon.enemies.append(enemy)
    enemy.move(dungeon)
    assert enemy.coords == Coords(5, 3)


def test_move_calm_zombie_stays():
    dungeon = make_dungeon()
    enemy = new_enemy(EnemyType.ZOMBIE, 6, 3)
    dungeon.enemies.append(enemy)
    enemy.move(dungeon)
    assert enemy.coords == Coords(6, 3)


def test_ogr_always_hits():
    character = Character(health=10, max_health=10)
    ogr = new_enemy(EnemyType.OGR)
    ogr.strength = 3
    with patch("rogue.units.random.random", return_value=0.99):
        assert ogr.hit_character(character) is True
    assert character.health == 10 - ogr.strength
    assert character.stats.hits_missed == 1


def test_first_hit_miss_consumed():
    character = Character(health=10, max_health=10, first_hit_miss=True)
    zombie = new_enemy(EnemyType.ZOMBIE)
    zombie.strength = 3
    assert zombie.hit_character(character) is False
    assert character.first_hit_miss is False
    assert character.health == 10


def test_vampire_drains_max_health_not_health_directly():
    character = Character(health=10, max_health=10)
    vampire = new_enemy(EnemyType.VAMPIRE)
    vampire.strength = 100
    with patch("rogue.units.random.random", return_value=0.0):
        assert vampire.hit_character(character) is True
    assert 7 <= character.max_health <= 9
    assert character.health == character.max_health


def test_snake_wizard_puts_player_to_sleep():
    character = Character(health=10, max_health=10)
    wizard = new_enemy(EnemyType.SNAKE_WIZARD)
    with patch("rogue.enemy.random.random", return_value=0.0):
        wizard.apply_effect(character)
    assert character.skip_next_turn is True


def test_snake_wizard_effect_may_fail():
    character = Character(health=10, max_health=10)
    wizard = new_enemy(EnemyType.SNAKE_WIZARD)
    with patch("rogue.enemy.random.random", return_value=0.99):
        wizard.apply_effect(character)
    assert character.skip_next_turn is False