from dataclasses import dataclass, field
from unittest.mock import patch

import pytest

from rogue.character import Character
from rogue.common import Coords
from rogue.dungeon import Dungeon
from rogue.items import Food
from rogue.movers import (
    EnemyMover,
    GhostMoving,
    NonMoving,
    OgrMoving,
    PursuingMoving,
    SnakeWizardMoving,
    is_possible_enemy_move,
    is_walkable_for_enemy,
)
from rogue.common import TileType
from rogue.rooms import Room

START = Coords(5, 5)
PLAYER = Coords(10, 10)


@dataclass
class _Enemy:
    coords: Coords
    default_mover: object = None
    visibility: bool = True
    path: list = field(default_factory=list)

    def find_path_to_player(self, dungeon):
        return list(self.path), (len(self.path) + 1 if self.path else -1)


class _Recorder(EnemyMover):
    def __init__(self):
        self.calls = []

    def move(self, enemy, dungeon):
        self.calls.append(enemy)


def _setup(coords=START):
    room = Room(x=0, y=0, width=12, height=12)
    enemy = _Enemy(coords=coords)
    dungeon = Dungeon(
        rooms=[room],
        exit=Coords(40, 40),
        player=Character(coords=PLAYER),
        enemies=[enemy],
    )
    return room, enemy, dungeon


@pytest.mark.parametrize(
    "tile, expected",
    [(TileType.FLOOR, True), (TileType.WALL, False), (TileType.ITEM, False), (TileType.DOOR, False)],
)
def test_is_walkable_for_enemy(tile, expected):
    assert is_walkable_for_enemy(tile) is expected


def test_is_possible_enemy_move():
    room, _, dungeon = _setup()
    dungeon.items.append(Food(name="Apple", coords=Coords(3, 3)))
    assert is_possible_enemy_move(Coords(2, 2), room, dungeon) is True
    assert is_possible_enemy_move(Coords(0, 2), room, dungeon) is False
    assert is_possible_enemy_move(Coords(3, 3), room, dungeon) is False
    assert is_possible_enemy_move(PLAYER, room, dungeon) is False
    assert is_possible_enemy_move(Coords(30, 30), room, dungeon) is False


def test_non_moving_stays():
    _, enemy, dungeon = _setup()
    NonMoving().move(enemy, dungeon)
    assert enemy.coords == START


@pytest.mark.parametrize("seed", range(20))
def test_ogr_jumps_two_tiles(seed):
    import random

    random.seed(seed)
    _, enemy, dungeon = _setup()
    OgrMoving().move(enemy, dungeon)
    delta = (enemy.coords.x - START.x, enemy.coords.y - START.y)
    assert delta in {(0, 2), (-2, 0), (0, -2), (2, 0)}


@pytest.mark.parametrize("seed", range(20))
def test_wizard_moves_diagonally(seed):
    import random

    random.seed(seed)
    _, enemy, dungeon = _setup()
    SnakeWizardMoving().move(enemy, dungeon)
    dx, dy = enemy.coords.x - START.x, enemy.coords.y - START.y
    assert abs(dx) == 1 and abs(dy) == 1


@pytest.mark.parametrize("seed", range(20))
def test_ghost_teleports_inside_room(seed):
    import random

    random.seed(seed)
    room, enemy, dungeon = _setup()
    GhostMoving().move(enemy, dungeon)
    assert room.contains(enemy.coords)
    assert enemy.coords != PLAYER


@pytest.mark.parametrize("mover", [GhostMoving(), OgrMoving(), SnakeWizardMoving()])
def test_movers_outside_room_do_nothing(mover):
    outside = Coords(30, 30)
    _, enemy, dungeon = _setup(coords=outside)
    enemy.visibility = True
    mover.move(enemy, dungeon)
    assert enemy.coords == outside
    assert enemy.visibility is True


def test_pursuing_steps_along_path():
    _, enemy, dungeon = _setup()
    enemy.path = [Coords(6, 5), Coords(7, 5)]
    PursuingMoving().move(enemy, dungeon)
    assert enemy.coords == Coords(6, 5)


def test_pursuing_does_not_step_onto_player():
    _, enemy, dungeon = _setup()
    enemy.path = [PLAYER]
    PursuingMoving().move(enemy, dungeon)
    assert enemy.coords == START


def test_pursuing_falls_back_to_default_mover():
    _, enemy, dungeon = _setup()
    recorder = _Recorder()
    enemy.default_mover = recorder
    PursuingMoving().move(enemy, dungeon)
    assert recorder.calls == [enemy]
    assert enemy.coords == START


@patch("random.randrange", return_value=0)
def test_pursuing_ghost_flickers(_mock):
    _, enemy, dungeon = _setup()
    enemy.default_mover = GhostMoving()
    enemy.visibility = False
    enemy.path = [Coords(6, 5)]
    PursuingMoving().move(enemy, dungeon)
    assert enemy.visibility is True
    assert enemy.coords == Coords(6, 5)


def test_movers_compare_equal():
    assert OgrMoving() == OgrMoving()
    assert GhostMoving() != NonMoving()