import pytest

from rogue.common import Coords
from rogue.items import (
    ITEM_NAMES,
    Elixir,
    Food,
    Item,
    ItemType,
    Scroll,
    Weapon,
    same_weapons,
)


@pytest.mark.parametrize(
    "item, expected",
    [
        (Weapon(name="Axe"), ItemType.WEAPON),
        (Food(name="Bread"), ItemType.FOOD),
        (Elixir(name="Tonic"), ItemType.ELIXIR),
        (Scroll(name="Page"), ItemType.SCROLL),
        (Item(), ItemType.EMPTY),
    ],
)
def test_item_type(item, expected):
    assert item.item_type() is expected


def test_info_returns_name():
    assert Scroll(name="Scroll of Whispering Shadows").info() == "Scroll of Whispering Shadows"


def test_item_names_cover_every_category():
    assert ITEM_NAMES[Food().item_type()] == "food"
    assert ITEM_NAMES[Weapon().item_type()] == "weapon"
    assert ItemType.EMPTY not in ITEM_NAMES


def test_coords_can_be_moved():
    food = Food(name="Apple", value=3)
    food.coords = Coords(4, 9)
    assert food.coords == Coords(4, 9)


def test_same_weapons_ignores_position():
    first = Weapon(name="Dagger", strength=4, coords=Coords(1, 1))
    second = Weapon(name="Dagger", strength=4, coords=Coords(7, 3))
    assert same_weapons(first, second)
    assert first != second


def test_same_weapons_detects_difference():
    assert not same_weapons(Weapon(name="Dagger", strength=4), Weapon(name="Dagger", strength=5))
    assert not same_weapons(Weapon(name="Dagger", strength=4), Weapon(name="Sword", strength=4))


def test_items_of_different_kinds_are_not_equal():
    assert Elixir(name="x", strength=2) != Scroll(name="x", strength=2)