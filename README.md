# rogue

The engine of a turn-based dungeon crawler. Each level is a 3 × 3 grid of
randomly sized rooms. Corridors join the rooms so that every room can be
reached. The player starts in one room and has to find the exit in another.
Zombies, vampires, ghosts, ogres and snake-wizards move about the rooms. An
enemy starts to chase the player when both are in the same room and the
player is within the enemy's animosity range. Food, elixirs, scrolls and
weapons lie on the floor waiting to be picked up.

The package holds the game model and its rules. You drive it from your own
code.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

## What is inside

| Module                | Contents                                                                |
|-----------------------|-------------------------------------------------------------------------|
| `rogue.common`        | `Coords`, `Size`, `TileType`, `Stats`, map constants, random helpers    |
| `rogue.items`         | `Weapon`, `Food`, `Elixir`, `Scroll`, `ItemType`, `same_weapons`        |
| `rogue.inventory`     | `Inventory`, which holds at most nine items of each kind                |
| `rogue.rooms`         | `Room`, `RoomType`, `Visibility`, `generate_room`, `generate_exit_point`|
| `rogue.corridors`     | `Corridor`, `Passage` and `generate_room_connections`                   |
| `rogue.dungeon`       | `Dungeon`, `generate_dungeon`, `new_dungeon`, `TileNotFoundError`       |
| `rogue.units`         | `Unit`, `Direction`, `AngleDirection`, hit chance and damage rules      |
| `rogue.character`     | `Character`, the player                                                 |
| `rogue.enemy`         | `Enemy`, `EnemyType`, `new_enemy` and path finding towards the player   |
| `rogue.movers`        | `NonMoving`, `GhostMoving`, `OgrMoving`, `SnakeWizardMoving`, `PursuingMoving` |
| `rogue.logic`         | `handle_action`, which plays one turn, and the steps it is made of      |
| `rogue.config`        | `GameConfig` and `load_dungeon_config` for YAML level settings          |
| `rogue.generator`     | `generate_dungeon_from_config`, which fills a level with its contents   |
| `rogue.serialization` | Conversion of a dungeon to and from plain JSON-ready dicts              |
| `rogue.storage`       | `JsonDungeonStorage`: the saved game and a leaderboard                  |

## Playing a turn

```python
from rogue.config import load_dungeon_config
from rogue.generator import generate_dungeon_from_config
from rogue.logic import handle_action
from rogue.units import Direction

config = load_dungeon_config("dungeon_config.yaml")
dungeon = generate_dungeon_from_config(1, config, None)

handle_action(Direction.RIGHT, dungeon)
dungeon.update()

for message in dungeon.event_data:
    print(message)

if dungeon.player.is_dead():
    print("You are dead")
elif dungeon.is_exit():
    # Carry the same character on to the next level.
    dungeon = generate_dungeon_from_config(
        dungeon.level_number + 1, config, dungeon.player
    )
```

One call to `handle_action` is one turn. In that turn:

1. The event log is cleared. Enemies next to the player go into battle
   mode; the others leave it.
2. If the player moves into an enemy, the player attacks it, unless a
   snake-wizard has put the player to sleep, in which case the turn is lost.
3. Dead enemies are removed, and the first enemy in battle next to the player
   strikes. Ogres strike every other turn, vampires drain maximum health and
   make the player miss the first hit, snake-wizards may put the player to
   sleep.
4. If the player did not run into an enemy, the player moves and picks up the
   items on the new tile that fit in the backpack.
5. Enemies not in battle move, and active elixirs and scrolls count down
   their duration. When one runs out, its boosts are taken off again.

`handle_action` does not refresh the fog of war. Call `dungeon.update()`
after it to mark the rooms and corridors the player has seen and to set each
room's `visible` state.

## Inventory

```python
player = dungeon.player

if player.inventory.foods:
    player.eat_food(player.inventory.foods[0])

if player.inventory.elixirs:
    elixir = player.inventory.elixirs[0]
    player.drink_elixir(elixir)
    elixir.is_active = True   # starts the countdown in handle_action

if player.inventory.weapons:
    player.choose_weapon(player.inventory.weapons[0])
```

`Character.drop_weapon(dungeon)` takes the equipped weapon out of the hands
and puts it on the nearest floor tile within two steps, removing it from the
backpack.

## Saving and the leaderboard

```python
from rogue.serialization import dungeon_to_dict, dict_to_dungeon
from rogue.storage import JsonDungeonStorage

store = JsonDungeonStorage("dungeon_save.json", "leaderboard.json")

store.save_game_state(dungeon_to_dict(dungeon))
restored = dict_to_dungeon(store.load_game_state())

store.save_leaderboard(dungeon.player.stats)
for rank, stats in enumerate(store.leaderboard_slice(), start=1):
    print(rank, stats.treasures_received, stats.level_achieved)
```

Without arguments `JsonDungeonStorage()` uses `dungeon_save.json` and
`leaderboard.json` in the current directory. The leaderboard is sorted by
treasure collected, highest first, and keeps the best thirty runs.
`delete_save()` removes the save file, and `remove_last_record()` drops the
last leaderboard entry.

`load_game_state` and `get_leaderboard` raise `OSError` when the file is
missing and `ValueError` when its contents are not valid.

## Level configuration

`load_dungeon_config` reads a YAML file. The file sets:

- `character_start_params`: the character's starting health, maximum
  health, strength and agility;
- `levels`: for each range of levels, the chance of each kind of enemy and
  the ranges for the number of enemies, the number of items and the treasure
  an enemy carries;
- `elixir`, `scroll`, `food`, `weapon`: the possible names, values and
  durations of items;
- `enemy_agility`, `enemy_strength`, `enemy_animosity`, `enemy_health` and
  `enemies`: named value ranges, and which of them each kind of enemy
  (`zombie`, `vampire`, `ghost`, `ogr`, `snake_wizard`) draws from.

It raises `OSError` when the file cannot be read, `yaml.YAMLError` when it is
not valid YAML and `ValueError` when its contents have the wrong shape. You
can also build a `GameConfig` from already parsed data with
`GameConfig.from_dict`.

## What the package does not do

There is no screen, input handling, main menu or command to start a game:
the package has no front end at all. Drawing the map, reading keys and
deciding when a game is won are left to the program that uses it.