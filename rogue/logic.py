"""Turn logic: fighting, walking, picking up items and expiring effects."""

from __future__ import annotations

from rogue.character import is_possible_player_move
from rogue.common import Coords
from rogue.enemy import ENEMY_NAMES, Enemy, EnemyType
from rogue.items import ITEM_NAMES
from rogue.units import Direction

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Maximum health is never lowered below this when an effect wears off.
MIN_MAX_HEALTH_AFTER_EFFECT = 5


def handle_action(direction: Direction, dungeon) -> None:
    """Play one turn: fights, the player's move, then the monsters' moves."""
    dungeon.clear_event_data()
    update_fights(dungeon)
    attacked = is_player_attacked(direction, dungeon)
    remove_dead_monsters(dungeon)
    monster_attack(dungeon)
    if not attacked:
        player_move(direction, dungeon)
        check_consumables(dungeon)
    monsters_move(dungeon)
    update_items_effects(dungeon)


def is_enemy_nearby(character, monster) -> bool:
    """True if the monster is next to the character.

    Snake wizards also reach diagonally.
    """
    enemy = monster.coords
    player = character.coords
    horizontal = abs(enemy.x - player.x) == 1 and enemy.y == player.y
    vertical = abs(enemy.y - player.y) == 1 and enemy.x == player.x
    if horizontal or vertical:
        return True
    if isinstance(monster, Enemy) and monster.enemy_type == EnemyType.SNAKE_WIZARD:
        return abs(enemy.x - player.x) == 1 and abs(enemy.y - player.y) == 1
    return False


def get_coords_after_moving(coords: Coords, direction) -> Coords:
    """The position one step away in the direction; unchanged if invalid."""
    offset = _OFFSETS.get(direction)
    if offset is None:
        return coords
    return Coords(coords.x + offset[0], coords.y + offset[1])


def monsters_move(dungeon) -> None:
    """Let every enemy not in battle move."""
    for enemy in dungeon.enemies:
        if not enemy.in_battle:
            enemy.move(dungeon)


def update_items_effects(dungeon) -> None:
    """Count down active elixirs and scrolls and remove expired ones."""
    player = dungeon.player
    for slot in (player.inventory.elixirs, player.inventory.scrolls):
        for potion in reversed(list(slot)):
            if potion.is_active:
                potion.duration -= 1
            if potion.duration <= 0:
                potion.is_active = False
                delete_effect_values(dungeon, potion.agility, potion.strength, potion.max_health)
                player.inventory.delete(potion)


def delete_effect_values(dungeon, agility: int, strength: int, max_health: int) -> None:
    """Take an effect's boosts off the player, keeping values in range."""
    player = dungeon.player
    player.agility = max(player.agility - agility, 0)
    player.strength = max(player.strength - strength, 0)
    player.max_health -= max_health
    if player.max_health <= 0:
        player.max_health = MIN_MAX_HEALTH_AFTER_EFFECT
    player.health = min(player.health, player.max_health)


def update_fights(dungeon) -> None:
    """Put enemies next to the player into battle and release the others."""
    for enemy in dungeon.enemies:
        if is_enemy_nearby(dungeon.player, enemy):
            if not enemy.in_battle:
                switch_to_battle_mode(enemy)
        else:
            enemy.in_battle = False


def switch_to_battle_mode(enemy: Enemy) -> None:
    """Prepare an enemy for battle."""
    enemy.in_battle = True
    enemy.visibility = True
    if enemy.enemy_type == EnemyType.OGR:
        enemy.skip_next_turn = False
    if enemy.enemy_type == EnemyType.VAMPIRE:
        enemy.first_hit_miss = True


def is_player_attacked(direction: Direction, dungeon) -> bool:
    """Attack an enemy standing where the player wants to go.

    Returns True if an enemy blocks the way, whether or not the player
    got to strike.
    """
    player = dungeon.player
    target = get_coords_after_moving(player.coords, direction)
    attacked = False
    for enemy in dungeon.enemies:
        if enemy.coords != target:
            continue
        attacked = True
        if not player.skip_next_turn:
            hit, gold = player.hit_enemy(enemy)
            update_attack_data(dungeon, player, enemy, hit, gold)
            break
        player.skip_next_turn = False
    return attacked


def monster_attack(dungeon) -> None:
    """Let the first enemy in battle next to the player strike."""
    player = dungeon.player
    for enemy in dungeon.enemies:
        if not (is_enemy_nearby(player, enemy) and enemy.in_battle):
            continue
        skip = enemy.skip_next_turn
        if enemy.enemy_type == EnemyType.OGR:
            enemy.skip_next_turn = not enemy.skip_next_turn
        if not skip:
            hit = enemy.hit_character(player)
            update_attack_data(dungeon, enemy, player, hit, 0)
            break


def update_attack_data(dungeon, attacker, defender, good_hit: bool, gold: int) -> None:
    """Record the outcome of an attack in the event log."""
    if isinstance(defender, Enemy):
        name = ENEMY_NAMES[defender.enemy_type]
        if not good_hit:
            dungeon.add_event_data(f"You missed {name}...")
        elif gold == 0:
            dungeon.add_event_data(f"You attacked {name}!")
        elif gold > 0:
            dungeon.add_event_data(f"You defeated {name}! You got {gold} gold.")
    if isinstance(attacker, Enemy):
        name = ENEMY_NAMES[attacker.enemy_type]
        if good_hit:
            dungeon.add_event_data(f"{name} attacked!")
        else:
            dungeon.add_event_data(f"{name} missed.")


def remove_dead_monsters(dungeon) -> None:
    """Remove dead enemies from the level."""
    dungeon.enemies[:] = [enemy for enemy in dungeon.enemies if not enemy.is_dead()]


def player_move(direction: Direction, dungeon) -> None:
    """Move the player one step if the target tile is walkable."""
    player = dungeon.player
    if not is_possible_player_move(get_coords_after_moving(player.coords, direction), dungeon):
        return
    moves = {
        Direction.UP: player.move_up,
        Direction.DOWN: player.move_down,
        Direction.LEFT: player.move_left,
        Direction.RIGHT: player.move_right,
    }
    move = moves.get(direction)
    if move is not None:
        move()


def check_consumables(dungeon) -> None:
    """Pick up the items under the player that fit in the backpack."""
    player = dungeon.player
    position = dungeon.player_coords()
    taken = []
    for item in reversed(list(dungeon.items)):
        if item.coords == position and player.inventory.add(item):
            dungeon.add_event_data(f"You take the {ITEM_NAMES[item.item_type()]}!")
            taken.append(item)
    if taken:
        dungeon.items[:] = [
            item for item in dungeon.items if not any(item is t for t in taken)
        ]