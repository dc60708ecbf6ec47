"""JSON files holding the saved game and the leaderboard."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Union

from rogue.common import Stats

GAME_STATE_FILE = "dungeon_save.json"
LEADERBOARD_FILE = "leaderboard.json"
MAX_LEADERBOARD_LEN = 30

# Leaderboard entries are stored under these keys.
_STATS_KEYS = {
    "treasures_received": "TreasuresReceived",
    "level_achieved": "LevelAchieved",
    "enemies_defeated": "EnemiesDefeated",
    "food_eaten": "FoodEaten",
    "elixirs_drunk": "ElixirsDrunk",
    "scrolls_read": "ScrollsRead",
    "hits_made": "HitsMade",
    "hits_missed": "HitsMissed",
    "cells_passed": "CellsPassed",
}


def _stats_to_entry(stats: Stats) -> dict[str, int]:
    return {key: getattr(stats, attr) for attr, key in _STATS_KEYS.items()}


def _entry_to_stats(entry: Any) -> Stats:
    if not isinstance(entry, dict):
        raise ValueError("leaderboard entry is not an object")
    lowered = {str(k).lower(): v for k, v in entry.items()}
    return Stats(**{attr: int(lowered.get(key.lower(), 0)) for attr, key in _STATS_KEYS.items()})


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _by_treasure(entries: list[Stats]) -> list[Stats]:
    return sorted(entries, key=lambda s: s.treasures_received, reverse=True)


class JsonDungeonStorage:
    """Saves the game state and keeps the leaderboard in JSON files."""

    def __init__(
        self,
        game_state_file: Union[str, Path] = GAME_STATE_FILE,
        leaderboard_file: Union[str, Path] = LEADERBOARD_FILE,
    ) -> None:
        self.game_state_file = Path(game_state_file)
        self.leaderboard_file = Path(leaderboard_file)

    def save_game_state(self, data: dict[str, Any]) -> None:
        """Write the serialized dungeon to the save file."""
        _write_json(self.game_state_file, data)

    def load_game_state(self) -> dict[str, Any]:
        """Read the serialized dungeon from the save file.

        Raises OSError when there is no save and ValueError when it is corrupt.
        """
        return json.loads(self.game_state_file.read_text(encoding="utf-8"))

    def save_leaderboard(self, entry: Stats) -> None:
        """Add an entry, keeping the best entries by treasure."""
        try:
            entries = self.get_leaderboard()
        except (OSError, ValueError):
            entries = []
        entries.append(dataclasses.replace(entry))
        entries = _by_treasure(entries)[:MAX_LEADERBOARD_LEN]
        _write_json(self.leaderboard_file, [_stats_to_entry(s) for s in entries])

    def get_leaderboard(self) -> list[Stats]:
        """Read the leaderboard entries in stored order.

        Raises OSError when the file is missing and ValueError when it is corrupt.
        """
        data = json.loads(self.leaderboard_file.read_text(encoding="utf-8"))
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("leaderboard is not a list")
        return [_entry_to_stats(entry) for entry in data]

    def delete_save(self) -> None:
        """Remove the save file if it exists."""
        self.game_state_file.unlink(missing_ok=True)

    def leaderboard_slice(self) -> list[Stats]:
        """Leaderboard entries sorted by treasure; empty if unreadable."""
        try:
            return _by_treasure(self.get_leaderboard())
        except (OSError, ValueError):
            return []

    def remove_last_record(self) -> None:
        """Drop the last leaderboard entry.

        Raises OSError when the file is missing and ValueError when it is corrupt.
        """
        entries = self.get_leaderboard()
        _write_json(self.leaderboard_file, [_stats_to_entry(s) for s in entries[:-1]])