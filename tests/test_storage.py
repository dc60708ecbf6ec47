import json

import pytest

from rogue.common import Stats
from rogue.storage import MAX_LEADERBOARD_LEN, JsonDungeonStorage


@pytest.fixture
def storage(tmp_path):
    return JsonDungeonStorage(tmp_path / "save.json", tmp_path / "board.json")


def test_game_state_round_trip(storage):
    data = {"level": 3, "rooms": [{"visited": True}], "exit": {"x": 1, "y": 2}}
    storage.save_game_state(data)
    assert storage.load_game_state() == data


def test_load_game_state_missing(storage):
    with pytest.raises(FileNotFoundError):
        storage.load_game_state()


def test_load_game_state_corrupt(storage):
    storage.game_state_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        storage.load_game_state()


def test_delete_save(storage):
    storage.save_game_state({"level": 1})
    storage.delete_save()
    assert not storage.game_state_file.exists()
    storage.delete_save()
    assert not storage.game_state_file.exists()


def test_save_leaderboard_sorts_by_treasure(storage):
    for treasure in (5, 50, 20):
        storage.save_leaderboard(Stats(treasures_received=treasure, level_achieved=treasure))
    board = storage.get_leaderboard()
    assert [s.treasures_received for s in board] == [50, 20, 5]
    assert board[0].level_achieved == 50


def test_save_leaderboard_caps_length(storage):
    for treasure in range(MAX_LEADERBOARD_LEN + 5):
        storage.save_leaderboard(Stats(treasures_received=treasure))
    board = storage.get_leaderboard()
    assert len(board) == MAX_LEADERBOARD_LEN
    assert board[0].treasures_received == MAX_LEADERBOARD_LEN + 4
    assert min(s.treasures_received for s in board) == 5


def test_leaderboard_file_uses_stats_field_names(storage):
    storage.save_leaderboard(Stats(treasures_received=7, cells_passed=3))
    raw = json.loads(storage.leaderboard_file.read_text(encoding="utf-8"))
    assert raw[0]["TreasuresReceived"] == 7
    assert raw[0]["CellsPassed"] == 3


def test_get_leaderboard_reads_keys_case_insensitively(storage):
    storage.leaderboard_file.write_text(
        json.dumps([{"treasuresreceived": 4, "HITSMADE": 2}]), encoding="utf-8"
    )
    assert storage.get_leaderboard() == [Stats(treasures_received=4, hits_made=2)]


def test_get_leaderboard_missing(storage):
    with pytest.raises(FileNotFoundError):
        storage.get_leaderboard()


def test_save_leaderboard_replaces_corrupt_file(storage):
    storage.leaderboard_file.write_text("garbage", encoding="utf-8")
    entry = Stats(treasures_received=9)
    storage.save_leaderboard(entry)
    assert storage.get_leaderboard() == [entry]


def test_leaderboard_slice_sorted(storage):
    storage.leaderboard_file.write_text(
        json.dumps([{"TreasuresReceived": 1}, {"TreasuresReceived": 8}]), encoding="utf-8"
    )
    assert [s.treasures_received for s in storage.leaderboard_slice()] == [8, 1]


def test_leaderboard_slice_missing_is_empty(storage):
    assert storage.leaderboard_slice() == []


def test_remove_last_record(storage):
    for treasure in (30, 10, 20):
        storage.save_leaderboard(Stats(treasures_received=treasure))
    storage.remove_last_record()
    assert [s.treasures_received for s in storage.get_leaderboard()] == [30, 20]


def test_remove_last_record_on_empty_board(storage):
    storage.leaderboard_file.write_text("[]", encoding="utf-8")
    storage.remove_last_record()
    assert storage.get_leaderboard() == []


def test_remove_last_record_missing(storage):
    with pytest.raises(FileNotFoundError):
        storage.remove_last_record()