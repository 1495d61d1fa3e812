import json
from pathlib import Path

import pytest

from crickstats.analytics import leaderboard
from crickstats.models import Player, PlayerFormatStat, Snapshot
from crickstats.persistence import PLAYERS_FILENAME, STATS_FILENAME, SnapshotStore


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv("CRICKSTATS_DATA_DIR", raising=False)


def _snapshot() -> Snapshot:
    player = Player(id=1, name="Sachin Tendulkar", country="IND", primary_role="all-rounder")
    stat = PlayerFormatStat(
        player_id=1,
        player_name="Sachin Tendulkar",
        player_country="IND",
        format="odi",
        span_start=1989,
        span_end=2012,
        runs=18426,
        average=44.83,
        wickets=154,
    )
    return Snapshot([player], [stat])


def test_save_writes_both_collections(tmp_path: Path):
    store = SnapshotStore(tmp_path / "data")
    info = store.save(_snapshot())

    assert (info.players, info.stats) == (1, 1)
    players = json.loads((tmp_path / "data" / PLAYERS_FILENAME).read_text(encoding="utf-8"))
    stats = json.loads((tmp_path / "data" / STATS_FILENAME).read_text(encoding="utf-8"))
    assert players[0] == {"id": 1, "name": "Sachin Tendulkar", "country": "IND", "primary_role": "all-rounder"}
    assert stats[0]["player_name"] == "Sachin Tendulkar"
    assert stats[0]["span_end"] == 2012
    assert stats[0]["best_bowling"] == ""
    assert not list((tmp_path / "data").glob("*.tmp"))


def test_load_round_trip(tmp_path: Path):
    store = SnapshotStore(tmp_path)
    original = _snapshot()
    store.save(original)

    loaded = store.load()
    assert loaded.players == original.players
    assert loaded.stats == original.stats


def test_load_missing_files_gives_empty_snapshot(tmp_path: Path):
    store = SnapshotStore(tmp_path / "nothing-here")
    assert not store.exists()
    snapshot = store.load()
    assert snapshot.players == () and snapshot.stats == ()


def test_explicit_data_dir_wins_over_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("CRICKSTATS_DATA_DIR", str(tmp_path / "env"))
    store = SnapshotStore(tmp_path / "explicit")
    store.save(_snapshot())

    assert store.data_dir == tmp_path / "explicit"
    assert (tmp_path / "explicit" / PLAYERS_FILENAME).exists()
    assert not (tmp_path / "env").exists()


def test_load_rejects_non_array(tmp_path: Path):
    (tmp_path / PLAYERS_FILENAME).write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        SnapshotStore(tmp_path).load()


def test_loaded_non_finite_values_stay_off_the_leaderboard(tmp_path: Path):
    (tmp_path / PLAYERS_FILENAME).write_text(
        '[{"id": 1, "name": "A", "country": "IND", "primary_role": "batsman"},'
        ' {"id": 2, "name": "B", "country": "IND", "primary_role": "batsman"}]',
        encoding="utf-8",
    )
    (tmp_path / STATS_FILENAME).write_text(
        '[{"player_id": 1, "player_name": "A", "player_country": "IND", "format": "odi", "average": NaN},'
        ' {"player_id": 2, "player_name": "B", "player_country": "IND", "format": "odi", "average": Infinity}]',
        encoding="utf-8",
    )

    snapshot = SnapshotStore(tmp_path).load()

    assert len(snapshot.stats) == 2
    assert leaderboard(snapshot, "odi", "average") == []
