import json
from pathlib import Path

import pytest

from crickstats import cli
from crickstats.config_loader import DataLayout


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv("CRICKSTATS_DATA_DIR", raising=False)


def _write_sources(root: Path) -> None:
    (root / "Batting").mkdir(parents=True)
    (root / "Fielding").mkdir(parents=True)
    (root / "Batting" / "test.csv").write_text(
        "Player,Span,Mat,Inns,NO,Runs,HS,Ave,BF,SR,100,50,4s,6s\n"
        "AC Gilchrist (AUS),1999-2008,96,137,20,5570,204*,47.6,6796,81.95,17,26,677,100\n",
        encoding="utf-8",
    )
    (root / "Fielding" / "Fielding_test.csv").write_text(
        "Player,Span,Mat,Inns,Dis,Ct,St,MD,D/I\n"
        "AC Gilchrist (AUS),1999-2008,96,191,416,379,37,6,2.178\n",
        encoding="utf-8",
    )


def test_etl_publishes_snapshot_and_report(tmp_path: Path, capsys):
    _write_sources(tmp_path / "src")
    out_dir = tmp_path / "out"
    report_path = tmp_path / "report.json"

    code = cli.main(["etl", str(tmp_path / "src"), "--output", str(out_dir), "--report", str(report_path)])

    assert code == 0
    players = json.loads((out_dir / "players.json").read_text(encoding="utf-8"))
    stats = json.loads((out_dir / "player-stats.json").read_text(encoding="utf-8"))
    assert players == [{"id": 1, "name": "AC Gilchrist", "country": "AUS", "primary_role": "wicket-keeper"}]
    assert stats[0]["runs"] == 5570
    assert stats[0]["stumpings"] == 37
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["records_created"] == 1 and report["records_updated"] == 1
    assert "Processed 1 players" in capsys.readouterr().out


def test_etl_with_profile_and_column_override(tmp_path: Path):
    source = tmp_path / "src"
    (source / "Batting").mkdir(parents=True)
    (source / "Batting" / "t20.csv").write_text(
        "Player,Span,Mat,Runs Scored\nBabar Azam (PAK),2016-2024,119,4145\n",
        encoding="utf-8",
    )
    profile = tmp_path / "layout.json"
    DataLayout(source_dir=str(source), output_dir=str(tmp_path / "out")).save(profile)

    code = cli.main(["etl", "--load-profile", str(profile), "--column", "batting.runs=Runs Scored"])

    assert code == 0
    stats = json.loads((tmp_path / "out" / "player-stats.json").read_text(encoding="utf-8"))
    assert stats[0]["runs"] == 4145
    assert stats[0]["format"] == "t20"


def test_etl_failure_does_not_publish(tmp_path: Path, capsys):
    source = tmp_path / "src"
    (source / "Batting").mkdir(parents=True)
    (source / "Batting" / "ODI data.csv").write_bytes(b"Player,Runs\n\xff\xfe,1\n")
    out_dir = tmp_path / "out"

    code = cli.main(["etl", str(source), "--output", str(out_dir)])

    assert code == 1
    assert not (out_dir / "players.json").exists()
    assert "no snapshot published" in capsys.readouterr().err


def test_parse_columns_rejects_malformed_entry():
    with pytest.raises(ValueError):
        cli._parse_columns(["runs=Runs"])


def test_etl_output_flag_wins_over_env(tmp_path: Path, monkeypatch):
    _write_sources(tmp_path / "src")
    monkeypatch.setenv("CRICKSTATS_DATA_DIR", str(tmp_path / "env"))

    code = cli.main(["etl", str(tmp_path / "src"), "--output", str(tmp_path / "out")])

    assert code == 0
    assert (tmp_path / "out" / "players.json").exists()
    assert not (tmp_path / "env").exists()


def test_etl_falls_back_to_env_data_dir(tmp_path: Path, monkeypatch):
    _write_sources(tmp_path / "src")
    monkeypatch.setenv("CRICKSTATS_DATA_DIR", str(tmp_path / "env"))

    assert cli.main(["etl", str(tmp_path / "src")]) == 0
    assert (tmp_path / "env" / "player-stats.json").exists()


def test_etl_malformed_column_entry_exits_cleanly(tmp_path: Path, capsys):
    _write_sources(tmp_path / "src")

    code = cli.main(["etl", str(tmp_path / "src"), "--output", str(tmp_path / "out"), "--column", "runs=Runs"])

    assert code == 2
    assert "expected domain.field=Column" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()
