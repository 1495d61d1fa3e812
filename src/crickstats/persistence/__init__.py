"""Persistence layer for published player snapshots."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from crickstats.models import Snapshot


logger = logging.getLogger(__name__)

PLAYERS_FILENAME = "players.json"
STATS_FILENAME = "player-stats.json"


@dataclass
class SnapshotInfo:
    data_dir: Path
    players: int
    stats: int
    saved_at: Optional[datetime]


class SnapshotStore:
    """Flat JSON files holding the ``players`` and ``player_format_stats`` collections."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    @property
    def players_path(self) -> Path:
        return self.data_dir / PLAYERS_FILENAME

    @property
    def stats_path(self) -> Path:
        return self.data_dir / STATS_FILENAME

    def exists(self) -> bool:
        return self.players_path.exists() and self.stats_path.exists()

    def _write_atomic(self, path: Path, payload: Any) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.flush()
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def save(self, snapshot: Snapshot) -> SnapshotInfo:
        players, stats = snapshot.to_payload()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        # stats first: a reader that sees the new players file also sees matching stats
        self._write_atomic(self.stats_path, stats)
        self._write_atomic(self.players_path, players)
        logger.info(
            "Saved %d players and %d stat records to %s", len(players), len(stats), self.data_dir
        )
        return SnapshotInfo(
            data_dir=self.data_dir,
            players=len(players),
            stats=len(stats),
            saved_at=datetime.now(timezone.utc),
        )

    def _read(self, path: Path) -> list:
        if not path.exists():
            logger.warning("Snapshot file missing: %s", path)
            return []
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{path} does not contain a JSON array")
        return data

    def load(self) -> Snapshot:
        players = self._read(self.players_path)
        stats = self._read(self.stats_path)
        snapshot = Snapshot.from_payload(players, stats)
        logger.info("Loaded %d players and %d stats", len(snapshot.players), len(snapshot.stats))
        return snapshot


__all__ = [
    "PLAYERS_FILENAME",
    "STATS_FILENAME",
    "SnapshotInfo",
    "SnapshotStore",
]
