"""Canonical records shared by the pipeline, the store and the query engine."""

from .player import (
    Format,
    Player,
    PlayerFormatStat,
    Role,
)
from .snapshot import Snapshot

__all__ = [
    "Format",
    "Player",
    "PlayerFormatStat",
    "Role",
    "Snapshot",
]
