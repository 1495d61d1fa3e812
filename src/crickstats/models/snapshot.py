"""Read-only pairing of players and their per-format statistics."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .player import Player, PlayerFormatStat


class Snapshot:
    """Immutable ``(players, stats)`` view that the query engine reads from.

    Stat records are indexed by ``player_name`` because the name, not the id,
    is the join key between the two collections.
    """

    __slots__ = ("_players", "_stats", "_stats_by_name", "_players_by_id")

    def __init__(self, players: Iterable[Player] = (), stats: Iterable[PlayerFormatStat] = ()):
        self._players: Tuple[Player, ...] = tuple(players)
        self._stats: Tuple[PlayerFormatStat, ...] = tuple(stats)
        by_name: Dict[str, List[PlayerFormatStat]] = {}
        for stat in self._stats:
            by_name.setdefault(stat.player_name, []).append(stat)
        self._stats_by_name = {name: tuple(items) for name, items in by_name.items()}
        self._players_by_id = {player.id: player for player in self._players}

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def stats(self) -> Tuple[PlayerFormatStat, ...]:
        return self._stats

    def stats_for(self, name: str) -> Tuple[PlayerFormatStat, ...]:
        return self._stats_by_name.get(name, ())

    def player_by_id(self, player_id: int) -> Optional[Player]:
        return self._players_by_id.get(player_id)

    def stats_in_format(self, fmt: str) -> List[PlayerFormatStat]:
        return [stat for stat in self._stats if stat.format == fmt]

    def __len__(self) -> int:
        return len(self._players)

    def __repr__(self) -> str:
        return f"Snapshot(players={len(self._players)}, stats={len(self._stats)})"

    @classmethod
    def from_payload(
        cls,
        players: Sequence[dict],
        stats: Sequence[dict],
    ) -> "Snapshot":
        return cls(
            (Player.model_validate(item) for item in players),
            (PlayerFormatStat.model_validate(item) for item in stats),
        )

    def to_payload(self) -> Tuple[List[dict], List[dict]]:
        return (
            [player.model_dump(mode="json") for player in self._players],
            [stat.model_dump(mode="json") for stat in self._stats],
        )
