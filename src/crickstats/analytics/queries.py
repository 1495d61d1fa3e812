"""Player listing, lookup, leaderboards and comparisons over a snapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from crickstats.models import Format, Player, PlayerFormatStat, Snapshot

from .metrics import COMPARISON_METRICS, Metric, metric_value, parse_metric, parse_metrics, positive_value
from .results import PlayerComparison, PlayerPage, PlayerWithStats


class PlayerNotFoundError(LookupError):
    """Raised when a player id is not present in the snapshot."""

    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} not found")
        self.player_id = player_id


@dataclass(frozen=True)
class PlayerQuery:
    """Filters for the player listing."""

    search: Optional[str] = None
    country: Optional[str] = None
    role: Optional[str] = None
    format: Optional[str] = None
    page: int = 1
    limit: int = 20


def _with_stats(snapshot: Snapshot, player: Player) -> PlayerWithStats:
    return PlayerWithStats(**player.model_dump(), stats=list(snapshot.stats_for(player.name)))


def list_players(snapshot: Snapshot, query: PlayerQuery) -> PlayerPage:
    if query.page < 1 or query.limit < 1:
        raise ValueError("page and limit must be positive")

    players: Iterable[Player] = snapshot.players
    if query.search:
        needle = query.search.lower()
        players = [p for p in players if needle in p.name.lower()]
    if query.country:
        players = [p for p in players if p.country == query.country]
    if query.role:
        players = [p for p in players if p.primary_role == query.role]

    joined = [_with_stats(snapshot, player) for player in players]
    if query.format:
        joined = [p for p in joined if any(stat.format == query.format for stat in p.stats)]

    start = (query.page - 1) * query.limit
    total = len(joined)
    return PlayerPage(
        data=joined[start : start + query.limit],
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=math.ceil(total / query.limit),
    )


def get_player(snapshot: Snapshot, player_id: int) -> PlayerWithStats:
    player = snapshot.player_by_id(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)
    return _with_stats(snapshot, player)


def leaderboard(
    snapshot: Snapshot,
    fmt: str = Format.ODI.value,
    metric: str | Metric = Metric.RUNS,
    limit: int = 50,
) -> List[PlayerFormatStat]:
    """Top records for ``metric`` in one format; ties keep snapshot order."""

    metric = parse_metric(metric)
    ranked = [stat for stat in snapshot.stats_in_format(fmt) if positive_value(stat, metric) is not None]
    ranked.sort(key=lambda stat: metric_value(stat, metric), reverse=True)
    return ranked[: max(limit, 0)]


def compare_players(
    snapshot: Snapshot,
    player_ids: Sequence[int],
    metrics: Sequence[str | Metric] | None = None,
) -> List[PlayerComparison]:
    selected_metrics = parse_metrics(metrics) if metrics else COMPARISON_METRICS
    wanted = set(player_ids)
    comparison: List[PlayerComparison] = []
    for player in snapshot.players:
        if player.id not in wanted:
            continue
        by_format = {
            stat.format: {metric.value: metric_value(stat, metric) for metric in selected_metrics}
            for stat in snapshot.stats_for(player.name)
        }
        comparison.append(
            PlayerComparison(
                id=player.id,
                name=player.name,
                country=player.country,
                primary_role=player.primary_role,
                stats=by_format,
            )
        )
    return comparison


def countries(snapshot: Snapshot) -> List[str]:
    return sorted({player.country for player in snapshot.players})


def roles(snapshot: Snapshot) -> List[str]:
    return sorted({player.primary_role for player in snapshot.players if player.primary_role})


def formats() -> List[str]:
    return [Format.TEST.value, Format.ODI.value, Format.T20.value]
