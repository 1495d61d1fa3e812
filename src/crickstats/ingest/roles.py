"""Post-merge role classification."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from crickstats.models import PlayerFormatStat, Role

BATTING_RUNS_THRESHOLD = 1000


def classify_role(stats: Iterable[PlayerFormatStat]) -> Role:
    """Pick one role from a player's records across every format.

    Priority: all-rounder, bowler, wicket-keeper, batsman.
    """

    has_bowling = has_batting = has_fielding = False
    for stat in stats:
        has_bowling = has_bowling or stat.wickets > 0
        has_batting = has_batting or stat.runs > BATTING_RUNS_THRESHOLD
        has_fielding = has_fielding or stat.stumpings > 0

    if has_bowling and has_batting:
        return Role.ALL_ROUNDER
    if has_bowling:
        return Role.BOWLER
    if has_fielding:
        return Role.WICKET_KEEPER
    return Role.BATSMAN


def classify_players(names: Iterable[str], stats: Sequence[PlayerFormatStat]) -> Dict[str, Role]:
    by_name: Dict[str, list[PlayerFormatStat]] = {}
    for stat in stats:
        by_name.setdefault(stat.player_name, []).append(stat)
    return {name: classify_role(by_name.get(name, ())) for name in names}
