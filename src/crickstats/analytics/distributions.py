"""Distributional views: eras, countries, boundaries, scatter and dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from statistics import fmean
from typing import Dict, List, Sequence, Set

from crickstats.models import Format, PlayerFormatStat, Snapshot

from .metrics import Metric, parse_metric, positive_value
from .queries import leaderboard
from .results import (
    BoundaryHitter,
    CountryContribution,
    CountryTotals,
    DashboardStats,
    DashboardSummary,
    DecadeDistribution,
    ScatterPoint,
)

DASHBOARD_TOP_N = 5
DASHBOARD_TOP_COUNTRIES = 10
TOP_AVERAGE_MIN_RUNS = 1000


def positional_quantile(sorted_values: Sequence[float], fraction: float) -> float:
    """Value at ``floor(n * fraction)`` of an ascending sample, no interpolation."""

    if not sorted_values:
        raise ValueError("quantile of an empty sample")
    index = min(int(len(sorted_values) * fraction), len(sorted_values) - 1)
    return sorted_values[index]


def decade_of(year: int) -> int:
    return (year // 10) * 10


def era_distribution(
    snapshot: Snapshot,
    fmt: str = Format.ODI.value,
    metric: str | Metric = Metric.AVERAGE,
) -> List[DecadeDistribution]:
    metric = parse_metric(metric)
    buckets: Dict[str, List[float]] = {}
    for stat in snapshot.stats_in_format(fmt):
        value = positive_value(stat, metric)
        if value is None or not stat.span_start:
            continue
        buckets.setdefault(f"{decade_of(stat.span_start)}s", []).append(value)

    result: List[DecadeDistribution] = []
    for decade, values in buckets.items():
        ordered = sorted(values)
        result.append(
            DecadeDistribution(
                decade=decade,
                min=ordered[0],
                q1=positional_quantile(ordered, 0.25),
                median=positional_quantile(ordered, 0.5),
                q3=positional_quantile(ordered, 0.75),
                max=ordered[-1],
                mean=fmean(values),
                count=len(values),
            )
        )
    return result


def _mean_of_positive(values: Sequence[float]) -> float:
    positive = [value for value in values if value > 0]
    return fmean(positive) if positive else 0.0


def country_contribution(snapshot: Snapshot, fmt: str = Format.ODI.value) -> List[CountryContribution]:
    grouped: Dict[str, List[PlayerFormatStat]] = {}
    for stat in snapshot.stats_in_format(fmt):
        grouped.setdefault(stat.player_country, []).append(stat)

    contributions = [
        CountryContribution(
            country=country,
            player_count=len(stats),
            total_runs=sum(stat.runs for stat in stats),
            total_wickets=sum(stat.wickets for stat in stats),
            avg_batting_avg=_mean_of_positive([stat.average for stat in stats]),
            avg_bowling_avg=_mean_of_positive([stat.bowling_average for stat in stats]),
        )
        for country, stats in grouped.items()
    ]
    contributions.sort(key=lambda item: item.total_runs, reverse=True)
    return contributions


def top_boundary_hitters(
    snapshot: Snapshot, fmt: str = Format.ODI.value, limit: int = 20
) -> List[BoundaryHitter]:
    hitters = [
        BoundaryHitter(
            name=stat.player_name,
            country=stat.player_country,
            fours=stat.fours,
            sixes=stat.sixes,
            total_boundaries=stat.fours + stat.sixes,
            runs=stat.runs,
            matches=stat.matches,
        )
        for stat in snapshot.stats_in_format(fmt)
        if stat.fours > 0 or stat.sixes > 0
    ]
    hitters.sort(key=lambda item: item.total_boundaries, reverse=True)
    return hitters[: max(limit, 0)]


def strike_rate_vs_average(
    snapshot: Snapshot, fmt: str = Format.ODI.value, min_runs: int = 1000
) -> List[ScatterPoint]:
    return [
        ScatterPoint(
            name=stat.player_name,
            country=stat.player_country,
            average=stat.average,
            strike_rate=stat.strike_rate,
            runs=stat.runs,
            matches=stat.matches,
        )
        for stat in snapshot.stats_in_format(fmt)
        if stat.runs >= min_runs and stat.average > 0 and stat.strike_rate > 0
    ]


@dataclass
class _CountryTally:
    players: Set[str] = field(default_factory=set)
    runs: int = 0
    wickets: int = 0


def dashboard_stats(snapshot: Snapshot, fmt: str = Format.ODI.value) -> DashboardStats:
    stats = snapshot.stats_in_format(fmt)

    summary = DashboardSummary(
        total_players=len(snapshot.players),
        total_stats=len(snapshot.stats),
        total_runs=sum(stat.runs for stat in stats),
        total_wickets=sum(stat.wickets for stat in stats),
        total_matches=sum(stat.matches for stat in stats),
        total_centuries=sum(stat.hundreds for stat in stats),
        total_fifties=sum(stat.fifties for stat in stats),
    )

    top_averages = [
        stat for stat in stats if stat.average > 0 and stat.runs > TOP_AVERAGE_MIN_RUNS
    ]
    top_averages.sort(key=lambda stat: stat.average, reverse=True)

    tallies: Dict[str, _CountryTally] = {}
    for stat in stats:
        tally = tallies.setdefault(stat.player_country, _CountryTally())
        tally.players.add(stat.player_name)
        tally.runs += stat.runs
        tally.wickets += stat.wickets
    top_countries = sorted(
        (
            CountryTotals(
                country=country,
                player_count=len(tally.players),
                total_runs=tally.runs,
                total_wickets=tally.wickets,
            )
            for country, tally in tallies.items()
        ),
        key=lambda item: item.total_runs,
        reverse=True,
    )

    return DashboardStats(
        summary=summary,
        top_run_scorers=leaderboard(snapshot, fmt, Metric.RUNS, DASHBOARD_TOP_N),
        top_wicket_takers=leaderboard(snapshot, fmt, Metric.WICKETS, DASHBOARD_TOP_N),
        top_averages=top_averages[:DASHBOARD_TOP_N],
        top_countries=top_countries[:DASHBOARD_TOP_COUNTRIES],
    )
