"""Read-only query and analytics operations over a published snapshot."""

from .distributions import (
    country_contribution,
    dashboard_stats,
    era_distribution,
    positional_quantile,
    strike_rate_vs_average,
    top_boundary_hitters,
)
from .metrics import COMPARISON_METRICS, Metric, UnknownMetricError, parse_metric, parse_metrics
from .queries import (
    PlayerNotFoundError,
    PlayerQuery,
    compare_players,
    countries,
    formats,
    get_player,
    leaderboard,
    list_players,
    roles,
)

__all__ = [
    "COMPARISON_METRICS",
    "Metric",
    "PlayerNotFoundError",
    "PlayerQuery",
    "UnknownMetricError",
    "compare_players",
    "countries",
    "country_contribution",
    "dashboard_stats",
    "era_distribution",
    "formats",
    "get_player",
    "leaderboard",
    "list_players",
    "parse_metric",
    "parse_metrics",
    "positional_quantile",
    "roles",
    "strike_rate_vs_average",
    "top_boundary_hitters",
]
