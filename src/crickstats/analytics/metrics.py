"""Enumerated statistic fields and their accessors."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

from crickstats.models import PlayerFormatStat


class UnknownMetricError(ValueError):
    """Raised when a metric name does not map to a numeric statistic."""


class Metric(str, Enum):
    MATCHES = "matches"
    INNINGS = "innings"
    NOT_OUT = "not_out"
    RUNS = "runs"
    AVERAGE = "average"
    BALLS_FACED = "balls_faced"
    STRIKE_RATE = "strike_rate"
    HUNDREDS = "hundreds"
    FIFTIES = "fifties"
    FOURS = "fours"
    SIXES = "sixes"
    CATCHES = "catches"
    STUMPINGS = "stumpings"
    WICKETS = "wickets"
    BOWLING_AVERAGE = "bowling_average"
    BOWLING_ECONOMY = "bowling_economy"
    BOWLING_STRIKE_RATE = "bowling_strike_rate"
    FIVE_WICKETS = "five_wickets"
    TEN_WICKETS = "ten_wickets"


def _field_getter(name: str) -> Callable[[PlayerFormatStat], float]:
    def getter(stat: PlayerFormatStat) -> float:
        return getattr(stat, name)

    return getter


METRIC_ACCESSORS: Dict[Metric, Callable[[PlayerFormatStat], float]] = {
    metric: _field_getter(metric.value) for metric in Metric
}

COMPARISON_METRICS: Tuple[Metric, ...] = (
    Metric.RUNS,
    Metric.AVERAGE,
    Metric.STRIKE_RATE,
    Metric.HUNDREDS,
    Metric.FIFTIES,
    Metric.WICKETS,
    Metric.BOWLING_AVERAGE,
    Metric.MATCHES,
)


def parse_metric(name: str | Metric) -> Metric:
    if isinstance(name, Metric):
        return name
    try:
        return Metric(name.strip().lower())
    except ValueError:
        allowed = ", ".join(metric.value for metric in Metric)
        raise UnknownMetricError(f"Unknown metric {name!r}; expected one of: {allowed}") from None


def parse_metrics(names: Iterable[str | Metric]) -> Tuple[Metric, ...]:
    return tuple(parse_metric(name) for name in names)


def metric_value(stat: PlayerFormatStat, metric: Metric) -> float:
    return METRIC_ACCESSORS[metric](stat)


def positive_value(stat: PlayerFormatStat, metric: Metric) -> Optional[float]:
    """Metric value when it is a finite number above zero, else ``None``."""

    value = metric_value(stat, metric)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return value
