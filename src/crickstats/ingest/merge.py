"""Domain-scoped merging of batting, bowling and fielding rows into stat records."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from crickstats.config.sources import Domain, SourceSpec
from crickstats.models import Player, PlayerFormatStat

from .identity import IdentityRegistry, parse_span


logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"^\s*[-+]?\d+")
_FLOAT_PREFIX = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class StatRow(BaseModel):
    """One raw source row, keyed by canonical field names."""

    player: str = ""
    values: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Optional[str]], columns: Mapping[str, str]) -> "StatRow":
        values: Dict[str, str] = {}
        for key, column in columns.items():
            raw = row.get(column)
            if raw is None:
                continue
            values[key] = raw.strip()
        player = values.pop("player", "")
        return cls(player=player, values=values)

    def text(self, key: str) -> str:
        return self.values.get(key, "")

    def integer(self, key: str) -> int:
        return _parse_int(self.values.get(key))

    def number(self, key: str) -> float:
        return _parse_float(self.values.get(key))


def _parse_int(raw: Optional[str]) -> int:
    if not raw:
        return 0
    match = _INT_PREFIX.match(raw)
    if not match:
        logger.debug("Coercing non-numeric value %r to 0", raw)
        return 0
    return int(match.group(0))


def _parse_float(raw: Optional[str]) -> float:
    if not raw:
        return 0.0
    match = _FLOAT_PREFIX.match(raw)
    if not match:
        logger.debug("Coercing non-numeric value %r to 0", raw)
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value):
        return 0.0
    return value


def _batting_fields(row: StatRow) -> dict:
    return {
        "matches": row.integer("matches"),
        "innings": row.integer("innings"),
        "not_out": row.integer("not_out"),
        "runs": row.integer("runs"),
        "highest": row.text("highest"),
        "average": row.number("average"),
        "balls_faced": row.integer("balls_faced"),
        "strike_rate": row.number("strike_rate"),
        "hundreds": row.integer("hundreds"),
        "fifties": row.integer("fifties"),
        "fours": row.integer("fours"),
        "sixes": row.integer("sixes"),
    }


def _bowling_fields(row: StatRow) -> dict:
    return {
        "wickets": row.integer("wickets"),
        "bowling_average": row.number("bowling_average"),
        "bowling_economy": row.number("bowling_economy"),
        "bowling_strike_rate": row.number("bowling_strike_rate"),
        "best_bowling": row.text("best_bowling"),
        "five_wickets": row.integer("five_wickets"),
        "ten_wickets": row.integer("ten_wickets"),
    }


def _fielding_fields(row: StatRow) -> dict:
    return {
        "catches": row.integer("catches"),
        "stumpings": row.integer("stumpings"),
    }


def _new_record(player: Player, fmt: str, *, span_raw: Optional[str], **fields) -> PlayerFormatStat:
    span = parse_span(span_raw)
    return PlayerFormatStat(
        player_id=player.id,
        player_name=player.name,
        player_country=player.country,
        format=fmt,
        span_start=span.start,
        span_end=span.end,
        **fields,
    )


def merge_batting(
    existing: Optional[PlayerFormatStat], player: Player, fmt: str, row: StatRow
) -> PlayerFormatStat:
    fields = _batting_fields(row)
    if existing is None:
        return _new_record(player, fmt, span_raw=row.text("span"), **fields)
    span = parse_span(row.text("span"))
    return existing.model_copy(update={**fields, "span_start": span.start, "span_end": span.end})


def merge_bowling(
    existing: Optional[PlayerFormatStat], player: Player, fmt: str, row: StatRow
) -> PlayerFormatStat:
    fields = _bowling_fields(row)
    if existing is None:
        return _new_record(
            player,
            fmt,
            span_raw=row.text("span"),
            matches=row.integer("matches"),
            innings=row.integer("innings"),
            **fields,
        )
    return existing.model_copy(update=fields)


def merge_fielding(
    existing: Optional[PlayerFormatStat], player: Player, fmt: str, row: StatRow
) -> PlayerFormatStat:
    fields = _fielding_fields(row)
    if existing is None:
        return _new_record(
            player,
            fmt,
            span_raw=None,
            matches=row.integer("matches"),
            innings=row.integer("innings"),
            **fields,
        )
    return existing.model_copy(update=fields)


MergeFn = Callable[[Optional[PlayerFormatStat], Player, str, StatRow], PlayerFormatStat]

DOMAIN_MERGERS: Dict[Domain, MergeFn] = {
    Domain.BATTING: merge_batting,
    Domain.BOWLING: merge_bowling,
    Domain.FIELDING: merge_fielding,
}


@dataclass
class MergeReport:
    rows_processed: Dict[str, int] = field(default_factory=dict)
    records_created: int = 0
    records_updated: int = 0
    skipped_rows: List[str] = field(default_factory=list)
    missing_sources: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "rows_processed": dict(self.rows_processed),
            "records_created": self.records_created,
            "records_updated": self.records_updated,
            "skipped_rows": list(self.skipped_rows),
            "missing_sources": list(self.missing_sources),
        }


class RecordMerger:
    """Upserts one stat record per ``(player_name, format)`` across domain passes."""

    def __init__(self, registry: IdentityRegistry | None = None) -> None:
        self.registry = registry or IdentityRegistry()
        self._records: Dict[Tuple[str, str], PlayerFormatStat] = {}
        self.report = MergeReport()

    def merge_row(self, source: SourceSpec, row: StatRow) -> Optional[PlayerFormatStat]:
        if not row.player:
            self.report.skipped_rows.append(f"{source.label}: row without player")
            return None
        player = self.registry.resolve(row.player, source.seed_role)
        fmt = source.format.value
        key = (player.name, fmt)
        existing = self._records.get(key)
        merged = DOMAIN_MERGERS[source.domain](existing, player, fmt, row)
        if existing is None:
            self.report.records_created += 1
        else:
            self.report.records_updated += 1
        self._records[key] = merged
        return merged

    def merge_rows(self, source: SourceSpec, rows) -> int:
        count = 0
        for row in rows:
            if self.merge_row(source, row) is not None:
                count += 1
        domain = source.domain.value
        self.report.rows_processed[domain] = self.report.rows_processed.get(domain, 0) + count
        logger.info("Merged %d %s rows from %s", count, domain, source.label)
        return count

    def records(self) -> List[PlayerFormatStat]:
        return list(self._records.values())
