"""Batch pipeline: load the three domain tables, merge, classify, publish."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from crickstats.config.sources import SourceSpec, get_sources, iter_sources
from crickstats.models import Snapshot

from .merge import MergeReport, RecordMerger, StatRow
from .roles import classify_players


logger = logging.getLogger(__name__)


class PipelineError(RuntimeError):
    """Raised when a source cannot be read; no snapshot is produced."""


def load_source_csv(path: Path, columns: Mapping[str, str]) -> List[StatRow]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            return [StatRow.from_mapping(row, columns) for row in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise PipelineError(f"Unable to read {path}: {exc}") from exc


def _columns_for(source: SourceSpec, overrides: Mapping[str, Mapping[str, str]]) -> Mapping[str, str]:
    extra = overrides.get(source.domain.value)
    if not extra:
        return source.columns
    return {**source.columns, **extra}


def _warn_unknown_overrides(overrides: Mapping[str, Mapping[str, str]]) -> None:
    for domain, columns in overrides.items():
        try:
            sources = get_sources(domain)
        except KeyError:
            logger.warning("Ignoring column overrides for unknown domain %r", domain)
            continue
        known = sources[0].columns
        for field in columns:
            if field not in known:
                logger.warning("Ignoring unknown %s column override %r", domain, field)


def build_snapshot(
    source_dir: Optional[Path] = None,
    *,
    rows_by_source: Mapping[str, Sequence[StatRow]] | None = None,
    column_overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> Tuple[Snapshot, MergeReport]:
    """Run batting, bowling and fielding passes, then classify roles.

    ``rows_by_source`` maps a source label (e.g. ``"Bowling_ODI"``) to rows
    that were loaded elsewhere; labels it does not cover are read from
    ``source_dir`` when given. Missing files are skipped and listed in the
    report.
    """

    overrides = column_overrides or {}
    _warn_unknown_overrides(overrides)
    merger = RecordMerger()

    for source in iter_sources():
        rows: Optional[Sequence[StatRow]] = None
        if rows_by_source is not None and source.label in rows_by_source:
            rows = rows_by_source[source.label]
        elif source_dir is not None:
            path = Path(source_dir) / source.relative_path
            if not path.exists():
                logger.warning("Source file not found, skipping: %s", path)
                merger.report.missing_sources.append(source.relative_path)
                continue
            logger.info("Processing %s %s data from %s", source.label, source.domain.value, path)
            rows = load_source_csv(path, _columns_for(source, overrides))
        if rows is None:
            merger.report.missing_sources.append(source.relative_path)
            continue
        merger.merge_rows(source, rows)

    stats = merger.records()
    roles = classify_players((player.name for player in merger.registry.players()), stats)
    players = merger.registry.with_roles(roles)
    snapshot = Snapshot(players, stats)
    logger.info("Built snapshot with %d players and %d stat records", len(players), len(stats))
    return snapshot, merger.report
