"""Input adapters that reconcile raw statistics tables into canonical records."""

from .identity import IdentityRegistry, Span, parse_player, parse_span
from .merge import (
    MergeReport,
    RecordMerger,
    StatRow,
    merge_batting,
    merge_bowling,
    merge_fielding,
)
from .pipeline import PipelineError, build_snapshot, load_source_csv
from .roles import classify_players, classify_role

__all__ = [
    "IdentityRegistry",
    "MergeReport",
    "PipelineError",
    "RecordMerger",
    "Span",
    "StatRow",
    "build_snapshot",
    "classify_players",
    "classify_role",
    "load_source_csv",
    "merge_batting",
    "merge_bowling",
    "merge_fielding",
    "parse_player",
    "parse_span",
]
