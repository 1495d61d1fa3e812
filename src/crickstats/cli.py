"""Command-line interface for building and serving player snapshots."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from crickstats.config import default_data_dir
from crickstats.config_loader import DataLayout
from crickstats.ingest import PipelineError, build_snapshot
from crickstats.persistence import SnapshotStore


logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cricket statistics ETL and API")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    etl = subparsers.add_parser("etl", help="Merge batting, bowling and fielding tables")
    etl.add_argument("source_dir", type=Path, nargs="?", default=None, help="Directory holding Batting/, Bowling/ and Fielding/")
    etl.add_argument("--output", type=Path, default=None, help="Directory for players.json and player-stats.json")
    etl.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write merge summary JSON",
    )
    etl.add_argument(
        "--column",
        action="append",
        default=[],
        help="Column override as domain.field=Column (e.g., batting.runs=Runs Scored)",
    )
    etl.add_argument("--load-profile", type=Path, help="Load layout profile JSON", default=None)
    etl.add_argument("--save-profile", type=Path, help="Save layout profile JSON", default=None)

    serve = subparsers.add_parser("serve", help="Serve the published snapshot over HTTP")
    serve.add_argument("--data", type=Path, default=None, help="Snapshot directory")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=3001)
    return parser.parse_args(argv)


def _parse_columns(entries: list[str]) -> dict[str, dict[str, str]]:
    overrides: dict[str, dict[str, str]] = {}
    for entry in entries:
        if "=" not in entry or "." not in entry.split("=", 1)[0]:
            raise ValueError(f"Invalid column entry '{entry}', expected domain.field=Column")
        key, column = entry.split("=", 1)
        domain, field = key.split(".", 1)
        overrides.setdefault(domain.strip().lower(), {})[field.strip()] = column.strip()
    return overrides


def _run_etl(args: argparse.Namespace) -> int:
    layout = DataLayout.load(args.load_profile) if args.load_profile else DataLayout()
    column_overrides = layout.column_overrides
    try:
        parsed_columns = _parse_columns(args.column)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    for domain, columns in parsed_columns.items():
        column_overrides = {**column_overrides, domain: {**column_overrides.get(domain, {}), **columns}}

    source_dir = args.source_dir or (Path(layout.source_dir) if layout.source_dir else None)
    if source_dir is None:
        print("A source directory is required (argument or profile)", file=sys.stderr)
        return 2
    output_dir = args.output or (Path(layout.output_dir) if layout.output_dir else default_data_dir())

    if args.save_profile:
        DataLayout(str(source_dir), str(output_dir), column_overrides).save(args.save_profile)
        print(f"Saved layout profile to {args.save_profile}")

    try:
        snapshot, report = build_snapshot(source_dir, column_overrides=column_overrides)
    except PipelineError as exc:
        logger.error("ETL aborted: %s", exc)
        print(f"ETL aborted, no snapshot published: {exc}", file=sys.stderr)
        return 1

    info = SnapshotStore(output_dir).save(snapshot)
    print(f"Processed {info.players} players")
    print(f"Processed {info.stats} stat records")
    print(f"Data saved to {info.data_dir}")
    if report.missing_sources:
        preview = ", ".join(report.missing_sources[:5])
        more = len(report.missing_sources) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Missing sources: {preview}{suffix}")
    if args.report:
        args.report.write_text(json.dumps(report.as_dict(), indent=2), encoding="utf-8")
        print(f"Wrote merge report to {args.report}")
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from crickstats.api import create_app

    store = SnapshotStore(args.data or default_data_dir())
    app = create_app(store=store)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.command == "etl":
        return _run_etl(args)
    return _run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
