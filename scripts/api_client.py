"""Lightweight REST client for the crickstats API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the crickstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3001")
    parser.add_argument("--format", default="odi", help="Format for leaderboard and analytics calls")
    parser.add_argument("--limit", type=int, default=5, help="Rows to request from list endpoints")
    parser.add_argument("--player", type=int, metavar="ID", help="Fetch a single player and exit")
    parser.add_argument("--compare", metavar="IDS", help="Compare comma separated player ids and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player is not None:
            resp = client.get(f"/api/players/{args.player}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.player} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.compare:
            resp = client.get("/api/compare", params={"players": args.compare})
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        resp = client.get("/api/health")
        resp.raise_for_status()
        print("Health check:", resp.json())

        resp = client.get("/api/players", params={"limit": args.limit})
        resp.raise_for_status()
        print(f"Players endpoint: {len(resp.json()['data'])} players loaded")

        resp = client.get(
            "/api/leaderboard",
            params={"format": args.format, "type": "runs", "limit": args.limit},
        )
        resp.raise_for_status()
        print(f"Leaderboard: {len(resp.json())} entries")

        resp = client.get(
            "/api/analytics/top-boundary-hitters",
            params={"format": args.format, "limit": args.limit},
        )
        resp.raise_for_status()
        print(f"Analytics: {len(resp.json())} boundary hitters")


if __name__ == "__main__":
    main()
