"""REST API serving the published player snapshot."""

from __future__ import annotations

import logging
import re
from typing import List

from fastapi import APIRouter, FastAPI, HTTPException, Query, Request

from crickstats.analytics import (
    PlayerNotFoundError,
    PlayerQuery,
    UnknownMetricError,
    compare_players,
    countries,
    country_contribution,
    dashboard_stats,
    era_distribution,
    formats,
    get_player,
    leaderboard,
    list_players,
    roles,
    strike_rate_vs_average,
    top_boundary_hitters,
)
from crickstats.api.schemas import (
    BoundaryHitter,
    CountryContribution,
    DashboardStats,
    DecadeDistribution,
    ErrorResponse,
    HealthResponse,
    PlayerComparison,
    PlayerPage,
    PlayerWithStats,
    ScatterPoint,
)
from crickstats.config import default_data_dir, default_page_limit
from crickstats.models import PlayerFormatStat, Snapshot
from crickstats.persistence import SnapshotStore


logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "odi"
_ID_PREFIX = re.compile(r"^\s*[-+]?\d+")


def _parse_player_ids(raw: str | None) -> list[int]:
    if raw is None or not raw.strip():
        raise HTTPException(status_code=400, detail="Player IDs required")
    ids: list[int] = []
    for token in raw.split(","):
        match = _ID_PREFIX.match(token)
        if match:
            ids.append(int(match.group(0)))
        elif token.strip():
            logger.debug("Dropping unparseable player id %r", token)
    return ids


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _snapshot(request: Request) -> Snapshot:
    return request.app.state.snapshot


def create_app(snapshot: Snapshot | None = None, store: SnapshotStore | None = None) -> FastAPI:
    app = FastAPI(title="crickstats")
    store = store or SnapshotStore(default_data_dir())
    app.state.store = store
    app.state.snapshot = snapshot if snapshot is not None else store.load()
    page_limit = default_page_limit()
    logger.info("Serving %r", app.state.snapshot)

    router = APIRouter(prefix="/api")

    @router.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        current = _snapshot(request)
        return HealthResponse(status="OK", players=len(current.players), stats=len(current.stats))

    @router.get("/players", response_model=PlayerPage)
    async def players_index(
        request: Request,
        search: str | None = None,
        country: str | None = None,
        role: str | None = None,
        format: str | None = None,
        page: int = Query(1, ge=1),
        limit: int = Query(page_limit, ge=1),
    ):
        query = PlayerQuery(
            search=search,
            country=country,
            role=role,
            format=format,
            page=page,
            limit=limit,
        )
        return list_players(_snapshot(request), query)

    @router.get(
        "/players/{player_id}",
        response_model=PlayerWithStats,
        responses={404: {"model": ErrorResponse}},
    )
    async def player_detail(request: Request, player_id: int):
        try:
            return get_player(_snapshot(request), player_id)
        except PlayerNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Player not found") from exc

    @router.get("/leaderboard", response_model=List[PlayerFormatStat])
    async def leaderboard_view(
        request: Request,
        format: str = DEFAULT_FORMAT,
        metric_type: str = Query("runs", alias="type"),
        limit: int = Query(50, ge=0),
    ):
        try:
            return leaderboard(_snapshot(request), format, metric_type, limit)
        except UnknownMetricError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @router.get(
        "/compare",
        response_model=List[PlayerComparison],
        responses={400: {"model": ErrorResponse}},
    )
    async def compare_view(
        request: Request,
        players: str | None = None,
        metrics: str | None = None,
    ):
        player_ids = _parse_player_ids(players)
        try:
            return compare_players(_snapshot(request), player_ids, _split_csv(metrics) or None)
        except UnknownMetricError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @router.get("/countries", response_model=List[str])
    async def countries_view(request: Request):
        return countries(_snapshot(request))

    @router.get("/roles", response_model=List[str])
    async def roles_view(request: Request):
        return roles(_snapshot(request))

    @router.get("/formats", response_model=List[str])
    async def formats_view():
        return formats()

    @router.get("/analytics/era-distribution", response_model=List[DecadeDistribution])
    async def era_distribution_view(
        request: Request,
        format: str = DEFAULT_FORMAT,
        metric: str = "average",
    ):
        try:
            return era_distribution(_snapshot(request), format, metric)
        except UnknownMetricError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @router.get("/analytics/country-contribution", response_model=List[CountryContribution])
    async def country_contribution_view(request: Request, format: str = DEFAULT_FORMAT):
        return country_contribution(_snapshot(request), format)

    @router.get("/analytics/top-boundary-hitters", response_model=List[BoundaryHitter])
    async def boundary_hitters_view(
        request: Request,
        format: str = DEFAULT_FORMAT,
        limit: int = Query(20, ge=0),
    ):
        return top_boundary_hitters(_snapshot(request), format, limit)

    @router.get("/analytics/strike-rate-vs-average", response_model=List[ScatterPoint])
    async def scatter_view(
        request: Request,
        format: str = DEFAULT_FORMAT,
        min_runs: int = Query(1000, alias="minRuns"),
    ):
        return strike_rate_vs_average(_snapshot(request), format, min_runs)

    @router.get("/analytics/dashboard-stats", response_model=DashboardStats)
    async def dashboard_view(request: Request, format: str = DEFAULT_FORMAT):
        return dashboard_stats(_snapshot(request), format)

    app.include_router(router)
    return app
