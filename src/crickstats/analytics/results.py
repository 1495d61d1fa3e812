"""Response shapes produced by the query engine."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from crickstats.models import Player, PlayerFormatStat


class PlayerWithStats(Player):
    stats: List[PlayerFormatStat] = Field(default_factory=list)


class PlayerPage(BaseModel):
    data: List[PlayerWithStats]
    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class PlayerComparison(BaseModel):
    id: int
    name: str
    country: str
    primary_role: Optional[str]
    stats: Dict[str, Dict[str, Union[int, float]]]


class DecadeDistribution(BaseModel):
    decade: str
    min: float
    q1: float
    median: float
    q3: float
    max: float
    mean: float
    count: int


class CountryContribution(BaseModel):
    country: str
    player_count: int
    total_runs: int
    total_wickets: int
    avg_batting_avg: float
    avg_bowling_avg: float


class BoundaryHitter(BaseModel):
    name: str
    country: str
    fours: int
    sixes: int
    total_boundaries: int
    runs: int
    matches: int


class ScatterPoint(BaseModel):
    name: str
    country: str
    average: float
    strike_rate: float
    runs: int
    matches: int


class DashboardSummary(BaseModel):
    total_players: int = Field(alias="totalPlayers")
    total_stats: int = Field(alias="totalStats")
    total_runs: int = Field(alias="totalRuns")
    total_wickets: int = Field(alias="totalWickets")
    total_matches: int = Field(alias="totalMatches")
    total_centuries: int = Field(alias="totalCenturies")
    total_fifties: int = Field(alias="totalFifties")

    model_config = ConfigDict(populate_by_name=True)


class CountryTotals(BaseModel):
    country: str
    player_count: int = Field(alias="playerCount")
    total_runs: int = Field(alias="totalRuns")
    total_wickets: int = Field(alias="totalWickets")

    model_config = ConfigDict(populate_by_name=True)


class DashboardStats(BaseModel):
    summary: DashboardSummary
    top_run_scorers: List[PlayerFormatStat] = Field(alias="topRunScorers")
    top_wicket_takers: List[PlayerFormatStat] = Field(alias="topWicketTakers")
    top_averages: List[PlayerFormatStat] = Field(alias="topAverages")
    top_countries: List[CountryTotals] = Field(alias="topCountries")

    model_config = ConfigDict(populate_by_name=True)
