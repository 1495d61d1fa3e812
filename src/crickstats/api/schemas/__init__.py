"""Pydantic models for API I/O."""

from crickstats.analytics.results import (
    BoundaryHitter,
    CountryContribution,
    CountryTotals,
    DashboardStats,
    DashboardSummary,
    DecadeDistribution,
    PlayerComparison,
    PlayerPage,
    PlayerWithStats,
    ScatterPoint,
)

from .health import ErrorResponse, HealthResponse

__all__ = [
    "BoundaryHitter",
    "CountryContribution",
    "CountryTotals",
    "DashboardStats",
    "DashboardSummary",
    "DecadeDistribution",
    "ErrorResponse",
    "HealthResponse",
    "PlayerComparison",
    "PlayerPage",
    "PlayerWithStats",
    "ScatterPoint",
]
