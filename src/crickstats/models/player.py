"""Canonical player models shared across ingestion, persistence and analytics."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Format(str, Enum):
    TEST = "test"
    ODI = "odi"
    T20 = "t20"


class Role(str, Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all-rounder"
    WICKET_KEEPER = "wicket-keeper"


class Player(BaseModel):
    """Resolved identity; ``name`` is the exact-match join key for all merging."""

    id: int = Field(..., ge=1)
    name: str
    country: str = "Unknown"
    primary_role: Optional[Role] = None

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class PlayerFormatStat(BaseModel):
    """Per (player, format) statistics assembled from every source domain."""

    player_id: int = Field(..., ge=1)
    player_name: str
    player_country: str
    format: Format
    span_start: Optional[int] = None
    span_end: Optional[int] = None

    matches: int = 0
    innings: int = 0
    not_out: int = 0
    runs: int = 0
    highest: str = ""
    average: float = 0.0
    balls_faced: int = 0
    strike_rate: float = 0.0
    hundreds: int = 0
    fifties: int = 0
    fours: int = 0
    sixes: int = 0

    catches: int = 0
    stumpings: int = 0

    wickets: int = 0
    bowling_average: float = 0.0
    bowling_economy: float = 0.0
    bowling_strike_rate: float = 0.0
    best_bowling: str = ""
    five_wickets: int = 0
    ten_wickets: int = 0

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @property
    def key(self) -> tuple[str, str]:
        return (self.player_name, self.format)
