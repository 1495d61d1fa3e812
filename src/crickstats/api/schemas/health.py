from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    players: int
    stats: int


class ErrorResponse(BaseModel):
    detail: str
