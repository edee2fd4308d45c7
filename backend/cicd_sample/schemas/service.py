"""Service Schemas — response contracts for the root and health endpoints.

Invariants:
    - HealthResponse.status is always "healthy" (liveness only, no dependency checks)
    - HealthResponse.uptime is non-negative seconds
"""

from typing import Literal

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    """GET / — service banner."""
    message: str
    version: str
    timestamp: str


class HealthResponse(BaseModel):
    """GET /health — liveness snapshot, computed per request."""
    status: Literal["healthy"] = "healthy"
    uptime: float = Field(ge=0)
    timestamp: str
