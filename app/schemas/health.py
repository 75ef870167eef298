"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability, for load balancers and monitoring."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    version: str = Field(description="Deployed API version")
    database: Literal["connected", "disconnected"]
