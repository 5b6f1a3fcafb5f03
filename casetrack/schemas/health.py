"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="Application version")
    cases: int = Field(..., description="Number of cases held in memory")


class ServerStatusResponse(BaseModel):
    """Response for GET /api/status."""

    status: str = "online"
    port: int
