"""
Pydantic schemas for health check endpoints.
"""

from datetime import datetime
from typing import Dict, Optional, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the liveness probe."""
    status: Literal["ok"] = Field(description="Health status indicator")
    timestamp: datetime = Field(description="Current UTC timestamp")


class HealthCheckDetail(BaseModel):
    """Individual dependency check result."""
    healthy: bool = Field(description="Whether the check passed")
    latency_ms: Optional[float] = Field(
        default=None,
        description="Check execution time in milliseconds"
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message if check failed"
    )


class ReadinessResponse(BaseModel):
    """Response model for the readiness probe."""
    status: Literal["ready", "not_ready"] = Field(description="Overall readiness status")
    checks: Dict[str, HealthCheckDetail] = Field(description="Individual dependency checks")
    timestamp: datetime = Field(description="Current UTC timestamp")
