"""Liveness/readiness probe response schema."""

from datetime import datetime

from pydantic import BaseModel


class ProbeResponse(BaseModel):
    """Body returned by /healthz and /readyz."""

    status: str
    uptime_seconds: int
    timestamp: datetime
