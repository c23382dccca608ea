"""Liveness and readiness probe endpoints.

Both answer 200 as long as the process can serve HTTP at all; they exist
to be wired into livenessProbe/readinessProbe and to show uptime growing
(or resetting after a restart).
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from podprobe.api.deps import get_clock
from podprobe.schemas.probe import ProbeResponse
from podprobe.services.clock import ProcessClock

router = APIRouter()


def _probe(status: str, clock: ProcessClock) -> ProbeResponse:
    return ProbeResponse(
        status=status,
        uptime_seconds=clock.uptime_seconds(),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/healthz", response_model=ProbeResponse)
async def healthz(clock: ProcessClock = Depends(get_clock)) -> ProbeResponse:
    """Liveness probe."""
    return _probe("ok", clock)


@router.get("/readyz", response_model=ProbeResponse)
async def readyz(clock: ProcessClock = Depends(get_clock)) -> ProbeResponse:
    """Readiness probe."""
    return _probe("ready", clock)
