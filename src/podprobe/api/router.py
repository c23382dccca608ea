"""Root router aggregating all sub-routers.

Routes are mounted at the root (no /api prefix) because probe paths like
/healthz and the /metrics scrape path are conventional and hard-coded in
manifests.
"""

from fastapi import APIRouter

from podprobe.api.crash.router import router as crash_router
from podprobe.api.fib.router import router as fib_router
from podprobe.api.info.router import router as info_router
from podprobe.api.landing.router import router as landing_router
from podprobe.api.metrics.router import router as metrics_router
from podprobe.api.probes.router import router as probes_router

root_router = APIRouter()
root_router.include_router(landing_router, tags=["landing"])
root_router.include_router(probes_router, tags=["probes"])
root_router.include_router(info_router, tags=["info"])
root_router.include_router(fib_router, tags=["stress"])
root_router.include_router(crash_router, tags=["stress"])
root_router.include_router(metrics_router, tags=["metrics"])
