"""CPU stress endpoint."""

import logging

from fastapi import APIRouter, Depends, Query

from podprobe.api.deps import get_app_settings
from podprobe.config import Settings
from podprobe.schemas.fib import FibResult
from podprobe.services.fibonacci import effective_n, timed_fib

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/fib", response_model=FibResult)
def fibonacci(
    n: int | None = Query(default=None, ge=0, description="Fibonacci index; clamped to FIB_MAX_N"),
    settings: Settings = Depends(get_app_settings),
) -> FibResult:
    """Compute fib(n) by naive recursion to burn CPU.

    Declared sync so FastAPI runs it in the threadpool and probes keep
    answering while it spins.
    """
    n = effective_n(n, settings.fib_default_n, settings.fib_max_n)
    result, elapsed_ms = timed_fib(n)
    logger.info("fib(%d) computed in %.1fms", n, elapsed_ms)
    return FibResult(n=n, result=result, computation_ms=elapsed_ms)
