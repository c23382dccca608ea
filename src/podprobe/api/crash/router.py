"""Intentional crash endpoint for exercising restart policy."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from podprobe.api.deps import get_crash_scheduler
from podprobe.services.crash import CrashScheduler

router = APIRouter()


@router.get("/crash", response_class=PlainTextResponse)
async def crash(scheduler: CrashScheduler = Depends(get_crash_scheduler)) -> str:
    """Answer, then terminate the process after a short delay."""
    scheduler.schedule()
    return f"Crashing in {scheduler.delay_ms}ms... watch your pod restart! 💥"
