"""Deferred process termination for exercising orchestrator restart policy.

The HTTP response has to reach the client before the process dies, so the
exit is scheduled as an asyncio background task that sleeps first and
then calls the terminator (``os._exit`` by default, skipping cleanup the
same way an uncaught fatal error would).
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CrashScheduler:
    """Schedules a single delayed process exit.

    Args:
        delay_ms: Milliseconds to wait before terminating.
        exit_code: Status passed to the terminator.
        terminate: Callable receiving the exit code. Tests swap it out.
    """

    def __init__(
        self,
        delay_ms: int = 100,
        exit_code: int = 1,
        terminate: Callable[[int], object] = os._exit,
    ) -> None:
        self.delay_ms = delay_ms
        self.exit_code = exit_code
        self.terminate = terminate
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None

    def schedule(self) -> bool:
        """Start the countdown. Returns False if a crash is already pending."""
        if self._task is not None:
            logger.warning("Crash already scheduled, ignoring repeated request")
            return False
        logger.warning("Crash requested -- terminating in %dms", self.delay_ms)
        self._task = asyncio.get_running_loop().create_task(self._countdown())
        return True

    async def _countdown(self) -> None:
        await asyncio.sleep(self.delay_ms / 1000.0)
        logger.critical(
            "Intentional crash to test restart policy (exit code %d)", self.exit_code
        )
        self.terminate(self.exit_code)

    async def cancel(self) -> None:
        """Cancel a pending countdown, used on graceful shutdown."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
