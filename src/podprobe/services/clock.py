"""Process uptime clock shared read-only by every handler."""

from __future__ import annotations

import time
from collections.abc import Callable


class ProcessClock:
    """Records the instant the application was created and reports elapsed time.

    Defaults to ``time.monotonic`` so wall-clock adjustments (NTP steps,
    manual changes) never make uptime go backwards.
    """

    def __init__(self, timer: Callable[[], float] = time.monotonic) -> None:
        self._timer = timer
        self.started_at = timer()

    def uptime(self) -> float:
        """Seconds elapsed since start, with sub-second precision."""
        return max(self._timer() - self.started_at, 0.0)

    def uptime_seconds(self) -> int:
        """Whole seconds elapsed since start."""
        return int(self.uptime())
