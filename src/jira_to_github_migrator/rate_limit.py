"""
Rate limiting for GitHub and Jira API calls.

GitHub allows about one content-creating request per second. Sleeping a fixed
time before every call stretches the migration, because processing between
calls is added on top. Instead, the limiter only waits for whatever is left
of the interval since the previous permit.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Final

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS: Final[float] = 0.35
REPORT_EVERY: Final[int] = 100


class RateLimiter:
    """Spaces permits at least `interval` seconds apart.

    Every REPORT_EVERY requests the observed request rate is logged.
    """

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        *,
        report_every: int = REPORT_EVERY,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval < 0:
            msg = f"Interval must not be negative: {interval}"
            raise ValueError(msg)
        self.interval: float = interval
        self.report_every: int = report_every
        self._clock: Callable[[], float] = clock
        self._sleep: Callable[[float], None] = sleep
        self._lock: threading.Lock = threading.Lock()
        self._next_permit: float | None = None
        self._requests: int = 0
        self._window_start: float | None = None

    def obtain_permit(self) -> None:
        """Block until the next call is allowed.

        Callers are served one at a time, so concurrent callers also get
        permits at least `interval` apart.
        """
        with self._lock:
            self._count_request()

            now = self._clock()
            if self._next_permit is not None and self._next_permit > now:
                self._sleep(self._next_permit - now)
                now = self._next_permit
            self._next_permit = now + self.interval

    def _count_request(self) -> None:
        now = self._clock()
        if self._window_start is None:
            self._window_start = now
        self._requests += 1
        if self._requests < self.report_every:
            return

        elapsed = now - self._window_start
        requests = self._requests
        self._requests = 0
        self._window_start = now
        if elapsed <= 0:
            return

        per_second = requests / elapsed
        logger.info(
            f"Requests {requests}, per second {per_second:.2f}, "
            f"per minute {per_second * 60:.2f}, per hour {per_second * 3600:.2f}"
        )
