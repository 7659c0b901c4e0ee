"""Minimum spacing between outbound requests."""

from __future__ import annotations

import asyncio
import logging
import time

logger = logging.getLogger(__name__)


class RateLimiter:
    """Enforce a minimum interval between consecutive requests.

    The limiter keeps a single "last request" timestamp, so every caller
    sharing an instance waits on whichever request happened most recently.
    To share spacing between scrapers, pass the same instance to both.
    """

    def __init__(self, min_interval_ms: int = 1000) -> None:
        """Initialize the rate limiter.

        Args:
            min_interval_ms: Minimum spacing between requests in milliseconds
        """
        self.min_interval_ms = min_interval_ms
        self.last_request_time: float | None = None
        self._lock = asyncio.Lock()

    async def throttle(self) -> float:
        """Wait until the minimum interval has elapsed, then record a request.

        Returns:
            Seconds actually waited
        """
        async with self._lock:
            waited = 0.0

            if self.last_request_time is not None:
                elapsed_ms = (time.monotonic() - self.last_request_time) * 1000
                if elapsed_ms < self.min_interval_ms:
                    waited = (self.min_interval_ms - elapsed_ms) / 1000
                    logger.debug(f"Rate limit: waiting {waited:.3f}s")
                    await asyncio.sleep(waited)

            self.last_request_time = time.monotonic()
            return waited
