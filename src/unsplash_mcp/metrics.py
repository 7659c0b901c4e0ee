"""Request and cache counters for a scraper instance."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class FetchRecord:
    """One page fetch made by the scraper."""

    url: str
    timestamp: datetime
    success: bool
    status_code: int | None = None
    elapsed_ms: float | None = None
    attempts: int = 1
    error: str | None = None


@dataclass
class ScraperMetrics:
    """Counters owned by one UnsplashScraper."""

    start_time: datetime = field(default_factory=datetime.now)
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_retries: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    recent_requests: deque[FetchRecord] = field(default_factory=lambda: deque(maxlen=50))
    recent_errors: deque[FetchRecord] = field(default_factory=lambda: deque(maxlen=20))

    def record_request(
        self,
        url: str,
        success: bool,
        status_code: int | None = None,
        elapsed_ms: float | None = None,
        attempts: int = 1,
        error: str | None = None,
    ) -> None:
        """Record a network fetch.

        Args:
            url: The URL that was requested
            success: Whether the request was successful
            status_code: HTTP status code if available
            elapsed_ms: Time taken in milliseconds
            attempts: Number of attempts made (1 = no retries)
            error: Error message if failed
        """
        self.total_requests += 1

        if success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1

        if attempts > 1:
            self.total_retries += attempts - 1

        record = FetchRecord(
            url=url,
            timestamp=datetime.now(),
            success=success,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            attempts=attempts,
            error=error,
        )

        self.recent_requests.append(record)
        if not success:
            self.recent_errors.append(record)

    def record_cache_lookup(self, hit: bool) -> None:
        if hit:
            self.cache_hits += 1
        else:
            self.cache_misses += 1

    def get_hit_rate(self) -> float:
        lookups = self.cache_hits + self.cache_misses
        return self.cache_hits / lookups if lookups else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary for JSON serialization."""
        return {
            "start_time": self.start_time.isoformat(),
            "requests": {
                "total": self.total_requests,
                "successful": self.successful_requests,
                "failed": self.failed_requests,
                "retries": self.total_retries,
            },
            "cache": {
                "hits": self.cache_hits,
                "misses": self.cache_misses,
                "hit_rate": round(self.get_hit_rate(), 4),
            },
            "recent_requests": [
                {
                    "url": r.url,
                    "timestamp": r.timestamp.isoformat(),
                    "success": r.success,
                    "status_code": r.status_code,
                    "elapsed_ms": round(r.elapsed_ms, 2) if r.elapsed_ms is not None else None,
                    "attempts": r.attempts,
                }
                for r in list(self.recent_requests)[-10:][::-1]  # Last 10 requests, newest first
            ],
            "recent_errors": [
                {
                    "url": r.url,
                    "timestamp": r.timestamp.isoformat(),
                    "status_code": r.status_code,
                    "error": r.error,
                }
                for r in list(self.recent_errors)[-10:][::-1]  # Last 10 errors, newest first
            ],
        }
