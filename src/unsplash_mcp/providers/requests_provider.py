"""Page transport built on the requests library, with retry support."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urljoin, urlparse

import requests

from unsplash_mcp.config import BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, get_random_user_agent
from unsplash_mcp.errors import HTTPStatusError, NetworkError
from unsplash_mcp.providers.base import ScrapeResult, ScraperProvider

# Configure logging
logger = logging.getLogger(__name__)

# Statuses worth retrying: rate limited, temporarily unavailable
RETRYABLE_STATUS_CODES = frozenset({429, 503})

# Connection failures, including a reset while the body is streamed
NETWORK_ERRORS = (
    requests.Timeout,
    requests.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
)


def build_default_headers(user_agent: str) -> dict[str, str]:
    """Headers sent with every request."""
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


class RequestsProvider(ScraperProvider):
    """Fetch pages from the site with requests, retrying transient failures."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        user_agent: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = 1.0,
    ) -> None:
        """Initialize the requests provider.

        Args:
            base_url: Origin that relative paths are resolved against
            user_agent: User agent string (default: a random desktop browser)
            timeout: Request timeout in seconds (default: 30)
            max_retries: Maximum number of retry attempts (default: 3)
            retry_delay: Initial delay between retries in seconds (default: 1.0)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.user_agent = user_agent or get_random_user_agent()

        self.session = requests.Session()
        self.session.headers.update(build_default_headers(self.user_agent))

        logger.info(f"RequestsProvider initialized for {base_url} (max_retries={max_retries})")

    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True for paths relative to the base origin and http(s) URLs
        """
        if url.startswith("/"):
            return True

        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except Exception:
            return False

    def resolve_url(self, url: str) -> str:
        return urljoin(self.base_url, url)

    def _backoff_delay(self, attempt: int) -> float:
        return self.retry_delay * (2 ** (attempt - 1))

    async def scrape(self, url: str, **kwargs: Any) -> ScrapeResult:
        """Fetch a page, retrying network errors and 429/503 responses.

        Args:
            url: Absolute URL or path relative to the base origin
            **kwargs: Additional options
                - timeout: Request timeout in seconds
                - max_retries: Maximum number of retry attempts

        Returns:
            ScrapeResult containing the page body and metadata

        Raises:
            HTTPStatusError: On a non-2xx response that is not retried,
                or a retryable one once retries are exhausted
            NetworkError: If the site stays unreachable after all retries
        """
        timeout = kwargs.get("timeout", self.timeout)
        max_retries = kwargs.get("max_retries", self.max_retries)
        request_url = self.resolve_url(url)

        # Retry loop with exponential backoff
        attempt = 0

        while True:
            try:
                # Run requests in thread pool to avoid blocking
                loop = asyncio.get_event_loop()
                response = await loop.run_in_executor(
                    None,
                    lambda: self.session.get(request_url, timeout=timeout),
                )
            except NETWORK_ERRORS as e:
                attempt += 1
                if attempt > max_retries:
                    error = NetworkError()
                    logger.error(f"{error} ({request_url}): {type(e).__name__}: {e}")
                    raise error from e

                delay = self._backoff_delay(attempt)
                logger.debug(
                    f"Retry attempt {attempt}/{max_retries} for {request_url} "
                    f"after {type(e).__name__}, {delay:.2f}s delay"
                )
                await asyncio.sleep(delay)
                continue

            status = response.status_code

            if status in RETRYABLE_STATUS_CODES and attempt < max_retries:
                attempt += 1
                delay = self._backoff_delay(attempt)
                logger.debug(
                    f"Retry attempt {attempt}/{max_retries} for {request_url} "
                    f"after HTTP {status}, {delay:.2f}s delay"
                )
                await asyncio.sleep(delay)
                continue

            if not 200 <= status < 300:
                error = HTTPStatusError(status, response.reason or "")
                logger.error(f"{error} ({request_url})")
                raise error

            metadata = {
                "encoding": response.encoding,
                "elapsed_ms": response.elapsed.total_seconds() * 1000,
                "attempts": attempt + 1,
                "retries": attempt,
            }

            return ScrapeResult(
                url=request_url,
                content=response.text,
                status_code=status,
                content_type=response.headers.get("Content-Type"),
                metadata=metadata,
            )
