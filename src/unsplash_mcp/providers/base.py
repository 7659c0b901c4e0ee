"""Base provider interface for fetching site pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ScrapeResult:
    """A fetched page body and response details."""

    url: str
    content: str
    status_code: int
    content_type: str | None
    metadata: dict[str, Any]


class ScraperProvider(ABC):
    """Abstract base class for page transports."""

    @abstractmethod
    async def scrape(self, url: str, **kwargs: Any) -> ScrapeResult:
        """Fetch a page.

        Args:
            url: Absolute URL, or a path relative to the provider's base origin
            **kwargs: Additional provider-specific options

        Returns:
            ScrapeResult containing the page body and metadata

        Raises:
            TransportError: If the page could not be fetched
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this provider can fetch the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this provider can handle the URL
        """
        pass
