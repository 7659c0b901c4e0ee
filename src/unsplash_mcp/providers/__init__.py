"""Page transports used by the scraper."""

from unsplash_mcp.providers.base import ScraperProvider, ScrapeResult
from unsplash_mcp.providers.requests_provider import RequestsProvider

__all__ = ["ScraperProvider", "ScrapeResult", "RequestsProvider"]
