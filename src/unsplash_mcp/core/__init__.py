"""Core infrastructure shared by the tool modules.

Holds the single scraper instance used by every MCP tool, so that all
tools share one cache and one rate limiter.
"""

from unsplash_mcp.core.scraper import get_scraper, set_scraper

__all__ = [
    "get_scraper",
    "set_scraper",
]
