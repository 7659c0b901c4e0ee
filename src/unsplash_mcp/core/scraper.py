"""Shared scraper instance for the MCP server."""

from __future__ import annotations

from unsplash_mcp.config import load_config, validate_config
from unsplash_mcp.scraper import UnsplashScraper

_scraper: UnsplashScraper | None = None


def get_scraper() -> UnsplashScraper:
    """Get or create the scraper used by the MCP tools.

    Returns:
        Global UnsplashScraper instance
    """
    global _scraper

    if _scraper is None:
        config = load_config()
        validate_config(config)
        _scraper = UnsplashScraper(config=config)

    return _scraper


def set_scraper(scraper: UnsplashScraper | None) -> None:
    """Replace the shared instance; None forces a fresh one on next use."""
    global _scraper
    _scraper = scraper
