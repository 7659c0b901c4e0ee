"""Unsplash image search over MCP, backed by an HTML scraper."""

from unsplash_mcp.scraper import UnsplashScraper

__version__ = "1.0.0"

__all__ = ["UnsplashScraper", "__version__"]
