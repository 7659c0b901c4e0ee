"""Pytest configuration and fixtures for unsplash-mcp tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from unsplash_mcp.cache import TTLCache
from unsplash_mcp.config import ScraperConfig
from unsplash_mcp.core import set_scraper
from unsplash_mcp.providers import ScrapeResult
from unsplash_mcp.rate_limiter import RateLimiter
from unsplash_mcp.scraper import UnsplashScraper


def photo_card(photo_id: str, username: str = "jane", name: str = "Jane Doe") -> str:
    """Markup of one photo tile as it appears in listings."""
    return f"""
    <figure>
        <a href="/photos/{photo_id}">
            <img src="https://images.unsplash.com/photo-{photo_id}?ixid=abc&w=400" width="400" height="300" alt="Photo {photo_id}">
        </a>
        <div class="credit"><a href="/users/{username}">{name}</a></div>
    </figure>
    """


def listing_page(count: int) -> str:
    """A listing page holding `count` photo tiles named photo-0 .. photo-{count-1}."""
    cards = "".join(photo_card(f"photo-{i}") for i in range(count))
    return f"<html><body><div class='grid'>{cards}</div></body></html>"


def scrape_result(content: str, url: str = "https://unsplash.com/") -> ScrapeResult:
    return ScrapeResult(
        url=url,
        content=content,
        status_code=200,
        content_type="text/html; charset=utf-8",
        metadata={"elapsed_ms": 12.5, "attempts": 1, "retries": 0},
    )


@pytest.fixture
def listing_html() -> str:
    """Listing with two extractable photos and three non-photo images."""
    return """
    <html>
    <body>
        <div class="grid">
            <figure>
                <a href="/photos/abc123"><img src="https://images.unsplash.com/photo-1?ixid=xyz&w=400" width="400" height="300" alt="A mountain"></a>
                <div class="meta"><span>Photo by</span><a href="/users/jane">  Jane Doe  </a></div>
            </figure>
            <figure>
                <a href="/photos/def456?utm_source=feed"><img src="https://images.unsplash.com/photo-2" width="abc"></a>
            </figure>
            <figure>
                <div><img src="https://images.unsplash.com/photo-3?w=400" alt="No link"></div>
            </figure>
            <figure>
                <a href="/collections/xyz"><img src="https://images.unsplash.com/photo-4?w=400" alt="Collection cover"></a>
            </figure>
            <img src="https://example.com/not-unsplash.jpg">
        </div>
    </body>
    </html>
    """


@pytest.fixture
def empty_html() -> str:
    return "<html><body><p>No results</p></body></html>"


@pytest.fixture
def photo_page_html() -> str:
    """A photo's own page with description, tags and counts."""
    return """
    <html>
    <body>
        <div class="photo">
            <a href="/photos/abc123"><img src="https://images.unsplash.com/photo-1?w=1080" width="1080" height="720" alt="Alt text"></a>
            <span><a href="/users/jane">Jane</a></span>
        </div>
        <p data-test="photo-description">  Sunrise over the peaks </p>
        <a data-test="photo-tag" href="/s/photos/mountain">mountain</a>
        <a data-test="photo-tag" href="/s/photos/sunrise"> sunrise </a>
        <span data-test="photo-likes-count">1,234 likes</span>
        <span data-test="photo-downloads-count">56,789</span>
    </body>
    </html>
    """


@pytest.fixture
def profile_html() -> str:
    """A photographer profile with 14 photos."""
    cards = "".join(photo_card(f"photo-{i}") for i in range(14))
    return f"""
    <html>
    <body>
        <header>
            <img src="https://images.unsplash.com/profile-123?w=150" alt="Avatar">
            <h1> Jane Doe </h1>
            <div data-test="user-bio">Landscape photographer</div>
            <span data-test="user-location">Oslo, Norway</span>
            <a href="https://www.dropbox.com/s/portfolio">Portfolio</a>
            <a href="https://instagram.com/jane_shoots">Instagram</a>
            <a href="https://twitter.com/janedoe">Twitter</a>
            <span data-test="user-total-photos">1,024 Photos</span>
            <span data-test="user-total-likes">n/a</span>
            <span data-test="user-total-collections">12</span>
        </header>
        <h1>Second heading</h1>
        <div class="grid">{cards}</div>
    </body>
    </html>
    """


@pytest.fixture
def test_config() -> ScraperConfig:
    return ScraperConfig(user_agent="test-agent", request_delay_ms=0, cache_ttl=300, max_retries=3)


@pytest.fixture
def mock_provider() -> Mock:
    """Provider whose scrape() returns an empty page unless reconfigured."""
    provider = Mock()
    provider.scrape = AsyncMock(return_value=scrape_result("<html><body></body></html>"))
    return provider


@pytest.fixture
def scraper(test_config: ScraperConfig, mock_provider: Mock) -> UnsplashScraper:
    return UnsplashScraper(
        config=test_config,
        provider=mock_provider,
        cache=TTLCache(default_ttl=300),
        rate_limiter=RateLimiter(0),
    )


@pytest.fixture(autouse=True)
def reset_shared_scraper():
    """Make sure no test leaks the shared scraper instance."""
    set_scraper(None)
    yield
    set_scraper(None)
