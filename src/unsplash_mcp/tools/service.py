"""Business logic for the image tools: argument checks and response text."""

from __future__ import annotations

import json
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData

from unsplash_mcp.core import get_scraper
from unsplash_mcp.models import CamelModel


def invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def require(value: Any, label: str) -> None:
    """Reject a missing or blank required argument.

    Raises:
        McpError: With the INVALID_PARAMS code
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise invalid_params(f"{label} parameter is required")


def to_payload(data: Any) -> Any:
    """Convert models (or lists of them) into JSON-ready structures."""
    if isinstance(data, CamelModel):
        return data.to_payload()
    if isinstance(data, list):
        return [to_payload(item) for item in data]
    return data


def format_response(title: str, data: Any) -> str:
    """Render a markdown heading followed by the pretty-printed payload."""
    body = json.dumps(to_payload(data), indent=2, ensure_ascii=False)
    return f"# {title}\n\n{body}"


async def search_images(
    query: str,
    page: int = 1,
    per_page: int = 20,
    orientation: str | None = None,
    color: str | None = None,
) -> str:
    require(query, "Query")
    images = await get_scraper().search_images(query, page, per_page, orientation, color)
    return format_response(f'Search Results for "{query}"', images)


async def get_popular_images(page: int = 1, per_page: int = 20, order_by: str = "popular") -> str:
    images = await get_scraper().get_popular_images(page, per_page, order_by)
    return format_response("Popular Images", images)


async def browse_category(category: str, page: int = 1, per_page: int = 20) -> str:
    require(category, "Category")
    images = await get_scraper().browse_category(category, page, per_page)
    return format_response(f"Category: {category}", images)


async def get_user_profile(username: str, include_photos: bool = True) -> str:
    require(username, "Username")
    profile = await get_scraper().get_user_profile(username, include_photos)
    return format_response(f"User Profile: {username}", profile)


async def get_image_details(image_id: str) -> str:
    require(image_id, "Image ID")
    image = await get_scraper().get_image_details(image_id)
    return format_response(f"Image Details: {image_id}", image)


async def search_by_color(color: str, page: int = 1, per_page: int = 20) -> str:
    """Color-only search: an empty query with the color filter applied."""
    require(color, "Color")
    images = await get_scraper().search_images("", page, per_page, color=color)
    return format_response(f"Images with color: {color}", images)


async def get_collections(page: int = 1, per_page: int = 20, featured: bool = False) -> str:
    placeholder = get_scraper().get_collections(page, per_page, featured)
    return format_response("Collections", [placeholder])


async def get_collection_photos(collection_id: str, page: int = 1, per_page: int = 20) -> str:
    require(collection_id, "Collection ID")
    placeholder = get_scraper().get_collection_photos(collection_id, page, per_page)
    return format_response(f"Collection Photos: {collection_id}", [placeholder])


async def get_random_photos(count: int = 10, query: str | None = None, orientation: str | None = None) -> str:
    photos = await get_scraper().get_random_photos(count, query, orientation)
    return format_response("Random Photos", photos)


def get_cache_stats() -> dict[str, Any]:
    scraper = get_scraper()
    return {
        "entry_count": scraper.cache_size(),
        "default_ttl_seconds": scraper.cache.default_ttl,
        "metrics": scraper.metrics.to_dict(),
    }


def clear_expired_cache() -> int:
    return get_scraper().cleanup_cache()


def clear_all_cache() -> None:
    get_scraper().clear_cache()
