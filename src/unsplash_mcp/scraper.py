"""Scraper facade: one method per supported operation.

Every network operation runs the same pipeline: throttle, look up the raw
page body in the cache, fetch on a miss, then parse and shape the records.
Only the raw body is cached, so shaping (capping, shuffling) is redone on
every call.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any
from urllib.parse import quote

from unsplash_mcp.cache import TTLCache
from unsplash_mcp.config import ScraperConfig, load_config
from unsplash_mcp.errors import ImageNotFoundError, ScraperError
from unsplash_mcp.extractors import RecordExtractor, SoupExtractor
from unsplash_mcp.logs import log_api_call, log_error, log_scrape_activity
from unsplash_mcp.metrics import ScraperMetrics
from unsplash_mcp.models import PlaceholderResult, UnsplashImage, UserProfile
from unsplash_mcp.providers import RequestsProvider, ScraperProvider
from unsplash_mcp.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 20
DEFAULT_RANDOM_COUNT = 10


def encode_component(value: str) -> str:
    """Percent-encode a value for use inside a path segment or query value.

    Matches JavaScript's encodeURIComponent: spaces become %20 and only
    unreserved characters are left as-is.
    """
    return quote(value, safe="!~*'()")


def build_search_path(
    query: str,
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
    orientation: str | None = None,
    color: str | None = None,
) -> str:
    path = f"/search/photos?query={encode_component(query)}&page={page}&per_page={per_page}"

    if orientation:
        path += f"&orientation={orientation}"

    if color:
        path += f"&color={color}"

    return path


def build_popular_path(page: int = 1, per_page: int = DEFAULT_PER_PAGE, order_by: str = "popular") -> str:
    return f"/?page={page}&per_page={per_page}&order_by={order_by}"


def build_category_path(category: str, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> str:
    return f"/t/{encode_component(category)}?page={page}&per_page={per_page}"


def build_random_path(query: str | None = None) -> str:
    if query:
        return f"/search/photos?query={encode_component(query)}&order_by=random"
    return "/"


class UnsplashScraper:
    """Scrape unsplash.com pages into image, profile and collection records.

    Each instance owns its cache and rate limiter; separate instances do not
    share state unless the same collaborators are passed in explicitly.
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        provider: ScraperProvider | None = None,
        extractor: RecordExtractor | None = None,
        cache: TTLCache | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        """Initialize the scraper.

        Args:
            config: Settings (default: read from environment variables)
            provider: Page transport (default: RequestsProvider built from config)
            extractor: Markup extractor (default: SoupExtractor)
            cache: Raw page cache (default: TTLCache with the configured TTL)
            rate_limiter: Request spacing (default: the configured delay)
        """
        self.config = config or load_config()
        self.provider = provider or RequestsProvider(
            base_url=self.config.base_url,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
        )
        self.extractor = extractor or SoupExtractor()
        self.cache = cache if cache is not None else TTLCache(default_ttl=self.config.cache_ttl)
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter(self.config.request_delay_ms)
        self.metrics = ScraperMetrics()

    async def _scrape(self, path: str, cache_key: str) -> Any:
        """Fetch a page through the cache and return the parsed document."""
        await self.rate_limiter.throttle()

        cached = self.cache.get(cache_key)
        self.metrics.record_cache_lookup(cached is not None)
        if cached is not None:
            log_scrape_activity("CACHE_HIT", path)
            return self.extractor.parse(cached)

        log_scrape_activity("REQUEST", path)
        start = time.perf_counter()

        try:
            result = await self.provider.scrape(path)
        except Exception as e:
            self.metrics.record_request(url=path, success=False, error=f"{type(e).__name__}: {e}")
            log_error(e, {"url": path})
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        log_api_call("GET", result.url, result.status_code, duration_ms)
        self.metrics.record_request(
            url=result.url,
            success=True,
            status_code=result.status_code,
            elapsed_ms=duration_ms,
            attempts=result.metadata.get("attempts", 1),
        )

        self.cache.set(cache_key, result.content)
        return self.extractor.parse(result.content)

    @staticmethod
    def _operation_error(description: str, error: Exception, context: dict[str, Any]) -> ScraperError:
        log_error(error, context)
        return ScraperError(f"Failed to {description}: {error}")

    async def search_images(
        self,
        query: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        orientation: str | None = None,
        color: str | None = None,
    ) -> list[UnsplashImage]:
        """Search photos by keyword.

        Args:
            query: Search keywords (may be empty when filtering by color only)
            page: Page number
            per_page: Maximum number of records to return
            orientation: Optional landscape/portrait/squarish filter
            color: Optional dominant color filter

        Returns:
            Image records in page order

        Raises:
            ScraperError: If the page could not be fetched or parsed
        """
        try:
            path = build_search_path(query, page, per_page, orientation, color)
            document = await self._scrape(path, f"search:{path}")
            images = self.extractor.extract_images(document, limit=per_page)

            log_scrape_activity("SEARCH_COMPLETE", query, {"count": len(images)})
            return images
        except Exception as e:
            context = {
                "action": "search_images",
                "query": query,
                "page": page,
                "per_page": per_page,
                "orientation": orientation,
                "color": color,
            }
            raise self._operation_error("search images", e, context) from e

    async def get_popular_images(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        order_by: str = "popular",
    ) -> list[UnsplashImage]:
        """Get the photos listed on the home feed."""
        try:
            path = build_popular_path(page, per_page, order_by)
            document = await self._scrape(path, f"popular:{page}:{per_page}:{order_by}")
            images = self.extractor.extract_images(document, limit=per_page)

            log_scrape_activity("POPULAR_COMPLETE", "popular images", {"count": len(images)})
            return images
        except Exception as e:
            context = {"action": "get_popular_images", "page": page, "per_page": per_page, "order_by": order_by}
            raise self._operation_error("get popular images", e, context) from e

    async def browse_category(
        self,
        category: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> list[UnsplashImage]:
        """Get the photos of a topic page such as "nature" or "black & white"."""
        try:
            path = build_category_path(category, page, per_page)
            document = await self._scrape(path, f"category:{category}:{page}:{per_page}")
            images = self.extractor.extract_images(document, limit=per_page)

            log_scrape_activity("CATEGORY_COMPLETE", category, {"count": len(images)})
            return images
        except Exception as e:
            context = {"action": "browse_category", "category": category, "page": page, "per_page": per_page}
            raise self._operation_error("browse category", e, context) from e

    async def get_user_profile(self, username: str, include_photos: bool = True) -> UserProfile:
        """Get a photographer's profile.

        Args:
            username: Profile handle, without the leading @
            include_photos: Attach up to 12 recent photos

        Returns:
            The profile record; photos is None unless requested
        """
        try:
            path = f"/@{username}"
            document = await self._scrape(path, f"user:{username}")
            profile = self.extractor.extract_profile(document, username, include_photos)

            photo_count = len(profile.photos) if profile.photos else 0
            log_scrape_activity("USER_PROFILE_COMPLETE", username, {"photosCount": photo_count})
            return profile
        except Exception as e:
            context = {"action": "get_user_profile", "username": username, "include_photos": include_photos}
            raise self._operation_error("get user profile", e, context) from e

    async def get_image_details(self, image_id: str) -> UnsplashImage:
        """Get one photo with its description, tags and counts.

        Raises:
            ImageNotFoundError: If the photo page holds no image element
            ScraperError: For any other failure
        """
        context = {"action": "get_image_details", "image_id": image_id}

        try:
            path = f"/photos/{image_id}"
            document = await self._scrape(path, f"image:{image_id}")

            elements = self.extractor.image_elements(document)
            if not elements:
                raise ImageNotFoundError(image_id)

            image = self.extractor.extract_image(elements[0])
            if image is None:
                raise ValueError("Failed to extract image data")

            detailed = self.extractor.extract_image_details(document, image)

            log_scrape_activity("IMAGE_DETAILS_COMPLETE", image_id)
            return detailed
        except ImageNotFoundError as e:
            log_error(e, context)
            raise
        except Exception as e:
            raise self._operation_error("get image details", e, context) from e

    async def get_random_photos(
        self,
        count: int = DEFAULT_RANDOM_COUNT,
        query: str | None = None,
        orientation: str | None = None,
    ) -> list[UnsplashImage]:
        """Get a shuffled selection of photos.

        Every record on the page is collected and shuffled before the result
        is capped to count, so a cached page still yields a new selection.

        Args:
            count: Maximum number of records to return
            query: Optional keywords; without it the home feed is used
            orientation: Optional orientation, part of the cache key only

        Returns:
            At most count image records
        """
        try:
            path = build_random_path(query)
            cache_key = f"random:{count}:{query or 'all'}:{orientation or 'any'}"
            document = await self._scrape(path, cache_key)

            images = self.extractor.extract_images(document)
            random.shuffle(images)
            images = images[:count]

            log_scrape_activity("RANDOM_PHOTOS_COMPLETE", query or "all", {"count": len(images)})
            return images
        except Exception as e:
            context = {"action": "get_random_photos", "count": count, "query": query, "orientation": orientation}
            raise self._operation_error("get random photos", e, context) from e

    def get_collections(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        featured: bool = False,
    ) -> PlaceholderResult:
        """Collections are not scraped; returns the not-implemented marker."""
        return PlaceholderResult(
            message="Collections scraping not fully implemented yet",
            suggestion="Use search_images or browse_category instead",
            parameters={"page": page, "perPage": per_page, "featured": featured},
        )

    def get_collection_photos(
        self,
        collection_id: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> PlaceholderResult:
        """Collection photos are not scraped; returns the not-implemented marker."""
        return PlaceholderResult(
            message="Collection photos scraping not fully implemented yet",
            suggestion="Use search_images with specific keywords instead",
            parameters={"collectionId": collection_id, "page": page, "perPage": per_page},
        )

    def clear_cache(self) -> None:
        self.cache.clear()
        log_scrape_activity("CACHE_CLEARED", "all")

    def cleanup_cache(self) -> int:
        return self.cache.cleanup()

    def cache_size(self) -> int:
        return self.cache.size()
