"""Extraction of image and profile records with BeautifulSoup."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from unsplash_mcp.extractors.base import RecordExtractor
from unsplash_mcp.models import ImageAuthor, ImageUrls, UnsplashImage, UserProfile

logger = logging.getLogger(__name__)

IMAGE_SELECTOR = 'img[src*="images.unsplash.com"]'
USER_LINK_SELECTOR = 'a[href*="/users/"]'
PROFILE_IMAGE_SELECTOR = 'img[src*="images.unsplash.com/profile-"]'

PHOTO_ID_PATTERN = re.compile(r"/photos/([^/?]+)")
USERNAME_PATTERN = re.compile(r"/users/([^/?]+)")
INSTAGRAM_PATTERN = re.compile(r"instagram\.com/([^/?#]+)")
TWITTER_PATTERN = re.compile(r"(?:^|[/.])(?:twitter|x)\.com/([^/?#]+)")
LEADING_INT_PATTERN = re.compile(r"\s*(\d+)")

# Query strings appended to the base image URL for each size variant
SIZE_VARIANTS = {
    "thumb": "w=200&h=200&fit=crop",
    "small": "w=400&h=400&fit=crop",
    "regular": "w=1080&h=1080&fit=crop",
}

# Profile photo listings are capped to the most recent ones
PROFILE_PHOTO_LIMIT = 12


def parse_count(text: str | None) -> int:
    """Parse a displayed count such as "1,234 likes" by keeping only digits.

    Args:
        text: Raw element text

    Returns:
        The integer, or 0 when no digits remain
    """
    digits = re.sub(r"\D", "", text or "")
    return int(digits) if digits else 0


def parse_dimension(value: str | list[str] | None) -> int:
    """Parse a width/height attribute, defaulting to 0."""
    if not isinstance(value, str):
        return 0
    match = LEADING_INT_PATTERN.match(value)
    return int(match.group(1)) if match else 0


def build_image_urls(src: str) -> ImageUrls:
    """Derive the size variants from an image src.

    Only a src carrying a query string is treated as a resizable CDN URL;
    anything else leaves every variant unset.
    """
    if "?" not in src:
        return ImageUrls()

    base_url = src.split("?", 1)[0]
    variants = {name: f"{base_url}?{query}" for name, query in SIZE_VARIANTS.items()}
    return ImageUrls(full=base_url, **variants)


def select_text(document: Tag, selector: str) -> str:
    """Concatenated, trimmed text of every element matching the selector."""
    return "".join(element.get_text() for element in document.select(selector)).strip()


class SoupExtractor(RecordExtractor):
    """Record extractor for the current unsplash.com markup."""

    def __init__(self, parser: str = "lxml") -> None:
        self.parser = parser

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.parser)

    def image_elements(self, document: BeautifulSoup) -> list[Tag]:
        return document.select(IMAGE_SELECTOR)

    def extract_image(self, element: Tag) -> UnsplashImage | None:
        try:
            link = element.find_parent("a")
            href = link.get("href") if link is not None else None
            match = PHOTO_ID_PATTERN.search(href) if isinstance(href, str) else None
            if match is None:
                return None

            src = element.get("src") or ""

            return UnsplashImage(
                id=match.group(1),
                urls=build_image_urls(src),
                width=parse_dimension(element.get("width")),
                height=parse_dimension(element.get("height")),
                alt_description=element.get("alt") or "",
                user=self._extract_author(link),
                likes=0,
                tags=[],
                color="",
            )
        except Exception as e:
            logger.warning(f"Failed to extract image from element {str(element)[:200]}: {e}")
            return None

    def _extract_author(self, link: Tag) -> ImageAuthor:
        """Find the photographer link next to a photo's anchor."""
        user_link = None
        parent = link.parent

        if parent is not None:
            for sibling in parent.children:
                if sibling is link or not isinstance(sibling, Tag):
                    continue
                user_link = sibling.select_one(USER_LINK_SELECTOR)
                if user_link is not None:
                    break

        if user_link is None:
            return ImageAuthor(name="Unknown")

        href = user_link.get("href")
        match = USERNAME_PATTERN.search(href) if isinstance(href, str) else None
        username = match.group(1) if match else ""

        return ImageAuthor(
            id=username,
            username=username,
            name=user_link.get_text().strip() or "Unknown",
        )

    def extract_image_details(self, document: BeautifulSoup, image: UnsplashImage) -> UnsplashImage:
        description = select_text(document, '[data-test="photo-description"]')
        tags = [tag.get_text().strip() for tag in document.select('[data-test="photo-tag"]')]

        return image.model_copy(
            update={
                "description": description or image.alt_description,
                "tags": tags,
                "likes": parse_count(select_text(document, '[data-test="photo-likes-count"]')),
                "downloads": parse_count(select_text(document, '[data-test="photo-downloads-count"]')),
            }
        )

    def extract_profile(self, document: BeautifulSoup, username: str, include_photos: bool = True) -> UserProfile:
        heading = document.find("h1")
        name = heading.get_text().strip() if heading is not None else ""

        photos = None
        if include_photos:
            photos = self.extract_images(document, limit=PROFILE_PHOTO_LIMIT)

        return UserProfile(
            id=username,
            username=username,
            name=name or username,
            bio=select_text(document, '[data-test="user-bio"]') or None,
            location=select_text(document, '[data-test="user-location"]') or None,
            instagram_username=self._find_handle(document, INSTAGRAM_PATTERN),
            twitter_username=self._find_handle(document, TWITTER_PATTERN),
            total_photos=parse_count(select_text(document, '[data-test="user-total-photos"]')),
            total_likes=parse_count(select_text(document, '[data-test="user-total-likes"]')),
            total_collections=parse_count(select_text(document, '[data-test="user-total-collections"]')),
            profile_image=self._find_profile_image(document),
            photos=photos,
        )

    @staticmethod
    def _find_handle(document: BeautifulSoup, pattern: re.Pattern[str]) -> str | None:
        for link in document.find_all("a", href=True):
            match = pattern.search(link["href"])
            if match:
                return match.group(1)
        return None

    @staticmethod
    def _find_profile_image(document: BeautifulSoup) -> str | None:
        image = document.select_one(PROFILE_IMAGE_SELECTOR)
        if image is None:
            return None
        return image.get("src") or None
