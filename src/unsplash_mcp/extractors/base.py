"""Base interface for turning site markup into records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from unsplash_mcp.models import UnsplashImage, UserProfile


class RecordExtractor(ABC):
    """Abstract base class for markup-specific extractors.

    The site's HTML is unversioned; each implementation targets one
    generation of its markup. The scraper only talks to this interface.
    """

    @abstractmethod
    def parse(self, html: str) -> Any:
        """Parse a page body into a document object."""
        pass

    @abstractmethod
    def image_elements(self, document: Any) -> list[Any]:
        """Return every element that may represent a photo, in document order."""
        pass

    @abstractmethod
    def extract_image(self, element: Any) -> UnsplashImage | None:
        """Build an image record from one element.

        Returns:
            The record, or None when the element is not an extractable photo.
            Never raises.
        """
        pass

    @abstractmethod
    def extract_image_details(self, document: Any, image: UnsplashImage) -> UnsplashImage:
        """Enrich a record with the fields only present on a photo's own page."""
        pass

    @abstractmethod
    def extract_profile(self, document: Any, username: str, include_photos: bool = True) -> UserProfile:
        """Build a profile record from a profile page."""
        pass

    def extract_images(self, document: Any, limit: int | None = None) -> list[UnsplashImage]:
        """Extract every image record in the document.

        Args:
            document: Parsed page
            limit: Maximum number of records to keep (default: all)

        Returns:
            Records in document order, elements without one skipped
        """
        images = []
        for element in self.image_elements(document):
            image = self.extract_image(element)
            if image is not None:
                images.append(image)
        return images if limit is None else images[:limit]
