"""Exception types raised by the scraper and its transport."""

from __future__ import annotations


class UnsplashMCPError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(UnsplashMCPError):
    """A request to the site could not be completed."""


class HTTPStatusError(TransportError):
    """The site answered with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Unsplash Scraping Error: HTTP {status_code}: {status_text}")


class NetworkError(TransportError):
    """The site could not be reached at all (DNS, connection reset, timeout)."""

    def __init__(self, message: str = "Network error: Unable to reach Unsplash") -> None:
        super().__init__(message)


class ImageNotFoundError(UnsplashMCPError):
    """A photo page did not contain any image element."""

    def __init__(self, image_id: str) -> None:
        self.image_id = image_id
        super().__init__("Image not found")


class ScraperError(UnsplashMCPError):
    """A scraper operation failed; the message names the operation."""
