"""Pydantic data models for scraped records.

This module defines the records produced by the extraction engine:
- Images and their embedded author summary (UnsplashImage, ImageAuthor)
- Photographer profiles (UserProfile)
- Collections, declared only, and the placeholder payload used instead

All models use Pydantic v2 and serialize with camelCase field names.
"""

from unsplash_mcp.models.collections import (
    Collection,
    CollectionOwner,
    PlaceholderResult,
)
from unsplash_mcp.models.images import (
    CamelModel,
    ImageAuthor,
    ImageLocation,
    ImageUrls,
    UnsplashImage,
)
from unsplash_mcp.models.users import UserProfile

__all__ = [
    # Image models
    "CamelModel",
    "ImageAuthor",
    "ImageLocation",
    "ImageUrls",
    "UnsplashImage",
    # Profile models
    "UserProfile",
    # Collection models
    "Collection",
    "CollectionOwner",
    "PlaceholderResult",
]
