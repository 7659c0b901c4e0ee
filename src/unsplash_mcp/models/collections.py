"""Pydantic models for collections.

Collections are not scraped yet: the collection tools answer with a
PlaceholderResult instead of Collection records.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from unsplash_mcp.models.images import CamelModel, UnsplashImage


class CollectionOwner(CamelModel):
    username: str
    name: str


class Collection(CamelModel):
    """A curated set of photos."""

    id: str
    title: str
    description: str | None = None
    total_photos: int = 0
    cover_photo: UnsplashImage | None = None
    user: CollectionOwner
    tags: list[str] | None = None


class PlaceholderResult(CamelModel):
    """Explicit marker returned by operations that are not implemented.

    The payload echoes the call's arguments next to the message, e.g.
    {"implemented": false, "message": ..., "suggestion": ..., "page": 1,
    "perPage": 20, "featured": false}.
    """

    implemented: bool = Field(default=False, description="Always false")
    message: str
    suggestion: str
    parameters: dict[str, Any] = Field(default_factory=dict, description="Echoed arguments, keyed by camelCase name")

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload.update(payload.pop("parameters", {}))
        return payload
