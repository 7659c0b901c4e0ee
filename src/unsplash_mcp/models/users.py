"""Pydantic models for photographer profiles."""

from __future__ import annotations

from pydantic import Field

from unsplash_mcp.models.images import CamelModel, UnsplashImage


class UserProfile(CamelModel):
    """A photographer's profile page."""

    id: str
    username: str
    name: str
    bio: str | None = None
    location: str | None = None
    portfolio_url: str | None = None
    instagram_username: str | None = None
    twitter_username: str | None = None
    total_photos: int = 0
    total_likes: int = 0
    total_collections: int = 0
    profile_image: str | None = None
    photos: list[UnsplashImage] | None = Field(
        default=None, description="Recent photos, only when requested"
    )
