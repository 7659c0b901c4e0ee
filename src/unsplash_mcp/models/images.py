"""Pydantic models for image records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """Dump to the JSON-ready shape returned by the tools."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ImageUrls(CamelModel):
    """Named size variants of one image."""

    raw: str | None = Field(default=None, description="Original upload")
    full: str | None = Field(default=None, description="Base image URL, unmodified")
    regular: str | None = Field(default=None, description="1080x1080 crop")
    small: str | None = Field(default=None, description="400x400 crop")
    thumb: str | None = Field(default=None, description="200x200 crop")


class ImageAuthor(CamelModel):
    """Summary of the photographer embedded in an image record."""

    id: str = ""
    username: str = ""
    name: str = ""
    profile_image: str = ""
    portfolio_url: str = ""


class ImageLocation(CamelModel):
    name: str | None = None
    city: str | None = None
    country: str | None = None


class UnsplashImage(CamelModel):
    """One photo scraped from a listing or a photo page."""

    id: str = Field(description="Photo identifier taken from its /photos/<id> link")
    urls: ImageUrls = Field(default_factory=ImageUrls)
    width: int = 0
    height: int = 0
    description: str | None = None
    alt_description: str = ""
    user: ImageAuthor = Field(default_factory=ImageAuthor)
    likes: int = 0
    downloads: int | None = None
    tags: list[str] = Field(default_factory=list)
    color: str | None = None
    created_at: str | None = None
    location: ImageLocation | None = None
