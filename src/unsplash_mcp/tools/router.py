"""MCP tool definitions for image search and browsing.

Tool arguments keep the camelCase names of the public tool interface
(perPage, imageId, includePhotos, ...), so the parameters below are named
after them rather than in snake_case.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from mcp import types
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from unsplash_mcp.tools import service

Orientation = Literal["landscape", "portrait", "squarish"]
Color = Literal[
    "black_and_white", "black", "white", "yellow", "orange", "red",
    "purple", "magenta", "green", "teal", "blue",
]
OrderBy = Literal["latest", "oldest", "popular"]
Page = Annotated[int, Field(ge=1, description="Page number for pagination")]
PerPage = Annotated[int, Field(ge=1, le=50, description="Number of results per page")]

# Tool name -> (argument, label) pairs checked before any tool runs
REQUIRED_ARGUMENTS: dict[str, tuple[tuple[str, str], ...]] = {
    "search_images": (("query", "Query"),),
    "browse_category": (("category", "Category"),),
    "get_user_profile": (("username", "Username"),),
    "get_image_details": (("imageId", "Image ID"),),
    "search_by_color": (("color", "Color"),),
    "get_collection_photos": (("collectionId", "Collection ID"),),
}


async def search_images(
    query: str,
    page: Page = 1,
    perPage: PerPage = 20,
    orientation: Orientation | None = None,
    color: Color | None = None,
) -> str:
    """Search for images on Unsplash using keywords and filters.

    Args:
        query: Search keywords (e.g., "mountain landscape", "city night")
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
        orientation: Image orientation filter
        color: Filter by dominant color

    Returns:
        Markdown heading followed by the JSON list of images
    """
    return await service.search_images(query, page, perPage, orientation, color)


async def get_popular_images(page: Page = 1, perPage: PerPage = 20, orderBy: OrderBy = "popular") -> str:
    """Get trending and popular images from Unsplash.

    Args:
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
        orderBy: Sort order for results (default: popular)
    """
    return await service.get_popular_images(page, perPage, orderBy)


async def browse_category(category: str, page: Page = 1, perPage: PerPage = 20) -> str:
    """Browse images by specific categories or topics.

    Args:
        category: Category or topic name (e.g., "nature", "architecture", "food")
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
    """
    return await service.browse_category(category, page, perPage)


async def get_user_profile(username: str, includePhotos: bool = True) -> str:
    """Get photographer information and their portfolio.

    Args:
        username: Unsplash username
        includePhotos: Include the user's recent photos (default: True)
    """
    return await service.get_user_profile(username, includePhotos)


async def get_image_details(imageId: str) -> str:
    """Get comprehensive information about a specific image.

    Args:
        imageId: Unsplash image ID
    """
    return await service.get_image_details(imageId)


async def search_by_color(color: Color, page: Page = 1, perPage: PerPage = 20) -> str:
    """Find images with specific dominant colors.

    Args:
        color: Color name
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
    """
    return await service.search_by_color(color, page, perPage)


async def get_collections(page: Page = 1, perPage: PerPage = 20, featured: bool = False) -> str:
    """Get curated collections of images (not implemented yet, returns a placeholder).

    Args:
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
        featured: Only show featured collections (default: False)
    """
    return await service.get_collections(page, perPage, featured)


async def get_collection_photos(collectionId: str, page: Page = 1, perPage: PerPage = 20) -> str:
    """Get photos from a specific collection (not implemented yet, returns a placeholder).

    Args:
        collectionId: Collection ID
        page: Page number (default: 1)
        perPage: Number of results per page (default: 20)
    """
    return await service.get_collection_photos(collectionId, page, perPage)


async def get_random_photos(
    count: Annotated[int, Field(ge=1, le=30, description="Number of random photos to get")] = 10,
    query: str | None = None,
    orientation: Orientation | None = None,
) -> str:
    """Get random high-quality photos.

    Args:
        count: Number of random photos to get (default: 10)
        query: Optional query to filter random photos
        orientation: Image orientation filter
    """
    return await service.get_random_photos(count, query, orientation)


async def cache_stats() -> dict[str, Any]:
    """Get page cache statistics.

    Returns:
        Dictionary with entry count, TTL and request/cache counters
    """
    return service.get_cache_stats()


async def cache_clear_expired() -> dict[str, Any]:
    """Clear expired entries from the page cache.

    Returns:
        Dictionary with the number of expired entries removed
    """
    removed = service.clear_expired_cache()
    return {
        "status": "success",
        "expired_entries_removed": removed,
    }


async def cache_clear_all() -> dict[str, str]:
    """Clear all entries from the page cache.

    Returns:
        Dictionary with operation status
    """
    service.clear_all_cache()
    return {
        "status": "success",
        "message": "All cache entries cleared",
    }


def register_image_tools(mcp: FastMCP) -> None:
    """Register the image search and browsing tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(search_images)
    mcp.tool()(get_popular_images)
    mcp.tool()(browse_category)
    mcp.tool()(get_user_profile)
    mcp.tool()(get_image_details)
    mcp.tool()(search_by_color)
    mcp.tool()(get_collections)
    mcp.tool()(get_collection_photos)
    mcp.tool()(get_random_photos)
    install_argument_validation(mcp)


def install_argument_validation(mcp: FastMCP) -> None:
    """Reject calls with blank required arguments before FastMCP handles them.

    FastMCP turns every exception raised inside a tool into an error result,
    so the check runs in front of its call handler. The McpError raised there
    reaches the client as a JSON-RPC error with the INVALID_PARAMS code.

    Args:
        mcp: FastMCP server instance whose tools/call handler is wrapped
    """
    handlers = mcp._mcp_server.request_handlers
    call_tool = handlers[types.CallToolRequest]

    async def validated_call_tool(request: types.CallToolRequest) -> Any:
        arguments = request.params.arguments or {}
        for name, label in REQUIRED_ARGUMENTS.get(request.params.name, ()):
            service.require(arguments.get(name), label)
        return await call_tool(request)

    handlers[types.CallToolRequest] = validated_call_tool


def register_cache_tools(mcp: FastMCP) -> None:
    """Register optional cache management tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(cache_stats)
    mcp.tool()(cache_clear_expired)
    mcp.tool()(cache_clear_all)
