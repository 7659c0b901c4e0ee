"""MCP image tools and their business logic.

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions and registration
- service.py: Argument validation and response formatting

Required arguments are checked before the scraper is called; a missing
one is rejected with an INVALID_PARAMS error.
"""

from unsplash_mcp.tools.router import (
    register_cache_tools,
    register_image_tools,
)
from unsplash_mcp.tools.service import format_response, require

__all__ = [
    # Registration functions
    "register_image_tools",
    "register_cache_tools",
    # Service helpers
    "format_response",
    "require",
]
