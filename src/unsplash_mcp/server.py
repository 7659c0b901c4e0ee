"""MCP server exposing Unsplash image search and browsing tools."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from unsplash_mcp.config import cache_tools_enabled
from unsplash_mcp.tools import register_cache_tools, register_image_tools

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "Unsplash MCP",
    instructions=(
        "Search and browse photos on Unsplash without an API key. "
        "Supports keyword and color search, popular photos, topic browsing, "
        "photographer profiles, photo details and random photos."
    ),
)

register_image_tools(mcp)

# Cache management tools are opt-in: set ENABLE_CACHE_TOOLS=true
if cache_tools_enabled():
    register_cache_tools(mcp)


@mcp.custom_route("/healthz", methods=["GET"])
async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for the HTTP transports.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('stdio', 'streamable-http' or 'sse')
        host: Host to bind to for HTTP transports (default: 0.0.0.0)
        port: Port to bind to for HTTP transports (default: 8000)
    """
    mcp.settings.host = host
    mcp.settings.port = port

    logger.info(f"Starting Unsplash MCP server with {transport} transport")
    mcp.run(transport=transport)
