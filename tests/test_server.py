"""Tests for MCP server wiring."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, Mock, patch

import pytest
from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import INVALID_PARAMS

from unsplash_mcp.__main__ import main
from unsplash_mcp.errors import ImageNotFoundError
from unsplash_mcp.models import ImageAuthor, UnsplashImage
from unsplash_mcp.server import health_check, mcp
from unsplash_mcp.tools import register_cache_tools, register_image_tools

IMAGE_TOOLS = {
    "search_images",
    "get_popular_images",
    "browse_category",
    "get_user_profile",
    "get_image_details",
    "search_by_color",
    "get_collections",
    "get_collection_photos",
    "get_random_photos",
}
CACHE_TOOLS = {"cache_stats", "cache_clear_expired", "cache_clear_all"}


class TestToolRegistration:
    """Tests for the registered tool set."""

    @pytest.mark.asyncio
    async def test_server_lists_image_tools(self) -> None:
        tools = await mcp.list_tools()
        names = {tool.name for tool in tools}

        assert IMAGE_TOOLS <= names

    @pytest.mark.asyncio
    async def test_cache_tools_registered_on_request(self) -> None:
        server = FastMCP("test")
        register_image_tools(server)
        register_cache_tools(server)

        names = {tool.name for tool in await server.list_tools()}

        assert names == IMAGE_TOOLS | CACHE_TOOLS

    @pytest.mark.asyncio
    async def test_tool_schema_constraints(self) -> None:
        """Test that enum and range constraints reach the input schema."""
        server = FastMCP("test")
        register_image_tools(server)

        tools = {tool.name: tool for tool in await server.list_tools()}
        schema = tools["search_images"].inputSchema

        assert schema["required"] == ["query"]
        assert schema["properties"]["perPage"]["maximum"] == 50
        assert "get_random_photos" in tools
        assert tools["get_random_photos"].inputSchema["properties"]["count"]["maximum"] == 30


class TestHealthCheck:
    """Tests for the /healthz route."""

    @pytest.mark.asyncio
    async def test_health_check(self) -> None:
        response = await health_check(Mock())

        assert response.status_code == 200
        assert json.loads(response.body) == {"status": "healthy"}


class TestMain:
    """Tests for the command line entry point."""

    def test_defaults_to_stdio(self) -> None:
        with patch("sys.argv", ["unsplash-mcp"]):
            with patch("unsplash_mcp.__main__.run_server") as mock_run:
                with patch("unsplash_mcp.__main__.configure_logging"):
                    main()

        mock_run.assert_called_once_with(transport="stdio", host="0.0.0.0", port=8000)

    def test_http_arguments(self) -> None:
        with patch("sys.argv", ["unsplash-mcp", "streamable-http", "127.0.0.1", "9000"]):
            with patch("unsplash_mcp.__main__.run_server") as mock_run:
                with patch("unsplash_mcp.__main__.configure_logging"):
                    main()

        mock_run.assert_called_once_with(transport="streamable-http", host="127.0.0.1", port=9000)


@pytest.fixture
def image_server() -> FastMCP:
    server = FastMCP("test")
    register_image_tools(server)
    return server


@pytest.fixture
def patched_scraper() -> Mock:
    scraper = Mock()
    image = UnsplashImage(id="abc123", user=ImageAuthor(username="jane", name="Jane Doe"))
    scraper.search_images = AsyncMock(return_value=[image])
    scraper.get_image_details = AsyncMock(return_value=image)
    scraper.get_user_profile = AsyncMock()

    with patch("unsplash_mcp.tools.service.get_scraper", return_value=scraper):
        yield scraper


class TestToolCalls:
    """Tests for tool calls made by an MCP client."""

    @pytest.mark.asyncio
    async def test_camel_case_arguments_accepted(self, image_server: FastMCP, patched_scraper: Mock) -> None:
        """Test that imageId and perPage are the argument names clients send."""
        async with create_connected_server_and_client_session(image_server._mcp_server) as client:
            details = await client.call_tool("get_image_details", {"imageId": "abc123"})
            search = await client.call_tool("search_images", {"query": "nature", "perPage": 3})

        assert details.isError is False
        assert details.content[0].text.startswith("# Image Details: abc123\n\n")
        patched_scraper.get_image_details.assert_awaited_once_with("abc123")

        assert search.isError is False
        patched_scraper.search_images.assert_awaited_once_with("nature", 1, 3, None, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("tool", "arguments", "message"),
        [
            ("search_images", {"query": "  "}, "Query parameter is required"),
            ("get_image_details", {}, "Image ID parameter is required"),
            ("get_user_profile", {"username": ""}, "Username parameter is required"),
        ],
    )
    async def test_blank_required_argument_is_invalid_params(
        self, image_server: FastMCP, patched_scraper: Mock, tool: str, arguments: dict, message: str
    ) -> None:
        """Test that the client receives a JSON-RPC INVALID_PARAMS error."""
        async with create_connected_server_and_client_session(image_server._mcp_server) as client:
            with pytest.raises(McpError) as exc_info:
                await client.call_tool(tool, arguments)

        assert exc_info.value.error.code == INVALID_PARAMS
        assert exc_info.value.error.message == message
        patched_scraper.search_images.assert_not_called()
        patched_scraper.get_image_details.assert_not_called()
        patched_scraper.get_user_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_scraper_failure_is_tool_error(self, image_server: FastMCP, patched_scraper: Mock) -> None:
        """Test that scraper failures stay tool errors rather than protocol errors."""
        patched_scraper.get_image_details.side_effect = ImageNotFoundError("missing")

        async with create_connected_server_and_client_session(image_server._mcp_server) as client:
            result = await client.call_tool("get_image_details", {"imageId": "missing"})

        assert result.isError is True
        assert "Image not found" in result.content[0].text
