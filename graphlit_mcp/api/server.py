"""MCP server surface: lists registry tools and dispatches calls over stdio."""

from __future__ import annotations

from typing import Any

import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from graphlit_mcp import __version__
from graphlit_mcp.tools.registry import ToolRegistry

SERVER_NAME = "graphlit-mcp-server"


class ToolCallError(Exception):
    """Raised for error envelopes so the MCP layer marks the result ``isError``."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


def build_tool_list(registry: ToolRegistry) -> list[types.Tool]:
    return [
        types.Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["inputSchema"],
        )
        for definition in registry.get_definitions()
    ]


async def handle_call_tool(registry: ToolRegistry, name: str,
                           arguments: dict[str, Any] | None) -> list[types.TextContent]:
    result = await registry.execute(name, arguments or {})
    if result.is_error:
        raise ToolCallError(result.text, code=result.code)
    return [types.TextContent(type="text", text=str(item.get("text", ""))) for item in result.content]


def create_server(registry: ToolRegistry) -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return build_tool_list(registry)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        logger.debug(f"MCP call_tool {name}")
        return await handle_call_tool(registry, name, arguments)

    return server


async def serve_stdio(server: Server) -> None:
    """Run until the client closes stdin."""
    logger.info(f"Serving {SERVER_NAME} v{__version__} over stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("stdio transport closed")
