"""Outer MCP surface."""

from graphlit_mcp.api.server import ToolCallError, build_tool_list, create_server, handle_call_tool, serve_stdio

__all__ = ["ToolCallError", "build_tool_list", "create_server", "handle_call_tool", "serve_stdio"]
