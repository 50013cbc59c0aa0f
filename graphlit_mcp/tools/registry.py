"""Tool registry: name -> tool lookup, parameter validation and dispatch."""

from __future__ import annotations

from typing import Any

from loguru import logger

from graphlit_mcp.config.loader import camel_to_snake
from graphlit_mcp.tools.base import Tool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.utils.exceptions import classify_exception, format_tool_error

CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ToolRegistry:
    """
    Registry for dispatchable tools.

    ``execute`` never raises: unknown names, invalid parameters and tool
    failures all come back as error results. With ``exit_on_missing_credentials``
    set, a tool reporting missing configuration ends the process instead.
    """

    def __init__(self, *, exit_on_missing_credentials: bool = False):
        self._tools: dict[str, Tool] = {}
        self.exit_on_missing_credentials = exit_on_missing_credentials

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        if tool.name in self._tools:
            logger.warning(f"Tool {tool.name} registered twice; keeping the latest")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get all tool definitions in MCP form."""
        return [tool.to_schema() for tool in self._tools.values()]

    async def execute(self, name: str, params: dict[str, Any] | None) -> ToolResult:
        """
        Execute a tool by name with given (camelCase) parameters.

        Absent or ``null`` parameters take their declared defaults; the rest
        are validated against the tool's schema, renamed to snake_case and
        passed to ``tool.execute``.
        """
        if not isinstance(params, dict):
            params = {}
        tool = self._tools.get(name)
        if not tool:
            return ToolResult.error(f"Tool '{name}' not found", code="NOT_FOUND")

        declared = (tool.parameters or {}).get("properties", {})
        ignored = sorted(k for k in params if k not in declared)
        if ignored:
            logger.debug(f"Ignoring undeclared parameters for {name}: {ignored}")
        supplied = {k: v for k, v in params.items() if v is not None and k in declared}
        try:
            errors = tool.validate_params(supplied)
        except ValueError as e:
            return ToolResult.error(f"Invalid schema for tool '{name}': {e}", code="VALIDATION_ERROR")
        if errors:
            return ToolResult.error(
                f"Invalid parameters for tool '{name}': " + "; ".join(errors), code="VALIDATION_ERROR"
            )

        kwargs = {camel_to_snake(k): v for k, v in tool.apply_defaults(supplied).items()}
        logger.debug(f"Dispatching {name} with parameters {sorted(kwargs)}")
        try:
            result = await tool.execute(**kwargs)
        except Exception as e:
            code, _, _ = classify_exception(e)
            logger.error(f"Tool {name} raised past its boundary [{code}]")
            return ToolResult(content=[{"type": "text", "text": format_tool_error(name, e)}], is_error=True, code=code)
        if result.is_error and result.code == CONFIGURATION_ERROR and self.exit_on_missing_credentials:
            logger.critical(f"Stopping: {name} is missing required configuration ({result.text})")
            raise SystemExit(1)
        return result

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
