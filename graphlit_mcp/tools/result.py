"""Tool result envelope and the exception boundary around tool execution."""

from __future__ import annotations

import functools
import json
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from loguru import logger

from graphlit_mcp.utils.exceptions import (
    ConfigurationError,
    GraphlitMCPError,
    classify_exception,
    sanitize_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

JSON_MIME_TYPE = "application/json"


def _dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


@dataclass
class ToolResult:
    """Outcome of one tool call: a list of text items plus an error flag."""
    content: list[dict[str, Any]] = field(default_factory=list)
    is_error: bool = False
    code: str | None = None

    @classmethod
    def json(cls, payload: Any) -> ToolResult:
        """Single text item holding pretty-printed JSON."""
        return cls(content=[{"type": "text", "text": _dumps(payload)}])

    @classmethod
    def json_items(cls, payloads: list[Any]) -> ToolResult:
        """One ``application/json`` text item per result, ``None`` entries dropped."""
        return cls(content=[
            {"type": "text", "mimeType": JSON_MIME_TYPE, "text": _dumps(payload)}
            for payload in payloads
            if payload is not None
        ])

    @classmethod
    def error(cls, message: str, code: str | None = None) -> ToolResult:
        return cls(content=[{"type": "text", "text": f"Error: {message}"}], is_error=True, code=code)

    @property
    def text(self) -> str:
        return "\n".join(str(item.get("text", "")) for item in self.content)

    def payload(self) -> Any:
        """Decoded JSON of a single-item success result."""
        if self.is_error or len(self.content) != 1:
            raise ValueError("payload() needs exactly one successful item")
        return json.loads(self.content[0]["text"])

    def to_dict(self) -> dict[str, Any]:
        return {"content": list(self.content), "isError": self.is_error}


def operation_boundary(log_errors: bool = True, include_traceback: bool = False) -> Callable[[F], F]:
    """
    Decorator that turns any exception raised by a tool into an error result.

    Usage:
        @operation_boundary()
        async def execute(self, **kwargs) -> ToolResult:
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> ToolResult:
            tool_name = getattr(args[0], "name", func.__name__) if args else func.__name__
            try:
                return await func(*args, **kwargs)
            except ConfigurationError as e:
                if log_errors:
                    logger.error(f"Tool {tool_name} not configured: {e.message}")
                return ToolResult.error(e.message, code=e.code)
            except GraphlitMCPError as e:
                if log_errors:
                    logger.warning(f"Tool {tool_name} error: {e.code} - {sanitize_error_message(e.message)}")
                return ToolResult.error(e.message, code=e.code)
            except Exception as e:
                code, _, _ = classify_exception(e)
                sanitized = sanitize_error_message(str(e)) or e.__class__.__name__
                if log_errors:
                    if include_traceback:
                        logger.exception(f"Tool {tool_name} failed [{code}]: {sanitized}")
                    else:
                        logger.error(f"Tool {tool_name} failed [{code}]: {sanitized}")
                return ToolResult.error(sanitized, code=code)

        return wrapper  # type: ignore[return-value]

    return decorator
