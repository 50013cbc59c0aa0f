"""
Errors raised across graphlit-mcp and the helpers that turn them into tool output.

Every error carries a stable ``code`` and an ``ErrorCategory``. Messages pass
through ``sanitize_error_message`` before they reach a client, so tokens and
secrets echoed back by the platform are redacted.
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(Enum):
    """Error categories for classification."""
    RECOVERABLE = "recoverable"
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    REMOTE = "remote"


class GraphlitMCPError(Exception):
    """Base exception for all graphlit-mcp errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(GraphlitMCPError):
    """Input validation error."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", category=ErrorCategory.VALIDATION, details=details)


class ConfigurationError(GraphlitMCPError):
    """A required setting is absent or unusable."""

    def __init__(self, message: str, missing: list[str] | None = None):
        details = {"missing": list(missing)} if missing else {}
        super().__init__(
            message,
            code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
            details=details,
        )


class MissingCredentialError(ConfigurationError):
    """A connector was invoked without its credentials being configured."""

    def __init__(self, connector: str, missing: list[str], alternatives: list[str] | None = None):
        message = f"Missing credentials for {connector}: {', '.join(missing)}"
        if alternatives:
            message += f" (or set {', '.join(alternatives)})"
        super().__init__(message, missing=missing)
        self.details["connector"] = connector
        self.connector = connector
        self.missing = list(missing)


class NotFoundError(GraphlitMCPError):
    """Resource not found error."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            code="NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class TimeoutError(GraphlitMCPError):
    """Operation timeout error."""

    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            f"Operation '{operation}' timed out after {timeout_seconds}s",
            code="TIMEOUT",
            category=ErrorCategory.TIMEOUT,
            details={"operation": operation, "timeout_seconds": timeout_seconds},
        )


class RemoteCallError(GraphlitMCPError):
    """The Graphlit platform rejected a call or could not be reached."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        retryable: bool = False,
    ):
        category = ErrorCategory.RETRYABLE if retryable else ErrorCategory.REMOTE
        super().__init__(
            message,
            code="REMOTE_ERROR",
            category=category,
            details={"operation": operation, "status_code": status_code},
        )
        self.operation = operation
        self.status_code = status_code
        self.retryable = retryable


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"eyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+"),
    re.compile(r"xox[baprs]-[a-zA-Z0-9\-]+"),
    re.compile(r"gh[pousr]_[a-zA-Z0-9]{20,}"),
    re.compile(r"lin_api_[a-zA-Z0-9]{20,}"),
    re.compile(r"sk-[a-zA-Z0-9]{20,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credential material from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory, bool]:
    """
    Classify an exception and return (error_code, category, should_retry).

    Returns:
        Tuple of (error_code, category, should_retry)
    """
    exc_str = str(exc).lower()

    if isinstance(exc, RemoteCallError):
        return exc.code, exc.category, exc.retryable

    if isinstance(exc, GraphlitMCPError):
        return exc.code, exc.category, exc.category in (ErrorCategory.RETRYABLE, ErrorCategory.RATE_LIMIT)

    if isinstance(exc, FileNotFoundError):
        return "FILE_NOT_FOUND", ErrorCategory.NOT_FOUND, False

    if isinstance(exc, PermissionError):
        return "PERMISSION_DENIED", ErrorCategory.PERMISSION, False

    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return "TIMEOUT", ErrorCategory.TIMEOUT, True

    if isinstance(exc, (ConnectionError, httpx.TransportError)):
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION, False

    if isinstance(exc, ValueError):
        return "INVALID_VALUE", ErrorCategory.VALIDATION, False

    if isinstance(exc, KeyError):
        return "MISSING_KEY", ErrorCategory.VALIDATION, False

    if isinstance(exc, TypeError):
        return "TYPE_ERROR", ErrorCategory.VALIDATION, False

    if "rate limit" in exc_str or "429" in exc_str:
        return "RATE_LIMIT", ErrorCategory.RATE_LIMIT, True

    if "timeout" in exc_str or "timed out" in exc_str:
        return "TIMEOUT", ErrorCategory.TIMEOUT, True

    if "not found" in exc_str or "404" in exc_str:
        return "NOT_FOUND", ErrorCategory.NOT_FOUND, False

    if "unauthorized" in exc_str or "401" in exc_str:
        return "UNAUTHORIZED", ErrorCategory.PERMISSION, False

    return "INTERNAL_ERROR", ErrorCategory.FATAL, False


def format_tool_error(tool_name: str, exc: Exception, include_details: bool = False) -> str:
    """Format an exception as a tool error line."""
    code, category, _ = classify_exception(exc)

    if isinstance(exc, GraphlitMCPError):
        message = exc.message
    else:
        message = sanitize_error_message(str(exc)) or exc.__class__.__name__

    if include_details:
        return f"Error [{code}] ({category.value}) in {tool_name}: {message}"
    return f"Error: {message}"
