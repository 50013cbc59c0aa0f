"""Utility functions for graphlit-mcp."""

from graphlit_mcp.utils.duration import duration_seconds, format_timestamp, parse_duration, recency_cutoff
from graphlit_mcp.utils.exceptions import (
    ConfigurationError,
    ErrorCategory,
    GraphlitMCPError,
    MissingCredentialError,
    NotFoundError,
    RemoteCallError,
    TimeoutError,
    ValidationError,
    classify_exception,
    format_tool_error,
    sanitize_error_message,
)

__all__ = [
    "parse_duration",
    "duration_seconds",
    "recency_cutoff",
    "format_timestamp",
    "GraphlitMCPError",
    "ValidationError",
    "ConfigurationError",
    "MissingCredentialError",
    "NotFoundError",
    "TimeoutError",
    "RemoteCallError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
    "format_tool_error",
]
