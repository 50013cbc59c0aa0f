"""Base classes for dispatchable tools."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from graphlit_mcp.config.schema import ServerConfig
from graphlit_mcp.ingestion.credentials import CredentialResolver
from graphlit_mcp.tools.result import ToolResult, operation_boundary

if TYPE_CHECKING:
    from graphlit_mcp.remote.client import GraphlitClient


class Tool(ABC):
    """
    Abstract base class for tools.

    A tool declares a JSON-schema for its parameters and an async ``execute``
    that always answers with a ``ToolResult``.
    """

    _TYPE_MAP = {
        "string": str,
        "integer": int,
        "number": (int, float),
        "boolean": bool,
        "array": list,
        "object": dict,
    }

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in function calls."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what the tool does."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON Schema for tool parameters."""
        pass

    @abstractmethod
    async def execute(self, **kwargs: Any) -> ToolResult:
        """
        Execute the tool with given parameters.

        Args:
            **kwargs: Tool-specific parameters (snake_case).

        Returns:
            Result envelope.
        """
        pass

    def validate_params(self, params: dict[str, Any]) -> list[str]:
        """Validate tool parameters against JSON schema. Returns error list (empty if valid)."""
        schema = self.parameters or {}
        if schema.get("type", "object") != "object":
            raise ValueError(f"Schema must be object type, got {schema.get('type')!r}")
        return self._validate(params, {**schema, "type": "object"}, "")

    def _validate(self, val: Any, schema: dict[str, Any], path: str) -> list[str]:
        t, label = schema.get("type"), path or "parameter"
        if t in self._TYPE_MAP:
            # bool is an int subclass; JSON keeps them apart
            if t in ("integer", "number") and isinstance(val, bool):
                return [f"{label} should be {t}"]
            if not isinstance(val, self._TYPE_MAP[t]):
                return [f"{label} should be {t}"]

        errors: list[str] = []
        if "enum" in schema and val not in schema["enum"]:
            errors.append(f"{label} must be one of {schema['enum']}")
        if t in ("integer", "number"):
            if "minimum" in schema and val < schema["minimum"]:
                errors.append(f"{label} must be >= {schema['minimum']}")
            if "maximum" in schema and val > schema["maximum"]:
                errors.append(f"{label} must be <= {schema['maximum']}")
        if t == "string":
            if "minLength" in schema and len(val) < schema["minLength"]:
                errors.append(f"{label} must be at least {schema['minLength']} chars")
            if "maxLength" in schema and len(val) > schema["maxLength"]:
                errors.append(f"{label} must be at most {schema['maxLength']} chars")
        if t == "object":
            props = schema.get("properties", {})
            for k in schema.get("required", []):
                if k not in val:
                    errors.append(f"missing required {path + '.' + k if path else k}")
            for k, v in val.items():
                if k in props:
                    errors.extend(self._validate(v, props[k], path + "." + k if path else k))
        if t == "array" and "items" in schema:
            for i, item in enumerate(val):
                errors.extend(self._validate(item, schema["items"], f"{path}[{i}]" if path else f"[{i}]"))
        return errors

    def apply_defaults(self, params: dict[str, Any]) -> dict[str, Any]:
        """Fill top-level parameters that declare a ``default`` and were not supplied."""
        merged = dict(params)
        for key, prop in (self.parameters or {}).get("properties", {}).items():
            if key not in merged and "default" in prop:
                merged[key] = copy.deepcopy(prop["default"])
        return merged

    def to_schema(self) -> dict[str, Any]:
        """Tool definition in MCP ``tools/list`` form."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }


@dataclass
class ToolContext:
    """Collaborators shared by every platform-backed tool."""
    client: GraphlitClient
    credentials: CredentialResolver = field(default_factory=lambda: CredentialResolver({}))
    settings: ServerConfig = field(default_factory=ServerConfig)
    http_transport: httpx.AsyncBaseTransport | None = None


class GraphlitTool(Tool):
    """
    Tool backed by the Graphlit platform.

    Subclasses set ``name``/``description``/``parameters`` as class attributes
    and implement ``run``; ``execute`` wraps it so that no exception leaves
    the tool.
    """

    name: str = ""
    description: str = ""
    parameters: dict[str, Any] = {"type": "object", "properties": {}}

    def __init__(self, context: ToolContext):
        self.context = context

    @property
    def client(self) -> GraphlitClient:
        return self.context.client

    @property
    def credentials(self) -> CredentialResolver:
        return self.context.credentials

    @property
    def settings(self) -> ServerConfig:
        return self.context.settings

    @operation_boundary()
    async def execute(self, **kwargs: Any) -> ToolResult:
        return await self.run(**kwargs)

    @abstractmethod
    async def run(self, **kwargs: Any) -> ToolResult:
        pass
