"""Pytest hooks and fixtures."""

import os
from typing import Any

import pytest

from graphlit_mcp.config.schema import ServerConfig
from graphlit_mcp.ingestion.credentials import CredentialResolver
from graphlit_mcp.tools.base import ToolContext


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "integration: talks to a live Graphlit project (skipped unless GRAPHLIT_ORGANIZATION_ID is set)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when no Graphlit project is configured."""
    if os.environ.get("GRAPHLIT_ORGANIZATION_ID"):
        return
    skip = pytest.mark.skip(reason="Requires a configured Graphlit project")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


class FakeGraphlitClient:
    """Stands in for GraphlitClient: records every call and replays canned responses."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        async def method(*args: Any, **kwargs: Any) -> Any:
            self.calls.append((name, args, kwargs))
            response = self.responses.get(name)
            if isinstance(response, BaseException):
                raise response
            if callable(response):
                return response(*args, **kwargs)
            return response

        return method

    def calls_to(self, name: str) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
        return [(args, kwargs) for called, args, kwargs in self.calls if called == name]


@pytest.fixture
def fake_client() -> FakeGraphlitClient:
    return FakeGraphlitClient()


@pytest.fixture
def make_context(fake_client):
    def _make(credentials: dict[str, str] | None = None, **settings: Any) -> ToolContext:
        return ToolContext(
            client=fake_client,
            credentials=CredentialResolver(credentials or {}),
            settings=ServerConfig(**settings),
        )

    return _make
