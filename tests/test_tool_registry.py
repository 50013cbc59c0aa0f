"""Tests for registry dispatch, validation and the tool error boundary."""

from typing import Any

import pytest

from graphlit_mcp.tools import TOOL_CLASSES, build_registry
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.registry import ToolRegistry
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import integer, obj, string
from graphlit_mcp.utils.exceptions import MissingCredentialError, ValidationError


class EchoTool(GraphlitTool):
    name = "echo"
    description = "Echo the received keyword arguments."
    parameters = obj(
        {
            "text": string("Text to echo.", minLength=1),
            "repeatCount": integer("Repeat count.", minimum=1, default=1),
        },
        required=["text"],
    )

    async def run(self, **kwargs: Any) -> ToolResult:
        return ToolResult.json(kwargs)


class FailingTool(GraphlitTool):
    name = "fail"
    description = "Raise whatever the test asks for."

    def __init__(self, context, error: Exception):
        super().__init__(context)
        self.error = error

    async def run(self, **kwargs: Any) -> ToolResult:
        raise self.error


@pytest.fixture
def registry(make_context) -> ToolRegistry:
    reg = ToolRegistry()
    reg.register(EchoTool(make_context()))
    return reg


@pytest.mark.asyncio
async def test_unknown_tool(registry) -> None:
    result = await registry.execute("nope", {})
    assert result.is_error
    assert result.text == "Error: Tool 'nope' not found"


@pytest.mark.asyncio
async def test_params_are_renamed_and_defaulted(registry) -> None:
    result = await registry.execute("echo", {"text": "hi"})
    assert result.payload() == {"text": "hi", "repeat_count": 1}


@pytest.mark.asyncio
async def test_null_and_undeclared_params_are_dropped(registry) -> None:
    result = await registry.execute("echo", {"text": "hi", "repeatCount": None, "extra": 1})
    assert result.payload() == {"text": "hi", "repeat_count": 1}


@pytest.mark.asyncio
async def test_invalid_params_are_reported(registry) -> None:
    result = await registry.execute("echo", {"repeatCount": 0})
    assert result.is_error
    assert result.code == "VALIDATION_ERROR"
    assert "missing required text" in result.text
    assert "repeatCount must be >= 1" in result.text


@pytest.mark.asyncio
async def test_boolean_is_not_an_integer(registry) -> None:
    result = await registry.execute("echo", {"text": "x", "repeatCount": True})
    assert "repeatCount should be integer" in result.text


@pytest.mark.asyncio
async def test_non_dict_params_treated_as_empty(registry) -> None:
    result = await registry.execute("echo", None)
    assert "missing required text" in result.text


@pytest.mark.asyncio
async def test_project_errors_keep_their_message(make_context) -> None:
    reg = ToolRegistry()
    reg.register(FailingTool(make_context(), ValidationError("url is required", field="url")))
    result = await reg.execute("fail", {})
    assert result.is_error
    assert result.code == "VALIDATION_ERROR"
    assert result.text == "Error: url is required"


@pytest.mark.asyncio
async def test_unexpected_errors_are_sanitized(make_context) -> None:
    reg = ToolRegistry()
    reg.register(FailingTool(make_context(), RuntimeError("upstream said token=abc123")))
    result = await reg.execute("fail", {})
    assert result.code == "INTERNAL_ERROR"
    assert "abc123" not in result.text


@pytest.mark.asyncio
async def test_missing_credentials_are_recoverable_by_default(make_context) -> None:
    reg = ToolRegistry()
    reg.register(FailingTool(make_context(), MissingCredentialError("Slack", ["SLACK_BOT_TOKEN"])))
    result = await reg.execute("fail", {})
    assert result.code == "CONFIGURATION_ERROR"
    assert result.text == "Error: Missing credentials for Slack: SLACK_BOT_TOKEN"


@pytest.mark.asyncio
async def test_missing_credentials_can_stop_the_process(make_context) -> None:
    reg = ToolRegistry(exit_on_missing_credentials=True)
    reg.register(FailingTool(make_context(), MissingCredentialError("Slack", ["SLACK_BOT_TOKEN"])))
    with pytest.raises(SystemExit) as exc:
        await reg.execute("fail", {})
    assert exc.value.code == 1


def test_build_registry_registers_every_tool(make_context) -> None:
    registry = build_registry(make_context())
    assert len(registry) == len(TOOL_CLASSES) + 22
    assert "webCrawl" in registry
    assert "ingestSlackMessages" in registry
    assert registry.tool_names[0] == "configureProject"
    assert registry.exit_on_missing_credentials is False


def test_build_registry_reads_exit_flag_from_settings(make_context) -> None:
    registry = build_registry(make_context(exit_on_missing_credentials=True))
    assert registry.exit_on_missing_credentials is True


def test_every_definition_has_an_object_schema(make_context) -> None:
    for definition in build_registry(make_context()).get_definitions():
        assert definition["name"]
        assert definition["description"]
        assert definition["inputSchema"]["type"] == "object"
