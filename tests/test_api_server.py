import pytest

from graphlit_mcp.api.server import SERVER_NAME, ToolCallError, build_tool_list, create_server, handle_call_tool
from graphlit_mcp.tools import build_registry


@pytest.fixture
def registry(make_context):
    return build_registry(make_context())


def test_tool_list_mirrors_registry(registry) -> None:
    tools = build_tool_list(registry)
    assert [tool.name for tool in tools] == registry.tool_names
    web_crawl = next(tool for tool in tools if tool.name == "webCrawl")
    assert web_crawl.inputSchema["required"] == ["url"]


def test_create_server_is_named(registry) -> None:
    assert create_server(registry).name == SERVER_NAME


@pytest.mark.asyncio
async def test_successful_call_returns_text_items(registry, fake_client) -> None:
    fake_client.responses["is_feed_done"] = True
    content = await handle_call_tool(registry, "isFeedDone", {"id": "f1"})
    assert len(content) == 1
    assert content[0].type == "text"
    assert '"done": true' in content[0].text


@pytest.mark.asyncio
async def test_error_result_raises_for_mcp_error_flag(registry) -> None:
    with pytest.raises(ToolCallError) as exc:
        await handle_call_tool(registry, "ingestSlackMessages", {"channelName": "general"})
    assert exc.value.code == "CONFIGURATION_ERROR"
    assert str(exc.value) == "Error: Missing credentials for Slack: SLACK_BOT_TOKEN"


@pytest.mark.asyncio
async def test_missing_arguments_are_treated_as_empty(registry) -> None:
    with pytest.raises(ToolCallError, match="missing required id"):
        await handle_call_tool(registry, "isContentDone", None)
