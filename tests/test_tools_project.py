from datetime import datetime, timedelta, timezone

import pytest

from graphlit_mcp.remote.enums import SpecificationTypes
from graphlit_mcp.tools.project import (
    AskGraphlitTool,
    ConfigureProjectTool,
    QueryProjectUsageTool,
    build_specification,
    build_workflow,
)


@pytest.mark.asyncio
async def test_usage_paginates_and_cleans_records(make_context, fake_client) -> None:
    records = [{"name": "GraphQL", "credits": 0.1, "uri": ""}] * 1000 + [{"name": "Text embedding", "tokens": 12}]

    def page(start_date, duration, *, offset, limit):
        return records[offset:offset + limit]

    fake_client.responses["query_project_usage"] = page
    result = await QueryProjectUsageTool(make_context()).execute(in_last="P1D")

    usage = result.payload()
    assert len(usage) == 1001
    assert usage[0] == {"name": "GraphQL", "credits": 0.1}
    assert usage[-1] == {"name": "Text embedding", "tokens": 12}
    calls = fake_client.calls_to("query_project_usage")
    assert [kwargs["offset"] for _, kwargs in calls] == [0, 1000]
    assert all(kwargs["limit"] == 1000 for _, kwargs in calls)
    start_date, duration = calls[0][0]
    assert duration == "P1D"
    expected = datetime.now(timezone.utc) - timedelta(days=1)
    assert abs((start_date - expected).total_seconds()) < 60


@pytest.mark.asyncio
async def test_usage_rejects_bad_window(make_context, fake_client) -> None:
    result = await QueryProjectUsageTool(make_context()).execute(in_last="yesterday")
    assert result.code == "VALIDATION_ERROR"
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_usage_window_past_calendar_range_is_rejected(make_context, fake_client) -> None:
    result = await QueryProjectUsageTool(make_context()).execute(in_last="P99999999D")
    assert result.is_error
    assert result.code == "VALIDATION_ERROR"
    assert "inLast" in result.text
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_usage_page_limit_comes_from_settings(make_context, fake_client) -> None:
    fake_client.responses["query_project_usage"] = []
    await QueryProjectUsageTool(make_context(usage_page_limit=50)).execute()
    (_, kwargs), = fake_client.calls_to("query_project_usage")
    assert kwargs["limit"] == 50


def test_completion_specification() -> None:
    spec = build_specification("OPEN_AI", SpecificationTypes.COMPLETION)
    assert spec["openAI"] == {"model": "GPT4O_CHAT_128K"}
    assert spec["searchType"] == "HYBRID"
    assert spec["name"] == "MCP Default Specification: Completion"


def test_anthropic_preparation_enables_thinking() -> None:
    spec = build_specification("ANTHROPIC", SpecificationTypes.PREPARATION)
    assert spec["anthropic"]["enableThinking"] is True


def test_workflow_without_specifications_is_bare() -> None:
    assert build_workflow(None, None) == {"name": "MCP Default Workflow"}
    assert len(build_workflow(None, "ext")["extraction"]["jobs"]) == 2


@pytest.mark.asyncio
async def test_configure_project_links_specification_and_workflow(make_context, fake_client) -> None:
    fake_client.responses.update({
        "upsert_specification": {"id": "spec-1"},
        "upsert_workflow": {"id": "wf-1"},
        "update_project": {"id": "project-1"},
    })
    result = await ConfigureProjectTool(make_context()).execute(configure_conversation_specification=True)
    assert result.payload() == {"id": "project-1"}
    (args, _), = fake_client.calls_to("update_project")
    assert args[0] == {"specification": {"id": "spec-1"}, "workflow": {"id": "wf-1"}}
    assert len(fake_client.calls_to("upsert_specification")) == 1


@pytest.mark.asyncio
async def test_configure_project_rejects_unknown_service(make_context) -> None:
    result = await ConfigureProjectTool(make_context()).execute(model_service_type="MISTRAL")
    assert result.text == "Error: Unsupported model service type [MISTRAL]."


@pytest.mark.asyncio
async def test_ask_graphlit_returns_message(make_context, fake_client) -> None:
    fake_client.responses["ask_graphlit"] = {"message": "Use `client.ingestUri`."}
    result = await AskGraphlitTool(make_context()).execute(prompt="How do I ingest a URL?")
    assert result.payload() == "Use `client.ingestUri`."
