import json

import pytest

from graphlit_mcp.tools import build_registry


@pytest.fixture
def registry(make_context):
    return build_registry(make_context())


def _items(result) -> list:
    assert not result.is_error, result.text
    assert all(item["mimeType"] == "application/json" for item in result.content)
    return [json.loads(item["text"]) for item in result.content]


@pytest.mark.asyncio
async def test_query_contents_builds_filter_and_projects_results(registry, fake_client) -> None:
    fake_client.responses["query_contents"] = [
        {"id": "c1", "relevance": 0.9, "fileName": "a.pdf", "imageUri": None, "mimeType": "application/pdf"},
        None,
    ]
    result = await registry.execute("queryContents", {
        "query": "pricing",
        "fileType": "DOCUMENT",
        "inLast": "P7D",
        "feeds": ["f1"],
    })
    assert _items(result) == [{
        "id": "c1",
        "relevance": 0.9,
        "fileName": "a.pdf",
        "resourceUri": "contents://c1",
        "uri": None,
        "mimeType": "application/pdf",
    }]
    (args, _), = fake_client.calls_to("query_contents")
    assert args[0] == {
        "search": "pricing",
        "searchType": "HYBRID",
        "fileTypes": ["DOCUMENT"],
        "feeds": [{"id": "f1"}],
        "createdInLast": "P7D",
        "limit": 100,
    }


@pytest.mark.asyncio
async def test_query_contents_without_query_has_no_search_type(registry, fake_client) -> None:
    fake_client.responses["query_contents"] = []
    result = await registry.execute("queryContents", {"type": "EMAIL", "limit": 5})
    assert result.content == []
    (args, _), = fake_client.calls_to("query_contents")
    assert args[0] == {"types": ["EMAIL"], "limit": 5}


@pytest.mark.asyncio
async def test_query_contents_rejects_unknown_enum(registry, fake_client) -> None:
    result = await registry.execute("queryContents", {"fileType": "SPREADSHEET"})
    assert result.code == "VALIDATION_ERROR"
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_query_contents_rejects_invalid_window(registry) -> None:
    result = await registry.execute("queryContents", {"inLast": "P2W"})
    assert result.text == "Error: Invalid ISO 8601 duration: P2W"


@pytest.mark.asyncio
async def test_query_feeds_summaries(registry, fake_client) -> None:
    fake_client.responses["query_feeds"] = [{"id": "f1", "name": "RSS [x]", "state": "ENABLED"}]
    result = await registry.execute("queryFeeds", {"type": "RSS"})
    assert _items(result) == [
        {"id": "f1", "name": "RSS [x]", "relevance": None, "state": "ENABLED", "resourceUri": "feeds://f1"}
    ]
    (args, _), = fake_client.calls_to("query_feeds")
    assert args[0] == {"types": ["RSS"], "limit": 100}


@pytest.mark.asyncio
async def test_query_conversations_uses_hybrid_search(registry, fake_client) -> None:
    fake_client.responses["query_conversations"] = [{"id": "conv1", "name": "Chat"}]
    result = await registry.execute("queryConversations", {"query": "billing", "inLast": "PT1H"})
    assert _items(result)[0]["resourceUri"] == "conversations://conv1"
    (args, _), = fake_client.calls_to("query_conversations")
    assert args[0]["searchType"] == "HYBRID"
    assert args[0]["createdInLast"] == "PT1H"


@pytest.mark.asyncio
async def test_query_collections(registry, fake_client) -> None:
    fake_client.responses["query_collections"] = [{"id": "col1", "name": "Research"}]
    result = await registry.execute("queryCollections", {"name": "Research"})
    assert _items(result)[0]["resourceUri"] == "collections://col1"


@pytest.mark.asyncio
@pytest.mark.parametrize(("answer", "done"), [(True, True), (False, False), (None, False)])
async def test_done_checks(registry, fake_client, answer, done) -> None:
    fake_client.responses["is_content_done"] = answer
    fake_client.responses["is_feed_done"] = answer
    assert (await registry.execute("isContentDone", {"id": "c1"})).payload() == {"done": done}
    assert (await registry.execute("isFeedDone", {"id": "f1"})).payload() == {"done": done}
