"""Tests for conversation, collection, deletion and publishing tools."""

import json

import pytest

from graphlit_mcp.tools import build_registry


@pytest.fixture
def registry(make_context):
    return build_registry(make_context())


@pytest.mark.asyncio
async def test_prompt_conversation(registry, fake_client) -> None:
    fake_client.responses["prompt_conversation"] = {
        "conversation": {"id": "conv1"},
        "message": {"message": "Answer [1]", "citations": [{"index": 1}]},
    }
    result = await registry.execute("promptConversation", {"prompt": "Summarize", "conversationId": "conv1"})
    assert result.payload() == {"id": "conv1", "message": "Answer [1]", "citations": [{"index": 1}]}
    (args, _), = fake_client.calls_to("prompt_conversation")
    assert args == ("Summarize", "conv1")


@pytest.mark.asyncio
async def test_retrieve_sources(registry, fake_client) -> None:
    fake_client.responses["retrieve_sources"] = [
        {"content": {"id": "c1"}, "relevance": 0.7, "text": "## Section"},
        None,
    ]
    result = await registry.execute("retrieveSources", {"prompt": "pricing", "type": "FILE"})
    items = [json.loads(item["text"]) for item in result.content]
    assert items == [{
        "id": "c1",
        "relevance": 0.7,
        "resourceUri": "contents://c1",
        "text": "## Section",
        "mimeType": "text/markdown",
    }]
    (args, kwargs), = fake_client.calls_to("retrieve_sources")
    assert args == ("pricing", {"searchType": "HYBRID", "types": ["FILE"]})
    assert kwargs["retrieval_strategy"] == {"type": "SECTION", "contentLimit": 50, "disableFallback": True}
    assert kwargs["reranking_strategy"] == {"serviceType": "COHERE"}


@pytest.mark.asyncio
async def test_extract_text(registry, fake_client) -> None:
    fake_client.responses["extract_text"] = [{"value": '{"a": 1}'}, {"value": '{"a": 2}'}]
    result = await registry.execute("extractText", {"text": "a=1, a=2", "schema": "{}"})
    assert result.payload() == ['{"a": 1}', '{"a": 2}']
    (args, _), = fake_client.calls_to("extract_text")
    assert args == ("Extract data using the tools provided.", "a=1, a=2", [{"name": "extract_json", "schema": "{}"}])


@pytest.mark.asyncio
async def test_collections(registry, fake_client) -> None:
    fake_client.responses["create_collection"] = {"id": "col1"}
    created = await registry.execute("createCollection", {"name": "Research", "contents": ["c1"]})
    assert created.payload() == {"id": "col1"}
    (args, _), = fake_client.calls_to("create_collection")
    assert args == ({"name": "Research", "contents": [{"id": "c1"}]},)

    added = await registry.execute("addContentsToCollection", {"id": "col1", "contents": ["c2"]})
    assert added.payload() == {"id": "col1"}
    assert fake_client.calls_to("add_contents_to_collections") == [((["c2"], ["col1"]), {})]

    removed = await registry.execute("removeContentsFromCollection", {"id": "col1", "contents": ["c2"]})
    assert removed.payload() == {"id": "col1"}


@pytest.mark.asyncio
async def test_single_delete_passes_through(registry, fake_client) -> None:
    fake_client.responses["delete_feed"] = {"id": "f1", "state": "DELETED"}
    result = await registry.execute("deleteFeed", {"id": "f1"})
    assert result.payload() == {"id": "f1", "state": "DELETED"}


@pytest.mark.asyncio
async def test_bulk_deletes_are_synchronous_with_limits(registry, fake_client) -> None:
    fake_client.responses.update({
        "delete_all_contents": [],
        "delete_all_feeds": [],
        "delete_all_collections": [],
        "delete_all_conversations": [],
    })
    await registry.execute("deleteContents", {"fileType": "IMAGE"})
    await registry.execute("deleteFeeds", {"feedType": "RSS"})
    await registry.execute("deleteCollections", {})
    await registry.execute("deleteConversations", {"limit": 5})

    assert fake_client.calls_to("delete_all_contents") == [
        (({"fileTypes": ["IMAGE"], "limit": 1000},), {"is_synchronous": True})
    ]
    assert fake_client.calls_to("delete_all_feeds")[0][0] == ({"types": ["RSS"], "limit": 100},)
    assert fake_client.calls_to("delete_all_collections")[0][0] == ({"limit": 100},)
    assert fake_client.calls_to("delete_all_conversations")[0][0] == ({"limit": 5},)


@pytest.mark.asyncio
async def test_publish_audio(registry, fake_client) -> None:
    fake_client.responses["publish_text"] = [{"id": "a1"}]
    result = await registry.execute("publishAudio", {"name": "Briefing", "text": "Hello"})
    assert result.payload() == [{"id": "a1"}]
    (args, kwargs), = fake_client.calls_to("publish_text")
    assert args[:2] == ("Hello", "MARKDOWN")
    assert args[2]["elevenLabs"] == {"model": "FLASH_V2_5", "voice": "HqW11As4VRPkApNPkAZp"}
    assert kwargs == {"name": "Briefing", "is_synchronous": True}


@pytest.mark.asyncio
async def test_publish_image(registry, fake_client) -> None:
    fake_client.responses["publish_text"] = [{"id": "i1"}, {"id": "i2"}]
    result = await registry.execute("publishImage", {"name": "Logo", "prompt": "A compass", "count": 2})
    assert result.payload() == [{"id": "i1"}, {"id": "i2"}]
    (args, _), = fake_client.calls_to("publish_text")
    assert args[2] == {"type": "OPEN_AI_IMAGE", "format": "PNG", "openAIImage": {"model": "GPT_IMAGE_1", "count": 2}}
