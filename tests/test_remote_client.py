"""Tests for the GraphQL client against a mocked transport."""

import json

import httpx
import pytest

from graphlit_mcp.config.schema import PlatformConfig
from graphlit_mcp.remote.client import GraphlitClient
from graphlit_mcp.utils.exceptions import ErrorCategory, RemoteCallError


class StaticTokens:
    def token(self) -> str:
        return "test-token"


def _client(handler) -> tuple[GraphlitClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    config = PlatformConfig(organization_id="o", environment_id="e", jwt_secret="s", api_url="https://api.test/graphql")
    client = GraphlitClient(config, transport=httpx.MockTransport(record), tokens=StaticTokens())
    return client, seen


@pytest.mark.asyncio
async def test_returns_operation_field_and_sends_bearer() -> None:
    client, seen = _client(lambda r: httpx.Response(200, json={"data": {"createFeed": {"id": "feed-1"}}}))
    result = await client.create_feed({"name": "Web [x]"})
    assert result == {"id": "feed-1"}
    request = seen[0]
    assert str(request.url) == "https://api.test/graphql"
    assert request.headers["Authorization"] == "Bearer test-token"
    body = json.loads(request.content)
    assert body["variables"] == {"feed": {"name": "Web [x]"}}


@pytest.mark.asyncio
async def test_none_variables_are_dropped() -> None:
    client, seen = _client(lambda r: httpx.Response(200, json={"data": {"ingestUri": {"id": "c1"}}}))
    await client.ingest_uri("https://example.com")
    assert json.loads(seen[0].content)["variables"] == {"uri": "https://example.com"}


@pytest.mark.asyncio
async def test_graphql_errors_are_joined() -> None:
    payload = {"errors": [{"message": "Feed not found"}, {"message": "Second"}, {"path": ["x"]}]}
    client, _ = _client(lambda r: httpx.Response(200, json=payload))
    with pytest.raises(RemoteCallError) as exc:
        await client.delete_feed("f1")
    assert exc.value.message == "Feed not found; Second"
    assert exc.value.details["operation"] == "deleteFeed"


@pytest.mark.asyncio
async def test_http_error_status_is_retryable_when_transient() -> None:
    client, _ = _client(lambda r: httpx.Response(503, text="unavailable"))
    with pytest.raises(RemoteCallError) as exc:
        await client.query_feeds({})
    assert exc.value.message == "Graphlit HTTP error 503: unavailable"
    assert exc.value.category == ErrorCategory.RETRYABLE


@pytest.mark.asyncio
async def test_missing_data_is_a_bad_response() -> None:
    client, _ = _client(lambda r: httpx.Response(200, text="not json"))
    with pytest.raises(RemoteCallError, match="bad response"):
        await client.query_contents({})


@pytest.mark.asyncio
async def test_network_failure_is_retryable() -> None:
    def fail(request):
        raise httpx.ConnectError("refused", request=request)

    client, _ = _client(fail)
    with pytest.raises(RemoteCallError) as exc:
        await client.is_feed_done("f1")
    assert exc.value.category == ErrorCategory.RETRYABLE


@pytest.mark.asyncio
async def test_results_are_unwrapped() -> None:
    data = {"data": {"contents": {"results": [{"id": "c1"}, {"id": "c2"}]}, "isFeedDone": None}}
    client, _ = _client(lambda r: httpx.Response(200, json=data))
    assert [c["id"] for c in await client.query_contents({})] == ["c1", "c2"]


@pytest.mark.asyncio
async def test_done_flags_read_result() -> None:
    client, _ = _client(lambda r: httpx.Response(200, json={"data": {"isContentDone": {"result": True}}}))
    assert await client.is_content_done("c1") is True


@pytest.mark.asyncio
async def test_collection_membership_wraps_ids() -> None:
    client, seen = _client(lambda r: httpx.Response(200, json={"data": {"addContentsToCollections": []}}))
    await client.add_contents_to_collections(["c1"], ["col"])
    assert json.loads(seen[0].content)["variables"] == {
        "contents": [{"id": "c1"}],
        "collections": [{"id": "col"}],
    }
