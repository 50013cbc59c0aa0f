"""Query and completion-check tools."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.ingestion.polling import CompletionState, completion_state
from graphlit_mcp.query.filters import (
    build_collection_filter,
    build_content_filter,
    build_conversation_filter,
    build_feed_filter,
)
from graphlit_mcp.remote.enums import ContentTypes, FeedTypes, FileTypes, SearchTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.conversation import resource_uri
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import COLLECTIONS, FEEDS, IN_LAST, LOCATION, choice, integer, obj, string

DEFAULT_QUERY_LIMIT = 100


def _limit(entity: str) -> dict[str, Any]:
    return integer(
        f"Limit the number of {entity} to be returned. Defaults to {DEFAULT_QUERY_LIMIT}.",
        minimum=1,
        default=DEFAULT_QUERY_LIMIT,
    )


def _summaries(scheme: str, results: list[Any]) -> list[dict[str, Any]]:
    return [
        {
            "id": entity.get("id"),
            "name": entity.get("name"),
            "relevance": entity.get("relevance"),
            "state": entity.get("state"),
            "resourceUri": resource_uri(scheme, entity.get("id")),
        }
        for entity in results
        if entity is not None
    ]


class QueryContentsTool(GraphlitTool):
    name = "queryContents"
    description = (
        "Query contents from the Graphlit knowledge base. Do *not* use for retrieving content sources "
        "for a prompt. Accepts an optional name, search query, content and file type, recency window, "
        "feed and collection filters and geo-location. Returns the matching contents with resource URIs."
    )
    parameters = obj({
        "name": string("Textual match on content name, optional."),
        "query": string("Search query, optional."),
        "type": choice(ContentTypes, "Filter by content type, optional."),
        "fileType": choice(FileTypes, "Filter by file type, optional."),
        "inLast": IN_LAST,
        "feeds": FEEDS,
        "collections": COLLECTIONS,
        "location": LOCATION,
        "limit": _limit("contents"),
    })

    async def run(
        self,
        name: str | None = None,
        query: str | None = None,
        type: str | None = None,
        file_type: str | None = None,
        in_last: str | None = None,
        feeds: list[str] | None = None,
        collections: list[str] | None = None,
        location: dict[str, Any] | None = None,
        limit: int = DEFAULT_QUERY_LIMIT,
        **kwargs: Any,
    ) -> ToolResult:
        filter = build_content_filter(
            search_type=SearchTypes.HYBRID if query else None,
            name=name,
            search=query,
            content_type=type,
            file_type=file_type,
            in_last=in_last,
            feeds=feeds,
            collections=collections,
            location=location,
            limit=limit,
        )
        contents = await self.client.query_contents(filter)
        return ToolResult.json_items([
            {
                "id": content.get("id"),
                "relevance": content.get("relevance"),
                "fileName": content.get("fileName"),
                "resourceUri": resource_uri("contents", content.get("id")),
                "uri": content.get("imageUri"),
                "mimeType": content.get("mimeType"),
            }
            for content in contents
            if content is not None
        ])


class QueryCollectionsTool(GraphlitTool):
    name = "queryCollections"
    description = "Query collections by name. Returns the matching collections with resource URIs."
    parameters = obj({
        "name": string("Textual match on collection name, optional."),
        "limit": _limit("collections"),
    })

    async def run(self, name: str | None = None, limit: int = DEFAULT_QUERY_LIMIT, **kwargs: Any) -> ToolResult:
        results = await self.client.query_collections(build_collection_filter(name=name, limit=limit))
        return ToolResult.json_items(_summaries("collections", results))


class QueryFeedsTool(GraphlitTool):
    name = "queryFeeds"
    description = "Query feeds by name and feed type. Returns the matching feeds with resource URIs."
    parameters = obj({
        "name": string("Textual match on feed name, optional."),
        "type": choice(FeedTypes, "Filter by feed type, optional."),
        "limit": _limit("feeds"),
    })

    async def run(self, name: str | None = None, type: str | None = None,
                  limit: int = DEFAULT_QUERY_LIMIT, **kwargs: Any) -> ToolResult:
        results = await self.client.query_feeds(build_feed_filter(name=name, feed_type=type, limit=limit))
        return ToolResult.json_items(_summaries("feeds", results))


class QueryConversationsTool(GraphlitTool):
    name = "queryConversations"
    description = (
        "Query previous LLM conversations. Accepts an optional search query and recency window. "
        "Returns the matching conversations with resource URIs."
    )
    parameters = obj({
        "query": string("Search query, optional."),
        "inLast": IN_LAST,
        "limit": _limit("conversations"),
    })

    async def run(self, query: str | None = None, in_last: str | None = None,
                  limit: int = DEFAULT_QUERY_LIMIT, **kwargs: Any) -> ToolResult:
        filter = build_conversation_filter(
            search=query,
            search_type=SearchTypes.HYBRID if query else None,
            in_last=in_last,
            limit=limit,
        )
        results = await self.client.query_conversations(filter)
        return ToolResult.json_items(_summaries("conversations", results))


class IsContentDoneTool(GraphlitTool):
    name = "isContentDone"
    description = (
        "Check if content has completed asynchronous ingestion. Accepts a content identifier returned "
        "by one of the ingest tools. Returns whether the content is done or not."
    )
    parameters = obj({"id": string("Content identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        state = completion_state(await self.client.is_content_done(id))
        return ToolResult.json({"done": state is CompletionState.DONE})


class IsFeedDoneTool(GraphlitTool):
    name = "isFeedDone"
    description = (
        "Check if an asynchronous feed has completed ingesting all the available content. "
        "Accepts a feed identifier returned by one of the ingest tools. Returns whether the feed is done or not."
    )
    parameters = obj({"id": string("Feed identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        state = completion_state(await self.client.is_feed_done(id))
        return ToolResult.json({"done": state is CompletionState.DONE})
