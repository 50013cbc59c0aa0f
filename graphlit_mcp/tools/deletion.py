"""Single and bulk deletion tools."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.query.filters import (
    build_collection_filter,
    build_content_filter,
    build_conversation_filter,
    build_feed_filter,
)
from graphlit_mcp.remote.enums import ContentTypes, FeedTypes, FileTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import choice, integer, obj, string

BULK_CONTENT_LIMIT = 1000
BULK_LIMIT = 100


class DeleteContentTool(GraphlitTool):
    name = "deleteContent"
    description = "Deletes content from the Graphlit knowledge base. Returns the content identifier and state."
    parameters = obj({"id": string("Content identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.delete_content(id))


class DeleteConversationTool(GraphlitTool):
    name = "deleteConversation"
    description = "Deletes a conversation. Returns the conversation identifier and state."
    parameters = obj({"id": string("Conversation identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.delete_conversation(id))


class DeleteCollectionTool(GraphlitTool):
    name = "deleteCollection"
    description = (
        "Deletes a collection. Contents in the collection are not deleted. "
        "Returns the collection identifier and state."
    )
    parameters = obj({"id": string("Collection identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.delete_collection(id))


class DeleteFeedTool(GraphlitTool):
    name = "deleteFeed"
    description = (
        "Deletes a feed and all contents ingested by it. Returns the feed identifier and state."
    )
    parameters = obj({"id": string("Feed identifier.")}, required=["id"])

    async def run(self, id: str, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.delete_feed(id))


class DeleteContentsTool(GraphlitTool):
    name = "deleteContents"
    description = (
        "Deletes contents from the Graphlit knowledge base, optionally filtered by content type or file type. "
        "Deletes up to 1000 contents per call by default. Returns the deleted content identifiers and states."
    )
    parameters = obj({
        "contentType": choice(ContentTypes, "Content type filter, optional."),
        "fileType": choice(FileTypes, "File type filter, optional."),
        "limit": integer("Limit the number of contents to delete. Defaults to 1000.",
                         minimum=1, default=BULK_CONTENT_LIMIT),
    })

    async def run(self, content_type: str | None = None, file_type: str | None = None,
                  limit: int = BULK_CONTENT_LIMIT, **kwargs: Any) -> ToolResult:
        filter = build_content_filter(content_type=content_type, file_type=file_type, limit=limit)
        return ToolResult.json(await self.client.delete_all_contents(filter, is_synchronous=True))


class DeleteFeedsTool(GraphlitTool):
    name = "deleteFeeds"
    description = (
        "Deletes feeds, optionally filtered by feed type, along with the contents they ingested. "
        "Deletes up to 100 feeds per call by default. Returns the deleted feed identifiers and states."
    )
    parameters = obj({
        "feedType": choice(FeedTypes, "Feed type filter, optional."),
        "limit": integer("Limit the number of feeds to delete. Defaults to 100.", minimum=1, default=BULK_LIMIT),
    })

    async def run(self, feed_type: str | None = None, limit: int = BULK_LIMIT, **kwargs: Any) -> ToolResult:
        filter = build_feed_filter(feed_type=feed_type, limit=limit)
        return ToolResult.json(await self.client.delete_all_feeds(filter, is_synchronous=True))


class DeleteCollectionsTool(GraphlitTool):
    name = "deleteCollections"
    description = (
        "Deletes collections. Contents in the collections are not deleted. "
        "Deletes up to 100 collections per call by default. Returns the deleted collection identifiers and states."
    )
    parameters = obj({
        "limit": integer("Limit the number of collections to delete. Defaults to 100.",
                         minimum=1, default=BULK_LIMIT),
    })

    async def run(self, limit: int = BULK_LIMIT, **kwargs: Any) -> ToolResult:
        filter = build_collection_filter(limit=limit)
        return ToolResult.json(await self.client.delete_all_collections(filter, is_synchronous=True))


class DeleteConversationsTool(GraphlitTool):
    name = "deleteConversations"
    description = (
        "Deletes conversations. Deletes up to 100 conversations per call by default. "
        "Returns the deleted conversation identifiers and states."
    )
    parameters = obj({
        "limit": integer("Limit the number of conversations to delete. Defaults to 100.",
                         minimum=1, default=BULK_LIMIT),
    })

    async def run(self, limit: int = BULK_LIMIT, **kwargs: Any) -> ToolResult:
        filter = build_conversation_filter(limit=limit)
        return ToolResult.json(await self.client.delete_all_conversations(filter, is_synchronous=True))
