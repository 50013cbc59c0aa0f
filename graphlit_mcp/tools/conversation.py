"""Conversation, retrieval and extraction tools."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.query.filters import build_content_filter
from graphlit_mcp.remote.enums import ContentTypes, FileTypes, SearchTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import COLLECTIONS, FEEDS, IN_LAST, choice, obj, string

SOURCE_CONTENT_LIMIT = 50
EXTRACTION_TOOL_NAME = "extract_json"
DEFAULT_EXTRACTION_PROMPT = "Extract data using the tools provided."


def resource_uri(scheme: str, entity_id: Any) -> str:
    return f"{scheme}://{entity_id}"


class PromptConversationTool(GraphlitTool):
    name = "promptConversation"
    description = (
        "Prompts an LLM conversation about your entire Graphlit knowledge base. "
        "Uses hybrid vector search to retrieve relevant content sources and answers with citations. "
        "Accepts an optional conversation identifier to continue an existing conversation. "
        "Returns the conversation identifier, the completed message and its citations."
    )
    parameters = obj({
        "prompt": string("User prompt."),
        "conversationId": string("Conversation identifier, optional."),
    }, required=["prompt"])

    async def run(self, prompt: str, conversation_id: str | None = None, **kwargs: Any) -> ToolResult:
        response = await self.client.prompt_conversation(prompt, conversation_id)
        response = response or {}
        message = response.get("message") or {}
        return ToolResult.json({
            "id": (response.get("conversation") or {}).get("id"),
            "message": message.get("message"),
            "citations": message.get("citations"),
        })


class RetrieveSourcesTool(GraphlitTool):
    name = "retrieveSources"
    description = (
        "Retrieve relevant content sources from the Graphlit knowledge base. Do *not* use for retrieving "
        "content by identifier. Accepts a search prompt and optional filters: recency window, content type, "
        "file type, feeds and collections. Returns the ranked content sources, each with its resource URI "
        "and the relevant text as Markdown."
    )
    parameters = obj({
        "prompt": string("Search prompt for content retrieval."),
        "inLast": IN_LAST,
        "type": choice(ContentTypes, "Filter by content type, optional."),
        "fileType": choice(FileTypes, "Filter by file type, optional."),
        "feeds": FEEDS,
        "collections": COLLECTIONS,
    }, required=["prompt"])

    async def run(
        self,
        prompt: str,
        in_last: str | None = None,
        type: str | None = None,
        file_type: str | None = None,
        feeds: list[str] | None = None,
        collections: list[str] | None = None,
        **kwargs: Any,
    ) -> ToolResult:
        filter = build_content_filter(
            search_type=SearchTypes.HYBRID,
            in_last=in_last,
            content_type=type,
            file_type=file_type,
            feeds=feeds,
            collections=collections,
        )
        sources = await self.client.retrieve_sources(
            prompt,
            filter,
            retrieval_strategy={"type": "SECTION", "contentLimit": SOURCE_CONTENT_LIMIT, "disableFallback": True},
            reranking_strategy={"serviceType": "COHERE"},
        )
        items = []
        for source in sources:
            if source is None:
                continue
            content_id = (source.get("content") or {}).get("id")
            items.append({
                "id": content_id,
                "relevance": source.get("relevance"),
                "resourceUri": resource_uri("contents", content_id),
                "text": source.get("text"),
                "mimeType": "text/markdown",
            })
        return ToolResult.json_items(items)


class ExtractTextTool(GraphlitTool):
    name = "extractText"
    description = (
        "Extracts JSON data from text using an LLM. Accepts the text, a JSON schema describing the data to "
        "extract, and an optional extraction prompt. Returns the extracted values as a JSON list."
    )
    parameters = obj({
        "text": string("Text to be extracted with LLM."),
        "schema": string("JSON schema which describes the data to extract, serialized as a string."),
        "prompt": string("Custom prompt for the LLM extraction, optional."),
    }, required=["text", "schema"])

    async def run(self, text: str, schema: str, prompt: str | None = None, **kwargs: Any) -> ToolResult:
        results = await self.client.extract_text(
            prompt or DEFAULT_EXTRACTION_PROMPT,
            text,
            [{"name": EXTRACTION_TOOL_NAME, "schema": schema}],
        )
        return ToolResult.json([item.get("value") for item in results if item is not None])
