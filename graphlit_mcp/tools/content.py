"""Single-shot content ingestion and web tools."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Any

from loguru import logger

from graphlit_mcp.remote.enums import SearchServiceTypes, TextTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import choice, integer, obj, string
from graphlit_mcp.utils.duration import parse_duration
from graphlit_mcp.utils.exceptions import NotFoundError

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_SEARCH_LIMIT = 10

_TEXT_TYPE = choice(TextTypes, "Text type (PLAIN, MARKDOWN, HTML). Defaults to MARKDOWN.",
                    default=TextTypes.MARKDOWN.value)


def _id(response: dict[str, Any] | None) -> ToolResult:
    return ToolResult.json({"id": (response or {}).get("id")})


class IngestUrlTool(GraphlitTool):
    name = "ingestUrl"
    description = (
        "Ingests content from a URL into the Graphlit knowledge base. Can scrape a single web page, or ingest "
        "an individual document, audio recording, video or image. Do *not* use for crawling a web site, "
        "which is done with webCrawl. Executes asynchronously and returns the content identifier."
    )
    parameters = obj({"url": string("URL to ingest content from.")}, required=["url"])

    async def run(self, url: str, **kwargs: Any) -> ToolResult:
        return _id(await self.client.ingest_uri(url))


class IngestTextTool(GraphlitTool):
    name = "ingestText"
    description = (
        "Ingests text as content into the Graphlit knowledge base. Accepts the text, an optional text type, "
        "content name, and the identifier of an existing content to overwrite. "
        "Executes *synchronously* and returns the content identifier."
    )
    parameters = obj({
        "name": string("Name for the content object, optional."),
        "text": string("Text content to ingest."),
        "textType": _TEXT_TYPE,
        "id": string("Content identifier to overwrite, optional."),
    }, required=["text"])

    async def run(self, text: str, name: str | None = None, text_type: str = TextTypes.MARKDOWN.value,
                  id: str | None = None, **kwargs: Any) -> ToolResult:
        response = await self.client.ingest_text(
            text, name=name, text_type=text_type, content_id=id, is_synchronous=True
        )
        return _id(response)


class IngestMemoryTool(GraphlitTool):
    name = "ingestMemory"
    description = (
        "Ingests short-term textual memory as content into the Graphlit knowledge base. Memories are "
        "entity-extracted into the knowledge graph and are transient. Search them with queryContents or "
        "retrieveSources using the MEMORY content type. Executes asynchronously and returns the content identifier."
    )
    parameters = obj({
        "name": string("Name for the content object, optional."),
        "text": string("Textual memory to ingest, e.g. 'Graphlit is based in Seattle'."),
        "textType": _TEXT_TYPE,
        "timeToLive": string(
            "Time to live for the memory, ISO 8601 duration, e.g. 'PT1H' or 'P1D'. Optional."
        ),
    }, required=["text"])

    async def run(self, text: str, name: str | None = None, text_type: str = TextTypes.MARKDOWN.value,
                  time_to_live: str | None = None, **kwargs: Any) -> ToolResult:
        if time_to_live is not None:
            parse_duration(time_to_live, field="timeToLive")
            # TODO: forward timeToLive once the ingestMemory mutation accepts it
            logger.debug(f"ingestMemory timeToLive {time_to_live} validated but not sent")
        return _id(await self.client.ingest_memory(text, name=name, text_type=text_type))


class IngestFileTool(GraphlitTool):
    name = "ingestFile"
    description = (
        "Ingests a local file into the Graphlit knowledge base. Accepts the path to the file in the local "
        "filesystem. Executes asynchronously and returns the content identifier."
    )
    parameters = obj({"filePath": string("Path to the file in the local filesystem.")}, required=["filePath"])

    async def run(self, file_path: str, **kwargs: Any) -> ToolResult:
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise NotFoundError("File", file_path)
        mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
        data = base64.b64encode(path.read_bytes()).decode("ascii")
        return _id(await self.client.ingest_encoded_file(path.name, data, mime_type))


class ScreenshotPageTool(GraphlitTool):
    name = "screenshotPage"
    description = "Screenshots a web page from its URL. Executes *synchronously* and returns the content identifier."
    parameters = obj({"url": string("Web page URL.")}, required=["url"])

    async def run(self, url: str, **kwargs: Any) -> ToolResult:
        return _id(await self.client.screenshot_page(url, is_synchronous=True))


class WebMapTool(GraphlitTool):
    name = "webMap"
    description = (
        "Enumerates the web pages at or beneath the given URL using the web sitemap. Does *not* ingest "
        "web pages. Returns the list of mapped URIs."
    )
    parameters = obj({"url": string("Web site URL.")}, required=["url"])

    async def run(self, url: str, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.map_web(url))


class WebSearchTool(GraphlitTool):
    name = "webSearch"
    description = (
        "Performs web or podcast search. Format the query as it would be entered into a search engine; site "
        "filters like 'site:twitter.com' are allowed. Use the PODSCAN service to search podcasts. Does *not* "
        "ingest results. Returns the URL, title and relevant Markdown text of each hit."
    )
    parameters = obj({
        "query": string("Search query."),
        "searchService": choice(
            SearchServiceTypes, "Search service type (TAVILY, EXA, EXA_CODE, PODSCAN). Defaults to EXA.",
            default=SearchServiceTypes.EXA.value,
        ),
        "limit": integer("Limit the number of search hits to be returned. Defaults to 10.",
                         minimum=1, default=DEFAULT_SEARCH_LIMIT),
    }, required=["query"])

    async def run(self, query: str, search_service: str = SearchServiceTypes.EXA.value,
                  limit: int = DEFAULT_SEARCH_LIMIT, **kwargs: Any) -> ToolResult:
        return ToolResult.json(await self.client.search_web(query, search_service, limit))
