"""Image tools: similar-image retrieval and vision-LLM descriptions."""

from __future__ import annotations

import base64
from typing import Any

import httpx

from graphlit_mcp.query.filters import build_content_filter
from graphlit_mcp.remote.enums import ContentTypes, FileTypes, SearchTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.conversation import resource_uri
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import COLLECTIONS, FEEDS, IN_LAST, LOCATION, integer, obj, string
from graphlit_mcp.utils.exceptions import ValidationError

SIMILAR_IMAGE_LIMIT = 100
DEFAULT_IMAGE_MIME_TYPE = "image/png"

DEFAULT_DESCRIBE_PROMPT = (
    "Conduct a thorough analysis of the screenshot, with a particular focus on the textual content and "
    "the layout of the page. Describe all visible text, headings, charts and tables, and how the "
    "elements are arranged. Respond in Markdown."
)


async def fetch_image(url: str, *, timeout: float, transport: httpx.AsyncBaseTransport | None = None
                      ) -> tuple[str, str]:
    """Download an image; returns (base64 data, mime type)."""
    async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
        response = await client.get(url)
    if response.status_code >= 400:
        raise ValidationError(f"Failed to fetch data from {url}: {response.status_code}", field="url")
    mime_type = response.headers.get("content-type", DEFAULT_IMAGE_MIME_TYPE).split(";")[0].strip()
    return base64.b64encode(response.content).decode("ascii"), mime_type or DEFAULT_IMAGE_MIME_TYPE


class RetrieveImagesTool(GraphlitTool):
    name = "retrieveImages"
    description = (
        "Retrieve images from the Graphlit knowledge base which are visually similar to the image at the "
        "given URL. Accepts optional recency, feed and collection filters. Returns the similar images, "
        "each with its resource URI and image URL."
    )
    parameters = obj({
        "url": string("URL of the image which will be used to retrieve visually similar images."),
        "inLast": IN_LAST,
        "feeds": FEEDS,
        "collections": COLLECTIONS,
        "location": LOCATION,
        "limit": integer("Limit the number of images to be returned. Defaults to 100.", minimum=1,
                         default=SIMILAR_IMAGE_LIMIT),
    }, required=["url"])

    async def run(
        self,
        url: str,
        in_last: str | None = None,
        feeds: list[str] | None = None,
        collections: list[str] | None = None,
        location: dict[str, Any] | None = None,
        limit: int = SIMILAR_IMAGE_LIMIT,
        **kwargs: Any,
    ) -> ToolResult:
        data, mime_type = await fetch_image(
            url, timeout=self.settings.request_timeout, transport=self.context.http_transport
        )
        filter = build_content_filter(
            search_type=SearchTypes.VECTOR,
            image_data=data,
            image_mime_type=mime_type,
            in_last=in_last,
            types=[ContentTypes.FILE.value],
            file_types=[FileTypes.IMAGE.value],
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


class DescribeImageUrlTool(GraphlitTool):
    name = "describeImageUrl"
    description = (
        "Prompts a vision LLM and returns a completion about an image. The image is read from the given URL. "
        "Returns the completion as Markdown text."
    )
    parameters = obj({
        "prompt": string("Prompt for the vision LLM."),
        "url": string("URL of the image to describe."),
    }, required=["prompt", "url"])

    async def run(self, prompt: str, url: str, **kwargs: Any) -> ToolResult:
        response = await self.client.describe_image(prompt, url)
        return ToolResult.json({"message": (response or {}).get("message")})


class DescribeImageContentTool(GraphlitTool):
    name = "describeImageContent"
    description = (
        "Prompts a vision LLM about an image content previously ingested into Graphlit, referenced by its "
        "content identifier. Returns the completion as Markdown text, or an empty object when the content "
        "has no image."
    )
    parameters = obj({
        "id": string("Content identifier of the image."),
        "prompt": string("Prompt for the vision LLM, optional. Defaults to a detailed page analysis."),
    }, required=["id"])

    async def run(self, id: str, prompt: str | None = None, **kwargs: Any) -> ToolResult:
        content = await self.client.get_content(id)
        image_uri = (content or {}).get("imageUri")
        if not image_uri:
            return ToolResult.json({})
        response = await self.client.describe_image(prompt or DEFAULT_DESCRIBE_PROMPT, image_uri)
        return ToolResult.json({"message": (response or {}).get("message")})
