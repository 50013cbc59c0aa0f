"""Publishing tools: text to audio and prompt to image."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.remote.enums import TextTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import choice, integer, obj, string

DEFAULT_VOICE = "HqW11As4VRPkApNPkAZp"


def _content_ids(contents: list[Any]) -> ToolResult:
    return ToolResult.json([{"id": content.get("id")} for content in contents if content])


class PublishAudioTool(GraphlitTool):
    name = "publishAudio"
    description = (
        "Publishes text as audio (MP3) and ingests it into the Graphlit knowledge base. Accepts a content "
        "name, the text, an optional text type and an optional ElevenLabs voice identifier. Retrieve the "
        "content to get the downloadable audio URL. Executes *synchronously* and returns the content identifiers."
    )
    parameters = obj({
        "name": string("Name for the content object."),
        "text": string("Text content to publish."),
        "textType": choice(TextTypes, "Text type (PLAIN, MARKDOWN, HTML). Defaults to MARKDOWN.",
                           default=TextTypes.MARKDOWN.value),
        "voice": string("ElevenLabs voice identifier, optional.", default=DEFAULT_VOICE),
    }, required=["name", "text"])

    async def run(self, name: str, text: str, text_type: str = TextTypes.MARKDOWN.value,
                  voice: str = DEFAULT_VOICE, **kwargs: Any) -> ToolResult:
        connector = {
            "type": "ELEVEN_LABS_AUDIO",
            "format": "MP3",
            "elevenLabs": {"model": "FLASH_V2_5", "voice": voice},
        }
        contents = await self.client.publish_text(text, text_type, connector, name=name, is_synchronous=True)
        return _content_ids(contents)


class PublishImageTool(GraphlitTool):
    name = "publishImage"
    description = (
        "Publishes a prompt as generated image(s) (PNG) and ingests them into the Graphlit knowledge base. "
        "Accepts a content name, the image generation prompt and an optional image count. Retrieve the "
        "content to get the downloadable image URL. Executes *synchronously* and returns the content identifiers."
    )
    parameters = obj({
        "name": string("Name for the content object."),
        "prompt": string("Prompt for image generation."),
        "count": integer("Number of images to generate, optional. Defaults to 1.", minimum=1, default=1),
    }, required=["name", "prompt"])

    async def run(self, name: str, prompt: str, count: int = 1, **kwargs: Any) -> ToolResult:
        connector = {
            "type": "OPEN_AI_IMAGE",
            "format": "PNG",
            "openAIImage": {"model": "GPT_IMAGE_1", "count": count},
        }
        contents = await self.client.publish_text(
            prompt, TextTypes.MARKDOWN.value, connector, name=name, is_synchronous=True
        )
        return _content_ids(contents)
