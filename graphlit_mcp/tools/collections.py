"""Collection tools."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.query.filters import wrap_ids
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import obj, string, string_list


class CreateCollectionTool(GraphlitTool):
    name = "createCollection"
    description = (
        "Create a collection. Accepts a collection name and optional content identifiers to add to the "
        "collection. Returns the collection identifier."
    )
    parameters = obj({
        "name": string("Collection name."),
        "contents": string_list("Content identifiers to add to the collection, optional."),
    }, required=["name"])

    async def run(self, name: str, contents: list[str] | None = None, **kwargs: Any) -> ToolResult:
        collection: dict[str, Any] = {"name": name}
        if contents:
            collection["contents"] = wrap_ids(contents)
        response = await self.client.create_collection(collection)
        return ToolResult.json({"id": (response or {}).get("id")})


class AddContentsToCollectionTool(GraphlitTool):
    name = "addContentsToCollection"
    description = (
        "Add contents to a collection. Accepts a collection identifier and a list of content identifiers. "
        "Returns the collection identifier."
    )
    parameters = obj({
        "id": string("Collection identifier."),
        "contents": string_list("Content identifiers to add to the collection."),
    }, required=["id", "contents"])

    async def run(self, id: str, contents: list[str], **kwargs: Any) -> ToolResult:
        await self.client.add_contents_to_collections(contents, [id])
        return ToolResult.json({"id": id})


class RemoveContentsFromCollectionTool(GraphlitTool):
    name = "removeContentsFromCollection"
    description = (
        "Remove contents from a collection. Accepts a collection identifier and a list of content "
        "identifiers. Returns the collection identifier."
    )
    parameters = obj({
        "id": string("Collection identifier."),
        "contents": string_list("Content identifiers to remove from the collection."),
    }, required=["id", "contents"])

    async def run(self, id: str, contents: list[str], **kwargs: Any) -> ToolResult:
        response = await self.client.remove_contents_from_collection(contents, id)
        return ToolResult.json({"id": (response or {}).get("id", id)})
