"""Async GraphQL client for the Graphlit data API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx
from loguru import logger

from graphlit_mcp.config.schema import PlatformConfig
from graphlit_mcp.remote import documents as gql
from graphlit_mcp.remote.auth import TokenProvider
from graphlit_mcp.utils.duration import format_timestamp
from graphlit_mcp.utils.exceptions import RemoteCallError


def _refs(ids: list[str] | None) -> list[dict[str, str]]:
    return [{"id": entity_id} for entity_id in ids or []]


def _results(payload: Any) -> list[Any]:
    if isinstance(payload, dict):
        results = payload.get("results")
        return list(results) if isinstance(results, list) else []
    return []


class GraphlitClient:
    """
    Thin typed facade over the platform's GraphQL operations.

    Every method issues exactly one request and returns the operation's field
    from ``data``. Failures surface as ``RemoteCallError`` carrying the
    platform's own message; nothing is retried here.
    """

    def __init__(
        self,
        config: PlatformConfig,
        *,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
        tokens: TokenProvider | None = None,
    ):
        self.api_url = config.api_url
        self.timeout = timeout
        self._transport = transport
        self._tokens = tokens or TokenProvider(config)

    async def execute(self, document: str, variables: dict[str, Any] | None = None,
                      *, operation: str = "graphql") -> dict[str, Any]:
        """POST one GraphQL document and return its ``data`` object."""
        payload = {"query": document, "variables": {k: v for k, v in (variables or {}).items() if v is not None}}
        headers = {"Authorization": f"Bearer {self._tokens.token()}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise RemoteCallError(
                f"Graphlit request timed out: {operation}", operation=operation, retryable=True
            ) from exc
        except httpx.RequestError as exc:
            raise RemoteCallError(
                f"Graphlit network error: {operation}: {exc}", operation=operation, retryable=True
            ) from exc

        body: Any = None
        try:
            body = resp.json()
        except ValueError:
            body = None

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            message = self._extract_error_message(errors)
            logger.debug(f"Graphlit {operation} returned errors: {message}")
            raise RemoteCallError(message, operation=operation, status_code=resp.status_code)

        if resp.status_code >= 400:
            text = (resp.text or "").strip()[:200] or "request failed"
            raise RemoteCallError(
                f"Graphlit HTTP error {resp.status_code}: {text}",
                operation=operation,
                status_code=resp.status_code,
                retryable=self._is_retryable_status(resp.status_code),
            )

        if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
            raise RemoteCallError(
                f"Graphlit bad response: no data for {operation}",
                operation=operation,
                status_code=resp.status_code,
            )
        return body["data"]

    async def _field(self, document: str, field: str, variables: dict[str, Any] | None = None) -> Any:
        data = await self.execute(document, variables, operation=field)
        return data.get(field)

    @staticmethod
    def _is_retryable_status(status_code: int) -> bool:
        return status_code >= 500 or status_code in {408, 425, 429}

    @staticmethod
    def _extract_error_message(errors: Any) -> str:
        messages = []
        for err in errors if isinstance(errors, list) else [errors]:
            if isinstance(err, dict):
                msg = err.get("message")
                if isinstance(msg, str) and msg.strip():
                    messages.append(msg.strip())
            elif isinstance(err, str) and err.strip():
                messages.append(err.strip())
        return "; ".join(messages) or "request failed"

    # Project

    async def update_project(self, project: dict[str, Any]) -> dict[str, Any] | None:
        return await self._field(gql.UPDATE_PROJECT, "updateProject", {"project": project})

    async def upsert_specification(self, specification: dict[str, Any]) -> dict[str, Any] | None:
        return await self._field(gql.UPSERT_SPECIFICATION, "upsertSpecification", {"specification": specification})

    async def upsert_workflow(self, workflow: dict[str, Any]) -> dict[str, Any] | None:
        return await self._field(gql.UPSERT_WORKFLOW, "upsertWorkflow", {"workflow": workflow})

    async def query_project_usage(self, start_date: datetime, duration: str, *, offset: int, limit: int,
                                  names: list[str] | None = None,
                                  excluded_names: list[str] | None = None) -> list[Any]:
        usage = await self._field(gql.QUERY_PROJECT_USAGE, "usage", {
            "startDate": format_timestamp(start_date),
            "duration": duration,
            "names": names or [],
            "excludedNames": excluded_names or [],
            "offset": offset,
            "limit": limit,
        })
        return list(usage or [])

    # Conversation and retrieval

    async def ask_graphlit(self, prompt: str) -> dict[str, Any] | None:
        return await self._field(gql.ASK_GRAPHLIT, "askGraphlit", {"prompt": prompt})

    async def prompt_conversation(self, prompt: str, conversation_id: str | None = None) -> dict[str, Any] | None:
        return await self._field(gql.PROMPT_CONVERSATION, "promptConversation", {
            "prompt": prompt,
            "id": conversation_id,
        })

    async def retrieve_sources(self, prompt: str, filter: dict[str, Any],
                               retrieval_strategy: dict[str, Any] | None = None,
                               reranking_strategy: dict[str, Any] | None = None) -> list[Any]:
        payload = await self._field(gql.RETRIEVE_SOURCES, "retrieveSources", {
            "prompt": prompt,
            "filter": filter,
            "retrievalStrategy": retrieval_strategy,
            "rerankingStrategy": reranking_strategy,
        })
        return _results(payload)

    async def extract_text(self, prompt: str, text: str, tools: list[dict[str, Any]]) -> list[Any]:
        payload = await self._field(gql.EXTRACT_TEXT, "extractText", {
            "prompt": prompt,
            "text": text,
            "tools": tools,
        })
        return list(payload or [])

    async def describe_image(self, prompt: str, uri: str) -> dict[str, Any] | None:
        return await self._field(gql.DESCRIBE_IMAGE, "describeImage", {"prompt": prompt, "uri": uri})

    # Contents

    async def get_content(self, content_id: str) -> dict[str, Any] | None:
        return await self._field(gql.GET_CONTENT, "content", {"id": content_id})

    async def query_contents(self, filter: dict[str, Any]) -> list[Any]:
        return _results(await self._field(gql.QUERY_CONTENTS, "contents", {"filter": filter}))

    async def is_content_done(self, content_id: str) -> bool | None:
        payload = await self._field(gql.IS_CONTENT_DONE, "isContentDone", {"id": content_id})
        return payload.get("result") if isinstance(payload, dict) else None

    async def delete_content(self, content_id: str) -> dict[str, Any] | None:
        return await self._field(gql.DELETE_CONTENT, "deleteContent", {"id": content_id})

    async def delete_all_contents(self, filter: dict[str, Any], is_synchronous: bool = True) -> Any:
        return await self._field(gql.DELETE_ALL_CONTENTS, "deleteAllContents", {
            "filter": filter,
            "isSynchronous": is_synchronous,
        })

    async def ingest_uri(self, uri: str, is_synchronous: bool | None = None) -> dict[str, Any] | None:
        return await self._field(gql.INGEST_URI, "ingestUri", {"uri": uri, "isSynchronous": is_synchronous})

    async def ingest_text(self, text: str, *, name: str | None = None, text_type: str | None = None,
                          content_id: str | None = None, is_synchronous: bool | None = None) -> dict[str, Any] | None:
        return await self._field(gql.INGEST_TEXT, "ingestText", {
            "text": text,
            "name": name,
            "textType": text_type,
            "id": content_id,
            "isSynchronous": is_synchronous,
        })

    async def ingest_memory(self, text: str, *, name: str | None = None,
                            text_type: str | None = None) -> dict[str, Any] | None:
        return await self._field(gql.INGEST_MEMORY, "ingestMemory", {
            "text": text,
            "name": name,
            "textType": text_type,
        })

    async def ingest_encoded_file(self, name: str, data: str, mime_type: str,
                                  is_synchronous: bool | None = None) -> dict[str, Any] | None:
        return await self._field(gql.INGEST_ENCODED_FILE, "ingestEncodedFile", {
            "name": name,
            "data": data,
            "mimeType": mime_type,
            "isSynchronous": is_synchronous,
        })

    async def screenshot_page(self, uri: str, is_synchronous: bool | None = None) -> dict[str, Any] | None:
        return await self._field(gql.SCREENSHOT_PAGE, "screenshotPage", {
            "uri": uri,
            "isSynchronous": is_synchronous,
        })

    async def publish_text(self, text: str, text_type: str, connector: dict[str, Any], *,
                           name: str | None = None, is_synchronous: bool | None = None) -> list[Any]:
        payload = await self._field(gql.PUBLISH_TEXT, "publishText", {
            "text": text,
            "textType": text_type,
            "connector": connector,
            "name": name,
            "isSynchronous": is_synchronous,
        })
        contents = payload.get("contents") if isinstance(payload, dict) else None
        return list(contents or [])

    # Collections

    async def create_collection(self, collection: dict[str, Any]) -> dict[str, Any] | None:
        return await self._field(gql.CREATE_COLLECTION, "createCollection", {"collection": collection})

    async def add_contents_to_collections(self, contents: list[str], collections: list[str]) -> Any:
        return await self._field(gql.ADD_CONTENTS_TO_COLLECTIONS, "addContentsToCollections", {
            "contents": _refs(contents),
            "collections": _refs(collections),
        })

    async def remove_contents_from_collection(self, contents: list[str], collection: str) -> dict[str, Any] | None:
        return await self._field(gql.REMOVE_CONTENTS_FROM_COLLECTION, "removeContentsFromCollection", {
            "contents": _refs(contents),
            "collection": {"id": collection},
        })

    async def query_collections(self, filter: dict[str, Any]) -> list[Any]:
        return _results(await self._field(gql.QUERY_COLLECTIONS, "collections", {"filter": filter}))

    async def delete_collection(self, collection_id: str) -> dict[str, Any] | None:
        return await self._field(gql.DELETE_COLLECTION, "deleteCollection", {"id": collection_id})

    async def delete_all_collections(self, filter: dict[str, Any], is_synchronous: bool = True) -> Any:
        return await self._field(gql.DELETE_ALL_COLLECTIONS, "deleteAllCollections", {
            "filter": filter,
            "isSynchronous": is_synchronous,
        })

    # Conversations

    async def query_conversations(self, filter: dict[str, Any]) -> list[Any]:
        return _results(await self._field(gql.QUERY_CONVERSATIONS, "conversations", {"filter": filter}))

    async def delete_conversation(self, conversation_id: str) -> dict[str, Any] | None:
        return await self._field(gql.DELETE_CONVERSATION, "deleteConversation", {"id": conversation_id})

    async def delete_all_conversations(self, filter: dict[str, Any], is_synchronous: bool = True) -> Any:
        return await self._field(gql.DELETE_ALL_CONVERSATIONS, "deleteAllConversations", {
            "filter": filter,
            "isSynchronous": is_synchronous,
        })

    # Feeds

    async def create_feed(self, feed: dict[str, Any]) -> dict[str, Any] | None:
        return await self._field(gql.CREATE_FEED, "createFeed", {"feed": feed})

    async def query_feeds(self, filter: dict[str, Any]) -> list[Any]:
        return _results(await self._field(gql.QUERY_FEEDS, "feeds", {"filter": filter}))

    async def is_feed_done(self, feed_id: str) -> bool | None:
        payload = await self._field(gql.IS_FEED_DONE, "isFeedDone", {"id": feed_id})
        return payload.get("result") if isinstance(payload, dict) else None

    async def delete_feed(self, feed_id: str) -> dict[str, Any] | None:
        return await self._field(gql.DELETE_FEED, "deleteFeed", {"id": feed_id})

    async def delete_all_feeds(self, filter: dict[str, Any], is_synchronous: bool = True) -> Any:
        return await self._field(gql.DELETE_ALL_FEEDS, "deleteAllFeeds", {
            "filter": filter,
            "isSynchronous": is_synchronous,
        })

    # Source listing

    async def query_notion_databases(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_NOTION_DATABASES, "notionDatabases", {"properties": properties})

    async def query_notion_pages(self, properties: dict[str, Any], identifier: str) -> Any:
        return await self._listing(gql.QUERY_NOTION_PAGES, "notionPages", {
            "properties": properties,
            "identifier": identifier,
        })

    async def query_dropbox_folders(self, properties: dict[str, Any], folder_path: str | None = None) -> Any:
        return await self._listing(gql.QUERY_DROPBOX_FOLDERS, "dropboxFolders", {
            "properties": properties,
            "folderPath": folder_path,
        })

    async def query_box_folders(self, properties: dict[str, Any], folder_id: str | None = None) -> Any:
        return await self._listing(gql.QUERY_BOX_FOLDERS, "boxFolders", {
            "properties": properties,
            "folderId": folder_id,
        })

    async def query_discord_guilds(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_DISCORD_GUILDS, "discordGuilds", {"properties": properties})

    async def query_discord_channels(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_DISCORD_CHANNELS, "discordChannels", {"properties": properties})

    async def query_google_calendars(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_GOOGLE_CALENDARS, "googleCalendars", {"properties": properties})

    async def query_microsoft_calendars(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_MICROSOFT_CALENDARS, "microsoftCalendars", {"properties": properties})

    async def query_linear_projects(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_LINEAR_PROJECTS, "linearProjects", {"properties": properties})

    async def query_slack_channels(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_SLACK_CHANNELS, "slackChannels", {"properties": properties})

    async def query_sharepoint_libraries(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_SHAREPOINT_LIBRARIES, "sharePointLibraries", {"properties": properties})

    async def query_sharepoint_folders(self, properties: dict[str, Any], library_id: str) -> Any:
        return await self._listing(gql.QUERY_SHAREPOINT_FOLDERS, "sharePointFolders", {
            "properties": properties,
            "libraryId": library_id,
        })

    async def query_microsoft_teams_teams(self, properties: dict[str, Any]) -> Any:
        return await self._listing(gql.QUERY_MICROSOFT_TEAMS_TEAMS, "microsoftTeamsTeams", {"properties": properties})

    async def query_microsoft_teams_channels(self, properties: dict[str, Any], team_id: str) -> Any:
        return await self._listing(gql.QUERY_MICROSOFT_TEAMS_CHANNELS, "microsoftTeamsChannels", {
            "properties": properties,
            "teamId": team_id,
        })

    async def _listing(self, document: str, field: str, variables: dict[str, Any]) -> Any:
        payload = await self._field(document, field, variables)
        if isinstance(payload, dict):
            return payload.get("results")
        return payload

    # Web and notifications

    async def map_web(self, uri: str) -> Any:
        payload = await self._field(gql.MAP_WEB, "mapWeb", {"uri": uri})
        return payload.get("results") if isinstance(payload, dict) else None

    async def search_web(self, text: str, service: str | None = None, limit: int | None = None) -> Any:
        payload = await self._field(gql.SEARCH_WEB, "searchWeb", {"text": text, "service": service, "limit": limit})
        return payload.get("results") if isinstance(payload, dict) else None

    async def send_notification(self, connector: dict[str, Any], text: str, text_type: str | None = None) -> bool | None:
        payload = await self._field(gql.SEND_NOTIFICATION, "sendNotification", {
            "connector": connector,
            "text": text,
            "textType": text_type,
        })
        return payload.get("result") if isinstance(payload, dict) else None
