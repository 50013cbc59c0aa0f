"""Source listing tools: enumerate the containers a feed can ingest from."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from graphlit_mcp.ingestion.credentials import ResolvedCredentials
from graphlit_mcp.remote.enums import SharePointAuthenticationTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import obj, string


def _oauth(creds: ResolvedCredentials, prefix: str) -> dict[str, Any]:
    return {
        "clientId": creds[f"{prefix}_CLIENT_ID"],
        "clientSecret": creds[f"{prefix}_CLIENT_SECRET"],
        "refreshToken": creds[f"{prefix}_REFRESH_TOKEN"],
    }


class SourceListingTool(GraphlitTool):
    """
    Listing backed by connector credentials.

    Subclasses name the credential requirement and implement ``properties``
    (credentials -> listing properties) and ``fetch``.
    """

    credentials_key: str = ""

    @abstractmethod
    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        pass

    @abstractmethod
    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        pass

    async def run(self, **kwargs: Any) -> ToolResult:
        creds = self.credentials.resolve(self.credentials_key)
        results = await self.fetch(self.properties(creds), **kwargs)
        return ToolResult.json(results)


class ListNotionDatabasesTool(SourceListingTool):
    name = "listNotionDatabases"
    description = (
        "Lists available Notion databases. Requires NOTION_API_KEY. Returns the databases; the database "
        "identifier can be used with ingestNotionPages."
    )
    parameters = obj({})
    credentials_key = "notion"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {"token": creds["NOTION_API_KEY"]}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_notion_databases(properties)


class ListNotionPagesTool(ListNotionDatabasesTool):
    name = "listNotionPages"
    description = "Lists pages from a Notion database. Requires NOTION_API_KEY. Returns the pages of the database."
    parameters = obj({"databaseId": string("Notion database identifier to list pages from.")},
                     required=["databaseId"])

    async def fetch(self, properties: dict[str, Any], database_id: str = "", **params: Any) -> Any:
        return await self.client.query_notion_pages(properties, database_id)


class ListDropboxFoldersTool(SourceListingTool):
    name = "listDropboxFolders"
    description = (
        "Lists available Dropbox folders. Requires DROPBOX_APP_KEY, DROPBOX_APP_SECRET and "
        "DROPBOX_REFRESH_TOKEN. Returns folders that can be used with ingestDropboxFiles."
    )
    parameters = obj({
        "folderPath": string("Folder path to list folders from, optional. Lists from root if not provided."),
    })
    credentials_key = "dropbox"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {
            "appKey": creds["DROPBOX_APP_KEY"],
            "appSecret": creds["DROPBOX_APP_SECRET"],
            "refreshToken": creds["DROPBOX_REFRESH_TOKEN"],
        }

    async def fetch(self, properties: dict[str, Any], folder_path: str | None = None, **params: Any) -> Any:
        return await self.client.query_dropbox_folders(properties, folder_path)


class ListBoxFoldersTool(SourceListingTool):
    name = "listBoxFolders"
    description = (
        "Lists available Box folders. Requires BOX_CLIENT_ID, BOX_CLIENT_SECRET and BOX_REFRESH_TOKEN. "
        "Returns folders that can be used with ingestBoxFiles."
    )
    parameters = obj({
        "folderId": string("Folder identifier to list folders from, optional. Lists from root if not provided."),
    })
    credentials_key = "box_listing"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return _oauth(creds, "BOX")

    async def fetch(self, properties: dict[str, Any], folder_id: str | None = None, **params: Any) -> Any:
        return await self.client.query_box_folders(properties, folder_id)


class ListDiscordGuildsTool(SourceListingTool):
    name = "listDiscordGuilds"
    description = (
        "Lists available Discord guilds (servers). Requires DISCORD_BOT_TOKEN. "
        "Returns the guilds the bot has access to."
    )
    parameters = obj({})
    credentials_key = "discord"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {"token": creds["DISCORD_BOT_TOKEN"]}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_discord_guilds(properties)


class ListDiscordChannelsTool(ListDiscordGuildsTool):
    name = "listDiscordChannels"
    description = (
        "Lists available Discord channels in a guild. Requires DISCORD_BOT_TOKEN. "
        "Returns channels that can be used with ingestDiscordMessages."
    )
    parameters = obj({"guildId": string("Discord guild (server) identifier to list channels from.")},
                     required=["guildId"])

    async def fetch(self, properties: dict[str, Any], guild_id: str = "", **params: Any) -> Any:
        return await self.client.query_discord_channels({**properties, "guildId": guild_id})


class ListGoogleCalendarsTool(SourceListingTool):
    name = "listGoogleCalendars"
    description = (
        "Lists available Google calendars. Requires GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and "
        "GOOGLE_REFRESH_TOKEN. Returns calendars that can be used with ingestGoogleCalendarEvents."
    )
    parameters = obj({})
    credentials_key = "google_calendar"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return _oauth(creds, "GOOGLE")

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_google_calendars(properties)


class ListMicrosoftCalendarsTool(SourceListingTool):
    name = "listMicrosoftCalendars"
    description = (
        "Lists available Microsoft calendars. Requires MICROSOFT_CLIENT_ID, MICROSOFT_CLIENT_SECRET and "
        "MICROSOFT_REFRESH_TOKEN. Returns calendars that can be used with ingestMicrosoftCalendarEvents."
    )
    parameters = obj({})
    credentials_key = "microsoft_calendar"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return _oauth(creds, "MICROSOFT")

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_microsoft_calendars(properties)


class ListLinearProjectsTool(SourceListingTool):
    name = "listLinearProjects"
    description = (
        "Lists available Linear projects. Requires LINEAR_API_KEY. "
        "Returns project names that can be used with ingestLinearIssues."
    )
    parameters = obj({})
    credentials_key = "linear"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {"key": creds["LINEAR_API_KEY"]}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_linear_projects(properties)


class ListSlackChannelsTool(SourceListingTool):
    name = "listSlackChannels"
    description = (
        "Lists available Slack channels. Requires SLACK_BOT_TOKEN. "
        "Returns channel names that can be used with ingestSlackMessages."
    )
    parameters = obj({})
    credentials_key = "slack"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {"token": creds["SLACK_BOT_TOKEN"]}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_slack_channels(properties)


class ListSharePointLibrariesTool(SourceListingTool):
    name = "listSharePointLibraries"
    description = (
        "Lists available SharePoint libraries. Requires SHAREPOINT_CLIENT_ID, SHAREPOINT_CLIENT_SECRET and "
        "SHAREPOINT_REFRESH_TOKEN. The library identifier can be used with listSharePointFolders."
    )
    parameters = obj({})
    credentials_key = "sharepoint_listing"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        return {"authenticationType": SharePointAuthenticationTypes.USER.value, **_oauth(creds, "SHAREPOINT")}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_sharepoint_libraries(properties)


class ListSharePointFoldersTool(ListSharePointLibrariesTool):
    name = "listSharePointFolders"
    description = (
        "Lists available SharePoint folders in a library. Requires SHAREPOINT_CLIENT_ID, "
        "SHAREPOINT_CLIENT_SECRET and SHAREPOINT_REFRESH_TOKEN. Folders can be used with ingestSharePointFiles."
    )
    parameters = obj({"libraryId": string("SharePoint library identifier.")}, required=["libraryId"])

    async def fetch(self, properties: dict[str, Any], library_id: str = "", **params: Any) -> Any:
        return await self.client.query_sharepoint_folders(properties, library_id)


class ListMicrosoftTeamsTeamsTool(SourceListingTool):
    name = "listMicrosoftTeamsTeams"
    description = (
        "Lists available Microsoft Teams teams. Requires MICROSOFT_TEAMS_CLIENT_ID, "
        "MICROSOFT_TEAMS_CLIENT_SECRET and MICROSOFT_TEAMS_REFRESH_TOKEN. "
        "The team identifier can be used with listMicrosoftTeamsChannels."
    )
    parameters = obj({})
    credentials_key = "microsoft_teams"

    def properties(self, creds: ResolvedCredentials) -> dict[str, Any]:
        # listing accepts only the refresh token
        return {"refreshToken": creds["MICROSOFT_TEAMS_REFRESH_TOKEN"]}

    async def fetch(self, properties: dict[str, Any], **params: Any) -> Any:
        return await self.client.query_microsoft_teams_teams(properties)


class ListMicrosoftTeamsChannelsTool(ListMicrosoftTeamsTeamsTool):
    name = "listMicrosoftTeamsChannels"
    description = (
        "Lists available Microsoft Teams channels of a team. Requires MICROSOFT_TEAMS_CLIENT_ID, "
        "MICROSOFT_TEAMS_CLIENT_SECRET and MICROSOFT_TEAMS_REFRESH_TOKEN. "
        "The channel identifier can be used with ingestMicrosoftTeamsMessages."
    )
    parameters = obj({"teamId": string("Microsoft Teams team identifier.")}, required=["teamId"])

    async def fetch(self, properties: dict[str, Any], team_id: str = "", **params: Any) -> Any:
        return await self.client.query_microsoft_teams_channels(properties, team_id)


LISTING_TOOLS: tuple[type[SourceListingTool], ...] = (
    ListNotionDatabasesTool,
    ListNotionPagesTool,
    ListDropboxFoldersTool,
    ListBoxFoldersTool,
    ListDiscordGuildsTool,
    ListDiscordChannelsTool,
    ListGoogleCalendarsTool,
    ListMicrosoftCalendarsTool,
    ListLinearProjectsTool,
    ListSlackChannelsTool,
    ListSharePointLibrariesTool,
    ListSharePointFoldersTool,
    ListMicrosoftTeamsTeamsTool,
    ListMicrosoftTeamsChannelsTool,
)
