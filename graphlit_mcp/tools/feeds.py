"""Feed ingestion tools: one tool per connector kind, one shared dispatch path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from graphlit_mcp.ingestion.builders import CONNECTORS, build_connector_config
from graphlit_mcp.ingestion.schedule import build_schedule_policy
from graphlit_mcp.ingestion.types import ConnectorKind, to_feed_input
from graphlit_mcp.tools.base import GraphlitTool, ToolContext
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import FEED_OPTIONS, obj, string

_ASYNC_NOTE = (
    "Executes asynchronously and returns the feed identifier; use isFeedDone to check completion. "
    "Set recurring to keep checking the source for new items every repeatInterval."
)


@dataclass(frozen=True)
class FeedToolSpec:
    kind: ConnectorKind
    name: str
    summary: str
    properties: dict[str, Any] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    @property
    def description(self) -> str:
        return f"{self.summary} {_ASYNC_NOTE}"

    @property
    def parameters(self) -> dict[str, Any]:
        return obj({**self.properties, **FEED_OPTIONS}, required=list(self.required))


_OWNER = string("GitHub repository owner.")
_REPOSITORY = string("GitHub repository name.")
_CALENDAR = string("Calendar identifier, optional. Defaults to the primary calendar.")

FEED_TOOLS: tuple[FeedToolSpec, ...] = (
    FeedToolSpec(
        ConnectorKind.SHAREPOINT, "ingestSharePointFiles",
        "Ingests files from a SharePoint document library into the Graphlit knowledge base. "
        "Requires SHAREPOINT_ACCOUNT_NAME, SHAREPOINT_CLIENT_ID, SHAREPOINT_CLIENT_SECRET and "
        "SHAREPOINT_REFRESH_TOKEN.",
        {
            "libraryId": string("SharePoint library identifier."),
            "folderId": string("SharePoint folder identifier, optional."),
        },
        ("libraryId",),
    ),
    FeedToolSpec(
        ConnectorKind.ONEDRIVE, "ingestOneDriveFiles",
        "Ingests files from OneDrive into the Graphlit knowledge base. Requires ONEDRIVE_CLIENT_ID, "
        "ONEDRIVE_CLIENT_SECRET and ONEDRIVE_REFRESH_TOKEN.",
        {"folderId": string("OneDrive folder identifier, optional.")},
    ),
    FeedToolSpec(
        ConnectorKind.GOOGLE_DRIVE, "ingestGoogleDriveFiles",
        "Ingests files from Google Drive into the Graphlit knowledge base. Requires "
        "GOOGLE_DRIVE_SERVICE_ACCOUNT_JSON, or GOOGLE_DRIVE_CLIENT_ID, GOOGLE_DRIVE_CLIENT_SECRET and "
        "GOOGLE_DRIVE_REFRESH_TOKEN.",
        {"folderId": string("Google Drive folder identifier, optional.")},
    ),
    FeedToolSpec(
        ConnectorKind.DROPBOX, "ingestDropboxFiles",
        "Ingests files from Dropbox into the Graphlit knowledge base. Requires DROPBOX_APP_KEY, "
        "DROPBOX_APP_SECRET and DROPBOX_REFRESH_TOKEN.",
        {"path": string("Dropbox folder path, optional.")},
    ),
    FeedToolSpec(
        ConnectorKind.BOX, "ingestBoxFiles",
        "Ingests files from Box into the Graphlit knowledge base. Requires BOX_CLIENT_ID, "
        "BOX_CLIENT_SECRET, BOX_REDIRECT_URI and BOX_REFRESH_TOKEN.",
        {"folderId": string("Box folder identifier. Defaults to the root folder '0'.", default="0")},
    ),
    FeedToolSpec(
        ConnectorKind.GITHUB, "ingestGitHubFiles",
        "Ingests files from a GitHub repository into the Graphlit knowledge base. "
        "Requires GITHUB_PERSONAL_ACCESS_TOKEN.",
        {"repositoryOwner": _OWNER, "repositoryName": _REPOSITORY},
        ("repositoryOwner", "repositoryName"),
    ),
    FeedToolSpec(
        ConnectorKind.NOTION, "ingestNotionPages",
        "Ingests pages from a Notion database into the Graphlit knowledge base. Requires NOTION_API_KEY.",
        {"databaseId": string("Notion database identifier.")},
        ("databaseId",),
    ),
    FeedToolSpec(
        ConnectorKind.MICROSOFT_TEAMS, "ingestMicrosoftTeamsMessages",
        "Ingests messages from a Microsoft Teams channel into the Graphlit knowledge base. Requires "
        "MICROSOFT_TEAMS_CLIENT_ID, MICROSOFT_TEAMS_CLIENT_SECRET and MICROSOFT_TEAMS_REFRESH_TOKEN.",
        {
            "teamId": string("Microsoft Teams team identifier."),
            "channelId": string("Microsoft Teams channel identifier."),
        },
        ("teamId", "channelId"),
    ),
    FeedToolSpec(
        ConnectorKind.SLACK, "ingestSlackMessages",
        "Ingests messages from a Slack channel into the Graphlit knowledge base. Requires SLACK_BOT_TOKEN.",
        {"channelName": string("Slack channel name.")},
        ("channelName",),
    ),
    FeedToolSpec(
        ConnectorKind.DISCORD, "ingestDiscordMessages",
        "Ingests messages from a Discord channel into the Graphlit knowledge base. Requires DISCORD_BOT_TOKEN.",
        {"channelName": string("Discord channel name.")},
        ("channelName",),
    ),
    FeedToolSpec(
        ConnectorKind.TWITTER_POSTS, "ingestTwitterPosts",
        "Ingests recent posts by a Twitter/X user into the Graphlit knowledge base. Requires TWITTER_TOKEN.",
        {"userName": string("Twitter/X user name, without the leading @.")},
        ("userName",),
    ),
    FeedToolSpec(
        ConnectorKind.TWITTER_SEARCH, "ingestTwitterSearch",
        "Ingests recent Twitter/X posts matching a search query into the Graphlit knowledge base. "
        "Requires TWITTER_TOKEN.",
        {"query": string("Twitter/X search query.")},
        ("query",),
    ),
    FeedToolSpec(
        ConnectorKind.REDDIT, "ingestRedditPosts",
        "Ingests posts from a Reddit subreddit into the Graphlit knowledge base.",
        {"subredditName": string("Subreddit name.")},
        ("subredditName",),
    ),
    FeedToolSpec(
        ConnectorKind.GOOGLE_EMAIL, "ingestGoogleEmail",
        "Ingests emails from a Google Email account into the Graphlit knowledge base. Requires "
        "GOOGLE_EMAIL_CLIENT_ID, GOOGLE_EMAIL_CLIENT_SECRET and GOOGLE_EMAIL_REFRESH_TOKEN.",
    ),
    FeedToolSpec(
        ConnectorKind.MICROSOFT_EMAIL, "ingestMicrosoftEmail",
        "Ingests emails from a Microsoft Email account into the Graphlit knowledge base. Requires "
        "MICROSOFT_EMAIL_CLIENT_ID, MICROSOFT_EMAIL_CLIENT_SECRET and MICROSOFT_EMAIL_REFRESH_TOKEN.",
    ),
    FeedToolSpec(
        ConnectorKind.LINEAR, "ingestLinearIssues",
        "Ingests issues from a Linear project into the Graphlit knowledge base. Requires LINEAR_API_KEY.",
        {"projectName": string("Linear project name.")},
        ("projectName",),
    ),
    FeedToolSpec(
        ConnectorKind.GITHUB_ISSUES, "ingestGitHubIssues",
        "Ingests issues from a GitHub repository into the Graphlit knowledge base. "
        "Requires GITHUB_PERSONAL_ACCESS_TOKEN.",
        {"repositoryOwner": _OWNER, "repositoryName": _REPOSITORY},
        ("repositoryOwner", "repositoryName"),
    ),
    FeedToolSpec(
        ConnectorKind.JIRA, "ingestJiraIssues",
        "Ingests issues from an Atlassian Jira project into the Graphlit knowledge base. "
        "Requires JIRA_EMAIL and JIRA_TOKEN.",
        {
            "url": string("Atlassian Jira server URL."),
            "projectName": string("Atlassian Jira project name."),
        },
        ("url", "projectName"),
    ),
    FeedToolSpec(
        ConnectorKind.GOOGLE_CALENDAR, "ingestGoogleCalendarEvents",
        "Ingests events from a Google calendar into the Graphlit knowledge base. Requires "
        "GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and GOOGLE_REFRESH_TOKEN.",
        {"calendarId": _CALENDAR},
    ),
    FeedToolSpec(
        ConnectorKind.MICROSOFT_CALENDAR, "ingestMicrosoftCalendarEvents",
        "Ingests events from a Microsoft calendar into the Graphlit knowledge base. Requires "
        "MICROSOFT_CLIENT_ID, MICROSOFT_CLIENT_SECRET and MICROSOFT_REFRESH_TOKEN.",
        {"calendarId": _CALENDAR},
    ),
    FeedToolSpec(
        ConnectorKind.WEB, "webCrawl",
        "Crawls web pages from a website into the Graphlit knowledge base, following its sitemap "
        "and links.",
        {"url": string("URL of the website to crawl.")},
        ("url",),
    ),
    FeedToolSpec(
        ConnectorKind.RSS, "ingestRSS",
        "Ingests posts from an RSS feed into the Graphlit knowledge base. Reads 25 items by default.",
        {"url": string("URL of the RSS feed.")},
        ("url",),
    ),
)


class FeedIngestTool(GraphlitTool):
    """
    Create a feed for one connector kind.

    Resolves the kind's credentials, builds the connector config and optional
    schedule, and submits the feed. The platform ingests asynchronously; the
    result carries only the feed id.
    """

    def __init__(self, context: ToolContext, spec: FeedToolSpec):
        super().__init__(context)
        self.spec = spec
        self.name = spec.name
        self.description = spec.description
        self.parameters = spec.parameters

    @property
    def kind(self) -> ConnectorKind:
        return self.spec.kind

    async def run(self, recurring: bool = False, repeat_interval: str | None = None,
                  **params: Any) -> ToolResult:
        creds = self.credentials.resolve(CONNECTORS[self.kind].credentials)
        config = build_connector_config(self.kind, params, creds)
        schedule = build_schedule_policy(
            recurring, repeat_interval, enforce_floor=self.settings.enforce_schedule_floor
        )
        response = await self.client.create_feed(to_feed_input(config, schedule))
        feed_id = (response or {}).get("id")
        logger.info(f"Created {self.kind.value} feed {feed_id}" + (" (recurring)" if schedule else ""))
        return ToolResult.json({"id": feed_id})


def build_feed_tools(context: ToolContext) -> list[FeedIngestTool]:
    return [FeedIngestTool(context, spec) for spec in FEED_TOOLS]
