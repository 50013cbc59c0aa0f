"""Per-connector feed request builders.

Every builder is a pure function of the caller's (snake_case) parameters and
the resolved credentials. ``CONNECTORS`` ties each kind to its builder, its
credential requirement and its default read limit.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from graphlit_mcp.ingestion.credentials import ResolvedCredentials
from graphlit_mcp.ingestion.types import ConnectorConfig, ConnectorKind
from graphlit_mcp.remote.enums import (
    FeedListingTypes,
    FeedServiceTypes,
    FeedTypes,
    GoogleDriveAuthenticationTypes,
    NotionTypes,
    SharePointAuthenticationTypes,
    TwitterListingTypes,
)
from graphlit_mcp.utils.exceptions import ValidationError

DEFAULT_READ_LIMIT = 100
RSS_READ_LIMIT = 25

Params = Mapping[str, Any]
Builder = Callable[[Params, ResolvedCredentials], ConnectorConfig]


def _read_limit(params: Params, default: int = DEFAULT_READ_LIMIT) -> int:
    return params.get("read_limit") or default


def _required(params: Params, key: str, wire_name: str) -> Any:
    value = params.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{wire_name} is required", field=wire_name)
    return value


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def _site(kind: ConnectorKind, name: str, service: FeedServiceTypes, key: str,
          service_props: dict[str, Any], params: Params) -> ConnectorConfig:
    return ConnectorConfig(
        kind=kind,
        name=name,
        feed_type=FeedTypes.SITE,
        section="site",
        properties={
            "type": service.value,
            key: _compact(service_props),
            "isRecursive": True,
            "readLimit": _read_limit(params),
        },
    )


# Cloud storage


def build_sharepoint(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _site(ConnectorKind.SHAREPOINT, "SharePoint", FeedServiceTypes.SHARE_POINT, "sharePoint", {
        "authenticationType": SharePointAuthenticationTypes.USER.value,
        "accountName": creds["SHAREPOINT_ACCOUNT_NAME"],
        "clientId": creds["SHAREPOINT_CLIENT_ID"],
        "clientSecret": creds["SHAREPOINT_CLIENT_SECRET"],
        "refreshToken": creds["SHAREPOINT_REFRESH_TOKEN"],
        "libraryId": _required(params, "library_id", "libraryId"),
        "folderId": params.get("folder_id"),
    }, params)


def build_onedrive(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _site(ConnectorKind.ONEDRIVE, "OneDrive", FeedServiceTypes.ONE_DRIVE, "oneDrive", {
        "folderId": params.get("folder_id"),
        "clientId": creds["ONEDRIVE_CLIENT_ID"],
        "clientSecret": creds["ONEDRIVE_CLIENT_SECRET"],
        "refreshToken": creds["ONEDRIVE_REFRESH_TOKEN"],
    }, params)


def build_google_drive(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    if creds.form == "service_account":
        auth: dict[str, Any] = {
            "authenticationType": GoogleDriveAuthenticationTypes.SERVICE_ACCOUNT.value,
            "serviceAccountJson": creds["GOOGLE_DRIVE_SERVICE_ACCOUNT_JSON"],
        }
    else:
        auth = {
            "authenticationType": GoogleDriveAuthenticationTypes.USER.value,
            "clientId": creds["GOOGLE_DRIVE_CLIENT_ID"],
            "clientSecret": creds["GOOGLE_DRIVE_CLIENT_SECRET"],
            "refreshToken": creds["GOOGLE_DRIVE_REFRESH_TOKEN"],
        }
    return _site(ConnectorKind.GOOGLE_DRIVE, "Google Drive", FeedServiceTypes.GOOGLE_DRIVE, "googleDrive", {
        **auth,
        "folderId": params.get("folder_id"),
    }, params)


def build_dropbox(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _site(ConnectorKind.DROPBOX, "Dropbox", FeedServiceTypes.DROPBOX, "dropbox", {
        "path": params.get("path"),
        "appKey": creds["DROPBOX_APP_KEY"],
        "appSecret": creds["DROPBOX_APP_SECRET"],
        "refreshToken": creds["DROPBOX_REFRESH_TOKEN"],
    }, params)


def build_box(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _site(ConnectorKind.BOX, "Box", FeedServiceTypes.BOX, "box", {
        "folderId": params.get("folder_id") or "0",
        "clientId": creds["BOX_CLIENT_ID"],
        "clientSecret": creds["BOX_CLIENT_SECRET"],
        "redirectUri": creds["BOX_REDIRECT_URI"],
        "refreshToken": creds["BOX_REFRESH_TOKEN"],
    }, params)


def build_github(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _site(ConnectorKind.GITHUB, "GitHub", FeedServiceTypes.GIT_HUB, "github", {
        "repositoryOwner": _required(params, "repository_owner", "repositoryOwner"),
        "repositoryName": _required(params, "repository_name", "repositoryName"),
        "personalAccessToken": creds["GITHUB_PERSONAL_ACCESS_TOKEN"],
    }, params)


def build_notion(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return ConnectorConfig(
        kind=ConnectorKind.NOTION,
        name="Notion",
        feed_type=FeedTypes.NOTION,
        section="notion",
        properties={
            "type": NotionTypes.DATABASE.value,
            "identifiers": [_required(params, "database_id", "databaseId")],
            "token": creds["NOTION_API_KEY"],
            "readLimit": _read_limit(params),
        },
    )


# Messaging


def build_microsoft_teams(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    team_id = _required(params, "team_id", "teamId")
    channel_id = _required(params, "channel_id", "channelId")
    return ConnectorConfig(
        kind=ConnectorKind.MICROSOFT_TEAMS,
        name=f"Microsoft Teams [{team_id}/{channel_id}]",
        feed_type=FeedTypes.MICROSOFT_TEAMS,
        section="microsoftTeams",
        properties={
            "type": FeedListingTypes.PAST.value,
            "clientId": creds["MICROSOFT_TEAMS_CLIENT_ID"],
            "clientSecret": creds["MICROSOFT_TEAMS_CLIENT_SECRET"],
            "refreshToken": creds["MICROSOFT_TEAMS_REFRESH_TOKEN"],
            "teamId": team_id,
            "channelId": channel_id,
            "readLimit": _read_limit(params),
        },
    )


def _channel_feed(kind: ConnectorKind, label: str, feed_type: FeedTypes, section: str,
                  token: str, params: Params) -> ConnectorConfig:
    channel = _required(params, "channel_name", "channelName")
    return ConnectorConfig(
        kind=kind,
        name=f"{label} [{channel}]",
        feed_type=feed_type,
        section=section,
        properties={
            "type": FeedListingTypes.PAST.value,
            "channel": channel,
            "token": token,
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_slack(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _channel_feed(ConnectorKind.SLACK, "Slack", FeedTypes.SLACK, "slack", creds["SLACK_BOT_TOKEN"], params)


def build_discord(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _channel_feed(
        ConnectorKind.DISCORD, "Discord", FeedTypes.DISCORD, "discord", creds["DISCORD_BOT_TOKEN"], params
    )


def build_twitter_posts(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    user_name = _required(params, "user_name", "userName")
    return ConnectorConfig(
        kind=ConnectorKind.TWITTER_POSTS,
        name=f"Twitter [{user_name}]",
        feed_type=FeedTypes.TWITTER,
        section="twitter",
        properties={
            "type": TwitterListingTypes.POSTS.value,
            "userName": user_name,
            "token": creds["TWITTER_TOKEN"],
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_twitter_search(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    query = _required(params, "query", "query")
    return ConnectorConfig(
        kind=ConnectorKind.TWITTER_SEARCH,
        name=f"Twitter [{query}]",
        feed_type=FeedTypes.TWITTER,
        section="twitter",
        properties={
            "type": TwitterListingTypes.RECENT_SEARCH.value,
            "query": query,
            "token": creds["TWITTER_TOKEN"],
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_reddit(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    subreddit = _required(params, "subreddit_name", "subredditName")
    return ConnectorConfig(
        kind=ConnectorKind.REDDIT,
        name=f"Reddit [{subreddit}]",
        feed_type=FeedTypes.REDDIT,
        section="reddit",
        properties={"subredditName": subreddit, "readLimit": _read_limit(params)},
    )


# Email and calendars


def _email_feed(kind: ConnectorKind, name: str, service: FeedServiceTypes, key: str,
                prefix: str, creds: ResolvedCredentials, params: Params) -> ConnectorConfig:
    return ConnectorConfig(
        kind=kind,
        name=name,
        feed_type=FeedTypes.EMAIL,
        section="email",
        properties={
            "type": service.value,
            key: {
                "type": FeedListingTypes.PAST.value,
                "refreshToken": creds[f"{prefix}_REFRESH_TOKEN"],
                "clientId": creds[f"{prefix}_CLIENT_ID"],
                "clientSecret": creds[f"{prefix}_CLIENT_SECRET"],
            },
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_google_email(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _email_feed(ConnectorKind.GOOGLE_EMAIL, "Google Email", FeedServiceTypes.GOOGLE_EMAIL,
                       "google", "GOOGLE_EMAIL", creds, params)


def build_microsoft_email(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _email_feed(ConnectorKind.MICROSOFT_EMAIL, "Microsoft Email", FeedServiceTypes.MICROSOFT_EMAIL,
                       "microsoft", "MICROSOFT_EMAIL", creds, params)


def _calendar_feed(kind: ConnectorKind, name: str, service: FeedServiceTypes, key: str,
                   prefix: str, creds: ResolvedCredentials, params: Params) -> ConnectorConfig:
    return ConnectorConfig(
        kind=kind,
        name=name,
        feed_type=FeedTypes.CALENDAR,
        section="calendar",
        properties={
            "type": service.value,
            key: _compact({
                "type": FeedListingTypes.PAST.value,
                "calendarId": params.get("calendar_id"),
                "refreshToken": creds[f"{prefix}_REFRESH_TOKEN"],
                "clientId": creds[f"{prefix}_CLIENT_ID"],
                "clientSecret": creds[f"{prefix}_CLIENT_SECRET"],
            }),
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_google_calendar(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _calendar_feed(ConnectorKind.GOOGLE_CALENDAR, "Google Calendar", FeedServiceTypes.GOOGLE_CALENDAR,
                          "google", "GOOGLE", creds, params)


def build_microsoft_calendar(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    return _calendar_feed(ConnectorKind.MICROSOFT_CALENDAR, "Microsoft Calendar",
                          FeedServiceTypes.MICROSOFT_CALENDAR, "microsoft", "MICROSOFT", creds, params)


# Issue trackers


def _issue_feed(kind: ConnectorKind, name: str, service: FeedServiceTypes, key: str,
                service_props: dict[str, Any], params: Params) -> ConnectorConfig:
    return ConnectorConfig(
        kind=kind,
        name=name,
        feed_type=FeedTypes.ISSUE,
        section="issue",
        properties={
            "type": service.value,
            key: service_props,
            "includeAttachments": True,
            "readLimit": _read_limit(params),
        },
    )


def build_linear(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    project = _required(params, "project_name", "projectName")
    return _issue_feed(ConnectorKind.LINEAR, f"Linear [{project}]", FeedServiceTypes.LINEAR, "linear", {
        "project": project,
        "key": creds["LINEAR_API_KEY"],
    }, params)


def build_github_issues(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    owner = _required(params, "repository_owner", "repositoryOwner")
    repo = _required(params, "repository_name", "repositoryName")
    return _issue_feed(ConnectorKind.GITHUB_ISSUES, f"GitHub [{owner}/{repo}]",
                       FeedServiceTypes.GIT_HUB_ISSUES, "github", {
                           "repositoryName": repo,
                           "repositoryOwner": owner,
                           "personalAccessToken": creds["GITHUB_PERSONAL_ACCESS_TOKEN"],
                       }, params)


def build_jira(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    project = _required(params, "project_name", "projectName")
    return _issue_feed(ConnectorKind.JIRA, f"Jira [{project}]", FeedServiceTypes.ATLASSIAN_JIRA, "jira", {
        "uri": _required(params, "url", "url"),
        "project": project,
        "email": creds["JIRA_EMAIL"],
        "token": creds["JIRA_TOKEN"],
    }, params)


# Public web


def build_web(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    url = _required(params, "url", "url")
    return ConnectorConfig(
        kind=ConnectorKind.WEB,
        name=f"Web [{url}]",
        feed_type=FeedTypes.WEB,
        section="web",
        properties={"uri": url, "readLimit": _read_limit(params)},
    )


def build_rss(params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    url = _required(params, "url", "url")
    return ConnectorConfig(
        kind=ConnectorKind.RSS,
        name=f"RSS [{url}]",
        feed_type=FeedTypes.RSS,
        section="rss",
        properties={"uri": url, "readLimit": _read_limit(params, RSS_READ_LIMIT)},
    )


@dataclass(frozen=True)
class ConnectorDefinition:
    kind: ConnectorKind
    builder: Builder
    credentials: str


CONNECTORS: dict[ConnectorKind, ConnectorDefinition] = {
    definition.kind: definition
    for definition in (
        ConnectorDefinition(ConnectorKind.SHAREPOINT, build_sharepoint, "sharepoint"),
        ConnectorDefinition(ConnectorKind.ONEDRIVE, build_onedrive, "onedrive"),
        ConnectorDefinition(ConnectorKind.GOOGLE_DRIVE, build_google_drive, "google_drive"),
        ConnectorDefinition(ConnectorKind.DROPBOX, build_dropbox, "dropbox"),
        ConnectorDefinition(ConnectorKind.BOX, build_box, "box"),
        ConnectorDefinition(ConnectorKind.GITHUB, build_github, "github"),
        ConnectorDefinition(ConnectorKind.NOTION, build_notion, "notion"),
        ConnectorDefinition(ConnectorKind.MICROSOFT_TEAMS, build_microsoft_teams, "microsoft_teams"),
        ConnectorDefinition(ConnectorKind.SLACK, build_slack, "slack"),
        ConnectorDefinition(ConnectorKind.DISCORD, build_discord, "discord"),
        ConnectorDefinition(ConnectorKind.TWITTER_POSTS, build_twitter_posts, "twitter"),
        ConnectorDefinition(ConnectorKind.TWITTER_SEARCH, build_twitter_search, "twitter"),
        ConnectorDefinition(ConnectorKind.REDDIT, build_reddit, "public"),
        ConnectorDefinition(ConnectorKind.GOOGLE_EMAIL, build_google_email, "google_email"),
        ConnectorDefinition(ConnectorKind.MICROSOFT_EMAIL, build_microsoft_email, "microsoft_email"),
        ConnectorDefinition(ConnectorKind.LINEAR, build_linear, "linear"),
        ConnectorDefinition(ConnectorKind.GITHUB_ISSUES, build_github_issues, "github"),
        ConnectorDefinition(ConnectorKind.JIRA, build_jira, "jira"),
        ConnectorDefinition(ConnectorKind.GOOGLE_CALENDAR, build_google_calendar, "google_calendar"),
        ConnectorDefinition(ConnectorKind.MICROSOFT_CALENDAR, build_microsoft_calendar, "microsoft_calendar"),
        ConnectorDefinition(ConnectorKind.WEB, build_web, "public"),
        ConnectorDefinition(ConnectorKind.RSS, build_rss, "public"),
    )
}


def build_connector_config(kind: ConnectorKind, params: Params, creds: ResolvedCredentials) -> ConnectorConfig:
    """Dispatch to the builder registered for ``kind``."""
    return CONNECTORS[kind].builder(params, creds)
