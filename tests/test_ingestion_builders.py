"""Tests for per-connector feed request builders."""

import pytest

from graphlit_mcp.ingestion.builders import (
    CONNECTORS,
    DEFAULT_READ_LIMIT,
    RSS_READ_LIMIT,
    build_connector_config,
)
from graphlit_mcp.ingestion.credentials import CredentialResolver, ResolvedCredentials
from graphlit_mcp.ingestion.schedule import build_schedule_policy
from graphlit_mcp.ingestion.types import ConnectorKind, to_feed_input
from graphlit_mcp.utils.exceptions import ValidationError


def _creds(**values: str) -> ResolvedCredentials:
    return ResolvedCredentials("test", "default", values)


def test_every_kind_has_a_connector() -> None:
    assert set(CONNECTORS) == set(ConnectorKind)


def test_slack_channel_feed() -> None:
    config = build_connector_config(
        ConnectorKind.SLACK, {"channel_name": "general"}, _creds(SLACK_BOT_TOKEN="xoxb")
    )
    assert config.name == "Slack [general]"
    assert config.section == "slack"
    assert config.properties == {
        "type": "PAST",
        "channel": "general",
        "token": "xoxb",
        "includeAttachments": True,
        "readLimit": DEFAULT_READ_LIMIT,
    }


def test_rss_uses_its_own_default_limit() -> None:
    config = build_connector_config(ConnectorKind.RSS, {"url": "https://example.com/feed"}, _creds())
    assert config.read_limit == RSS_READ_LIMIT
    assert config.name == "RSS [https://example.com/feed]"


def test_explicit_read_limit_wins() -> None:
    config = build_connector_config(ConnectorKind.RSS, {"url": "https://x", "read_limit": 7}, _creds())
    assert config.read_limit == 7


def test_web_feed_is_named_after_url() -> None:
    config = build_connector_config(ConnectorKind.WEB, {"url": "https://graphlit.com"}, _creds())
    assert config.name == "Web [https://graphlit.com]"
    assert config.properties["uri"] == "https://graphlit.com"


def test_box_defaults_to_root_folder() -> None:
    config = build_connector_config(
        ConnectorKind.BOX,
        {},
        _creds(BOX_CLIENT_ID="i", BOX_CLIENT_SECRET="s", BOX_REDIRECT_URI="r", BOX_REFRESH_TOKEN="t"),
    )
    assert config.properties["type"] == "BOX"
    assert config.properties["box"]["folderId"] == "0"
    assert config.properties["isRecursive"] is True


def test_google_drive_service_account_form() -> None:
    creds = CredentialResolver({"GOOGLE_DRIVE_SERVICE_ACCOUNT_JSON": "{}"}).resolve("google_drive")
    config = build_connector_config(ConnectorKind.GOOGLE_DRIVE, {"folder_id": "f1"}, creds)
    drive = config.properties["googleDrive"]
    assert drive == {"authenticationType": "SERVICE_ACCOUNT", "serviceAccountJson": "{}", "folderId": "f1"}


def test_google_drive_user_form_omits_unset_folder() -> None:
    creds = CredentialResolver({
        "GOOGLE_DRIVE_CLIENT_ID": "cid",
        "GOOGLE_DRIVE_CLIENT_SECRET": "cs",
        "GOOGLE_DRIVE_REFRESH_TOKEN": "rt",
    }).resolve("google_drive")
    drive = build_connector_config(ConnectorKind.GOOGLE_DRIVE, {}, creds).properties["googleDrive"]
    assert drive["authenticationType"] == "USER"
    assert drive["refreshToken"] == "rt"
    assert "folderId" not in drive


def test_github_issues_name_and_payload() -> None:
    config = build_connector_config(
        ConnectorKind.GITHUB_ISSUES,
        {"repository_owner": "graphlit", "repository_name": "mcp"},
        _creds(GITHUB_PERSONAL_ACCESS_TOKEN="ghp"),
    )
    assert config.name == "GitHub [graphlit/mcp]"
    assert config.section == "issue"
    assert config.properties["github"]["personalAccessToken"] == "ghp"


@pytest.mark.parametrize(
    ("kind", "params", "wire_name"),
    [
        (ConnectorKind.SLACK, {}, "channelName"),
        (ConnectorKind.WEB, {"url": "  "}, "url"),
        (ConnectorKind.JIRA, {"project_name": "P"}, "url"),
        (ConnectorKind.GITHUB, {"repository_owner": "o"}, "repositoryName"),
    ],
)
def test_required_parameters(kind, params, wire_name) -> None:
    creds = _creds(SLACK_BOT_TOKEN="t", JIRA_EMAIL="e", JIRA_TOKEN="t", GITHUB_PERSONAL_ACCESS_TOKEN="g")
    with pytest.raises(ValidationError) as exc:
        build_connector_config(kind, params, creds)
    assert exc.value.message == f"{wire_name} is required"


def test_feed_input_with_schedule() -> None:
    config = build_connector_config(ConnectorKind.REDDIT, {"subreddit_name": "python"}, _creds())
    feed = to_feed_input(config, build_schedule_policy(True, "PT1H"))
    assert feed == {
        "name": "Reddit [python]",
        "type": "REDDIT",
        "reddit": {"subredditName": "python", "readLimit": DEFAULT_READ_LIMIT},
        "schedulePolicy": {"recurrenceType": "REPEAT", "repeatInterval": "PT1H"},
    }


def test_feed_input_without_schedule_has_no_policy() -> None:
    config = build_connector_config(ConnectorKind.WEB, {"url": "https://x"}, _creds())
    assert "schedulePolicy" not in to_feed_input(config)
