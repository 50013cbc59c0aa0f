"""Connector kinds and the request shapes handed to the platform."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from graphlit_mcp.remote.enums import FeedTypes, TimedPolicyRecurrenceTypes


class ConnectorKind(str, Enum):
    """Every third-party source a feed can be created for."""
    SHAREPOINT = "sharepoint"
    ONEDRIVE = "onedrive"
    GOOGLE_DRIVE = "google_drive"
    DROPBOX = "dropbox"
    BOX = "box"
    GITHUB = "github"
    NOTION = "notion"
    MICROSOFT_TEAMS = "microsoft_teams"
    SLACK = "slack"
    DISCORD = "discord"
    TWITTER_POSTS = "twitter_posts"
    TWITTER_SEARCH = "twitter_search"
    REDDIT = "reddit"
    GOOGLE_EMAIL = "google_email"
    MICROSOFT_EMAIL = "microsoft_email"
    LINEAR = "linear"
    GITHUB_ISSUES = "github_issues"
    JIRA = "jira"
    GOOGLE_CALENDAR = "google_calendar"
    MICROSOFT_CALENDAR = "microsoft_calendar"
    WEB = "web"
    RSS = "rss"


@dataclass(frozen=True)
class ConnectorConfig:
    """
    A fully built source description for one connector kind.

    ``section`` names the FeedInput key that carries ``properties``
    (``site``, ``slack``, ``email`` ...); ``kind`` is the discriminant.
    """
    kind: ConnectorKind
    name: str
    feed_type: FeedTypes
    section: str
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def read_limit(self) -> int | None:
        return self.properties.get("readLimit")


@dataclass(frozen=True)
class SchedulePolicy:
    repeat_interval: str
    recurrence_type: TimedPolicyRecurrenceTypes = TimedPolicyRecurrenceTypes.REPEAT

    def to_input(self) -> dict[str, str]:
        return {
            "recurrenceType": self.recurrence_type.value,
            "repeatInterval": self.repeat_interval,
        }


def to_feed_input(config: ConnectorConfig, schedule: SchedulePolicy | None = None) -> dict[str, Any]:
    """Assemble the platform's FeedInput for a connector config and optional schedule."""
    feed: dict[str, Any] = {
        "name": config.name,
        "type": config.feed_type.value,
        config.section: dict(config.properties),
    }
    if schedule is not None:
        feed["schedulePolicy"] = schedule.to_input()
    return feed
