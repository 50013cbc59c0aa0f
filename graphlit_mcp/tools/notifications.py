"""Notification tools: webhook, Slack, Twitter/X and email."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.remote.enums import IntegrationServiceTypes, TextTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import choice, obj, string, string_list

_TEXT = string("Text to send.")
_TEXT_TYPE = choice(TextTypes, "Text type (PLAIN, MARKDOWN, HTML). Defaults to MARKDOWN.",
                    default=TextTypes.MARKDOWN.value)


class NotificationTool(GraphlitTool):
    """Sends ``text`` through one integration connector; answers ``{success}``."""

    async def send(self, connector: dict[str, Any], text: str, text_type: str) -> ToolResult:
        result = await self.client.send_notification(connector, text, text_type)
        return ToolResult.json({"success": result})


class SendWebHookNotificationTool(NotificationTool):
    name = "sendWebHookNotification"
    description = (
        "Sends a webhook notification to the given URL with the given text. "
        "Returns true if the notification was sent, false otherwise."
    )
    parameters = obj({"url": string("Webhook URL."), "text": _TEXT, "textType": _TEXT_TYPE},
                     required=["url", "text"])

    async def run(self, url: str, text: str, text_type: str = TextTypes.MARKDOWN.value,
                  **kwargs: Any) -> ToolResult:
        return await self.send({"type": IntegrationServiceTypes.WEB_HOOK.value, "uri": url}, text, text_type)


class SendSlackNotificationTool(NotificationTool):
    name = "sendSlackNotification"
    description = (
        "Sends a Slack message to the given channel. In Slack Markdown, images are shown by putting the URL "
        "in angle brackets. Requires SLACK_BOT_TOKEN. Returns true if the notification was sent, false otherwise."
    )
    parameters = obj({"channelName": string("Slack channel name."), "text": _TEXT, "textType": _TEXT_TYPE},
                     required=["channelName", "text"])

    async def run(self, channel_name: str, text: str, text_type: str = TextTypes.MARKDOWN.value,
                  **kwargs: Any) -> ToolResult:
        creds = self.credentials.resolve("slack")
        connector = {
            "type": IntegrationServiceTypes.SLACK.value,
            "slack": {"token": creds["SLACK_BOT_TOKEN"], "channel": channel_name},
        }
        return await self.send(connector, text, text_type)


class SendTwitterNotificationTool(NotificationTool):
    name = "sendTwitterNotification"
    description = (
        "Posts a tweet from the configured Twitter/X account. Plain text only: mentions, hashtags, URLs and "
        "line breaks are allowed, Markdown and HTML are not. Requires TWITTER_CONSUMER_API_KEY, "
        "TWITTER_CONSUMER_API_SECRET, TWITTER_ACCESS_TOKEN_KEY and TWITTER_ACCESS_TOKEN_SECRET. "
        "Returns true if the notification was sent, false otherwise."
    )
    parameters = obj({"text": _TEXT}, required=["text"])

    async def run(self, text: str, **kwargs: Any) -> ToolResult:
        creds = self.credentials.resolve("twitter_notification")
        connector = {
            "type": IntegrationServiceTypes.TWITTER.value,
            "twitter": {
                "consumerKey": creds["TWITTER_CONSUMER_API_KEY"],
                "consumerSecret": creds["TWITTER_CONSUMER_API_SECRET"],
                "accessTokenKey": creds["TWITTER_ACCESS_TOKEN_KEY"],
                "accessTokenSecret": creds["TWITTER_ACCESS_TOKEN_SECRET"],
            },
        }
        return await self.send(connector, text, TextTypes.PLAIN.value)


class SendEmailNotificationTool(NotificationTool):
    name = "sendEmailNotification"
    description = (
        "Sends an email notification to the given address(es), in RFC 5322 format such as "
        "'Alice <alice@example.com>'. Requires FROM_EMAIL_ADDRESS. "
        "Returns true if the notification was sent, false otherwise."
    )
    parameters = obj({
        "subject": string("Email subject."),
        "to": string_list("Email address(es) to send the notification to."),
        "text": _TEXT,
        "textType": _TEXT_TYPE,
    }, required=["subject", "to", "text"])

    async def run(self, subject: str, to: list[str], text: str, text_type: str = TextTypes.MARKDOWN.value,
                  **kwargs: Any) -> ToolResult:
        creds = self.credentials.resolve("email_notification")
        connector = {
            "type": IntegrationServiceTypes.EMAIL.value,
            "email": {"subject": subject, "from": creds["FROM_EMAIL_ADDRESS"], "to": list(to)},
        }
        return await self.send(connector, text, text_type)
