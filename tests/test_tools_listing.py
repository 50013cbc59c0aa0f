import pytest

from graphlit_mcp.tools import build_registry
from graphlit_mcp.tools.listing import LISTING_TOOLS, SourceListingTool


def test_listing_tools_name_their_credentials() -> None:
    assert len(LISTING_TOOLS) == 14
    assert all(tool.credentials_key for tool in LISTING_TOOLS)


def test_listing_base_requires_properties_and_fetch(make_context) -> None:
    class Incomplete(SourceListingTool):
        name = "listNothing"
        description = "Lists nothing."
        parameters = {"type": "object", "properties": {}}
        credentials_key = "slack"

        def properties(self, creds):
            return {}

    with pytest.raises(TypeError):
        Incomplete(make_context())


@pytest.mark.asyncio
async def test_slack_channels(make_context, fake_client) -> None:
    fake_client.responses["query_slack_channels"] = ["general", "random"]
    registry = build_registry(make_context({"SLACK_BOT_TOKEN": "xoxb"}))
    result = await registry.execute("listSlackChannels", {})
    assert result.payload() == ["general", "random"]
    (args, _), = fake_client.calls_to("query_slack_channels")
    assert args == ({"token": "xoxb"},)


@pytest.mark.asyncio
async def test_discord_channels_include_guild(make_context, fake_client) -> None:
    fake_client.responses["query_discord_channels"] = [{"channelId": "1", "channelName": "general"}]
    registry = build_registry(make_context({"DISCORD_BOT_TOKEN": "bot"}))
    await registry.execute("listDiscordChannels", {"guildId": "g1"})
    (args, _), = fake_client.calls_to("query_discord_channels")
    assert args == ({"token": "bot", "guildId": "g1"},)


@pytest.mark.asyncio
async def test_sharepoint_folders(make_context, fake_client) -> None:
    fake_client.responses["query_sharepoint_folders"] = []
    registry = build_registry(make_context({
        "SHAREPOINT_CLIENT_ID": "id",
        "SHAREPOINT_CLIENT_SECRET": "secret",
        "SHAREPOINT_REFRESH_TOKEN": "refresh",
    }))
    result = await registry.execute("listSharePointFolders", {"libraryId": "lib"})
    assert result.payload() == []
    (args, _), = fake_client.calls_to("query_sharepoint_folders")
    assert args == (
        {"authenticationType": "USER", "clientId": "id", "clientSecret": "secret", "refreshToken": "refresh"},
        "lib",
    )


@pytest.mark.asyncio
async def test_teams_listing_sends_refresh_token_only(make_context, fake_client) -> None:
    registry = build_registry(make_context({
        "MICROSOFT_TEAMS_CLIENT_ID": "id",
        "MICROSOFT_TEAMS_CLIENT_SECRET": "secret",
        "MICROSOFT_TEAMS_REFRESH_TOKEN": "refresh",
    }))
    await registry.execute("listMicrosoftTeamsChannels", {"teamId": "t1"})
    (args, _), = fake_client.calls_to("query_microsoft_teams_channels")
    assert args == ({"refreshToken": "refresh"}, "t1")


@pytest.mark.asyncio
async def test_dropbox_folder_path_is_optional(make_context, fake_client) -> None:
    registry = build_registry(make_context({
        "DROPBOX_APP_KEY": "k",
        "DROPBOX_APP_SECRET": "s",
        "DROPBOX_REFRESH_TOKEN": "r",
    }))
    await registry.execute("listDropboxFolders", {})
    (args, _), = fake_client.calls_to("query_dropbox_folders")
    assert args[1] is None


@pytest.mark.asyncio
async def test_listing_without_credentials(make_context, fake_client) -> None:
    registry = build_registry(make_context())
    result = await registry.execute("listLinearProjects", {})
    assert result.code == "CONFIGURATION_ERROR"
    assert result.text == "Error: Missing credentials for Linear: LINEAR_API_KEY"
    assert fake_client.calls == []
