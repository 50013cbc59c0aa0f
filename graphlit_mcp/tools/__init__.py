"""Dispatchable tools and the registry that serves them."""

from graphlit_mcp.tools.base import GraphlitTool, Tool, ToolContext
from graphlit_mcp.tools.collections import (
    AddContentsToCollectionTool,
    CreateCollectionTool,
    RemoveContentsFromCollectionTool,
)
from graphlit_mcp.tools.content import (
    IngestFileTool,
    IngestMemoryTool,
    IngestTextTool,
    IngestUrlTool,
    ScreenshotPageTool,
    WebMapTool,
    WebSearchTool,
)
from graphlit_mcp.tools.conversation import ExtractTextTool, PromptConversationTool, RetrieveSourcesTool
from graphlit_mcp.tools.deletion import (
    DeleteCollectionsTool,
    DeleteCollectionTool,
    DeleteContentsTool,
    DeleteContentTool,
    DeleteConversationsTool,
    DeleteConversationTool,
    DeleteFeedsTool,
    DeleteFeedTool,
)
from graphlit_mcp.tools.feeds import FEED_TOOLS, FeedIngestTool, build_feed_tools
from graphlit_mcp.tools.images import DescribeImageContentTool, DescribeImageUrlTool, RetrieveImagesTool
from graphlit_mcp.tools.listing import LISTING_TOOLS
from graphlit_mcp.tools.notifications import (
    SendEmailNotificationTool,
    SendSlackNotificationTool,
    SendTwitterNotificationTool,
    SendWebHookNotificationTool,
)
from graphlit_mcp.tools.project import AskGraphlitTool, ConfigureProjectTool, QueryProjectUsageTool
from graphlit_mcp.tools.publishing import PublishAudioTool, PublishImageTool
from graphlit_mcp.tools.queries import (
    IsContentDoneTool,
    IsFeedDoneTool,
    QueryCollectionsTool,
    QueryContentsTool,
    QueryConversationsTool,
    QueryFeedsTool,
)
from graphlit_mcp.tools.registry import ToolRegistry
from graphlit_mcp.tools.result import ToolResult, operation_boundary

# registration order is the order tools are listed to clients
TOOL_CLASSES: tuple[type[GraphlitTool], ...] = (
    ConfigureProjectTool,
    QueryProjectUsageTool,
    AskGraphlitTool,
    PromptConversationTool,
    RetrieveSourcesTool,
    RetrieveImagesTool,
    ExtractTextTool,
    CreateCollectionTool,
    AddContentsToCollectionTool,
    RemoveContentsFromCollectionTool,
    DeleteContentTool,
    DeleteConversationTool,
    DeleteCollectionTool,
    DeleteFeedTool,
    DeleteContentsTool,
    DeleteFeedsTool,
    DeleteCollectionsTool,
    DeleteConversationsTool,
    QueryContentsTool,
    QueryCollectionsTool,
    QueryFeedsTool,
    QueryConversationsTool,
    IsContentDoneTool,
    IsFeedDoneTool,
    *LISTING_TOOLS,
    WebMapTool,
    WebSearchTool,
    ScreenshotPageTool,
    IngestUrlTool,
    IngestTextTool,
    IngestMemoryTool,
    IngestFileTool,
    DescribeImageUrlTool,
    DescribeImageContentTool,
    PublishAudioTool,
    PublishImageTool,
    SendWebHookNotificationTool,
    SendSlackNotificationTool,
    SendTwitterNotificationTool,
    SendEmailNotificationTool,
)


def build_registry(context: ToolContext, *, exit_on_missing_credentials: bool | None = None) -> ToolRegistry:
    """Registry holding every tool, bound to one shared context."""
    if exit_on_missing_credentials is None:
        exit_on_missing_credentials = context.settings.exit_on_missing_credentials
    registry = ToolRegistry(exit_on_missing_credentials=exit_on_missing_credentials)
    for tool_class in TOOL_CLASSES:
        registry.register(tool_class(context))
    for tool in build_feed_tools(context):
        registry.register(tool)
    return registry


__all__ = [
    "FEED_TOOLS",
    "FeedIngestTool",
    "GraphlitTool",
    "TOOL_CLASSES",
    "Tool",
    "ToolContext",
    "ToolRegistry",
    "ToolResult",
    "build_registry",
    "operation_boundary",
]
