"""Query helpers: filter construction and pagination."""

from graphlit_mcp.query.filters import (
    build_collection_filter,
    build_content_filter,
    build_conversation_filter,
    build_feed_filter,
    build_point_filter,
    wrap_ids,
)
from graphlit_mcp.query.pagination import USAGE_FIELDS, USAGE_PAGE_LIMIT, clean_usage_record, collect_pages

__all__ = [
    "build_content_filter",
    "build_feed_filter",
    "build_collection_filter",
    "build_conversation_filter",
    "build_point_filter",
    "wrap_ids",
    "collect_pages",
    "clean_usage_record",
    "USAGE_FIELDS",
    "USAGE_PAGE_LIMIT",
]
