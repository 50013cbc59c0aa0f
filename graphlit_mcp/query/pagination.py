"""Offset/limit pagination over remote list queries."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from loguru import logger

USAGE_PAGE_LIMIT = 1000

USAGE_FIELDS = (
    "date",
    "name",
    "metric",
    "credits",
    "count",
    "duration",
    "entityType",
    "entityId",
    "ownerId",
    "workflow",
    "contentType",
    "fileType",
    "uri",
    "modelService",
    "modelName",
    "promptTokens",
    "completionTokens",
    "tokens",
    "operation",
)

FetchPage = Callable[[int, int], Awaitable[list[Any] | None]]


async def collect_pages(
    fetch_page: FetchPage,
    *,
    limit: int = USAGE_PAGE_LIMIT,
    transform: Callable[[Any], Any] | None = None,
    max_pages: int | None = None,
    label: str = "query",
) -> list[Any]:
    """
    Fetch pages sequentially until a page comes back shorter than ``limit``.

    ``fetch_page(offset, limit)`` returns one page. ``None`` records are
    skipped; the rest pass through ``transform``. When ``max_pages`` pages
    have been read the loop stops with a warning even if more remain.
    """
    if limit < 1:
        raise ValueError("limit must be positive")
    results: list[Any] = []
    offset = 0
    pages = 0
    while True:
        batch = await fetch_page(offset, limit) or []
        pages += 1
        for record in batch:
            if record is None:
                continue
            results.append(transform(record) if transform else record)
        if len(batch) < limit:
            break
        if max_pages is not None and pages >= max_pages:
            logger.warning(f"{label}: stopped after {pages} pages ({len(results)} records), more may exist")
            break
        offset += limit
    return results


def clean_usage_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Project a usage record onto the known fields, dropping empty ones."""
    return {
        key: record[key]
        for key in USAGE_FIELDS
        if key in record and record[key] is not None and record[key] != ""
    }
