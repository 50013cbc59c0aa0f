"""Filter builders for content, feed, collection and conversation queries.

Absent arguments never produce keys, so an empty call yields a filter that
restricts nothing. Recency windows are validated as durations before they are
forwarded as ``createdInLast``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from graphlit_mcp.remote.enums import SearchTypes
from graphlit_mcp.utils.duration import parse_duration
from graphlit_mcp.utils.exceptions import ValidationError


def wrap_ids(ids: Iterable[str] | None) -> list[dict[str, str]] | None:
    """``["a", "b"]`` -> ``[{"id": "a"}, {"id": "b"}]``; ``None`` stays ``None``."""
    if ids is None:
        return None
    return [{"id": str(entity_id)} for entity_id in ids]


def _one_of(value: Any) -> list[Any] | None:
    return [value] if value is not None else None


def _checked_window(in_last: str | None) -> str | None:
    if in_last is None:
        return None
    parse_duration(in_last, field="inLast")
    return in_last


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def build_point_filter(location: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Validate a geo point (latitude, longitude, optional distance in meters)."""
    if location is None:
        return None
    try:
        latitude = float(location["latitude"])
        longitude = float(location["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError("location requires numeric latitude and longitude", field="location") from e
    if not -90.0 <= latitude <= 90.0:
        raise ValidationError(f"latitude must be between -90 and 90, got {latitude}", field="location.latitude")
    if not -180.0 <= longitude <= 180.0:
        raise ValidationError(
            f"longitude must be between -180 and 180, got {longitude}", field="location.longitude"
        )
    point: dict[str, Any] = {"latitude": latitude, "longitude": longitude}
    distance = location.get("distance")
    if distance is not None:
        if float(distance) < 0:
            raise ValidationError("distance must not be negative", field="location.distance")
        point["distance"] = float(distance)
    return point


def build_content_filter(
    *,
    search_type: SearchTypes | None = None,
    name: str | None = None,
    search: str | None = None,
    in_last: str | None = None,
    content_type: str | None = None,
    file_type: str | None = None,
    types: list[str] | None = None,
    file_types: list[str] | None = None,
    feeds: Iterable[str] | None = None,
    collections: Iterable[str] | None = None,
    location: Mapping[str, Any] | None = None,
    limit: int | None = None,
    image_data: str | None = None,
    image_mime_type: str | None = None,
) -> dict[str, Any]:
    """ContentFilter for queryContents / retrieveSources / deleteAllContents."""
    return _compact({
        "name": name,
        "search": search,
        "searchType": search_type.value if search_type is not None else None,
        "types": types if types is not None else _one_of(content_type),
        "fileTypes": file_types if file_types is not None else _one_of(file_type),
        "feeds": wrap_ids(feeds),
        "collections": wrap_ids(collections),
        "location": build_point_filter(location),
        "createdInLast": _checked_window(in_last),
        "limit": limit,
        "imageData": image_data,
        "imageMimeType": image_mime_type,
    })


def build_feed_filter(*, name: str | None = None, feed_type: str | None = None,
                      limit: int | None = None) -> dict[str, Any]:
    return _compact({"name": name, "types": _one_of(feed_type), "limit": limit})


def build_collection_filter(*, name: str | None = None, limit: int | None = None) -> dict[str, Any]:
    return _compact({"name": name, "limit": limit})


def build_conversation_filter(
    *,
    search: str | None = None,
    search_type: SearchTypes | None = None,
    in_last: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    return _compact({
        "search": search,
        "searchType": search_type.value if search_type is not None else None,
        "createdInLast": _checked_window(in_last),
        "limit": limit,
    })
