"""Small builders for the JSON-schema fragments tools declare."""

from __future__ import annotations

from enum import Enum
from typing import Any

from graphlit_mcp.remote.enums import values


def string(description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def integer(description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "integer", "description": description, **extra}


def boolean(description: str, default: bool = False) -> dict[str, Any]:
    return {"type": "boolean", "description": description, "default": default}


def string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def choice(enum_type: type[Enum], description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "string", "enum": values(enum_type), "description": description, **extra}


def obj(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


IN_LAST = string(
    "Recency filter, ISO 8601 duration, e.g. 'PT1H' for last hour, 'P1D' for last day, "
    "'P7D' for last week. Weeks and months are not supported explicitly."
)

FEEDS = string_list("Feed identifiers to filter by, optional.")
COLLECTIONS = string_list("Collection identifiers to filter by, optional.")

LOCATION = obj(
    {
        "latitude": {"type": "number", "minimum": -90, "maximum": 90, "description": "Latitude, -90 to 90."},
        "longitude": {"type": "number", "minimum": -180, "maximum": 180, "description": "Longitude, -180 to 180."},
        "distance": {"type": "number", "minimum": 0, "description": "Distance radius in meters, optional."},
    },
    required=["latitude", "longitude"],
)
LOCATION["description"] = "Geo-location filter by latitude, longitude and optional distance radius."

READ_LIMIT = integer("Number of items to read from the source, optional. Defaults to 100.", minimum=1)

RECURRING = boolean("Whether the feed keeps checking the source for new items. Defaults to false.")

REPEAT_INTERVAL = string(
    "Repeat interval for a recurring feed, ISO 8601 duration. Defaults to PT15M, minimum PT5M.",
    default="PT15M",
)

FEED_OPTIONS = {
    "readLimit": READ_LIMIT,
    "recurring": RECURRING,
    "repeatInterval": REPEAT_INTERVAL,
}
