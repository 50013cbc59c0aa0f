import pytest

from graphlit_mcp.query.filters import (
    build_collection_filter,
    build_content_filter,
    build_conversation_filter,
    build_feed_filter,
    build_point_filter,
    wrap_ids,
)
from graphlit_mcp.remote.enums import SearchTypes
from graphlit_mcp.utils.exceptions import ValidationError


def test_empty_arguments_restrict_nothing() -> None:
    assert build_content_filter() == {}
    assert build_feed_filter() == {}
    assert build_collection_filter() == {}
    assert build_conversation_filter() == {}


def test_wrap_ids() -> None:
    assert wrap_ids(None) is None
    assert wrap_ids([]) == []
    assert wrap_ids(["a", "b"]) == [{"id": "a"}, {"id": "b"}]


def test_content_filter_maps_arguments() -> None:
    result = build_content_filter(
        search_type=SearchTypes.HYBRID,
        search="quarterly report",
        in_last="P7D",
        content_type="FILE",
        file_type="DOCUMENT",
        feeds=["f1"],
        collections=["c1", "c2"],
        limit=10,
    )
    assert result == {
        "search": "quarterly report",
        "searchType": "HYBRID",
        "types": ["FILE"],
        "fileTypes": ["DOCUMENT"],
        "feeds": [{"id": "f1"}],
        "collections": [{"id": "c1"}, {"id": "c2"}],
        "createdInLast": "P7D",
        "limit": 10,
    }


def test_explicit_type_lists_take_precedence() -> None:
    result = build_content_filter(content_type="EMAIL", types=["FILE"], file_types=["IMAGE"])
    assert result["types"] == ["FILE"]
    assert result["fileTypes"] == ["IMAGE"]


def test_invalid_recency_window_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc:
        build_conversation_filter(in_last="last week")
    assert exc.value.details == {"field": "inLast"}


def test_point_filter() -> None:
    assert build_point_filter(None) is None
    assert build_point_filter({"latitude": "47.6", "longitude": -122.3}) == {"latitude": 47.6, "longitude": -122.3}
    assert build_point_filter({"latitude": 0, "longitude": 0, "distance": 500})["distance"] == 500.0


@pytest.mark.parametrize(
    ("location", "field"),
    [
        ({"latitude": 1}, "location"),
        ({"latitude": "north", "longitude": 2}, "location"),
        ({"latitude": 91, "longitude": 0}, "location.latitude"),
        ({"latitude": 0, "longitude": -181}, "location.longitude"),
        ({"latitude": 0, "longitude": 0, "distance": -1}, "location.distance"),
    ],
)
def test_point_filter_rejects_bad_locations(location, field) -> None:
    with pytest.raises(ValidationError) as exc:
        build_point_filter(location)
    assert exc.value.details == {"field": field}


def test_feed_filter_wraps_type() -> None:
    assert build_feed_filter(name="news", feed_type="RSS", limit=5) == {"name": "news", "types": ["RSS"], "limit": 5}
