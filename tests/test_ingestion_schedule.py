import pytest

from graphlit_mcp.ingestion.schedule import DEFAULT_REPEAT_INTERVAL, build_schedule_policy
from graphlit_mcp.utils.exceptions import ValidationError


def test_one_shot_feeds_have_no_schedule() -> None:
    assert build_schedule_policy(False) is None
    assert build_schedule_policy(None, "PT1H") is None


def test_recurring_defaults_to_fifteen_minutes() -> None:
    policy = build_schedule_policy(True, None)
    assert policy is not None
    assert policy.repeat_interval == DEFAULT_REPEAT_INTERVAL == "PT15M"
    assert policy.to_input() == {"recurrenceType": "REPEAT", "repeatInterval": "PT15M"}


def test_floor_is_inclusive() -> None:
    assert build_schedule_policy(True, "PT5M").repeat_interval == "PT5M"


def test_interval_below_floor_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc:
        build_schedule_policy(True, "PT4M")
    assert exc.value.details == {"field": "repeatInterval"}


def test_floor_can_be_disabled() -> None:
    assert build_schedule_policy(True, "PT30S", enforce_floor=False).repeat_interval == "PT30S"


def test_malformed_interval_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc:
        build_schedule_policy(True, "every hour")
    assert exc.value.message == "Invalid ISO 8601 duration: every hour"
