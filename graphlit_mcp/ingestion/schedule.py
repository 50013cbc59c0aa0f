"""Recurring feed schedule policies."""

from __future__ import annotations

from graphlit_mcp.ingestion.types import SchedulePolicy
from graphlit_mcp.utils.duration import MS_PER_MINUTE, parse_duration
from graphlit_mcp.utils.exceptions import ValidationError

DEFAULT_REPEAT_INTERVAL = "PT15M"
MINIMUM_REPEAT_INTERVAL = "PT5M"
_MINIMUM_REPEAT_MS = 5 * MS_PER_MINUTE


def build_schedule_policy(
    recurring: bool | None,
    repeat_interval: str | None = DEFAULT_REPEAT_INTERVAL,
    *,
    enforce_floor: bool = True,
) -> SchedulePolicy | None:
    """
    Return a repeat policy for recurring feeds, or ``None`` for one-shot feeds.

    The interval must parse as a duration and, when ``enforce_floor`` is set,
    be at least five minutes.
    """
    if not recurring:
        return None
    interval = repeat_interval or DEFAULT_REPEAT_INTERVAL
    interval_ms = parse_duration(interval, field="repeatInterval")
    if enforce_floor and interval_ms < _MINIMUM_REPEAT_MS:
        raise ValidationError(
            f"repeatInterval must be at least {MINIMUM_REPEAT_INTERVAL}, got {interval}",
            field="repeatInterval",
        )
    return SchedulePolicy(repeat_interval=interval)
