"""ISO-8601 duration helpers (day/hour/minute/second subset)."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from graphlit_mcp.utils.exceptions import ValidationError

_DIGITS = r"([0-9]{1,15})"
_DURATION_RE = re.compile(
    rf"^P(?:{_DIGITS}D)?(?:T(?:{_DIGITS}H)?(?:{_DIGITS}M)?(?:{_DIGITS}S)?)?$"
)

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def parse_duration(value: str, field: str | None = None) -> int:
    """
    Convert a duration string such as ``P1DT2H30M`` into milliseconds.

    Only days, hours, minutes and whole seconds are understood. ``P`` and ``PT``
    on their own are accepted and mean zero. Each component is at most
    15 ASCII digits.

    Raises:
        ValidationError: if the string does not match the supported grammar.
    """
    match = _DURATION_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValidationError(f"Invalid ISO 8601 duration: {value}", field=field)
    days, hours, minutes, seconds = (int(group) if group else 0 for group in match.groups())
    return days * MS_PER_DAY + hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND


def duration_seconds(value: str, field: str | None = None) -> float:
    return parse_duration(value, field=field) / MS_PER_SECOND


def recency_cutoff(value: str, now: datetime | None = None, field: str | None = None) -> datetime:
    """Return the UTC instant ``now - duration``."""
    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    try:
        return reference - timedelta(milliseconds=parse_duration(value, field=field))
    except OverflowError as e:
        label = field or "Duration"
        raise ValidationError(f"{label} reaches past the earliest supported date: {value}", field=field) from e


def format_timestamp(moment: datetime) -> str:
    """Render a datetime the way the platform's DateTime scalar expects it."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
