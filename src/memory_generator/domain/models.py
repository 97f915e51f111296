"""Shared domain helpers."""

from datetime import UTC, datetime


def utc_timestamp(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision."""
    value = (moment or datetime.now(tz=UTC)).astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
