"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """Render a datetime as ISO-8601 with a trailing ``Z``.

    SQLite hands stored datetimes back naive, so both forms are accepted.
    """

    return to_utc(value).replace(tzinfo=None).isoformat() + "Z"


__all__ = ["isoformat_utc", "to_utc", "utcnow"]
