"""
Framework-agnostic date/time helpers.

MongoDB hands back naive datetimes unless the client is tz-aware, so every
comparison against "now" goes through ensure_utc().
"""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime; naive values are assumed to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_expired(expires_at: datetime, now: datetime | None = None) -> bool:
    """Return True once *now* has reached *expires_at*."""
    now = now or utcnow()
    return ensure_utc(expires_at) <= ensure_utc(now)
