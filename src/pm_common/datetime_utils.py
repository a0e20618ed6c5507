"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_iso(value: datetime | None) -> str:
    """ISO8601 string for API payloads; empty string when the DB gave no timestamp."""
    if value is None:
        return ""
    if value.tzinfo is None:
        # SQLite returns naive datetimes for CURRENT_TIMESTAMP (always UTC)
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
