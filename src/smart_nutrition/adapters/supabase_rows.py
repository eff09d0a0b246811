"""Row conversion helpers shared by Supabase repositories."""

from datetime import UTC, datetime
from uuid import UUID


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO timestamp column, treating naive values as UTC."""
    if not isinstance(raw, str) or not raw:
        return datetime.min.replace(tzinfo=UTC)
    parsed = datetime.fromisoformat(raw)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def parse_optional_float(raw: object) -> float | None:
    """Convert a nullable numeric column."""
    return float(raw) if isinstance(raw, int | float) else None


def parse_optional_uuid(raw: object) -> UUID | None:
    """Convert a nullable uuid column."""
    return UUID(raw) if isinstance(raw, str) and raw else None


def utc_now_iso() -> str:
    """Return the current UTC time as ISO text."""
    return datetime.now(tz=UTC).isoformat()
