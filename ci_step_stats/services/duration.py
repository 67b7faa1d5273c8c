from __future__ import annotations

from datetime import datetime
from typing import Optional

from ci_step_stats.services.exceptions import TimestampParseError


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse an RFC 3339 timestamp; an explicit UTC offset is required."""
    if not isinstance(value, str) or not value.strip():
        raise TimestampParseError(f"Missing timestamp: {value!r}", value=value)

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise TimestampParseError(f"Invalid timestamp: {value!r}", value=value) from exc

    if parsed.tzinfo is None:
        raise TimestampParseError(f"Timestamp has no UTC offset: {value!r}", value=value)
    return parsed


def duration(start: Optional[str], end: Optional[str]) -> float:
    """
    Elapsed seconds between two RFC 3339 timestamps.

    A negative value is returned as-is when end precedes start.

    Raises:
        TimestampParseError: If either timestamp is missing or malformed
    """
    started_at = parse_timestamp(start)
    completed_at = parse_timestamp(end)
    return (completed_at - started_at).total_seconds()
