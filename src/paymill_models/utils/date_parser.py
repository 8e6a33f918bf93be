"""Timestamp parsing utilities."""

from datetime import UTC, datetime
from typing import Any, Optional

from dateutil import parser as date_parser

from paymill_models.domain.entities import NOT_SET


def _from_unix(seconds: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp {seconds!r} out of range: {e}") from e


def to_datetime(value: Any) -> Optional[datetime]:
    """Convert an API timestamp into an aware datetime.

    The API sends Unix timestamps (seconds, as integers or numeric strings);
    ISO 8601 and other textual dates are accepted too. Naive textual dates are
    taken to be UTC.

    Args:
        value: Raw timestamp value

    Returns:
        Datetime in UTC, or None if the value is None or NOT_SET

    Raises:
        ValueError: If the value cannot be parsed
    """
    if value is None or value is NOT_SET:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Could not parse timestamp '{value}'")
    if isinstance(value, (int, float)):
        return _from_unix(value)

    text = str(value).strip()
    if not text:
        raise ValueError("Empty timestamp string")
    if text.lstrip("-").isdigit():
        return _from_unix(int(text))

    try:
        dt = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{text}': {e}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_timestamp(value: Any) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS UTC`` for display."""
    dt = to_datetime(value)
    if dt is None:
        return "-"
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")
