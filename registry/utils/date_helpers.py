"""
Date utilities for roster dates and Discord timestamp tokens.
"""
from datetime import datetime, timezone

from ..errors import MalformedDate

DAY_SECONDS = 24 * 60 * 60


def parse_date_str(date_str: str) -> int:
    """
    Parse a DD/MM/YYYY roster date.

    Args:
        date_str: Date text such as "01/06/2024"; surrounding whitespace is ignored

    Returns:
        Unix timestamp (seconds) of that date at midnight UTC

    Raises:
        MalformedDate: if the text is not a real calendar date
    """
    parts = [p.strip() for p in (date_str or "").split("/")]
    if len(parts) != 3:
        raise MalformedDate(f"Expected DD/MM/YYYY, got {date_str!r}")

    if not all(p.isascii() and p.isdigit() for p in parts):
        raise MalformedDate(f"Expected DD/MM/YYYY digits, got {date_str!r}")

    try:
        day, month, year = (int(p) for p in parts)
        dt = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError as e:
        raise MalformedDate(f"Invalid date {date_str!r}: {e}") from e

    return int(dt.timestamp())


def format_date_str(timestamp: int) -> str:
    """Convert a Unix timestamp back to DD/MM/YYYY (UTC)"""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%d/%m/%Y")


def date_token(timestamp: int) -> str:
    """Discord date placeholder, rendered by the client in the reader's locale"""
    return f"<t:{timestamp}:D>"


def iso_timestamp(timestamp: int) -> str:
    """UTC ISO 8601 with milliseconds, e.g. 2024-06-01T00:00:00.000Z"""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
