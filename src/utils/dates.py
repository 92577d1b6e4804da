"""
Date helpers for query parameters.

CoinMarketCap accepts Unix epoch seconds or ISO 8601 strings for time
parameters; the client always sends epoch seconds.
"""

from datetime import date, datetime, timezone


def to_unix(value: date | datetime | int | None) -> int | None:
    """
    Convert a date, datetime or epoch into Unix epoch seconds.

    Plain dates are taken at midnight UTC. Naive datetimes are taken as
    local time, like datetime.timestamp().

    Args:
        value: Date, datetime, epoch seconds, or None

    Returns:
        Epoch seconds, or None when value is None
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("Expected a date, datetime or int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(datetime.combine(value, datetime.min.time(), tzinfo=timezone.utc).timestamp())


def from_unix(value: int | None) -> datetime | None:
    """Convert Unix epoch seconds into an aware UTC datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)
