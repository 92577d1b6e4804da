"""
Response envelope handling for the CoinMarketCap API.

Every CoinMarketCap response wraps its payload in an envelope carrying a
status block. Two shapes are seen in practice:

- Flat: ``{"data": <payload>, "status": {...}}`` (v1, v2 and v3 endpoints)
- Nested: ``{"data": {"data": <payload>, "status": {...}}}`` (some v4 DexScan
  endpoints)

A body with neither shape has no status and is treated as malformed.
"""

from dataclasses import dataclass
from typing import Any


def _as_int(value: Any) -> Any:
    """Parse numeric strings (DexScan sends status numbers as text)."""
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return value


@dataclass
class Status:
    """Status block returned with every CoinMarketCap response."""

    timestamp: str | None = None
    error_code: int | None = None
    error_message: str | None = None
    elapsed: int | None = None
    credit_count: int | None = None
    notice: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Status":
        """Build a Status from the wire dictionary, ignoring unknown keys."""
        return cls(
            timestamp=raw.get("timestamp"),
            error_code=_as_int(raw.get("error_code")),
            error_message=raw.get("error_message"),
            elapsed=_as_int(raw.get("elapsed")),
            credit_count=_as_int(raw.get("credit_count")),
            notice=raw.get("notice"),
        )

    @property
    def is_error(self) -> bool:
        """True when the provider reported a positive error code."""
        return isinstance(self.error_code, int) and self.error_code > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the wire dictionary."""
        return {
            "timestamp": self.timestamp,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "elapsed": self.elapsed,
            "credit_count": self.credit_count,
            "notice": self.notice,
        }


@dataclass
class ApiResponse:
    """Payload and status of a single request."""

    data: Any
    status: Status


def unwrap_envelope(body: Any) -> tuple[Any, Status | None]:
    """
    Split a response body into payload and status.

    Decision table:
        body["data"] holds a "status" dict -> nested shape; payload falls
                                              back to body["data"] when the
                                              inner "data" is absent
        body holds a "status" dict         -> flat shape; payload falls back
                                              to the whole body when "data"
                                              is absent
        anything else                      -> (body, None)

    Args:
        body: Parsed JSON body

    Returns:
        Tuple of (payload, status); status is None for a malformed envelope
    """
    if not isinstance(body, dict):
        return body, None

    inner = body.get("data")
    if isinstance(inner, dict) and isinstance(inner.get("status"), dict):
        return inner.get("data", inner), Status.from_dict(inner["status"])

    if isinstance(body.get("status"), dict):
        return body.get("data", body), Status.from_dict(body["status"])

    return body, None
