"""
HTTP client for the CoinMarketCap Pro API.

Provides:
- Query serialization (list joining, omission of empty values)
- A single GET pipeline with envelope unwrapping
- Mapping of provider error codes to typed exceptions
- Switching between the production and sandbox hosts
"""

from collections.abc import Callable, Mapping
from importlib.metadata import PackageNotFoundError, version
from typing import Any

import requests

from config import (
    API_KEY_HEADER,
    CMC_PRO_BASE_URL,
    CMC_SANDBOX_API_KEY,
    CMC_SANDBOX_BASE_URL,
    LIST_SEPARATOR,
    OMITTED_QUERY_STRINGS,
    REQUEST_TIMEOUT,
    USER_AGENT_NAME,
)
from utils.logging import get_logger

from .errors import RequestError, error_for_status
from .status import ApiResponse, Status, unwrap_envelope

logger = get_logger(__name__)

ErrorCallback = Callable[[str, Any], None]


def get_version() -> str:
    """Get package version for User-Agent."""
    try:
        return version(USER_AGENT_NAME)
    except PackageNotFoundError:
        return "dev"


def _is_omitted(value: Any) -> bool:
    """True for values that must not reach the query string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value in OMITTED_QUERY_STRINGS
    if isinstance(value, (list, tuple)):
        return all(_is_omitted(item) for item in value)
    return False


def _to_query_value(value: Any) -> str:
    """Render a scalar the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """
    Serialize request parameters into query pairs.

    Keys keep their mapping order. None, empty strings, the strings
    "undefined"/"null" and empty lists are omitted; 0 and False are kept.
    List items follow the same rule; the kept items are comma-joined into
    a single value, and a list with none left is omitted.

    Args:
        params: Parameter mapping (may be None)

    Returns:
        List of (key, value) string pairs
    """
    query: list[tuple[str, str]] = []
    if not params:
        return query

    for key, value in params.items():
        if _is_omitted(value):
            continue
        if isinstance(value, (list, tuple)):
            joined = LIST_SEPARATOR.join(
                _to_query_value(item) for item in value if not _is_omitted(item)
            )
            query.append((key, joined))
        else:
            query.append((key, _to_query_value(value)))

    return query


def build_url(
    base_url: str,
    path: str,
    params: Mapping[str, Any] | None = None,
) -> str:
    """
    Build the full request URL.

    Args:
        base_url: API host (trailing slash ignored)
        path: Endpoint path (e.g., "/v1/fiat/map")
        params: Query parameters

    Returns:
        Fully qualified URL with encoded query string
    """
    request = requests.Request(
        "GET",
        f"{base_url.rstrip('/')}{path}",
        params=build_query(params),
    )
    return request.prepare().url


class Client:
    """
    CoinMarketCap API client.

    Each call returns its own status alongside the payload, so concurrent
    callers sharing one client never see each other's status.

    Usage:
        client = Client(api_key="...")
        fiats = client.send("/v1/fiat/map", {"limit": 10})
        response = client.request("/v1/key/info")
        print(response.status.credit_count)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = CMC_PRO_BASE_URL,
        on_error: ErrorCallback | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            api_key: CoinMarketCap API key
            base_url: API host (default: production)
            on_error: Called with (url, body) before an error is raised
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.on_error = on_error
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"{USER_AGENT_NAME}/{get_version()}",
        })

    def set_api_key(self, api_key: str) -> "Client":
        """Set the API key used for subsequent requests."""
        self.api_key = api_key
        return self

    def set_base_url(self, base_url: str) -> "Client":
        """Set the API host used for subsequent requests."""
        self.base_url = base_url
        return self

    def set_on_error(self, on_error: ErrorCallback | None) -> "Client":
        """Register (or clear with None) the error callback."""
        self.on_error = on_error
        return self

    def sandbox(self) -> "Client":
        """Point the client at the sandbox host with the shared sandbox key."""
        self.api_key = CMC_SANDBOX_API_KEY
        self.base_url = CMC_SANDBOX_BASE_URL
        return self

    @property
    def is_sandbox(self) -> bool:
        return self.base_url == CMC_SANDBOX_BASE_URL

    def build_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """Per-request headers: API key plus caller-supplied headers."""
        result: dict[str, str] = {}
        if self.api_key is not None:
            result[API_KEY_HEADER] = self.api_key
        if headers:
            result.update(headers)
        return result

    def request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """
        Send a GET request and unwrap the response envelope.

        Args:
            path: Endpoint path (e.g., "/v1/cryptocurrency/map")
            params: Query parameters
            headers: Extra HTTP headers

        Returns:
            ApiResponse with the unwrapped payload and its status

        Raises:
            CoinMarketCapError: Subclass matching the provider error code
            RequestError: When the response carries no status block
        """
        url = build_url(self.base_url, path, params)
        logger.debug("GET %s", url)

        response = self.session.get(
            url,
            headers=self.build_headers(headers),
            timeout=self.timeout,
        )
        body = response.json()

        data, status = unwrap_envelope(body)

        if (status is None or status.is_error) and self.on_error is not None:
            self.on_error(url, body)

        if status is None:
            logger.warning("Response from %s has no status block", path)
            raise RequestError(
                Status(error_message=f"Malformed response envelope from {path}"),
                body,
            )

        if status.is_error:
            logger.warning(
                "CoinMarketCap error %s on %s: %s",
                status.error_code,
                path,
                status.error_message,
            )
            raise error_for_status(status, data)

        logger.debug("%s used %s credit(s)", path, status.credit_count)
        return ApiResponse(data=data, status=status)

    def send(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Send a GET request and return only the unwrapped payload.

        See request() for arguments and raised exceptions.
        """
        return self.request(path, params, headers).data
