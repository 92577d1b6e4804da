"""
Shared base for the CoinMarketCap repositories.
"""

from typing import TYPE_CHECKING, Any

from api.client import Client
from api.endpoints import endpoint
from api.status import ApiResponse

if TYPE_CHECKING:
    from coinmarketcap import CoinMarketCapApi


def is_numeric(value: Any) -> bool:
    """True for an int, or a non-empty list/tuple of ints (bools excluded)."""
    if isinstance(value, (list, tuple)):
        return bool(value) and all(is_numeric(item) for item in value)
    return isinstance(value, int) and not isinstance(value, bool)


def convert_params(convert: Any) -> dict[str, Any]:
    """
    Route a convert option to the right query parameter.

    CoinMarketCap ids go to "convert_id", symbols to "convert".
    """
    if is_numeric(convert):
        return {"convert_id": convert}
    return {"convert": convert}


class Repository:
    """
    Groups related endpoints and forwards their parameters to the client.

    Subclasses set ``group`` to their key in the endpoint table.
    """

    group: str = ""

    def __init__(self, api: "CoinMarketCapApi"):
        self._api = api

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def client(self) -> Client:
        """Client of the owning API object, looked up on every call."""
        return self._api.client

    def _get(self, name: str, params: dict[str, Any] | None = None) -> ApiResponse:
        """Request the endpoint registered under ``name`` for this group."""
        return self.client.request(endpoint(self.group, name), params)
