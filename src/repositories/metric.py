"""
Global metrics, CMC100 index, fear and greed and blockchain endpoints.
"""

from datetime import date, datetime

from api.status import ApiResponse
from utils.dates import to_unix

from .base import Repository, convert_params

DEFAULT_QUOTES_HISTORICAL_AUX = (
    "btc_dominance",
    "eth_dominance",
    "active_cryptocurrencies",
    "active_exchanges",
    "active_market_pairs",
    "total_volume_24h",
    "total_volume_24h_reported",
    "altcoin_market_cap",
    "altcoin_volume_24h",
    "altcoin_volume_24h_reported",
)


class MetricRepository(Repository):
    """Market-wide metrics and indices."""

    group = "metric"

    def quotes(self, convert: int | str | list | None = None) -> ApiResponse:
        """
        Get the latest global market metrics.

        Args:
            convert: Quote currencies, as ids or symbols

        Returns:
            ApiResponse with global metrics per quote currency
        """
        return self._get("quotes", convert_params(convert))

    def quotes_history(
        self,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        count: int = 10,
        interval: str = "1d",
        convert: int | str | list | None = None,
        aux: tuple | list = DEFAULT_QUOTES_HISTORICAL_AUX,
    ) -> ApiResponse:
        """
        Get historical global market metrics.

        Args:
            time_start: Start of the time range
            time_end: End of the time range
            count: Number of intervals to return (default: 10)
            interval: Sampling interval (default: "1d")
            convert: Quote currencies, as ids or symbols
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a "quotes" list
        """
        return self._get("quotes_historical", {
            "time_start": to_unix(time_start),
            "time_end": to_unix(time_end),
            **convert_params(convert),
            "count": count,
            "interval": interval,
            "aux": aux,
        })

    def index(self) -> ApiResponse:
        """Get the latest CoinMarketCap 100 Index value and constituents."""
        return self._get("index")

    def index_history(
        self,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        count: int = 5,
        interval: str | None = None,
    ) -> ApiResponse:
        """Get historical CoinMarketCap 100 Index values ("5m", "15m" or "daily")."""
        return self._get("index_historical", {
            "time_start": to_unix(time_start),
            "time_end": to_unix(time_end),
            "count": count,
            "interval": interval,
        })

    def fear_and_greed(self) -> ApiResponse:
        """Get the latest Fear and Greed Index value."""
        return self._get("fear_and_greed")

    def fear_and_greed_history(self, limit: int = 50, offset: int = 1) -> ApiResponse:
        """Get historical Fear and Greed Index values."""
        return self._get("fear_and_greed_historical", {
            "limit": limit,
            "start": offset,
        })

    def stats(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
    ) -> ApiResponse:
        """
        Get the latest blockchain statistics (block time, hash rate, ...).

        Args:
            id: Cryptocurrency id(s)
            slug: Cryptocurrency slug(s)
            symbol: Cryptocurrency symbol(s)

        Returns:
            ApiResponse with statistics keyed by the requested identifiers
        """
        return self._get("blockchain_stats", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
        })
