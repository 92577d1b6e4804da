"""
Centralized exchange endpoints.
"""

from __future__ import annotations

from datetime import date, datetime

from api.status import ApiResponse
from utils.dates import to_unix

from .base import Repository, convert_params


class CexRepository(Repository):
    """
    Centralized exchange listings, metadata, quotes and market pairs.

    Exchanges are identified by ``id`` or ``slug``; pass one of them.
    """

    group = "cex"

    def list(
        self,
        listing_status: str | list[str] = "active",
        slug: str | list[str] | None = None,
        crypto_id: int | None = None,
        limit: int | None = None,
        offset: int = 1,
        sort: str = "id",
        aux: tuple | list = ("first_historical_data", "last_historical_data", "is_active"),
    ) -> ApiResponse:
        """
        Map exchanges to unique CoinMarketCap ids.

        Args:
            listing_status: "active", "inactive", "untracked" or a list
            slug: Only return these exchange slugs
            crypto_id: Only return exchanges listing this cryptocurrency
            limit: Number of results to return
            offset: 1-based start of the page (default: 1)
            sort: "id" or "volume_24h" (default: "id")
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of exchanges
        """
        return self._get("map", {
            "slug": slug,
            "crypto_id": crypto_id,
            "listing_status": listing_status,
            "start": offset,
            "limit": limit,
            "sort": sort,
            "aux": aux,
        })

    def metadata(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        aux: tuple | list = ("urls", "logo", "description", "date_launched", "notice"),
    ) -> ApiResponse:
        """Get static metadata for one or more exchanges."""
        return self._get("metadata", {
            "id": id,
            "slug": slug,
            "aux": aux,
        })

    def assets(self, id: int) -> ApiResponse:
        """Get the token holdings of an exchange wallet."""
        return self._get("assets", {"id": id})

    def listing(
        self,
        limit: int = 100,
        offset: int = 1,
        category: str = "all",
        market_type: str = "all",
        sort: str = "volume_24h",
        sort_dir: str | None = None,
        convert: int | str | list | None = None,
        aux: tuple | list = (
            "num_market_pairs",
            "traffic_score",
            "rank",
            "exchange_score",
            "effective_liquidity_24h",
        ),
    ) -> ApiResponse:
        """
        Get a paginated list of exchanges with the latest market data.

        Args:
            limit: Number of results (default: 100)
            offset: 1-based start of the page (default: 1)
            category: "all", "spot", "derivatives", "dex" or "lending"
            market_type: "fees", "no_fees" or "all"
            sort: "name", "volume_24h", "volume_24h_adjusted" or "exchange_score"
            sort_dir: "asc" or "desc"
            convert: Quote currencies, as ids or symbols
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of exchanges
        """
        return self._get("listings", {
            "limit": limit,
            "start": offset,
            "market_type": market_type,
            "sort": sort,
            "sort_dir": sort_dir,
            "category": category,
            "aux": aux,
            **convert_params(convert),
        })

    def market_pairs(
        self,
        id: int | None = None,
        slug: str | None = None,
        limit: int = 100,
        offset: int = 1,
        matched_id: int | list[int] | None = None,
        matched_symbol: str | list[str] | None = None,
        category: str = "all",
        fee_type: str = "all",
        convert: int | str | list | None = None,
        aux: tuple | list = ("num_market_pairs", "category", "fee_type"),
    ) -> ApiResponse:
        """Get the active market pairs of an exchange."""
        return self._get("pairs", {
            "id": id,
            "slug": slug,
            "matched_id": matched_id,
            "matched_symbol": matched_symbol,
            **convert_params(convert),
            "limit": limit,
            "start": offset,
            "category": category,
            "fee_type": fee_type,
            "aux": aux,
        })

    def quotes(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        convert: int | str | list | None = None,
        aux: tuple | list = (
            "num_market_pairs",
            "traffic_score",
            "rank",
            "exchange_score",
            "liquidity_score",
            "effective_liquidity_24h",
        ),
    ) -> ApiResponse:
        """Get the latest aggregate market data for one or more exchanges."""
        return self._get("quotes", {
            "id": id,
            "slug": slug,
            **convert_params(convert),
            "aux": aux,
        })

    def quotes_history(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        count: int = 10,
        interval: str = "5m",
        convert: int | str | list | None = None,
    ) -> ApiResponse:
        """
        Get historical volume quotes for one or more exchanges.

        Args:
            id: Exchange id(s)
            slug: Exchange slug(s)
            time_start: Start of the time range
            time_end: End of the time range
            count: Number of intervals to return (default: 10)
            interval: Sampling interval (default: "5m")
            convert: Quote currencies, as ids or symbols

        Returns:
            ApiResponse with historical quotes per exchange
        """
        return self._get("quotes_historical", {
            "id": id,
            "slug": slug,
            "time_start": to_unix(time_start),
            "time_end": to_unix(time_end),
            **convert_params(convert),
            "count": count,
            "interval": interval,
        })
