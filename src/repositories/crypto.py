"""
Cryptocurrency endpoints.

Most endpoints accept cryptocurrencies by ``id``, ``slug`` or ``symbol``
(each a single value or a list); pass one of them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pandas as pd

from api.status import ApiResponse
from utils.dates import to_unix
from utils.frames import ohlcv_frame

from .base import Repository, convert_params

# Query names of the range filters accepted by CryptoRepository.listing()
LISTING_FILTERS = (
    "price_min",
    "price_max",
    "market_cap_min",
    "market_cap_max",
    "volume_24h_min",
    "volume_24h_max",
    "circulating_supply_min",
    "circulating_supply_max",
    "percent_change_24h_min",
    "percent_change_24h_max",
)

QUOTES_HISTORICAL_VERSIONS = {
    "v2": "quotes_historical",
    "v3": "quotes_historical_v3",
}


class CryptoRepository(Repository):
    """
    Cryptocurrency listings, metadata, quotes, OHLCV, categories,
    airdrops and trending lists.

    Usage:
        cmc = CoinMarketCapApi(api_key)
        btc = cmc.crypto.quotes(symbol="BTC").data["BTC"][0]
        df = cmc.crypto.ohlcv_history_frame(id=1, count=30)
    """

    group = "crypto"

    def list(
        self,
        listing_status: str | list[str] = "active",
        sort: str = "id",
        limit: int | None = None,
        offset: int | None = None,
        symbol: str | list[str] | None = None,
        aux: tuple | list = ("platform", "first_historical_data", "last_historical_data", "is_active"),
    ) -> ApiResponse:
        """
        Map all cryptocurrencies to unique CoinMarketCap ids.

        Args:
            listing_status: "active", "inactive", "untracked" or a list
            sort: "id" or "cmc_rank" (default: "id")
            limit: Number of results to return
            offset: 1-based start of the page
            symbol: Only return these symbols
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of cryptocurrencies
        """
        return self._get("map", {
            "listing_status": listing_status,
            "start": offset,
            "limit": limit,
            "sort": sort,
            "symbol": symbol,
            "aux": aux,
        })

    def info(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
        address: str | None = None,
        skip_invalid: bool = False,
        aux: tuple | list = ("urls", "logo", "description", "tags", "platform", "date_added", "notice"),
    ) -> ApiResponse:
        """
        Get static metadata (logo, description, urls, ...) for cryptocurrencies.

        Args:
            id: Cryptocurrency id(s)
            slug: Cryptocurrency slug(s)
            symbol: Cryptocurrency symbol(s)
            address: Contract address of a token
            skip_invalid: Skip invalid lookups instead of failing
            aux: Supplemental fields to return

        Returns:
            ApiResponse with metadata keyed by the requested identifiers
        """
        return self._get("metadata", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "address": address,
            "skip_invalid": skip_invalid,
            "aux": aux,
        })

    def listing(
        self,
        limit: int = 100,
        offset: int = 1,
        filters: dict[str, float] | None = None,
        convert: int | str | list | None = None,
        sort: str = "market_cap",
        sort_dir: str = "desc",
        cryptocurrency_type: str = "all",
        tag: str = "all",
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """
        Get a paginated list of active cryptocurrencies with latest market data.

        Args:
            limit: Number of results (default: 100)
            offset: 1-based start of the page (default: 1)
            filters: Any of LISTING_FILTERS (e.g., {"price_min": 1})
            convert: Quote currencies, as ids or symbols
            sort: Sort field (default: "market_cap")
            sort_dir: "asc" or "desc" (default: "desc")
            cryptocurrency_type: "all", "coins" or "tokens"
            tag: "all", "defi" or "filesharing"
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of cryptocurrencies

        Raises:
            ValueError: If filters holds an unknown key
        """
        filters = filters or {}
        unknown = set(filters) - set(LISTING_FILTERS)
        if unknown:
            raise ValueError(f"Unknown listing filters: {sorted(unknown)}")

        return self._get("listings", {
            "start": offset,
            "limit": limit,
            **{key: filters.get(key) for key in LISTING_FILTERS},
            **convert_params(convert),
            "sort": sort,
            "sort_dir": sort_dir,
            "cryptocurrency_type": cryptocurrency_type,
            "tag": tag,
            "aux": aux,
        })

    def listing_new(
        self,
        limit: int = 100,
        offset: int = 1,
        convert: int | str | list | None = None,
        sort_dir: str = "desc",
    ) -> ApiResponse:
        """Get a paginated list of the most recently added cryptocurrencies."""
        return self._get("listings_new", {
            "start": offset,
            "limit": limit,
            **convert_params(convert),
            "sort_dir": sort_dir,
        })

    def listing_history(
        self,
        date: date | datetime,
        limit: int = 100,
        offset: int = 1,
        convert: int | str | list | None = None,
        sort: str = "cmc_rank",
        sort_dir: str = "asc",
        cryptocurrency_type: str = "all",
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """
        Get the ranked list of all cryptocurrencies for a historical UTC date.

        Args:
            date: Day of the snapshot
            limit: Number of results (default: 100)
            offset: 1-based start of the page (default: 1)
            convert: Quote currencies, as ids or symbols
            sort: Sort field (default: "cmc_rank")
            sort_dir: "asc" or "desc" (default: "asc")
            cryptocurrency_type: "all", "coins" or "tokens"
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of cryptocurrencies
        """
        return self._get("listings_historical", {
            "date": to_unix(date),
            "start": offset,
            "limit": limit,
            **convert_params(convert),
            "sort": sort,
            "sort_dir": sort_dir,
            "cryptocurrency_type": cryptocurrency_type,
            "aux": aux,
        })

    def quotes(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
        convert: int | str | list | None = None,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get the latest market quote for one or more cryptocurrencies."""
        return self._get("quotes", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            **convert_params(convert),
            "skip_invalid": skip_invalid,
            "aux": aux,
        })

    def quotes_history(
        self,
        id: int | list[int] | None = None,
        symbol: str | list[str] | None = None,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        count: int = 10,
        interval: str = "5m",
        convert: int | str | list | None = None,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
        version: str = "v2",
    ) -> ApiResponse:
        """
        Get historical market quotes for one or more cryptocurrencies.

        Args:
            id: Cryptocurrency id(s)
            symbol: Cryptocurrency symbol(s)
            time_start: Start of the time range
            time_end: End of the time range
            count: Number of intervals to return (default: 10)
            interval: Sampling interval (default: "5m")
            convert: Quote currencies, as ids or symbols
            skip_invalid: Skip invalid lookups instead of failing
            aux: Supplemental fields to return
            version: Endpoint version, "v2" or "v3" (default: "v2")

        Returns:
            ApiResponse with historical quotes per cryptocurrency

        Raises:
            ValueError: If version is not "v2" or "v3"
        """
        if version not in QUOTES_HISTORICAL_VERSIONS:
            raise ValueError(f"Unsupported quotes history version: {version}")

        return self._get(QUOTES_HISTORICAL_VERSIONS[version], {
            "id": id,
            "symbol": symbol,
            "time_start": to_unix(time_start),
            "time_end": to_unix(time_end),
            "count": count,
            "interval": interval,
            **convert_params(convert),
            "skip_invalid": skip_invalid,
            "aux": aux,
        })

    def market_pairs(
        self,
        id: int | None = None,
        slug: str | None = None,
        symbol: str | None = None,
        limit: int = 100,
        offset: int = 1,
        sort: str = "volume_24h_strict",
        sort_dir: str = "desc",
        matched_id: int | list[int] | None = None,
        matched_symbol: str | list[str] | None = None,
        category: str = "all",
        fee_type: str = "all",
        convert: int | str | list | None = None,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get the active market pairs of a cryptocurrency or fiat currency."""
        return self._get("market_pairs", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "start": offset,
            "limit": limit,
            "sort": sort,
            "sort_dir": sort_dir,
            "matched_id": matched_id,
            "matched_symbol": matched_symbol,
            "category": category,
            "fee_type": fee_type,
            **convert_params(convert),
            "aux": aux,
        })

    def ohlcv(
        self,
        id: int | list[int] | None = None,
        symbol: str | list[str] | None = None,
        convert: int | str | list | None = None,
        skip_invalid: bool = False,
    ) -> ApiResponse:
        """Get the latest OHLCV for the current UTC day."""
        return self._get("ohlcv", {
            "id": id,
            "symbol": symbol,
            **convert_params(convert),
            "skip_invalid": skip_invalid,
        })

    def ohlcv_history(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        time_period: str = "daily",
        count: int = 10,
        interval: str = "daily",
        convert: int | str | list | None = None,
        skip_invalid: bool = False,
    ) -> ApiResponse:
        """
        Get historical OHLCV for one or more cryptocurrencies.

        Args:
            id: Cryptocurrency id(s)
            slug: Cryptocurrency slug(s)
            symbol: Cryptocurrency symbol(s)
            time_start: Start of the time range
            time_end: End of the time range
            time_period: Candle period, "daily" or "hourly" (default: "daily")
            count: Number of candles to return (default: 10)
            interval: Sampling interval (default: "daily")
            convert: Quote currencies, as ids or symbols
            skip_invalid: Skip invalid lookups instead of failing

        Returns:
            ApiResponse with a "quotes" list per cryptocurrency
        """
        return self._get("ohlcv_historical", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "time_period": time_period,
            "time_start": to_unix(time_start),
            "time_end": to_unix(time_end),
            "count": count,
            "interval": interval,
            **convert_params(convert),
            "skip_invalid": skip_invalid,
        })

    def ohlcv_history_frame(
        self,
        id: int | None = None,
        slug: str | None = None,
        symbol: str | None = None,
        currency: str | int = "USD",
        **kwargs: Any,
    ) -> pd.DataFrame:
        """
        Get historical OHLCV for a single cryptocurrency as a DataFrame.

        Args:
            id: Cryptocurrency id
            slug: Cryptocurrency slug
            symbol: Cryptocurrency symbol
            currency: Quote currency, also sent as the convert option
                (default: "USD")
            **kwargs: Other ohlcv_history() arguments (time range, count, ...)

        Returns:
            DataFrame indexed by open time with open/high/low/close/volume/
            market_cap columns
        """
        response = self.ohlcv_history(
            id=id, slug=slug, symbol=symbol, convert=currency, **kwargs
        )
        return ohlcv_frame(response.data, currency)

    def performance(
        self,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
        time_period: str | list[str] = "all_time",
        convert: int | str | list | None = None,
        skip_invalid: bool = False,
    ) -> ApiResponse:
        """Get price performance statistics (ROI, all-time high/low)."""
        return self._get("performance", {
            "id": id,
            "slug": slug,
            "symbol": symbol,
            "time_period": time_period,
            **convert_params(convert),
            "skip_invalid": skip_invalid,
        })

    def categories(
        self,
        limit: int | None = None,
        offset: int = 1,
        id: int | list[int] | None = None,
        slug: str | list[str] | None = None,
        symbol: str | list[str] | None = None,
    ) -> ApiResponse:
        """Get all coin categories, optionally those of given cryptocurrencies."""
        return self._get("categories", {
            "start": offset,
            "limit": limit,
            "id": id,
            "slug": slug,
            "symbol": symbol,
        })

    def category(
        self,
        id: str,
        limit: int = 100,
        offset: int = 1,
        convert: int | str | list | None = None,
    ) -> ApiResponse:
        """Get a single coin category with its cryptocurrency quotes."""
        return self._get("category", {
            "id": id,
            "start": offset,
            "limit": limit,
            **convert_params(convert),
        })

    def airdrops(
        self,
        status: str = "ONGOING",
        limit: int = 100,
        offset: int = 1,
        id: int | None = None,
        slug: str | None = None,
        symbol: str | None = None,
    ) -> ApiResponse:
        """Get past, present or future airdrops ("ENDED", "ONGOING", "UPCOMING")."""
        return self._get("airdrops", {
            "start": offset,
            "limit": limit,
            "status": status,
            "id": id,
            "slug": slug,
            "symbol": symbol,
        })

    def airdrop(self, id: str) -> ApiResponse:
        """Get a single airdrop by its id."""
        return self._get("airdrop", {"id": id})

    def trending(
        self,
        limit: int = 100,
        offset: int = 1,
        time_period: str = "24h",
        convert: int | str | list | None = None,
    ) -> ApiResponse:
        """Get trending cryptocurrencies, ranked by search volume."""
        return self._get("trending", {
            "start": offset,
            "limit": limit,
            "time_period": time_period,
            **convert_params(convert),
        })

    def most_visited(
        self,
        limit: int = 100,
        offset: int = 1,
        time_period: str = "24h",
        convert: int | str | list | None = None,
    ) -> ApiResponse:
        """Get the most visited cryptocurrencies, ranked by page traffic."""
        return self._get("most_visited", {
            "start": offset,
            "limit": limit,
            "time_period": time_period,
            **convert_params(convert),
        })

    def gainers_losers(
        self,
        limit: int = 100,
        offset: int = 1,
        time_period: str = "24h",
        sort: str = "percent_change_24h",
        sort_dir: str = "desc",
        convert: int | str | list | None = None,
    ) -> ApiResponse:
        """Get the biggest gainers or losers over a time period."""
        return self._get("gainers_losers", {
            "start": offset,
            "limit": limit,
            "time_period": time_period,
            "sort": sort,
            "sort_dir": sort_dir,
            **convert_params(convert),
        })
