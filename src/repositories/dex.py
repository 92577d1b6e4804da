"""
Decentralized exchange (DexScan) endpoints.

Networks are identified by ``network_id`` or ``network_slug``; most pair
endpoints require one of them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from api.status import ApiResponse
from utils.dates import to_unix

from .base import Repository, convert_params

# Query names of the spot pair filters accepted by DexRepository.pairs()
PAIR_FILTERS = (
    "limit",
    "scroll_id",
    "liquidity_min",
    "liquidity_max",
    "volume_24h_min",
    "volume_24h_max",
    "no_of_transactions_24h_min",
    "no_of_transactions_24h_max",
    "percent_change_24h_min",
    "percent_change_24h_max",
)


def _asset_params(prefix: str, asset: dict[str, Any] | None) -> dict[str, Any]:
    """Expand a base/quote asset selector into prefixed query parameters."""
    if not asset:
        return {}
    return {
        f"{prefix}_id": asset.get("id"),
        f"{prefix}_symbol": asset.get("symbol"),
        f"{prefix}_ucid": asset.get("ucid"),
        f"{prefix}_contract_address": asset.get("contract"),
    }


class DexRepository(Repository):
    """DEX networks, listings, pairs, quotes, trades and OHLCV."""

    group = "dex"

    def list(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sort: str = "id",
        sort_dir: str = "desc",
        aux: tuple | list = (),
    ) -> ApiResponse:
        """
        List all networks supported by DexScan.

        Args:
            limit: Number of results to return
            offset: Start of the page
            sort: "id" or "name" (default: "id")
            sort_dir: "asc" or "desc" (default: "desc")
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of networks
        """
        return self._get("map", {
            "limit": limit,
            "offset": offset,
            "sort": sort,
            "sort_dir": sort_dir,
            "aux": aux,
        })

    def metadata(
        self,
        id: int | str | list[int | str],
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get static metadata for one or more DEXes."""
        return self._get("metadata", {"id": id, "aux": aux})

    def listing(
        self,
        type: str = "all",
        limit: int | None = None,
        offset: int | None = None,
        sort: str = "volume_24h",
        sort_dir: str = "desc",
        convert: int | str | list | None = None,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """
        Get a paginated list of DEXes with the latest market data.

        Args:
            type: DEX type filter, e.g. "all", "orderbook", "swap", "aggregator"
            limit: Number of results to return
            offset: Start of the page
            sort: Sort field (default: "volume_24h")
            sort_dir: "asc" or "desc" (default: "desc")
            convert: Quote currencies, as ids or symbols
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of DEXes
        """
        return self._get("listings", {
            **convert_params(convert),
            "type": type,
            "limit": limit,
            "offset": offset,
            "sort": sort,
            "sort_dir": sort_dir,
            "aux": aux,
        })

    def _pair_request(
        self,
        name: str,
        contract: str | list[str],
        network_id: int | None,
        network_slug: str | None,
        convert: int | str | list | None,
        reverse_order: bool,
        skip_invalid: bool,
        aux: tuple | list | None,
        **extra: Any,
    ) -> ApiResponse:
        """Shared parameters of the per-pair endpoints."""
        return self._get(name, {
            "network_id": network_id,
            "network_slug": network_slug,
            **convert_params(convert),
            "contract_address": contract,
            **extra,
            "reverse_order": reverse_order,
            "skip_invalid": skip_invalid,
            "aux": aux,
        })

    def quotes(
        self,
        contract: str | list[str],
        network_id: int | None = None,
        network_slug: str | None = None,
        convert: int | str | list | None = None,
        reverse_order: bool = True,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get the latest quotes of one or more pairs by contract address."""
        return self._pair_request(
            "quotes", contract, network_id, network_slug,
            convert, reverse_order, skip_invalid, aux,
        )

    def trades(
        self,
        contract: str | list[str],
        network_id: int | None = None,
        network_slug: str | None = None,
        convert: int | str | list | None = None,
        reverse_order: bool = True,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get the latest 100 trades of one or more pairs."""
        return self._pair_request(
            "trades", contract, network_id, network_slug,
            convert, reverse_order, skip_invalid, aux,
        )

    def pairs(
        self,
        network_id: int | None = None,
        network_slug: str | None = None,
        dex_id: int | list[int] | None = None,
        dex_slug: str | list[str] | None = None,
        base_asset: dict[str, Any] | None = None,
        quote_asset: dict[str, Any] | None = None,
        filters: dict[str, Any] | None = None,
        sort: str = "volume_24h",
        sort_dir: str = "desc",
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """
        Get the latest spot pairs of a network.

        Args:
            network_id: Network id
            network_slug: Network slug
            dex_id: Only pairs of these DEX ids
            dex_slug: Only pairs of these DEX slugs
            base_asset: Base asset selector with one of "id", "symbol",
                "ucid" or "contract"
            quote_asset: Quote asset selector, same keys as base_asset
            filters: Any of PAIR_FILTERS (e.g., {"liquidity_min": 1000})
            sort: Sort field (default: "volume_24h")
            sort_dir: "asc" or "desc" (default: "desc")
            aux: Supplemental fields to return

        Returns:
            ApiResponse with a list of pairs

        Raises:
            ValueError: If filters holds an unknown key
        """
        filters = filters or {}
        unknown = set(filters) - set(PAIR_FILTERS)
        if unknown:
            raise ValueError(f"Unknown pair filters: {sorted(unknown)}")

        return self._get("pairs", {
            "network_id": network_id,
            "network_slug": network_slug,
            "dex_id": dex_id,
            "dex_slug": dex_slug,
            **_asset_params("base_asset", base_asset),
            **_asset_params("quote_asset", quote_asset),
            **{key: filters.get(key) for key in PAIR_FILTERS},
            "sort": sort,
            "sort_dir": sort_dir,
            "aux": aux,
        })

    def ohlcv(
        self,
        contract: str | list[str],
        network_id: int | None = None,
        network_slug: str | None = None,
        convert: int | str | list | None = None,
        reverse_order: bool = True,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """Get the latest OHLCV of one or more pairs."""
        return self._pair_request(
            "ohlcv", contract, network_id, network_slug,
            convert, reverse_order, skip_invalid, aux,
        )

    def ohlcv_history(
        self,
        contract: str | list[str],
        network_id: int | None = None,
        network_slug: str | None = None,
        time_start: date | datetime | None = None,
        time_end: date | datetime | None = None,
        time_period: str = "daily",
        count: int | None = None,
        interval: str = "daily",
        convert: int | str | list | None = None,
        reverse_order: bool = True,
        skip_invalid: bool = False,
        aux: tuple | list | None = None,
    ) -> ApiResponse:
        """
        Get historical OHLCV of one or more pairs.

        Args:
            contract: Pair contract address(es)
            network_id: Network id
            network_slug: Network slug
            time_start: Start of the time range
            time_end: End of the time range
            time_period: Candle period (default: "daily")
            count: Number of candles to return
            interval: Sampling interval (default: "daily")
            convert: Quote currencies, as ids or symbols
            reverse_order: Reverse the pair direction (default: True)
            skip_invalid: Skip invalid contracts instead of failing
            aux: Supplemental fields to return

        Returns:
            ApiResponse with historical OHLCV per pair
        """
        return self._pair_request(
            "ohlcv_historical", contract, network_id, network_slug,
            convert, reverse_order, skip_invalid, aux,
            time_start=to_unix(time_start),
            time_end=to_unix(time_end),
            time_period=time_period,
            count=count,
            interval=interval,
        )
