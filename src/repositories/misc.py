"""
Tools, fiat and API key endpoints.
"""

from datetime import date, datetime

from api.status import ApiResponse
from utils.dates import to_unix

from .base import Repository, convert_params


class MiscRepository(Repository):
    """
    Miscellaneous CoinMarketCap endpoints.

    Usage:
        cmc = CoinMarketCapApi(api_key)
        usage = cmc.misc.usage().data["usage"]
        fiats = cmc.misc.fiats(limit=10).data
    """

    group = "misc"

    def usage(self) -> ApiResponse:
        """
        Get API key details and usage statistics.

        No API credit cost.

        Returns:
            ApiResponse with "plan" and "usage" details
        """
        return self._get("usage_stats")

    def fiats(
        self,
        limit: int | None = None,
        offset: int = 1,
        sort: str = "id",
        include_metals: bool = False,
    ) -> ApiResponse:
        """
        Map all supported fiat currencies to CoinMarketCap ids.

        Args:
            limit: Number of results to return
            offset: 1-based start of the page (default: 1)
            sort: "id" or "name" (default: "id")
            include_metals: Include precious metals (default: False)

        Returns:
            ApiResponse with a list of fiat currencies
        """
        return self._get("fiat", {
            "limit": limit,
            "start": offset,
            "sort": sort,
            "include_metals": include_metals,
        })

    def price_convert(
        self,
        amount: float,
        id: int | None = None,
        symbol: str | None = None,
        convert: int | str | list | None = None,
        time: date | datetime | None = None,
    ) -> ApiResponse:
        """
        Convert an amount of one currency into one or more others.

        Exactly one of ``id`` or ``symbol`` identifies the base currency.

        Args:
            amount: Amount of the base currency
            id: CoinMarketCap id of the base currency
            symbol: Symbol of the base currency
            convert: Target currencies, as ids or symbols
            time: Historical time for the conversion rate

        Returns:
            ApiResponse with the converted quote per target currency

        Raises:
            ValueError: If neither or both of id and symbol are given
        """
        if (id is None) == (symbol is None):
            raise ValueError("Exactly one of id or symbol is required")

        return self._get("price_conversion", {
            **convert_params(convert),
            "id": id,
            "symbol": symbol,
            "time": to_unix(time),
            "amount": amount,
        })
