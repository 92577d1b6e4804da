"""
Tests for the endpoint table.
"""

import pytest

from api.endpoints import CEX, COMMUNITY, CRYPTO, DEX, ENDPOINTS, METRIC, MISC, endpoint


class TestEndpointTable:
    """Tests for the structure of the table."""

    def test_groups(self):
        assert set(ENDPOINTS) == {"crypto", "dex", "cex", "metric", "community", "misc"}

    def test_paths_are_versioned(self):
        """Test that every path is absolute and versioned."""
        for group in ENDPOINTS.values():
            for path in group.values():
                assert path.startswith(("/v1/", "/v2/", "/v3/", "/v4/"))

    def test_paths_are_unique(self):
        paths = [path for group in ENDPOINTS.values() for path in group.values()]
        assert len(paths) == len(set(paths))

    def test_lookup(self):
        assert endpoint("misc", "fiat") == "/v1/fiat/map"

    def test_unknown_lookup(self):
        with pytest.raises(KeyError):
            endpoint("crypto", "nope")


class TestEndpointPaths:
    """Spot checks against the published CoinMarketCap paths."""

    @pytest.mark.parametrize(
        "table, name, path",
        [
            (CRYPTO, "map", "/v1/cryptocurrency/map"),
            (CRYPTO, "metadata", "/v2/cryptocurrency/info"),
            (CRYPTO, "quotes", "/v2/cryptocurrency/quotes/latest"),
            (CRYPTO, "quotes_historical_v3", "/v3/cryptocurrency/quotes/historical"),
            (CRYPTO, "performance", "/v2/cryptocurrency/price-performance-stats/latest"),
            (CRYPTO, "gainers_losers", "/v1/cryptocurrency/trending/gainers-losers"),
            (DEX, "map", "/v4/dex/networks/list"),
            (DEX, "pairs", "/v4/dex/spot-pairs/latest"),
            (DEX, "trades", "/v4/dex/pairs/trade/latest"),
            (CEX, "pairs", "/v1/exchange/market-pairs/latest"),
            (CEX, "assets", "/v1/exchange/assets"),
            (METRIC, "index", "/v3/index/cmc100-latest"),
            (METRIC, "fear_and_greed_historical", "/v3/fear-and-greed/historical"),
            (METRIC, "blockchain_stats", "/v1/blockchain/statistics/latest"),
            (COMMUNITY, "news", "/v1/content/latest"),
            (COMMUNITY, "trending_token", "/v1/community/trending/token"),
            (MISC, "price_conversion", "/v2/tools/price-conversion"),
            (MISC, "usage_stats", "/v1/key/info"),
        ],
    )
    def test_path(self, table, name, path):
        assert table[name] == path
