"""
CoinMarketCap endpoint paths, grouped by domain.

API Documentation: https://pro.coinmarketcap.com/api/v1
"""

# =============================================================================
# Cryptocurrency
# =============================================================================

CRYPTO = {
    "map": "/v1/cryptocurrency/map",
    "metadata": "/v2/cryptocurrency/info",
    "listings": "/v1/cryptocurrency/listings/latest",
    "listings_new": "/v1/cryptocurrency/listings/new",
    "listings_historical": "/v1/cryptocurrency/listings/historical",
    "quotes": "/v2/cryptocurrency/quotes/latest",
    "quotes_historical": "/v2/cryptocurrency/quotes/historical",
    "quotes_historical_v3": "/v3/cryptocurrency/quotes/historical",
    "market_pairs": "/v2/cryptocurrency/market-pairs/latest",
    "ohlcv": "/v2/cryptocurrency/ohlcv/latest",
    "ohlcv_historical": "/v2/cryptocurrency/ohlcv/historical",
    "performance": "/v2/cryptocurrency/price-performance-stats/latest",
    "categories": "/v1/cryptocurrency/categories",
    "category": "/v1/cryptocurrency/category",
    "airdrops": "/v1/cryptocurrency/airdrops",
    "airdrop": "/v1/cryptocurrency/airdrop",
    "trending": "/v1/cryptocurrency/trending/latest",
    "most_visited": "/v1/cryptocurrency/trending/most-visited",
    "gainers_losers": "/v1/cryptocurrency/trending/gainers-losers",
}

# =============================================================================
# Decentralized Exchanges (DexScan)
# =============================================================================

DEX = {
    "map": "/v4/dex/networks/list",
    "listings": "/v4/dex/listings/quotes",
    "metadata": "/v4/dex/listings/info",
    "pairs": "/v4/dex/spot-pairs/latest",
    "quotes": "/v4/dex/pairs/quotes/latest",
    "ohlcv": "/v4/dex/pairs/ohlcv/latest",
    "ohlcv_historical": "/v4/dex/pairs/ohlcv/historical",
    "trades": "/v4/dex/pairs/trade/latest",
}

# =============================================================================
# Centralized Exchanges
# =============================================================================

CEX = {
    "map": "/v1/exchange/map",
    "metadata": "/v1/exchange/info",
    "listings": "/v1/exchange/listings/latest",
    "quotes": "/v1/exchange/quotes/latest",
    "quotes_historical": "/v1/exchange/quotes/historical",
    "pairs": "/v1/exchange/market-pairs/latest",
    "assets": "/v1/exchange/assets",
}

# =============================================================================
# Global Metrics, CMC100 Index, Fear and Greed, Blockchain
# =============================================================================

METRIC = {
    "quotes": "/v1/global-metrics/quotes/latest",
    "quotes_historical": "/v1/global-metrics/quotes/historical",
    "index": "/v3/index/cmc100-latest",
    "index_historical": "/v3/index/cmc100-historical",
    "fear_and_greed": "/v3/fear-and-greed/latest",
    "fear_and_greed_historical": "/v3/fear-and-greed/historical",
    "blockchain_stats": "/v1/blockchain/statistics/latest",
}

# =============================================================================
# Community Content and Trends
# =============================================================================

COMMUNITY = {
    "news": "/v1/content/latest",
    "top": "/v1/content/posts/top",
    "latest": "/v1/content/posts/latest",
    "comments": "/v1/content/posts/comments",
    "trending_topic": "/v1/community/trending/topic",
    "trending_token": "/v1/community/trending/token",
}

# =============================================================================
# Tools, Fiat and Key
# =============================================================================

MISC = {
    "fiat": "/v1/fiat/map",
    "price_conversion": "/v2/tools/price-conversion",
    "usage_stats": "/v1/key/info",
}

ENDPOINTS = {
    "crypto": CRYPTO,
    "dex": DEX,
    "cex": CEX,
    "metric": METRIC,
    "community": COMMUNITY,
    "misc": MISC,
}


def endpoint(group: str, name: str) -> str:
    """
    Look up an endpoint path.

    Args:
        group: Domain group (e.g., "crypto", "misc")
        name: Logical operation name within the group

    Returns:
        URL path starting with "/"

    Raises:
        KeyError: If the group or name is unknown
    """
    return ENDPOINTS[group][name]
