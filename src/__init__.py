"""
cmc-api - Typed client for the CoinMarketCap Pro REST API.

This package provides tools to:
- Query cryptocurrency, DEX, exchange, global metric, community and tool endpoints
- Switch between the production and sandbox hosts
- Surface provider error codes as typed exceptions
- Turn historical OHLCV quotes into pandas DataFrames
"""

__app_name__ = "cmc-api"
