"""
Configuration constants for the cmc-api client.

cmc-api - Typed client for the CoinMarketCap Pro REST API.
"""

# =============================================================================
# CoinMarketCap Hosts
# =============================================================================

# Production host (default for every new client)
CMC_PRO_BASE_URL = "https://pro-api.coinmarketcap.com"

# Sandbox host serving non-production data for testing
CMC_SANDBOX_BASE_URL = "https://sandbox-api.coinmarketcap.com"

# Shared key published by CoinMarketCap for the sandbox host.
# Not valid against the production host.
CMC_SANDBOX_API_KEY = "b54bcf4d-1bca-4e8e-9a24-22ff2c3d462c"

# =============================================================================
# Request Configuration
# =============================================================================

# Header carrying the API key on every request
API_KEY_HEADER = "X-CMC_PRO_API_KEY"

# Seconds before an unanswered request is abandoned
REQUEST_TIMEOUT = 30

# Distribution name used for the User-Agent header
USER_AGENT_NAME = "cmc-api"

# =============================================================================
# Query Serialization
# =============================================================================

# String values treated as "not provided" and left out of the query string
OMITTED_QUERY_STRINGS = {"", "undefined", "null"}

# Separator for list-valued query parameters
LIST_SEPARATOR = ","
