"""
Core of the CoinMarketCap client.

- client: query serialization and the GET pipeline
- endpoints: endpoint path table
- errors: typed exceptions per provider error code
- status: status block and envelope unwrapping
"""

from .client import Client, build_query, build_url
from .endpoints import ENDPOINTS, endpoint
from .errors import (
    ApiKeyDisabledError,
    ApiKeyError,
    ApiKeyRequiredError,
    CoinMarketCapError,
    DailyRateLimitError,
    ErrorCode,
    InvalidApiKeyError,
    IpRateLimitError,
    MinuteRateLimitError,
    MissingApiKeyError,
    MonthlyRateLimitError,
    PlanNotAuthorizedError,
    PlanPaymentError,
    PlanPaymentExpiredError,
    PlanRequiresPaymentError,
    RateLimitError,
    RequestError,
    error_for_status,
)
from .status import ApiResponse, Status, unwrap_envelope

__all__ = [
    # Client
    "Client",
    "build_query",
    "build_url",
    # Endpoints
    "ENDPOINTS",
    "endpoint",
    # Responses
    "ApiResponse",
    "Status",
    "unwrap_envelope",
    # Errors
    "ErrorCode",
    "CoinMarketCapError",
    "ApiKeyError",
    "InvalidApiKeyError",
    "MissingApiKeyError",
    "ApiKeyRequiredError",
    "PlanNotAuthorizedError",
    "ApiKeyDisabledError",
    "PlanPaymentError",
    "PlanRequiresPaymentError",
    "PlanPaymentExpiredError",
    "RateLimitError",
    "MinuteRateLimitError",
    "DailyRateLimitError",
    "MonthlyRateLimitError",
    "IpRateLimitError",
    "RequestError",
    "error_for_status",
]
