"""
Exceptions raised for CoinMarketCap error responses.

Error codes: https://pro.coinmarketcap.com/api/v1#section/Errors-and-Rate-Limits
"""

from enum import IntEnum
from typing import Any

from .status import Status


class ErrorCode(IntEnum):
    """Error codes reported in the response status block."""

    API_KEY_INVALID = 1001
    API_KEY_MISSING = 1002
    PLAN_REQUIRES_PAYMENT = 1003
    PLAN_PAYMENT_EXPIRED = 1004
    API_KEY_REQUIRED = 1005
    PLAN_NOT_AUTHORIZED = 1006
    API_KEY_DISABLED = 1007
    MINUTE_RATE_LIMIT_REACHED = 1008
    DAILY_RATE_LIMIT_REACHED = 1009
    MONTHLY_RATE_LIMIT_REACHED = 1010
    IP_RATE_LIMIT_REACHED = 1011


class CoinMarketCapError(Exception):
    """
    Base exception for CoinMarketCap API errors.

    Attributes:
        status: Status block of the failed response
        data: Unwrapped payload of the failed response (often None)
        error_code: Provider error code
        error_message: Provider error message
        credit_count: API credits consumed by the request
        elapsed: Server-side time spent, in milliseconds
        timestamp: Server timestamp of the response
        notice: Optional provider notice
    """

    def __init__(self, status: Status, data: Any = None):
        self.status = status
        self.data = data
        self.error_code = status.error_code
        self.error_message = status.error_message
        self.credit_count = status.credit_count
        self.elapsed = status.elapsed
        self.timestamp = status.timestamp
        self.notice = status.notice
        super().__init__(status.error_message or f"CoinMarketCap error {status.error_code}")


# --- Authentication / authorization ---


class ApiKeyError(CoinMarketCapError):
    """Raised when the API key is rejected."""


class InvalidApiKeyError(ApiKeyError):
    """This API Key is invalid (1001)."""


class MissingApiKeyError(ApiKeyError):
    """API key missing (1002)."""


class ApiKeyRequiredError(ApiKeyError):
    """An API Key is required for this call (1005)."""


class PlanNotAuthorizedError(ApiKeyError):
    """The subscription plan doesn't support this endpoint (1006)."""


class ApiKeyDisabledError(ApiKeyError):
    """This API Key has been disabled (1007)."""


# --- Payment / plan ---


class PlanPaymentError(CoinMarketCapError):
    """Raised when the subscription plan is not paid up."""


class PlanRequiresPaymentError(PlanPaymentError):
    """The API Key must be activated (1003)."""


class PlanPaymentExpiredError(PlanPaymentError):
    """The subscription plan has expired (1004)."""


# --- Rate limits ---


class RateLimitError(CoinMarketCapError):
    """Raised when a rate limit is exceeded. Never retried by the client."""


class MinuteRateLimitError(RateLimitError):
    """HTTP request rate limit exceeded; resets every minute (1008)."""


class DailyRateLimitError(RateLimitError):
    """Daily credit limit exceeded (1009)."""


class MonthlyRateLimitError(RateLimitError):
    """Monthly credit limit exceeded (1010)."""


class IpRateLimitError(RateLimitError):
    """IP rate limit hit (1011)."""


# --- Everything else ---


class RequestError(CoinMarketCapError):
    """Raised for unmapped error codes and malformed response envelopes."""


ERROR_CLASSES: dict[ErrorCode, type[CoinMarketCapError]] = {
    ErrorCode.API_KEY_INVALID: InvalidApiKeyError,
    ErrorCode.API_KEY_MISSING: MissingApiKeyError,
    ErrorCode.PLAN_REQUIRES_PAYMENT: PlanRequiresPaymentError,
    ErrorCode.PLAN_PAYMENT_EXPIRED: PlanPaymentExpiredError,
    ErrorCode.API_KEY_REQUIRED: ApiKeyRequiredError,
    ErrorCode.PLAN_NOT_AUTHORIZED: PlanNotAuthorizedError,
    ErrorCode.API_KEY_DISABLED: ApiKeyDisabledError,
    ErrorCode.MINUTE_RATE_LIMIT_REACHED: MinuteRateLimitError,
    ErrorCode.DAILY_RATE_LIMIT_REACHED: DailyRateLimitError,
    ErrorCode.MONTHLY_RATE_LIMIT_REACHED: MonthlyRateLimitError,
    ErrorCode.IP_RATE_LIMIT_REACHED: IpRateLimitError,
}


def error_class_for(code: int | None) -> type[CoinMarketCapError]:
    """
    Map an error code to its exception class.

    Args:
        code: Error code from the status block

    Returns:
        The mapped class, or RequestError for any other code
    """
    try:
        return ERROR_CLASSES[ErrorCode(code)]
    except ValueError:
        return RequestError


def error_for_status(status: Status, data: Any = None) -> CoinMarketCapError:
    """Build the exception matching a failed status."""
    return error_class_for(status.error_code)(status, data)
