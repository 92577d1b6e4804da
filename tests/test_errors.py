"""
Tests for error code mapping.
"""

import pytest

from api.errors import (
    ERROR_CLASSES,
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
    error_class_for,
    error_for_status,
)
from api.status import Status


class TestErrorMapping:
    """Tests for the code to exception table."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            (1001, InvalidApiKeyError),
            (1002, MissingApiKeyError),
            (1003, PlanRequiresPaymentError),
            (1004, PlanPaymentExpiredError),
            (1005, ApiKeyRequiredError),
            (1006, PlanNotAuthorizedError),
            (1007, ApiKeyDisabledError),
            (1008, MinuteRateLimitError),
            (1009, DailyRateLimitError),
            (1010, MonthlyRateLimitError),
            (1011, IpRateLimitError),
        ],
    )
    def test_known_codes(self, code, expected):
        """Test each documented code maps to its own class."""
        assert error_class_for(code) is expected

    @pytest.mark.parametrize("code", [400, 500, 1012, 9999, None])
    def test_fallback_to_request_error(self, code):
        """Test that any other code falls back to RequestError."""
        assert error_class_for(code) is RequestError

    def test_every_code_is_mapped(self):
        """Test that the table covers the whole enum with distinct classes."""
        assert set(ERROR_CLASSES) == set(ErrorCode)
        assert len(set(ERROR_CLASSES.values())) == len(ErrorCode)

    def test_twelve_concrete_kinds(self):
        """Test that mapped classes plus the fallback form twelve kinds."""
        kinds = set(ERROR_CLASSES.values()) | {RequestError}
        assert len(kinds) == 12
        assert all(issubclass(kind, CoinMarketCapError) for kind in kinds)


class TestErrorGroups:
    """Tests for the intermediate error groups."""

    def test_api_key_group(self):
        for kind in (
            InvalidApiKeyError,
            MissingApiKeyError,
            ApiKeyRequiredError,
            PlanNotAuthorizedError,
            ApiKeyDisabledError,
        ):
            assert issubclass(kind, ApiKeyError)

    def test_payment_group(self):
        assert issubclass(PlanRequiresPaymentError, PlanPaymentError)
        assert issubclass(PlanPaymentExpiredError, PlanPaymentError)

    def test_rate_limit_group(self):
        for kind in (MinuteRateLimitError, DailyRateLimitError, MonthlyRateLimitError, IpRateLimitError):
            assert issubclass(kind, RateLimitError)

    def test_request_error_not_in_groups(self):
        assert not issubclass(RequestError, (ApiKeyError, PlanPaymentError, RateLimitError))


class TestErrorAttributes:
    """Tests for the attributes carried by errors."""

    def test_error_for_status(self):
        """Test that status fields are copied onto the error."""
        status = Status(
            timestamp="2024-06-01T12:00:00.000Z",
            error_code=1010,
            error_message="monthly limit",
            elapsed=3,
            credit_count=0,
            notice="upgrade",
        )

        error = error_for_status(status, data={"partial": True})

        assert isinstance(error, MonthlyRateLimitError)
        assert error.status is status
        assert error.data == {"partial": True}
        assert error.error_code == 1010
        assert error.error_message == "monthly limit"
        assert error.elapsed == 3
        assert error.credit_count == 0
        assert error.timestamp == "2024-06-01T12:00:00.000Z"
        assert error.notice == "upgrade"
        assert str(error) == "monthly limit"

    def test_message_fallback(self):
        """Test the message when the provider sent none."""
        error = error_for_status(Status(error_code=1234))

        assert str(error) == "CoinMarketCap error 1234"
