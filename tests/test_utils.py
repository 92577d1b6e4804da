"""
Tests for date, DataFrame and logging helpers.
"""

import io
import logging
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import pandas as pd
import pytest

from api.client import Client
from utils.dates import from_unix, to_unix
from utils.frames import OHLCV_COLUMNS, ohlcv_frame
from utils.logging import get_logger, setup_logging


def make_quote(day, close, currency="USD"):
    """Create one OHLCV historical quote entry."""
    return {
        "time_open": f"2024-01-{day:02d}T00:00:00.000Z",
        "time_close": f"2024-01-{day:02d}T23:59:59.999Z",
        "quote": {
            currency: {
                "open": close - 1,
                "high": close + 1,
                "low": close - 2,
                "close": close,
                "volume": 1000,
                "market_cap": close * 100,
                "timestamp": f"2024-01-{day:02d}T23:59:59.999Z",
            }
        },
    }


class TestDates:
    """Tests for epoch conversion."""

    def test_none(self):
        assert to_unix(None) is None
        assert from_unix(None) is None

    def test_int_passthrough(self):
        assert to_unix(1704067200) == 1704067200

    def test_date_is_midnight_utc(self):
        assert to_unix(date(2024, 1, 1)) == 1704067200

    def test_aware_datetime(self):
        value = datetime(2024, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert to_unix(value) == 1704067200

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_unix(True)

    def test_from_unix(self):
        value = from_unix(1704067200)

        assert value == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert value.tzinfo is not None


class TestOhlcvFrame:
    """Tests for the OHLCV DataFrame conversion."""

    def test_asset_record(self):
        data = {"id": 1, "symbol": "BTC", "quotes": [make_quote(2, 20), make_quote(1, 10)]}

        df = ohlcv_frame(data)

        assert list(df.columns) == OHLCV_COLUMNS + ["time_close"]
        assert df.index.name == "date"
        assert df.index[0] == pd.Timestamp("2024-01-01", tz="UTC")
        assert df["close"].tolist() == [10, 20]

    def test_keyed_by_symbol(self):
        data = {"BTC": [{"id": 1, "quotes": [make_quote(1, 10)]}]}

        df = ohlcv_frame(data)

        assert len(df) == 1

    def test_bare_list(self):
        df = ohlcv_frame([make_quote(1, 10), make_quote(2, 11)])

        assert len(df) == 2

    def test_other_currency(self):
        data = {"quotes": [make_quote(1, 10, currency="EUR")]}

        assert ohlcv_frame(data, currency="EUR")["close"].iloc[0] == 10
        assert ohlcv_frame(data).empty

    @pytest.mark.parametrize("data", [None, {}, [], {"quotes": []}])
    def test_empty(self, data):
        df = ohlcv_frame(data)

        assert df.empty
        assert list(df.columns) == OHLCV_COLUMNS + ["time_close"]

    def test_null_quote_skipped(self):
        """Test that entries with a null quote are skipped."""
        data = {"quotes": [{"time_open": "2024-01-01T00:00:00.000Z", "quote": None}, make_quote(2, 20)]}

        df = ohlcv_frame(data)

        assert df["close"].tolist() == [20]

    def test_currency_by_id(self):
        """Test that a numeric convert id matches the string keys of the payload."""
        data = {"quotes": [make_quote(1, 10, currency="2781")]}

        df = ohlcv_frame(data, currency=2781)

        assert df["close"].tolist() == [10]


class TestLogging:
    """Tests for the logging helpers."""

    @pytest.fixture
    def root_logger(self):
        """Yield the library logger and restore it afterwards."""
        logger = logging.getLogger("cmc_api")
        handlers, level = list(logger.handlers), logger.level
        yield logger
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_namespace(self):
        assert get_logger("api.client").name == "cmc_api.api.client"
        assert get_logger("cmc_api.repositories").name == "cmc_api.repositories"

    def test_null_handler_by_default(self):
        handlers = logging.getLogger("cmc_api").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_setup_replaces_console_handler(self, root_logger):
        count = len(root_logger.handlers)

        assert setup_logging(level=logging.WARNING) is root_logger
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == count + 1

        setup_logging(verbose=True)
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == count + 1

    def test_client_logs_requests(self, root_logger, mock_response, status_block):
        """Test that verbose logging shows the request URL."""
        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)
        client = Client()

        with patch.object(client.session, "get") as mock_get:
            mock_get.return_value = mock_response({"data": [], "status": status_block()})
            client.send("/v1/fiat/map", {"limit": 1})

        output = stream.getvalue()
        assert "GET https://pro-api.coinmarketcap.com/v1/fiat/map?limit=1" in output
        assert "cmc_api.api.client" in output
