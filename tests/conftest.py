"""
Pytest configuration and fixtures for cmc-api tests.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (actual API calls)"
    )


def pytest_addoption(parser):
    """Add command line option for integration tests."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against the CoinMarketCap sandbox",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified."""
    if config.getoption("--run-integration"):
        os.environ["RUN_INTEGRATION_TESTS"] = "1"
        return

    skip_integration = pytest.mark.skip(reason="Use --run-integration to run API tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def status_block():
    """Create a status block factory."""
    def _status(error_code=0, error_message=None, credit_count=1, notice=None):
        return {
            "timestamp": "2024-06-01T12:00:00.000Z",
            "error_code": error_code,
            "error_message": error_message,
            "elapsed": 12,
            "credit_count": credit_count,
            "notice": notice,
        }
    return _status


@pytest.fixture
def mock_response():
    """Create a mock response factory."""
    def _mock(json_data=None, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        response.text = str(json_data)
        return response
    return _mock
