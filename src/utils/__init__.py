"""
Utility modules for cmc-api.
"""

from .dates import from_unix, to_unix
from .frames import ohlcv_frame
from .logging import get_logger, setup_logging

__all__ = [
    "from_unix",
    "get_logger",
    "ohlcv_frame",
    "setup_logging",
    "to_unix",
]
